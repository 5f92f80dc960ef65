"""Tests for problem corpus loading."""
from pathlib import Path

import pytest

from app.errors import CorpusError
from utils.file_handler import DEFAULT_PROBLEMS, load_corpus, load_default_corpus, split_blocks


def test_split_blocks_on_blank_lines():
    text = "first problem\nsecond line\r\n\r\n\n  second problem  \n\n\n"
    assert split_blocks(text) == ["first problem\nsecond line", "second problem"]


def test_load_corpus(tmp_path: Path):
    path = tmp_path / "problems.txt"
    path.write_text("one\n\ntwo\n", encoding="utf-8")
    assert load_corpus(path) == ["one", "two"]


def test_empty_file_is_an_error(tmp_path: Path):
    path = tmp_path / "problems.txt"
    path.write_text("\n\n  \n", encoding="utf-8")
    with pytest.raises(CorpusError):
        load_corpus(path)


def test_missing_file_is_an_error(tmp_path: Path):
    with pytest.raises(CorpusError):
        load_corpus(tmp_path / "missing.txt")


def test_default_corpus_falls_back_to_builtin(tmp_path: Path):
    assert load_default_corpus(tmp_path / "missing.txt") == DEFAULT_PROBLEMS


def test_bundled_problems_load():
    path = Path(__file__).resolve().parent.parent / "assets" / "texts" / "problems.txt"
    assert len(load_corpus(path)) == 3
