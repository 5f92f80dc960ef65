# utils/file_handler.py
from pathlib import Path
from typing import List
import logging

from app.errors import CorpusError

logger = logging.getLogger(__name__)

DEFAULT_PROBLEMS: List[str] = [
    (
        "情報処理技術の進歩により、文書作成の効率は大きく向上した。"
        "しかし、正確に速く入力する力は今も変わらず求められている。"
        "日々の練習を積み重ね、確実な技能を身につけよう。"
    ),
    (
        "The quick brown fox jumps over the lazy dog. "
        "Typing accurately matters more than typing fast: every error costs "
        "several characters of credit at the higher grades."
    ),
]


def split_blocks(text: str) -> List[str]:
    """Problems are separated by blank lines."""
    text = text.replace("\r\n", "\n").replace("\r", "\n").strip()
    return [b.strip() for b in text.split("\n\n") if b.strip()]


def load_corpus(path) -> List[str]:
    p = Path(path)
    try:
        txt = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"Cannot read {p}: {e}") from e
    blocks = split_blocks(txt)
    if not blocks:
        raise CorpusError(f"No problems found in {p}")
    logger.info("Loaded %d problems from %s", len(blocks), p)
    return blocks


def load_default_corpus(path) -> List[str]:
    try:
        return load_corpus(path)
    except CorpusError as e:
        logger.warning("%s; using built-in problems", e)
        return list(DEFAULT_PROBLEMS)
