"""Tests for settings loading."""
import json
from pathlib import Path

from app.settings import Settings, load_settings


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_settings(tmp_path / "nope.json") == Settings()


def test_overrides_are_applied(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"nominal_seconds": 300, "tolerance": 80}), encoding="utf-8")
    s = load_settings(path)
    assert s.nominal_seconds == 300
    assert s.tolerance == 80
    assert s.corpus_path == Settings().corpus_path


def test_invalid_values_fall_back_to_defaults(tmp_path: Path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"tolerance": -5}), encoding="utf-8")
    with caplog.at_level("WARNING"):
        assert load_settings(path) == Settings()
    assert "tolerance must be non-negative" in caplog.text


def test_unknown_keys_fall_back_to_defaults(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"colour": "red"}), encoding="utf-8")
    assert load_settings(path) == Settings()


def test_malformed_json_falls_back(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == Settings()
