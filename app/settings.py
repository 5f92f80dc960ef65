# app/settings.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any
import json
import logging

from services.alignment import DEFAULT_TOLERANCE
from services.pace import NOMINAL_SECONDS

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("settings.json")


@dataclass
class Settings:
    nominal_seconds: int = NOMINAL_SECONDS
    tolerance: int = DEFAULT_TOLERANCE
    corpus_path: str = "assets/texts/problems.txt"


# -------- helpers --------
def _settings_from_dict(d: Dict[str, Any]) -> Settings:
    known = set(asdict(Settings()).keys())
    unknown = set(d.keys()) - known
    if unknown:
        raise ValueError(f"Unknown settings keys: {', '.join(sorted(unknown))}")

    s = Settings()
    if "nominal_seconds" in d:
        secs = int(d["nominal_seconds"])
        if secs <= 0:
            raise ValueError("nominal_seconds must be positive")
        s.nominal_seconds = secs
    if "tolerance" in d:
        tol = int(d["tolerance"])
        if tol < 0:
            raise ValueError("tolerance must be non-negative")
        s.tolerance = tol
    if "corpus_path" in d:
        s.corpus_path = str(d["corpus_path"])
    return s


# -------- public API --------
def load_settings(path: Path = SETTINGS_FILE) -> Settings:
    """Load settings.json (if present); invalid files fall back to defaults."""
    path = Path(path)
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("settings must be a JSON object")
        return _settings_from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Ignoring %s: %s", path, e)
        return Settings()
