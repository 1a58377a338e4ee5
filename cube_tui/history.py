"""
Solve history persistence (JSON)
"""

import json
import logging
import os
from pathlib import Path

from .solves import HistoryLoadError

logger = logging.getLogger(__name__)


class HistoryWriteError(Exception):
    """Raised when solve history cannot be written"""


def load_history(path: Path) -> list:
    """Load raw solve entries from the JSON history file"""
    if not path.exists():
        logger.info("No history at %s, starting fresh", path)
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            entries = json.load(f)
    except (ValueError, RecursionError, OSError) as exc:
        raise HistoryLoadError(f"cannot read {path}: {exc}") from exc

    if not isinstance(entries, list):
        raise HistoryLoadError(f"{path} does not contain a list of solves")
    return entries


def save_history(path: Path, entries: list):
    """Save solve entries to the JSON history file"""
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(entries, f, indent=2)
        os.replace(tmp_path, path)
    except OSError as exc:
        raise HistoryWriteError(f"cannot write {path}: {exc}") from exc

    logger.info("Saved %d solves to %s", len(entries), path)
