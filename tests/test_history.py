"""Tests for JSON solve history persistence."""

import json

import pytest

from cube_tui.history import HistoryWriteError, load_history, save_history
from cube_tui.solves import HistoryLoadError


def test_missing_file_is_empty_history(tmp_path) -> None:
    assert load_history(tmp_path / "times.json") == []


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "nested" / "dir" / "times.json"
    entries = [{"time": 12.5, "date": "2024-01-02", "hour": "10:11:12"}]
    save_history(path, entries)
    assert load_history(path) == entries
    assert not (path.parent / "times.json.tmp").exists()


def test_saved_file_is_indented_json(tmp_path) -> None:
    path = tmp_path / "times.json"
    save_history(path, [{"time": 1.0}])
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == [{"time": 1.0}]
    assert "\n  " in text


def test_invalid_json_raises(tmp_path) -> None:
    path = tmp_path / "times.json"
    path.write_text("[{\"time\": 1.0", encoding="utf-8")
    with pytest.raises(HistoryLoadError):
        load_history(path)


def test_non_list_document_raises(tmp_path) -> None:
    path = tmp_path / "times.json"
    path.write_text(json.dumps({"time": 1.0}), encoding="utf-8")
    with pytest.raises(HistoryLoadError):
        load_history(path)


def test_write_failure_raises(tmp_path) -> None:
    target = tmp_path / "times.json"
    target.mkdir()
    with pytest.raises(HistoryWriteError):
        save_history(target, [{"time": 1.0}])


def test_deeply_nested_document_raises(tmp_path) -> None:
    path = tmp_path / "times.json"
    path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    with pytest.raises(HistoryLoadError):
        load_history(path)
