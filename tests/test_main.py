"""Tests for the command-line entry point (no terminal is started)."""

from cube_tui import main as main_module
from cube_tui.config import ConfigError


def test_config_error_exits_nonzero(monkeypatch, capsys) -> None:
    def fail():
        raise ConfigError("cannot resolve history location: no home")

    monkeypatch.setattr(main_module, "resolve_history_path", fail)
    assert main_module.main([]) == 1
    assert "no home" in capsys.readouterr().err


def test_clean_quit_exits_zero(monkeypatch, tmp_path) -> None:
    def fake_wrapper(func, session):
        session.handle_key(ord('q'))

    monkeypatch.setattr(main_module.curses, "wrapper", fake_wrapper)
    history = tmp_path / "times.json"
    assert main_module.main(["--history", str(history)]) == 0
    assert history.exists()
    assert (tmp_path / "cube-tui.log").exists()


def test_failed_save_on_quit_exits_nonzero(monkeypatch, tmp_path, capsys) -> None:
    def fake_wrapper(func, session):
        session.handle_key(ord('q'))

    monkeypatch.setattr(main_module.curses, "wrapper", fake_wrapper)
    history = tmp_path / "times.json"
    history.mkdir()
    assert main_module.main(["--history", str(history)]) == 1
    assert "History not saved" in capsys.readouterr().err
