"""Smoke tests for the main window wiring."""
from pathlib import Path

import pytest
from PySide6.QtCore import Qt

from app.settings import Settings
from app.state import SessionState
from ui.main_window import APP_TITLE, MainWindow
from ui.session_summary import SessionSummary


@pytest.fixture
def window(qtbot, tmp_path: Path, monkeypatch):
    corpus = tmp_path / "problems.txt"
    corpus.write_text("ABCDE\n", encoding="utf-8")
    shown = []
    # record result dialogs instead of running them modally
    monkeypatch.setattr(SessionSummary, "exec", lambda self: shown.append(self) or 0)
    win = MainWindow(Settings(nominal_seconds=600, corpus_path=str(corpus)))
    qtbot.addWidget(win)
    win.shown_dialogs = shown
    return win


def test_start_type_finish(qtbot, window):
    assert not window.input.isEnabled()
    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    assert window.session.state is SessionState.RUNNING
    assert window.problem.toPlainText() == "ABCDE"
    assert window.input.isEnabled()

    window.input.setPlainText("ACD")
    assert window.session.produced_text == "ACD"
    assert window.lblChars.text() == "Characters: 3"

    qtbot.mouseClick(window.btnFinish, Qt.LeftButton)
    assert window.session.state is SessionState.FINISHED
    assert not window.input.isEnabled()
    qtbot.waitUntil(lambda: len(window.shown_dialogs) == 1, timeout=1000)
    assert window.shown_dialogs[0].session_result.alignment.edit_distance == 1


def test_reset_returns_to_idle(qtbot, window):
    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    window.input.setPlainText("AB")
    qtbot.mouseClick(window.btnReset, Qt.LeftButton)
    assert window.session.state is SessionState.IDLE
    assert window.input.toPlainText() == ""
    assert window.lblTimer.text() == "10:00"
    assert window.btnStart.isEnabled()


def test_title_shows_grade_until_next_exam(qtbot, window):
    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    qtbot.mouseClick(window.btnFinish, Qt.LeftButton)
    qtbot.waitUntil(lambda: len(window.shown_dialogs) == 1, timeout=1000)
    assert window.windowTitle() != APP_TITLE

    qtbot.mouseClick(window.btnReset, Qt.LeftButton)
    assert window.windowTitle() == APP_TITLE


def test_restart_after_finish_restores_title(qtbot, window):
    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    qtbot.mouseClick(window.btnFinish, Qt.LeftButton)
    qtbot.waitUntil(lambda: len(window.shown_dialogs) == 1, timeout=1000)

    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    assert window.session.state is SessionState.RUNNING
    assert window.windowTitle() == APP_TITLE


def test_space_shortcut_starts(qtbot, window):
    window.show()
    qtbot.waitExposed(window)
    qtbot.keyClick(window, Qt.Key_Space)
    assert window.session.state is SessionState.RUNNING
    assert window.input.isEnabled()


def test_space_types_normally_while_running(qtbot, window):
    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    qtbot.keyClicks(window.input, "A C")
    assert window.session.produced_text == "A C"


def test_escape_shortcut_resets(qtbot, window):
    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    qtbot.keyClick(window.input, Qt.Key_Escape)
    assert window.session.state is SessionState.IDLE


def test_shift_space_finishes(qtbot, window):
    qtbot.mouseClick(window.btnStart, Qt.LeftButton)
    qtbot.keyClick(window.input, Qt.Key_Space, Qt.ShiftModifier)
    assert window.session.state is SessionState.FINISHED
