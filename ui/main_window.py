# ui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QFileDialog, QMessageBox, QLabel, QPlainTextEdit, QPushButton
)
from PySide6.QtCore import Qt, QEvent, QTimer
import logging

from app.settings import load_settings
from app.state import Session, SessionResult, SessionState, format_time
from core.chrono import QtTickScheduler
from core.threads import CorpusLoadWorker, Workers
from ui.grades_dialog import GradesDialog
from ui.session_summary import SessionSummary
from utils.file_handler import load_default_corpus

logger = logging.getLogger(__name__)

APP_TITLE = "Typing Exam"
IDLE_PROMPT = "Press Start (Space) to show a problem."


class MainWindow(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(1100, 760)

        self.settings = settings or load_settings()
        self.corpus = load_default_corpus(self.settings.corpus_path)
        self.session = Session(
            scheduler=QtTickScheduler(self),
            nominal_seconds=self.settings.nominal_seconds,
            tolerance=self.settings.tolerance,
        )
        self.session.on_tick = self._on_tick
        self.session.on_finished = self._on_finished

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 24, 16, 16)
        root_v.setSpacing(16)
        self._build_top_bar(root_v)

        stats = QHBoxLayout()
        self.lblTimer = QLabel(format_time(self.settings.nominal_seconds), self)
        self.lblTimer.setObjectName("lblTimer")
        self.lblTimer.setStyleSheet("font-size: 28px; font-weight: bold;")
        self.lblChars = QLabel("Characters: 0", self)
        self.lblChars.setObjectName("lblChars")
        stats.addWidget(self.lblTimer)
        stats.addStretch(1)
        stats.addWidget(self.lblChars)
        root_v.addLayout(stats)

        self.problem = QPlainTextEdit(self)
        self.problem.setReadOnly(True)
        self.problem.setFocusPolicy(Qt.NoFocus)
        self.problem.setPlainText(IDLE_PROMPT)
        root_v.addWidget(self.problem, 1)

        self.input = QPlainTextEdit(self)
        self.input.setEnabled(False)
        self.input.textChanged.connect(self._on_text_changed)
        self.input.installEventFilter(self)
        root_v.addWidget(self.input, 1)

        self.setCentralWidget(root)
        self._sync_controls()

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 10, 14, 10)
        h.setSpacing(10)

        btn_grades = QPushButton("Grade criteria…", bar)
        btn_grades.clicked.connect(self._open_grades)
        btn_load = QPushButton("Load problems…", bar)
        btn_load.clicked.connect(self._on_load)
        for button in (btn_grades, btn_load):
            button.setObjectName("TopBtn")
            button.setFocusPolicy(Qt.NoFocus)
            h.addWidget(button)

        h.addStretch(1)

        self.btnStart = QPushButton("Start (Space)", bar)
        self.btnFinish = QPushButton("Finish (Shift+Space)", bar)
        self.btnReset = QPushButton("Reset (Esc)", bar)
        for button, handler in [
            (self.btnStart, self._on_start),
            (self.btnFinish, self._on_finish),
            (self.btnReset, self._on_reset),
        ]:
            button.clicked.connect(handler)
            button.setObjectName("TopBtn")
            button.setFocusPolicy(Qt.NoFocus)
            h.addWidget(button)

        parent_layout.addWidget(bar)

    def _sync_controls(self):
        running = self.session.is_running
        self.btnStart.setEnabled(not running)
        self.btnFinish.setEnabled(running)
        self.input.setEnabled(running)

    # ---------------- Session / Controls ----------------
    def _on_start(self):
        if not self.btnStart.isEnabled():
            return
        if self.session.state is SessionState.FINISHED:
            self.session.reset()
        self.session.start(self.corpus)
        self.problem.setPlainText(self.session.reference)
        self.input.blockSignals(True)
        self.input.clear()
        self.input.blockSignals(False)
        self.lblChars.setText("Characters: 0")
        self.lblTimer.setText(format_time(self.session.remaining_seconds))
        self._sync_controls()
        self.setWindowTitle(APP_TITLE)
        self.input.setFocus()

    def _on_finish(self):
        if not self.session.is_running:
            return
        self.session.finish()

    def _on_reset(self):
        self.session.reset()
        self.input.blockSignals(True)
        self.input.clear()
        self.input.blockSignals(False)
        self.problem.setPlainText(IDLE_PROMPT)
        self.lblChars.setText("Characters: 0")
        self.lblTimer.setText(format_time(self.session.remaining_seconds))
        self._sync_controls()
        self.setWindowTitle(APP_TITLE)

    def _on_text_changed(self):
        text = self.input.toPlainText()
        self.lblChars.setText(f"Characters: {len(text)}")
        if self.session.is_running:
            self.session.update_input(text)

    def _on_tick(self, remaining: int):
        self.lblTimer.setText(format_time(remaining))

    def _on_finished(self, result: SessionResult):
        self._sync_controls()
        # open the dialog once the tick/click handler has returned
        QTimer.singleShot(0, lambda: self._show_result(result))

    def _show_result(self, result: SessionResult):
        self.setWindowTitle(f"{APP_TITLE} — {result.grade.grade_label}")
        SessionSummary(result, self).exec()

    def _open_grades(self):
        GradesDialog(self.settings.nominal_seconds // 60, self).exec()

    # ---------------- Shortcuts ----------------
    def _handle_shortcut(self, ev) -> bool:
        key = ev.key()
        if key == Qt.Key_Escape:
            self._on_reset()
            return True
        if key == Qt.Key_Space and ev.modifiers() & Qt.ShiftModifier:
            if self.btnFinish.isEnabled():
                self._on_finish()
                return True
            return False
        if key == Qt.Key_Space and self.btnStart.isEnabled():
            self._on_start()
            return True
        return False

    def keyPressEvent(self, ev):
        if not self._handle_shortcut(ev):
            super().keyPressEvent(ev)

    def eventFilter(self, obj, ev):
        if obj is self.input and ev.type() == QEvent.KeyPress:
            return self._handle_shortcut(ev)
        return super().eventFilter(obj, ev)

    # ---------------- Problem Loading ----------------
    def _on_load(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open problems", "", "Text (*.txt)")
        if not path:
            return
        worker = CorpusLoadWorker(path)
        worker.signals.loaded.connect(self._on_corpus_loaded)
        worker.signals.failed.connect(self._on_load_failed)
        Workers.pool.start(worker)

    def _on_corpus_loaded(self, problems):
        self.corpus = list(problems)
        logger.info("Corpus replaced: %d problems", len(self.corpus))

    def _on_load_failed(self, msg):
        logger.warning("Problem load failed: %s", msg)
        QMessageBox.warning(self, "Load problems", msg)
