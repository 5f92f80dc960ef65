# app/state.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence
import logging
import random
import threading

from app.errors import InvalidState
from services.alignment import AlignmentResult, DEFAULT_TOLERANCE
from services.grading import GradeResult, grade_session
from services.pace import NOMINAL_SECONDS

logger = logging.getLogger(__name__)

TICK_MS = 1000


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class SessionResult:
    grade: GradeResult
    alignment: AlignmentResult
    elapsed_seconds: int
    nominal_seconds: int


def format_time(seconds: int) -> str:
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class Session:
    """
    One timed exam. Idle -> Running -> Finished -> (reset) -> Idle.

    ``scheduler(callback, interval_ms)`` must return a handle with ``cancel()``;
    the session asks for a 1 s tick on start and releases it on finish/reset.
    Without a scheduler the host calls ``tick()`` itself.
    """

    def __init__(
        self,
        scheduler: Optional[Callable] = None,
        nominal_seconds: int = NOMINAL_SECONDS,
        tolerance: int = DEFAULT_TOLERANCE,
        chooser: Callable[[Sequence[str]], str] = random.choice,
    ):
        self._scheduler = scheduler
        self.nominal_seconds = nominal_seconds
        self.tolerance = tolerance
        self._chooser = chooser
        self._lock = threading.RLock()
        self._handle = None

        self.on_tick: Optional[Callable[[int], None]] = None
        self.on_finished: Optional[Callable[[SessionResult], None]] = None

        self._state = SessionState.IDLE
        self._reference: Optional[str] = None
        self._produced: Optional[str] = None
        self._remaining = nominal_seconds
        self._result: Optional[SessionResult] = None

    # ---------------- read-only view ----------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def reference(self) -> Optional[str]:
        return self._reference

    @property
    def produced_text(self) -> Optional[str]:
        return self._produced

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def elapsed_seconds(self) -> int:
        return self.nominal_seconds - self._remaining

    @property
    def result(self) -> Optional[SessionResult]:
        return self._result

    @property
    def is_running(self) -> bool:
        return self._state is SessionState.RUNNING

    # ---------------- transitions ----------------
    def start(self, corpus: Sequence[str]) -> None:
        with self._lock:
            if self._state is not SessionState.IDLE:
                raise InvalidState("start", self._state)
            if not corpus:
                raise ValueError("corpus must not be empty")

            self._reference = self._chooser(corpus)
            self._produced = ""
            self._remaining = self.nominal_seconds
            self._result = None
            self._state = SessionState.RUNNING
            if self._scheduler is not None:
                self._handle = self._scheduler(self.tick, TICK_MS)
            logger.info("Session started (%d chars reference, %d s)",
                        len(self._reference), self.nominal_seconds)

    def tick(self) -> Optional[SessionResult]:
        with self._lock:
            if self._state is not SessionState.RUNNING:
                raise InvalidState("tick", self._state)
            self._remaining -= 1
            logger.debug("tick: %d s remaining", self._remaining)
            if self.on_tick is not None:
                self.on_tick(self._remaining)
            if self._remaining <= 0:
                self._remaining = 0
                return self.finish()
            return None

    def update_input(self, text: str) -> None:
        with self._lock:
            if self._state is not SessionState.RUNNING:
                raise InvalidState("update_input", self._state)
            self._produced = text

    def finish(self) -> SessionResult:
        with self._lock:
            if self._state is SessionState.FINISHED:
                return self._result
            if self._state is not SessionState.RUNNING:
                raise InvalidState("finish", self._state)

            self._cancel_tick()
            elapsed = self.elapsed_seconds
            grade, alignment = grade_session(
                self._produced or "",
                self._reference or "",
                elapsed,
                self.nominal_seconds,
                self.tolerance,
            )
            self._result = SessionResult(
                grade=grade,
                alignment=alignment,
                elapsed_seconds=elapsed,
                nominal_seconds=self.nominal_seconds,
            )
            self._state = SessionState.FINISHED
            logger.info("Session finished after %s: %d chars, %d errors -> %s (%d)",
                        format_time(elapsed), grade.raw_char_count, grade.raw_error_count,
                        grade.grade_label, grade.net_score)

        if self.on_finished is not None:
            self.on_finished(self._result)
        return self._result

    def reset(self) -> None:
        with self._lock:
            self._cancel_tick()
            self._reference = None
            self._produced = None
            self._result = None
            self._remaining = self.nominal_seconds
            self._state = SessionState.IDLE
            logger.info("Session reset")

    def _cancel_tick(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
