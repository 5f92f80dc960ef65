import os

import pytest

# Qt widgets/timers under test need no display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeHandle:
    def __init__(self, callback, interval_ms):
        self.callback = callback
        self.interval_ms = interval_ms
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records scheduled ticks instead of running a real timer."""

    def __init__(self):
        self.handles = []

    def __call__(self, callback, interval_ms):
        handle = FakeHandle(callback, interval_ms)
        self.handles.append(handle)
        return handle

    @property
    def last(self):
        return self.handles[-1]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def first_choice():
    """Deterministic corpus selection."""
    return lambda corpus: corpus[0]
