# core/threads.py
from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from app.errors import CorpusError
from utils.file_handler import load_corpus


class CorpusLoadWorkerSignals(QObject):
    loaded = Signal(list)
    failed = Signal(str)


class CorpusLoadWorker(QRunnable):
    def __init__(self, path: str):
        super().__init__()
        self.path = path
        self.signals = CorpusLoadWorkerSignals()

    def run(self):
        try:
            problems = load_corpus(self.path)
        except CorpusError as e:
            self.signals.failed.emit(str(e))
            return
        self.signals.loaded.emit(problems)


class Workers:
    pool = QThreadPool.globalInstance()
