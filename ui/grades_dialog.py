# ui/grades_dialog.py
from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
)

from services.grading import grade_table, FAIL_LABEL


class GradesDialog(QDialog):
    def __init__(self, nominal_minutes: int = 10, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Grade criteria")
        self.resize(420, 560)

        root = QVBoxLayout(self)
        root.addWidget(QLabel(
            f"Counts are scaled to {nominal_minutes} minutes, then each error "
            "deducts the penalty of the tier being tested."
        ))

        rows = grade_table()
        self.table = QTableWidget(len(rows) + 1, 3)
        self.table.setHorizontalHeaderLabels(["Grade", "Net score ≥", "Penalty / error"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        for i, (label, minimum, penalty) in enumerate(rows):
            self.table.setItem(i, 0, QTableWidgetItem(label))
            self.table.setItem(i, 1, QTableWidgetItem(str(minimum)))
            self.table.setItem(i, 2, QTableWidgetItem(f"-{penalty}"))
        self.table.setItem(len(rows), 0, QTableWidgetItem(FAIL_LABEL))
        self.table.setItem(len(rows), 1, QTableWidgetItem("—"))
        self.table.setItem(len(rows), 2, QTableWidgetItem("-1"))
        root.addWidget(self.table, stretch=1)

        btn = QPushButton("Close", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
