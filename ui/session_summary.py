# ui/session_summary.py
from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QGridLayout, QLabel, QPushButton, QTextBrowser, QGroupBox
)
import pyqtgraph as pg

from app.state import SessionResult, format_time
from services.alignment import count_operations
from services.grading import candidate_scores
from ui.feedback import render_operations_html, OMITTED_MARK


def _rows(grid: QGridLayout, rows, bold_last: bool = False):
    for r, (name, value) in enumerate(rows):
        left = QLabel(name)
        right = QLabel(value)
        right.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        if bold_last and r == len(rows) - 1:
            left.setStyleSheet("font-weight: bold;")
            right.setStyleSheet("font-weight: bold;")
        grid.addWidget(left, r, 0)
        grid.addWidget(right, r, 1)


class SessionSummary(QDialog):
    """
    Final result: raw counts, the 10-minute equivalent, grade banner,
    annotated feedback and the net score of each tier against its threshold.
    """

    def __init__(self, result: SessionResult, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Result")
        self.resize(760, 680)
        self.session_result = result
        g = result.grade

        root = QVBoxLayout(self)

        raw = QGridLayout()
        _rows(raw, [
            ("Characters typed", f"{g.raw_char_count}"),
            ("Elapsed", f"{format_time(result.elapsed_seconds)} / {format_time(result.nominal_seconds)}"),
            ("Errors", f"{g.raw_error_count}"),
        ])
        root.addLayout(raw)

        est_box = QGroupBox(f"{format_time(result.nominal_seconds)} equivalent (used for grading)", self)
        est = QGridLayout(est_box)
        _rows(est, [
            ("Estimated characters", f"{g.estimated_char_count}"),
            ("Estimated errors", f"{g.estimated_error_count}"),
            ("Net score", f"{g.net_score}"),
        ], bold_last=True)
        root.addWidget(est_box)

        self.lblGrade = QLabel(g.grade_label, self)
        self.lblGrade.setObjectName("lblGrade")
        self.lblGrade.setAlignment(Qt.AlignCenter)
        color = "#22c55e" if g.passed else "#ef4444"
        self.lblGrade.setStyleSheet(f"font-size: 30px; font-weight: bold; color: {color};")
        root.addWidget(self.lblGrade)

        # Net score of every tier vs. its entry threshold
        plot = pg.PlotWidget()
        plot.setBackground(None)
        plot.setMenuEnabled(False)
        plot.setMouseEnabled(x=False, y=False)
        plot.hideButtons()
        plot.showGrid(x=False, y=True, alpha=0.08)
        plot.setLabel("left", "Net score")
        scores = candidate_scores(g.estimated_char_count, g.estimated_error_count)
        x = list(range(len(scores)))
        heights = [max(0, net) for _, net in scores]
        brushes = [
            pg.mkBrush("#eab308" if tier.band == g.band else "#6b7280")
            for tier, _ in scores
        ]
        plot.addItem(pg.BarGraphItem(x=x, height=heights, width=0.6, brushes=brushes))
        for i, (tier, _) in enumerate(scores):
            plot.addItem(pg.PlotDataItem(
                [i - 0.4, i + 0.4], [tier.entry, tier.entry],
                pen=pg.mkPen("#ef4444", width=2),
            ))
        plot.getAxis("bottom").setTicks([[
            (i, f"-{tier.penalty}/error") for i, (tier, _) in enumerate(scores)
        ]])
        plot.setMinimumHeight(160)
        root.addWidget(plot, stretch=1)

        counts = count_operations(result.alignment)
        root.addWidget(QLabel(
            f"Feedback (red: error / {OMITTED_MARK}: omitted) — "
            f"{counts['substituted']} substituted, {counts['extra']} extra, "
            f"{counts['omitted']} omitted"
        ))
        self.feedback = QTextBrowser(self)
        self.feedback.setHtml(render_operations_html(result.alignment.operations))
        root.addWidget(self.feedback, stretch=2)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
