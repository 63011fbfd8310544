#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Relay protection calculator GUI (PyQt5)
- IDMT tripping time + curve
- Directional relay regions + vector diagram
- Light theme, English UI
"""

import math
import sys
from typing import Callable, Dict, List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QAction, QActionGroup, QApplication, QComboBox, QFormLayout, QFrame, QHBoxLayout, QLabel, QLineEdit, QMainWindow, QMessageBox, QPushButton, QStackedWidget, QToolBar, QToolTip, QVBoxLayout, QWidget
)
from PyQt5.QtGui import QCursor
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg
from matplotlib.figure import Figure

import relay_charts
from relay_core import (
    CURVES,
    CurveType,
    DisplaySettings,
    FaultType,
    Phase,
    PhaseSelection,
    SettingsError,
    load_settings,
    run_directional_calculation,
    run_tripping_calculation,
)
from relay_core.directional import build_vectors
from relay_core.formatting import fault_label, format_trip_time, phase_info_labels, region_card

# ==========================
# Styles
# ==========================

ERROR_STYLE = "QLabel { color: #b91c1c; background: #fde2e1; border: 1px solid #f87171; border-radius: 6px; padding: 8px; }"
RESULT_STYLE = "QLabel { color: #1e1b4b; background: #eef2ff; border: 1px solid #a5b4fc; border-radius: 6px; padding: 8px; font-weight: 600; }"
CARD_STYLE = "QFrame {{ background: #ffffff; border: 1px solid {color}; border-left: 5px solid {color}; border-radius: 6px; }}"


# ==========================
# Chart slot (canvas + figure handle)
# ==========================

class ChartSlot(QWidget):
    """Hosts one chart canvas; the figure handle is swapped on every draw."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.figure: Optional[Figure] = None
        self._canvas: Optional[FigureCanvasQTAgg] = None
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self.setVisible(False)

    def show_figure(self, figure: Figure, hover: Optional[Callable[[Optional[float], Optional[float]], Optional[str]]] = None) -> None:
        self._drop_canvas()
        self.figure = figure
        self._canvas = FigureCanvasQTAgg(figure)
        if hover is not None:
            def on_motion(event):
                text = hover(event.xdata, event.ydata) if event.inaxes else None
                if text:
                    QToolTip.showText(QCursor.pos(), text, event.canvas)
                else:
                    QToolTip.hideText()
            self._canvas.mpl_connect("motion_notify_event", on_motion)
        self._layout.addWidget(self._canvas)
        self._canvas.draw_idle()
        self.setVisible(True)

    def clear(self) -> None:
        relay_charts.release_chart(self.figure)
        self.figure = None
        self._drop_canvas()
        self.setVisible(False)

    def _drop_canvas(self) -> None:
        if self._canvas is not None:
            self._layout.removeWidget(self._canvas)
            self._canvas.deleteLater()
            self._canvas = None


# ==========================
# IDMT calculator page
# ==========================

class IdmtPage(QWidget):
    def __init__(self, window: "MainWindow"):
        super().__init__(window)
        self.window_ = window

        self.curve_combo = QComboBox()
        self.curve_combo.addItem("Select curve type", CurveType.NONE.value)
        for curve_type, params in CURVES.items():
            self.curve_combo.addItem(f"{params.name} ({curve_type.value})", curve_type.value)

        self.tms_edit = QLineEdit()
        self.tms_edit.setPlaceholderText("e.g. 0.1")
        self.fault_edit = QLineEdit()
        self.fault_edit.setPlaceholderText("Fault current (A)")
        self.set_edit = QLineEdit()
        self.set_edit.setPlaceholderText("Set current (A)")

        form = QFormLayout()
        form.addRow("Curve type:", self.curve_combo)
        form.addRow("TMS:", self.tms_edit)
        form.addRow("Fault current:", self.fault_edit)
        form.addRow("Set current:", self.set_edit)

        calc_btn = QPushButton("Calculate")
        calc_btn.clicked.connect(self.calculate)
        for edit in (self.tms_edit, self.fault_edit, self.set_edit):
            edit.returnPressed.connect(self.calculate)

        self.result_label = QLabel("")
        self.result_label.setWordWrap(True)
        self.result_label.setVisible(False)

        self.chart = ChartSlot(self)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(calc_btn)
        lay.addWidget(self.result_label)
        lay.addWidget(self.chart, 1)
        lay.addStretch(0)

    def calculate(self) -> None:
        outcome = run_tripping_calculation(
            self.curve_combo.currentData(),
            self.tms_edit.text(),
            self.fault_edit.text(),
            self.set_edit.text(),
            tolerance=self.window_.display.highlight_tolerance,
        )
        if not outcome.ok:
            self.chart.clear()
            self._show_error(outcome.error.message)
            self.window_._handle_validation_error(outcome.error.message)
            return

        self.result_label.setStyleSheet(RESULT_STYLE)
        self.result_label.setText(format_trip_time(outcome.result))
        self.result_label.setVisible(True)
        figure = relay_charts.render_idmt_chart(self.chart.figure, outcome, self.window_.display)
        self.chart.show_figure(figure)

    def reset(self) -> None:
        self.result_label.clear()
        self.result_label.setVisible(False)
        self.chart.clear()

    def _show_error(self, message: str) -> None:
        self.result_label.setStyleSheet(ERROR_STYLE)
        self.result_label.setText(f"⚠️ {message}")
        self.result_label.setVisible(True)


# ==========================
# Directional calculator page
# ==========================

class DirectionalPage(QWidget):
    def __init__(self, window: "MainWindow"):
        super().__init__(window)
        self.window_ = window

        self.fault_combo = QComboBox()
        for fault_type in FaultType:
            self.fault_combo.addItem(fault_label(fault_type), fault_type.value)
        self.fault_combo.currentIndexChanged.connect(self.update_phase_info)

        self.rca_edit = QLineEdit()
        self.rca_edit.setPlaceholderText("RCA (degrees)")
        self.rca_edit.returnPressed.connect(self.calculate)

        self.phase_combo = QComboBox()
        for selection in PhaseSelection:
            text = "All phases" if selection is PhaseSelection.ALL else f"{selection.value}-Phase"
            self.phase_combo.addItem(text, selection.value)

        self.phase_labels: List[QLabel] = [QLabel("") for _ in Phase]
        info_row = QHBoxLayout()
        for lbl in self.phase_labels:
            info_row.addWidget(lbl)

        form = QFormLayout()
        form.addRow("Fault type:", self.fault_combo)
        form.addRow("RCA:", self.rca_edit)
        form.addRow("Phase:", self.phase_combo)

        calc_btn = QPushButton("Calculate Region")
        calc_btn.clicked.connect(self.calculate)

        self.header_label = QLabel("")
        self.header_label.setStyleSheet("QLabel { font-weight: 700; }")
        self.cards_row = QHBoxLayout()
        self.error_label = QLabel("")
        self.error_label.setStyleSheet(ERROR_STYLE)
        self.error_label.setVisible(False)

        self.graph_title = QLabel("")
        self.graph_title.setAlignment(Qt.AlignCenter)
        self.chart = ChartSlot(self)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addLayout(info_row)
        lay.addWidget(calc_btn)
        lay.addWidget(self.error_label)
        lay.addWidget(self.header_label)
        lay.addLayout(self.cards_row)
        lay.addWidget(self.graph_title)
        lay.addWidget(self.chart, 1)
        lay.addStretch(0)

        self.update_phase_info()

    def update_phase_info(self, *_args) -> None:
        fault_type = FaultType(self.fault_combo.currentData())
        for lbl, text in zip(self.phase_labels, phase_info_labels(fault_type)):
            lbl.setText(text)
        self.reset()

    def calculate(self) -> None:
        outcome = run_directional_calculation(
            self.rca_edit.text(),
            self.fault_combo.currentData(),
            self.phase_combo.currentData(),
        )
        self._clear_cards()
        if not outcome.ok:
            self.chart.clear()
            self.header_label.clear()
            self.graph_title.clear()
            self.error_label.setText(f"⚠️ {outcome.error.message}")
            self.error_label.setVisible(True)
            self.window_._handle_validation_error(outcome.error.message)
            return

        self.error_label.setVisible(False)
        label = fault_label(outcome.fault_type)
        self.header_label.setText(f"{label} Directionality")
        for phase, region in outcome.regions.items():
            self.cards_row.addWidget(self._make_card(phase, region))

        self.graph_title.setText(f"📊 {label} - Vector Diagram")
        display = self.window_.display
        figure = relay_charts.render_region_chart(self.chart.figure, outcome, display)
        vectors = build_vectors(outcome.regions, display.outer_radius, display.inner_radius)
        self.chart.show_figure(figure, hover=lambda x, y: relay_charts.vector_tooltip(vectors, x, y))

    def reset(self) -> None:
        self._clear_cards()
        self.header_label.clear()
        self.graph_title.clear()
        self.error_label.setVisible(False)
        self.chart.clear()

    def _make_card(self, phase: Phase, region) -> QFrame:
        title, pos_tag, neg_tag = region_card(region)
        card = QFrame()
        card.setStyleSheet(CARD_STYLE.format(color=self.window_.display.phase_colors[phase]))
        v = QVBoxLayout(card)
        v.addWidget(QLabel(f"<b>{title}</b>"))
        pos = QLabel(pos_tag)
        pos.setStyleSheet("QLabel { color: #15803d; border: none; }")
        neg = QLabel(neg_tag)
        neg.setStyleSheet("QLabel { color: #b91c1c; border: none; }")
        v.addWidget(pos)
        v.addWidget(neg)
        return card

    def _clear_cards(self) -> None:
        while self.cards_row.count():
            item = self.cards_row.takeAt(0)
            w = item.widget()
            if w is not None:
                w.deleteLater()


# ==========================
# Main window
# ==========================

class MainWindow(QMainWindow):
    def __init__(self, display: DisplaySettings):
        super().__init__()
        self.display = display
        self.setWindowTitle("Relay Protection Calculator")
        self.resize(760, 900)

        self.stack = QStackedWidget()
        self.idmt_page = IdmtPage(self)
        self.region_page = DirectionalPage(self)
        self.stack.addWidget(self.idmt_page)
        self.stack.addWidget(self.region_page)
        self.setCentralWidget(self.stack)

        tb = QToolBar("Calculators", self)
        tb.setMovable(False)
        self.addToolBar(tb)
        group = QActionGroup(self)
        group.setExclusive(True)

        self._calc_actions: Dict[str, QAction] = {}
        for key, text, tip in (
            ("idmt", "IDMT Tripping Time", "Trip time from IEC inverse curves (Ctrl+1)"),
            ("region", "Directionality", "Directional relay regions from RCA (Ctrl+2)"),
        ):
            act = QAction(text, self)
            act.setCheckable(True)
            act.setToolTip(tip)
            act.setShortcut("Ctrl+1" if key == "idmt" else "Ctrl+2")
            act.triggered.connect(lambda _=False, k=key: self.switch_calculator(k))
            group.addAction(act)
            tb.addAction(act)
            self._calc_actions[key] = act

        self._calc_actions["idmt"].setChecked(True)
        self.statusBar()

    def switch_calculator(self, key: str) -> None:
        self._calc_actions[key].setChecked(True)
        self.stack.setCurrentWidget(self.idmt_page if key == "idmt" else self.region_page)
        self.idmt_page.reset()
        self.region_page.reset()

    def _handle_validation_error(self, message: str) -> None:
        if not message:
            return
        print(message, file=sys.stderr)
        self.statusBar().showMessage(message, 5000)


# ==========================
# Self tests (no GUI)
# ==========================

def _assert_close(actual, expected, label, tol=1e-9):
    if not math.isclose(actual, expected, abs_tol=tol):
        raise AssertionError(f"{label}: expected {expected}, got {actual}")

def run_selftests() -> None:
    si = run_tripping_calculation("SI", "0.1", "1000", "100")
    _assert_close(si.result.trip_time_seconds, 0.2973, "SI trip time", tol=1e-3)
    vi = run_tripping_calculation("VI", 1, 500, 100)
    _assert_close(vi.result.trip_time_seconds, 3.375, "VI trip time")
    if run_tripping_calculation("EI", 1, 100, 100).error.code != "FaultCurrentTooLow":
        raise AssertionError("ratio 1 must be rejected")
    r = run_directional_calculation("45", "PHASE", "R").regions[Phase.R]
    _assert_close(r.positive, 45.0, "PHASE R positive")
    _assert_close(r.negative, -135.0, "PHASE R negative")
    if run_directional_calculation("abc", "EARTH", "ALL").error.code != "InvalidRCA":
        raise AssertionError("non-numeric RCA must be rejected")
    print("Selftests OK (trip time, ratio guard, regions, RCA guard).")

# ==========================
# main
# ==========================

def main(config_path: str = "config.yaml"):
    app = QApplication(sys.argv)
    try:
        display = load_settings(config_path)
    except SettingsError as e:
        print(str(e), file=sys.stderr)
        QMessageBox.warning(None, "Configuration", f"{e}\nUsing default display settings.")
        display = DisplaySettings()
    win = MainWindow(display)
    win.show()
    sys.exit(app.exec_())

if __name__ == "__main__":
    if "--selftest" in sys.argv:
        run_selftests()
        sys.exit(0)
    main()
