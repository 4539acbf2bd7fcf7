#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
fretboard_gen_gui.py
====================

A PyQt6 live front-end for `fretboard_gen.py`:

TOP HALF:
    • Zoomable + pannable SVG preview (QGraphicsView + QGraphicsSvgItem).
    • Mouse-wheel zoom centered at cursor; middle-mouse pan.
    • Toolbar: Zoom In / Zoom Out / Fit, zoom % readout, Export SVG…, Export DXF….

BOTTOM HALF:
    • Left: presets row + every layout parameter as a form field
      (scale, frets, nut, inlay with per-field units; slot/inlay style,
      orientation, alignment markers, bridge location, stroke, table unit).
    • Right: 4-column fret table (nut skipped) + Log / Summary panel.

SYSTEM:
    • The generator runs in-process: every change re-reads the form, validates,
      rebuilds the model from scratch and re-renders. A short single-shot timer
      coalesces bursts of keystrokes.
    • Invalid input is reported in the log; the last good drawing stays up.
    • Presets in ~/.fretboard_gen_presets.json, window geometry + last export
      dir + last preset in ~/.fretboard_gen_config.json.

SETUP:
    pip install PyQt6
    python3 fretboard_gen_gui.py
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QByteArray, QPointF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtSvg import QSvgRenderer
from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QFileDialog,
    QGraphicsScene,
    QGraphicsView,
    QGridLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QSplitter,
    QTableWidget,
    QTableWidgetItem,
    QTextEdit,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

import fretboard_gen as fg

PRESETS_PATH = Path.home() / ".fretboard_gen_presets.json"
CONFIG_PATH = Path.home() / ".fretboard_gen_config.json"

REGEN_DELAY_MS = 150

# Form field name -> widget attribute; keys double as normalize_params() keys.
LINE_FIELDS = {
    "scale": "in_scale",
    "frets": "in_frets",
    "nut": "in_nut",
    "inlay": "in_inlay",
    "stroke": "in_stroke",
}
COMBO_FIELDS = {
    "scale_units": "cb_scale_units",
    "nut_units": "cb_nut_units",
    "inlay_units": "cb_inlay_units",
    "slot_style": "cb_slot_style",
    "inlay_style": "cb_inlay_style",
    "orientation": "cb_orientation",
    "table_unit": "cb_table_unit",
}
CHECK_FIELDS = {
    "alignment_markers": "chk_alignment",
    "bridge": "chk_bridge",
}

DEFAULT_PRESETS: Dict[str, Dict[str, str]] = {
    "None (manual)": {},
    'Fender (25.5")': {
        "scale": "25.5",
        "scale_units": "in",
        "frets": "22",
        "nut": "3",
        "nut_units": "mm",
        "inlay": "0.25",
        "inlay_units": "in",
    },
    'Gibson (24.75")': {
        "scale": "24.75",
        "scale_units": "in",
        "frets": "22",
        "nut": "3",
        "nut_units": "mm",
        "inlay": "6",
        "inlay_units": "mm",
    },
    "Classical (650 mm)": {
        "scale": "650",
        "scale_units": "mm",
        "frets": "19",
        "nut": "5",
        "nut_units": "mm",
        "inlay": "5",
        "inlay_units": "mm",
    },
    'Bass (34")': {
        "scale": "34",
        "scale_units": "in",
        "frets": "24",
        "nut": "4",
        "nut_units": "mm",
        "inlay": "8",
        "inlay_units": "mm",
    },
}


def load_json_file(path: Path, default: Any) -> Any:
    """
    Read a JSON file if it exists; otherwise (or if unreadable) return `default`.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return default


def save_json_file(path: Path, data: Any) -> None:
    """
    Write a JSON file atomically (write-then-replace).
    """
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    tmp.replace(path)


# -------------------------------------------------------------------------------------------------
# Zoom + Pan SVG View
# -------------------------------------------------------------------------------------------------


class ZoomPanSvgView(QGraphicsView):
    """
    QGraphicsView hosting the rendered fretboard SVG.

    The display scale is the view transform; `zoomChanged` reports it
    relative to the fitted state (1.0 == fitted).
    """

    zoomChanged = pyqtSignal(float)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self._renderer: Optional[QSvgRenderer] = None
        self._svg_item: Optional[QGraphicsSvgItem] = None
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.AnchorViewCenter)
        self._pan_start: Optional[QPointF] = None
        self._zoom = 1.0
        self._fitted_once = False

    def load_svg_text(self, svg: str) -> bool:
        """
        Replace the displayed drawing. Keeps the current zoom/pan unless this is
        the first drawing. Returns False if Qt rejects the document.
        """
        renderer = QSvgRenderer(QByteArray(svg.encode("utf-8")))
        if not renderer.isValid():
            return False
        if self._svg_item:
            self._scene.removeItem(self._svg_item)
        self._renderer = renderer
        self._svg_item = QGraphicsSvgItem()
        self._svg_item.setSharedRenderer(self._renderer)
        self._scene.addItem(self._svg_item)
        self._scene.setSceneRect(self._svg_item.boundingRect())
        if not self._fitted_once:
            self.fit_to_view()
            self._fitted_once = True
        return True

    def fit_to_view(self, padding: float = 0.05):
        if not self._svg_item:
            return
        rect = self._scene.sceneRect()
        if rect.isNull():
            return
        pad_x = rect.width() * padding
        pad_y = rect.height() * padding
        self.resetTransform()
        self.fitInView(rect.adjusted(-pad_x, -pad_y, pad_x, pad_y), Qt.AspectRatioMode.KeepAspectRatio)
        self._zoom = 1.0
        self.zoomChanged.emit(self._zoom)

    def zoom_in(self):
        self._apply_zoom(1.15)

    def zoom_out(self):
        self._apply_zoom(1.0 / 1.15)

    def _apply_zoom(self, factor: float):
        if not self._svg_item:
            return
        self.scale(factor, factor)
        self._zoom *= factor
        self.zoomChanged.emit(self._zoom)

    def wheelEvent(self, event):
        self._apply_zoom(1.15 if event.angleDelta().y() > 0 else 1.0 / 1.15)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.MiddleButton:
            self._pan_start = event.position()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._pan_start is not None:
            delta = event.position() - self._pan_start
            self._pan_start = event.position()
            h, v = self.horizontalScrollBar(), self.verticalScrollBar()
            h.setValue(h.value() - int(delta.x()))
            v.setValue(v.value() - int(delta.y()))
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self._pan_start is not None and event.button() == Qt.MouseButton.MiddleButton:
            self._pan_start = None
            self.setCursor(Qt.CursorShape.ArrowCursor)
            event.accept()
            return
        super().mouseReleaseEvent(event)


# -------------------------------------------------------------------------------------------------
# Main GUI Window
# -------------------------------------------------------------------------------------------------


class FretboardGUI(QWidget):
    """
    TOP:    toolbar + ZoomPanSvgView
    BOTTOM: left = presets + parameters, right = fret table + log
    """

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Fretboard Generator")
        self.resize(1280, 880)

        self._positions: list = []
        self._model: Optional[fg.FretboardModel] = None

        self._regen_timer = QTimer(self)
        self._regen_timer.setSingleShot(True)
        self._regen_timer.timeout.connect(self.regenerate_now)

        self._presets: Dict[str, Dict[str, str]] = load_json_file(PRESETS_PATH, {})
        self._config: Dict[str, Any] = self._load_config()

        self._build_ui()
        self._restore_config()
        self.regenerate_now()

    # ------------------------------ UI Build ------------------------------

    def _build_ui(self):
        outer = QVBoxLayout(self)

        self.svg_view = ZoomPanSvgView(self)
        self.svg_view.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.svg_view.zoomChanged.connect(self._on_zoom_changed)

        self.toolbar = QToolBar("Preview Controls", self)
        self._build_toolbar(self.toolbar)
        outer.addWidget(self.toolbar)
        outer.addWidget(self.svg_view, stretch=1)

        bottom = QSplitter(Qt.Orientation.Horizontal, self)
        outer.addWidget(bottom, stretch=1)

        left_container = QWidget(self)
        left_layout = QVBoxLayout(left_container)
        left_layout.addWidget(self._build_presets_group())
        left_layout.addWidget(self._build_parameters_group())
        left_layout.addStretch(1)
        bottom.addWidget(left_container)

        right_container = QWidget(self)
        right_layout = QVBoxLayout(right_container)
        title_table = QLabel("Nut-to-Fret Distances")
        title_table.setStyleSheet("font-weight:600;")
        right_layout.addWidget(title_table)
        self.table = QTableWidget(self)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        right_layout.addWidget(self.table, stretch=1)

        title_log = QLabel("Log / Summary")
        title_log.setStyleSheet("font-weight:600;")
        right_layout.addWidget(title_log)
        self.log = QTextEdit(self)
        self.log.setReadOnly(True)
        self.log.setMinimumHeight(100)
        right_layout.addWidget(self.log)
        bottom.addWidget(right_container)
        bottom.setSizes([640, 640])

    def _build_toolbar(self, tb: QToolBar):
        tb.setMovable(False)
        for text, slot in (
            ("Zoom In", self.svg_view.zoom_in),
            ("Zoom Out", self.svg_view.zoom_out),
            ("Fit", lambda: self.svg_view.fit_to_view(0.05)),
        ):
            act = QAction(text, self)
            act.triggered.connect(slot)
            tb.addAction(act)
        tb.addSeparator()
        self.lbl_zoom = QLabel("Zoom: 100%")
        tb.addWidget(self.lbl_zoom)
        tb.addSeparator()
        act_svg = QAction("Export SVG…", self)
        act_svg.triggered.connect(self._on_export_svg)
        tb.addAction(act_svg)
        act_dxf = QAction("Export DXF…", self)
        act_dxf.triggered.connect(self._on_export_dxf)
        tb.addAction(act_dxf)

    def _build_presets_group(self) -> QGroupBox:
        g = QGroupBox("Presets")
        grid = QGridLayout(g)

        self.cb_preset = QComboBox()
        self.cb_preset.setEditable(True)
        if not self._presets:
            self._presets.update(DEFAULT_PRESETS)
        self._refresh_preset_combo()

        btn_apply = QPushButton("Apply")
        btn_apply.clicked.connect(self._on_apply_preset)
        btn_save = QPushButton("Save/Update")
        btn_save.clicked.connect(self._on_save_preset)
        btn_delete = QPushButton("Delete")
        btn_delete.clicked.connect(self._on_delete_preset)

        grid.addWidget(QLabel("Preset:"), 0, 0)
        grid.addWidget(self.cb_preset, 0, 1, 1, 2)
        grid.addWidget(btn_apply, 0, 3)
        grid.addWidget(btn_save, 0, 4)
        grid.addWidget(btn_delete, 0, 5)
        return g

    def _unit_combo(self, default: str) -> QComboBox:
        cb = QComboBox()
        cb.addItems(["mm", "in"])
        cb.setCurrentText(default)
        return cb

    def _build_parameters_group(self) -> QGroupBox:
        g = QGroupBox("Parameters")
        grid = QGridLayout(g)
        r = 0

        self.in_scale = QLineEdit("648")
        self.cb_scale_units = self._unit_combo("mm")
        self.in_frets = QLineEdit("24")
        grid.addWidget(QLabel("Scale Length:"), r, 0)
        grid.addWidget(self.in_scale, r, 1)
        grid.addWidget(self.cb_scale_units, r, 2)
        grid.addWidget(QLabel("Frets:"), r, 3)
        grid.addWidget(self.in_frets, r, 4)
        r += 1

        self.in_nut = QLineEdit("3")
        self.in_nut.setToolTip("Distance from the zero line to the far side of the nut.")
        self.cb_nut_units = self._unit_combo("mm")
        self.in_inlay = QLineEdit("6")
        self.in_inlay.setToolTip("Inlay diameter (dot) or crosshair span.")
        self.cb_inlay_units = self._unit_combo("mm")
        grid.addWidget(QLabel("Nut Width:"), r, 0)
        grid.addWidget(self.in_nut, r, 1)
        grid.addWidget(self.cb_nut_units, r, 2)
        r += 1
        grid.addWidget(QLabel("Inlay Width:"), r, 0)
        grid.addWidget(self.in_inlay, r, 1)
        grid.addWidget(self.cb_inlay_units, r, 2)
        r += 1

        self.cb_slot_style = QComboBox()
        self.cb_slot_style.addItems(list(fg.SLOT_STYLES))
        self.cb_inlay_style = QComboBox()
        self.cb_inlay_style.addItems(list(fg.INLAY_STYLES))
        grid.addWidget(QLabel("Slot Style:"), r, 0)
        grid.addWidget(self.cb_slot_style, r, 1)
        grid.addWidget(QLabel("Inlay Style:"), r, 3)
        grid.addWidget(self.cb_inlay_style, r, 4)
        r += 1

        self.cb_orientation = QComboBox()
        self.cb_orientation.addItems(list(fg.ORIENTATIONS))
        self.cb_table_unit = self._unit_combo("mm")
        grid.addWidget(QLabel("Orientation:"), r, 0)
        grid.addWidget(self.cb_orientation, r, 1)
        grid.addWidget(QLabel("Table Unit:"), r, 3)
        grid.addWidget(self.cb_table_unit, r, 4)
        r += 1

        self.chk_alignment = QCheckBox("Alignment Markers")
        self.chk_bridge = QCheckBox("Bridge Location")
        self.in_stroke = QLineEdit("0.25")
        self.in_stroke.setToolTip("Preview/SVG stroke width (mm).")
        grid.addWidget(self.chk_alignment, r, 0, 1, 2)
        grid.addWidget(self.chk_bridge, r, 2, 1, 2)
        r += 1
        grid.addWidget(QLabel("Stroke Width:"), r, 0)
        grid.addWidget(self.in_stroke, r, 1)
        r += 1

        for attr in LINE_FIELDS.values():
            getattr(self, attr).textChanged.connect(self.queue_regeneration)
        for attr in COMBO_FIELDS.values():
            getattr(self, attr).currentIndexChanged.connect(self.queue_regeneration)
        for attr in CHECK_FIELDS.values():
            getattr(self, attr).stateChanged.connect(self.queue_regeneration)
        return g

    # ------------------------------ Form <-> values ------------------------------

    def form_values(self) -> Dict[str, str]:
        values = {k: getattr(self, a).text() for k, a in LINE_FIELDS.items()}
        values.update({k: getattr(self, a).currentText() for k, a in COMBO_FIELDS.items()})
        values.update(
            {k: "1" if getattr(self, a).isChecked() else "0" for k, a in CHECK_FIELDS.items()}
        )
        return values

    def apply_values(self, values: Dict[str, str]):
        """Push values into the form; unknown keys and missing combo entries are ignored."""
        for k, a in LINE_FIELDS.items():
            if k in values:
                getattr(self, a).setText(values[k])
        for k, a in COMBO_FIELDS.items():
            if k in values:
                w = getattr(self, a)
                idx = w.findText(values[k])
                if idx >= 0:
                    w.setCurrentIndex(idx)
        for k, a in CHECK_FIELDS.items():
            if k in values:
                getattr(self, a).setChecked(values[k] == "1")

    # ------------------------------ Regeneration ------------------------------

    def queue_regeneration(self):
        self._regen_timer.start(REGEN_DELAY_MS)

    def regenerate_now(self):
        """
        Validate the form, rebuild positions + model, then refresh preview and table.
        On invalid input the previous drawing and table are left untouched.
        """
        values = self.form_values()
        try:
            params = fg.normalize_params(values)
        except fg.ValidationError as e:
            self.log.append(f"⚠️ {e}")
            return
        try:
            stroke = float(values["stroke"])
        except ValueError:
            stroke = 0.25

        self._positions, self._model = fg.generate(params)
        if not self.svg_view.load_svg_text(fg.model_to_svg(self._model, stroke_width=stroke)):
            self.log.append("⚠️ Failed to render SVG preview.")
        self._populate_table(values["table_unit"])

    def _populate_table(self, unit: str):
        rows = fg.format_fret_table(self._positions, unit)
        columns = max((len(r) for r in rows), default=0)
        self.table.clear()
        self.table.setRowCount(len(rows))
        self.table.setColumnCount(columns)
        self.table.setHorizontalHeaderLabels([f"Fret: distance ({unit})"] * columns)
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                self.table.setItem(r, c, QTableWidgetItem(cell))
        self.table.resizeColumnsToContents()

    # ------------------------------ Export ------------------------------

    def _export(self, title: str, filename: str, file_filter: str, write):
        if self._model is None:
            self.log.append("ℹ️ Nothing to export yet.")
            return
        default_dir = self._config.get("last_output_dir", str(Path.cwd()))
        fname, _ = QFileDialog.getSaveFileName(
            self, title, str(Path(default_dir) / filename), file_filter
        )
        if not fname:
            return
        try:
            write(fname)
        except OSError as e:
            self.log.append(f"⚠️ Failed to write {fname}: {e}")
            return
        self._config["last_output_dir"] = str(Path(fname).parent)
        self._save_config()
        self.log.append(f"✅ Written to {fname}")

    def _on_export_svg(self):
        try:
            stroke = float(self.in_stroke.text())
        except ValueError:
            stroke = 0.25
        self._export(
            "Export SVG",
            fg.SVG_FILENAME,
            f"SVG Files (*.svg);;{fg.SVG_MIME} (*)",
            lambda path: fg.export_svg(self._model, path, stroke_width=stroke),
        )

    def _on_export_dxf(self):
        self._export(
            "Export DXF",
            fg.DXF_FILENAME,
            f"DXF Files (*.dxf);;{fg.DXF_MIME} (*)",
            lambda path: fg.export_dxf(self._model, path),
        )

    def _on_zoom_changed(self, z: float):
        self.lbl_zoom.setText(f"Zoom: {round(z * 100)}%")

    # ------------------------------ Presets ------------------------------

    def _refresh_preset_combo(self):
        self.cb_preset.blockSignals(True)
        self.cb_preset.clear()
        self.cb_preset.addItems(sorted(self._presets.keys()))
        idx = self.cb_preset.findText(self._config.get("last_preset", "None (manual)"))
        if idx >= 0:
            self.cb_preset.setCurrentIndex(idx)
        self.cb_preset.blockSignals(False)

    def _on_apply_preset(self):
        name = self.cb_preset.currentText()
        self.apply_values(self._presets.get(name, {}))
        self._config["last_preset"] = name
        self._save_config()
        self.queue_regeneration()

    def _on_save_preset(self):
        name = self.cb_preset.currentText().strip()
        if not name:
            self.log.append("⚠️ Type a preset name in the Preset box first.")
            return
        self._presets[name] = self.form_values()
        self._save_presets()
        self._refresh_preset_combo()
        self.log.append(f"✅ Preset saved/updated: {name}")

    def _on_delete_preset(self):
        name = self.cb_preset.currentText().strip()
        if name in self._presets:
            del self._presets[name]
            self._save_presets()
            self._refresh_preset_combo()
            self.log.append(f"🗑️ Preset deleted: {name}")

    # ------------------------------ Config persistence ------------------------------

    def _save_presets(self):
        try:
            save_json_file(PRESETS_PATH, self._presets)
        except OSError as e:
            self.log.append(f"⚠️ Could not save presets: {e}")

    def _load_config(self) -> Dict[str, Any]:
        cfg = load_json_file(CONFIG_PATH, {})
        if not isinstance(cfg, dict):
            cfg = {}
        cfg.setdefault("last_output_dir", str(Path.cwd()))
        cfg.setdefault("last_preset", "None (manual)")
        cfg.setdefault("win_geom", None)
        return cfg

    def _save_config(self):
        try:
            save_json_file(CONFIG_PATH, self._config)
        except OSError as e:
            self.log.append(f"⚠️ Could not save settings: {e}")

    def _restore_config(self):
        geom = self._config.get("win_geom")
        if isinstance(geom, list) and len(geom) == 4:
            self.setGeometry(*geom)

    def closeEvent(self, event):
        g = self.geometry()
        self._config["win_geom"] = [g.x(), g.y(), g.width(), g.height()]
        self._save_config()
        super().closeEvent(event)


def main():
    app = QApplication(sys.argv)
    gui = FretboardGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
