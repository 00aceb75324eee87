"""
Controls panel: grid structure sliders and output dialect selection.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QComboBox,
    QLineEdit, QGroupBox, QCheckBox,
)
from PyQt5.QtCore import Qt, pyqtSignal

from grid_generator.editor.data_model import (
    CSSFormat, UIFramework, GridConfig, OutputSettings,
)
from grid_generator.settings.editor_settings import (
    COLUMN_RANGE, ROW_RANGE, GAP_RANGE, GAP_STEP,
)
from grid_generator.ui import style_constants as sc
from grid_generator.ui.style_constants import set_accessible

CSS_FORMAT_LABELS = [
    (CSSFormat.VANILLA, "Vanilla CSS"),
    (CSSFormat.BOOTSTRAP, "Bootstrap"),
    (CSSFormat.TAILWIND, "TailwindCSS"),
]

UI_FRAMEWORK_LABELS = [
    (UIFramework.NONE, "None"),
    (UIFramework.SHADCN, "shadcn/ui"),
    (UIFramework.MUI, "Material UI"),
    (UIFramework.CHAKRA, "Chakra UI"),
    (UIFramework.ANTD, "Ant Design"),
]


class LabeledSlider(QWidget):
    """Slider with a caption and a live value readout."""

    valueChanged = pyqtSignal(int)

    def __init__(self, title: str, minimum: int, maximum: int, step: int = 1,
                 suffix: str = "", parent=None):
        super().__init__(parent)
        self._suffix = suffix
        self._step = step

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        header = QHBoxLayout()
        header.addWidget(QLabel(title))
        header.addStretch()
        self._value_label = QLabel()
        self._value_label.setStyleSheet(f"font-family: {sc.FONT_MONO};")
        header.addWidget(self._value_label)
        layout.addLayout(header)

        self._slider = QSlider(Qt.Horizontal)
        self._slider.setRange(minimum, maximum)
        self._slider.setSingleStep(step)
        self._slider.setPageStep(step)
        self._slider.setTickInterval(step)
        self._slider.valueChanged.connect(self._on_slider_changed)
        layout.addWidget(self._slider)

        set_accessible(self._slider, title, f"{title} ({minimum}-{maximum}{suffix})")
        self._update_label(self._slider.value())

    def _on_slider_changed(self, value: int):
        # Snap to the step grid (the gap slider moves in 4px increments)
        snapped = round(value / self._step) * self._step
        if snapped != value:
            self._slider.setValue(snapped)
            return
        self._update_label(value)
        self.valueChanged.emit(value)

    def _update_label(self, value: int):
        self._value_label.setText(f"{value}{self._suffix}")

    def value(self) -> int:
        return self._slider.value()

    def setValue(self, value: int):
        self._slider.setValue(value)
        self._update_label(self._slider.value())


class ControlsPanel(QWidget):
    """Structure and output controls."""

    config_changed = pyqtSignal(object)   # GridConfig
    output_changed = pyqtSignal(object)   # OutputSettings

    def __init__(self, config: GridConfig, output: OutputSettings, parent=None):
        super().__init__(parent)
        self._config = config
        self._output = output.normalized()
        self._updating = False  # Prevent signal loops during programmatic updates
        self._setup_ui()
        self._load_values()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM)
        layout.setSpacing(sc.SPACING_LG)

        # Structure
        structure = QGroupBox("STRUCTURE")
        structure.setStyleSheet(f"QGroupBox {{ {sc.SECTION_HEADER_STYLE} }}")
        structure_layout = QVBoxLayout(structure)

        self._columns = LabeledSlider("Columns", *COLUMN_RANGE)
        self._columns.valueChanged.connect(self._on_structure_changed)
        structure_layout.addWidget(self._columns)

        self._rows = LabeledSlider("Rows", *ROW_RANGE)
        self._rows.valueChanged.connect(self._on_structure_changed)
        structure_layout.addWidget(self._rows)

        self._gap = LabeledSlider("Gap", *GAP_RANGE, step=GAP_STEP, suffix="px")
        self._gap.valueChanged.connect(self._on_structure_changed)
        structure_layout.addWidget(self._gap)

        self._split_gap = QCheckBox("Separate column/row gap")
        self._split_gap.toggled.connect(self._on_split_gap_toggled)
        set_accessible(self._split_gap, "Separate gaps",
                       "Use different column and row gaps instead of one uniform gap")
        structure_layout.addWidget(self._split_gap)

        self._column_gap = LabeledSlider("Column gap", *GAP_RANGE, step=GAP_STEP, suffix="px")
        self._column_gap.valueChanged.connect(self._on_structure_changed)
        structure_layout.addWidget(self._column_gap)

        self._row_gap = LabeledSlider("Row gap", *GAP_RANGE, step=GAP_STEP, suffix="px")
        self._row_gap.valueChanged.connect(self._on_structure_changed)
        structure_layout.addWidget(self._row_gap)

        layout.addWidget(structure)

        # Output
        output = QGroupBox("OUTPUT")
        output.setStyleSheet(f"QGroupBox {{ {sc.SECTION_HEADER_STYLE} }}")
        output_layout = QVBoxLayout(output)

        output_layout.addWidget(QLabel("CSS"))
        self._format_combo = QComboBox()
        for fmt, label in CSS_FORMAT_LABELS:
            self._format_combo.addItem(label, fmt)
        self._format_combo.currentIndexChanged.connect(self._on_output_changed)
        set_accessible(self._format_combo, "CSS format", "Styling system for the generated code")
        output_layout.addWidget(self._format_combo)

        self._framework_label = QLabel("Framework")
        output_layout.addWidget(self._framework_label)
        self._framework_combo = QComboBox()
        for framework, label in UI_FRAMEWORK_LABELS:
            self._framework_combo.addItem(label, framework)
        self._framework_combo.currentIndexChanged.connect(self._on_output_changed)
        set_accessible(self._framework_combo, "UI framework",
                       "Component library used to wrap the Tailwind grid")
        output_layout.addWidget(self._framework_combo)

        output_layout.addWidget(QLabel("Container class"))
        self._container_edit = QLineEdit()
        self._container_edit.editingFinished.connect(self._on_output_changed)
        set_accessible(self._container_edit, "Container class",
                       "Class name of the grid container in vanilla CSS output")
        output_layout.addWidget(self._container_edit)

        layout.addWidget(output)
        layout.addStretch()

    def _load_values(self):
        self._updating = True
        try:
            config = self._config
            self._columns.setValue(config.columns)
            self._rows.setValue(config.rows)
            self._gap.setValue(int(config.gap))
            self._column_gap.setValue(int(config.column_gap))
            self._row_gap.setValue(int(config.row_gap))
            self._split_gap.setChecked(not config.use_uniform_gap)

            output = self._output
            self._format_combo.setCurrentIndex(self._format_combo.findData(output.css_format))
            self._framework_combo.setCurrentIndex(self._framework_combo.findData(output.ui_framework))
            self._container_edit.setText(output.container_class_name)
        finally:
            self._updating = False
        self._update_visibility()

    def _update_visibility(self):
        split = not self._config.use_uniform_gap
        self._gap.setVisible(not split)
        self._column_gap.setVisible(split)
        self._row_gap.setVisible(split)

        is_tailwind = self._output.css_format is CSSFormat.TAILWIND
        self._framework_label.setVisible(is_tailwind)
        self._framework_combo.setVisible(is_tailwind)
        self._container_edit.setEnabled(self._output.css_format is CSSFormat.VANILLA)

    def _on_split_gap_toggled(self, checked: bool):
        if self._updating:
            return
        self._on_structure_changed()

    def _on_structure_changed(self, *_):
        if self._updating:
            return

        split = self._split_gap.isChecked()
        config = GridConfig(
            columns=self._columns.value(),
            rows=self._rows.value(),
            gap=self._gap.value(),
            column_gap=self._column_gap.value(),
            row_gap=self._row_gap.value(),
            use_uniform_gap=not split,
        )
        if not split:
            # One slider drives all three gaps
            config = config.with_gap(self._gap.value())
            self._updating = True
            try:
                self._column_gap.setValue(self._gap.value())
                self._row_gap.setValue(self._gap.value())
            finally:
                self._updating = False

        self._config = config
        self._update_visibility()
        self.config_changed.emit(config)

    def _on_output_changed(self, *_):
        if self._updating:
            return

        output = OutputSettings(
            css_format=self._format_combo.currentData(),
            ui_framework=self._framework_combo.currentData(),
            container_class_name=self._container_edit.text().strip() or "grid-container",
        ).normalized()

        if output.ui_framework != self._framework_combo.currentData():
            self._updating = True
            try:
                self._framework_combo.setCurrentIndex(self._framework_combo.findData(output.ui_framework))
            finally:
                self._updating = False

        if output == self._output:
            return
        self._output = output
        self._update_visibility()
        self.output_changed.emit(output)

    def set_config(self, config: GridConfig):
        self._config = config
        self._load_values()

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def output(self) -> OutputSettings:
        return self._output
