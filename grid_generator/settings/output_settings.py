"""
Output preferences stored in QSettings.

Remembers which dialect the user last picked so the code panel opens
on the same output. Only the output choice is stored; the grid itself
and its items are never persisted.

Usage:
    from grid_generator.settings.output_settings import OUTPUT_PREFERENCES

    settings = OUTPUT_PREFERENCES.load()
    OUTPUT_PREFERENCES.save(settings)
"""

import logging
from typing import Optional

from PyQt5.QtCore import QSettings

from ..editor.data_model import (
    CSSFormat, UIFramework, OutputSettings, DEFAULT_OUTPUT_SETTINGS,
)

logger = logging.getLogger(__name__)

SETTINGS_ORG = "GridGenerator"
SETTINGS_APP = "Output"

KEY_CSS_FORMAT = "output/css_format"
KEY_UI_FRAMEWORK = "output/ui_framework"
KEY_CONTAINER_CLASS = "output/container_class_name"


class OutputPreferences:
    """Persistent output settings backed by QSettings.

    Invalid stored values fall back to the defaults. QSettings is
    accessed lazily so the store can be created before a QApplication
    exists.
    """

    def __init__(self, settings: Optional[QSettings] = None):
        self._settings = settings

    def _get_settings(self) -> QSettings:
        """Get or create the QSettings instance.

        Recreates the object if the underlying C++ instance was deleted.
        """
        try:
            if self._settings is not None:
                self._settings.organizationName()
                return self._settings
        except RuntimeError:
            pass

        self._settings = QSettings(SETTINGS_ORG, SETTINGS_APP)
        return self._settings

    def load(self) -> OutputSettings:
        settings = self._get_settings()
        default = DEFAULT_OUTPUT_SETTINGS

        raw_format = settings.value(KEY_CSS_FORMAT, default.css_format.value, type=str)
        raw_framework = settings.value(KEY_UI_FRAMEWORK, default.ui_framework.value, type=str)
        container = settings.value(KEY_CONTAINER_CLASS, default.container_class_name, type=str)

        try:
            css_format = CSSFormat(raw_format)
        except ValueError:
            logger.warning("Ignoring stored css format %r", raw_format)
            css_format = default.css_format

        try:
            ui_framework = UIFramework(raw_framework)
        except ValueError:
            logger.warning("Ignoring stored UI framework %r", raw_framework)
            ui_framework = default.ui_framework

        container = container.strip() or default.container_class_name

        return OutputSettings(
            css_format=css_format,
            ui_framework=ui_framework,
            container_class_name=container,
        ).normalized()

    def save(self, output: OutputSettings):
        output = output.normalized()
        settings = self._get_settings()
        settings.setValue(KEY_CSS_FORMAT, output.css_format.value)
        settings.setValue(KEY_UI_FRAMEWORK, output.ui_framework.value)
        settings.setValue(KEY_CONTAINER_CLASS, output.container_class_name)
        settings.sync()
        logger.debug("Saved output preferences: %s/%s", output.css_format, output.ui_framework)

    def reset_to_defaults(self):
        """Clear stored values, reverting to defaults."""
        settings = self._get_settings()
        for key in (KEY_CSS_FORMAT, KEY_UI_FRAMEWORK, KEY_CONTAINER_CLASS):
            settings.remove(key)
        settings.sync()


OUTPUT_PREFERENCES = OutputPreferences()
