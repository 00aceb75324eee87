"""
Tests for QSettings-backed output preferences.

Uses an INI-format QSettings file under tmp_path, so no display or
QApplication is required.
"""

import pytest

QtCore = pytest.importorskip("PyQt5.QtCore")

from grid_generator.editor import CSSFormat, OutputSettings, UIFramework  # noqa: E402
from grid_generator.settings.output_settings import (  # noqa: E402
    KEY_CSS_FORMAT, KEY_UI_FRAMEWORK, OutputPreferences,
)


@pytest.fixture
def qsettings(tmp_path):
    return QtCore.QSettings(str(tmp_path / "output.ini"), QtCore.QSettings.IniFormat)


@pytest.fixture
def prefs(qsettings):
    return OutputPreferences(qsettings)


def test_load_defaults_when_empty(prefs):
    assert prefs.load() == OutputSettings()


def test_save_and_load_round_trip(prefs, qsettings):
    prefs.save(OutputSettings(CSSFormat.TAILWIND, UIFramework.CHAKRA, "layout"))

    reloaded = OutputPreferences(qsettings).load()
    assert reloaded.css_format is CSSFormat.TAILWIND
    assert reloaded.ui_framework is UIFramework.CHAKRA
    assert reloaded.container_class_name == "layout"


def test_save_drops_framework_outside_tailwind(prefs):
    prefs.save(OutputSettings(CSSFormat.BOOTSTRAP, UIFramework.MUI))
    assert prefs.load() == OutputSettings(CSSFormat.BOOTSTRAP, UIFramework.NONE)


def test_invalid_stored_values_fall_back(prefs, qsettings):
    qsettings.setValue(KEY_CSS_FORMAT, "sass")
    qsettings.setValue(KEY_UI_FRAMEWORK, "bulma")

    loaded = prefs.load()
    assert loaded.css_format is CSSFormat.VANILLA
    assert loaded.ui_framework is UIFramework.NONE


def test_reset_to_defaults(prefs):
    prefs.save(OutputSettings(CSSFormat.TAILWIND, UIFramework.ANTD, "app-grid"))
    prefs.reset_to_defaults()
    assert prefs.load() == OutputSettings()
