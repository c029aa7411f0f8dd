"""Tests for configuration defaults and feature flags."""

import importlib

import pytest

from flow_layout.config import settings


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload settings after environment changes, restoring them afterwards."""
    def _reload():
        return importlib.reload(settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings)


class TestFeatureFlags:
    """Test feature flag access."""

    def test_include_row_count_default(self, reload_settings, monkeypatch):
        monkeypatch.delenv("FLOW_LAYOUT_INCLUDE_ROW_COUNT", raising=False)
        module = reload_settings()
        assert module.is_enabled("include_row_count") is True

    def test_flag_from_environment(self, reload_settings, monkeypatch):
        monkeypatch.setenv("FLOW_LAYOUT_INCLUDE_ROW_COUNT", "false")
        module = reload_settings()
        assert module.is_enabled("include_row_count") is False

    def test_unknown_flag(self):
        with pytest.raises(KeyError, match="Unknown feature flag"):
            settings.is_enabled("no_such_flag")

    def test_set_flag(self):
        original = settings.is_enabled("include_row_count")
        try:
            settings.set_flag("include_row_count", not original)
            assert settings.is_enabled("include_row_count") is (not original)
        finally:
            settings.set_flag("include_row_count", original)

    def test_set_unknown_flag(self):
        with pytest.raises(KeyError, match="Available flags: include_row_count"):
            settings.set_flag("no_such_flag", True)

    def test_get_all_flags_is_copy(self):
        flags = settings.get_all_flags()
        flags["include_row_count"] = "changed"
        assert settings.get_all_flags()["include_row_count"] != "changed"


class TestDefaultOptions:
    """Test engine option defaults."""

    def test_builtin_defaults(self, reload_settings, monkeypatch):
        for name in (
            "FLOW_LAYOUT_DIRECTION",
            "FLOW_LAYOUT_HORIZONTAL_ALIGNMENT",
            "FLOW_LAYOUT_VERTICAL_ALIGNMENT",
            "FLOW_LAYOUT_HORIZONTAL_SPACING",
            "FLOW_LAYOUT_VERTICAL_SPACING",
        ):
            monkeypatch.delenv(name, raising=False)
        module = reload_settings()
        assert module.get_default_options() == {
            "direction": "forward",
            "horizontal_alignment": "leading",
            "vertical_alignment": "top",
            "horizontal_spacing": "0",
            "vertical_spacing": "0",
        }

    def test_defaults_from_environment(self, reload_settings, monkeypatch):
        monkeypatch.setenv("FLOW_LAYOUT_DIRECTION", "REVERSE")
        monkeypatch.setenv("FLOW_LAYOUT_HORIZONTAL_SPACING", "12")
        module = reload_settings()
        options = module.get_default_options()
        assert options["direction"] == "reverse"
        assert options["horizontal_spacing"] == "12"

    def test_get_default_options_is_copy(self):
        options = settings.get_default_options()
        options["direction"] = "sideways"
        assert settings.get_default_options()["direction"] != "sideways"

    def test_log_level_from_environment(self, reload_settings, monkeypatch):
        monkeypatch.setenv("FLOW_LAYOUT_LOG_LEVEL", "debug")
        module = reload_settings()
        assert module.LOG_LEVEL == "DEBUG"
