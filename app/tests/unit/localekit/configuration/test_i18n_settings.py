"""Unit tests for localekit.configuration settings.

Tests cover:
- I18nSettings defaults and I18N_* environment overrides
- Settings aggregator initialization
"""

import pytest

from localekit.configuration import I18nSettings, Settings

I18N_ENV_VARS = [
    "I18N_SUPPORTED_LOCALES",
    "I18N_CURRENT_LOCALE",
    "I18N_FALLBACK_LOCALE",
    "I18N_RTL_LOCALES",
    "I18N_LOCALES_DIR",
    "I18N_FEATURES_DIR",
    "I18N_PRELOAD",
    "I18N_SHOW_MISSING_IDENTIFIER_MESSAGE",
    "I18N_MISSING_IDENTIFIER_MESSAGE",
    "I18N_SHOW_LOGS",
]


@pytest.fixture(autouse=True)
def clean_i18n_env(monkeypatch):
    for name in I18N_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
class TestI18nSettings:
    """Test suite for I18nSettings."""

    def test_defaults(self):
        i18n = I18nSettings()

        assert i18n.supported_locales == ["en"]
        assert i18n.current_locale == "en"
        assert i18n.fallback_locale == "en"
        assert i18n.rtl_locales == ["ar", "he", "fa", "ur"]
        assert i18n.locales_dir is None
        assert i18n.features_dir is None
        assert i18n.preload is True
        assert i18n.show_missing_identifier_message is False
        assert i18n.missing_identifier_message == "Missing_Localization_Identifier"
        assert i18n.show_logs is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("I18N_SUPPORTED_LOCALES", '["en", "ar", "fr"]')
        monkeypatch.setenv("I18N_CURRENT_LOCALE", "ar")
        monkeypatch.setenv("I18N_FALLBACK_LOCALE", "fr")
        monkeypatch.setenv("I18N_LOCALES_DIR", "/srv/locales")
        monkeypatch.setenv("I18N_PRELOAD", "false")
        monkeypatch.setenv("I18N_SHOW_MISSING_IDENTIFIER_MESSAGE", "true")
        monkeypatch.setenv("I18N_MISSING_IDENTIFIER_MESSAGE", "???")

        i18n = I18nSettings()

        assert i18n.supported_locales == ["en", "ar", "fr"]
        assert i18n.current_locale == "ar"
        assert i18n.fallback_locale == "fr"
        assert i18n.locales_dir == "/srv/locales"
        assert i18n.preload is False
        assert i18n.show_missing_identifier_message is True
        assert i18n.missing_identifier_message == "???"

    def test_partial_override_keeps_defaults(self, monkeypatch):
        monkeypatch.setenv("I18N_RTL_LOCALES", '["ar"]')

        i18n = I18nSettings()

        assert i18n.rtl_locales == ["ar"]
        assert i18n.supported_locales == ["en"]

    def test_populate_by_field_name(self):
        i18n = I18nSettings(supported_locales=["en", "ar"], current_locale="ar")

        assert i18n.supported_locales == ["en", "ar"]
        assert i18n.current_locale == "ar"


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_includes_i18n(self):
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)

    def test_settings_accepts_i18n_override(self):
        i18n = I18nSettings(fallback_locale="ar")

        settings = Settings(i18n=i18n)

        assert settings.i18n is i18n

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
