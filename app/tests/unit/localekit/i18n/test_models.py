"""Tests for localekit.i18n.models module."""

import pytest
from pydantic import ValidationError

from localekit.i18n.models import (
    I18nConfig,
    LocaleCatalog,
    Missing,
    PluralRecord,
    StringValue,
    TextDirection,
)
from tests.factories.i18n import make_i18n_config, make_locale_catalog


@pytest.mark.unit
class TestResolvedValues:
    """Tests for the resolved-value union."""

    def test_missing_is_singleton(self):
        """Missing is a falsy singleton."""
        assert Missing is type(Missing)()
        assert not Missing
        assert repr(Missing) == "Missing"

    def test_missing_differs_from_empty_string(self):
        """An empty StringValue is not Missing."""
        assert StringValue("") is not Missing
        assert StringValue("") == StringValue("")

    def test_plural_record_valid_with_any_reserved_key(self):
        """is_valid is True when one of zero/one/two/other is present."""
        assert PluralRecord({"one": "One item"}).is_valid
        assert PluralRecord({"other": "{n} items"}).is_valid

    def test_plural_record_invalid_without_reserved_keys(self):
        """A plain sub-tree is not a plural record."""
        assert not PluralRecord({"title": "Title"}).is_valid

    def test_plural_record_get_form_ignores_non_strings(self):
        """get_form() returns None for absent or non-string forms."""
        record = PluralRecord({"one": "One item", "other": {"nested": "x"}})
        assert record.get_form("one") == "One item"
        assert record.get_form("other") is None
        assert record.get_form("two") is None


@pytest.mark.unit
class TestTextDirection:
    """Tests for TextDirection enum."""

    def test_values(self):
        assert TextDirection.LTR == "ltr"
        assert TextDirection.RTL.value == "rtl"


@pytest.mark.unit
class TestLocaleCatalog:
    """Tests for LocaleCatalog."""

    def test_add_namespace_updates_merged_view(self):
        """add_namespace() stores the tree and merges its root keys."""
        catalog = LocaleCatalog(locale="en")
        catalog.add_namespace("common", {"Success": "Success"})

        assert catalog.get_namespace("common") == {"Success": "Success"}
        assert catalog.merged == {"Success": "Success"}

    def test_merged_view_last_loaded_wins(self):
        """Duplicate keys across namespaces take the last loaded value."""
        catalog = LocaleCatalog(locale="en")
        catalog.add_namespace("first", {"Title": "First", "Only_First": "1"})
        catalog.add_namespace("second", {"Title": "Second"})

        assert catalog.merged["Title"] == "Second"
        assert catalog.merged["Only_First"] == "1"
        assert catalog.get_namespace("first")["Title"] == "First"

    def test_readding_namespace_moves_it_last(self):
        """Re-adding a namespace re-applies it on top of the merged view."""
        catalog = LocaleCatalog(locale="en")
        catalog.add_namespace("first", {"Title": "First"})
        catalog.add_namespace("second", {"Title": "Second"})
        catalog.add_namespace("first", {"Title": "First again"})

        assert catalog.merged["Title"] == "First again"
        assert list(catalog.namespaces) == ["second", "first"]

    def test_has_namespace(self):
        catalog = make_locale_catalog()
        assert catalog.has_namespace("general")
        assert not catalog.has_namespace("missing")
        assert catalog.get_namespace("missing") is None

    def test_replaced_namespace_keys_leave_merged_view(self):
        """Keys only the replaced tree had no longer resolve."""
        catalog = make_locale_catalog(
            namespaces={"general": {"Hello_World": "Hi", "Old": "stale"}}
        )

        catalog.add_namespace("general", {"Hello_World": "Hello"})

        assert catalog.merged == {"Hello_World": "Hello"}
        assert catalog.get_namespace("general") == {"Hello_World": "Hello"}

    def test_replacing_namespace_restores_shadowed_keys(self):
        catalog = make_locale_catalog(
            namespaces={"first": {"Title": "First"}, "second": {"Title": "Second"}}
        )

        catalog.add_namespace("second", {"Other": "x"})

        assert catalog.merged["Title"] == "First"

    def test_entries_survive_namespace_replacement(self):
        """Top-level entries outside any namespace are applied last."""
        catalog = make_locale_catalog(namespaces={"general": {"Title": "Namespaced"}})
        catalog.add_entry("Title", "Top level")

        catalog.add_namespace("general", {"Title": "Replaced", "New": "n"})

        assert catalog.merged == {"Title": "Top level", "New": "n"}
        assert catalog.entries == {"Title": "Top level"}


@pytest.mark.unit
class TestI18nConfig:
    """Tests for I18nConfig."""

    def test_defaults(self):
        config = I18nConfig()
        assert config.supported_locales == ["en"]
        assert config.current_locale == "en"
        assert config.fallback_locale == "en"
        assert "ar" in config.rtl_locales
        assert config.show_missing_identifier_message is False
        assert config.missing_identifier_message == "Missing_Localization_Identifier"
        assert config.localizations == {}
        assert config.preload is True

    def test_empty_supported_locales_rejected(self):
        with pytest.raises(ValidationError):
            I18nConfig(supported_locales=[])

    def test_paths_are_stringified(self, tmp_path):
        config = I18nConfig(locales_dir=tmp_path)
        assert config.locales_dir == str(tmp_path)

    def test_missing_fallback_follows_policy(self):
        """missing_fallback is the placeholder only when the policy is on."""
        assert make_i18n_config().missing_fallback == ""
        config = make_i18n_config(
            show_missing_identifier_message=True,
            missing_identifier_message="???",
        )
        assert config.missing_fallback == "???"
