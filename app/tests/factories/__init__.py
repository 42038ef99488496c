"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_general_tree,
    make_i18n_config,
    make_locale_catalog,
    make_localizations,
)

__all__ = [
    "make_general_tree",
    "make_i18n_config",
    "make_locale_catalog",
    "make_localizations",
]
