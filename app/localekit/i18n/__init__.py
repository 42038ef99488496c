"""i18n system - dotted-identifier localization lookup.

Main components:
- models: resolved-value union, LocaleCatalog, I18nConfig, TextDirection
- resolver: identifier resolution across merged and namespace tiers
- formatter: plural form selection and placeholder substitution
- loader: TreeLoader and FileTreeLoader (JSON/YAML)
- translator: Translator service
- factory: create_translator() from environment settings
"""

from localekit.i18n.factory import config_from_settings, create_translator
from localekit.i18n.formatter import format_message, replace_data
from localekit.i18n.loader import FileTreeLoader, TreeLoader
from localekit.i18n.models import (
    PLURAL_FORMS,
    I18nConfig,
    LocaleCatalog,
    Missing,
    PluralRecord,
    StringValue,
    TextDirection,
)
from localekit.i18n.resolver import Tier, resolve, search_tree
from localekit.i18n.translator import Translator

__all__ = [
    "PLURAL_FORMS",
    "I18nConfig",
    "LocaleCatalog",
    "Missing",
    "PluralRecord",
    "StringValue",
    "TextDirection",
    "Tier",
    "resolve",
    "search_tree",
    "format_message",
    "replace_data",
    "TreeLoader",
    "FileTreeLoader",
    "Translator",
    "create_translator",
    "config_from_settings",
]
