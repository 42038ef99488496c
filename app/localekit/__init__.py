"""localekit - dotted-identifier translation lookup.

Example:
    from localekit import Translator

    translator = Translator(
        supported_locales=["en", "ar"],
        localizations={"en": {"general": {"Hello_World": "Hello World"}}},
    )
    translator.t("general.Hello_World")  # "Hello World"
"""

from localekit.i18n import (
    I18nConfig,
    TextDirection,
    Translator,
    create_translator,
)

__version__ = "1.4.2"

__all__ = [
    "I18nConfig",
    "TextDirection",
    "Translator",
    "create_translator",
]
