"""Localization settings."""

from typing import List, Optional

from pydantic import Field

from localekit.configuration.base import LocalekitSettings


class I18nSettings(LocalekitSettings):
    """Environment defaults for translators built by the factory.

    Environment Variables:
        I18N_SUPPORTED_LOCALES: JSON list of supported locale codes (default: ["en"])
        I18N_CURRENT_LOCALE: Locale used at startup (default: en)
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing (default: en)
        I18N_RTL_LOCALES: JSON list of right-to-left locale codes
        I18N_LOCALES_DIR: Directory laid out as <locale>/<namespace>.json
        I18N_FEATURES_DIR: Directory laid out as <feature>/locales/<locale>.json
        I18N_PRELOAD: Load every namespace file at startup (default: True)
        I18N_SHOW_MISSING_IDENTIFIER_MESSAGE: Show the placeholder instead of
            echoing unknown identifiers (default: False)
        I18N_MISSING_IDENTIFIER_MESSAGE: The placeholder text
        I18N_SHOW_LOGS: Emit translator lifecycle events at info instead of debug

    Example:
        ```python
        from localekit.configuration import settings

        if settings.i18n.locales_dir:
            ...
        ```
    """

    supported_locales: List[str] = Field(
        default_factory=lambda: ["en"],
        alias="I18N_SUPPORTED_LOCALES",
        description="Ordered list of supported locale codes",
    )
    current_locale: str = Field(
        default="en",
        alias="I18N_CURRENT_LOCALE",
        description="Locale used at startup",
    )
    fallback_locale: str = Field(
        default="en",
        alias="I18N_FALLBACK_LOCALE",
        description="Locale consulted when the current locale lacks an entry",
    )
    rtl_locales: List[str] = Field(
        default_factory=lambda: ["ar", "he", "fa", "ur"],
        alias="I18N_RTL_LOCALES",
        description="Locales rendered right-to-left",
    )
    locales_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory of <locale>/<namespace>.json files",
    )
    features_dir: Optional[str] = Field(
        default=None,
        alias="I18N_FEATURES_DIR",
        description="Directory of <feature>/locales/<locale>.json files",
    )
    preload: bool = Field(
        default=True,
        alias="I18N_PRELOAD",
        description="Load every namespace file when the translator is configured",
    )
    show_missing_identifier_message: bool = Field(
        default=False,
        alias="I18N_SHOW_MISSING_IDENTIFIER_MESSAGE",
        description="Show the missing identifier placeholder instead of the identifier",
    )
    missing_identifier_message: str = Field(
        default="Missing_Localization_Identifier",
        alias="I18N_MISSING_IDENTIFIER_MESSAGE",
        description="Placeholder shown for unknown identifiers",
    )
    show_logs: bool = Field(
        default=False,
        alias="I18N_SHOW_LOGS",
        description="Emit translator lifecycle events at info instead of debug",
    )
