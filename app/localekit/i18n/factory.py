"""Factory functions for creating i18n components.

Provides a convenience function for building a Translator from the
environment-driven settings.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from localekit.configuration import I18nSettings, settings
from localekit.i18n.loader import TreeLoader
from localekit.i18n.models import I18nConfig
from localekit.i18n.translator import Translator
from localekit.logging import get_module_logger

logger = get_module_logger()


def config_from_settings(i18n_settings: Optional[I18nSettings] = None) -> I18nConfig:
    """Build an I18nConfig from I18nSettings (default: the global settings)."""
    source = i18n_settings or settings.i18n
    return I18nConfig(
        supported_locales=source.supported_locales,
        current_locale=source.current_locale,
        fallback_locale=source.fallback_locale,
        rtl_locales=source.rtl_locales,
        locales_dir=source.locales_dir,
        features_dir=source.features_dir,
        preload=source.preload,
        show_missing_identifier_message=source.show_missing_identifier_message,
        missing_identifier_message=source.missing_identifier_message,
        show_logs=source.show_logs,
    )


def create_translator(
    locales_dir: Optional[Path] = None,
    features_dir: Optional[Path] = None,
    loader: Optional[TreeLoader] = None,
    i18n_settings: Optional[I18nSettings] = None,
    **overrides: Any,
) -> Translator:
    """Create and configure a Translator instance.

    Settings come from the environment (I18N_* variables); explicit
    arguments win over them.

    Args:
        locales_dir: Directory of <locale>/<namespace>.json files.
        features_dir: Directory of <feature>/locales/<locale>.json files.
        loader: TreeLoader to use (default: FileTreeLoader when a directory
            is configured).
        i18n_settings: Settings to read instead of the global ones.
        **overrides: Any other I18nConfig field.

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use environment settings
        translator = create_translator()

        # Custom locales directory, lazy loading
        translator = create_translator(locales_dir=Path("locales"), preload=False)
    """
    config = config_from_settings(i18n_settings)

    if locales_dir is not None:
        overrides["locales_dir"] = str(locales_dir)
    if features_dir is not None:
        overrides["features_dir"] = str(features_dir)

    translator = Translator(config, loader=loader, **overrides)

    logger.log(
        logging.INFO if translator.show_logs else logging.DEBUG,
        "translator_created",
        locales_dir=translator.config.locales_dir,
        features_dir=translator.config.features_dir,
        preload=translator.config.preload,
        locale_count=len(translator.catalogs),
    )
    return translator
