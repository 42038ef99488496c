"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization settings section

Example:
    ```python
    from localekit.configuration import settings

    supported = settings.i18n.supported_locales
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
