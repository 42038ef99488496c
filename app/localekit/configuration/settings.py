"""localekit configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from localekit.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """localekit configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        APP_VERSION: Version reported in log entries

    Example:
        ```python
        from localekit.configuration import settings

        fallback = settings.i18n.fallback_locale

        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    APP_VERSION: str = "unknown"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
