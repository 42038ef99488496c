"""Translation service for resolving and formatting localized messages.

The Translator owns the configuration and the Locale Table, builds the tier
sequence for each lookup, and hands the resolved value to the formatter.
Lookups never raise: unknown identifiers, malformed plural records and
unreadable files all degrade to a fallback string and a log event.

Tier order for an identifier whose first segment is `ns`:
    1. current locale, merged view
    2. current locale, namespace `ns` (loaded from disk on first use)
    3. fallback locale, merged view
    4. fallback locale, namespace `ns`
    5. merged views again, without the `ns.` prefix
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from localekit.i18n import formatter
from localekit.i18n.loader import FileTreeLoader, TreeLoader
from localekit.i18n.models import (
    I18nConfig,
    LocaleCatalog,
    LocalizationTree,
    Missing,
    PluralRecord,
    StringValue,
    TextDirection,
)
from localekit.i18n.resolver import Tier, resolve, resolve_in_tier, split_identifier
from localekit.logging import get_module_logger

logger = get_module_logger()

# Distinct (locale, namespace) misses remembered before the record is reset
UNAVAILABLE_LIMIT = 1024


class Translator:
    """Service for translating dotted identifiers with data interpolation.

    Attributes:
        config: Validated I18nConfig.
        loader: TreeLoader used for file-backed namespaces, or None for
            in-memory only operation.
        catalogs: Locale Table, {locale: LocaleCatalog}.

    Example:
        translator = Translator(
            supported_locales=["en", "ar"],
            locales_dir="locales",
        )
        translator.t("general.Welcome_Message", {"name": "John Doe"})
    """

    def __init__(
        self,
        config: Optional[I18nConfig] = None,
        loader: Optional[TreeLoader] = None,
        **overrides: Any,
    ):
        """Initialize Translator.

        Args:
            config: Base configuration (default: I18nConfig()).
            loader: TreeLoader for locale files. When omitted, a
                FileTreeLoader is created only if a locales or features
                directory is configured; with neither, the translator works
                from in-memory localizations alone.
            **overrides: I18nConfig fields overriding `config`.
        """
        self.loader = loader
        self.catalogs: Dict[str, LocaleCatalog] = {}
        self._unavailable: Set[Tuple[str, str]] = set()
        self.config = I18nConfig()
        self._apply(config or I18nConfig(), overrides)

    def configure(self, **overrides: Any) -> "Translator":
        """Re-configure the translator and rebuild the Locale Table.

        Args:
            **overrides: I18nConfig fields to change; others keep their
                current values.

        Returns:
            The translator, for chaining.
        """
        self._apply(self.config, overrides)
        return self

    def _apply(self, base: I18nConfig, overrides: Mapping[str, Any]) -> None:
        config = I18nConfig(**{**base.model_dump(), **overrides})

        if config.current_locale not in config.supported_locales:
            replacement = (
                config.fallback_locale
                if config.fallback_locale in config.supported_locales
                else config.supported_locales[0]
            )
            logger.warning(
                "unsupported_current_locale",
                locale=config.current_locale,
                replacement=replacement,
                supported_locales=config.supported_locales,
            )
            config.current_locale = replacement

        self.config = config
        if self.loader is None and (config.locales_dir or config.features_dir):
            self.loader = FileTreeLoader()

        self.reload()
        self._trace(
            "initialized_translator",
            current_locale=config.current_locale,
            fallback_locale=config.fallback_locale,
            supported_locales=config.supported_locales,
            file_backed=self.loader is not None,
        )

    # ------------------------------------------------------------------
    # Configuration accessors
    # ------------------------------------------------------------------

    @property
    def current_locale(self) -> str:
        return self.config.current_locale

    @property
    def supported_locales(self) -> List[str]:
        return list(self.config.supported_locales)

    @property
    def fallback_locale(self) -> str:
        return self.config.fallback_locale

    @property
    def rtl_locales(self) -> List[str]:
        return list(self.config.rtl_locales)

    @property
    def show_logs(self) -> bool:
        return self.config.show_logs

    def _trace(self, event: str, **context: Any) -> None:
        """Log a lifecycle event at info when show_logs is on, else at debug."""
        level = logging.INFO if self.config.show_logs else logging.DEBUG
        logger.log(level, event, **context)

    def is_locale_supported(self, locale: str) -> bool:
        return locale in self.config.supported_locales

    def set_current_locale(self, locale: str) -> bool:
        """Switch the current locale.

        Unsupported locales are rejected and logged; the current locale is
        left unchanged.

        Args:
            locale: Locale code to switch to.

        Returns:
            True if the locale was accepted, False otherwise.
        """
        if not self.is_locale_supported(locale):
            logger.warning(
                "locale_change_rejected",
                locale=locale,
                current_locale=self.config.current_locale,
                supported_locales=self.config.supported_locales,
            )
            return False

        self.config.current_locale = locale
        self._trace("current_locale_changed", locale=locale)
        return True

    change_current_locale = set_current_locale

    def current_locale_is_rtl(self) -> bool:
        return self.config.current_locale in self.config.rtl_locales

    @property
    def is_current_locale_rtl(self) -> bool:
        return self.current_locale_is_rtl()

    @property
    def is_current_locale_ltr(self) -> bool:
        return not self.current_locale_is_rtl()

    def text_direction(self) -> TextDirection:
        """Writing direction of the current locale."""
        if self.current_locale_is_rtl():
            return TextDirection.RTL
        return TextDirection.LTR

    # ------------------------------------------------------------------
    # Locale Table population
    # ------------------------------------------------------------------

    def _catalog(self, locale: str) -> LocaleCatalog:
        if locale not in self.catalogs:
            self.catalogs[locale] = LocaleCatalog(locale=locale)
        return self.catalogs[locale]

    def get_catalog(self, locale: str) -> Optional[LocaleCatalog]:
        """Get the catalog for a locale, or None if nothing is loaded for it."""
        return self.catalogs.get(locale)

    def add_localizations(self, localizations: Mapping[str, Mapping[str, Any]]) -> None:
        """Add in-memory localizations to the Locale Table.

        Args:
            localizations: {locale: {namespace: tree}}. Top-level entries that
                are not mappings are added to the merged view directly.
        """
        for locale, namespaces in localizations.items():
            catalog = self._catalog(locale)
            for namespace, tree in namespaces.items():
                if isinstance(tree, Mapping):
                    catalog.add_namespace(namespace, tree)
                else:
                    catalog.add_entry(namespace, tree)

    def load_namespace(self, locale: str, namespace: str) -> bool:
        """Load a namespace from disk into the Locale Table.

        Args:
            locale: Locale code.
            namespace: Namespace (file or feature) name.

        Returns:
            True if a tree was loaded, False if none is available.
        """
        if self.loader is None:
            return False

        tree = self.loader.load_namespace(
            locale,
            namespace,
            locales_dir=self.config.locales_dir,
            features_dir=self.config.features_dir,
        )
        if tree is None:
            if len(self._unavailable) >= UNAVAILABLE_LIMIT:
                self._unavailable.clear()
            self._unavailable.add((locale, namespace))
            return False

        self._catalog(locale).add_namespace(namespace, tree)
        self._trace("loaded_namespace", locale=locale, namespace=namespace)
        return True

    def preload(self) -> None:
        """Load every namespace available on disk for the known locales."""
        if self.loader is None:
            return

        for locale in self._known_locales():
            namespaces = self.loader.list_namespaces(
                locale,
                locales_dir=self.config.locales_dir,
                features_dir=self.config.features_dir,
            )
            for namespace in namespaces:
                self.load_namespace(locale, namespace)

        self._trace(
            "preloaded_translations",
            locale_count=len(self.catalogs),
            namespace_count=sum(len(c.namespaces) for c in self.catalogs.values()),
        )

    def reload(self) -> None:
        """Drop every cached tree and rebuild the Locale Table."""
        self.catalogs.clear()
        self._unavailable.clear()
        if self.config.preload:
            self.preload()
        # In-memory localizations are applied last so they win over files
        self.add_localizations(self.config.localizations)

    def _known_locales(self) -> List[str]:
        locales = list(self.config.supported_locales)
        if self.config.fallback_locale not in locales:
            locales.append(self.config.fallback_locale)
        return locales

    def _lookup_locales(self) -> List[str]:
        locales = [self.config.current_locale]
        if self.config.fallback_locale != self.config.current_locale:
            locales.append(self.config.fallback_locale)
        return locales

    def _namespace_tree(self, locale: str, namespace: str) -> Optional[LocalizationTree]:
        catalog = self.catalogs.get(locale)
        if catalog is not None and catalog.has_namespace(namespace):
            return catalog.get_namespace(namespace)
        if (locale, namespace) in self._unavailable:
            return None
        if self.load_namespace(locale, namespace):
            return self.catalogs[locale].get_namespace(namespace)
        return None

    def _tiers(self, identifier: str) -> Iterator[Tier]:
        namespace = split_identifier(identifier)[0]
        for locale in self._lookup_locales():
            if locale != self.config.current_locale:
                self._trace(
                    "consulting_fallback_locale",
                    identifier=identifier,
                    fallback_locale=locale,
                )
            catalog = self.catalogs.get(locale)
            if catalog is not None and catalog.merged:
                yield Tier(catalog.merged, f"{locale}:merged")
            tree = self._namespace_tree(locale, namespace)
            if tree is not None:
                yield Tier(tree, f"{locale}:{namespace}", namespaced=True)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _missing_identifier(self, identifier: str) -> str:
        if self.config.show_missing_identifier_message:
            return self.config.missing_identifier_message
        return identifier

    def translate(self, identifier: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """Retrieve and format a translated message.

        Args:
            identifier: Dotted identifier (e.g. "general.Items_Count").
            data: Optional interpolation values; also carries the plural count.

        Returns:
            The formatted message. Unknown identifiers yield the identifier
            itself, or the missing identifier message when that policy is on.
        """
        if not identifier:
            return ""

        value = resolve(identifier, self._tiers(identifier))
        if value is Missing:
            logger.warning(
                "translation_not_found",
                identifier=identifier,
                locale=self.config.current_locale,
                fallback_locale=self.config.fallback_locale,
            )
            return self._missing_identifier(identifier)

        return formatter.format_message(
            value, data, fallback=self.config.missing_fallback
        )

    t = translate
    format_message = translate

    def identifier_exists(self, identifier: str) -> bool:
        """Check whether an identifier resolves in the current or fallback locale."""
        if not identifier:
            return False
        return resolve(identifier, self._tiers(identifier)) is not Missing

    has_identifier = identifier_exists

    def replace_data(self, template: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """Substitute `{key}` placeholders in a template."""
        return formatter.replace_data(template, data)

    def search_for_localization(self, identifier: str, tree: Mapping[str, Any]) -> Any:
        """Look up an identifier in a single namespace tree.

        The first identifier segment names the namespace and is skipped.

        Returns:
            The stored string or mapping, or None if nothing matched.
        """
        value = resolve_in_tier(identifier, Tier(tree, "inline", namespaced=True))
        if isinstance(value, StringValue):
            return value.text
        if isinstance(value, PluralRecord):
            return value.forms
        return None
