"""Translation models for the i18n system.

Defines the resolved-value union returned by the resolver, the per-locale
catalog that backs the Locale Table, and the validated translator
configuration.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

# Reserved keys that mark a mapping as a pluralization record
PLURAL_FORMS = ("zero", "one", "two", "other")

LocalizationTree = Dict[str, Any]


class TextDirection(str, Enum):
    """Writing direction of a locale."""

    LTR = "ltr"
    RTL = "rtl"


class _MissingType:
    """Sentinel type for an identifier that resolved to nothing."""

    _instance: Optional["_MissingType"] = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Missing"


Missing = _MissingType()


@dataclass(frozen=True)
class StringValue:
    """A resolved plain message template.

    Attributes:
        text: The template, placeholders not yet substituted.
    """

    text: str


@dataclass(frozen=True)
class PluralRecord:
    """A resolved mapping expected to hold plural forms.

    The resolver wraps every terminal mapping in a PluralRecord; whether the
    mapping actually is a pluralization record is decided by `is_valid`.

    Attributes:
        forms: The raw mapping (e.g. {"one": "One item", "other": "{n} items"}).
    """

    forms: Mapping[str, Any]

    @property
    def is_valid(self) -> bool:
        """True if at least one reserved plural key is present."""
        return any(form in self.forms for form in PLURAL_FORMS)

    def get_form(self, form: str) -> Optional[str]:
        """Return the template for a plural form if it is a string."""
        value = self.forms.get(form)
        return value if isinstance(value, str) else None


ResolvedValue = Union[_MissingType, StringValue, PluralRecord]


@dataclass
class LocaleCatalog:
    """Container for all loaded translations of a single locale.

    Holds each namespace tree separately plus a merged view combining every
    namespace's root keys. The merged view is rebuilt by successive overwrite
    in load order, so a key present in two namespaces takes the value of the
    one loaded last. Top-level entries that belong to no namespace are applied
    after every namespace.

    Attributes:
        locale: Locale code this catalog is for.
        namespaces: {namespace: tree} in load order.
        entries: Top-level entries outside any namespace.
        merged: Combined view of all namespaces and entries.
    """

    locale: str
    namespaces: Dict[str, LocalizationTree] = field(default_factory=dict)
    entries: LocalizationTree = field(default_factory=dict)
    merged: LocalizationTree = field(default_factory=dict)

    def add_namespace(self, namespace: str, tree: Mapping[str, Any]) -> None:
        """Store a namespace tree, replacing any earlier tree of that name.

        The replaced tree's keys no longer answer through the merged view.

        Args:
            namespace: Namespace name (historically the file name).
            tree: Parsed localization tree.
        """
        self.namespaces.pop(namespace, None)
        self.namespaces[namespace] = dict(tree)
        self._rebuild_merged()

    def add_entry(self, key: str, value: Any) -> None:
        """Store a top-level entry that belongs to no namespace."""
        self.entries[key] = value
        self._rebuild_merged()

    def _rebuild_merged(self) -> None:
        merged: LocalizationTree = {}
        for tree in self.namespaces.values():
            merged.update(tree)
        merged.update(self.entries)
        self.merged = merged

    def get_namespace(self, namespace: str) -> Optional[LocalizationTree]:
        """Get the tree for a namespace, or None if it is not loaded."""
        return self.namespaces.get(namespace)

    def has_namespace(self, namespace: str) -> bool:
        return namespace in self.namespaces


class I18nConfig(BaseModel):
    """Validated translator configuration.

    Attributes:
        supported_locales: Ordered locale codes; defines which locales are valid.
        current_locale: Locale used for lookups.
        fallback_locale: Locale consulted when the current locale lacks an entry.
        rtl_locales: Locales rendered right-to-left.
        show_missing_identifier_message: Show `missing_identifier_message`
            instead of echoing unknown identifiers.
        missing_identifier_message: Placeholder for unknown identifiers.
        localizations: In-memory Locale Table, {locale: {namespace: tree}}.
        locales_dir: Directory laid out as <locale>/<namespace>.json.
        features_dir: Directory laid out as <feature>/locales/<locale>.json.
        preload: Load every namespace file when configured.
        show_logs: Emit lifecycle events (locale changes, file loads) at info
            level instead of debug.
    """

    supported_locales: List[str] = Field(default_factory=lambda: ["en"])
    current_locale: str = "en"
    fallback_locale: str = "en"
    rtl_locales: List[str] = Field(default_factory=lambda: ["ar", "he", "fa", "ur"])
    show_missing_identifier_message: bool = False
    missing_identifier_message: str = "Missing_Localization_Identifier"
    localizations: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    locales_dir: Optional[str] = None
    features_dir: Optional[str] = None
    preload: bool = True
    show_logs: bool = False

    @field_validator("supported_locales")
    @classmethod
    def _require_locales(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("supported_locales must name at least one locale")
        return value

    @field_validator("locales_dir", "features_dir", mode="before")
    @classmethod
    def _stringify_path(cls, value: Any) -> Any:
        return str(value) if value is not None else None

    @property
    def missing_fallback(self) -> str:
        """Text shown when a plural record cannot be rendered."""
        if self.show_missing_identifier_message:
            return self.missing_identifier_message
        return ""
