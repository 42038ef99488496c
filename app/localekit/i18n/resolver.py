"""Identifier resolution over localization trees.

Maps a dotted identifier (e.g. "general.Hello_World") to the raw value stored
in one of several candidate trees. Each candidate is a Tier: either a merged
view of a locale (the whole identifier is the lookup path) or a single
namespace tree (the first segment names the namespace and is dropped).

Within a tree the joined path is first tried as a literal root key, so keys
containing dots ("api.error.message") win over nested traversal of the same
string. Nested traversal stops at the first node that is not a mapping and
returns it, even when path segments remain unconsumed.

Identifiers that match nowhere are retried against the merged views without
their first segment, after every tier has been tried with the full
identifier.
"""

from dataclasses import dataclass
from numbers import Number
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from localekit.i18n.models import (
    Missing,
    PluralRecord,
    ResolvedValue,
    StringValue,
)
from localekit.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class Tier:
    """A candidate tree consulted during resolution.

    Attributes:
        tree: Localization tree to search.
        origin: Label used in logs (e.g. "en:merged", "ar:general").
        namespaced: If True, the identifier's first segment names this
            namespace and only the remaining segments are looked up.
    """

    tree: Mapping[str, Any]
    origin: str
    namespaced: bool = False


def split_identifier(identifier: str) -> List[str]:
    return identifier.split(".")


def search_tree(path: Sequence[str], tree: Mapping[str, Any]) -> Any:
    """Find the raw node addressed by `path` inside `tree`.

    Args:
        path: Lookup segments.
        tree: Localization tree.

    Returns:
        The stored node, or None if nothing matched.
    """
    if not path:
        return tree

    flat_key = ".".join(path)
    if flat_key in tree:
        return tree[flat_key]

    node: Any = tree
    for segment in path:
        if not isinstance(node, Mapping):
            # Partial match: the remaining segments are ignored
            break
        node = node.get(segment)
    return node


def to_resolved(node: Any) -> ResolvedValue:
    """Wrap a raw tree node in the resolved-value union."""
    if isinstance(node, str):
        return StringValue(node)
    if isinstance(node, Mapping):
        return PluralRecord(node)
    if isinstance(node, Number) and not isinstance(node, bool):
        return StringValue(str(node))
    return Missing


def resolve_in_tier(identifier: str, tier: Tier) -> ResolvedValue:
    """Resolve an identifier against a single tier.

    Namespaced tiers drop the first segment; merged tiers use the whole
    identifier.
    """
    segments = split_identifier(identifier)

    if tier.namespaced:
        if len(segments) < 2:
            return Missing
        return to_resolved(search_tree(segments[1:], tier.tree))

    return to_resolved(search_tree(segments, tier.tree))


def resolve_without_prefix(identifier: str, tier: Tier) -> ResolvedValue:
    """Resolve against a merged tier with the first segment stripped.

    Older identifiers carry a namespace prefix that merged views do not
    have ("general.Hello_World" for a merged {"Hello_World": ...}).
    """
    segments = split_identifier(identifier)
    if tier.namespaced or len(segments) < 2:
        return Missing
    return to_resolved(search_tree(segments[1:], tier.tree))


def _is_empty(value: ResolvedValue) -> bool:
    return isinstance(value, StringValue) and value.text == ""


def resolve(identifier: str, tiers: Iterable[Tier]) -> ResolvedValue:
    """Resolve an identifier across tiers in order.

    Tiers may be produced lazily; a tier is only materialized once every
    earlier tier has failed. When no tier matches, merged tiers are retried
    without the identifier's first segment, in the same order.

    Empty strings fall through to later tiers but are returned when nothing
    better exists.

    Args:
        identifier: Dotted identifier.
        tiers: Candidate tiers, most preferred first.

    Returns:
        StringValue, PluralRecord, or Missing. Never raises.
    """
    if not identifier:
        return Missing

    empty: Optional[ResolvedValue] = None
    merged: List[Tier] = []
    try:
        for tier in tiers:
            if not tier.namespaced:
                merged.append(tier)
            value = resolve_in_tier(identifier, tier)
            if _is_empty(value):
                if empty is None:
                    empty = value
            elif value is not Missing:
                return value

        for tier in merged:
            value = resolve_without_prefix(identifier, tier)
            if _is_empty(value):
                if empty is None:
                    empty = value
            elif value is not Missing:
                return value
    except Exception as e:  # pylint: disable=broad-except
        logger.error(
            "identifier_resolution_failed",
            identifier=identifier,
            error=str(e),
        )
        return Missing

    return empty if empty is not None else Missing
