"""Message formatting: plural form selection and placeholder substitution.

Placeholders use single braces, `{name}`, with names made of ASCII word
characters. A placeholder whose key is absent from the data is replaced with
the empty string; `None` values render as the empty string as well.

Plural records select a form from the count carried in the data:
0 -> "zero", 1 -> "one", 2 -> "two", anything else -> "other". A missing
specific form falls back to "other".
"""

import re
from numbers import Number
from typing import Any, Mapping, Optional, Union

from localekit.i18n.models import (
    Missing,
    PluralRecord,
    ResolvedValue,
    StringValue,
)
from localekit.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z0-9_]+)\}")

_COUNT_FORMS = {0: "zero", 1: "one", 2: "two"}


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, Number):
        return value  # type: ignore[return-value]
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def resolve_count(data: Optional[Mapping[str, Any]]) -> float:
    """Determine the plural count carried by `data`.

    An explicit "count" key wins; otherwise the first value in iteration order
    is used. Defaults to 0 when no numeric value is found.
    """
    if not data:
        return 0
    if "count" in data:
        value = _as_number(data["count"])
    else:
        value = _as_number(next(iter(data.values())))
    return value if value is not None else 0


def select_plural_form(record: PluralRecord, count: float) -> Optional[str]:
    """Pick the template for `count`, or None if "other" is needed and unusable."""
    form = _COUNT_FORMS.get(count)
    if form is not None:
        template = record.get_form(form)
        if template is not None:
            return template
    return record.get_form("other")


def replace_data(template: str, data: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute `{key}` placeholders in `template` with values from `data`.

    Args:
        template: Message template.
        data: Interpolation values. If None, the template is returned as-is.

    Returns:
        The substituted message.
    """
    if data is None:
        return template

    def _replace(match: "re.Match[str]") -> str:
        value = data.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def format_message(
    raw: Union[ResolvedValue, str, Mapping[str, Any]],
    data: Optional[Mapping[str, Any]] = None,
    fallback: str = "",
) -> str:
    """Render a resolved value into a display string.

    Args:
        raw: StringValue/PluralRecord from the resolver, or a plain str or
            mapping.
        data: Interpolation values; also the source of the plural count.
        fallback: Returned when the value is Missing or an unusable plural
            record.

    Returns:
        The rendered message. Never raises.
    """
    if isinstance(raw, str):
        raw = StringValue(raw)
    elif isinstance(raw, Mapping):
        raw = PluralRecord(raw)

    if isinstance(raw, StringValue):
        return replace_data(raw.text, data)

    if raw is Missing or not isinstance(raw, PluralRecord):
        return fallback

    if not raw.is_valid:
        logger.warning(
            "invalid_plural_record",
            keys=list(raw.forms.keys()),
        )
        return fallback

    count = resolve_count(data)
    template = select_plural_form(raw, count)
    if template is None:
        logger.warning(
            "plural_other_form_missing",
            count=count,
            keys=list(raw.forms.keys()),
        )
        return fallback

    return replace_data(template, data)
