"""Structlog processors added to every localekit event."""

from typing import Any, Callable, Dict

EventDict = Dict[str, Any]
Processor = Callable[[Any, str, EventDict], EventDict]


def add_library_info(name: str, version: str = "unknown") -> Processor:
    """Stamp events with the emitting library, so hosts can filter them.

    Args:
        name: Library name.
        version: Library version.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("library", name)
        event_dict.setdefault("library_version", version)
        return event_dict

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Shorten string values longer than `max_length`.

    Identifiers and templates are logged verbatim and come from callers or
    locale files, so their size is not bounded by the library.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...({len(value)} chars)"
        return event_dict

    return processor
