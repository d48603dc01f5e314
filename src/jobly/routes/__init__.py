"""Shared request parsing for the Flask blueprints."""

from typing import Any, Iterable, Mapping

from jobly.errors import InvalidInput


def parse_filters(
    args: Mapping[str, str],
    text_keys: Iterable[str] = (),
    int_keys: Iterable[str] = (),
    bool_keys: Iterable[str] = (),
) -> dict[str, Any]:
    """
    Convert query-string args into typed search filters.

    Integers must parse; booleans are True only for "true". Unknown args
    are rejected so a typo doesn't silently widen a search.
    """
    text_keys, int_keys, bool_keys = set(text_keys), set(int_keys), set(bool_keys)
    unknown = set(args) - text_keys - int_keys - bool_keys
    if unknown:
        raise InvalidInput(f"Unknown filter(s): {', '.join(sorted(unknown))}")

    filters = {}
    for key, raw in args.items():
        if key in int_keys:
            try:
                filters[key] = int(raw)
            except ValueError:
                raise InvalidInput(f"{key} must be an integer") from None
        elif key in bool_keys:
            filters[key] = raw.lower() == "true"
        else:
            filters[key] = raw
    return filters


def require_body(
    data: Mapping[str, Any] | None,
    required: Iterable[str] = (),
    allowed: Iterable[str] = None,
) -> Mapping[str, Any]:
    """Check a JSON body has the required fields and nothing unexpected."""
    if not isinstance(data, Mapping):
        raise InvalidInput("Request body must be a JSON object")

    missing = [key for key in required if key not in data]
    if missing:
        raise InvalidInput(f"Missing field(s): {', '.join(missing)}")

    if allowed is not None:
        extra = set(data) - set(allowed)
        if extra:
            raise InvalidInput(f"Unexpected field(s): {', '.join(sorted(extra))}")
    return data
