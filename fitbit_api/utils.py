"""Small URL helpers shared by the endpoint services."""

from typing import Any, Mapping


def dict_to_url_params(params: Mapping[str, Any]) -> str:
    """Turn a mapping into a query string.

    ``{"limit": 10, "sort": "asc"}`` becomes ``"?limit=10&sort=asc"``.
    Entries whose value is ``None`` are skipped. Values are written as-is,
    callers pass already formatted dates and identifiers.
    """
    parts = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = str(value).lower()
        parts.append(f"{key}={value}")

    return f"?{'&'.join(parts)}" if parts else ""
