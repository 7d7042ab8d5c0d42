"""Validation helpers for environment-driven settings."""

import json
from typing import Any
from urllib.parse import urlsplit

from pydantic.fields import FieldInfo
from pydantic_settings import EnvSettingsSource

ORIGIN_SCHEMES = frozenset({"http", "https"})


def _split_items(text: str) -> list[str]:
    if not text.startswith("["):
        return [part.strip() for part in text.split(",") if part.strip()]
    try:
        items = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON array: {e}") from e
    if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
        raise ValueError("JSON value must be an array of strings")
    return items


def parse_string_list(value: str | list[str], *, allow_empty: bool = False) -> list[str]:
    """Parse a list of strings given as a list, a JSON array, or comma-separated text.

    With allow_empty, blank text and "[]" both mean an empty list.
    """
    items = value if isinstance(value, list) else _split_items(value.strip())
    if not items and not allow_empty:
        raise ValueError("String list value must not be empty")
    return items


def normalize_origin(origin: str) -> str:
    """Reduce an origin to scheme://host[:port], lower-cased, or keep "*".

    Browsers send Origin without a path or trailing slash, so
    "https://Game.example.com/" must match "https://game.example.com".
    """
    origin = origin.strip()
    if origin == "*":
        return origin
    parts = urlsplit(origin)
    if parts.scheme.lower() not in ORIGIN_SCHEMES or not parts.netloc:
        raise ValueError(f"Invalid origin {origin!r}: expected http(s)://host[:port]")
    if parts.path not in ("", "/") or parts.query or parts.fragment:
        raise ValueError(f"Invalid origin {origin!r}: must not contain a path, query or fragment")
    return f"{parts.scheme.lower()}://{parts.netloc.lower()}"


def parse_origin_list(value: str | list[str]) -> list[str]:
    """Parse CORS origins; empty means cross-origin requests are refused."""
    origins: list[str] = []
    for origin in parse_string_list(value, allow_empty=True):
        normalized = normalize_origin(origin)
        if normalized not in origins:
            origins.append(normalized)
    return origins


STRING_LIST_FIELDS = frozenset({"cors_origins"})


class StringListEnvSettingsSource(EnvSettingsSource):
    """Env source that hands string-list fields to their validators undecoded.

    pydantic-settings JSON-decodes list fields read from the environment
    before validators run, which rejects the comma-separated form.
    """

    def prepare_field_value(
        self,
        field_name: str,
        field: FieldInfo,
        value: Any,  # noqa: ANN401
        value_is_complex: bool,  # noqa: FBT001
    ) -> Any:  # noqa: ANN401
        if field_name in STRING_LIST_FIELDS and isinstance(value, str):
            return value
        return super().prepare_field_value(field_name, field, value, value_is_complex)
