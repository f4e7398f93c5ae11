"""HTML escaping and small cell-formatting helpers."""

import re

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

ELLIPSIS = "..."


def escape_html(value):
    """Escape the five HTML-special characters. Non-strings pass through as-is."""
    if not isinstance(value, str):
        return value
    # & first so existing entities are not escaped twice
    for char, entity in _ESCAPES:
        value = value.replace(char, entity)
    return value


def truncate(text: str, limit: int) -> str:
    if limit is None or len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def status_class(status: str) -> str:
    return f"status-{status.lower()}"


def format_attributes(attributes: dict[str, str]) -> str:
    return ", ".join(f'{key}="{value}"' for key, value in attributes.items())


_CSS_IDENTIFIER = re.compile(r"-?[_a-zA-Z][_a-zA-Z0-9-]*")


def validate_table_class(table_class: str) -> str:
    """Table classes end up in CSS selectors, so they must be plain CSS identifiers."""
    if not isinstance(table_class, str) or not _CSS_IDENTIFIER.fullmatch(table_class):
        raise ValueError(f"Invalid table class {table_class!r}: expected a CSS identifier")
    return table_class
