from typing import Optional
from urllib.parse import quote

from app.models import DEFAULT_SIZE, Filter, Size

# Characters JavaScript's encodeURIComponent leaves alone on top of
# urllib's always-safe set (letters, digits, "_.-~").
_URI_COMPONENT_SAFE = "!*'()"

_SIZES = {s.value: s for s in Size}


def parse_filter_input(size: Optional[str] = None, query: Optional[str] = None) -> Filter:
    """Turn raw query-string values into a :class:`Filter`.

    Unknown or missing sizes fall back to ``small``; an empty query means no
    text filter.
    """
    parsed_size = _SIZES.get(size, DEFAULT_SIZE) if size else DEFAULT_SIZE
    return Filter(size=parsed_size, query=query or None)


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_filter_url(base_url: str, search_filter: Filter) -> str:
    """Canonical, shareable URL for ``search_filter`` under ``base_url``."""
    query = search_filter.query
    formatted_query = f"&query={encode_uri_component(query)}" if query else ""
    return f"{base_url}?size={search_filter.size.value}{formatted_query}"
