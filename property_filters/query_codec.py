"""
Translate a facet selection to and from the query parameters used by the
cross-page search redirect.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from .models import FilterSelection, clean_value
from .vocabulary import QUERY_PARAMS

PARAM_TO_FACET = {param: facet for facet, param in QUERY_PARAMS.items()}


def _first_value(value: Any) -> str:
    # parse_qs and QueryDict.lists() hand back lists; only one value per facet is honoured.
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return clean_value(value)


def encode_to_query(selection: FilterSelection) -> Dict[str, str]:
    """
    One parameter per non-empty facet. Empty facets are left out entirely.
    """
    query: Dict[str, str] = {}
    for facet, param in QUERY_PARAMS.items():
        value = clean_value(getattr(selection, facet, ""))
        if value:
            query[param] = value
    return query


def decode_from_query(query_map: Mapping[str, Any] | None) -> FilterSelection:
    """
    Rebuild a selection from query parameters. Unknown names are ignored and
    missing ones leave the facet empty.
    """
    facets: Dict[str, str] = {}
    if not query_map:
        return FilterSelection()
    if hasattr(query_map, "getlist"):
        # QueryDict.items() yields the last value; keep every value so the first one wins.
        query_map = dict(query_map.lists())
    for param, value in query_map.items():
        facet = PARAM_TO_FACET.get(param)
        if facet is None:
            continue
        facets[facet] = _first_value(value)
    return FilterSelection(**facets)


def parse_query_string(raw: str | None) -> FilterSelection:
    """Decode a raw ``?type=villa&bhk=3`` style string (leading ``?`` optional)."""
    trimmed = (raw or "").strip().lstrip("?")
    return decode_from_query(parse_qs(trimmed, keep_blank_values=False))


def build_redirect_url(base_url: str, selection: FilterSelection) -> str:
    """
    Attach the encoded selection to ``base_url``, replacing any query it already carries.
    """
    parts = urlsplit(base_url)
    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, urlencode(encode_to_query(selection)), parts.fragment)
    )
