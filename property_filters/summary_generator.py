"""
Generate the active-filter chips and the one-line result summary shown above
the property grid.
"""
from __future__ import annotations

from typing import List

from .models import FilterSelection, clean_value
from .vocabulary import FACET_LABELS, FACET_NAMES, VALUE_LABELS


def _value_label(facet: str, value: str) -> str:
    return VALUE_LABELS.get(facet, {}).get(value, value)


def describe_active_filters(selection: FilterSelection) -> List[str]:
    """
    ``"Label: value"`` for every non-empty facet, in the fixed facet order.
    """
    described: List[str] = []
    for facet in FACET_NAMES:
        value = clean_value(getattr(selection, facet, ""))
        if value:
            described.append(f"{FACET_LABELS[facet]}: {_value_label(facet, value)}")
    return described


def _plural(count: int) -> str:
    return "property" if count == 1 else "properties"


def generate_summary(visible_count: int, total_count: int, active_filters: List[str]) -> str:
    """
    Produce a deterministic sentence describing how many listings survived the filters.
    """
    if not active_filters:
        return f"Showing all {total_count} {_plural(total_count)}."

    filter_phrase = "; ".join(active_filters)
    if visible_count == 0:
        return f"No properties match {filter_phrase}. Try removing a filter to broaden the search."

    return f"Showing {visible_count} of {total_count} {_plural(total_count)} for {filter_phrase}."
