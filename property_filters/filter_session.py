"""
Apply a facet selection across the listing catalog and expose the derived
views the rendering layer needs.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Sequence

from .facet_matcher import matches_listing
from .models import FilterResult, FilterSelection, Listing, VisibleSet
from .query_codec import decode_from_query, encode_to_query
from .summary_generator import describe_active_filters, generate_summary

logger = logging.getLogger(__name__)


def evaluate(selection: FilterSelection, listings: Sequence[Listing]) -> VisibleSet:
    """
    Return the listings accepted by every facet, in their original order.
    """
    return VisibleSet(tuple(listing for listing in listings if matches_listing(selection, listing)))


def has_active_filters(selection: FilterSelection) -> bool:
    return bool(selection.active_facets())


class FilterSession:
    """Owns one page's selection state over a fixed listing sequence."""

    def __init__(self, listings: Sequence[Listing], selection: FilterSelection | None = None):
        self.listings = tuple(listings)
        self.selection = selection if selection is not None else FilterSelection()

    @classmethod
    def from_query(cls, listings: Sequence[Listing], query_map: Mapping[str, Any] | None) -> "FilterSession":
        """Start a session from redirect parameters, before the first evaluation."""
        return cls(listings, decode_from_query(query_map))

    def apply(self) -> FilterResult:
        visible = evaluate(self.selection, self.listings)
        active_filters = describe_active_filters(self.selection)
        logger.debug(
            "Filters %s matched %d of %d listings",
            self.selection.active_facets(),
            visible.visible_count,
            len(self.listings),
        )
        return FilterResult(
            visible=visible,
            total_count=len(self.listings),
            has_active_filters=has_active_filters(self.selection),
            active_filters=active_filters,
            summary=generate_summary(visible.visible_count, len(self.listings), active_filters),
        )

    def update(self, **facets: Any) -> FilterResult:
        self.selection.update(**facets)
        return self.apply()

    def clear(self) -> FilterResult:
        self.selection.clear()
        return self.apply()

    def redirect_query(self) -> Dict[str, str]:
        return encode_to_query(self.selection)
