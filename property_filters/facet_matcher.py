from __future__ import annotations

from typing import Any, Iterable

from .models import FilterSelection, Listing, clean_value, int_set, tag_set
from .vocabulary import (
    AMENITY_ALIASES,
    BEDROOMS_SENTINEL,
    BEDROOMS_SENTINEL_MIN,
    BUDGET_ADJACENCY,
)


def _normalize(value: Any) -> str:
    return clean_value(value).lower()


def matches_property_type(selected: Any, listing_types: Iterable[str] | None) -> bool:
    selected = clean_value(selected)
    if not selected:
        return True
    return selected in tag_set(listing_types)


def matches_budget(selected_bucket: Any, listing_bucket: Any) -> bool:
    """
    Match a selected budget against the listing's price bucket via the adjacency table.
    Unknown selected buckets match nothing.
    """
    selected_bucket = clean_value(selected_bucket)
    if not selected_bucket:
        return True
    accepted = BUDGET_ADJACENCY.get(selected_bucket, frozenset())
    return clean_value(listing_bucket) in accepted


def matches_bedrooms(selected: Any, bedroom_options: Iterable[int] | None) -> bool:
    """
    Literal BHK membership, except the "5+" sentinel which accepts any option of five or more.
    """
    selected = clean_value(selected)
    if not selected:
        return True
    options = int_set(bedroom_options)
    if selected == BEDROOMS_SENTINEL:
        return any(option >= BEDROOMS_SENTINEL_MIN for option in options)
    try:
        wanted = int(selected)
    except ValueError:
        return False
    return wanted in options


def matches_location(selected_text: Any, location: Any) -> bool:
    selected_text = _normalize(selected_text)
    if not selected_text:
        return True
    return selected_text in _normalize(location)


def matches_possession(selected: Any, status: Any) -> bool:
    selected = clean_value(selected)
    if not selected:
        return True
    return selected == clean_value(status)


def matches_amenity(selected: Any, amenity_tags: Iterable[str] | None) -> bool:
    selected = _normalize(selected)
    if not selected:
        return True
    canonical = AMENITY_ALIASES.get(selected, selected)
    return canonical in {tag.lower() for tag in tag_set(amenity_tags)}


def matches_listing(selection: FilterSelection, listing: Listing) -> bool:
    """
    A listing is visible only when every facet predicate accepts it.
    """
    return all(
        (
            matches_property_type(selection.property_type, listing.property_type),
            matches_budget(selection.budget_bucket, listing.price_range),
            matches_bedrooms(selection.bedrooms, listing.bedroom_options),
            matches_location(selection.location_text, listing.location),
            matches_possession(selection.possession_status, listing.possession_status),
            matches_amenity(selection.amenity, listing.amenity_tags),
        )
    )
