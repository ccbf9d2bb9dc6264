"""
Fixed facet vocabularies and lookup tables shared by matching, labelling and
query-string encoding.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

PROPERTY_TYPES = ("apartment", "villa", "penthouse", "plot", "commercial")

PRICE_BUCKETS = ("50l", "1cr", "5cr", "10cr", "on-request")

# Selected budgets overlap the neighbouring listing bucket so boundary listings still show.
BUDGET_ADJACENCY: Dict[str, FrozenSet[str]] = {
    "0-50": frozenset({"50l"}),
    "50-100": frozenset({"50l", "1cr"}),
    "100-500": frozenset({"1cr", "5cr"}),
    "500-1000": frozenset({"5cr", "10cr"}),
    "1000+": frozenset({"10cr", "on-request"}),
}

BUDGET_LABELS = {
    "0-50": "Under ₹50 Lakh",
    "50-100": "₹50 Lakh - ₹1 Crore",
    "100-500": "₹1 Crore - ₹5 Crore",
    "500-1000": "₹5 Crore - ₹10 Crore",
    "1000+": "Above ₹10 Crore",
}

BEDROOMS_SENTINEL = "5+"
BEDROOMS_SENTINEL_MIN = 5

BEDROOM_CHOICES = ("1", "2", "3", "4", BEDROOMS_SENTINEL)

BEDROOM_LABELS = {
    "1": "1 BHK",
    "2": "2 BHK",
    "3": "3 BHK",
    "4": "4 BHK",
    BEDROOMS_SENTINEL: "5+ BHK",
}

POSSESSION_STATUSES = ("ready", "under-construction")

POSSESSION_LABELS = {
    "ready": "Ready to Move",
    "under-construction": "Under Construction",
}

# Panel values on the left, tags stored on listings on the right.
AMENITY_ALIASES = {
    "pool": "swimming-pool",
    "swimming pool": "swimming-pool",
    "gym": "gymnasium",
    "parking": "covered-parking",
    "security": "24x7-security",
    "garden": "landscaped-garden",
    "clubhouse": "clubhouse",
    "concierge": "concierge",
    "beach": "beach-access",
}

AMENITY_LABELS = {
    "pool": "Swimming Pool",
    "gym": "Gymnasium",
    "parking": "Covered Parking",
    "security": "24/7 Security",
    "garden": "Landscaped Garden",
    "clubhouse": "Clubhouse",
    "concierge": "Concierge Service",
    "beach": "Beach Access",
}

AMENITY_CHOICES = tuple(AMENITY_LABELS)

# Facet attribute, summary label, query parameter. Order drives summaries.
FACETS: Tuple[Tuple[str, str, str], ...] = (
    ("property_type", "Type", "type"),
    ("budget_bucket", "Budget", "budget"),
    ("bedrooms", "Bedrooms", "bhk"),
    ("location_text", "Location", "location"),
    ("possession_status", "Status", "status"),
    ("amenity", "Amenities", "amenities"),
)

FACET_NAMES = tuple(name for name, _, _ in FACETS)
FACET_LABELS = {name: label for name, label, _ in FACETS}
QUERY_PARAMS = {name: param for name, _, param in FACETS}

VALUE_LABELS: Dict[str, Dict[str, str]] = {
    "budget_bucket": BUDGET_LABELS,
    "bedrooms": BEDROOM_LABELS,
    "possession_status": POSSESSION_LABELS,
    "amenity": AMENITY_LABELS,
}


def _choices(values: Iterable[str], labels: Mapping[str, str] | None = None) -> List[Dict[str, str]]:
    labels = labels or {}
    return [{"value": value, "label": labels.get(value, value)} for value in values]


def filter_options(locations: Iterable[str] = ()) -> Dict[str, List[Dict[str, str]]]:
    """
    Choices for each facet of the filter panel, keyed by query parameter name.
    """
    return {
        QUERY_PARAMS["property_type"]: _choices(PROPERTY_TYPES),
        QUERY_PARAMS["budget_bucket"]: _choices(BUDGET_LABELS, BUDGET_LABELS),
        QUERY_PARAMS["bedrooms"]: _choices(BEDROOM_CHOICES, BEDROOM_LABELS),
        QUERY_PARAMS["location_text"]: _choices(locations),
        QUERY_PARAMS["possession_status"]: _choices(POSSESSION_STATUSES, POSSESSION_LABELS),
        QUERY_PARAMS["amenity"]: _choices(AMENITY_CHOICES, AMENITY_LABELS),
    }
