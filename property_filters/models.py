"""
Plain data containers for listings, facet selections and filter results.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass, field, fields
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple


def clean_value(value: Any) -> str:
    """Coerce any UI or query value to a stripped string; ``None`` becomes empty."""
    if value is None:
        return ""
    return str(value).strip()


def _as_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_text_list(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())


def tag_set(value: Any) -> FrozenSet[str]:
    if isinstance(value, (set, frozenset)):
        value = list(value)
    return frozenset(_as_text_list(value))


def int_set(value: Any) -> FrozenSet[int]:
    if isinstance(value, (numbers.Number, str)) and not isinstance(value, bool):
        value = [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        return frozenset()
    parsed = set()
    for item in value:
        try:
            parsed.add(int(item))
        except (TypeError, ValueError, OverflowError):
            continue
    return frozenset(parsed)


@dataclass(frozen=True)
class Listing:
    id: int
    property_type: FrozenSet[str] = frozenset()
    price_range: str = ""
    bedroom_options: FrozenSet[int] = frozenset()
    location: str = ""
    possession_status: str = ""
    amenity_tags: FrozenSet[str] = frozenset()
    title: str = ""
    price: str = ""
    bathrooms: int | None = None
    area: str = ""
    image: str = ""
    features: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Facets may arrive as a bare tag or number; store them as sets either way.
        object.__setattr__(self, "property_type", tag_set(self.property_type))
        object.__setattr__(self, "bedroom_options", int_set(self.bedroom_options))
        object.__setattr__(self, "amenity_tags", tag_set(self.amenity_tags))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Listing":
        """
        Build a listing from a loosely-typed record; absent or malformed fields come back empty.
        """
        bathrooms = int_set(record.get("bathrooms"))
        return cls(
            id=int(record["id"]),
            property_type=tag_set(record.get("property_type")),
            price_range=_as_text(record.get("price_range")),
            bedroom_options=int_set(record.get("bedroom_options")),
            location=_as_text(record.get("location")),
            possession_status=_as_text(record.get("possession_status")),
            amenity_tags=tag_set(record.get("amenity_tags")),
            title=_as_text(record.get("title")),
            price=_as_text(record.get("price")),
            bathrooms=max(bathrooms) if bathrooms else None,
            area=_as_text(record.get("area")),
            image=_as_text(record.get("image")),
            features=_as_text_list(record.get("features")),
        )

    def violations(self) -> List[str]:
        """Names of catalog invariants this listing breaks."""
        problems: List[str] = []
        if self.id <= 0:
            problems.append("id")
        if not self.property_type:
            problems.append("property_type")
        if not self.price_range:
            problems.append("price_range")
        if not self.bedroom_options:
            problems.append("bedroom_options")
        return problems

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "property_type": sorted(self.property_type),
            "price_range": self.price_range,
            "price": self.price,
            "bedroom_options": sorted(self.bedroom_options),
            "bathrooms": self.bathrooms,
            "area": self.area,
            "location": self.location,
            "possession_status": self.possession_status,
            "amenity_tags": sorted(self.amenity_tags),
            "image": self.image,
            "features": list(self.features),
        }


@dataclass
class FilterSelection:
    property_type: str = ""
    budget_bucket: str = ""
    bedrooms: str = ""
    location_text: str = ""
    possession_status: str = ""
    amenity: str = ""

    def __post_init__(self) -> None:
        for facet in fields(self):
            setattr(self, facet.name, clean_value(getattr(self, facet.name)))

    def update(self, **facets: Any) -> "FilterSelection":
        """
        Set one or more facets in place. Unknown facet names are ignored.
        """
        known = {facet.name for facet in fields(self)}
        for name, value in facets.items():
            if name in known:
                setattr(self, name, clean_value(value))
        return self

    def clear(self) -> "FilterSelection":
        for facet in fields(self):
            setattr(self, facet.name, "")
        return self

    def active_facets(self) -> Dict[str, str]:
        active = {facet.name: clean_value(getattr(self, facet.name)) for facet in fields(self)}
        return {name: value for name, value in active.items() if value}


@dataclass(frozen=True)
class VisibleSet:
    listings: Tuple[Listing, ...] = ()

    @property
    def ids(self) -> List[int]:
        return [listing.id for listing in self.listings]

    @property
    def visible_count(self) -> int:
        return len(self.listings)

    def __iter__(self):
        return iter(self.listings)

    def __len__(self) -> int:
        return len(self.listings)


@dataclass(frozen=True)
class FilterResult:
    visible: VisibleSet
    total_count: int
    has_active_filters: bool
    active_filters: List[str] = field(default_factory=list)
    summary: str = ""

    @property
    def visible_count(self) -> int:
        return self.visible.visible_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "has_active_filters": self.has_active_filters,
            "active_filters": list(self.active_filters),
            "visible_count": self.visible_count,
            "total_count": self.total_count,
            "visible_ids": self.visible.ids,
            "properties": [listing.to_dict() for listing in self.visible],
        }

