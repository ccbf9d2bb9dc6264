"""
Load the bundled listing catalog once and expose safe accessors.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Tuple

import pandas as pd
from django.conf import settings

from .models import Listing

logger = logging.getLogger(__name__)

DEFAULT_LISTINGS_PATH = Path(__file__).resolve().parent / "data" / "listings.json"


def catalog_path() -> Path:
    if settings.configured:
        return Path(getattr(settings, "LISTINGS_FILE_PATH", DEFAULT_LISTINGS_PATH))
    return DEFAULT_LISTINGS_PATH


def load_catalog_frame(path: Path | str) -> pd.DataFrame:
    try:
        return pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    except FileNotFoundError as exc:  # pragma: no cover - configuration error
        raise RuntimeError(f"Listing catalog not found at {path}") from exc


def frame_to_listings(frame: pd.DataFrame) -> Tuple[Listing, ...]:
    """
    Convert catalog rows to listings, keeping file order. Rows without a usable id are skipped.
    """
    listings: List[Listing] = []
    seen_ids = set()
    for record in frame.to_dict(orient="records"):
        try:
            listing = Listing.from_record(record)
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping catalog row without a usable id: %r", record.get("id"))
            continue
        if listing.id in seen_ids:
            logger.warning("Skipping duplicate catalog id %s", listing.id)
            continue
        problems = listing.violations()
        if problems:
            logger.warning("Listing %s has empty or invalid fields: %s", listing.id, ", ".join(problems))
        seen_ids.add(listing.id)
        listings.append(listing)
    return tuple(listings)


@lru_cache(maxsize=None)
def _catalog() -> Tuple[pd.DataFrame, Tuple[Listing, ...]]:
    path = catalog_path()
    frame = load_catalog_frame(path)
    listings = frame_to_listings(frame)
    logger.info("Loaded %d listings from %s", len(listings), path)
    return frame, listings


def reset_catalog_cache() -> None:
    _catalog.cache_clear()


def get_catalog_frame() -> pd.DataFrame:
    """Return a deep copy of the in-memory catalog dataframe."""
    return _catalog()[0].copy(deep=True)


def get_listings() -> Tuple[Listing, ...]:
    return _catalog()[1]


def get_listing(listing_id: int) -> Listing | None:
    for listing in get_listings():
        if listing.id == listing_id:
            return listing
    return None


def list_locations() -> List[str]:
    """Expose the distinct locations present in the catalog."""
    return sorted({listing.location for listing in get_listings() if listing.location})


def listings_to_frame(listings: Iterable[Listing]) -> pd.DataFrame:
    """
    Flatten listings for tabular export; set-valued facets are joined with "; ".
    """
    rows = []
    for listing in listings:
        row = listing.to_dict()
        for column in ("property_type", "bedroom_options", "amenity_tags", "features"):
            row[column] = "; ".join(str(value) for value in row[column])
        rows.append(row)
    columns = list(Listing(id=0).to_dict())
    return pd.DataFrame(rows, columns=columns)
