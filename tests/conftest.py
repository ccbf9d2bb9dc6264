"""
Shared fixtures for the property filter tests.

Configures Django against the project settings so the API views and the
catalog reader can be exercised without a running server.
"""

import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "realestate.settings")
django.setup()

from property_filters.catalog_reader import reset_catalog_cache  # noqa: E402
from property_filters.models import Listing  # noqa: E402


@pytest.fixture
def penthouse():
    return Listing.from_record(
        {
            "id": 1,
            "property_type": ["Luxury Residence"],
            "price_range": "10cr",
            "bedroom_options": [4],
            "location": "Upper East Side, New York",
            "possession_status": "ready",
            "amenity_tags": [],
        }
    )


@pytest.fixture
def listings():
    records = [
        (1, ["Luxury Residence", "penthouse"], "10cr", [4], "Upper East Side, New York", "ready",
         ["concierge", "gymnasium", "24x7-security"]),
        (2, ["Luxury Estate", "villa"], "on-request", [7], "Beverly Hills, California", "ready",
         ["swimming-pool", "landscaped-garden", "covered-parking"]),
        (3, ["Waterfront Residence", "apartment"], "5cr", [3], "South Beach, Miami", "under-construction",
         ["beach-access", "swimming-pool", "24x7-security"]),
        (4, ["Mountain Estate", "villa"], "10cr", [5, 6], "Aspen, Colorado", "ready",
         ["covered-parking", "clubhouse"]),
        (5, ["Coastal Estate", "villa"], "on-request", [8], "East Hampton, New York", "under-construction",
         ["beach-access", "swimming-pool", "clubhouse", "landscaped-garden"]),
        (6, ["Urban Loft", "apartment"], "5cr", [2, 3], "SoHo, New York", "ready",
         ["gymnasium", "covered-parking"]),
    ]
    return [
        Listing.from_record(
            {
                "id": listing_id,
                "property_type": types,
                "price_range": bucket,
                "bedroom_options": bedrooms,
                "location": location,
                "possession_status": status,
                "amenity_tags": amenities,
            }
        )
        for listing_id, types, bucket, bedrooms, location, status, amenities in records
    ]


@pytest.fixture
def fresh_catalog():
    reset_catalog_cache()
    yield
    reset_catalog_cache()


@pytest.fixture
def client():
    from django.test import Client

    return Client()
