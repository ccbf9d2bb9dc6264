from __future__ import annotations

import json
import logging
from typing import Dict

from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from property_filters.catalog_reader import get_listing, get_listings, list_locations, listings_to_frame
from property_filters.filter_session import FilterSession
from property_filters.models import FilterSelection
from property_filters.query_codec import build_redirect_url, encode_to_query
from property_filters.vocabulary import FACET_NAMES, filter_options

logger = logging.getLogger(__name__)

DEFAULT_PROPERTIES_PAGE_URL = "/properties/"


def _session_from_request(request) -> FilterSession:
    return FilterSession.from_query(get_listings(), request.GET)


@require_GET
def filter_properties(request):
    session = _session_from_request(request)
    result = session.apply()
    payload = result.to_dict()
    payload["query"] = session.redirect_query()
    return JsonResponse(payload)


@csrf_exempt
@require_POST
def search_redirect(request):
    """
    Hero search form: encode the chosen facets and hand back the properties page URL to navigate to.
    """
    try:
        payload = json.loads(request.body.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({"detail": "Invalid JSON body."}, status=400)

    if not isinstance(payload, dict):
        return JsonResponse({"detail": "Search payload must be a JSON object."}, status=400)

    facets: Dict[str, object] = {name: payload[name] for name in FACET_NAMES if name in payload}
    selection = FilterSelection(**facets)
    base_url = getattr(settings, "PROPERTIES_PAGE_URL", DEFAULT_PROPERTIES_PAGE_URL)
    redirect_url = build_redirect_url(base_url, selection)
    logger.info("Search redirect to %s", redirect_url)
    return JsonResponse({"redirect_url": redirect_url, "query": encode_to_query(selection)})


@require_GET
def property_detail(request, listing_id: int):
    listing = get_listing(listing_id)
    if listing is None:
        return JsonResponse({"detail": "Requested property was not found."}, status=404)
    return JsonResponse(listing.to_dict())


@require_GET
def filter_options_view(request):
    return JsonResponse({"options": filter_options(list_locations())})


@require_GET
def download_filtered_csv(request):
    result = _session_from_request(request).apply()
    if not result.visible_count:
        return JsonResponse({"detail": "No properties match the requested filters."}, status=404)

    csv_buffer = listings_to_frame(result.visible).to_csv(index=False)

    response = HttpResponse(csv_buffer, content_type="text/csv; charset=utf-8")
    response["Content-Disposition"] = 'attachment; filename="properties.csv"'
    return response
