from django.urls import path

from . import views

urlpatterns = [
    path("properties/", views.filter_properties, name="filter-properties"),
    path("properties/search/", views.search_redirect, name="search-redirect"),
    path("properties/export/", views.download_filtered_csv, name="download-filtered-csv"),
    path("properties/<int:listing_id>/", views.property_detail, name="property-detail"),
    path("filters/options/", views.filter_options_view, name="filter-options"),
]
