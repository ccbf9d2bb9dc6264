from property_filters.filter_session import FilterSession, evaluate, has_active_filters
from property_filters.models import FilterSelection, Listing


def test_empty_selection_returns_every_listing_in_order(listings):
    visible = evaluate(FilterSelection(), listings)

    assert list(visible.listings) == listings
    assert visible.visible_count == len(listings)


def test_budget_scenario_keeps_ten_crore_listing(penthouse):
    assert evaluate(FilterSelection(budget_bucket="1000+"), [penthouse]).ids == [1]


def test_bedroom_sentinel_scenario_hides_four_bhk(penthouse):
    visible = evaluate(FilterSelection(bedrooms="5+"), [penthouse])

    assert visible.ids == []
    assert visible.visible_count == 0


def test_location_scenario_is_case_insensitive(listings):
    assert evaluate(FilterSelection(location_text="miami"), listings).ids == [3]


def test_visible_subsequence_preserves_input_order(listings):
    reordered = list(reversed(listings))

    assert evaluate(FilterSelection(property_type="villa"), listings).ids == [2, 4, 5]
    assert evaluate(FilterSelection(property_type="villa"), reordered).ids == [5, 4, 2]


def test_combined_facets(listings):
    assert evaluate(FilterSelection(property_type="villa", amenity="pool"), listings).ids == [2, 5]
    assert evaluate(FilterSelection(budget_bucket="500-1000"), listings).ids == [1, 3, 4, 6]
    assert evaluate(FilterSelection(location_text="new york", bedrooms="3"), listings).ids == [6]
    assert evaluate(FilterSelection(possession_status="under-construction"), listings).ids == [3, 5]


def test_unknown_values_yield_empty_result_not_error(listings):
    assert evaluate(FilterSelection(budget_bucket="bogus"), listings).ids == []
    assert evaluate(FilterSelection(bedrooms="many"), listings).ids == []


def test_evaluate_is_idempotent(listings):
    selection = FilterSelection(bedrooms="5+")

    assert evaluate(selection, listings) == evaluate(selection, listings)


def test_listing_with_missing_fields_is_evaluated_against_emptiness():
    bare = Listing.from_record({"id": 9})

    assert evaluate(FilterSelection(), [bare]).ids == [9]
    assert evaluate(FilterSelection(bedrooms="5+"), [bare]).ids == []
    assert evaluate(FilterSelection(location_text="miami"), [bare]).ids == []


def test_has_active_filters():
    assert not has_active_filters(FilterSelection())
    assert not has_active_filters(FilterSelection(location_text="   "))
    assert has_active_filters(FilterSelection(amenity="pool"))


def test_session_apply_reports_counts_and_summary(listings):
    session = FilterSession(listings)

    result = session.apply()
    assert result.visible_count == 6
    assert result.total_count == 6
    assert not result.has_active_filters
    assert result.active_filters == []
    assert result.summary == "Showing all 6 properties."

    result = session.update(property_type="villa", amenity="pool")
    assert result.visible.ids == [2, 5]
    assert result.has_active_filters
    assert result.active_filters == ["Type: villa", "Amenities: Swimming Pool"]
    assert result.summary == "Showing 2 of 6 properties for Type: villa; Amenities: Swimming Pool."


def test_session_incremental_update_matches_fresh_evaluation(listings):
    session = FilterSession(listings)
    session.update(location_text="new york")
    incremental = session.update(bedrooms="3")

    fresh = evaluate(FilterSelection(location_text="new york", bedrooms="3"), listings)
    assert incremental.visible == fresh


def test_session_clear_restores_full_set(listings):
    session = FilterSession(listings, FilterSelection(bedrooms="5+"))
    assert session.apply().visible.ids == [2, 4, 5]

    result = session.clear()
    assert result.visible.ids == [1, 2, 3, 4, 5, 6]
    assert session.selection == FilterSelection()


def test_session_from_query_applies_redirect_parameters(listings):
    session = FilterSession.from_query(listings, {"type": "villa", "bhk": "5+", "utm_source": "hero"})

    assert session.selection == FilterSelection(property_type="villa", bedrooms="5+")
    assert session.apply().visible.ids == [2, 4, 5]
    assert session.redirect_query() == {"type": "villa", "bhk": "5+"}


def test_same_page_and_cross_page_paths_agree(listings):
    in_page = FilterSession(listings)
    in_page.update(budget_bucket="1000+", possession_status="ready")

    redirected = FilterSession.from_query(listings, in_page.redirect_query())

    assert redirected.apply() == in_page.apply()


def test_listing_built_directly_with_bare_facet_values():
    listing = Listing(
        id=1,
        property_type="Luxury Residence",
        price_range="10cr",
        bedroom_options=4,
        amenity_tags="swimming-pool",
    )

    assert listing.property_type == frozenset({"Luxury Residence"})
    assert listing.bedroom_options == frozenset({4})
    assert evaluate(FilterSelection(property_type="Luxury Residence"), [listing]).ids == [1]
    assert evaluate(FilterSelection(property_type="L"), [listing]).ids == []
    assert evaluate(FilterSelection(amenity="pool"), [listing]).ids == [1]


def test_string_bedroom_options_are_coerced():
    listing = Listing(id=3, bedroom_options=frozenset({"6", "studio"}))

    assert listing.bedroom_options == frozenset({6})
    assert evaluate(FilterSelection(bedrooms="5+"), [listing]).ids == [3]


def test_whitespace_assigned_directly_is_not_an_active_filter(listings):
    selection = FilterSelection()
    selection.location_text = "   "

    assert not has_active_filters(selection)
    result = FilterSession(listings, selection).apply()
    assert not result.has_active_filters
    assert result.summary == "Showing all 6 properties."
