"""Marketplace filter document and sort construction."""

import re

import pytest

from app.modules.marketplace.domain.models.vocabulary import (
    Availability,
    MedicineType,
    SortField,
    SortOrder,
    TargetDisease,
    TargetPlant,
)
from app.modules.marketplace.domain.services.query_builder import (
    MedicineFilters,
    build_filter,
    build_listing_query,
    build_search_predicate,
    build_sort,
    combine,
    normalize_search_text,
)

pytestmark = pytest.mark.unit


class TestBuildFilter:
    """build_filter"""

    def test_defaults_to_available(self) -> None:
        assert build_filter(MedicineFilters()) == {"availability": "Available"}

    def test_explicit_availability_is_kept(self) -> None:
        query = build_filter(MedicineFilters(availability=Availability.SOLD))
        assert query["availability"] == "Sold"

    def test_list_fields_match_by_membership(self) -> None:
        query = build_filter(MedicineFilters(
            target_disease=TargetDisease.LATE_BLIGHT,
            target_plant=TargetPlant.TOMATO,
        ))
        assert query["targetDiseases"] == "Late Blight"
        assert query["targetPlants"] == "Tomato"

    def test_exact_match_fields(self) -> None:
        query = build_filter(MedicineFilters(medicine_type=MedicineType.COPPER_BASED))
        assert query["medicineType"] == "Copper-based"

    def test_price_bounds_are_inclusive(self) -> None:
        query = build_filter(MedicineFilters(min_price=10, max_price=50))
        assert query["price"] == {"$gte": 10, "$lte": 50}

    def test_inverted_price_range_is_not_corrected(self) -> None:
        query = build_filter(MedicineFilters(min_price=100, max_price=50))
        assert query["price"] == {"$gte": 100, "$lte": 50}

    def test_zero_min_price_still_filters(self) -> None:
        query = build_filter(MedicineFilters(min_price=0))
        assert query["price"] == {"$gte": 0}

    def test_location_is_escaped_case_insensitive_substring(self) -> None:
        query = build_filter(MedicineFilters(location="  St. Louis "))
        assert query["seller.location.city"] == {"$regex": re.escape("St. Louis"), "$options": "i"}

    def test_blank_location_is_ignored(self) -> None:
        assert "seller.location.city" not in build_filter(MedicineFilters(location="   "))

    def test_featured_false_filters(self) -> None:
        assert build_filter(MedicineFilters(featured=False))["featured"] is False

    def test_featured_absent_does_not_filter(self) -> None:
        assert "featured" not in build_filter(MedicineFilters())

    def test_applied_uses_wire_names(self) -> None:
        filters = MedicineFilters(medicine_type=MedicineType.FUNGICIDE, min_price=5)
        assert filters.applied() == {"medicineType": "Fungicide", "minPrice": 5}


class TestSearchPredicate:
    """Free-text search"""

    def test_or_over_searchable_fields(self) -> None:
        predicate = build_search_predicate("copper")
        fields = [next(iter(clause)) for clause in predicate["$or"]]
        assert fields == ["name", "description", "activeIngredient", "tags"]

    def test_special_characters_are_literal(self) -> None:
        predicate = build_search_predicate("(50%)")
        pattern = predicate["$or"][0]["name"]["$regex"]
        assert re.search(pattern, "Copper (50%) WP")
        assert not re.search(pattern, "Copper 50% WP")

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_text_normalizes_to_none(self, text) -> None:
        assert normalize_search_text(text) is None

    def test_listing_query_ands_text_with_filters(self) -> None:
        query = build_listing_query(MedicineFilters(), " copper ")
        assert query["$and"][0] == {"availability": "Available"}
        assert "$or" in query["$and"][1]

    def test_listing_query_without_text_is_plain_filter(self) -> None:
        assert build_listing_query(MedicineFilters(), "  ") == {"availability": "Available"}

    def test_combine_skips_empty_parts(self) -> None:
        assert combine({}, {"a": 1}) == {"a": 1}
        assert combine() == {}


class TestBuildSort:
    """build_sort"""

    def test_default_newest_first_with_id_tiebreaker(self) -> None:
        assert build_sort() == [("createdAt", -1), ("_id", -1)]

    def test_ascending_price(self) -> None:
        assert build_sort(SortField.PRICE, SortOrder.ASC) == [("price", 1), ("_id", 1)]

    def test_accepts_raw_values(self) -> None:
        assert build_sort("name", "asc") == [("name", 1), ("_id", 1)]
