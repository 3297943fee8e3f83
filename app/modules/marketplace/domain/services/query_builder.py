# 📄 File: app/modules/marketplace/domain/services/query_builder.py
# 🧭 Purpose (Layman Explanation):
# Turns what a shopper asks for ("fungicides for tomatoes under $30 in Kigali that mention copper")
# into one precise question the database can answer.
# 🧪 Purpose (Technical Summary):
# Pure functions translating typed marketplace filters and free-text search into a single
# composable MongoDB filter document, plus the sort specification. No I/O and no side effects.
# 🔗 Dependencies:
# pydantic, re, vocabulary enums
# 🔄 Connected Modules / Calls From:
# application.handlers.query_handlers, tests

"""
Marketplace Query Builder

Filter semantics:
- availability defaults to "Available" when the caller gives none
- medicineType, applicationMethod and condition match exactly
- targetDisease / targetPlant match when the listing's list contains the value
- minPrice / maxPrice are inclusive bounds; an inverted range is kept as-is
  and therefore matches nothing
- location and activeIngredient are case-insensitive substring matches
- featured only filters when explicitly supplied

Free-text search is an OR over name, description, activeIngredient and tags,
combined with the structured filters by AND. User text is regex-escaped so
"(50%)" searches for those literal characters.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..models.vocabulary import (
    ApplicationMethod,
    Availability,
    Condition,
    MedicineType,
    SortField,
    SortOrder,
    TargetDisease,
    TargetPlant,
)

SEARCHABLE_FIELDS = ("name", "description", "activeIngredient", "tags")


class MedicineFilters(BaseModel):
    """Structured listing filters; every field is optional."""

    model_config = ConfigDict(use_enum_values=True, frozen=True)

    availability: Optional[Availability] = None
    medicine_type: Optional[MedicineType] = None
    application_method: Optional[ApplicationMethod] = None
    condition: Optional[Condition] = None
    target_disease: Optional[TargetDisease] = None
    target_plant: Optional[TargetPlant] = None
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = Field(default=None, ge=0)
    location: Optional[str] = None
    featured: Optional[bool] = None
    active_ingredient: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Filters the caller actually supplied, keyed by their wire names."""
        wire_names = {
            "medicine_type": "medicineType",
            "application_method": "applicationMethod",
            "target_disease": "targetDisease",
            "target_plant": "targetPlant",
            "min_price": "minPrice",
            "max_price": "maxPrice",
            "active_ingredient": "activeIngredient",
        }
        return {
            wire_names.get(name, name): value
            for name, value in self.model_dump(exclude_none=True).items()
        }


def contains_ignore_case(text: str) -> Dict[str, str]:
    """Case-insensitive literal substring match."""
    return {"$regex": re.escape(text), "$options": "i"}


def build_filter(filters: MedicineFilters) -> Dict[str, Any]:
    """
    Build the MongoDB filter document for structured filters.

    Args:
        filters: Parsed filter parameters

    Returns:
        Dict: Filter document; always constrains availability
    """
    query: Dict[str, Any] = {
        "availability": filters.availability or Availability.AVAILABLE.value
    }

    if filters.medicine_type:
        query["medicineType"] = filters.medicine_type
    if filters.application_method:
        query["applicationMethod"] = filters.application_method
    if filters.condition:
        query["condition"] = filters.condition
    if filters.target_disease:
        query["targetDiseases"] = filters.target_disease
    if filters.target_plant:
        query["targetPlants"] = filters.target_plant

    price: Dict[str, float] = {}
    if filters.min_price is not None:
        price["$gte"] = filters.min_price
    if filters.max_price is not None:
        price["$lte"] = filters.max_price
    if price:
        query["price"] = price

    if filters.location and filters.location.strip():
        query["seller.location.city"] = contains_ignore_case(filters.location.strip())
    if filters.active_ingredient and filters.active_ingredient.strip():
        query["activeIngredient"] = contains_ignore_case(filters.active_ingredient.strip())
    if filters.featured is not None:
        query["featured"] = filters.featured

    return query


def normalize_search_text(text: Optional[str]) -> Optional[str]:
    """Trimmed search text, or None when there is nothing to search for."""
    if text is None:
        return None
    text = text.strip()
    return text or None


def build_search_predicate(text: str) -> Dict[str, Any]:
    """
    Build the free-text OR group.

    Args:
        text: Non-empty, trimmed search text

    Returns:
        Dict: {"$or": [...]} over the searchable fields
    """
    pattern = contains_ignore_case(text)
    return {"$or": [{field: dict(pattern)} for field in SEARCHABLE_FIELDS]}


def combine(*predicates: Dict[str, Any]) -> Dict[str, Any]:
    """AND together non-empty predicates."""
    parts = [p for p in predicates if p]
    if not parts:
        return {}
    if len(parts) == 1:
        return parts[0]
    return {"$and": parts}


def build_listing_query(filters: MedicineFilters, search: Optional[str] = None) -> Dict[str, Any]:
    """Structured filters, optionally narrowed by free text."""
    text = normalize_search_text(search)
    if text is None:
        return build_filter(filters)
    return combine(build_filter(filters), build_search_predicate(text))


def build_sort(
    sort_by: SortField = SortField.CREATED_AT,
    sort_order: SortOrder = SortOrder.DESC
) -> List[Tuple[str, int]]:
    """
    Build the sort specification.

    The document id is appended as a tiebreaker so that equal sort keys
    still page deterministically.
    """
    field = SortField(sort_by).value
    direction = SortOrder(sort_order).direction
    return [(field, direction), ("_id", direction)]
