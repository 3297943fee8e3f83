# 📄 File: app/modules/marketplace/application/queries/medicine_queries.py
# 🧭 Purpose (Layman Explanation):
# Describes the questions shoppers can ask the catalog: one product, a filtered page of products,
# a text search, or the featured picks.
# 🧪 Purpose (Technical Summary):
# CQRS query objects for marketplace read operations carrying filters, free text, paging
# and sorting parameters to the query handlers.
# 🔗 Dependencies:
# pydantic, domain query builder and pagination models
# 🔄 Connected Modules / Calls From:
# application.handlers.query_handlers, presentation.api.v1.marketplace

from typing import Optional

from pydantic import BaseModel, Field

from app.modules.marketplace.domain.models.vocabulary import SortField, SortOrder
from app.modules.marketplace.domain.services.pagination import PageRequest
from app.modules.marketplace.domain.services.query_builder import MedicineFilters


class GetMedicineQuery(BaseModel):
    """Fetch a single listing; counts as a view."""

    medicine_id: str = Field(..., description="24-character hex listing id")


class ListMedicinesQuery(BaseModel):
    """
    Paginated, filtered and sorted catalog listing.

    `search` optionally narrows the structured filters with free text.
    """

    filters: MedicineFilters = Field(default_factory=MedicineFilters)
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    @property
    def page_request(self) -> PageRequest:
        return PageRequest(page=self.page, limit=self.limit)


class SearchMedicinesQuery(ListMedicinesQuery):
    """Free-text search; `text` must contain something other than whitespace."""

    text: Optional[str] = None


class FeaturedMedicinesQuery(BaseModel):
    """Newest featured, available listings."""

    limit: int = Field(default=10, ge=1)
