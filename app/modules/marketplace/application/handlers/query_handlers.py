# 📄 File: app/modules/marketplace/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "catalog clerks" that answer shoppers' questions: they turn a request into a database query,
# fetch the right page of medicines, and count how many matched in total.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for marketplace reads. Each handler builds one filter document,
# drives both the page query and the count from it, and returns a MedicinePage with
# pagination metadata.
#
# 🔗 Dependencies:
# - app.modules.marketplace.domain.services (query builder, pagination)
# - app.modules.marketplace.domain.repositories (repository interface)
# - app.shared.utils.validators (id validation)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.marketplace.presentation.api.v1.marketplace (API endpoints invoke handlers)
# - app.modules.marketplace.presentation.dependencies (handler construction)

"""
Marketplace Query Handlers

Query Handlers:
- GetMedicineQueryHandler: single listing, increments its view counter
- ListMedicinesQueryHandler: filtered + optionally text-narrowed listing
- SearchMedicinesQueryHandler: required free text AND filters
- FeaturedMedicinesQueryHandler: newest featured available listings

Repeated reads with no intervening writes return identical pages because the
sort always ends with the document id.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from app.modules.marketplace.application.queries.medicine_queries import (
    FeaturedMedicinesQuery,
    GetMedicineQuery,
    ListMedicinesQuery,
    SearchMedicinesQuery,
)
from app.modules.marketplace.domain.models.medicine import MedicineListing
from app.modules.marketplace.domain.models.vocabulary import Availability, SortField, SortOrder
from app.modules.marketplace.domain.repositories.medicine_repository import MedicineRepository
from app.modules.marketplace.domain.services.pagination import PaginationMeta
from app.modules.marketplace.domain.services.query_builder import (
    MedicineFilters,
    build_filter,
    build_listing_query,
    build_search_predicate,
    build_sort,
    combine,
    normalize_search_text,
)
from app.shared.core.exceptions import MedicineNotFoundError, ValidationError
from app.shared.utils.logging import get_logger
from app.shared.utils.validators import require_object_id

logger = get_logger(__name__)

INVALID_MEDICINE_ID = "Invalid medicine ID format"


@dataclass
class MedicinePage:
    """One page of listings plus its pagination block"""

    medicines: List[MedicineListing]
    pagination: PaginationMeta
    echo: Dict[str, Any] = field(default_factory=dict)


class GetMedicineQueryHandler:
    """
    Handler for single listing retrieval.

    Reading a listing counts as a view; the increment and the read are one
    atomic store operation.
    """

    def __init__(self, repository: MedicineRepository):
        self._repository = repository

    async def handle(self, query: GetMedicineQuery) -> MedicineListing:
        """
        Handle listing retrieval.

        Raises:
            InvalidIdError: If the id is not a valid ObjectId
            MedicineNotFoundError: If no listing has this id
        """
        medicine_id = require_object_id(query.medicine_id, INVALID_MEDICINE_ID)

        listing = await self._repository.increment_views(medicine_id)
        if listing is None:
            raise MedicineNotFoundError(medicine_id)

        logger.debug(f"Retrieved medicine {medicine_id} (views={listing.views})")
        return listing


class ListMedicinesQueryHandler:
    """
    Handler for filtered catalog listings.

    Orchestrates: build predicate -> sort -> paginate -> execute -> shape.
    """

    def __init__(self, repository: MedicineRepository):
        self._repository = repository

    async def handle(self, query: ListMedicinesQuery) -> MedicinePage:
        predicate = build_listing_query(query.filters, query.search)
        return await self._fetch_page(predicate, query)

    async def _fetch_page(self, predicate: Dict[str, Any], query: ListMedicinesQuery) -> MedicinePage:
        page_request = query.page_request
        sort = build_sort(query.sort_by, query.sort_order)

        medicines = await self._repository.find(
            predicate,
            sort,
            skip=page_request.skip,
            limit=page_request.limit,
        )
        total = await self._repository.count(predicate)

        logger.debug(
            f"Listing query matched {total} medicines",
            extra={"page": page_request.page, "limit": page_request.limit}
        )
        return MedicinePage(
            medicines=medicines,
            pagination=PaginationMeta.build(page_request, total),
        )


class SearchMedicinesQueryHandler(ListMedicinesQueryHandler):
    """
    Handler for free-text search.

    The text OR group is ANDed with the structured filters, so results are
    always a subset of what the filters alone would return.
    """

    async def handle(self, query: SearchMedicinesQuery) -> MedicinePage:
        """
        Raises:
            ValidationError: If the search text is missing or blank
        """
        text = normalize_search_text(query.text)
        if text is None:
            raise ValidationError("Search query is required", field="q")

        predicate = combine(build_filter(query.filters), build_search_predicate(text))
        page = await self._fetch_page(predicate, query)
        page.echo = {
            "searchQuery": text,
            "filters": query.filters.applied(),
        }
        return page


class FeaturedMedicinesQueryHandler:
    """Handler for the featured strip: featured AND available, newest first."""

    def __init__(self, repository: MedicineRepository):
        self._repository = repository

    async def handle(self, query: FeaturedMedicinesQuery) -> List[MedicineListing]:
        predicate = build_filter(
            MedicineFilters(featured=True, availability=Availability.AVAILABLE)
        )
        return await self._repository.find(
            predicate,
            build_sort(SortField.CREATED_AT, SortOrder.DESC),
            skip=0,
            limit=query.limit,
        )
