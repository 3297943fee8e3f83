# 📄 File: app/modules/marketplace/presentation/api/v1/marketplace.py
# 🧭 Purpose (Layman Explanation):
# The front counter of the plant medicine shop: shoppers browse, filter and search medicines here,
# and sellers add, edit or remove their listings.
#
# 🧪 Purpose (Technical Summary):
# FastAPI marketplace endpoints. Parses query/path/body input into CQRS queries and commands,
# delegates to the application handlers and renders the uniform {success, message, data} envelope.
#
# 🔗 Dependencies:
# - FastAPI router, Query/Path parameters, status codes
# - app.modules.marketplace.application (commands, queries, handlers)
# - app.modules.marketplace.presentation.api.schemas.medicine_schemas (request schemas, serializer)
# - app.modules.marketplace.presentation.dependencies (handler injection)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted at /marketplace)
# - Marketplace pages of the web and mobile clients

"""
Marketplace API Endpoints

Endpoints:
- GET /: List medicines (filters, optional search text, paging, sorting)
- POST /: Create a listing
- GET /featured: Newest featured listings
- GET /meta: Vocabularies used by the catalog
- GET /search: Free-text search combined with filters
- GET /type/{medicine_type}: Listings of one medicine type
- GET /disease/{disease}: Listings treating one disease
- GET /plant/{plant}: Listings for one plant
- GET /{medicine_id}: Single listing (counts a view)
- PUT /{medicine_id}: Partial update
- DELETE /{medicine_id}: Remove a listing

Static paths are registered before /{medicine_id} so they are never read as ids.
Errors raised by the handlers are rendered by the application exception handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from app.modules.marketplace.application.commands.medicine_commands import (
    CreateMedicineCommand,
    DeleteMedicineCommand,
    UpdateMedicineCommand,
)
from app.modules.marketplace.application.handlers.command_handlers import (
    CreateMedicineCommandHandler,
    DeleteMedicineCommandHandler,
    UpdateMedicineCommandHandler,
)
from app.modules.marketplace.application.handlers.query_handlers import (
    FeaturedMedicinesQueryHandler,
    GetMedicineQueryHandler,
    ListMedicinesQueryHandler,
    MedicinePage,
    SearchMedicinesQueryHandler,
)
from app.modules.marketplace.application.queries.medicine_queries import (
    FeaturedMedicinesQuery,
    GetMedicineQuery,
    ListMedicinesQuery,
    SearchMedicinesQuery,
)
from app.modules.marketplace.domain.models.vocabulary import (
    ApplicationMethod,
    Availability,
    Condition,
    MedicineType,
    SortField,
    SortOrder,
    TargetDisease,
    TargetPlant,
    marketplace_vocabularies,
)
from app.modules.marketplace.domain.services.query_builder import MedicineFilters
from app.modules.marketplace.presentation.api.schemas.medicine_schemas import (
    MedicineCreateRequest,
    MedicineUpdateRequest,
    serialize_medicine,
    serialize_medicines,
)
from app.modules.marketplace.presentation.dependencies import (
    get_create_medicine_handler,
    get_delete_medicine_handler,
    get_featured_medicines_handler,
    get_list_medicines_handler,
    get_medicine_handler,
    get_search_medicines_handler,
    get_update_medicine_handler,
)
from app.shared.config.settings import get_settings
from app.shared.utils.formatters import format_api_response
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)
settings = get_settings()

# Create router
marketplace_router = APIRouter()


# =========================================================================
# SHARED QUERY PARAMETERS
# =========================================================================

class PagingParams:
    """page / limit / sortBy / sortOrder query parameters"""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number (1-based)"),
        limit: int = Query(
            settings.MARKETPLACE_DEFAULT_PAGE_SIZE,
            ge=1,
            le=settings.MARKETPLACE_MAX_PAGE_SIZE,
            description="Items per page"
        ),
        sort_by: SortField = Query(SortField.CREATED_AT, alias="sortBy"),
        sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
    ):
        self.page = page
        self.limit = limit
        self.sort_by = sort_by
        self.sort_order = sort_order

    def as_query_fields(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "sort_by": self.sort_by,
            "sort_order": self.sort_order,
        }


def medicine_filters(
    availability: Optional[Availability] = Query(None),
    medicine_type: Optional[MedicineType] = Query(None, alias="medicineType"),
    application_method: Optional[ApplicationMethod] = Query(None, alias="applicationMethod"),
    condition: Optional[Condition] = Query(None),
    target_disease: Optional[TargetDisease] = Query(None, alias="targetDisease"),
    target_plant: Optional[TargetPlant] = Query(None, alias="targetPlant"),
    min_price: Optional[float] = Query(None, ge=0, alias="minPrice"),
    max_price: Optional[float] = Query(None, ge=0, alias="maxPrice"),
    location: Optional[str] = Query(None, description="Seller city (substring)"),
    featured: Optional[bool] = Query(None),
) -> MedicineFilters:
    return MedicineFilters(
        availability=availability,
        medicine_type=medicine_type,
        application_method=application_method,
        condition=condition,
        target_disease=target_disease,
        target_plant=target_plant,
        min_price=min_price,
        max_price=max_price,
        location=location,
        featured=featured,
    )


def _page_data(page: MedicinePage, **echo) -> dict:
    return {
        "medicines": serialize_medicines(page.medicines),
        "pagination": page.pagination.to_dict(),
        **page.echo,
        **echo,
    }


# =========================================================================
# COLLECTION ENDPOINTS
# =========================================================================

@marketplace_router.get(
    "",
    summary="List medicines",
    description="Paginated catalog listing with filters, optional search text and sorting",
    responses={
        200: {"description": "Page of medicines with pagination metadata"},
        400: {"description": "Invalid filter, paging or sort parameter"},
    }
)
async def list_medicines(
    filters: MedicineFilters = Depends(medicine_filters),
    paging: PagingParams = Depends(),
    search: Optional[str] = Query(None, description="Free text narrowing the filters"),
    handler: ListMedicinesQueryHandler = Depends(get_list_medicines_handler),
) -> dict:
    """
    List medicines.

    Availability defaults to "Available" when not given. An inverted price
    range or a page past the end yields an empty page, not an error.
    """
    query = ListMedicinesQuery(filters=filters, search=search, **paging.as_query_fields())
    page = await handler.handle(query)
    return format_api_response("Medicines retrieved successfully", _page_data(page))


@marketplace_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create medicine listing",
    responses={
        201: {"description": "Listing created"},
        400: {"description": "Validation error with per-field details"},
    }
)
async def create_medicine(
    body: MedicineCreateRequest,
    handler: CreateMedicineCommandHandler = Depends(get_create_medicine_handler),
) -> JSONResponse:
    created = await handler.handle(CreateMedicineCommand(details=body))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=format_api_response("Medicine created successfully", serialize_medicine(created))
    )


@marketplace_router.get(
    "/featured",
    summary="Featured medicines",
    description="Newest featured listings that are currently available",
)
async def get_featured_medicines(
    limit: int = Query(
        settings.FEATURED_DEFAULT_LIMIT,
        ge=1,
        le=settings.MARKETPLACE_MAX_PAGE_SIZE
    ),
    handler: FeaturedMedicinesQueryHandler = Depends(get_featured_medicines_handler),
) -> dict:
    medicines = await handler.handle(FeaturedMedicinesQuery(limit=limit))
    return format_api_response(
        "Featured medicines retrieved successfully",
        serialize_medicines(medicines)
    )


@marketplace_router.get(
    "/meta",
    summary="Catalog vocabularies",
    description="Allowed values for every enumerated listing field",
)
async def get_marketplace_meta() -> dict:
    return format_api_response(
        "Marketplace metadata retrieved successfully",
        marketplace_vocabularies()
    )


@marketplace_router.get(
    "/search",
    summary="Search medicines",
    description="Case-insensitive text search over name, description, active ingredient and tags",
    responses={
        200: {"description": "Matching medicines, echoing the query and filters"},
        400: {"description": "Missing search text or invalid parameter"},
    }
)
async def search_medicines(
    q: Optional[str] = Query(None, description="Search text"),
    filters: MedicineFilters = Depends(medicine_filters),
    active_ingredient: Optional[str] = Query(None, alias="activeIngredient"),
    paging: PagingParams = Depends(),
    handler: SearchMedicinesQueryHandler = Depends(get_search_medicines_handler),
) -> dict:
    if active_ingredient is not None:
        filters = filters.model_copy(update={"active_ingredient": active_ingredient})

    query = SearchMedicinesQuery(text=q, filters=filters, **paging.as_query_fields())
    page = await handler.handle(query)
    return format_api_response("Search completed successfully", _page_data(page))


# =========================================================================
# DIMENSION ENDPOINTS
# =========================================================================

@marketplace_router.get("/type/{medicine_type}", summary="Medicines by type")
async def get_medicines_by_type(
    medicine_type: MedicineType,
    paging: PagingParams = Depends(),
    handler: ListMedicinesQueryHandler = Depends(get_list_medicines_handler),
) -> dict:
    filters = MedicineFilters(availability=Availability.AVAILABLE, medicine_type=medicine_type)
    page = await handler.handle(ListMedicinesQuery(filters=filters, **paging.as_query_fields()))
    return format_api_response(
        f"Medicines of type {medicine_type.value} retrieved successfully",
        _page_data(page, medicineType=medicine_type.value)
    )


@marketplace_router.get("/disease/{disease}", summary="Medicines treating a disease")
async def get_medicines_by_disease(
    disease: TargetDisease,
    paging: PagingParams = Depends(),
    handler: ListMedicinesQueryHandler = Depends(get_list_medicines_handler),
) -> dict:
    filters = MedicineFilters(availability=Availability.AVAILABLE, target_disease=disease)
    page = await handler.handle(ListMedicinesQuery(filters=filters, **paging.as_query_fields()))
    return format_api_response(
        f"Medicines for {disease.value} retrieved successfully",
        _page_data(page, disease=disease.value)
    )


@marketplace_router.get("/plant/{plant}", summary="Medicines for a plant")
async def get_medicines_by_plant(
    plant: TargetPlant,
    paging: PagingParams = Depends(),
    handler: ListMedicinesQueryHandler = Depends(get_list_medicines_handler),
) -> dict:
    filters = MedicineFilters(availability=Availability.AVAILABLE, target_plant=plant)
    page = await handler.handle(ListMedicinesQuery(filters=filters, **paging.as_query_fields()))
    return format_api_response(
        f"Medicines for {plant.value} retrieved successfully",
        _page_data(page, plant=plant.value)
    )


# =========================================================================
# SINGLE LISTING ENDPOINTS
# =========================================================================

@marketplace_router.get(
    "/{medicine_id}",
    summary="Get medicine",
    responses={
        200: {"description": "Listing, with its view counter incremented"},
        400: {"description": "Invalid medicine ID format"},
        404: {"description": "Medicine not found"},
    }
)
async def get_medicine(
    medicine_id: str,
    handler: GetMedicineQueryHandler = Depends(get_medicine_handler),
) -> dict:
    listing = await handler.handle(GetMedicineQuery(medicine_id=medicine_id))
    return format_api_response("Medicine retrieved successfully", serialize_medicine(listing))


@marketplace_router.put(
    "/{medicine_id}",
    summary="Update medicine",
    description="Partial update; only supplied fields change and updatedAt is refreshed",
    responses={
        200: {"description": "Updated listing"},
        400: {"description": "Invalid id or field values"},
        404: {"description": "Medicine not found"},
    }
)
async def update_medicine(
    medicine_id: str,
    body: Optional[MedicineUpdateRequest] = None,
    handler: UpdateMedicineCommandHandler = Depends(get_update_medicine_handler),
) -> dict:
    changes = body.to_changes() if body is not None else {}
    updated = await handler.handle(
        UpdateMedicineCommand(medicine_id=medicine_id, changes=changes)
    )
    return format_api_response("Medicine updated successfully", serialize_medicine(updated))


@marketplace_router.delete(
    "/{medicine_id}",
    summary="Delete medicine",
    responses={
        200: {"description": "Deletion receipt"},
        400: {"description": "Invalid medicine ID format"},
        404: {"description": "Medicine not found"},
    }
)
async def delete_medicine(
    medicine_id: str,
    handler: DeleteMedicineCommandHandler = Depends(get_delete_medicine_handler),
) -> dict:
    removed = await handler.handle(DeleteMedicineCommand(medicine_id=medicine_id))
    return format_api_response(
        "Medicine deleted successfully",
        {"deletedMedicine": {"id": removed.id, "name": removed.name}}
    )
