"""Marketplace command and query handlers against the in-memory store."""

from unittest.mock import AsyncMock

import pytest

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
    SearchMedicinesQueryHandler,
)
from app.modules.marketplace.application.queries.medicine_queries import (
    FeaturedMedicinesQuery,
    GetMedicineQuery,
    ListMedicinesQuery,
    SearchMedicinesQuery,
)
from app.modules.marketplace.domain.models.medicine import MedicineDetails
from app.modules.marketplace.domain.services.query_builder import MedicineFilters
from app.shared.core.exceptions import (
    InvalidIdError,
    MedicineNotFoundError,
    RepositoryError,
    ValidationError,
)

MISSING_ID = "65f0000000000000000000ff"

pytestmark = pytest.mark.unit


@pytest.fixture
def create(medicine_repository, make_payload):
    handler = CreateMedicineCommandHandler(medicine_repository)

    async def _create(**overrides):
        details = MedicineDetails.model_validate(make_payload(**overrides))
        return await handler.handle(CreateMedicineCommand(details=details))

    return _create


class TestCommandHandlers:
    """Create / update / delete"""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_zero_views(self, create) -> None:
        created = await create()
        assert created.id is not None
        assert created.views == 0
        assert created.created_at == created.updated_at

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, create, medicine_repository) -> None:
        created = await create()
        handler = UpdateMedicineCommandHandler(medicine_repository)

        updated = await handler.handle(
            UpdateMedicineCommand(medicine_id=created.id, changes={"price": 30.0})
        )

        assert updated.price == 30.0
        assert updated.name == created.name
        assert updated.updated_at >= created.updated_at
        assert updated.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_empty_update_refreshes_timestamp(self, create, medicine_repository) -> None:
        created = await create()
        handler = UpdateMedicineCommandHandler(medicine_repository)

        updated = await handler.handle(UpdateMedicineCommand(medicine_id=created.id))

        assert updated.updated_at >= created.updated_at
        assert updated.price == created.price

    @pytest.mark.asyncio
    async def test_update_missing_listing(self, medicine_repository) -> None:
        handler = UpdateMedicineCommandHandler(medicine_repository)
        with pytest.raises(MedicineNotFoundError):
            await handler.handle(UpdateMedicineCommand(medicine_id=MISSING_ID))

    @pytest.mark.asyncio
    async def test_delete_returns_removed_listing(self, create, medicine_repository) -> None:
        created = await create()
        handler = DeleteMedicineCommandHandler(medicine_repository)

        removed = await handler.handle(DeleteMedicineCommand(medicine_id=created.id))

        assert removed.name == "Copper Fungicide Pro"
        assert await medicine_repository.count({}) == 0

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self, medicine_repository) -> None:
        handler = DeleteMedicineCommandHandler(medicine_repository)
        with pytest.raises(InvalidIdError) as exc_info:
            await handler.handle(DeleteMedicineCommand(medicine_id="not-an-id"))
        assert exc_info.value.message == "Invalid medicine ID format"


class TestQueryHandlers:
    """Get / list / search / featured"""

    @pytest.mark.asyncio
    async def test_get_counts_views(self, create, medicine_repository) -> None:
        created = await create()
        handler = GetMedicineQueryHandler(medicine_repository)

        first = await handler.handle(GetMedicineQuery(medicine_id=created.id))
        second = await handler.handle(GetMedicineQuery(medicine_id=created.id))

        assert (first.views, second.views) == (1, 2)

    @pytest.mark.asyncio
    async def test_get_missing(self, medicine_repository) -> None:
        handler = GetMedicineQueryHandler(medicine_repository)
        with pytest.raises(MedicineNotFoundError):
            await handler.handle(GetMedicineQuery(medicine_id=MISSING_ID))

    @pytest.mark.asyncio
    async def test_list_hides_unavailable_by_default(self, create, medicine_repository) -> None:
        await create(name="On Shelf")
        await create(name="Gone", availability="Sold")
        handler = ListMedicinesQueryHandler(medicine_repository)

        page = await handler.handle(ListMedicinesQuery())

        assert [m.name for m in page.medicines] == ["On Shelf"]
        assert page.pagination.total_items == 1

    @pytest.mark.asyncio
    async def test_list_pages_are_stable(self, create, medicine_repository) -> None:
        for index in range(5):
            await create(name=f"Medicine {index}", price=10.0)
        handler = ListMedicinesQueryHandler(medicine_repository)

        query = ListMedicinesQuery(page=1, limit=2, sort_by="price", sort_order="asc")
        first = await handler.handle(query)
        again = await handler.handle(query)
        second = await handler.handle(query.model_copy(update={"page": 2}))

        assert [m.id for m in first.medicines] == [m.id for m in again.medicines]
        assert not {m.id for m in first.medicines} & {m.id for m in second.medicines}
        assert first.pagination.total_pages == 3

    @pytest.mark.asyncio
    async def test_search_requires_text(self, medicine_repository) -> None:
        handler = SearchMedicinesQueryHandler(medicine_repository)
        with pytest.raises(ValidationError) as exc_info:
            await handler.handle(SearchMedicinesQuery(text="   "))
        assert exc_info.value.message == "Search query is required"

    @pytest.mark.asyncio
    async def test_search_matches_tags_and_echoes(self, create, medicine_repository) -> None:
        await create()
        await create(name="Sulfur Dust", activeIngredient="Sulfur", tags=["dust"],
                     description="Sulfur dust for mildew.")
        handler = SearchMedicinesQueryHandler(medicine_repository)

        page = await handler.handle(SearchMedicinesQuery(
            text=" ORGANIC ",
            filters=MedicineFilters(target_plant="Tomato"),
        ))

        assert [m.name for m in page.medicines] == ["Copper Fungicide Pro"]
        assert page.echo == {"searchQuery": "ORGANIC", "filters": {"targetPlant": "Tomato"}}

    @pytest.mark.asyncio
    async def test_featured_only_available(self, create, medicine_repository) -> None:
        await create(name="Star", featured=True)
        await create(name="Sold Star", featured=True, availability="Sold")
        await create(name="Plain")
        handler = FeaturedMedicinesQueryHandler(medicine_repository)

        featured = await handler.handle(FeaturedMedicinesQuery(limit=10))

        assert [m.name for m in featured] == ["Star"]

    @pytest.mark.asyncio
    async def test_failed_page_read_skips_count(self) -> None:
        repository = AsyncMock()
        repository.find.side_effect = RepositoryError("Failed to retrieve medicines")
        handler = ListMedicinesQueryHandler(repository)

        with pytest.raises(RepositoryError):
            await handler.handle(ListMedicinesQuery())

        repository.count.assert_not_awaited()
