"""MongoDB repositories against a mocked async collection."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from app.modules.marketplace.domain.models.medicine import MedicineDetails, MedicineListing
from app.modules.marketplace.infrastructure.database.medicine_repository_impl import (
    COLLECTION_NAME as MEDICINE_COLLECTION,
    MongoMedicineRepository,
)
from app.modules.plant_advisor.domain.models.prompt_record import PromptRecord
from app.modules.plant_advisor.infrastructure.database.prompt_repository_impl import (
    MongoPromptRepository,
)
from app.shared.core.exceptions import RepositoryError

pytestmark = pytest.mark.unit


@pytest.fixture
def collection() -> MagicMock:
    collection = MagicMock()
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.find_one_and_delete = AsyncMock()
    collection.count_documents = AsyncMock(return_value=0)
    return collection


@pytest.fixture
def database(collection) -> MagicMock:
    database = MagicMock()
    database.__getitem__.return_value = collection
    return database


@pytest.fixture
def listing(medicine_payload) -> MedicineListing:
    return MedicineListing.create_new(MedicineDetails.model_validate(medicine_payload))


class TestMongoMedicineRepository:
    """plantdiseasemedicines collection"""

    def test_uses_listing_collection(self, database) -> None:
        MongoMedicineRepository(database)
        database.__getitem__.assert_called_once_with(MEDICINE_COLLECTION)

    @pytest.mark.asyncio
    async def test_create_stores_camel_case_document(self, database, collection, listing) -> None:
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)

        created = await MongoMedicineRepository(database).create(listing)

        document = collection.insert_one.await_args.args[0]
        assert "_id" not in document
        assert document["medicineType"] == "Copper-based"
        assert document["seller"]["email"] == listing.seller.email
        assert created.id == str(inserted_id)

    @pytest.mark.asyncio
    async def test_increment_views_is_single_atomic_update(self, database, collection, listing) -> None:
        medicine_id = str(ObjectId())
        collection.find_one_and_update.return_value = {
            "_id": ObjectId(medicine_id), **listing.to_document(), "views": 4,
        }

        viewed = await MongoMedicineRepository(database).increment_views(medicine_id)

        collection.find_one_and_update.assert_awaited_once_with(
            {"_id": ObjectId(medicine_id)},
            {"$inc": {"views": 1}},
            return_document=ReturnDocument.AFTER,
        )
        assert viewed.views == 4
        assert viewed.id == medicine_id

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, database, collection) -> None:
        collection.find_one_and_update.return_value = None
        result = await MongoMedicineRepository(database).update_fields(str(ObjectId()), {"price": 2.0})
        assert result is None

    @pytest.mark.asyncio
    async def test_find_applies_sort_then_window(self, database, collection) -> None:
        cursor = collection.find.return_value
        sort = (("price", 1), ("_id", 1))

        await MongoMedicineRepository(database).find({"availability": "Available"}, sort, skip=40, limit=20)

        collection.find.assert_called_once_with({"availability": "Available"})
        cursor.sort.assert_called_once_with([("price", 1), ("_id", 1)])
        cursor.skip.assert_called_once_with(40)
        cursor.limit.assert_called_once_with(20)

    @pytest.mark.asyncio
    async def test_driver_errors_become_repository_errors(self, database, collection) -> None:
        collection.count_documents.side_effect = PyMongoError("connection refused")

        with pytest.raises(RepositoryError) as exc_info:
            await MongoMedicineRepository(database).count({})

        assert exc_info.value.message == "Failed to count medicines"
        assert exc_info.value.status_code == 500


class TestMongoPromptRepository:
    """prompts collection"""

    @pytest.mark.asyncio
    async def test_save_omits_empty_fields(self, database, collection) -> None:
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        record = PromptRecord(user_prompt="hello", ai_response="hi there")

        saved = await MongoPromptRepository(database).save(record)

        document = collection.insert_one.await_args.args[0]
        assert document["userPrompt"] == "hello"
        assert document["promptType"] == "general"
        assert "plantType" not in document
        assert saved.id == str(inserted_id)

    @pytest.mark.asyncio
    async def test_list_recent_newest_first(self, database, collection) -> None:
        cursor = collection.find.return_value

        await MongoPromptRepository(database).list_recent(skip=10, limit=10)

        cursor.sort.assert_called_once_with([("createdAt", DESCENDING), ("_id", DESCENDING)])
        cursor.skip.assert_called_once_with(10)

    @pytest.mark.asyncio
    async def test_delete_missing_returns_none(self, database, collection) -> None:
        collection.find_one_and_delete.return_value = None
        assert await MongoPromptRepository(database).delete(str(ObjectId())) is None

    @pytest.mark.asyncio
    async def test_save_failure_is_repository_error(self, database, collection) -> None:
        collection.insert_one.side_effect = PyMongoError("not primary")

        with pytest.raises(RepositoryError) as exc_info:
            await MongoPromptRepository(database).save(
                PromptRecord(user_prompt="hello", ai_response="hi")
            )

        assert exc_info.value.details == {"operation": "create", "entity": "prompt"}
