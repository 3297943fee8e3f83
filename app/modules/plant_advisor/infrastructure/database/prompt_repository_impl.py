# 📄 File: app/modules/plant_advisor/infrastructure/database/prompt_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores and fetches the saved AI conversations in the database.
#
# 🧪 Purpose (Technical Summary):
# Concrete PromptRepository on the async PyMongo driver over the `prompts` collection, with
# newest-first listing and error translation into RepositoryError.
#
# 🔗 Dependencies:
# - pymongo (AsyncCollection, errors), bson (ObjectId)
# - app.modules.plant_advisor.domain.repositories.prompt_repository (interface)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_advisor.presentation.dependencies (repository provider)
# - app.main (index creation at startup)

import time
from typing import List, Optional

from bson import ObjectId
from pymongo import DESCENDING, IndexModel
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.modules.plant_advisor.domain.models.prompt_record import PromptRecord
from app.modules.plant_advisor.domain.repositories.prompt_repository import PromptRepository
from app.shared.core.exceptions import RepositoryError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

COLLECTION_NAME = "prompts"

PROMPT_INDEXES = [
    IndexModel([("createdAt", DESCENDING)]),
    IndexModel([("promptType", DESCENDING), ("createdAt", DESCENDING)]),
]


class MongoPromptRepository(PromptRepository):
    """PyMongo implementation of the PromptRepository interface."""

    def __init__(self, database: AsyncDatabase):
        self._collection: AsyncCollection = database[COLLECTION_NAME]

    async def save(self, record: PromptRecord) -> PromptRecord:
        started = time.time()
        try:
            result = await self._collection.insert_one(record.to_document())
        except PyMongoError as e:
            logger.error(f"Database error saving prompt: {e}")
            raise RepositoryError(
                "Failed to save prompt", operation="create", entity="prompt"
            ) from e

        logger.performance.log_database_operation(
            operation="insert_one",
            collection=COLLECTION_NAME,
            duration_ms=(time.time() - started) * 1000,
            documents=1,
        )
        return record.model_copy(update={"id": str(result.inserted_id)})

    async def get_by_id(self, prompt_id: str) -> Optional[PromptRecord]:
        try:
            document = await self._collection.find_one({"_id": ObjectId(prompt_id)})
        except PyMongoError as e:
            logger.error(f"Database error retrieving prompt {prompt_id}: {e}")
            raise RepositoryError(
                "Failed to retrieve prompt", operation="get_by_id", entity="prompt"
            ) from e

        return PromptRecord.from_document(document) if document else None

    async def delete(self, prompt_id: str) -> Optional[PromptRecord]:
        try:
            document = await self._collection.find_one_and_delete({"_id": ObjectId(prompt_id)})
        except PyMongoError as e:
            logger.error(f"Database error deleting prompt {prompt_id}: {e}")
            raise RepositoryError(
                "Failed to delete prompt", operation="delete", entity="prompt"
            ) from e

        if not document:
            return None

        logger.info(f"Deleted prompt: {prompt_id}")
        return PromptRecord.from_document(document)

    async def list_recent(self, skip: int = 0, limit: int = 10) -> List[PromptRecord]:
        try:
            cursor = (
                self._collection.find({})
                .sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
                .skip(skip)
                .limit(limit)
            )
            documents = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"Database error listing prompts: {e}")
            raise RepositoryError(
                "Failed to fetch prompts", operation="find", entity="prompt"
            ) from e

        return [PromptRecord.from_document(document) for document in documents]

    async def count(self) -> int:
        try:
            return await self._collection.count_documents({})
        except PyMongoError as e:
            logger.error(f"Database error counting prompts: {e}")
            raise RepositoryError(
                "Failed to count prompts", operation="count", entity="prompt"
            ) from e

    async def ensure_indexes(self) -> None:
        try:
            await self._collection.create_indexes(PROMPT_INDEXES)
        except PyMongoError as e:
            logger.error(f"Failed to create prompt indexes: {e}")
            raise RepositoryError(
                "Failed to create indexes", operation="create_indexes", entity="prompt"
            ) from e
