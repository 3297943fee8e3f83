# 📄 File: app/modules/marketplace/infrastructure/database/medicine_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for medicine listings: saving new products, finding them,
# counting matches for pages, bumping view counters, editing and removing listings.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of MedicineRepository on the async PyMongo driver, with
# document <-> domain mapping, atomic view increments, index management and
# error translation into RepositoryError.
#
# 🔗 Dependencies:
# - pymongo (AsyncCollection, ReturnDocument, errors), bson (ObjectId)
# - app.modules.marketplace.domain.repositories.medicine_repository (interface)
# - app.modules.marketplace.domain.models.medicine (domain model)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.marketplace.presentation.dependencies (repository provider)
# - app.main (index creation at startup)

"""
Medicine Repository Implementation

Listings live in the ``plantdiseasemedicines`` collection with camelCase
keys, exactly as the API exposes them. Callers validate ids before they
reach this layer; ObjectId conversion here therefore never fails on user
input.
"""

import time
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, IndexModel, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.modules.marketplace.domain.models.medicine import MedicineListing
from app.modules.marketplace.domain.repositories.medicine_repository import (
    MedicineRepository,
    SortSpec,
)
from app.shared.core.exceptions import RepositoryError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

COLLECTION_NAME = "plantdiseasemedicines"

MEDICINE_INDEXES = [
    IndexModel([("medicineType", ASCENDING), ("availability", ASCENDING)]),
    IndexModel([("targetDiseases", ASCENDING), ("availability", ASCENDING)]),
    IndexModel([("targetPlants", ASCENDING), ("availability", ASCENDING)]),
    IndexModel([("price", ASCENDING)]),
    IndexModel([("seller.email", ASCENDING)]),
    IndexModel([("createdAt", DESCENDING)]),
    IndexModel([("featured", DESCENDING), ("createdAt", DESCENDING)]),
    IndexModel([("activeIngredient", ASCENDING)]),
    IndexModel([("applicationMethod", ASCENDING)]),
]


class MongoMedicineRepository(MedicineRepository):
    """
    PyMongo implementation of the MedicineRepository interface.
    """

    def __init__(self, database: AsyncDatabase):
        """
        Initialize the medicine repository.

        Args:
            database: Database handle owned by the application lifespan
        """
        self._collection: AsyncCollection = database[COLLECTION_NAME]

    def _timed(self, operation: str, started: float, documents: Optional[int] = None):
        logger.performance.log_database_operation(
            operation=operation,
            collection=COLLECTION_NAME,
            duration_ms=(time.time() - started) * 1000,
            documents=documents,
        )

    async def create(self, listing: MedicineListing) -> MedicineListing:
        started = time.time()
        try:
            document = listing.to_document()
            result = await self._collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Database error during medicine creation: {e}")
            raise RepositoryError(
                "Failed to create medicine", operation="create", entity="medicine"
            ) from e

        self._timed("insert_one", started, 1)
        logger.info(f"Created medicine with ID: {result.inserted_id}")
        return listing.model_copy(update={"id": str(result.inserted_id)})

    async def increment_views(self, medicine_id: str) -> Optional[MedicineListing]:
        started = time.time()
        try:
            document = await self._collection.find_one_and_update(
                {"_id": ObjectId(medicine_id)},
                {"$inc": {"views": 1}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Database error incrementing views for {medicine_id}: {e}")
            raise RepositoryError(
                "Failed to retrieve medicine", operation="increment_views", entity="medicine"
            ) from e

        self._timed("find_one_and_update", started, 1 if document else 0)
        if not document:
            logger.debug(f"Medicine not found: {medicine_id}")
            return None
        return MedicineListing.from_document(document)

    async def update_fields(
        self,
        medicine_id: str,
        changes: Dict[str, Any]
    ) -> Optional[MedicineListing]:
        started = time.time()
        try:
            document = await self._collection.find_one_and_update(
                {"_id": ObjectId(medicine_id)},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Database error updating medicine {medicine_id}: {e}")
            raise RepositoryError(
                "Failed to update medicine", operation="update", entity="medicine"
            ) from e

        self._timed("find_one_and_update", started, 1 if document else 0)
        if not document:
            return None

        logger.info(f"Updated medicine: {medicine_id}")
        return MedicineListing.from_document(document)

    async def delete(self, medicine_id: str) -> Optional[MedicineListing]:
        try:
            document = await self._collection.find_one_and_delete({"_id": ObjectId(medicine_id)})
        except PyMongoError as e:
            logger.error(f"Database error deleting medicine {medicine_id}: {e}")
            raise RepositoryError(
                "Failed to delete medicine", operation="delete", entity="medicine"
            ) from e

        if not document:
            logger.debug(f"Medicine not found for deletion: {medicine_id}")
            return None

        logger.info(f"Deleted medicine: {medicine_id}")
        return MedicineListing.from_document(document)

    async def find(
        self,
        predicate: Dict[str, Any],
        sort: SortSpec,
        skip: int = 0,
        limit: int = 20
    ) -> List[MedicineListing]:
        started = time.time()
        try:
            cursor = self._collection.find(predicate).sort(list(sort)).skip(skip).limit(limit)
            documents = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"Database error listing medicines: {e}")
            raise RepositoryError(
                "Failed to retrieve medicines", operation="find", entity="medicine"
            ) from e

        self._timed("find", started, len(documents))
        return [MedicineListing.from_document(document) for document in documents]

    async def count(self, predicate: Dict[str, Any]) -> int:
        try:
            return await self._collection.count_documents(predicate)
        except PyMongoError as e:
            logger.error(f"Database error counting medicines: {e}")
            raise RepositoryError(
                "Failed to count medicines", operation="count", entity="medicine"
            ) from e

    async def ensure_indexes(self) -> None:
        try:
            names = await self._collection.create_indexes(MEDICINE_INDEXES)
        except PyMongoError as e:
            logger.error(f"Failed to create medicine indexes: {e}")
            raise RepositoryError(
                "Failed to create indexes", operation="create_indexes", entity="medicine"
            ) from e
        logger.info(f"Ensured {len(names)} indexes on {COLLECTION_NAME}")
