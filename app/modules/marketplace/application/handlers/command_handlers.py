# 📄 File: app/modules/marketplace/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "catalog editors" that add new medicines, apply sellers' edits, and take listings down.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers for marketplace writes: creation from validated input, partial
# updates that always refresh updatedAt, and hard deletes returning a receipt.
#
# 🔗 Dependencies:
# - app.modules.marketplace.application.commands (command definitions)
# - app.modules.marketplace.domain.repositories (repository interface)
# - app.shared.utils.validators (id validation)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.marketplace.presentation.api.v1.marketplace

"""
Marketplace Command Handlers

Concurrent updates to the same listing are last-write-wins; there is no
version token. Each update is a single atomic $set on the store.
"""

from app.modules.marketplace.application.commands.medicine_commands import (
    CreateMedicineCommand,
    DeleteMedicineCommand,
    UpdateMedicineCommand,
)
from app.modules.marketplace.domain.models.medicine import MedicineListing, utc_now
from app.modules.marketplace.domain.repositories.medicine_repository import MedicineRepository
from app.shared.core.exceptions import MedicineNotFoundError
from app.shared.utils.logging import get_logger
from app.shared.utils.validators import require_object_id

from .query_handlers import INVALID_MEDICINE_ID

logger = get_logger(__name__)


class CreateMedicineCommandHandler:
    """Handler for listing creation."""

    def __init__(self, repository: MedicineRepository):
        self._repository = repository

    async def handle(self, command: CreateMedicineCommand) -> MedicineListing:
        """
        Create a listing.

        Args:
            command: Command carrying validated listing details

        Returns:
            MedicineListing: Stored listing with its new id
        """
        listing = MedicineListing.create_new(command.details)
        created = await self._repository.create(listing)

        logger.log_business_event(
            "medicine_created",
            f"Medicine listed: {created.name}",
            entity_id=created.id,
            entity_type="medicine",
        )
        return created


class UpdateMedicineCommandHandler:
    """Handler for partial listing updates."""

    def __init__(self, repository: MedicineRepository):
        self._repository = repository

    async def handle(self, command: UpdateMedicineCommand) -> MedicineListing:
        """
        Apply the supplied fields and refresh updatedAt.

        An empty change set is valid and only refreshes the timestamp.

        Raises:
            InvalidIdError: If the id is malformed
            MedicineNotFoundError: If no listing has this id
        """
        medicine_id = require_object_id(command.medicine_id, INVALID_MEDICINE_ID)

        changes = dict(command.changes)
        changes["updatedAt"] = utc_now()

        updated = await self._repository.update_fields(medicine_id, changes)
        if updated is None:
            raise MedicineNotFoundError(medicine_id)

        logger.info(
            f"Updated medicine {medicine_id}",
            extra={"fields": sorted(k for k in changes if k != "updatedAt")}
        )
        return updated


class DeleteMedicineCommandHandler:
    """Handler for hard deletes."""

    def __init__(self, repository: MedicineRepository):
        self._repository = repository

    async def handle(self, command: DeleteMedicineCommand) -> MedicineListing:
        """
        Remove a listing.

        Returns:
            MedicineListing: The removed listing

        Raises:
            InvalidIdError: If the id is malformed
            MedicineNotFoundError: If no listing has this id
        """
        medicine_id = require_object_id(command.medicine_id, INVALID_MEDICINE_ID)

        removed = await self._repository.delete(medicine_id)
        if removed is None:
            raise MedicineNotFoundError(medicine_id)

        logger.log_business_event(
            "medicine_deleted",
            f"Medicine removed: {removed.name}",
            entity_id=medicine_id,
            entity_type="medicine",
        )
        return removed
