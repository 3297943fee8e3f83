# 📄 File: app/modules/marketplace/application/commands/medicine_commands.py
# 🧭 Purpose (Layman Explanation):
# Describes the changes sellers can make to the catalog: add a medicine, edit it, or remove it.
# 🧪 Purpose (Technical Summary):
# CQRS command objects for marketplace write operations.
# 🔗 Dependencies:
# pydantic, domain models
# 🔄 Connected Modules / Calls From:
# application.handlers.command_handlers, presentation.api.v1.marketplace

from typing import Any, Dict

from pydantic import BaseModel, Field

from app.modules.marketplace.domain.models.medicine import MedicineDetails


class CreateMedicineCommand(BaseModel):
    """Create a listing from fully validated seller input."""

    details: MedicineDetails


class UpdateMedicineCommand(BaseModel):
    """
    Partially update a listing.

    `changes` maps camelCase field names to already-validated values; fields
    not present are left untouched.
    """

    medicine_id: str
    changes: Dict[str, Any] = Field(default_factory=dict)


class DeleteMedicineCommand(BaseModel):
    medicine_id: str
