# 📄 File: app/modules/marketplace/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each marketplace endpoint the tools it needs (the medicine store and the clerks that
# read and write it) so endpoints never have to build them by hand.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the marketplace module: repository construction over the
# shared MongoDB database and per-request command/query handler wiring.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.connection, marketplace handlers
# 🔄 Connected Modules / Calls From:
# app.modules.marketplace.presentation.api.v1.marketplace, tests (dependency_overrides)

"""
Marketplace Module Dependencies

Tests swap the store by overriding `get_medicine_repository`; every handler
provider below resolves through it.
"""

from fastapi import Depends

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
from app.modules.marketplace.domain.repositories.medicine_repository import MedicineRepository
from app.modules.marketplace.infrastructure.database.medicine_repository_impl import (
    MongoMedicineRepository,
)
from app.shared.infrastructure.database.connection import get_database


def get_medicine_repository() -> MedicineRepository:
    """Repository bound to the application's MongoDB database."""
    return MongoMedicineRepository(get_database())


# =========================================================================
# QUERY HANDLERS
# =========================================================================

def get_medicine_handler(
    repository: MedicineRepository = Depends(get_medicine_repository)
) -> GetMedicineQueryHandler:
    return GetMedicineQueryHandler(repository)


def get_list_medicines_handler(
    repository: MedicineRepository = Depends(get_medicine_repository)
) -> ListMedicinesQueryHandler:
    return ListMedicinesQueryHandler(repository)


def get_search_medicines_handler(
    repository: MedicineRepository = Depends(get_medicine_repository)
) -> SearchMedicinesQueryHandler:
    return SearchMedicinesQueryHandler(repository)


def get_featured_medicines_handler(
    repository: MedicineRepository = Depends(get_medicine_repository)
) -> FeaturedMedicinesQueryHandler:
    return FeaturedMedicinesQueryHandler(repository)


# =========================================================================
# COMMAND HANDLERS
# =========================================================================

def get_create_medicine_handler(
    repository: MedicineRepository = Depends(get_medicine_repository)
) -> CreateMedicineCommandHandler:
    return CreateMedicineCommandHandler(repository)


def get_update_medicine_handler(
    repository: MedicineRepository = Depends(get_medicine_repository)
) -> UpdateMedicineCommandHandler:
    return UpdateMedicineCommandHandler(repository)


def get_delete_medicine_handler(
    repository: MedicineRepository = Depends(get_medicine_repository)
) -> DeleteMedicineCommandHandler:
    return DeleteMedicineCommandHandler(repository)
