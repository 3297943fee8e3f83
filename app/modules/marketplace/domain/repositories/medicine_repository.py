# 📄 File: app/modules/marketplace/domain/repositories/medicine_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update, and delete medicine listings without
# saying which database actually stores them.
# 🧪 Purpose (Technical Summary):
# Repository interface for MedicineListing persistence following the Repository pattern and
# dependency inversion. Query predicates are MongoDB-style filter documents produced by the
# domain query builder.
# 🔗 Dependencies:
# Domain models (MedicineListing), typing, abc
# 🔄 Connected Modules / Calls From:
# Application handlers, infrastructure implementation, test doubles

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models.medicine import MedicineListing

SortSpec = Sequence[Tuple[str, int]]


class MedicineRepository(ABC):
    """
    Repository interface for MedicineListing data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (MedicineListing), not raw documents
    - Identifiers are validated by the caller before reaching the repository
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def create(self, listing: MedicineListing) -> MedicineListing:
        """
        Persist a new listing.

        Args:
            listing: Validated listing without an id

        Returns:
            The stored listing with its generated id

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def increment_views(self, medicine_id: str) -> Optional[MedicineListing]:
        """
        Atomically add one to the view counter and return the updated listing.

        Returns:
            Updated MedicineListing, or None if no listing has this id
        """
        pass

    @abstractmethod
    async def update_fields(
        self,
        medicine_id: str,
        changes: Dict[str, Any]
    ) -> Optional[MedicineListing]:
        """
        Overwrite the supplied top-level fields of a listing.

        Args:
            medicine_id: Listing id
            changes: camelCase field name -> new value; always includes updatedAt

        Returns:
            Updated MedicineListing, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, medicine_id: str) -> Optional[MedicineListing]:
        """
        Hard delete a listing.

        Returns:
            The removed listing, or None if not found
        """
        pass

    @abstractmethod
    async def find(
        self,
        predicate: Dict[str, Any],
        sort: SortSpec,
        skip: int = 0,
        limit: int = 20
    ) -> List[MedicineListing]:
        """
        Find listings matching a filter document.

        Args:
            predicate: MongoDB filter document
            sort: (field, direction) pairs applied before skip/limit
            skip: Number of matches to skip
            limit: Maximum number of listings to return

        Returns:
            Matching listings in sort order
        """
        pass

    @abstractmethod
    async def count(self, predicate: Dict[str, Any]) -> int:
        """
        Count listings matching a filter document.
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create supporting indexes; no-op for stores without indexes."""
        return None
