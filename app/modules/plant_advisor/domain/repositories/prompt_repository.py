# 📄 File: app/modules/plant_advisor/domain/repositories/prompt_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for keeping and finding saved AI conversations, without tying it to a database.
# 🧪 Purpose (Technical Summary):
# Repository interface for PromptRecord persistence (dependency inversion for the advisor module).
# 🔗 Dependencies:
# abc, typing, PromptRecord
# 🔄 Connected Modules / Calls From:
# advisor handlers, infrastructure.database.prompt_repository_impl, test doubles

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.prompt_record import PromptRecord


class PromptRepository(ABC):
    """Repository interface for saved AI exchanges."""

    @abstractmethod
    async def save(self, record: PromptRecord) -> PromptRecord:
        """
        Persist a record.

        Returns:
            The stored record with its generated id

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, prompt_id: str) -> Optional[PromptRecord]:
        pass

    @abstractmethod
    async def delete(self, prompt_id: str) -> Optional[PromptRecord]:
        """
        Hard delete a record.

        Returns:
            The removed record, or None if not found
        """
        pass

    @abstractmethod
    async def list_recent(self, skip: int = 0, limit: int = 10) -> List[PromptRecord]:
        """Records ordered newest first."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    async def ensure_indexes(self) -> None:
        """Create supporting indexes; no-op for stores without indexes."""
        return None
