"""Pytest configuration and shared fixtures.

The application is exercised without MongoDB or Gemini: repositories are
replaced by in-memory doubles that evaluate the same filter documents the
query builder produces, and the Gemini client is replaced by a stub.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["LOG_LEVEL"] = "WARNING"

import copy
import re
from datetime import timedelta
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.main import app
from app.modules.marketplace.domain.models.medicine import MedicineListing
from app.modules.marketplace.domain.repositories.medicine_repository import (
    MedicineRepository,
    SortSpec,
)
from app.modules.marketplace.presentation.api.schemas.medicine_schemas import MEDICINE_EXAMPLE
from app.modules.marketplace.presentation.dependencies import get_medicine_repository
from app.modules.plant_advisor.domain.models.prompt_record import PromptRecord
from app.modules.plant_advisor.domain.repositories.prompt_repository import PromptRepository
from app.modules.plant_advisor.infrastructure.external.gemini_client import get_gemini_client
from app.modules.plant_advisor.presentation.dependencies import get_prompt_repository
from app.shared.core.exceptions import RepositoryError

_MISSING = object()


# =========================================================================
# FILTER DOCUMENT EVALUATION
# =========================================================================

def _resolve(document: Dict[str, Any], path: str) -> Any:
    value: Any = document
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _candidates(value: Any) -> List[Any]:
    if value is _MISSING or value is None:
        return []
    return value if isinstance(value, list) else [value]


def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, dict) and any(key.startswith("$") for key in condition):
        flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
        for operator, argument in condition.items():
            if operator == "$options":
                continue
            if operator == "$gte":
                ok = any(candidate >= argument for candidate in _candidates(value))
            elif operator == "$lte":
                ok = any(candidate <= argument for candidate in _candidates(value))
            elif operator == "$regex":
                ok = any(
                    isinstance(candidate, str) and re.search(argument, candidate, flags)
                    for candidate in _candidates(value)
                )
            else:
                raise NotImplementedError(operator)
            if not ok:
                return False
        return True

    if isinstance(value, list):
        return condition in value or value == condition
    return value == condition


def matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, condition in query.items():
        if key == "$or":
            if not any(matches(document, part) for part in condition):
                return False
        elif key == "$and":
            if not all(matches(document, part) for part in condition):
                return False
        elif not _matches_condition(_resolve(document, key), condition):
            return False
    return True


def sort_documents(documents: List[Dict[str, Any]], sort: SortSpec) -> List[Dict[str, Any]]:
    ordered = list(documents)
    for field, direction in reversed(list(sort)):
        ordered.sort(key=lambda doc: _resolve(doc, field), reverse=direction < 0)
    return ordered


# =========================================================================
# IN-MEMORY REPOSITORIES
# =========================================================================

class FakeMedicineRepository(MedicineRepository):
    """Dictionary backed store speaking MongoDB filter documents."""

    def __init__(self):
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}

    def _listing(self, document: Dict[str, Any]) -> MedicineListing:
        return MedicineListing.from_document(copy.deepcopy(document))

    async def create(self, listing: MedicineListing) -> MedicineListing:
        object_id = ObjectId()
        self.documents[object_id] = {"_id": object_id, **listing.to_document()}
        return listing.model_copy(update={"id": str(object_id)})

    async def increment_views(self, medicine_id: str) -> Optional[MedicineListing]:
        document = self.documents.get(ObjectId(medicine_id))
        if document is None:
            return None
        document["views"] += 1
        return self._listing(document)

    async def update_fields(self, medicine_id: str, changes: Dict[str, Any]) -> Optional[MedicineListing]:
        document = self.documents.get(ObjectId(medicine_id))
        if document is None:
            return None
        document.update(copy.deepcopy(changes))
        return self._listing(document)

    async def delete(self, medicine_id: str) -> Optional[MedicineListing]:
        document = self.documents.pop(ObjectId(medicine_id), None)
        return self._listing(document) if document else None

    async def find(
        self,
        predicate: Dict[str, Any],
        sort: SortSpec,
        skip: int = 0,
        limit: int = 20
    ) -> List[MedicineListing]:
        found = [doc for doc in self.documents.values() if matches(doc, predicate)]
        return [self._listing(doc) for doc in sort_documents(found, sort)[skip:skip + limit]]

    async def count(self, predicate: Dict[str, Any]) -> int:
        return sum(1 for doc in self.documents.values() if matches(doc, predicate))

    def backdate(self, medicine_id: str, days: int) -> None:
        document = self.documents[ObjectId(medicine_id)]
        document["createdAt"] = document["createdAt"] - timedelta(days=days)


class FakePromptRepository(PromptRepository):
    """In-memory prompt history; `fail_saves` simulates an unavailable database."""

    def __init__(self):
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self.fail_saves = False

    async def save(self, record: PromptRecord) -> PromptRecord:
        if self.fail_saves:
            raise RepositoryError("Failed to save prompt", operation="save", entity="prompt")
        object_id = ObjectId()
        self.documents[object_id] = {"_id": object_id, **record.to_document()}
        return record.model_copy(update={"id": str(object_id)})

    async def get_by_id(self, prompt_id: str) -> Optional[PromptRecord]:
        document = self.documents.get(ObjectId(prompt_id))
        return PromptRecord.from_document(document) if document else None

    async def delete(self, prompt_id: str) -> Optional[PromptRecord]:
        document = self.documents.pop(ObjectId(prompt_id), None)
        return PromptRecord.from_document(document) if document else None

    async def list_recent(self, skip: int = 0, limit: int = 10) -> List[PromptRecord]:
        ordered = sort_documents(
            list(self.documents.values()),
            [("createdAt", -1), ("_id", -1)]
        )
        return [PromptRecord.from_document(doc) for doc in ordered[skip:skip + limit]]

    async def count(self) -> int:
        return len(self.documents)


class StubGeminiClient:
    """Records prompts and answers with a canned reply or a configured error."""

    def __init__(self, reply: str = "Apply a copper fungicide every 7 days."):
        self.reply = reply
        self.error: Optional[Exception] = None
        self.prompts: List[str] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def generate_content(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


# =========================================================================
# FIXTURES
# =========================================================================

@pytest.fixture
def medicine_repository() -> FakeMedicineRepository:
    return FakeMedicineRepository()


@pytest.fixture
def prompt_repository() -> FakePromptRepository:
    return FakePromptRepository()


@pytest.fixture
def gemini() -> StubGeminiClient:
    return StubGeminiClient()


@pytest.fixture
def client(medicine_repository, prompt_repository, gemini):
    """Test client wired to the in-memory doubles."""
    app.dependency_overrides[get_medicine_repository] = lambda: medicine_repository
    app.dependency_overrides[get_prompt_repository] = lambda: prompt_repository
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def medicine_payload() -> Dict[str, Any]:
    """A valid creation body (Copper Fungicide Pro)."""
    return copy.deepcopy(MEDICINE_EXAMPLE)


@pytest.fixture
def make_payload(medicine_payload):
    """Build creation bodies overriding selected fields."""

    def _make(**overrides: Any) -> Dict[str, Any]:
        payload = copy.deepcopy(medicine_payload)
        payload.update(overrides)
        return payload

    return _make
