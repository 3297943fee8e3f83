# 📄 File: app/modules/plant_advisor/domain/models/prompt_record.py
# 🧭 Purpose (Layman Explanation):
# Remembers each question asked to the plant doctor AI and the answer it gave, so farmers
# can look back at earlier advice.
# 🧪 Purpose (Technical Summary):
# PromptRecord domain model (one saved AI exchange) with its PromptType vocabulary and
# MongoDB document mapping.
# 🔗 Dependencies:
# pydantic (v2), datetime, enum
# 🔄 Connected Modules / Calls From:
# prompt_repository.py, prompt_repository_impl.py, advice/prompt handlers, advisor router

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PromptType(str, Enum):
    """Which advisor endpoint produced the exchange"""
    GENERAL = "general"
    DIAGNOSIS = "diagnosis"
    TREATMENT = "treatment"
    PREVENTION = "prevention"
    DISEASE_INFO = "disease_info"
    AI_TREATMENT = "ai_treatment"


class PromptRecord(BaseModel):
    """
    A saved question/answer exchange with the language model.

    Records are written best-effort after a successful model call and are
    never edited afterwards.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    id: Optional[str] = None
    user_prompt: str = Field(..., min_length=1)
    ai_response: str = Field(..., min_length=1)
    prompt_type: PromptType = PromptType.GENERAL
    plant_type: Optional[str] = None
    disease_type: Optional[str] = None
    region: Optional[str] = None
    severity: Optional[str] = None
    confidence: Optional[float] = None
    organic_only: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "PromptRecord":
        data = dict(document)
        object_id = data.pop("_id", None)
        if object_id is not None:
            data["id"] = str(object_id)
        return cls.model_validate(data)

    def to_response(self) -> Dict[str, Any]:
        """API shape: camelCase with both `_id` and `id`."""
        return {"_id": self.id, **self.model_dump(by_alias=True, mode="json")}
