# 📄 File: app/modules/plant_advisor/application/queries/prompt_queries.py
# 🧭 Purpose (Layman Explanation):
# Describes how farmers look back at earlier AI advice: one saved answer or a page of them.
# 🧪 Purpose (Technical Summary):
# CQRS query objects for prompt history reads.
# 🔗 Dependencies:
# pydantic, marketplace pagination
# 🔄 Connected Modules / Calls From:
# application.handlers.prompt_handlers, presentation.api.v1.advisor

from pydantic import BaseModel, Field

from app.modules.marketplace.domain.services.pagination import PageRequest


class GetPromptQuery(BaseModel):
    prompt_id: str


class ListPromptsQuery(BaseModel):
    """Saved exchanges, newest first."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def page_request(self) -> PageRequest:
        return PageRequest(page=self.page, limit=self.limit)
