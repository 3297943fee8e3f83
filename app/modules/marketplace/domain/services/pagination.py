# 📄 File: app/modules/marketplace/domain/services/pagination.py
# 🧭 Purpose (Layman Explanation):
# Splits long result lists into numbered pages and tells the app whether there are more pages.
# 🧪 Purpose (Technical Summary):
# Page request normalisation (page, limit -> skip, limit) and the pagination metadata block
# returned with every paginated listing.
# 🔗 Dependencies:
# math, pydantic
# 🔄 Connected Modules / Calls From:
# marketplace query handlers, plant_advisor prompt history handlers

import math
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class PageRequest(BaseModel):
    """A validated (page, limit) pair"""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseModel):
    """
    Pagination metadata.

    total_pages is ceil(total_items / limit) and 0 when nothing matched.
    A page past the end is not an error; it simply has no items.
    """

    model_config = ConfigDict(frozen=True)

    current_page: int
    total_pages: int
    total_items: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page_request: PageRequest, total_items: int) -> "PaginationMeta":
        total_pages = math.ceil(total_items / page_request.limit) if total_items else 0
        return cls(
            current_page=page_request.page,
            total_pages=total_pages,
            total_items=total_items,
            has_next_page=page_request.page < total_pages,
            has_prev_page=page_request.page > 1,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }
