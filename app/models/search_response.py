from pydantic import BaseModel, ConfigDict, Field
from typing import List

from app.models.document import TenderDocument

class PaginatedSearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # current page
    page: int
    page_size: int = Field(alias="pageSize")

    # whole result set
    total_results: int = Field(alias="totalResults")
    total_pages: int = Field(alias="totalPages")

    results: List[TenderDocument] = Field(default_factory=list)
