from pydantic import BaseModel, ConfigDict, Field

class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str = Field(
        ...,
        description="Free-text search string, empty to browse all tenders"
    )

    page: int = Field(
        default=1,
        description="Page number (1-based), values below 1 are treated as 1"
    )

    page_size: int = Field(
        default=10,
        alias="pageSize",
        description="Number of results per page, values below 1 fall back to 10"
    )
