from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class TenderDocument(BaseModel):
    """
    A tender as stored in the search index. Only the searched fields are declared,
    everything else in the source document is kept as-is. Values are not coerced:
    the index owns the document shape.
    """
    model_config = ConfigDict(extra="allow")

    title: Optional[Any] = Field(default=None, alias="Title")
    tags: Optional[Any] = Field(default=None, alias="Tags")
    tender_number: Optional[Any] = Field(default=None, alias="TenderNumber")
    description: Optional[Any] = Field(default=None, alias="Description")
    ai_summary: Optional[Any] = Field(default=None, alias="AISummary")
    source: Optional[Any] = Field(default=None, alias="Source")
    province: Optional[Any] = Field(default=None, alias="Province")
    category: Optional[Any] = Field(default=None, alias="Category")
