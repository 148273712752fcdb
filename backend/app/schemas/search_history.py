from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SearchHistoryCreate(BaseModel):
    query: str = Field(max_length=500)
    filters: dict[str, Any] | None = None


class SearchHistoryResponse(BaseModel):
    id: str
    user_id: str
    query: str
    filters: dict[str, Any] | None
    created_at: datetime

    class Config:
        from_attributes = True
