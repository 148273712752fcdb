from datetime import datetime

from pydantic import BaseModel


class FavoriteCreate(BaseModel):
    property_id: str


class FavoriteResponse(BaseModel):
    id: str
    user_id: str
    property_id: str
    created_at: datetime

    class Config:
        from_attributes = True


class FavoriteCheck(BaseModel):
    is_favorite: bool
