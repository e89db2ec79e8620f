from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from schemas.restaurant import Restaurant


class Favorite(BaseModel):
    id: str
    user_id: str
    restaurant_id: str
    created_at: datetime
    restaurant: Optional[Restaurant] = None


class FavoriteToggle(BaseModel):
    restaurant_id: str
    is_favorite: bool
