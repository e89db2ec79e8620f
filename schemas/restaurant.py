from pydantic import BaseModel, Field, field_validator
from typing import Optional


class RestaurantBase(BaseModel):
    name: str
    category_id: str
    image_url: Optional[str] = None
    cuisine: Optional[str] = None
    delivery_time: Optional[str] = None
    min_order: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    address_id: Optional[str] = None
    delivery_fee: Optional[float] = Field(None, ge=0)


class RestaurantCreate(RestaurantBase):
    pass


class RestaurantUpdate(BaseModel):
    name: Optional[str] = None
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    cuisine: Optional[str] = None
    delivery_time: Optional[str] = None
    min_order: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    address_id: Optional[str] = None
    delivery_fee: Optional[float] = Field(None, ge=0)

    @field_validator("name", "category_id")
    @classmethod
    def required_fields_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class Restaurant(RestaurantBase):
    id: str
