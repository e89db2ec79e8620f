from pydantic import BaseModel, Field, field_validator
from typing import Optional


class CategoryBase(BaseModel):
    name: str
    icon: Optional[str] = None


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    icon: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        if v is None:
            raise ValueError("name cannot be null")
        return v


class Category(CategoryBase):
    id: str


class MenuItemBase(BaseModel):
    restaurant_id: str
    name: str
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    image_url: Optional[str] = None
    category: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)


class MenuItemCreate(MenuItemBase):
    pass


class MenuItemUpdate(BaseModel):
    restaurant_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = None
    category: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)

    @field_validator("restaurant_id", "name", "price")
    @classmethod
    def required_fields_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class MenuItem(MenuItemBase):
    id: str
