from pydantic import BaseModel, field_validator, model_validator
from typing import Optional


class AddressBase(BaseModel):
    street: str
    number: str
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: str
    is_default: bool = False


class AddressCreate(AddressBase):
    pass


class AddressUpdate(BaseModel):
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    is_default: Optional[bool] = None

    @field_validator("street", "number", "city", "is_default")
    @classmethod
    def required_fields_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class RestaurantAddressCreate(AddressBase):
    restaurant_id: str


class Address(AddressBase):
    id: str
    user_id: Optional[str] = None
    restaurant_id: Optional[str] = None
    is_restaurant_address: bool = False

    @model_validator(mode="after")
    def owner_is_user_or_restaurant(self):
        if self.is_restaurant_address and not self.restaurant_id:
            raise ValueError("Restaurant addresses need a restaurant_id")
        if not self.is_restaurant_address and not self.user_id:
            raise ValueError("User addresses need a user_id")
        return self
