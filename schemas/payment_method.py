from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from schemas.order import PaymentType


class PaymentMethodBase(BaseModel):
    type: PaymentType
    card_name: Optional[str] = None
    expiry_date: Optional[str] = Field(None, pattern=r"^(0[1-9]|1[0-2])/\d{2}$")
    is_default: bool = False


class PaymentMethodCreate(PaymentMethodBase):
    card_number: Optional[str] = None

    @field_validator('card_number')
    @classmethod
    def card_number_digits(cls, v):
        if v is None:
            return v
        digits = v.replace(" ", "")
        if not digits.isdigit() or not 12 <= len(digits) <= 19:
            raise ValueError('Card number must have between 12 and 19 digits')
        return digits


class PaymentMethodUpdate(BaseModel):
    type: Optional[PaymentType] = None
    card_name: Optional[str] = None
    expiry_date: Optional[str] = Field(None, pattern=r"^(0[1-9]|1[0-2])/\d{2}$")
    is_default: Optional[bool] = None

    @field_validator("type", "is_default")
    @classmethod
    def required_fields_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class PaymentMethod(PaymentMethodBase):
    id: str
    user_id: str
    card_number: Optional[str] = None  # masked, last four digits only
    created_at: datetime
    updated_at: datetime
