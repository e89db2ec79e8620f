from pydantic import BaseModel
from typing import Optional


class CheckoutTotals(BaseModel):
    subtotal: float
    tax: float
    delivery_fee: float
    total_before_discount: float
    discount_rate: float
    discount: float
    total: float


class PromoCodeRequest(BaseModel):
    code: str


class PromoCodeResult(BaseModel):
    code: str
    accepted: bool
    discount_rate: float = 0.0


class CheckoutSummary(CheckoutTotals):
    restaurant_id: Optional[str] = None
    total_items: int
    promo_code: Optional[str] = None
