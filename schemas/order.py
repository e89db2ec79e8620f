from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum
from schemas.cart import CartItemOption


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERING = "delivering"
    DELIVERED = "delivered"

    @property
    def position(self) -> int:
        return ORDER_STATUS_FLOW.index(self)

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """Forward-only: any later status is allowed, skipping included."""
        return new_status.position > self.position


ORDER_STATUS_FLOW = [
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.DELIVERING,
    OrderStatus.DELIVERED,
]


class PaymentType(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"
    PIX = "pix"
    CASH = "cash"


class OrderItem(BaseModel):
    id: str
    name: str
    quantity: int
    price: float
    options: List[CartItemOption] = []


class OrderCreate(BaseModel):
    delivery_address_id: str
    payment_method_id: Optional[str] = None
    payment_type: PaymentType = PaymentType.CASH
    promo_code: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=500)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderRating(BaseModel):
    rating: int = Field(..., ge=1, le=5)


class Order(BaseModel):
    id: str
    user_id: str
    restaurant_id: str
    restaurant_name: str
    delivery_address_id: str
    items: List[OrderItem]
    subtotal: float
    tax: float
    delivery_fee: float
    discount: float
    total: float
    payment_method: str
    promo_code: Optional[str] = None
    notes: Optional[str] = None
    status: OrderStatus
    rating: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class OrderDetail(Order):
    address: str
    estimated_delivery_start: datetime
    estimated_delivery_end: datetime
