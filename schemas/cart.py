from pydantic import BaseModel, Field
from typing import List, Optional, Union


class CartItemOption(BaseModel):
    name: str
    value: Union[str, List[str]]
    price: float = 0.0


class CartItemBase(BaseModel):
    id: str
    restaurant_id: str
    restaurant_name: str
    name: str
    price: float = Field(..., ge=0)
    image: Optional[str] = None
    options: List[CartItemOption] = []


class CartItemCreate(CartItemBase):
    quantity: int = Field(1, ge=1)


class CartItemUpdate(BaseModel):
    # Zero or less removes the line
    quantity: int


class CartItem(CartItemBase):
    quantity: int = Field(..., ge=1)
    # Menu item the line was added from; ``id`` becomes ``<menu_item_id>_<n>`` for extra option variants
    menu_item_id: Optional[str] = None

    @property
    def unit_price(self) -> float:
        return self.price + sum(option.price for option in self.options)

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    items: List[CartItem]
    restaurant_id: Optional[str] = None
    total_items: int
    total: float
