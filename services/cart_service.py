"""
Shopping cart for one user session.

The cart holds line items from a single restaurant. Every line has its own
``id``: the menu item id, or ``<menu item id>_<n>`` when the same item is
already in the cart with other options. Adding an item with options that match
an existing line bumps that line's quantity instead of duplicating it.
State is written to the key-value store after every change, so a new
``CartService`` for the same owner picks up where the previous one left off.
"""
import json
import logging
from typing import List, Optional
from pydantic import ValidationError
from core.exceptions import CartConflictError
from core.storage import KeyValueStore
from schemas.cart import Cart, CartItem, CartItemBase

logger = logging.getLogger(__name__)


def cart_key(owner_id: str) -> str:
    return f"cart:{owner_id}"


class CartService:
    def __init__(self, store: KeyValueStore, owner_id: str):
        self.store = store
        self.owner_id = owner_id
        self._items: List[CartItem] = self._load()

    def _load(self) -> List[CartItem]:
        raw = self.store.get_item(cart_key(self.owner_id))
        if raw is None:
            return []

        try:
            return [CartItem.model_validate(item) for item in json.loads(raw)]
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Discarding unreadable cart for {self.owner_id}: {e}")
            self.store.remove_item(cart_key(self.owner_id))
            return []

    def _save(self) -> None:
        payload = [item.model_dump() for item in self._items]
        self.store.set_item(cart_key(self.owner_id), json.dumps(payload))

    @property
    def items(self) -> List[CartItem]:
        return [item.model_copy(deep=True) for item in self._items]

    def add_item(self, item: CartItemBase, quantity: int = 1) -> CartItem:
        """
        Add ``quantity`` units of ``item``.

        Raises CartConflictError, leaving the cart untouched, when the cart
        already holds items from another restaurant.
        """
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")

        current_restaurant = self.get_restaurant_id()
        if current_restaurant is not None and current_restaurant != item.restaurant_id:
            raise CartConflictError(current_restaurant, item.restaurant_id)

        for line in self._items:
            if (line.menu_item_id or line.id) == item.id and line.options == item.options:
                line.quantity += quantity
                self._save()
                return line.model_copy(deep=True)

        line = CartItem(
            **item.model_dump(exclude={"id", "quantity"}),
            id=self._new_line_id(item.id),
            menu_item_id=item.id,
            quantity=quantity,
        )
        self._items.append(line)
        self._save()
        return line.model_copy(deep=True)

    def _new_line_id(self, menu_item_id: str) -> str:
        taken = {line.id for line in self._items}
        if menu_item_id not in taken:
            return menu_item_id

        n = 1
        while f"{menu_item_id}_{n}" in taken:
            n += 1
        return f"{menu_item_id}_{n}"

    def update_quantity(self, item_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(item_id)
            return

        for line in self._items:
            if line.id == item_id:
                line.quantity = quantity
                self._save()
                return

    def remove_item(self, item_id: str) -> None:
        remaining = [line for line in self._items if line.id != item_id]
        if len(remaining) != len(self._items):
            self._items = remaining
            self._save()

    def clear_cart(self) -> None:
        self._items = []
        self.store.remove_item(cart_key(self.owner_id))

    def get_total_items(self) -> int:
        return sum(line.quantity for line in self._items)

    def get_total_price(self) -> float:
        return round(sum(line.subtotal for line in self._items), 2)

    def get_restaurant_id(self) -> Optional[str]:
        if not self._items:
            return None
        return self._items[0].restaurant_id

    def to_schema(self) -> Cart:
        return Cart(
            items=self.items,
            restaurant_id=self.get_restaurant_id(),
            total_items=self.get_total_items(),
            total=self.get_total_price(),
        )
