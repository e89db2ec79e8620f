import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from core.database import ORDERS
from core.exceptions import BusinessRuleError, InvalidStatusTransition, RatingError
from schemas.order import OrderStatus
from services.base import EntityService
from services.cart_service import CartService
from services.checkout import calculate_totals, resolve_promo_code

logger = logging.getLogger(__name__)

DELIVERY_WINDOW_START = timedelta(minutes=30)
DELIVERY_WINDOW_END = timedelta(minutes=45)


def format_address(address: Optional[Dict[str, Any]]) -> str:
    if not address:
        return "Address not found"
    line = f"{address.get('street')}, {address.get('number')}"
    if address.get("neighborhood"):
        line += f" - {address['neighborhood']}"
    return f"{line}, {address.get('city')}"


class OrderService(EntityService):
    """
    Orders are snapshots taken at checkout. After creation only ``status``
    (forward only) and ``rating`` (once, after delivery) change.
    """

    collection = ORDERS

    def create_from_cart(
            self,
            user_id: str,
            cart: CartService,
            restaurant: Optional[Dict[str, Any]],
            delivery_address_id: str,
            payment_method: str,
            promo_code: Optional[str] = None,
            notes: Optional[str] = None
    ) -> Dict[str, Any]:
        items = cart.items
        if not items:
            raise BusinessRuleError("Cart is empty")

        restaurant_id = cart.get_restaurant_id()
        discount_rate = 0.0
        applied_code = None
        if promo_code:
            promo = resolve_promo_code(promo_code)
            if not promo.accepted:
                raise BusinessRuleError("Invalid promo code")
            discount_rate = promo.discount_rate
            applied_code = promo.code

        totals = calculate_totals(
            cart.get_total_price(),
            delivery_fee=(restaurant or {}).get("delivery_fee"),
            discount_rate=discount_rate,
        )

        now = datetime.utcnow().isoformat()
        order = self.create({
            "user_id": user_id,
            "restaurant_id": restaurant_id,
            "restaurant_name": (restaurant or {}).get("name") or items[0].restaurant_name,
            "delivery_address_id": delivery_address_id,
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "quantity": item.quantity,
                    "price": item.price,
                    "options": [option.model_dump() for option in item.options],
                }
                for item in items
            ],
            "subtotal": totals.subtotal,
            "tax": totals.tax,
            "delivery_fee": totals.delivery_fee,
            "discount": totals.discount,
            "total": totals.total,
            "payment_method": payment_method,
            "promo_code": applied_code,
            "notes": notes or "",
            "status": OrderStatus.PENDING.value,
            "rating": None,
            "created_at": now,
            "updated_at": now,
        })

        cart.clear_cart()
        logger.info(f"Order {order['id']} placed by {user_id} for {order['total']:.2f}")
        return order

    def get_for_user(self, user_id: str, status: Optional[OrderStatus] = None) -> List[Dict[str, Any]]:
        orders = [o for o in self.get_all() if o.get("user_id") == user_id]
        if status:
            orders = [o for o in orders if o.get("status") == status.value]
        return sorted(orders, key=lambda o: o.get("created_at", ""), reverse=True)

    def get_for_user_by_id(self, user_id: str, order_id: str) -> Optional[Dict[str, Any]]:
        order = self.get_by_id(order_id)
        if not order or order.get("user_id") != user_id:
            return None
        return order

    def update_status(self, order_id: str, new_status: OrderStatus) -> Optional[Dict[str, Any]]:
        order = self.get_by_id(order_id)
        if not order:
            return None

        current = OrderStatus(order["status"])
        if not current.can_transition_to(new_status):
            raise InvalidStatusTransition(current.value, new_status.value)

        return self.update(order_id, {
            "status": new_status.value,
            "updated_at": datetime.utcnow().isoformat(),
        })

    def rate(self, user_id: str, order_id: str, rating: int) -> Optional[Dict[str, Any]]:
        order = self.get_for_user_by_id(user_id, order_id)
        if not order:
            return None

        if order.get("status") != OrderStatus.DELIVERED.value:
            raise RatingError("Only delivered orders can be rated")
        if order.get("rating") is not None:
            raise RatingError("Order has already been rated")
        if not 1 <= rating <= 5:
            raise RatingError("Rating must be between 1 and 5")

        return self.update(order_id, {
            "rating": rating,
            "updated_at": datetime.utcnow().isoformat(),
        })

    @staticmethod
    def with_details(order: Dict[str, Any], address: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        created_at = datetime.fromisoformat(order["created_at"])
        return {
            **order,
            "address": format_address(address),
            "estimated_delivery_start": created_at + DELIVERY_WINDOW_START,
            "estimated_delivery_end": created_at + DELIVERY_WINDOW_END,
        }
