from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Optional
from core.exceptions import BusinessRuleError
from schemas.checkout import CheckoutSummary, PromoCodeRequest, PromoCodeResult
from schemas.order import Order, OrderCreate
from schemas.user import UserInDB
from api.deps import (
    get_address_service,
    get_cart_service,
    get_current_active_user,
    get_order_service,
    get_payment_method_service,
    get_restaurant_service,
)
from services.address_service import AddressService
from services.cart_service import CartService
from services.catalog_service import RestaurantService
from services.checkout import calculate_totals, resolve_promo_code
from services.order_service import OrderService
from services.payment_method_service import PaymentMethodService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def invalid_promo_code() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Invalid promo code"
    )


@router.post("/promo", response_model=PromoCodeResult)
async def apply_promo_code(promo_in: PromoCodeRequest) -> Any:
    """
    Check a promo code. Unknown codes are rejected with 400.
    """
    result = resolve_promo_code(promo_in.code)
    if not result.accepted:
        raise invalid_promo_code()
    return result


@router.get("/summary", response_model=CheckoutSummary)
async def get_checkout_summary(
        promo_code: Optional[str] = None,
        cart: CartService = Depends(get_cart_service),
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    Price breakdown of the current cart
    """
    discount_rate = 0.0
    applied_code = None
    if promo_code:
        promo = resolve_promo_code(promo_code)
        if not promo.accepted:
            raise invalid_promo_code()
        discount_rate = promo.discount_rate
        applied_code = promo.code

    restaurant_id = cart.get_restaurant_id()
    restaurant = restaurants.get_by_id(restaurant_id) if restaurant_id else None

    totals = calculate_totals(
        cart.get_total_price(),
        delivery_fee=(restaurant or {}).get("delivery_fee"),
        discount_rate=discount_rate,
    )

    return CheckoutSummary(
        **totals.model_dump(),
        restaurant_id=restaurant_id,
        total_items=cart.get_total_items(),
        promo_code=applied_code,
    )


@router.post("/place-order", response_model=Order, status_code=status.HTTP_201_CREATED)
async def place_order(
        order_in: OrderCreate,
        current_user: UserInDB = Depends(get_current_active_user),
        cart: CartService = Depends(get_cart_service),
        addresses: AddressService = Depends(get_address_service),
        payment_methods: PaymentMethodService = Depends(get_payment_method_service),
        restaurants: RestaurantService = Depends(get_restaurant_service),
        orders: OrderService = Depends(get_order_service)
) -> Any:
    """
    Turn the cart into an order. Payment is simulated; the cart is emptied on success.
    """
    if not addresses.get_for_user(current_user.id, order_in.delivery_address_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Select a delivery address"
        )

    if order_in.payment_method_id:
        method = payment_methods.get_for_user(current_user.id, order_in.payment_method_id)
        if not method:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Select a payment method"
            )
        payment_label = method["type"]
        if method.get("card_number"):
            payment_label = f"{method['type']} {method['card_number']}"
    else:
        payment_label = order_in.payment_type.value

    restaurant_id = cart.get_restaurant_id()
    restaurant = restaurants.get_by_id(restaurant_id) if restaurant_id else None

    try:
        return orders.create_from_cart(
            user_id=current_user.id,
            cart=cart,
            restaurant=restaurant,
            delivery_address_id=order_in.delivery_address_id,
            payment_method=payment_label,
            promo_code=order_in.promo_code,
            notes=order_in.notes,
        )
    except BusinessRuleError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
