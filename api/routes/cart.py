from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any
from core.exceptions import CartConflictError
from schemas.cart import Cart, CartItemCreate, CartItemUpdate
from api.deps import get_cart_service
from services.cart_service import CartService

router = APIRouter()


@router.get("/", response_model=Cart)
async def get_user_cart(cart: CartService = Depends(get_cart_service)) -> Any:
    """
    Get user's cart
    """
    return cart.to_schema()


@router.post("/items", response_model=Cart)
async def add_item_to_cart(
        item_in: CartItemCreate,
        cart: CartService = Depends(get_cart_service)
) -> Any:
    """
    Add item to cart. Items from a second restaurant are refused with 409.
    """
    try:
        cart.add_item(item_in, quantity=item_in.quantity)
    except CartConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )

    return cart.to_schema()


@router.put("/items/{item_id}", response_model=Cart)
async def update_cart_item(
        item_id: str,
        item_in: CartItemUpdate,
        cart: CartService = Depends(get_cart_service)
) -> Any:
    """
    Update cart item quantity; zero or less removes the item
    """
    cart.update_quantity(item_id, item_in.quantity)
    return cart.to_schema()


@router.delete("/items/{item_id}", response_model=Cart)
async def remove_cart_item(
        item_id: str,
        cart: CartService = Depends(get_cart_service)
) -> Any:
    """
    Remove item from cart
    """
    cart.remove_item(item_id)
    return cart.to_schema()


@router.delete("/", response_model=Cart)
async def clear_cart(cart: CartService = Depends(get_cart_service)) -> Any:
    """
    Clear cart
    """
    cart.clear_cart()
    return cart.to_schema()
