from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, List, Optional
from core.exceptions import InvalidStatusTransition, RatingError
from schemas.order import Order, OrderDetail, OrderRating, OrderStatus, OrderStatusUpdate
from api.deps import get_current_user, get_current_admin_user, get_order_service, get_address_service
from schemas.user import UserInDB
from services.address_service import AddressService
from services.order_service import OrderService

router = APIRouter()


def order_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Order not found"
    )


@router.get("/", response_model=List[Order])
async def get_user_orders(
        status: Optional[OrderStatus] = None,
        skip: int = 0,
        limit: int = 100,
        current_user: UserInDB = Depends(get_current_user),
        orders: OrderService = Depends(get_order_service)
) -> Any:
    """
    Get user's orders, newest first
    """
    return orders.get_for_user(current_user.id, status)[skip:skip + limit]


@router.get("/admin/orders", response_model=List[Order])
async def get_all_orders(
        status: Optional[OrderStatus] = None,
        skip: int = 0,
        limit: int = 100,
        current_user: UserInDB = Depends(get_current_admin_user),
        orders: OrderService = Depends(get_order_service)
) -> Any:
    """
    Get all orders (admin only)
    """
    result = orders.get_all()
    if status:
        result = [o for o in result if o.get("status") == status.value]
    result.sort(key=lambda o: o.get("created_at", ""), reverse=True)
    return result[skip:skip + limit]


@router.put("/admin/{order_id}/status", response_model=Order)
async def update_order_status(
        order_id: str,
        status_in: OrderStatusUpdate,
        current_user: UserInDB = Depends(get_current_admin_user),
        orders: OrderService = Depends(get_order_service)
) -> Any:
    """
    Move an order forward in its lifecycle (admin only)
    """
    try:
        updated = orders.update_status(order_id, status_in.status)
    except InvalidStatusTransition as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not updated:
        raise order_not_found()
    return updated


@router.delete("/admin/{order_id}", status_code=status.HTTP_200_OK)
async def delete_order(
        order_id: str,
        current_user: UserInDB = Depends(get_current_admin_user),
        orders: OrderService = Depends(get_order_service)
) -> Any:
    """
    Delete an order (admin only)
    """
    if not orders.remove(order_id):
        raise order_not_found()
    return {"message": "Order deleted successfully"}


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order_detail(
        order_id: str,
        current_user: UserInDB = Depends(get_current_user),
        orders: OrderService = Depends(get_order_service),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Get order details with the delivery address and estimated delivery window
    """
    order = orders.get_for_user_by_id(current_user.id, order_id)
    if not order:
        raise order_not_found()

    address = addresses.get_by_id(order["delivery_address_id"])
    return orders.with_details(order, address)


@router.post("/{order_id}/rating", response_model=Order)
async def rate_order(
        order_id: str,
        rating_in: OrderRating,
        current_user: UserInDB = Depends(get_current_user),
        orders: OrderService = Depends(get_order_service)
) -> Any:
    """
    Rate a delivered order (1 to 5 stars, once)
    """
    try:
        rated = orders.rate(current_user.id, order_id, rating_in.rating)
    except RatingError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not rated:
        raise order_not_found()
    return rated
