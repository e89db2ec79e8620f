from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, List
from schemas.payment_method import PaymentMethod, PaymentMethodCreate, PaymentMethodUpdate
from schemas.user import UserInDB
from api.deps import get_current_user, get_payment_method_service
from services.payment_method_service import PaymentMethodService

router = APIRouter()


def payment_method_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Payment method not found"
    )


@router.get("/", response_model=List[PaymentMethod])
async def get_payment_methods(
        current_user: UserInDB = Depends(get_current_user),
        payment_methods: PaymentMethodService = Depends(get_payment_method_service)
) -> Any:
    """
    Get user's payment methods, newest first
    """
    return payment_methods.get_by_user_id(current_user.id)


@router.post("/", response_model=PaymentMethod, status_code=status.HTTP_201_CREATED)
async def create_payment_method(
        method_in: PaymentMethodCreate,
        current_user: UserInDB = Depends(get_current_user),
        payment_methods: PaymentMethodService = Depends(get_payment_method_service)
) -> Any:
    """
    Save a payment method. Card numbers are stored masked.
    """
    return payment_methods.create_for_user(current_user.id, method_in.model_dump())


@router.put("/{method_id}", response_model=PaymentMethod)
async def update_payment_method(
        method_id: str,
        method_in: PaymentMethodUpdate,
        current_user: UserInDB = Depends(get_current_user),
        payment_methods: PaymentMethodService = Depends(get_payment_method_service)
) -> Any:
    updated = payment_methods.update_for_user(
        current_user.id, method_id, method_in.model_dump(exclude_unset=True)
    )
    if not updated:
        raise payment_method_not_found()
    return updated


@router.put("/{method_id}/default", response_model=PaymentMethod)
async def set_default_payment_method(
        method_id: str,
        current_user: UserInDB = Depends(get_current_user),
        payment_methods: PaymentMethodService = Depends(get_payment_method_service)
) -> Any:
    if not payment_methods.get_for_user(current_user.id, method_id):
        raise payment_method_not_found()
    return payment_methods.set_default(current_user.id, method_id)


@router.delete("/{method_id}", status_code=status.HTTP_200_OK)
async def delete_payment_method(
        method_id: str,
        current_user: UserInDB = Depends(get_current_user),
        payment_methods: PaymentMethodService = Depends(get_payment_method_service)
) -> Any:
    if not payment_methods.remove_for_user(current_user.id, method_id):
        raise payment_method_not_found()
    return {"message": "Payment method deleted successfully"}
