from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, List
from core.database import get_store
from core.storage import KeyValueStore
from schemas.user import User, UserUpdate, UserAdminUpdate, UserInDB
from api.deps import get_current_user, get_current_admin_user, get_user_service
from services.user_service import UserService

router = APIRouter()


@router.get("/me", response_model=User)
async def read_user_me(current_user: UserInDB = Depends(get_current_user)) -> Any:
    """
    Get current user
    """
    return current_user


@router.put("/me", response_model=User)
async def update_user_me(
        user_in: UserUpdate,
        current_user: UserInDB = Depends(get_current_user),
        users: UserService = Depends(get_user_service)
) -> Any:
    """
    Update current user's name or email
    """
    update_data = user_in.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in update_data:
        update_data["email"] = update_data["email"].lower()
        existing = users.get_by_email(update_data["email"])
        if existing and existing["id"] != current_user.id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )

    if update_data:
        return users.update(current_user.id, update_data)

    return current_user


@router.get("/", response_model=List[User])
async def read_users(
        skip: int = 0,
        limit: int = 100,
        current_user: UserInDB = Depends(get_current_admin_user),
        users: UserService = Depends(get_user_service)
) -> Any:
    """
    Retrieve users (admin only)
    """
    return users.get_all()[skip:skip + limit]


@router.get("/{user_id}", response_model=User)
async def read_user_by_id(
        user_id: str,
        current_user: UserInDB = Depends(get_current_admin_user),
        users: UserService = Depends(get_user_service)
) -> Any:
    """
    Get a specific user by id (admin only)
    """
    user = users.get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.put("/{user_id}", response_model=User)
async def update_user(
        user_id: str,
        user_in: UserAdminUpdate,
        current_user: UserInDB = Depends(get_current_admin_user),
        users: UserService = Depends(get_user_service)
) -> Any:
    """
    Update a user (admin only)
    """
    updated = users.update(user_id, user_in.model_dump(exclude_unset=True, exclude_none=True))
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return updated


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete_user(
        user_id: str,
        current_user: UserInDB = Depends(get_current_admin_user),
        users: UserService = Depends(get_user_service),
        store: KeyValueStore = Depends(get_store)
) -> Any:
    """
    Delete a user and their data (admin only)
    """
    if not users.delete_account(user_id, store):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return {"message": "User deleted successfully"}
