from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from typing import Any
from datetime import timedelta
from core.config import settings
from core.security import create_access_token
from models.user import UserModel
from schemas.user import User, UserCreate, Token, UserInDB, Session
from api.deps import get_current_user, get_user_service
from services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register_user(
        user_in: UserCreate,
        users: UserService = Depends(get_user_service)
) -> Any:
    """
    Register a new user
    """
    # Check if user already exists
    if users.get_by_email(user_in.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    admin_emails = {email.lower() for email in settings.ADMIN_EMAILS}
    user_data = UserModel.create_user(
        email=user_in.email,
        password=user_in.password,
        name=user_in.name,
        is_admin=user_in.email.lower() in admin_emails
    )

    return users.create(user_data)


@router.post("/login", response_model=Token)
async def login_for_access_token(
        form_data: OAuth2PasswordRequestForm = Depends(),
        users: UserService = Depends(get_user_service)
) -> Any:
    """
    OAuth2 compatible token login, get an access token for future requests
    """
    user = users.get_by_email(form_data.username)

    if not user or not UserModel.authenticate(user, form_data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.get("is_active", False):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user"
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        subject=user["id"], expires_delta=access_token_expires
    )

    return {"access_token": access_token, "token_type": "bearer"}


@router.post("/refresh-token", response_model=Token)
async def refresh_token(current_user: UserInDB = Depends(get_current_user)) -> Any:
    """
    Refresh access token
    """
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        subject=current_user.id, expires_delta=access_token_expires
    )

    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=Session)
async def read_session(current_user: UserInDB = Depends(get_current_user)) -> Any:
    """
    Get the authenticated session
    """
    return {
        "id": current_user.id,
        "email": current_user.email,
        "email_confirmed_at": current_user.email_confirmed_at,
    }
