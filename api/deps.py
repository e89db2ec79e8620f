from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from core.config import settings
from core.database import get_repository, get_store
from core.repository import RecordRepository
from core.security import decode_access_token
from core.storage import KeyValueStore
from schemas.user import UserInDB
from services.address_service import AddressService
from services.cart_service import CartService
from services.catalog_service import CategoryService, MenuItemService, RestaurantService
from services.favorite_service import FavoriteService
from services.order_service import OrderService
from services.payment_method_service import PaymentMethodService
from services.user_service import UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


def get_user_service(repository: RecordRepository = Depends(get_repository)) -> UserService:
    return UserService(repository)


def get_address_service(repository: RecordRepository = Depends(get_repository)) -> AddressService:
    return AddressService(repository)


def get_restaurant_service(repository: RecordRepository = Depends(get_repository)) -> RestaurantService:
    return RestaurantService(repository)


def get_category_service(repository: RecordRepository = Depends(get_repository)) -> CategoryService:
    return CategoryService(repository)


def get_menu_item_service(repository: RecordRepository = Depends(get_repository)) -> MenuItemService:
    return MenuItemService(repository)


def get_order_service(repository: RecordRepository = Depends(get_repository)) -> OrderService:
    return OrderService(repository)


def get_payment_method_service(repository: RecordRepository = Depends(get_repository)) -> PaymentMethodService:
    return PaymentMethodService(repository)


def get_favorite_service(repository: RecordRepository = Depends(get_repository)) -> FavoriteService:
    return FavoriteService(repository)


def resolve_token_user(token: str, users: UserService) -> UserInDB:
    """
    Validate token and return the matching user
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        user_id = decode_access_token(token)
    except JWTError:
        raise credentials_exception

    if user_id is None:
        raise credentials_exception

    user = users.get_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    return UserInDB(**user)


async def get_current_user(
        token: str = Depends(oauth2_scheme),
        users: UserService = Depends(get_user_service)
) -> UserInDB:
    return resolve_token_user(token, users)


async def get_current_active_user(current_user: UserInDB = Depends(get_current_user)) -> UserInDB:
    """
    Check if current user is active
    """
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user"
        )
    return current_user


async def get_current_admin_user(current_user: UserInDB = Depends(get_current_active_user)) -> UserInDB:
    """
    Check if current user is an admin
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return current_user


async def get_cart_service(
        current_user: UserInDB = Depends(get_current_active_user),
        store: KeyValueStore = Depends(get_store)
) -> CartService:
    """
    One cart per authenticated user, rebuilt from the store on every request
    """
    return CartService(store, current_user.id)
