from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, List, Optional
from schemas.menu import MenuItem
from schemas.restaurant import Restaurant, RestaurantCreate, RestaurantUpdate
from schemas.user import UserInDB
from api.deps import get_current_admin_user, get_menu_item_service, get_restaurant_service
from services.catalog_service import MenuItemService, RestaurantService

router = APIRouter()


def restaurant_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Restaurant not found"
    )


@router.get("/", response_model=List[Restaurant])
async def get_restaurants(
        category_id: Optional[str] = None,
        search: Optional[str] = None,
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    List restaurants, optionally by category or name
    """
    result = restaurants.get_all()
    if category_id:
        result = [r for r in result if r.get("category_id") == category_id]
    if search:
        result = [r for r in result if search.lower() in r.get("name", "").lower()]
    return result


@router.get("/{restaurant_id}", response_model=Restaurant)
async def get_restaurant(
        restaurant_id: str,
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    restaurant = restaurants.get_by_id(restaurant_id)
    if not restaurant:
        raise restaurant_not_found()
    return restaurant


@router.get("/{restaurant_id}/menu", response_model=List[MenuItem])
async def get_restaurant_menu(
        restaurant_id: str,
        restaurants: RestaurantService = Depends(get_restaurant_service),
        menu_items: MenuItemService = Depends(get_menu_item_service)
) -> Any:
    if not restaurants.get_by_id(restaurant_id):
        raise restaurant_not_found()
    return menu_items.get_by_restaurant_id(restaurant_id)


@router.post("/", response_model=Restaurant, status_code=status.HTTP_201_CREATED)
async def create_restaurant(
        restaurant_in: RestaurantCreate,
        current_user: UserInDB = Depends(get_current_admin_user),
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    Create a restaurant (admin only)
    """
    return restaurants.create(restaurant_in.model_dump())


@router.put("/{restaurant_id}", response_model=Restaurant)
async def update_restaurant(
        restaurant_id: str,
        restaurant_in: RestaurantUpdate,
        current_user: UserInDB = Depends(get_current_admin_user),
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    Update a restaurant (admin only)
    """
    updated = restaurants.update(restaurant_id, restaurant_in.model_dump(exclude_unset=True))
    if not updated:
        raise restaurant_not_found()
    return updated


@router.delete("/{restaurant_id}", status_code=status.HTTP_200_OK)
async def delete_restaurant(
        restaurant_id: str,
        current_user: UserInDB = Depends(get_current_admin_user),
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    Delete a restaurant (admin only). Menu items and addresses are left in place.
    """
    if not restaurants.remove(restaurant_id):
        raise restaurant_not_found()
    return {"message": "Restaurant deleted successfully"}
