from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, List
from schemas.favorite import Favorite, FavoriteToggle
from schemas.user import UserInDB
from api.deps import get_current_user, get_favorite_service, get_restaurant_service
from services.catalog_service import RestaurantService
from services.favorite_service import FavoriteService

router = APIRouter()


@router.get("/", response_model=List[Favorite])
async def get_favorites(
        current_user: UserInDB = Depends(get_current_user),
        favorites: FavoriteService = Depends(get_favorite_service),
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    Get user's favorite restaurants, newest first
    """
    result = []
    for favorite in favorites.get_by_user_id(current_user.id):
        favorite["restaurant"] = restaurants.get_by_id(favorite["restaurant_id"])
        result.append(favorite)
    return result


@router.post("/{restaurant_id}/toggle", response_model=FavoriteToggle)
async def toggle_favorite(
        restaurant_id: str,
        current_user: UserInDB = Depends(get_current_user),
        favorites: FavoriteService = Depends(get_favorite_service),
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    Add the restaurant to favorites, or remove it if it is already there
    """
    if not restaurants.get_by_id(restaurant_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Restaurant not found"
        )

    is_favorite = favorites.toggle_favorite(current_user.id, restaurant_id)
    return {"restaurant_id": restaurant_id, "is_favorite": is_favorite}


@router.delete("/{restaurant_id}", status_code=status.HTTP_200_OK)
async def remove_favorite(
        restaurant_id: str,
        current_user: UserInDB = Depends(get_current_user),
        favorites: FavoriteService = Depends(get_favorite_service)
) -> Any:
    if not favorites.remove_favorite(current_user.id, restaurant_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Favorite not found"
        )
    return {"message": "Favorite removed successfully"}
