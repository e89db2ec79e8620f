from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from typing import Any, Optional, List
from schemas.menu import (
    Category, CategoryCreate, CategoryUpdate,
    MenuItem, MenuItemCreate, MenuItemUpdate
)
from api.deps import get_current_admin_user, get_category_service, get_menu_item_service, get_restaurant_service
from services.catalog_service import CategoryService, MenuItemService, RestaurantService
from services.cloudinary_service import cloudinary_service
from schemas.user import UserInDB

router = APIRouter()


# Category endpoints
@router.get("/categories", response_model=List[Category])
async def get_categories(categories: CategoryService = Depends(get_category_service)) -> Any:
    """
    Get all categories
    """
    return categories.get_all()


@router.get("/categories/{category_id}", response_model=Category)
async def get_category(
        category_id: str,
        categories: CategoryService = Depends(get_category_service)
) -> Any:
    """
    Get a specific category
    """
    category = categories.get_by_id(category_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
    return category


@router.post("/categories", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
        category_in: CategoryCreate,
        current_user: UserInDB = Depends(get_current_admin_user),
        categories: CategoryService = Depends(get_category_service)
) -> Any:
    """
    Create a new category (admin only)
    """
    # Check if category with same name already exists
    if any(c.get("name", "").lower() == category_in.name.lower() for c in categories.get_all()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category with this name already exists"
        )

    return categories.create(category_in.model_dump())


@router.put("/categories/{category_id}", response_model=Category)
async def update_category(
        category_id: str,
        category_in: CategoryUpdate,
        current_user: UserInDB = Depends(get_current_admin_user),
        categories: CategoryService = Depends(get_category_service)
) -> Any:
    """
    Update a category (admin only)
    """
    updated = categories.update(category_id, category_in.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
    return updated


@router.delete("/categories/{category_id}", status_code=status.HTTP_200_OK)
async def delete_category(
        category_id: str,
        current_user: UserInDB = Depends(get_current_admin_user),
        categories: CategoryService = Depends(get_category_service)
) -> Any:
    """
    Delete a category (admin only)
    """
    if not categories.remove(category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
    return {"message": "Category deleted successfully"}


# Menu item endpoints
@router.get("/items", response_model=List[MenuItem])
async def get_menu_items(
        restaurant_id: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        menu_items: MenuItemService = Depends(get_menu_item_service)
) -> Any:
    """
    Get menu items, optionally filtered by restaurant or name and sorted by "name" or "rating"
    """
    if sort == "name":
        items = menu_items.sort_alphabetically()
    elif sort == "rating":
        items = menu_items.sort_by_rating()
    elif sort is None:
        items = menu_items.get_all()
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="sort must be 'name' or 'rating'"
        )

    if restaurant_id:
        allowed = {item["id"] for item in menu_items.get_by_restaurant_id(restaurant_id)}
        items = [item for item in items if item["id"] in allowed]

    if search:
        allowed = {item["id"] for item in menu_items.filter_by_name(search)}
        items = [item for item in items if item["id"] in allowed]

    return items


@router.get("/items/{item_id}", response_model=MenuItem)
async def get_menu_item(
        item_id: str,
        menu_items: MenuItemService = Depends(get_menu_item_service)
) -> Any:
    """
    Get a specific menu item
    """
    item = menu_items.get_by_id(item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Menu item not found"
        )
    return item


@router.post("/items", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
async def create_menu_item(
        item_in: MenuItemCreate,
        current_user: UserInDB = Depends(get_current_admin_user),
        menu_items: MenuItemService = Depends(get_menu_item_service),
        restaurants: RestaurantService = Depends(get_restaurant_service)
) -> Any:
    """
    Create a new menu item (admin only)
    """
    if not restaurants.get_by_id(item_in.restaurant_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Restaurant not found"
        )

    return menu_items.create(item_in.model_dump())


@router.put("/items/{item_id}", response_model=MenuItem)
async def update_menu_item(
        item_id: str,
        item_in: MenuItemUpdate,
        current_user: UserInDB = Depends(get_current_admin_user),
        menu_items: MenuItemService = Depends(get_menu_item_service)
) -> Any:
    """
    Update an existing menu item (admin only)
    """
    updated = menu_items.update(item_id, item_in.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return updated


@router.post("/items/{item_id}/image", response_model=MenuItem)
async def upload_menu_item_image(
        item_id: str,
        image: UploadFile = File(...),
        current_user: UserInDB = Depends(get_current_admin_user),
        menu_items: MenuItemService = Depends(get_menu_item_service)
) -> Any:
    """
    Upload a picture for a menu item and store its public URL (admin only)
    """
    if not menu_items.get_by_id(item_id):
        raise HTTPException(status_code=404, detail="Menu item not found")

    try:
        uploaded = await cloudinary_service.upload_menu_item_image(
            item_id, await image.read(), image.content_type or ""
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return menu_items.update(item_id, {
        "image_url": uploaded.url,
        "image_public_id": uploaded.public_id,
    })


@router.delete("/items/{item_id}", status_code=status.HTTP_200_OK)
async def delete_menu_item(
        item_id: str,
        current_user: UserInDB = Depends(get_current_admin_user),
        menu_items: MenuItemService = Depends(get_menu_item_service)
) -> Any:
    """
    Delete a menu item (admin only)
    """
    existing_item = menu_items.get_by_id(item_id)
    if not existing_item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Menu item not found"
        )

    if existing_item.get("image_public_id"):
        await cloudinary_service.delete_image(existing_item["image_public_id"])

    menu_items.remove(item_id)

    return {"message": "Menu item deleted successfully"}
