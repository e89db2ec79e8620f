from typing import Any, Dict, List
from core.database import CATEGORIES, MENU_ITEMS, RESTAURANTS
from services.base import EntityService


class RestaurantService(EntityService):
    collection = RESTAURANTS


class CategoryService(EntityService):
    collection = CATEGORIES


class MenuItemService(EntityService):
    collection = MENU_ITEMS

    def get_by_restaurant_id(self, restaurant_id: str) -> List[Dict[str, Any]]:
        return [item for item in self.get_all() if item.get("restaurant_id") == restaurant_id]

    def filter_by_name(self, name: str) -> List[Dict[str, Any]]:
        """Case-insensitive substring match on the item name."""
        needle = name.lower()
        return [item for item in self.get_all() if needle in item.get("name", "").lower()]

    def sort_alphabetically(self) -> List[Dict[str, Any]]:
        return sorted(self.get_all(), key=lambda item: item.get("name", "").casefold())

    def sort_by_rating(self) -> List[Dict[str, Any]]:
        # Missing rating counts as 0
        return sorted(self.get_all(), key=lambda item: item.get("rating") or 0, reverse=True)
