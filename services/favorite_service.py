from datetime import datetime
from typing import Any, Dict, List
from core.database import FAVORITES
from services.base import EntityService


class FavoriteService(EntityService):
    collection = FAVORITES

    def get_by_user_id(self, user_id: str) -> List[Dict[str, Any]]:
        favorites = [f for f in self.get_all() if f.get("user_id") == user_id]
        return sorted(favorites, key=lambda f: f.get("created_at", ""), reverse=True)

    def is_favorite(self, user_id: str, restaurant_id: str) -> bool:
        return any(f.get("restaurant_id") == restaurant_id for f in self.get_by_user_id(user_id))

    def add_favorite(self, user_id: str, restaurant_id: str) -> Dict[str, Any]:
        for favorite in self.get_by_user_id(user_id):
            if favorite.get("restaurant_id") == restaurant_id:
                return favorite

        return self.create({
            "user_id": user_id,
            "restaurant_id": restaurant_id,
            "created_at": datetime.utcnow().isoformat(),
        })

    def remove_favorite(self, user_id: str, restaurant_id: str) -> bool:
        removed = False
        with self.repository.transaction(self.collection) as favorites:
            kept = [
                f for f in favorites
                if not (f.get("user_id") == user_id and f.get("restaurant_id") == restaurant_id)
            ]
            removed = len(kept) != len(favorites)
            favorites[:] = kept
        return removed

    def toggle_favorite(self, user_id: str, restaurant_id: str) -> bool:
        """Returns True when the restaurant is a favorite after the call."""
        if self.is_favorite(user_id, restaurant_id):
            self.remove_favorite(user_id, restaurant_id)
            return False

        self.add_favorite(user_id, restaurant_id)
        return True
