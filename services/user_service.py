import logging
from typing import Any, Dict, Optional
from core.database import ADDRESSES, FAVORITES, ORDERS, PAYMENT_METHODS, USERS
from core.storage import KeyValueStore
from services.base import EntityService
from services.cart_service import cart_key

logger = logging.getLogger(__name__)


class UserService(EntityService):
    collection = USERS

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        email = email.lower()
        for user in self.get_all():
            if user.get("email", "").lower() == email:
                return user
        return None

    def delete_account(self, user_id: str, store: KeyValueStore) -> bool:
        """
        Remove a user and everything they own.

        Each collection is cleaned in its own write; there is no transaction
        spanning collections.
        """
        if not self.get_by_id(user_id):
            return False

        for collection in (ADDRESSES, PAYMENT_METHODS, FAVORITES, ORDERS):
            with self.repository.transaction(collection) as records:
                records[:] = [
                    record for record in records
                    if record.get("user_id") != user_id or record.get("is_restaurant_address")
                ]

        store.remove_item(cart_key(user_id))
        removed = self.remove(user_id)
        logger.info(f"Deleted account {user_id}")
        return removed
