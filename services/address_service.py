from typing import Any, Dict, List, Mapping, Optional
from core.database import ADDRESSES
from core.exceptions import BusinessRuleError
from core.repository import generate_id
from services.base import EntityService


class AddressService(EntityService):
    """
    Addresses belong to a user or to a restaurant, never both.

    The plain CRUD methods do not enforce the per-user rules. The ``*_for_user``
    methods and ``set_default`` do: every user keeps at least one address, and at
    most one of them is the default.
    """

    collection = ADDRESSES

    def get_by_user_id(self, user_id: str) -> List[Dict[str, Any]]:
        return [
            address for address in self.get_all()
            if address.get("user_id") == user_id and not address.get("is_restaurant_address")
        ]

    def get_by_restaurant_id(self, restaurant_id: str) -> List[Dict[str, Any]]:
        return [
            address for address in self.get_all()
            if address.get("restaurant_id") == restaurant_id and address.get("is_restaurant_address")
        ]

    def get_for_user(self, user_id: str, address_id: str) -> Optional[Dict[str, Any]]:
        address = self.get_by_id(address_id)
        if not address or address.get("is_restaurant_address") or address.get("user_id") != user_id:
            return None
        return address

    def get_default_for_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        for address in self.get_by_user_id(user_id):
            if address.get("is_default"):
                return address
        return None

    def create_for_user(self, user_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        with self.repository.transaction(self.collection) as addresses:
            owned = [
                a for a in addresses
                if a.get("user_id") == user_id and not a.get("is_restaurant_address")
            ]

            # First address is always the default
            make_default = bool(data.get("is_default")) or not owned
            if make_default:
                for address in owned:
                    address["is_default"] = False

            created = {
                **data,
                "id": generate_id(),
                "user_id": user_id,
                "restaurant_id": None,
                "is_restaurant_address": False,
                "is_default": make_default,
            }
            addresses.append(created)

        return dict(created)

    def create_for_restaurant(self, restaurant_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.create({
            **data,
            "user_id": None,
            "restaurant_id": restaurant_id,
            "is_restaurant_address": True,
            "is_default": False,
        })

    def update_for_user(self, user_id: str, address_id: str, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        if not self.get_for_user(user_id, address_id):
            return None

        changes = {k: v for k, v in data.items() if k not in ("user_id", "restaurant_id", "is_restaurant_address")}
        is_default = changes.pop("is_default", None)

        updated = self.update(address_id, changes) if changes else self.get_by_id(address_id)
        if is_default:
            updated = self.set_default(user_id, address_id)
        return updated

    def set_default(self, user_id: str, address_id: str) -> Optional[Dict[str, Any]]:
        """
        Make ``address_id`` the user's only default address in a single write.
        """
        chosen = None
        with self.repository.transaction(self.collection) as addresses:
            for address in addresses:
                if address.get("user_id") != user_id or address.get("is_restaurant_address"):
                    continue
                address["is_default"] = address.get("id") == address_id
                if address["is_default"]:
                    chosen = dict(address)

            if chosen is None:
                raise BusinessRuleError("Address not found")

        return chosen

    def remove_for_user(self, user_id: str, address_id: str) -> bool:
        address = self.get_for_user(user_id, address_id)
        if not address:
            return False

        others = [a for a in self.get_by_user_id(user_id) if a["id"] != address_id]
        if not others:
            raise BusinessRuleError("At least one address is required")

        with self.repository.transaction(self.collection) as addresses:
            addresses[:] = [a for a in addresses if a.get("id") != address_id]
            if address.get("is_default"):
                promoted = others[0]["id"]
                for a in addresses:
                    if a.get("id") == promoted:
                        a["is_default"] = True

        return True
