from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
from core.database import PAYMENT_METHODS
from core.exceptions import BusinessRuleError
from core.repository import generate_id
from services.base import EntityService


def mask_card_number(card_number: Optional[str]) -> Optional[str]:
    if not card_number:
        return None
    return f"**** **** **** {card_number[-4:]}"


class PaymentMethodService(EntityService):
    collection = PAYMENT_METHODS

    def get_by_user_id(self, user_id: str) -> List[Dict[str, Any]]:
        methods = [m for m in self.get_all() if m.get("user_id") == user_id]
        return sorted(methods, key=lambda m: m.get("created_at", ""), reverse=True)

    def get_for_user(self, user_id: str, method_id: str) -> Optional[Dict[str, Any]]:
        method = self.get_by_id(method_id)
        if not method or method.get("user_id") != user_id:
            return None
        return method

    def create_for_user(self, user_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        now = datetime.utcnow().isoformat()

        with self.repository.transaction(self.collection) as methods:
            owned = [m for m in methods if m.get("user_id") == user_id]
            make_default = bool(data.get("is_default")) or not owned
            if make_default:
                for method in owned:
                    method["is_default"] = False

            created = {
                **data,
                "id": generate_id(),
                "user_id": user_id,
                "card_number": mask_card_number(data.get("card_number")),
                "is_default": make_default,
                "created_at": now,
                "updated_at": now,
            }
            methods.append(created)

        return dict(created)

    def update_for_user(self, user_id: str, method_id: str, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        if not self.get_for_user(user_id, method_id):
            return None

        changes = {k: v for k, v in data.items() if k not in ("user_id", "card_number")}
        is_default = changes.pop("is_default", None)
        changes["updated_at"] = datetime.utcnow().isoformat()

        updated = self.update(method_id, changes)
        if is_default:
            updated = self.set_default(user_id, method_id)
        return updated

    def set_default(self, user_id: str, method_id: str) -> Dict[str, Any]:
        chosen = None
        with self.repository.transaction(self.collection) as methods:
            for method in methods:
                if method.get("user_id") != user_id:
                    continue
                method["is_default"] = method.get("id") == method_id
                if method["is_default"]:
                    method["updated_at"] = datetime.utcnow().isoformat()
                    chosen = dict(method)

            if chosen is None:
                raise BusinessRuleError("Payment method not found")

        return chosen

    def remove_for_user(self, user_id: str, method_id: str) -> bool:
        method = self.get_for_user(user_id, method_id)
        if not method:
            return False

        with self.repository.transaction(self.collection) as methods:
            methods[:] = [m for m in methods if m.get("id") != method_id]
            if method.get("is_default"):
                remaining = sorted(
                    (m for m in methods if m.get("user_id") == user_id),
                    key=lambda m: m.get("created_at", ""),
                    reverse=True,
                )
                if remaining:
                    remaining[0]["is_default"] = True

        return True
