from datetime import datetime
from typing import Optional, Dict, Any
from core.security import get_password_hash, verify_password


class UserModel:
    @staticmethod
    def create_user(
            email: str,
            password: str,
            name: str,
            auth_type: str = "email",
            is_admin: bool = False
    ) -> Dict[str, Any]:
        """Build a new user record (the repository assigns the id)"""
        return {
            "email": email.lower(),
            "hashed_password": get_password_hash(password),
            "name": name,
            "auth_type": auth_type,
            "is_active": True,
            "is_admin": is_admin,
            "email_confirmed_at": None,
            "created_at": datetime.utcnow().isoformat(),
        }

    @staticmethod
    def authenticate(user: Optional[Dict[str, Any]], password: str) -> bool:
        """Verify password against stored hash"""
        if not user:
            return False
        if not verify_password(password, user["hashed_password"]):
            return False
        return True
