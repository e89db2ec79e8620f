from typing import Dict, List, Optional, Union
from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import os
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Food Storefront API"

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Storage: "memory", "file" or "mongo"
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "file")
    STORAGE_PATH: str = os.getenv("STORAGE_PATH", "./data")
    SEED_SAMPLE_DATA: bool = True

    @field_validator("STORAGE_BACKEND")
    @classmethod
    def storage_backend_must_be_known(cls, v: str) -> str:
        v = v.lower()
        if v not in ("memory", "file", "mongo"):
            raise ValueError(f"Unknown storage backend: {v}")
        return v

    # MongoDB
    MONGO_URI: Optional[str] = os.getenv("MONGO_URI")
    MONGO_DB: str = os.getenv("MONGO_DB", "food_storefront")
    MONGO_KV_COLLECTION: str = "kv_store"

    # JWT
    SECRET_KEY: str = os.getenv("SECRET_KEY", "your-secret-key")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days

    # Checkout
    TAX_RATE: float = 0.10
    DEFAULT_DELIVERY_FEE: float = 5.99
    PROMO_CODES: Dict[str, float] = {"PRIMEIRACOMPRA": 0.10}

    # Accounts registered with these emails get admin rights
    ADMIN_EMAILS: List[str] = []

    # Cloudinary
    CLOUDINARY_CLOUD_NAME: Optional[str] = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY: Optional[str] = os.getenv("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET: Optional[str] = os.getenv("CLOUDINARY_API_SECRET")

    model_config = SettingsConfigDict(case_sensitive=True)


settings = Settings()
