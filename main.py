from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from core.config import settings
from core.database import storage
from api.routes import (
    auth, account, users, restaurants, menu, addresses, payment_methods,
    favorites, cart, checkout, orders
)
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

# Set up CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(auth.router, prefix=f"{settings.API_V1_STR}/auth", tags=["Authentication"])
app.include_router(account.router, prefix=f"{settings.API_V1_STR}/account", tags=["Account"])
app.include_router(users.router, prefix=f"{settings.API_V1_STR}/users", tags=["Users"])
app.include_router(restaurants.router, prefix=f"{settings.API_V1_STR}/restaurants", tags=["Restaurants"])
app.include_router(menu.router, prefix=f"{settings.API_V1_STR}/menu", tags=["Menu"])
app.include_router(addresses.router, prefix=f"{settings.API_V1_STR}/addresses", tags=["Addresses"])
app.include_router(payment_methods.router, prefix=f"{settings.API_V1_STR}/payment-methods", tags=["Payment Methods"])
app.include_router(favorites.router, prefix=f"{settings.API_V1_STR}/favorites", tags=["Favorites"])
app.include_router(cart.router, prefix=f"{settings.API_V1_STR}/cart", tags=["Cart"])
app.include_router(checkout.router, prefix=f"{settings.API_V1_STR}/checkout", tags=["Checkout"])
app.include_router(orders.router, prefix=f"{settings.API_V1_STR}/orders", tags=["Orders"])


@app.on_event("startup")
async def startup_storage():
    storage.open()
    logger.info(f"Storage ready ({settings.STORAGE_BACKEND})")


@app.on_event("shutdown")
async def shutdown_storage():
    storage.close()


@app.get("/")
async def root():
    return {"message": "Welcome to the Food Storefront API"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
