from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from core.database import get_store
from core.storage import KeyValueStore
from api.deps import get_user_service, resolve_token_user
from services.user_service import UserService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete("/")
async def delete_account(
        request: Request,
        users: UserService = Depends(get_user_service),
        store: KeyValueStore = Depends(get_store)
) -> JSONResponse:
    """
    Delete the caller's account and everything it owns.

    Answers {"message": ...} on success and {"error": ...} with HTTP 400 on any failure,
    including a missing or invalid bearer token.
    """
    try:
        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            raise ValueError("Not authorized")

        token = auth_header[len("Bearer "):]
        try:
            user = resolve_token_user(token, users)
        except HTTPException:
            raise ValueError("User not found")

        if not users.delete_account(user.id, store):
            raise ValueError("User not found")

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"message": "Account deleted successfully"}
        )
    except ValueError as e:
        logger.warning(f"Account deletion refused: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)}
        )
    except Exception as e:
        logger.error(f"Account deletion failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)}
        )
