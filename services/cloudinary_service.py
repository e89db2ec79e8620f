import base64
import logging
from typing import Optional
import cloudinary
import cloudinary.uploader
from pydantic import BaseModel
from core.config import settings

logger = logging.getLogger(__name__)

cloudinary.config(
    cloud_name=settings.CLOUDINARY_CLOUD_NAME,
    api_key=settings.CLOUDINARY_API_KEY,
    api_secret=settings.CLOUDINARY_API_SECRET,
    secure=True
)

MENU_ITEM_FOLDER = "menu_items"
ALLOWED_IMAGE_TYPES = ("image/png", "image/jpeg", "image/webp", "image/gif")


class UploadedImage(BaseModel):
    public_id: str
    url: str


class CloudinaryService:
    """Image hosting for catalog pictures. Only the public URL is kept on the record."""

    @staticmethod
    async def upload_image(
            file_data: bytes,
            folder: str,
            public_id: Optional[str] = None,
            content_type: str = "image/png"
    ) -> UploadedImage:
        """
        Upload raw image bytes as a data URI.

        An existing image with the same public_id is overwritten. Raises
        ValueError for empty data or a content type that is not an image.
        """
        if not file_data:
            raise ValueError("Empty image file")
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise ValueError(f"Unsupported image type: {content_type}")

        data_uri = f"data:{content_type};base64,{base64.b64encode(file_data).decode('utf-8')}"
        try:
            result = cloudinary.uploader.upload(
                data_uri,
                folder=folder,
                public_id=public_id,
                overwrite=True,
                resource_type="image"
            )
        except Exception as e:
            logger.error(f"Error uploading image to Cloudinary: {e}")
            raise e

        logger.info(f"Uploaded image {result['public_id']}")
        return UploadedImage(public_id=result["public_id"], url=result["secure_url"])

    async def upload_menu_item_image(self, item_id: str, file_data: bytes, content_type: str) -> UploadedImage:
        return await self.upload_image(
            file_data,
            folder=MENU_ITEM_FOLDER,
            public_id=f"item_{item_id}",
            content_type=content_type
        )

    @staticmethod
    async def delete_image(public_id: str) -> bool:
        # A failed delete only leaves an orphan image behind
        try:
            result = cloudinary.uploader.destroy(public_id)
        except Exception as e:
            logger.error(f"Error deleting image {public_id} from Cloudinary: {e}")
            return False
        return result.get("result") == "ok"


cloudinary_service = CloudinaryService()
