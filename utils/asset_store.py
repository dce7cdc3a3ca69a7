import io
import logging
import re
from typing import Optional

import cloudinary
import cloudinary.uploader

from config import settings
from exceptions import AssetStoreError

logger = logging.getLogger(__name__)

UPLOAD_MARKER = "/upload/"
_VERSION_SEGMENT = re.compile(r"^v\d+(/|$)")


def asset_id_from_url(url: Optional[str]) -> Optional[str]:
    """
    Derive the Cloudinary public id from a delivery URL.

    ``https://res.cloudinary.com/demo/image/upload/v1712/inventario/arduino.jpg``
    yields ``inventario/arduino``. Returns None when the URL is empty, has no
    upload marker, or nothing follows it.
    """
    if not url:
        return None
    _, marker, remainder = url.partition(UPLOAD_MARKER)
    if not marker:
        return None
    remainder = remainder.split("?", 1)[0].strip("/")
    remainder = _VERSION_SEGMENT.sub("", remainder)
    if not remainder:
        return None
    head, slash, filename = remainder.rpartition("/")
    if "." in filename:
        filename = filename.rsplit(".", 1)[0]
    if not filename:
        return None
    return f"{head}{slash}{filename}"


class CloudinaryAssetStore:
    def __init__(self, cloud_name: str, api_key: str, api_secret: str, folder: str):
        self.folder = folder
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )

    def upload(self, data: bytes) -> str:
        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                folder=self.folder,
                resource_type="image",
            )
        except Exception as e:
            logger.error(f"Error uploading image to Cloudinary: {str(e)}")
            raise AssetStoreError("Image upload failed") from e
        return result["secure_url"]

    def delete(self, asset_id: str) -> None:
        try:
            result = cloudinary.uploader.destroy(asset_id, resource_type="image")
        except Exception as e:
            logger.error(f"Error deleting Cloudinary asset {asset_id}: {str(e)}")
            raise AssetStoreError("Image deletion failed") from e
        if result.get("result") not in ("ok", "not found"):
            raise AssetStoreError(f"Image deletion failed: {result.get('result')}")


def get_asset_store() -> CloudinaryAssetStore:
    return CloudinaryAssetStore(
        settings.CLOUDINARY_CLOUD_NAME,
        settings.CLOUDINARY_API_KEY,
        settings.CLOUDINARY_API_SECRET,
        settings.CLOUDINARY_FOLDER,
    )
