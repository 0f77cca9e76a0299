from fastapi import HTTPException, status

from portfolio.core.config import settings
from portfolio.services.catalog_store import CatalogStore
from portfolio.services.image_storage import ImageStorage


def get_catalog_store() -> CatalogStore:
    return CatalogStore(settings.CATALOG_FILE)


def get_image_storage() -> ImageStorage:
    return ImageStorage(
        settings.IMAGES_DIR,
        url_prefix=settings.UPLOAD_URL_PREFIX,
        max_bytes=settings.MAX_UPLOAD_BYTES,
    )


def require_writable() -> None:
    if settings.READ_ONLY:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="read_only_mode")
