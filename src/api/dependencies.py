"""Service construction for the retouch API."""

from services.image_edit_service import ImageEditService
from utils.config import load_config


def get_image_edit_service() -> ImageEditService:
    """Create an image edit service for the current request.

    Configuration is re-read and a fresh client is built on every call, so no
    state is shared between requests.
    """
    config = load_config()
    return ImageEditService(
        api_key=config.get("api_key") or "",
        model_name=config.get("image_model", ""),
    )
