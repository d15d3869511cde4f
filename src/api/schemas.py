"""Pydantic request/response models for the retouch API."""

from typing import Optional, Union

from pydantic import BaseModel

# =============================================================================
# Response Models
# =============================================================================


class RootResponse(BaseModel):
    """Root endpoint response."""

    message: str
    version: str

    model_config = {"json_schema_extra": {"examples": [{"message": "Retouch API", "version": "1.0.0"}]}}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str

    model_config = {"json_schema_extra": {"examples": [{"status": "healthy"}]}}


class ErrorResponse(BaseModel):
    """Error body shared by every failing response."""

    error: str

    model_config = {"json_schema_extra": {"examples": [{"error": "Invalid action"}]}}


class ImageEditResponse(BaseModel):
    """Edited image returned as a data URI."""

    imageUrl: str

    model_config = {"json_schema_extra": {"examples": [{"imageUrl": "data:image/png;base64,iVBORw0KGgo..."}]}}


class ImageEditStatusResponse(BaseModel):
    """Image edit service configuration status."""

    configured: bool = False
    model: str
    actions: list[str]
    error: Optional[str] = None


# =============================================================================
# Request Models
# =============================================================================


class HotspotBody(BaseModel):
    """Pixel coordinate of a localized edit."""

    x: Union[int, float]
    y: Union[int, float]


class ImageEditRequestBody(BaseModel):
    """Request body for image editing.

    Every field is optional at the schema level; presence rules depend on the
    action and are enforced by the route so they can be reported as 400s.
    """

    image: Optional[str] = None  # data:<mime>;base64,<payload>
    action: Optional[str] = None  # edit | filter | adjust | remove-bg
    prompt: Optional[str] = None
    hotspot: Optional[HotspotBody] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "image": "data:image/png;base64,iVBORw0KGgo...",
                    "action": "edit",
                    "prompt": "remove the red cup",
                    "hotspot": {"x": 320, "y": 240},
                }
            ]
        }
    }
