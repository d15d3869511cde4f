# Data models for retouch
from .image_edit import EditAction, Hotspot, ImageEditRequest, InlineImage
from .model_response import (
    InlineData,
    ModelResponse,
    ResponseCandidate,
    ResponsePart,
)

__all__ = [
    "EditAction",
    "Hotspot",
    "ImageEditRequest",
    "InlineImage",
    "InlineData",
    "ModelResponse",
    "ResponseCandidate",
    "ResponsePart",
]
