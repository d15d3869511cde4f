"""Models for prompt-driven image editing."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class EditAction(str, Enum):
    """Supported editing actions."""

    EDIT = "edit"  # Localized edit around a hotspot
    FILTER = "filter"  # Global stylistic filter
    ADJUST = "adjust"  # Global photographic adjustment
    REMOVE_BACKGROUND = "remove-bg"  # Transparent background cut-out


@dataclass
class Hotspot:
    """Pixel coordinate marking the focal point of a localized edit."""

    x: Union[int, float]
    y: Union[int, float]


@dataclass
class InlineImage:
    """Image carried inline as a MIME type and base64 payload."""

    mime_type: str
    data: str  # base64 text, never decoded by the models layer

    def to_data_uri(self) -> str:
        """Render as a ``data:`` URI."""
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass
class ImageEditRequest:
    """A single edit to apply to one image."""

    image: InlineImage
    action: EditAction
    prompt: Optional[str] = None
    hotspot: Optional[Hotspot] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for logging (payload omitted)."""
        result = {
            "action": self.action.value,
            "mime_type": self.image.mime_type,
            "payload_chars": len(self.image.data),
            "prompt": self.prompt,
        }
        if self.hotspot:
            result["hotspot"] = {"x": self.hotspot.x, "y": self.hotspot.y}
        return result
