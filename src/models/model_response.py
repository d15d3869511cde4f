"""Plain-data view of a Gemini ``generateContent`` response.

Only the fields needed to pull an edited image out of a response are kept:
prompt feedback, candidate parts carrying inline image data, and the finish
reason. SDK responses are converted into these dataclasses before interpretation,
so the interpretation logic never touches vendor types.
"""

import base64
from dataclasses import dataclass, field
from typing import Any, Optional


def _enum_value(value: Any) -> Optional[str]:
    """Render an SDK enum (or plain string) as its wire value."""
    if value is None:
        return None
    return str(getattr(value, "value", value))


@dataclass
class InlineData:
    """Binary part payload, held as base64 text."""

    mime_type: str
    data: str


@dataclass
class ResponsePart:
    """One content part of a candidate."""

    inline_data: Optional[InlineData] = None
    text: Optional[str] = None


@dataclass
class ResponseCandidate:
    """A single generated candidate."""

    parts: list[ResponsePart] = field(default_factory=list)
    finish_reason: Optional[str] = None


@dataclass
class ModelResponse:
    """Response to a generation request."""

    candidates: list[ResponseCandidate] = field(default_factory=list)
    block_reason: Optional[str] = None

    @classmethod
    def from_genai(cls, response: Any) -> "ModelResponse":
        """Build from a ``google.genai.types.GenerateContentResponse``.

        The SDK holds inline data as raw bytes; it is re-encoded to base64 so
        that callers only ever see data-URI-ready text.
        """
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = _enum_value(getattr(feedback, "block_reason", None)) if feedback else None

        candidates = []
        for candidate in getattr(response, "candidates", None) or []:
            content = getattr(candidate, "content", None)
            parts = []
            for part in (getattr(content, "parts", None) or []) if content else []:
                blob = getattr(part, "inline_data", None)
                inline = None
                if blob is not None and getattr(blob, "data", None):
                    raw = blob.data
                    if isinstance(raw, (bytes, bytearray)):
                        raw = base64.b64encode(raw).decode("ascii")
                    inline = InlineData(mime_type=blob.mime_type or "image/png", data=raw)
                parts.append(ResponsePart(inline_data=inline, text=getattr(part, "text", None)))
            candidates.append(
                ResponseCandidate(
                    parts=parts,
                    finish_reason=_enum_value(getattr(candidate, "finish_reason", None)),
                )
            )
        return cls(candidates=candidates, block_reason=block_reason)
