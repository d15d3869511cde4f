"""Helpers for ``data:<mime>;base64,<payload>`` image URIs."""

import re

from models.image_edit import InlineImage

MIME_TYPE_PATTERN = re.compile(r":(.*?);")


class InvalidDataURIError(ValueError):
    """Raised when a data URI cannot be split into MIME type and payload."""

    pass


def parse_data_uri(data_uri: str) -> InlineImage:
    """Split a data URI into its MIME type and base64 payload.

    The payload is returned as-is; it is not base64-decoded here.

    Args:
        data_uri: String of the form ``data:image/png;base64,iVBOR...``

    Returns:
        InlineImage with the extracted MIME type and payload

    Raises:
        InvalidDataURIError: If there is no comma or no ``:...;`` MIME segment
    """
    if not isinstance(data_uri, str):
        raise InvalidDataURIError("Invalid data URL")

    segments = data_uri.split(",", 1)
    if len(segments) < 2:
        raise InvalidDataURIError("Invalid data URL")

    header, payload = segments
    mime_match = MIME_TYPE_PATTERN.search(header)
    if not mime_match or not mime_match.group(1):
        raise InvalidDataURIError("Could not extract the MIME type from the data URL")

    return InlineImage(mime_type=mime_match.group(1), data=payload)