"""Unit tests for data URI parsing."""

import pytest
from models.image_edit import InlineImage
from utils.data_uri import InvalidDataURIError, parse_data_uri


@pytest.mark.unit
class TestParseDataUri:
    """Tests for parse_data_uri()."""

    @pytest.mark.parametrize(
        "mime_type,payload",
        [
            ("image/png", "QUJD"),
            ("image/jpeg", "/9j/4AAQSkZJRgABAQ=="),
            ("image/webp", "UklGRiQAAABXRUJQ"),
            ("image/svg+xml", "PHN2Zz4="),
        ],
    )
    def test_extracts_mime_and_payload_unchanged(self, mime_type, payload):
        """MIME type and payload should come back exactly as embedded."""
        result = parse_data_uri(f"data:{mime_type};base64,{payload}")

        assert result == InlineImage(mime_type=mime_type, data=payload)

    def test_payload_is_not_decoded(self):
        """Payload is opaque text, even when it is not valid base64."""
        result = parse_data_uri("data:image/png;base64,not base64 at all!")

        assert result.data == "not base64 at all!"

    def test_splits_on_first_comma_only(self):
        """Everything after the first comma belongs to the payload."""
        result = parse_data_uri("data:image/png;base64,AAAA,BBBB")

        assert result.data == "AAAA,BBBB"

    def test_mime_match_is_non_greedy(self):
        """MIME type stops at the first semicolon."""
        result = parse_data_uri("data:image/png;charset=utf-8;base64,QUJD")

        assert result.mime_type == "image/png"

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "data:image/png;base64",
            "QUJD",
            "image/png;base64QUJD",
        ],
    )
    def test_missing_comma_raises(self, value):
        """Strings without a comma are rejected."""
        with pytest.raises(InvalidDataURIError, match="Invalid data URL"):
            parse_data_uri(value)

    @pytest.mark.parametrize(
        "value",
        [
            "data;base64,QUJD",
            "data:image/png,QUJD",
            "data:;base64,QUJD",
            ",QUJD",
        ],
    )
    def test_missing_mime_raises(self, value):
        """Prefixes without a ':...;' segment are rejected."""
        with pytest.raises(InvalidDataURIError, match="MIME type"):
            parse_data_uri(value)

    def test_non_string_raises_parse_error(self):
        """Non-string input is a parse error, not a TypeError."""
        with pytest.raises(InvalidDataURIError):
            parse_data_uri(None)

    def test_error_is_a_value_error(self):
        """Callers can treat parse failures as ValueError."""
        with pytest.raises(ValueError):
            parse_data_uri("no comma here")


@pytest.mark.unit
def test_inline_image_renders_data_uri():
    """InlineImage.to_data_uri() is the inverse of parse_data_uri()."""
    image = InlineImage(mime_type="image/png", data="QUJD")

    assert image.to_data_uri() == "data:image/png;base64,QUJD"
    assert parse_data_uri(image.to_data_uri()) == image
