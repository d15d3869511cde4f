"""Shared pytest fixtures for retouch tests."""

import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from google.genai import types

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# 1x1 PNG header bytes, enough to be a real base64 payload
PNG_PAYLOAD = "iVBORw0KGgo="


@pytest.fixture
def png_data_uri() -> str:
    """A well-formed PNG data URI."""
    return f"data:image/png;base64,{PNG_PAYLOAD}"


@pytest.fixture
def sample_config() -> dict:
    """Sample configuration for testing."""
    return {
        "api_key": "test_gemini_key",
        "image_model": "gemini-2.5-flash-image-preview",
        "log_level": "INFO",
        "log_json": False,
        "cors_origins": ["http://localhost:5173"],
        "port": 10000,
    }


@pytest.fixture
def make_genai_response() -> Callable[..., types.GenerateContentResponse]:
    """Factory for SDK responses shaped like a generateContent reply."""

    def _make(
        image: Optional[tuple[str, bytes]] = None,
        text: Optional[str] = None,
        finish_reason: Optional[types.FinishReason] = None,
        block_reason: Optional[types.BlockedReason] = None,
        with_candidate: bool = True,
    ) -> types.GenerateContentResponse:
        parts = []
        if text is not None:
            parts.append(types.Part(text=text))
        if image is not None:
            mime_type, data = image
            parts.append(types.Part(inline_data=types.Blob(mime_type=mime_type, data=data)))

        candidates = None
        if with_candidate:
            candidates = [
                types.Candidate(
                    content=types.Content(role="model", parts=parts),
                    finish_reason=finish_reason,
                )
            ]

        prompt_feedback = None
        if block_reason is not None:
            prompt_feedback = types.GenerateContentResponsePromptFeedback(block_reason=block_reason)

        return types.GenerateContentResponse(candidates=candidates, prompt_feedback=prompt_feedback)

    return _make


@pytest.fixture
def mock_genai_client() -> Generator[MagicMock, None, None]:
    """Patch google.genai.Client inside the image edit service.

    Yields the client instance; set ``client.aio.models.generate_content.return_value``
    (or ``side_effect``) to simulate the model.
    """
    with patch("services.image_edit_service.Client") as client_cls:
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock()
        client_cls.return_value = client
        yield client
