"""Image Edit Service - prompt-driven photo editing with Gemini image models."""

import base64
import logging
import time

from google.genai import Client
from google.genai import types

from models.image_edit import ImageEditRequest, InlineImage
from models.model_response import ModelResponse

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image-preview"

# Finish reason reported on a normal completion
NORMAL_FINISH_REASON = "STOP"


class ImageEditServiceError(Exception):
    """Error from image edit service."""

    pass


class PromptBlockedError(ImageEditServiceError):
    """The model refused the request before generating anything."""

    def __init__(self, block_reason: str):
        self.block_reason = block_reason
        super().__init__(f"Request blocked: {block_reason}")


class GenerationStoppedError(ImageEditServiceError):
    """Generation ended for a reason other than normal completion."""

    def __init__(self, finish_reason: str):
        self.finish_reason = finish_reason
        super().__init__(
            f"Generation stopped: {finish_reason}. Check the safety settings."
        )


class NoImageReturnedError(ImageEditServiceError):
    """The model completed normally but returned no image."""

    def __init__(self):
        super().__init__("The API did not return an image. Try a simpler request.")


def interpret_response(response: ModelResponse) -> str:
    """Pull the edited image out of a model response.

    Args:
        response: Plain-data view of the generateContent response

    Returns:
        The first inline image of the first candidate, as a data URI

    Raises:
        PromptBlockedError: If prompt feedback carries a block reason
        GenerationStoppedError: If no image came back and the finish reason is abnormal
        NoImageReturnedError: If no image came back for any other reason
    """
    if response.block_reason:
        raise PromptBlockedError(response.block_reason)

    first_candidate = response.candidates[0] if response.candidates else None

    if first_candidate:
        for part in first_candidate.parts:
            if part.inline_data:
                inline = part.inline_data
                return InlineImage(mime_type=inline.mime_type, data=inline.data).to_data_uri()

    finish_reason = first_candidate.finish_reason if first_candidate else None
    if finish_reason and finish_reason != NORMAL_FINISH_REASON:
        raise GenerationStoppedError(finish_reason)

    raise NoImageReturnedError()


class ImageEditService:
    """Service for editing images through a Gemini image model."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_IMAGE_MODEL):
        """Initialize Google GenAI client.

        Args:
            api_key: Google GenAI API key
            model_name: Image-capable Gemini model to use
        """
        self.api_key = api_key
        self.model_name = model_name or DEFAULT_IMAGE_MODEL
        self.client = Client(api_key=api_key)

    def build_contents(self, request: ImageEditRequest, instruction: str) -> types.Content:
        """Build the two-part payload: the image first, then the instruction."""
        image_part = types.Part.from_bytes(
            data=base64.b64decode(request.image.data, validate=True),
            mime_type=request.image.mime_type,
        )
        text_part = types.Part.from_text(text=instruction)
        return types.Content(role="user", parts=[image_part, text_part])

    async def edit_image(self, request: ImageEditRequest, instruction: str) -> str:
        """Apply an edit and return the resulting image.

        Args:
            request: The edit request
            instruction: Rendered instruction for the request action

        Returns:
            Edited image as a data URI

        Raises:
            binascii.Error: If the image payload is not valid base64
            ImageEditServiceError: If the model blocks, stops early or returns no image
        """
        logger.info(
            f"Editing image with {self.model_name} "
            f"(action={request.action.value}, mime={request.image.mime_type})"
        )

        start_time = time.time()
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=self.build_contents(request, instruction),
        )
        generation_time_ms = int((time.time() - start_time) * 1000)

        image_url = interpret_response(ModelResponse.from_genai(response))
        logger.info(f"Image edit completed in {generation_time_ms}ms")
        return image_url
