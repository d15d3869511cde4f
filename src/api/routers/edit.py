"""Image editing routes for the retouch API."""

import logging

from api.dependencies import get_image_edit_service
from api.schemas import ErrorResponse, ImageEditRequestBody, ImageEditResponse, ImageEditStatusResponse
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from models.image_edit import EditAction, Hotspot, ImageEditRequest
from services.prompts import InstructionError, build_instruction, parse_action
from utils.config import load_config, validate_config
from utils.data_uri import parse_data_uri

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Image Editing"])

MISSING_REQUIRED_MESSAGE = 'Parameters "image" and "action" are required'
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


@router.post(
    "/api/generate",
    response_model=ImageEditResponse,
    summary="Edit image",
    description="Apply an edit, filter, adjustment or background removal to a data-URI image.",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameters"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Upstream or parsing failure"},
    },
)
async def generate(body: ImageEditRequestBody) -> dict[str, str]:
    """Edit an image with the configured Gemini image model."""
    if not body.image or not body.action:
        logger.warning(f"Rejected image edit: {MISSING_REQUIRED_MESSAGE}")
        raise HTTPException(status_code=400, detail=MISSING_REQUIRED_MESSAGE)

    try:
        image = parse_data_uri(body.image)
        action = parse_action(body.action)
        hotspot = Hotspot(x=body.hotspot.x, y=body.hotspot.y) if body.hotspot else None
        instruction = build_instruction(action, body.prompt, hotspot)

        edit_request = ImageEditRequest(
            image=image,
            action=action,
            prompt=body.prompt,
            hotspot=hotspot,
        )
        logger.info(f"Image edit requested: {edit_request.to_dict()}")

        service = get_image_edit_service()
        image_url = await service.edit_image(edit_request, instruction)

    except InstructionError as e:
        logger.warning(f"Image edit rejected ({body.action}): {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logger.exception(f"Image edit failed for action {body.action}: {e}")
        message = str(e) or UNKNOWN_ERROR_MESSAGE
        raise HTTPException(status_code=500, detail=f"API call failed: {message}")

    return {"imageUrl": image_url}


@router.api_route(
    "/api/generate",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def generate_method_not_allowed(request: Request) -> JSONResponse:
    """Reject every method other than POST, whatever the body holds."""
    logger.warning(f"Rejected {request.method} {request.url.path}: method not allowed")
    return JSONResponse(
        status_code=405,
        content={"error": METHOD_NOT_ALLOWED_MESSAGE},
        headers={"Allow": "POST"},
    )


@router.get(
    "/api/generate/status",
    response_model=ImageEditStatusResponse,
    summary="Image edit status",
    description="Check whether the image model is configured.",
)
async def get_generate_status() -> dict:
    """Report image edit configuration without calling the model."""
    config = load_config()
    errors = validate_config(config)
    return {
        "configured": not errors,
        "model": config.get("image_model", ""),
        "actions": [action.value for action in EditAction],
        "error": "; ".join(errors) if errors else None,
    }
