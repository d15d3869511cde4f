#!/usr/bin/env python
"""FastAPI server for the retouch image editing API."""

import logging
import sys
import uuid
from pathlib import Path

# Add src directory to Python path for imports
src_dir = Path(__file__).parent.parent
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers import core, edit
from api.routers.core import API_VERSION
from utils.config import load_config
from utils.logging import clear_request_context, set_request_context, setup_logging

config = load_config()
setup_logging(config["log_level"], json_output=config["log_json"])
logger = logging.getLogger(__name__)

app = FastAPI(title="Retouch API", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config["cors_origins"],
    allow_credentials=True,
    allow_methods=["POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line of a request with a correlation ID."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_request_context(request_id)
    try:
        response = await call_next(request)
    finally:
        clear_request_context()
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body validation failures as 400s instead of FastAPI's 422."""
    errors = exc.errors()
    if any(tuple(err.get("loc", ())) == ("body",) for err in errors):
        message = edit.MISSING_REQUIRED_MESSAGE
    else:
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ())[1:]) or "body" for err in errors
        )
        message = f"Invalid request body: {fields}"
    logger.warning(f"Invalid request to {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


app.include_router(core.router)
app.include_router(edit.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config["port"])
