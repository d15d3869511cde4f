"""Configuration loading and validation for retouch."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from rich.logging import RichHandler

# Get the project root directory (parent of src)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load environment variables from .env file in project root
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


def load_config() -> dict:
    """Load configuration from environment variables."""
    config = {
        # Required API key (API_KEY, falling back to GEMINI_API_KEY)
        "api_key": os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY"),
        # Model configuration
        "image_model": os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image-preview"),
        # Logging
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "log_json": os.getenv("LOG_JSON", "false").lower() == "true",
        # Server
        "cors_origins": [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ],
        "port": int(os.getenv("PORT", "10000")),
    }

    return config


def validate_config(config: dict) -> list[str]:
    """Validate configuration and return list of errors."""
    errors = []

    # Check required API key
    if not config.get("api_key"):
        errors.append("API_KEY (or GEMINI_API_KEY) is required")

    if not config.get("image_model"):
        errors.append("IMAGE_MODEL must not be empty")

    level = str(config.get("log_level", "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        errors.append(f"Unknown LOG_LEVEL: {config.get('log_level')}")

    return errors


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging configuration with Rich for terminal output."""
    # Clear any existing handlers
    logging.root.handlers.clear()

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,  # Disable markup to avoid conflicts
    )

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )

    # Suppress noisy third-party loggers
    noisy_loggers = [
        "httpx",
        "httpcore",
        "google_genai",
        "google_genai.models",
    ]

    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
