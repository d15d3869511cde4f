"""Prompts module - instruction templates for the image editing service.

Re-exports the templates and the action dispatcher for easy importing:
    from services.prompts import build_instruction, parse_action
    from services.prompts import LOCALIZED_EDIT, BACKGROUND_REMOVAL
"""

from services.prompts.edits import (
    BACKGROUND_REMOVAL,
    GLOBAL_ADJUSTMENT,
    INSTRUCTION_BUILDERS,
    LOCALIZED_EDIT,
    STYLE_FILTER,
    InstructionError,
    InvalidActionError,
    MissingParameterError,
    build_instruction,
    parse_action,
)

# Prompt version identifiers
# IMPORTANT: Increment these when a template's wording changes
PROMPT_VERSIONS = {
    "localized_edit": "v1",
    "style_filter": "v1",
    "global_adjustment": "v1",
    "background_removal": "v1",
}

__all__ = [
    # Version tracking
    "PROMPT_VERSIONS",
    # Templates
    "LOCALIZED_EDIT",
    "STYLE_FILTER",
    "GLOBAL_ADJUSTMENT",
    "BACKGROUND_REMOVAL",
    # Dispatch
    "INSTRUCTION_BUILDERS",
    "build_instruction",
    "parse_action",
    # Errors
    "InstructionError",
    "InvalidActionError",
    "MissingParameterError",
]
