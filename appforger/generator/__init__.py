"""Source generation: AI-backed with a deterministic scaffold fallback."""

from .ai import (
    EmptyFileContentError,
    EmptyResponseError,
    GenerationError,
    InsufficientFilesError,
    InvalidJSONError,
    MissingRequiredFilesError,
    generate_app,
    validate_generated_files,
)
from .scaffolds import generate_scaffold

SUBSTANTIVE_DESCRIPTION_MIN_LENGTH = 10


def is_substantive_description(description: str | None) -> bool:
    """Whether a description carries enough detail to justify an AI attempt."""
    return bool(description) and len(description.strip()) > SUBSTANTIVE_DESCRIPTION_MIN_LENGTH


__all__ = [
    "EmptyFileContentError",
    "EmptyResponseError",
    "GenerationError",
    "InsufficientFilesError",
    "InvalidJSONError",
    "MissingRequiredFilesError",
    "generate_app",
    "generate_scaffold",
    "is_substantive_description",
    "validate_generated_files",
]
