"""AI-backed app generation.

The model output is untrusted: it is parsed as JSON and validated against the
per-type contract before anything downstream sees it. Every failure raises a
GenerationError subclass so the caller can fall back to the scaffold.
"""

import json
from typing import Any

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.runnables import Runnable

from appforger.logging_config import get_logger
from appforger.models import ProjectType
from appforger.schemas.generation import AppGenerationRequest, FileSet, GeneratedApp

from .prompts import REQUIRED_FILES, system_prompt

logger = get_logger(__name__)

MIN_FILE_COUNT = 5


class GenerationError(Exception):
    """AI generation produced nothing usable."""


class EmptyResponseError(GenerationError):
    pass


class InvalidJSONError(GenerationError):
    pass


class InsufficientFilesError(GenerationError):
    pass


class MissingRequiredFilesError(GenerationError):
    def __init__(self, app_type: ProjectType, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required {app_type.value} files: {', '.join(missing)}")


class EmptyFileContentError(GenerationError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Generated file has empty content: {path}")


def _has_path(paths: list[str], required: str) -> bool:
    # Suffix match tolerates the app being nested one directory down
    return any(p == required or p.endswith(f"/{required}") for p in paths)


def validate_generated_files(files: Any, app_type: ProjectType) -> FileSet:
    """Check an untrusted "files" value against the app type's contract.

    Returns the files unchanged when valid.
    """
    if not isinstance(files, dict):
        raise InsufficientFilesError("Insufficient files: AI response missing 'files' object")

    if len(files) < MIN_FILE_COUNT:
        raise InsufficientFilesError(
            f"Insufficient files: AI generated only {len(files)} files "
            f"(minimum {MIN_FILE_COUNT})"
        )

    paths = list(files)
    missing = [req for req in REQUIRED_FILES[app_type] if not _has_path(paths, req)]
    if missing:
        raise MissingRequiredFilesError(app_type, missing)

    for path, content in files.items():
        if not isinstance(content, str) or not content.strip():
            raise EmptyFileContentError(path)

    return files


def parse_generation_response(content: str | None, app_type: ProjectType) -> GeneratedApp:
    if not content:
        raise EmptyResponseError("No response from AI model")

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidJSONError(f"AI response is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise InvalidJSONError("AI response is not a JSON object")

    files = validate_generated_files(parsed.get("files"), app_type)

    features = parsed.get("features") or []
    if not isinstance(features, list):
        features = []

    app_name = parsed.get("appName")

    return GeneratedApp(
        files=files,
        features=[str(f) for f in features],
        app_name=app_name if isinstance(app_name, str) else None,
    )


async def generate_app(request: AppGenerationRequest, llm: Runnable) -> GeneratedApp:
    """Ask the model for a complete app and validate the answer.

    Raises:
        GenerationError: When the response is empty, malformed or incomplete.
    """
    messages = [
        SystemMessage(content=system_prompt(request.app_type)),
        HumanMessage(content=request.description),
    ]

    logger.info(
        "ai_generation_started",
        app_type=request.app_type.value,
        project_name=request.project_name,
    )
    response = await llm.ainvoke(messages)

    content = response.content if isinstance(response.content, str) else None
    result = parse_generation_response(content, request.app_type)

    logger.info(
        "ai_generation_completed",
        app_type=request.app_type.value,
        file_count=len(result.files),
        feature_count=len(result.features),
    )
    return result
