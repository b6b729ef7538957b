"""LLM factory for the AI source generator.

Builds a LangChain chat model bound to strict JSON output, so callers only deal
with ainvoke() and the returned message content.
"""

from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from appforger.config import ConfigurationError, Settings, get_settings
from appforger.logging_config import get_logger

logger = get_logger(__name__)


class LLMFactory:
    """Factory for chat models used by the forge pipeline."""

    @staticmethod
    def is_configured(settings: Settings | None = None) -> bool:
        settings = settings or get_settings()
        return settings.openai_configured

    @staticmethod
    def create_json_llm(settings: Settings | None = None) -> Runnable:
        """Create a chat model that must answer with a single JSON object.

        Raises:
            ConfigurationError: If OPENAI_API_KEY is not set.
        """
        settings = settings or get_settings()
        if not settings.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY environment variable is not set")

        logger.info(
            "llm_created",
            model=settings.openai_model,
            temperature=settings.openai_temperature,
        )
        llm = ChatOpenAI(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            temperature=settings.openai_temperature,
            max_tokens=settings.openai_max_tokens,
        )
        return llm.bind(response_format={"type": "json_object"})
