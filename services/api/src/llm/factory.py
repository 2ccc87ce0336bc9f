"""LLM factory for creating the chat model from service settings.

Supports OpenAI directly or any model reachable through OpenRouter. The model
identifier, output token budget and timeout are fixed at startup.
"""

from langchain_openai import ChatOpenAI
import structlog

from ..config import Settings

logger = structlog.get_logger()

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_APP_NAME = "Site Builder"


class LLMFactory:
    """Factory for creating LLM instances based on provider configuration.

    Supports:
    - OpenAI (default): Direct connection to OpenAI API
    - OpenRouter: Access to models from various providers
    """

    @staticmethod
    def create_llm(settings: Settings) -> ChatOpenAI:
        """Create the chat model used for page generation.

        Args:
            settings: Service settings (provider, model, key, budget, timeout)

        Returns:
            Configured ChatOpenAI instance

        Raises:
            ValueError: If unknown provider is specified
            KeyError: If the selected provider's API key is not set
        """
        provider = settings.llm_provider

        logger.info(
            "creating_llm",
            provider=provider,
            model=settings.llm_model,
            max_tokens=settings.llm_max_output_tokens,
        )

        if provider == "openrouter":
            return LLMFactory._create_openrouter_llm(settings)
        elif provider == "openai":
            return LLMFactory._create_openai_llm(settings)
        else:
            raise ValueError(
                f"Unknown LLM provider: {provider}. Supported providers: openai, openrouter"
            )

    @staticmethod
    def _create_openrouter_llm(settings: Settings) -> ChatOpenAI:
        if not settings.llm_api_key:
            raise KeyError(
                "OPEN_ROUTER_KEY environment variable not set. Please set it to use OpenRouter."
            )

        return ChatOpenAI(
            base_url=OPENROUTER_BASE_URL,
            api_key=settings.llm_api_key,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_output_tokens,
            timeout=settings.llm_timeout_seconds,
            max_retries=0,
            default_headers={"X-Title": OPENROUTER_APP_NAME},
        )

    @staticmethod
    def _create_openai_llm(settings: Settings) -> ChatOpenAI:
        if not settings.llm_api_key:
            raise KeyError(
                "OPENAI_API_KEY environment variable not set. "
                "Please set it to use direct OpenAI connection."
            )

        return ChatOpenAI(
            api_key=settings.llm_api_key,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_output_tokens,
            timeout=settings.llm_timeout_seconds,
            max_retries=0,
        )
