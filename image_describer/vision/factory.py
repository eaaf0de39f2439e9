"""Pick a VisionClient by provider name, or by whichever credentials are configured."""
import logging
from typing import Optional

from image_describer.config import Config
from image_describer.constants import (
    MSG_NO_PROVIDER,
    MSG_UNKNOWN_PROVIDER,
    MSG_USING_PROVIDER,
    PROVIDER_AZURE,
    PROVIDER_CLAUDE,
    PROVIDER_OPENAI,
    PROVIDERS,
)
from image_describer.errors import ConfigurationError
from image_describer.vision.azure_openai import AzureOpenAIVisionClient
from image_describer.vision.claude import ClaudeVisionClient
from image_describer.vision.client import VisionClient
from image_describer.vision.openai import OpenAIVisionClient

logger = logging.getLogger(__name__)

_CLIENTS: dict[str, type[VisionClient]] = {
    PROVIDER_OPENAI: OpenAIVisionClient,
    PROVIDER_AZURE: AzureOpenAIVisionClient,
    PROVIDER_CLAUDE: ClaudeVisionClient,
}


def detect_provider(config: Config) -> str:
    """Claude first, then OpenAI, then Azure — mirrors the order keys are usually set up."""
    match (config.anthropic_api_key, config.openai_api_key, config.azure_openai_api_key):
        case (str() as k, _, _) if k:
            return PROVIDER_CLAUDE
        case (_, str() as k, _) if k:
            return PROVIDER_OPENAI
        case (_, _, str() as k) if k:
            return PROVIDER_AZURE
        case _:
            raise ConfigurationError(MSG_NO_PROVIDER)


def create_vision_client(provider: Optional[str], config: Config) -> VisionClient:
    name = (provider or detect_provider(config)).lower()
    logger.info(MSG_USING_PROVIDER, name)
    match _CLIENTS.get(name):
        case None:
            raise ConfigurationError(MSG_UNKNOWN_PROVIDER % (name, ", ".join(PROVIDERS)))
        case client_cls:
            return client_cls(config=config)
