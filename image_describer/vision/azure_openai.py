"""AzureOpenAIVisionClient — Azure-hosted OpenAI deployment backend."""
from typing import Optional

import httpx
from openai import AsyncAzureOpenAI

from image_describer.config import Config
from image_describer.constants import (
    DEFAULT_SYSTEM_PROMPT,
    MSG_AZURE_EMPTY,
    MSG_AZURE_FAILED,
    MSG_AZURE_NOT_CONFIGURED,
)
from image_describer.errors import ConfigurationError, DescriptionError
from image_describer.vision.client import DescribeOptions, VisionClient
from image_describer.vision.openai import image_url_for


def missing_azure_settings(
    api_key: Optional[str], endpoint: Optional[str], deployment: Optional[str]
) -> list[str]:
    settings = (("apiKey", api_key), ("endpoint", endpoint), ("deploymentName", deployment))
    return [name for name, value in settings if not value]


class AzureOpenAIVisionClient(VisionClient):

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        deployment: Optional[str] = None,
        api_version: Optional[str] = None,
        config: Optional[Config] = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        config = config or Config.from_env()
        super().__init__(max_batch_size=config.max_batch_size, concurrency=config.batch_concurrency)
        api_key = api_key or config.azure_openai_api_key
        endpoint = endpoint or config.azure_openai_endpoint
        deployment = deployment or config.azure_openai_deployment

        match missing_azure_settings(api_key, endpoint, deployment):
            case []:
                pass
            case missing:
                raise ConfigurationError(MSG_AZURE_NOT_CONFIGURED % ", ".join(missing))

        self._deployment = deployment
        self._client = AsyncAzureOpenAI(
            api_key=api_key,
            azure_endpoint=endpoint,
            azure_deployment=deployment,
            api_version=api_version or config.azure_openai_api_version,
        )
        self._http_client = http_client

    async def describe(self, identifier: str, options: DescribeOptions | None = None) -> str:
        opts = options or DescribeOptions()
        try:
            image_url = await image_url_for(identifier, self._http_client)
            completion = await self._client.chat.completions.create(
                model=opts.model or self._deployment,
                max_tokens=opts.max_tokens,
                messages=[
                    {"role": "system", "content": opts.system_prompt or DEFAULT_SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": opts.prompt},
                            {"type": "image_url", "image_url": {"url": image_url}},
                        ],
                    },
                ],
            )
            content = completion.choices[0].message.content if completion.choices else None
            match (content or "").strip():
                case "":
                    raise DescriptionError(MSG_AZURE_EMPTY)
                case text:
                    return text
        except Exception as exc:
            raise DescriptionError(MSG_AZURE_FAILED % exc) from exc
