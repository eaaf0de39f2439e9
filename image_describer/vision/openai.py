"""OpenAIVisionClient — OpenAI GPT-4o vision backend."""
from typing import Optional

import httpx
from openai import AsyncOpenAI

from image_describer.config import Config
from image_describer.constants import (
    MSG_OPENAI_EMPTY,
    MSG_OPENAI_FAILED,
    MSG_OPENAI_NOT_CONFIGURED,
    OPENAI_VISION_MODEL,
)
from image_describer.errors import ConfigurationError, DescriptionError
from image_describer.images import is_url, load_image
from image_describer.vision.client import DescribeOptions, VisionClient


async def image_url_for(identifier: str, http_client: httpx.AsyncClient | None = None) -> str:
    """URLs pass through untouched; local files become a base64 data URL."""
    match is_url(identifier):
        case True:
            return identifier
        case False:
            return (await load_image(identifier, http_client)).data_url


class OpenAIVisionClient(VisionClient):

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[Config] = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        config = config or Config.from_env()
        super().__init__(max_batch_size=config.max_batch_size, concurrency=config.batch_concurrency)
        key = api_key or config.openai_api_key
        match key:
            case None | "":
                raise ConfigurationError(MSG_OPENAI_NOT_CONFIGURED)
            case _:
                pass
        self._client = AsyncOpenAI(api_key=key)
        self._http_client = http_client

    async def describe(self, identifier: str, options: DescribeOptions | None = None) -> str:
        opts = options or DescribeOptions()
        try:
            image_url = await image_url_for(identifier, self._http_client)
            response = await self._client.chat.completions.create(
                model=opts.model or OPENAI_VISION_MODEL,
                max_tokens=opts.max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": opts.prompt},
                            {"type": "image_url", "image_url": {"url": image_url}},
                        ],
                    }
                ],
            )
            content = response.choices[0].message.content if response.choices else None
            match (content or "").strip():
                case "":
                    raise DescriptionError(MSG_OPENAI_EMPTY)
                case text:
                    return text
        except Exception as exc:
            raise DescriptionError(MSG_OPENAI_FAILED % exc) from exc
