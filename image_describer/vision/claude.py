"""ClaudeVisionClient — Anthropic Claude vision backend."""
from typing import Optional

import httpx
from anthropic import AsyncAnthropic

from image_describer.config import Config
from image_describer.constants import (
    CLAUDE_MEDIA_TYPES,
    CLAUDE_VISION_MODEL,
    DEFAULT_CONTENT_TYPE,
    MSG_CLAUDE_EMPTY,
    MSG_CLAUDE_FAILED,
    MSG_CLAUDE_NOT_CONFIGURED,
)
from image_describer.errors import ConfigurationError, DescriptionError
from image_describer.images import load_image
from image_describer.vision.client import DescribeOptions, VisionClient


def claude_media_type(content_type: str) -> str:
    """Claude accepts only jpeg/png/gif/webp; anything else is sent as jpeg."""
    match content_type.lower():
        case "image/jpg":
            return "image/jpeg"
        case ct if ct in CLAUDE_MEDIA_TYPES:
            return ct
        case _:
            return DEFAULT_CONTENT_TYPE


class ClaudeVisionClient(VisionClient):

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[Config] = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        config = config or Config.from_env()
        super().__init__(max_batch_size=config.max_batch_size, concurrency=config.batch_concurrency)
        key = api_key or config.anthropic_api_key
        match key:
            case None | "":
                raise ConfigurationError(MSG_CLAUDE_NOT_CONFIGURED)
            case _:
                pass
        self._client = AsyncAnthropic(api_key=key)
        self._http_client = http_client

    async def describe(self, identifier: str, options: DescribeOptions | None = None) -> str:
        opts = options or DescribeOptions()
        try:
            image = await load_image(identifier, self._http_client)
            message = await self._client.messages.create(
                model=opts.model or CLAUDE_VISION_MODEL,
                max_tokens=opts.max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "image",
                                "source": {
                                    "type": "base64",
                                    "media_type": claude_media_type(image.content_type),
                                    "data": image.encoded_image,
                                },
                            },
                            {"type": "text", "text": opts.prompt},
                        ],
                    }
                ],
            )
            match message.content:
                case [first, *_] if (getattr(first, "text", None) or "").strip():
                    return first.text.strip()
                case _:
                    raise DescriptionError(MSG_CLAUDE_EMPTY)
        except Exception as exc:
            raise DescriptionError(MSG_CLAUDE_FAILED % exc) from exc
