from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from image_describer.constants import (
    AZURE_OPENAI_API_VERSION,
    DEFAULT_CONCURRENCY,
    MAX_BATCH_SIZE,
)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    log_level: str
    openai_api_key: Optional[str]
    anthropic_api_key: Optional[str]
    azure_openai_api_key: Optional[str]
    azure_openai_endpoint: Optional[str]
    azure_openai_deployment: Optional[str]
    azure_openai_api_version: str = AZURE_OPENAI_API_VERSION
    batch_concurrency: int = DEFAULT_CONCURRENCY
    max_batch_size: int = MAX_BATCH_SIZE

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        log_level = os.getenv("LOG_LEVEL", "INFO")
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        azure_api_key = os.getenv("AZURE_OPENAI_API_KEY") or None
        azure_endpoint = os.getenv("AZURE_OPENAI_ENDPOINT") or None
        azure_deployment = os.getenv("AZURE_OPENAI_DEPLOYMENT") or None
        azure_api_version = os.getenv("AZURE_OPENAI_API_VERSION") or AZURE_OPENAI_API_VERSION
        concurrency = os.getenv("BATCH_CONCURRENCY") or str(DEFAULT_CONCURRENCY)
        max_batch_size = os.getenv("MAX_BATCH_SIZE") or str(MAX_BATCH_SIZE)

        return cls._validate(
            log_level=log_level,
            openai_api_key=openai_api_key,
            anthropic_api_key=anthropic_api_key,
            azure_openai_api_key=azure_api_key,
            azure_openai_endpoint=azure_endpoint,
            azure_openai_deployment=azure_deployment,
            azure_openai_api_version=azure_api_version,
            batch_concurrency=_parse_int("BATCH_CONCURRENCY", concurrency),
            max_batch_size=_parse_int("MAX_BATCH_SIZE", max_batch_size),
        )

    @staticmethod
    def _validate(
        log_level: str,
        openai_api_key: Optional[str],
        anthropic_api_key: Optional[str],
        azure_openai_api_key: Optional[str],
        azure_openai_endpoint: Optional[str],
        azure_openai_deployment: Optional[str],
        azure_openai_api_version: str,
        batch_concurrency: int,
        max_batch_size: int,
    ) -> "Config":
        match batch_concurrency:
            case n if n < 1:
                raise ValueError("BATCH_CONCURRENCY must be a positive integer")
            case _:
                pass

        match max_batch_size:
            case n if n < 1:
                raise ValueError("MAX_BATCH_SIZE must be a positive integer")
            case _:
                pass

        return Config(
            log_level=log_level,
            openai_api_key=openai_api_key,
            anthropic_api_key=anthropic_api_key,
            azure_openai_api_key=azure_openai_api_key,
            azure_openai_endpoint=azure_openai_endpoint,
            azure_openai_deployment=azure_openai_deployment,
            azure_openai_api_version=azure_openai_api_version,
            batch_concurrency=batch_concurrency,
            max_batch_size=max_batch_size,
        )
