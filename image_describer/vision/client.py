"""VisionClient — abstract base for image description backends."""
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from image_describer.batch import BatchResult, run_batch
from image_describer.constants import (
    DEFAULT_CONCURRENCY,
    DEFAULT_MAX_TOKENS,
    DEFAULT_PROMPT,
    MAX_BATCH_SIZE,
)


@dataclass(frozen=True)
class DescribeOptions:
    prompt: str = DEFAULT_PROMPT
    max_tokens: int = DEFAULT_MAX_TOKENS
    model: Optional[str] = None
    system_prompt: Optional[str] = None
    concurrency: Optional[int] = None


class VisionClient(ABC):

    def __init__(
        self,
        max_batch_size: int = MAX_BATCH_SIZE,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> None:
        self.max_batch_size = max_batch_size
        self.concurrency = concurrency

    @abstractmethod
    async def describe(self, identifier: str, options: DescribeOptions | None = None) -> str:
        """Describe one image given its URL or path. Raises DescriptionError on failure."""
        ...

    async def describe_batch(
        self,
        identifiers: Sequence[str],
        options: DescribeOptions | None = None,
    ) -> list[BatchResult]:
        """Describe many images; per-image failures come back as unsuccessful results.

        Raises BatchSizeError, before any request is made, when more than
        ``max_batch_size`` identifiers are passed.
        """
        opts = options or DescribeOptions()

        async def _describe(identifier: str) -> str:
            return await self.describe(identifier, opts)

        return await run_batch(
            identifiers,
            _describe,
            concurrency=self.concurrency if opts.concurrency is None else opts.concurrency,
            cap=self.max_batch_size,
        )
