"""Bounded-concurrency batch executor — one result per input, in input order."""
import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple, Optional

from image_describer.constants import (
    DEFAULT_CONCURRENCY,
    MAX_BATCH_SIZE,
    MSG_BAD_CONCURRENCY,
    MSG_BATCH_DONE,
    MSG_BATCH_START,
    MSG_BATCH_TOO_LARGE,
    MSG_ITEM_FAILED,
    MSG_ITEM_START,
)
from image_describer.errors import BatchSizeError

logger = logging.getLogger(__name__)

# Single-item work: identifier in, description out. May raise.
Operation = Callable[[str], Awaitable[str]]


@dataclass(frozen=True)
class BatchResult:
    identifier: str
    success: bool
    description: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, identifier: str, description: str) -> "BatchResult":
        return cls(identifier=identifier, success=True, description=description)

    @classmethod
    def failed(cls, identifier: str, error: str) -> "BatchResult":
        return cls(identifier=identifier, success=False, error=error)


class BatchSummary(NamedTuple):
    total: int
    succeeded: int
    failed: int


def validate_batch_size(items: Sequence[str], cap: int = MAX_BATCH_SIZE) -> None:
    """Raise BatchSizeError when more than ``cap`` items are requested."""
    match len(items):
        case n if n > cap:
            raise BatchSizeError(MSG_BATCH_TOO_LARGE % cap)
        case _:
            pass


def summarize(results: Sequence[BatchResult]) -> BatchSummary:
    succeeded = sum(1 for r in results if r.success)
    return BatchSummary(total=len(results), succeeded=succeeded, failed=len(results) - succeeded)


def _check_concurrency(concurrency: int) -> None:
    match concurrency:
        case bool():
            raise ValueError(MSG_BAD_CONCURRENCY % (concurrency,))
        case int() as n if n > 0:
            pass
        case _:
            raise ValueError(MSG_BAD_CONCURRENCY % (concurrency,))


def _error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


async def _run_one(
    identifier: str, operation: Operation, semaphore: asyncio.Semaphore
) -> BatchResult:
    async with semaphore:
        logger.debug(MSG_ITEM_START, identifier)
        try:
            description = await operation(identifier)
        except Exception as exc:
            logger.debug(MSG_ITEM_FAILED, identifier, exc)
            return BatchResult.failed(identifier, _error_message(exc))
    return BatchResult.ok(identifier, description)


async def run_batch(
    items: Sequence[str],
    operation: Operation,
    concurrency: int = DEFAULT_CONCURRENCY,
    cap: int | None = None,
) -> list[BatchResult]:
    """Run ``operation`` over ``items`` with at most ``concurrency`` calls in flight.

    Every item gets exactly one call. Failures are captured into that item's
    BatchResult instead of propagating, so the returned list always has one
    entry per input, in input order. Each call waits on a semaphore permit, so
    a freed slot goes straight to the next unstarted item rather than waiting
    for a whole chunk to finish.

    When ``cap`` is given the batch is rejected with BatchSizeError before
    anything starts.
    """
    _check_concurrency(concurrency)
    if cap is not None:
        validate_batch_size(items, cap)
    if not items:
        return []

    logger.info(MSG_BATCH_START, len(items), concurrency)
    semaphore = asyncio.Semaphore(concurrency)
    results = await asyncio.gather(
        *(_run_one(identifier, operation, semaphore) for identifier in items)
    )

    summary = summarize(results)
    logger.info(MSG_BATCH_DONE, summary.succeeded, summary.total)
    return list(results)
