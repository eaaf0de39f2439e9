"""Entry point — wires Config → VisionClient → batch description → results table."""
import asyncio
import logging
from collections.abc import Sequence
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from image_describer.batch import BatchResult, summarize
from image_describer.config import Config
from image_describer.constants import DEFAULT_MAX_TOKENS, DEFAULT_PROMPT, PROVIDERS
from image_describer.errors import BatchSizeError, ConfigurationError
from image_describer.vision.client import DescribeOptions
from image_describer.vision.factory import create_vision_client


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def render_results(results: Sequence[BatchResult]) -> Table:
    summary = summarize(results)
    table = Table(title=f"{summary.succeeded}/{summary.total} described")
    table.add_column("#", justify="right")
    table.add_column("Image", overflow="fold")
    table.add_column("Status")
    table.add_column("Description / error", overflow="fold")
    list(map(
        lambda pair: table.add_row(
            str(pair[0]),
            pair[1].identifier,
            "[green]ok[/green]" if pair[1].success else "[red]failed[/red]",
            pair[1].description if pair[1].success else pair[1].error,
        ),
        enumerate(results, start=1),
    ))
    return table


@click.command()
@click.argument("images", nargs=-1, required=True)
@click.option("--provider", type=click.Choice(PROVIDERS), default=None,
              help="Vision provider (default: first one with credentials set)")
@click.option("--prompt", default=DEFAULT_PROMPT, show_default=True, help="Question asked about each image")
@click.option("--max-tokens", default=DEFAULT_MAX_TOKENS, type=int, show_default=True,
              help="Output length limit per description")
@click.option("--model", default=None, help="Model override (ignored by Azure unless set)")
@click.option("--system-prompt", default=None, help="System prompt (Azure only)")
@click.option("--concurrency", default=None, type=click.IntRange(min=1),
              help="Requests in flight at once (default: BATCH_CONCURRENCY or 3)")
def main(
    images: tuple[str, ...],
    provider: Optional[str],
    prompt: str,
    max_tokens: int,
    model: Optional[str],
    system_prompt: Optional[str],
    concurrency: Optional[int],
) -> None:
    """Describe one or more images (URLs or file paths)."""
    config = Config.from_env()
    _setup_logging(config.log_level)

    options = DescribeOptions(
        prompt=prompt,
        max_tokens=max_tokens,
        model=model,
        system_prompt=system_prompt,
        concurrency=concurrency,
    )
    try:
        client = create_vision_client(provider, config)
        results = asyncio.run(client.describe_batch(list(images), options))
    except (ConfigurationError, BatchSizeError) as exc:
        raise click.ClickException(str(exc)) from exc

    Console().print(render_results(results))
    match summarize(results).failed:
        case 0:
            pass
        case _:
            raise SystemExit(1)


if __name__ == "__main__":
    main()
