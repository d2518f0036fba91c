from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from loguru import logger

from tagged_context.application.chain import get_error_chain
from tagged_context.application.crawl import DEFAULT_URLS, Crawler
from tagged_context.application.formatting import format_error_with_context
from tagged_context.config import Settings
from tagged_context.errors import TaggedErrorWithContext, tagged_error

app = typer.Typer(
    name="tagged-context",
    help="Build, inspect and render tagged error chains",
)


@contextmanager
def configured_logging(settings: Settings) -> Iterator[None]:
    logger.remove()
    sink_id = logger.add(sys.stderr, level=settings.log_level)
    logger.enable("tagged_context")
    try:
        yield
    finally:
        logger.remove(sink_id)
        logger.disable("tagged_context")


def load_settings() -> Settings:
    try:
        return Settings()
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(2) from exc


@app.command("demo", help="Run the crawl pipeline and report its failure chain")
def demo(
    urls: list[str] | None = typer.Argument(None, help="Pages to crawl"),
    native: bool = typer.Option(
        False, "--native", help="Fail with a plain ValueError instead of APIError"
    ),
    show_chain: bool = typer.Option(
        False, "--chain", help="Also print one tag per line to stdout"
    ),
    no_traceback: bool = typer.Option(
        False, "--no-traceback", help="Omit stack traces of untagged errors"
    ),
) -> None:
    settings = load_settings()
    with configured_logging(settings):
        crawler = Crawler(native=native, foreign_message=settings.foreign_message)
        result = crawler.crawl(urls or list(DEFAULT_URLS))
        if result.is_ok:
            typer.echo(result.value)
            return
        error = result.error
        logger.info("Crawl failed with {}", type(error).__name__)
        typer.echo(
            format_error_with_context(
                error,
                include_traceback=settings.include_traceback and not no_traceback,
            ),
            err=True,
        )
        if show_chain:
            for node in get_error_chain(error):
                typer.echo(node.tag)
        typer.echo("Crawl failed")


@app.command("render", help="Render a chain given on the command line")
def render(
    message: str = typer.Argument(..., help="Message of the outermost error"),
    tag: str = typer.Option("Error", "--tag", "-t", help="Tag of the outermost error"),
    context: str | None = typer.Option(None, "--context", help="Extra context"),
    cause_tags: list[str] = typer.Option(
        [], "--cause-tag", help="Tags of the causes, outermost first"
    ),
    cause_messages: list[str] = typer.Option(
        [], "--cause-message", help="Messages of the causes, outermost first"
    ),
) -> None:
    if len(cause_tags) != len(cause_messages):
        typer.echo("Each --cause-tag needs a matching --cause-message", err=True)
        raise typer.Exit(2)

    cause: TaggedErrorWithContext | None = None
    for cause_tag, cause_message in reversed(list(zip(cause_tags, cause_messages))):
        cause = tagged_error(cause_tag)(cause_message, cause=cause)
    error = tagged_error(tag)(message, context=context, cause=cause)
    typer.echo(format_error_with_context(error))


@app.callback()
def root() -> None:
    """Root command for tagged-context."""


def main() -> None:  # pragma: no cover - CLI entry point
    """Entrypoint for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
