from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from article_summarizer.config import settings
from article_summarizer.io import dump_articles, load_articles
from article_summarizer.logging_utils import setup_logging
from article_summarizer.progress import NullProgressReporter, RichProgressReporter
from article_summarizer.sanitize import NO_SUMMARY
from article_summarizer.summarize import build_summarizer

__version__ = "0.1.0"

app = typer.Typer(add_completion=False, help="Structured article summarizer CLI")


@app.command()
def health() -> None:
    """Health check to verify config + logging works."""
    setup_logging(settings.log_level)
    log = logging.getLogger("article_summarizer.health")

    log.info("Health check OK.")
    log.info("Model: %s", settings.summarizer_model)
    log.info("Base URL: %s", settings.openai_base_url or "(OpenAI default)")
    log.info("Max content length: %d", settings.max_content_length)
    log.info("Max summary length: %d", settings.max_summary_length)
    log.info("Context window: %d", settings.num_ctx)

    typer.echo("OK")


@app.command()
def version() -> None:
    """Print version and exit."""
    typer.echo(f"article-summarizer {__version__}")


@app.command()
def summarize(
    in_file: Path = typer.Option(..., "--in", help="Input JSONL with one article per line (title, content)"),
    out_file: Path = typer.Option(..., "--out", help="Output JSONL with summary and modelName added"),
    limit: Optional[int] = typer.Option(None, help="Only summarize the first N articles"),
    show_progress: bool = typer.Option(True, "--progress/--no-progress", help="Show a progress bar"),
) -> None:
    """
    Summarize articles from a JSONL file, one at a time.
    """
    setup_logging(settings.log_level)

    if not in_file.exists():
        typer.secho(f"Input file not found: {in_file}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    articles = load_articles(in_file)
    if limit is not None:
        articles = articles[:limit]

    summarizer = build_summarizer(settings)
    progress = RichProgressReporter() if show_progress else NullProgressReporter()
    summarizer.summarize_articles(articles, progress=progress)

    written = dump_articles(out_file, articles)
    fallback = sum(1 for a in articles if a.summary == NO_SUMMARY)

    typer.echo(
        {
            "total": written,
            "summarized": written - fallback,
            "fallback": fallback,
            "model": summarizer.model_name,
            "out_file": str(out_file),
        }
    )
