"""Entry point to the application as a Typer CLI."""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from typer import Typer

from textorigin.configuration import config

app = Typer(no_args_is_help=True)


@app.callback()
def configure_logging() -> None:
    """Detect AI-written texts with interpretable linguistic heuristics."""
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)


@app.command("api")
def run_api() -> None:
    """Start up the backend sharing the Web API."""
    import uvicorn

    from textorigin.api.app import create_app

    uvicorn.run(create_app(), host=config.api_host, port=config.api_port)


@app.command("analyse")
def analyse(
    text: Annotated[str | None, typer.Argument(help="Text to be analysed.")] = None,
    file: Annotated[
        Path | None,
        typer.Option(help="PDF, DOCX or plain text document to be analysed."),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON.")
    ] = False,
) -> None:
    """Estimate whether a text or a document was written by AI."""
    from textorigin.analysis import Analyser
    from textorigin.extraction.document_reader import (
        DocumentExtractionError,
        extract_text_from_path,
    )

    if file is not None:
        try:
            text = extract_text_from_path(file)
        except DocumentExtractionError as e:
            logger.error(str(e))
            raise typer.Exit(code=1) from e

    if text is None or not text.strip():
        logger.error("Provide a non-empty text or a document with --file.")
        raise typer.Exit(code=1)

    result = Analyser().run(text)
    if as_json:
        typer.echo(result.model_dump_json(by_alias=True, indent=2))
        return

    typer.echo(f"{result.verdict_headline} ({result.ai_probability}% AI)")
    typer.echo(result.summary)
    analysis = result.linguistic_analysis
    typer.echo(
        f"\nPerplexity: {analysis.perplexity_score}  "
        f"Burstiness: {analysis.burstiness_score}  "
        f"Vocabulary richness: {analysis.vocabulary_richness}  "
        f"Sentence variety: {analysis.sentence_variety}"
    )
    typer.echo("\nFlags:")
    for flag in result.flags:
        typer.echo(f"  - {flag}")
    typer.echo("\nSuggestions:")
    for suggestion in result.suggestions:
        typer.echo(f"  - {suggestion}")


if __name__ == "__main__":
    app()
