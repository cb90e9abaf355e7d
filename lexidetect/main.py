"""Entry point to the application as a Typer CLI."""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from typer import Typer

from lexidetect.api.data_models import AnalysisResponse
from lexidetect.configuration import config
from lexidetect.data_models import DetectionResult
from lexidetect.highlighting import segment_text
from lexidetect.validation import TextValidationError, validate_text

app = Typer(no_args_is_help=True)

HIGH_CONFIDENCE = 85.0


@app.callback()
def configure_logging(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log values of all signals.")
    ] = False,
) -> None:
    """Detect LLM-written text with explainable statistics and fingerprints."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else config.log_level)


def _read_text(text: str | None, file: Path | None) -> str:
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is not None:
        return text
    return sys.stdin.read()


def _print_summary(result: DetectionResult, word_count: int) -> None:
    typer.echo(f"{result.get_label()} ({result.ai_confidence}% AI confidence)")
    typer.echo(f"  Words:       {word_count}")
    typer.echo(f"  Perplexity:  {result.perplexity_score}")
    typer.echo(f"  Burstiness:  {result.burstiness_score}")
    typer.echo(f"  Diversity:   {result.diversity_score}")
    if result.likely_model is not None:
        typer.echo(
            f"  Model:       {result.likely_model.value} "
            f"({result.model_confidence}% confidence)"
        )
    for remark in result.get_remarks():
        typer.echo(f"  Remark:      {remark}")

    if result.critical_sections:
        typer.echo("\nCritical sections:")
    for section in result.critical_sections:
        typer.echo(
            f"  [{section.start}:{section.end}] {section.confidence}% {section.reason}"
        )


def _print_highlighted(text: str, result: DetectionResult) -> None:
    typer.echo()
    for segment in segment_text(text, result.critical_sections):
        if segment.section is None:
            typer.echo(segment.text, nl=False)
            continue
        colour = "red" if segment.section.confidence >= HIGH_CONFIDENCE else "yellow"
        typer.echo(typer.style(segment.text, fg=colour, bold=True), nl=False)
    typer.echo()


@app.command("analyse")
def analyse(
    text: Annotated[
        str | None, typer.Argument(help="Text to analyse. Read from stdin if missing.")
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", exists=True, dir_okay=False, help="Text file."),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON.")
    ] = False,
    highlight: Annotated[
        bool, typer.Option("--highlight", help="Print the text with critical sections.")
    ] = False,
) -> None:
    """Analyse a text and report how likely it was written by a language model."""
    from lexidetect.detection.detector import MathematicalDetector

    content = _read_text(text, file)
    try:
        word_count = validate_text(content)
    except TextValidationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    result = MathematicalDetector().analyze(content)
    if as_json:
        response = AnalysisResponse.from_result(result, word_count=word_count)
        typer.echo(response.model_dump_json(by_alias=True, indent=2))
        return

    _print_summary(result, word_count)
    if highlight:
        _print_highlighted(content, result)


@app.command("api")
def run_api() -> None:
    """Start up the backend sharing the Web API."""
    import uvicorn

    from lexidetect.api.router import create_app

    uvicorn.run(create_app(), host=config.api_host, port=config.api_port)


if __name__ == "__main__":
    app()
