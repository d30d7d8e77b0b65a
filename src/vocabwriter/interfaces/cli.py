"""Command-line interface for the vocabulary writer."""

from __future__ import annotations

import io
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from vocabwriter import __version__
from vocabwriter.application.services.vocabulary_generator import VocabularyGenerator
from vocabwriter.config.writer_config import load_writer_config
from vocabwriter.domain.exceptions import ConfigurationError, InputError
from vocabwriter.infrastructure.statement_source import StatementSource, feed

logger = logging.getLogger(__name__)

# --- Typer App ---
app = typer.Typer(
    help="Generate RDF vocabulary class definitions from vocabulary documents.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.command()
def generate(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Vocabulary document to read"),
    base_uri: Optional[str] = typer.Option(None, "--base-uri", help="URI of the vocabulary"),
    class_name: Optional[str] = typer.Option(None, "--class-name", help="Name of the generated class"),
    module_name: Optional[str] = typer.Option(None, "--module-name", help="Module containing the class"),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help="Make a strict vocabulary"),
    extra: Optional[str] = typer.Option(None, "--extra", help="URI-encoded JSON of extra term data"),
    location: Optional[str] = typer.Option(None, "--location", help="Source label for the generated header"),
    input_format: Optional[str] = typer.Option(None, "--input-format", help="RDF format of the input document"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="File to write (default: stdout)"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with writer options"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each classified term"),
):
    """Write the vocabulary class described by INPUT_PATH."""
    load_dotenv()
    _configure_logging(verbose)

    try:
        writer_config = load_writer_config(
            config_path=config,
            environ=os.environ,
            base_uri=base_uri,
            class_name=class_name,
            module_name=module_name,
            strict=strict,
            extra=extra,
            location=location,
        )
        source = StatementSource(input_path, input_format=input_format)
        source.load()
        # A failed run must leave an existing output file untouched.
        buffer = io.StringIO()
        generator = VocabularyGenerator(buffer, writer_config)
        feed(source, generator)
        report = generator.write_epilogue()
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)
    except InputError as e:
        typer.echo(f"Input error: {e}", err=True)
        raise typer.Exit(code=1)

    if output:
        output.write_text(buffer.getvalue(), encoding="utf-8")
    else:
        sys.stdout.write(buffer.getvalue())

    if report.overwrites:
        typer.echo(f"Warning: {report.overwrites} term definitions were replaced", err=True)
    if output:
        typer.echo(f"Wrote {report.total_terms} terms to {output}", err=True)


@app.command()
def version():
    """Print the vocabwriter version."""
    typer.echo(__version__)


def main():
    app()


if __name__ == "__main__":
    main()
