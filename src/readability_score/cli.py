from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, TypeVar

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .engine import TextMetrics
from .errors import ReadabilityError, UnknownAlgorithmError
from .models import Document

logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(help="Readability score CLI.", no_args_is_help=True)

CHOICE_PROMPT = "Enter the score you want to calculate (ARI, FK, SMOG, CL, all)"


@app.command()
def score(
    input_path: Path = typer.Argument(..., help="Text file to score."),
    choice: str | None = typer.Option(
        None,
        "--choice",
        "-s",
        help="Score to calculate: ARI, FK, SMOG, CL or all. Prompts when omitted.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(
        False, "--json", help="Emit a JSON summary instead of the text report."
    ),
    echo_text: bool | None = typer.Option(
        None, "--echo/--no-echo", help="Override config echo_text flag."
    ),
    encoding: str | None = typer.Option(
        None, "--encoding", help="Override the encoding used to read the file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Print text statistics and the requested readability score(s)."""
    _configure_logging(verbose)
    cfg = load_config(config)
    _apply_overrides(cfg, as_json, echo_text, encoding)
    metrics = _load_metrics(input_path, cfg.encoding)

    if cfg.output_format == "json":
        # JSON output never prompts; without a choice every score is reported.
        selected = choice or cfg.default_choice or "all"
        payload = _run_engine(lambda: metrics.to_dict(selected))
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if cfg.echo_text:
        typer.echo("The text is:")
        typer.echo(metrics.text)
        typer.echo("")
    typer.echo(metrics.formatted_statistics())
    typer.echo("")

    selected = choice or cfg.default_choice
    if selected is None:
        selected = typer.prompt(CHOICE_PROMPT)
    lines = _run_engine(lambda: metrics.formatted_scores(selected))
    for line in lines:
        typer.echo(line)


@app.command()
def stats(
    input_path: Path = typer.Argument(..., help="Text file to analyze."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(False, "--json", help="Emit the counts as JSON."),
) -> None:
    """Print only the word, sentence, character and syllable counts."""
    cfg = load_config(config)
    metrics = _load_metrics(input_path, cfg.encoding)
    if as_json:
        typer.echo(json.dumps(metrics.statistics().to_dict(), indent=2))
        return
    typer.echo(metrics.formatted_statistics())


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: ReadabilityConfig,
    as_json: bool,
    echo_text: bool | None,
    encoding: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if as_json:
        config.output_format = "json"
    if echo_text is not None:
        config.echo_text = echo_text
    if encoding:
        config.encoding = encoding


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("readability_score")
    package_logger.setLevel(logging.DEBUG)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


def _load_metrics(path: Path, encoding: str) -> TextMetrics:
    """Read ``path`` and wrap it for scoring, mapping failures to CLI errors."""
    try:
        text = path.read_text(encoding=encoding)
    except (UnicodeDecodeError, OSError) as exc:
        # Missing files, directories, permissions and undecodable bytes.
        raise typer.BadParameter("Cannot read file", param_hint="'INPUT_PATH'") from exc
    except ValueError as exc:
        # Malformed paths, e.g. an embedded NUL byte.
        raise typer.BadParameter("Invalid path", param_hint="'INPUT_PATH'") from exc
    logger.info("Loaded %s (%d characters)", path, len(text))
    return _run_engine(lambda: TextMetrics(Document(text, doc_id=path.name)))


def _run_engine(operation: Callable[[], T]) -> T:
    """Run an engine call, turning engine errors into a clean exit."""
    try:
        return operation()
    except UnknownAlgorithmError as exc:
        logger.debug("Rejected score choice: %s", exc)
        typer.echo("Invalid algorithm choice")
        raise typer.Exit(code=1) from exc
    except ReadabilityError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    main()
