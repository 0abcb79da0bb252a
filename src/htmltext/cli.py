"""Typer-based command line interface for HTML text extraction.

Commands
--------
``text``     extract normalized plain text
``title``    print the document title
``meta``     dump ``<meta>`` name/content pairs as JSON
``chapter``  dump a chapter record (order, title, text, metadata) as JSON

Exit codes
----------
0 success
1 no title found (``title`` only)
3 I/O error (missing reader/writer, filesystem issues)
4 configuration error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .extract import extract_chapter, extract_metadata, extract_text, extract_title
from .io import read_file, write_file
from .io.writers.json_writer import dumps
from .options import ExtractionOptions, get_preset
from .utils.errors import UnsupportedFormatError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger("cli")

app = typer.Typer(
    name="htmltext",
    help="Extract plain text, titles and metadata from HTML. Try 'htmltext text --in FILE'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _resolve_options(
    cfg: ConfigModel,
    *,
    preset: str | None,
    max_length: int | None,
) -> ExtractionOptions:
    """Return extraction options from ``cfg`` with CLI overrides applied."""

    try:
        if preset is not None:
            get_preset(preset)
            cfg = cfg.model_copy(update={"preset": preset.lower()})
        options = cfg.resolve_options()
        if max_length is not None:
            options = options.model_copy(update={"max_text_length": max_length})
    except KeyError as exc:
        _safe_exit(4, str(exc.args[0]))
    return options


def _read(in_path: Path, cfg: ConfigModel) -> str:
    try:
        return read_file(in_path, encoding=cfg.io.encoding_in)
    except (FileNotFoundError, UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))


def _emit(out_path: Path | None, payload: Any, cfg: ConfigModel) -> None:
    """Write ``payload`` to ``out_path`` or echo it to stdout."""

    data = payload if isinstance(payload, str) else dumps(payload)
    if out_path is None:
        typer.echo(data, nl=False)
        return
    try:
        write_file(out_path, data, encoding=cfg.io.encoding_out)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))


@app.callback()
def main(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages and debug logs to stderr"
    ),
) -> None:
    """Entry point for the htmltext command group."""

    configure_logging(verbose)


@app.command()
def text(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input file (.html, .htm, .xhtml or .txt)"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file (.txt); stdout when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    preset: Optional[str] = typer.Option(  # noqa: B008
        None, "--preset", help="Options preset [default|minimal]"
    ),
    max_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-length", min=1, help="Truncate the extracted text"
    ),
) -> None:
    """Extract normalized plain text from ``in_path``."""

    cfg = _load(config_path)
    options = _resolve_options(cfg, preset=preset, max_length=max_length)
    markup = _read(in_path, cfg)
    logger.debug("read %d chars from %s", len(markup), in_path)

    with Timing() as t_extract:
        result = extract_text(markup, options)
    logger.debug("extracted %d chars in %.1f ms", len(result), t_extract.ms)

    _emit(out_path, result if out_path is not None else result + "\n", cfg)


@app.command()
def title(
    in_path: Path = typer.Option(..., "--in", "--input", help="Input file"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print the title of ``in_path``; exit 1 when there is none."""

    cfg = _load(config_path)
    found = extract_title(_read(in_path, cfg))
    if found is None:
        _safe_exit(1, "No title found")
    typer.echo(found)


@app.command()
def meta(
    in_path: Path = typer.Option(..., "--in", "--input", help="Input file"),  # noqa: B008
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file (.json); stdout when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Dump ``<meta>`` name/content pairs of ``in_path`` as JSON."""

    cfg = _load(config_path)
    metadata = extract_metadata(_read(in_path, cfg))
    logger.debug("found %d meta entries", len(metadata))
    _emit(out_path, metadata, cfg)


@app.command()
def chapter(
    in_path: Path = typer.Option(..., "--in", "--input", help="Input file"),  # noqa: B008
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file (.json); stdout when omitted"
    ),
    order: int = typer.Option(0, "--order", min=0, help="Zero-based chapter position"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    preset: Optional[str] = typer.Option(  # noqa: B008
        None, "--preset", help="Options preset [default|minimal]"
    ),
) -> None:
    """Dump the chapter record of ``in_path`` as JSON."""

    cfg = _load(config_path)
    options = _resolve_options(cfg, preset=preset, max_length=None)
    record = extract_chapter(_read(in_path, cfg), order=order, options=options)
    _emit(
        out_path,
        {
            "order": record.order,
            "title": record.title,
            "text": record.text,
            "metadata": record.metadata,
        },
        cfg,
    )
