"""Typer-based command line interface for template rendering.

The command compiles the template once, renders it ``-n`` times and writes
each successful line to stdout.  A failed render is logged to stderr and the
remaining iterations still run.

Exit codes
----------
0 success
1 at least one render failed
2 usage error (missing or empty ``-t``, bad option types)
3 the template failed to compile
4 configuration error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .generate import RandomSources, default_sources
from .template import compile_template
from .utils.errors import ConfigError, MalformedTokenError, RenderError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="moldova",
    help="Render random data from a template such as 'id={guid} age={int:min:1|max:99}'.",
    add_completion=False,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, ConfigError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _sources(seed: str | None) -> RandomSources:
    if seed is None:
        return default_sources()
    return RandomSources.from_seed(seed)


@app.command()
def generate(  # noqa: PLR0913
    template: str = typer.Option(  # noqa: B008
        ..., "-t", "--template", help="The template to generate results from"
    ),
    iterations: Optional[int] = typer.Option(  # noqa: B008
        None,
        "-n",
        "--iterations",
        help="The number of lines to generate. Values below 1 are raised to 1",
    ),
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed the non-cryptographic random source"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Render TEMPLATE once per iteration, one line per render."""

    configure_logging(verbose)
    if not template:
        _safe_exit(2, "You must provide a template using the -t option")
    cfg = _load(config_path)

    count = iterations if iterations is not None else cfg.iterations
    if count <= 0:
        count = 1

    try:
        program = compile_template(template, defaults=cfg.commands)
    except MalformedTokenError as exc:
        _safe_exit(3, str(exc))
    logger.debug("Compiled %d steps; rendering %d lines", len(program), count)

    sources = _sources(seed if seed is not None else cfg.seed)
    failures = 0
    for i, result in enumerate(program.render_many(count, sources=sources), start=1):
        if isinstance(result, RenderError):
            failures += 1
            logger.warning("Iteration %d failed: %s", i, result)
            continue
        typer.echo(result)

    if failures:
        logger.debug("%d of %d renders failed", failures, count)
        raise typer.Exit(1)


def main() -> None:  # pragma: no cover - console script shim
    app()


__all__ = ["app", "generate", "main"]
