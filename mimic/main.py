"""
mimic: CLI entrypoint for generation scripts.

A generation script parses its own command line through ``new()``:

    python gen.py generate --output-dir gen
    python gen.py generate -o out --log-level debug --prune

or lets ``run()`` handle parsing, the write pass and error reporting:

    def build(gen): ...
    mimic.run(build)
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import click

from mimic import __version__
from mimic.core.config.loader import load_config
from mimic.core.errors import ConfigError, MimicError
from mimic.core.generator import Generator
from mimic.core.observability.logging_config import setup_logging

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Set as ctx.obj by new(); generate() refuses to run without it.
_SCRIPT = "generation-script"


@click.group()
@click.version_option(version=__version__, prog_name="mimic")
def cli() -> None:
    """mimic: generate infrastructure configuration from Python."""


@cli.command()
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory for generated files (default: gen).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to mimic.yml (default: auto-detect).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    default=None,
    help="Console log level (default: WARNING, or MIMIC_LOG_LEVEL).",
)
@click.option("--log-file", default=None, help="Also log to this file.")
@click.option(
    "--prune/--no-prune",
    default=None,
    help="Remove files in the output directory that were not generated.",
)
@click.option(
    "--comment",
    "comments",
    multiple=True,
    help="Extra top-level comment for every file (repeatable).",
)
def generate(
    output_dir: Path | None,
    config_path: Path | None,
    log_level: str | None,
    log_file: str | None,
    prune: bool | None,
    comments: tuple[str, ...],
) -> Generator:
    """Generate output files from everything added to the generator."""
    if click.get_current_context().obj != _SCRIPT:
        raise click.UsageError(
            "generate builds nothing on its own; run a generation script "
            "that calls mimic.run() (e.g. python gen.py generate)"
        )

    try:
        config = load_config(
            config_path,
            overrides={
                "output_dir": output_dir,
                "log_level": log_level,
                "log_file": log_file,
                "prune": prune,
                "top_level_comments": list(comments) or None,
            },
        )
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logger = setup_logging(level=config.log_level, log_file=config.log_file)
    logger.debug("Generating into %s", config.output_dir)

    return Generator(
        config.output_dir,
        logger=logger,
        prune=config.prune,
        top_level_comments=config.top_level_comments,
    )


def new(argv: Sequence[str] | None = None) -> Generator:
    """Parse the command line and return a ready Generator.

    ``--help`` and ``--version`` print and exit 0. Usage errors print
    click's message and exit with its code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        result = cli.main(args=args, standalone_mode=False, obj=_SCRIPT)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    if not isinstance(result, Generator):
        sys.exit(result if isinstance(result, int) else 0)
    return result


def run(build: Callable[[Generator], object], argv: Sequence[str] | None = None) -> list[Path]:
    """Parse argv, call ``build(gen)`` and write the result.

    Any generator error aborts the process with exit code 1 and a
    message naming the offending path. Nothing is written if ``build``
    raised.
    """
    gen = new(argv)
    try:
        with gen:
            build(gen)
    except MimicError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
    return [gen.output_dir / p for p in gen.pool.paths()]


if __name__ == "__main__":
    cli()
