"""
yeoman — CLI entrypoint.

Usage:
    yeoman --help
    yeoman list
    yeoman generate readme my-project
    yeoman generate app --test=mocha
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from yeoman_generators import __version__
from yeoman_generators.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="yeoman")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to yeoman.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """yeoman — locate and run project generators."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("YEOMAN_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("YEOMAN_LOG_FILE"),
        log_file_level=os.environ.get("YEOMAN_LOG_FILE_LEVEL"),
        show_actions=not quiet,
    )


# ── Register commands from yeoman_generators/ui/cli/ ──────────────

from yeoman_generators.ui.cli.generate import generate, list_generators, warn_on  # noqa: E402

cli.add_command(generate)
cli.add_command(list_generators)
cli.add_command(warn_on)


if __name__ == "__main__":
    cli()
