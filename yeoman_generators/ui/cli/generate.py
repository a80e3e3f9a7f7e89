"""
CLI commands for generators — generate, list, warn-on.

Thin wrappers over ``yeoman_generators.core.use_cases``.  Everything
after the generator name is handed to the generator untouched, so
click's own option parsing (including ``--help``) is switched off for
``generate`` and ``warn-on``.
"""

from __future__ import annotations

import json
import os
import sys
from typing import Any

import click

from yeoman_generators.core.config.loader import ConfigError
from yeoman_generators.core.context import EngineContext, setup_context

_PASSTHROUGH = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}


def parse_generator_args(tokens: tuple[str, ...] | list[str]) -> tuple[list[str], dict[str, Any]]:
    """Split raw tokens into positional args and options.

    ``--key=value`` → {"key": "value"}, ``--flag`` → True,
    ``--no-flag`` → False, ``-h`` → {"help": True}; everything after
    ``--`` is positional.
    """
    args: list[str] = []
    options: dict[str, Any] = {}
    positional_only = False

    for token in tokens:
        if positional_only or token == "-" or not token.startswith("-"):
            args.append(token)
        elif token == "--":
            positional_only = True
        elif token.startswith("--"):
            key, eq, value = token[2:].partition("=")
            if eq:
                options[key] = value
            elif key.startswith("no-"):
                options[key[3:]] = False
            else:
                options[key] = True
        else:
            for flag in token[1:]:
                options["help" if flag == "h" else flag] = True

    return args, options


def _engine(ctx: click.Context) -> EngineContext:
    """Build the engine context, cd into the application root if found."""
    try:
        engine = setup_context(config_path=ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    # generators write relative to the application root
    if engine.project_file is not None:
        os.chdir(engine.base)
    return engine


def _echo_listing(engine: EngineContext, args: list[str], options: dict[str, Any]) -> None:
    from yeoman_generators.core.use_cases.help import help_listing

    listing = help_listing(engine, args, options, engine.config.to_mapping())
    click.echo(listing.render())


@click.command("generate", context_settings=_PASSTHROUGH)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def generate(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Run a generator: NAME [ARGS]... [--option[=value]]...

    Without a NAME, lists the available generators.

    Examples:

        yeoman generate readme my-project

        yeoman generate app --test=mocha
    """
    from yeoman_generators.core.use_cases.invoke import invoke

    args, options = parse_generator_args(tokens)
    engine = _engine(ctx)

    if not args:
        _echo_listing(engine, args, options)
        return

    name = args.pop(0)
    result = invoke(
        engine,
        name,
        args,
        options,
        engine.config.to_mapping(),
        announce=lambda line: click.secho(line, fg="cyan", bold=True),
    )

    if result.status == "not_found":
        click.secho(f"Could not find generator {name}", fg="red")
        click.echo("Tried in:\n" + "\n".join(f" - {path}" for path in result.tried))
        sys.exit(1)

    if result.status == "help":
        click.echo(result.help_text)


@click.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_generators(ctx: click.Context, as_json: bool) -> None:
    """List every generator available to this application."""
    from yeoman_generators.core.use_cases.help import catalog, build_listing

    engine = _engine(ctx)
    config = engine.config.to_mapping()

    if as_json:
        summaries = catalog(engine, [], {}, config)
        listing = build_listing(summaries)
        click.echo(json.dumps({
            **listing.to_dict(),
            "generators": [s.to_dict() for s in summaries],
        }, indent=2))
        return

    _echo_listing(engine, [], {})


@click.command("warn-on", context_settings=_PASSTHROUGH)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def warn_on(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Print the files a generator would write, one per line."""
    from yeoman_generators.core.use_cases.warn_on import warn_on as _warn_on

    args, options = parse_generator_args(tokens)
    if not args:
        return

    engine = _engine(ctx)
    name = args.pop(0)
    for pattern in _warn_on(engine, name, args, options, engine.config.to_mapping()):
        click.echo(pattern)
