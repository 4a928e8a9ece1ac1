"""Command-line entry point: reads the status payload and prints one line."""

import logging
import sys

import click
import orjson

from ccline.services.config_loader import (
    ConfigError,
    dump_config,
    load_config,
    with_theme,
)
from ccline.services.statusline import StatusLineGenerator
from ccline.types.config import Config
from ccline.types.input import InputData, InputError

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.version_option(package_name="ccline", prog_name="ccline")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file path. Defaults to ~/.claude/ccline/config.toml.",
)
@click.option(
    "--theme",
    "-t",
    default=None,
    help="Icon theme: dark, default, nerd, emoji, ascii or none.",
)
@click.option(
    "--print-config",
    is_flag=True,
    help="Print the default configuration as TOML and exit.",
)
@click.option(
    "--validate",
    is_flag=True,
    help="Validate the configuration file and exit.",
)
@click.option(
    "--debug",
    is_flag=True,
    envvar="CCLINE_DEBUG",
    help="Log diagnostics to stderr.",
)
def main(config_path, theme, print_config, validate, debug):
    """ccline - status line for Claude Code.

    Reads the status JSON that Claude Code writes to stdin and prints a
    single colored line.
    """
    _configure_logging(debug)

    if print_config:
        click.echo(dump_config(Config()), nl=False)
        return

    try:
        config = load_config(config_path)
        if theme:
            config = with_theme(config, theme)
    except ConfigError as e:
        if validate:
            click.echo(f"Configuration invalid: {e}", err=True)
            sys.exit(1)
        raise click.ClickException(str(e))

    if validate:
        click.echo("Configuration OK")
        return

    try:
        payload = orjson.loads(click.get_binary_stream("stdin").read())
        input_data = InputData.from_dict(payload)
    except orjson.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON on stdin: {e}")
    except InputError as e:
        raise click.ClickException(str(e))

    logger.debug("Rendering for %s in %s", input_data.model_name, input_data.current_dir)
    click.echo(StatusLineGenerator(config).generate(input_data))

