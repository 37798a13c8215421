#!/usr/bin/env python3
"""tfslint CLI main entry point."""

import logging
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..core.config import ConfigManager
from ..exceptions import ConfigurationError
from ..logging import LoggingConfig, configure_logging, level_for_verbosity
from ..logging_integration import configure_logging_from_config, get_logger
from .commands import analyze, config


def setup_logging(config_file: Optional[Path] = None, verbose: int = 0) -> None:
    """Set up logging from the configuration file, falling back to defaults.

    Configuration errors are not reported here; the command that loads the
    configuration reports them with the proper exit code.
    """
    try:
        configure_logging_from_config(ConfigManager(config_file).load_config(), verbose)
    except ConfigurationError as e:
        configure_logging(LoggingConfig(level=level_for_verbosity(verbose)))
        logging.getLogger("tfslint.cli").debug("Using default logging: %s", e.message)
        return

    get_logger("tfslint.cli").debug("tfslint started", version=__version__, verbose_level=verbose)


@click.group()
@click.version_option(version=__version__, prog_name="tfslint")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path (default: ./tfslint.toml if present)",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """tfslint: checks that test files mirror the source tree.

    \b
    src/<Project>/<Sub>/Foo.cs  is tested by
    tests/<Project>.Tests/<Sub>/FooTests.cs

    \b
    Examples:
        tfslint analyze -s ./src -t ./tests
        tfslint analyze -s ./src -t ./tests -d --format table
        tfslint analyze -s ./src -t ./tests -o
        tfslint analyze -s ./src -t ./tests --all
        tfslint config --init
    """
    setup_logging(config, verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config
    ctx.obj["verbose"] = verbose


cli.add_command(analyze)
cli.add_command(config)


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={}, prog_name="tfslint")


if __name__ == "__main__":
    main()
