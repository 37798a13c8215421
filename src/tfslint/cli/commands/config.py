"""Configuration management command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.config import ConfigManager, LinterConfig
from ..error_handlers import handle_cli_errors

console = Console()


@click.command()
@click.option("--show", is_flag=True, help="Show the effective configuration")
@click.option(
    "--export",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Export the effective configuration to a TOML file",
)
@click.option("--init", "init", is_flag=True, help="Write a default tfslint.toml in the current directory")
@click.option("--force", is_flag=True, help="Overwrite an existing file with --init")
@click.pass_context
@handle_cli_errors
def config(
    ctx: click.Context,
    show: bool,
    export: Optional[Path],
    init: bool,
    force: bool,
) -> None:
    """Manage tfslint configuration.

    Values come from tfslint.toml, then TFSLINT_* environment variables,
    then command line options.

    \b
    Examples:
        tfslint config --show
        tfslint config --init
        tfslint config --export effective.toml
    """
    if init:
        written = ConfigManager().init_config(force=force)
        console.print(f"[green]✓ Configuration written to {written}[/green]")
        return

    config_manager = ConfigManager((ctx.obj or {}).get("config_file"))

    if export:
        config_manager.export_config(export)
        console.print(f"[green]✓ Configuration exported to {export}[/green]")
        return

    show_configuration(config_manager.load_config(), config_manager.config_file)


def show_configuration(linter_config: LinterConfig, config_file: Path) -> None:
    source = str(config_file) if config_file.is_file() else "defaults and environment"
    console.print(f"[bold]Configuration[/bold] [dim]({source})[/dim]")

    for section_name, section in (
        ("analyzer", linter_config.analyzer),
        ("logging", linter_config.logging),
        ("report", linter_config.report),
    ):
        table = Table(title=section_name, title_justify="left", show_header=False)
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, value in section.model_dump(mode="json").items():
            if isinstance(value, list):
                value = ", ".join(value) or "-"
            table.add_row(key, "-" if value is None else str(value))
        console.print(table)
