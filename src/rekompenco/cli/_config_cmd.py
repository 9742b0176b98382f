"""CLI commands: rekompenco config show | init."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape

from rekompenco.core.constants import ExitCode

console = Console()


@click.group("config")
def config_group() -> None:
    """View and create Rekompenco configuration."""


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
def config_show(as_json):
    """Display the effective configuration."""
    from rekompenco.core.config import _config_file_path, load_config

    cfg_path = _config_file_path()
    try:
        cfg = load_config()
    except Exception as exc:
        console.print(f"[red]Config error:[/red] {escape(str(exc))}", soft_wrap=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    data = cfg.model_dump()
    data["_config_path"] = str(cfg_path) if cfg_path.exists() else None
    data["_store_path"] = str(cfg.store_path)

    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        _print_config_rich(data, console)


@config_group.command("init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file")
def config_init(force):
    """Write a config file with default values."""
    from rekompenco.core.config import _config_file_path, default_config_data, save_config

    cfg_path = _config_file_path()
    if cfg_path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {cfg_path}")
        console.print("Use --force to overwrite.")
        sys.exit(ExitCode.ERROR)

    save_config(default_config_data(), cfg_path)
    console.print(f"[green]Config written:[/green] {cfg_path}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _print_config_rich(data, console):
    """Print config dict in a human-friendly format."""
    path = data.pop("_config_path", None) or "defaults, no config file"
    store_path = data.pop("_store_path")
    console.print(f"[bold]Rekompenco Configuration[/bold]  ({path})\n")

    for section, values in data.items():
        if isinstance(values, dict):
            console.print(f"  [cyan]\\[{section}][/cyan]")
            for k, v in values.items():
                console.print(f"    {k} = {v!r}")
        else:
            console.print(f"  {section} = {values!r}")
    console.print(f"\n  achievement file: {store_path}")
    console.print()
