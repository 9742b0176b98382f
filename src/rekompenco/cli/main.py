"""
Rekompenco CLI entry point.

Commands:
  rekompenco path                 — show the achievement file location
  rekompenco list                 — list unlocked achievements
  rekompenco has <id>             — exit 0 if unlocked, 1 otherwise
  rekompenco unlock <id> <name>   — unlock an achievement
  rekompenco info                 — file path, size, and record count
  rekompenco config show | init   — view or create the config file
  rekompenco version              — show version information
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from rekompenco import __version__
from rekompenco.core.constants import ExitCode

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version", "-V", message="rekompenco %(version)s")
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Achievement file to use instead of the configured one.",
)
@click.pass_context
def cli(ctx: click.Context, store_path: Path | None) -> None:
    """Rekompenco — cross-platform achievement store."""
    from rekompenco.core.config import load_config
    from rekompenco.core.exceptions import ConfigError
    from rekompenco.core.logging import configure_logging

    if ctx.invoked_subcommand == "config":
        # config commands load (or create) the file themselves
        return

    try:
        cfg = load_config()
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {escape(str(exc))}", soft_wrap=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    configure_logging(cfg.logging.level, cfg.logging.format)
    ctx.obj = {"store_path": store_path or cfg.store_path}


def _open_store(ctx: click.Context):
    from rekompenco.core.store import AchievementStore

    return AchievementStore(ctx.obj["store_path"])


# ---------------------------------------------------------------------------
# path / info
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
def path(ctx: click.Context) -> None:
    """Show the achievement file location."""
    click.echo(str(ctx.obj["store_path"]))


@cli.command()
@click.option("--json", "as_json", is_flag=True, default=False)
@click.pass_context
def info(ctx: click.Context, as_json: bool) -> None:
    """Show achievement file path, size, and record count."""
    from rekompenco.cli._achievements import cmd_info

    cmd_info(ctx.obj["store_path"], as_json=as_json, console=console, err_console=err_console)


# ---------------------------------------------------------------------------
# list / has / unlock
# ---------------------------------------------------------------------------


@cli.command("list")
@click.option("--json", "as_json", is_flag=True, default=False)
@click.pass_context
def list_(ctx: click.Context, as_json: bool) -> None:
    """List unlocked achievements."""
    from rekompenco.cli._achievements import cmd_list

    cmd_list(_open_store(ctx), as_json=as_json, console=console, err_console=err_console)


@cli.command()
@click.argument("achievement_id")
@click.pass_context
def has(ctx: click.Context, achievement_id: str) -> None:
    """Exit 0 if ACHIEVEMENT_ID is unlocked, 1 otherwise."""
    from rekompenco.cli._achievements import load_or_exit

    store = _open_store(ctx)
    load_or_exit(store, err_console)
    if store.has_achievement(achievement_id):
        console.print(f"[green]unlocked[/green]  {escape(achievement_id)}")
        return
    console.print(f"[dim]locked[/dim]    {escape(achievement_id)}")
    sys.exit(ExitCode.ERROR)


@cli.command()
@click.argument("achievement_id")
@click.argument("name")
@click.option("--description", "-d", default="", help="Achievement description")
@click.option(
    "--data-type",
    type=click.IntRange(0, 0xFFFF),
    default=0,
    show_default=True,
    help="Tag describing how to interpret --data",
)
@click.option("--data", default="", help="Opaque payload, e.g. base64 image data")
@click.pass_context
def unlock(
    ctx: click.Context,
    achievement_id: str,
    name: str,
    description: str,
    data_type: int,
    data: str,
) -> None:
    """Unlock ACHIEVEMENT_ID with display NAME."""
    from rekompenco.cli._achievements import cmd_unlock

    cmd_unlock(
        _open_store(ctx),
        achievement_id=achievement_id,
        name=name,
        description=description,
        data_type=data_type,
        data=data,
        console=console,
        err_console=err_console,
    )


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------

from rekompenco.cli._config_cmd import config_group  # noqa: E402

cli.add_command(config_group)


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--json", "as_json", is_flag=True, default=False)
def version(as_json: bool) -> None:
    """Show version information."""
    import platform

    if as_json:
        import json

        click.echo(
            json.dumps(
                {
                    "rekompenco": __version__,
                    "python": sys.version.split()[0],
                    "platform": sys.platform,
                    "arch": platform.machine(),
                },
                indent=2,
            )
        )
    else:
        console.print(f"rekompenco {__version__}")
        console.print(f"Python {sys.version.split()[0]}")
        console.print(f"Platform: {sys.platform} {platform.machine()}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
