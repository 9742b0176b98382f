"""rekompenco list | info | unlock — achievement file commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rekompenco.core.achievement import Achievement
from rekompenco.core.constants import MAX_ENTRY_BYTES, ExitCode
from rekompenco.core.exceptions import StoreError
from rekompenco.core.store import AchievementStore


def load_or_exit(store: AchievementStore, err_console: Console) -> None:
    """Load the store, exiting with STORE_ERROR if the file cannot be parsed."""
    try:
        store.load()
    except StoreError as exc:
        err_console.print(
            f"[red]Cannot load achievements:[/red] {escape(str(exc))}", soft_wrap=True
        )
        err_console.print("Fix or remove the file, then try again.")
        sys.exit(ExitCode.STORE_ERROR)


def cmd_list(
    store: AchievementStore, as_json: bool, console: Console, err_console: Console
) -> None:
    load_or_exit(store, err_console)
    achievements = sorted(store, key=lambda a: a.id)

    if as_json:
        print(json.dumps([a.to_dict() for a in achievements], indent=2))
        return

    if not achievements:
        console.print("No achievements unlocked yet.")
        return

    table = Table(title=f"Unlocked achievements ({len(achievements)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Type", justify="right")
    table.add_column("Data", justify="right")
    for a in achievements:
        table.add_row(
            escape(a.id),
            escape(a.name),
            escape(a.description),
            str(a.data_type),
            f"{len(a.data)} chars" if a.data else "-",
        )
    console.print(table)


def cmd_info(store_path: Path, as_json: bool, console: Console, err_console: Console) -> None:
    """Report on the file without creating it."""
    exists = store_path.exists()
    data: dict[str, object] = {"path": str(store_path), "exists": exists}

    if exists:
        store = AchievementStore(store_path)
        load_or_exit(store, err_console)
        data["size_bytes"] = store_path.stat().st_size
        data["achievements"] = len(store)

    if as_json:
        print(json.dumps(data, indent=2))
        return

    console.print(f"[bold]Achievement file[/bold]: {store_path}")
    if not exists:
        console.print("It will be created on the first unlock or lookup.")
        return
    console.print(f"Size: {data['size_bytes']} bytes")
    console.print(f"Unlocked: {data['achievements']}")


def cmd_unlock(
    store: AchievementStore,
    achievement_id: str,
    name: str,
    description: str,
    data_type: int,
    data: str,
    console: Console,
    err_console: Console,
) -> None:
    load_or_exit(store, err_console)
    if store.has_achievement(achievement_id):
        console.print(f"Already unlocked: [cyan]{escape(achievement_id)}[/cyan]")
        return

    label = escape(achievement_id)
    achievement = Achievement(achievement_id, name, description, data_type, data)
    if store.unlock(achievement_id, achievement):
        console.print(f"[green]Unlocked[/green] [cyan]{label}[/cyan]: {escape(name)}")
        return

    err_console.print(
        f"[red]Cannot save[/red] {label}: fields must not contain '|' or line breaks "
        f"and the saved line must fit in {MAX_ENTRY_BYTES} bytes."
    )
    sys.exit(ExitCode.ERROR)
