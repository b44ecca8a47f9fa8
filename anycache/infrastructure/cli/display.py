"""Console output for the anycache CLI, rendered with rich."""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from rich.box import HEAVY, ROUNDED, SIMPLE
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

logger = logging.getLogger(__name__)


class ConsoleDisplay:
    """Renders cache contents and status messages to the terminal."""

    def __init__(self, console: Optional[Console] = None):
        """Initializes the display.

        Args:
            console: Console to print to (a default stdout console if None).
        """
        self.console = console or Console()

    def display_error(self, error_message: str) -> None:
        """Displays an error message in a distinct style."""
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_info(self, info_message: str) -> None:
        """Displays an informational message."""
        panel = Panel(
            Text(info_message, style="white"),
            title="[bold blue]Info[/bold blue]",
            border_style="blue",
            box=SIMPLE,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_value(self, value: Any) -> None:
        """Pretty-prints one decoded cache value as JSON."""
        self.console.print(JSON.from_data(value, indent=2))

    def display_keys(self, cache_name: str, keys: Iterable[str]) -> None:
        """Displays the keys stored in a namespace, sorted for readability."""
        keys = sorted(keys)
        if not keys:
            self.display_info(f"No entries in cache '{cache_name}'.")
            return

        table = Table(title=f"Cache '{cache_name}'", box=ROUNDED, show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Key", style="cyan", overflow="fold")
        for index, key in enumerate(keys, start=1):
            table.add_row(str(index), Text(key))
        self.console.print(table)
        logger.debug(f"Displayed {len(keys)} keys for cache '{cache_name}'")

    def display_namespace(self, cache_name: str, directory: Optional[Path], usable: bool, entry_count: int) -> None:
        """Displays where a namespace lives and how many entries it holds."""
        table = Table(box=SIMPLE, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value", overflow="fold")
        table.add_row("Name", Text(cache_name))
        table.add_row("Directory", Text(str(directory) if directory else "-"))
        table.add_row("Status", Text("usable" if usable else "unusable", style="green" if usable else "red"))
        table.add_row("Entries", str(entry_count))
        self.console.print(table)
