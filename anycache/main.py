"""Main entry point for the anycache CLI.

Sets up the Typer application used to inspect and edit cache namespaces on
disk. Values are read and written as plain JSON, the same encoding the
default codec uses.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Optional

import typer

from anycache.domain.errors import EntryNotFoundError
from anycache.domain.models.common import CacheKey, CacheName
from anycache.infrastructure.cache.file_cache import AnyCache
from anycache.infrastructure.cli.display import ConsoleDisplay
from anycache.infrastructure.config.settings import get_log_file, get_log_level, load_configuration
from anycache.infrastructure.monitoring.logger_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="anycache",
    help="Inspect and edit anycache namespaces on disk.",
    add_completion=False,
)

@dataclass
class CliState:
    """Options shared by every command."""
    ui: ConsoleDisplay
    root: Optional[Path] = None

def _open_cache(ctx: typer.Context, name: str) -> AnyCache:
    """Opens a namespace, exiting with an error if it is unusable."""
    state: CliState = ctx.obj
    cache: AnyCache = AnyCache(CacheName(name), cache_root=state.root)
    if not cache.is_usable:
        state.ui.display_error(f"Cache '{name}' is unusable (directory: {cache.directory or 'unresolved'}).")
        raise typer.Exit(code=1)
    return cache

# --- CLI Commands ---

NameArgument = Annotated[str, typer.Argument(help="Cache name (namespace directory).")]
KeyArgument = Annotated[str, typer.Argument(help="Entry key (file name).")]

@app.command()
def keys(ctx: typer.Context, name: NameArgument):
    """List the keys stored in a cache."""
    cache = _open_cache(ctx, name)
    ctx.obj.ui.display_keys(name, cache.list_keys())

@app.command()
def get(ctx: typer.Context, name: NameArgument, key: KeyArgument):
    """Print one entry as JSON."""
    cache = _open_cache(ctx, name)
    result = cache.try_get_entry(CacheKey(key))
    if isinstance(result.error, EntryNotFoundError):
        ctx.obj.ui.display_error(f"No entry '{key}' in cache '{name}'.")
        raise typer.Exit(code=1)
    if not result.ok:
        ctx.obj.ui.display_error(f"Cannot read entry '{key}': {result.error}")
        raise typer.Exit(code=1)
    ctx.obj.ui.display_value(result.value)

@app.command(name="set")
def set_command(
    ctx: typer.Context,
    name: NameArgument,
    key: KeyArgument,
    value: Annotated[str, typer.Argument(help="Value as a JSON document.")],
):
    """Store a JSON value under a key, replacing any existing entry."""
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        ctx.obj.ui.display_error(f"Value is not valid JSON: {e}")
        raise typer.Exit(code=1)

    cache = _open_cache(ctx, name)
    result = cache.try_set_entry(data, CacheKey(key))
    if not result.ok:
        ctx.obj.ui.display_error(f"Cannot store entry '{key}': {result.error}")
        raise typer.Exit(code=1)
    ctx.obj.ui.display_info(f"Stored '{key}' in cache '{name}'.")

@app.command(name="rm")
def remove_command(ctx: typer.Context, name: NameArgument, key: KeyArgument):
    """Remove one entry. Removing a missing entry is not an error."""
    cache = _open_cache(ctx, name)
    result = cache.try_remove_entry(CacheKey(key))
    if not result.ok:
        ctx.obj.ui.display_error(f"Cannot remove entry '{key}': {result.error}")
        raise typer.Exit(code=1)
    ctx.obj.ui.display_info(f"Removed '{key}' from cache '{name}'.")

@app.command()
def clear(
    ctx: typer.Context,
    name: NameArgument,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation.")] = False,
):
    """Remove every entry in a cache."""
    cache = _open_cache(ctx, name)
    if not yes:
        typer.confirm(f"Remove all entries from cache '{name}'?", abort=True)
    result = cache.try_remove_all_entries()
    if not result.ok:
        ctx.obj.ui.display_error(f"Clearing cache '{name}' stopped: {result.error}")
        raise typer.Exit(code=1)
    ctx.obj.ui.display_info(f"Cleared cache '{name}'.")

@app.command()
def exists(ctx: typer.Context, name: NameArgument, key: KeyArgument):
    """Print whether an entry exists; exit code 1 if it does not."""
    cache = _open_cache(ctx, name)
    found = cache.entry_exists(CacheKey(key))
    typer.echo("true" if found else "false")
    if not found:
        raise typer.Exit(code=1)

@app.command()
def info(ctx: typer.Context, name: NameArgument):
    """Show where a cache lives and how many entries it holds."""
    cache = _open_cache(ctx, name)
    ctx.obj.ui.display_namespace(name, cache.directory, cache.is_usable, len(cache.list_keys()))

@app.callback()
def main_callback(
    ctx: typer.Context,
    root: Annotated[
        Optional[Path],
        typer.Option("--root", "-r", file_okay=False, help="Directory holding all caches. Uses cache.root or the platform cache dir if not set.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """Configure logging and shared options before running a command."""
    load_configuration()
    setup_logging(
        log_level=logging.DEBUG if verbose else get_log_level(),
        log_file=get_log_file(),
    )
    logger.debug(f"anycache CLI started with root={root}")
    ctx.obj = CliState(ui=ConsoleDisplay(), root=root)

# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()
