"""CLI entry point for episodeguide."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Prompt

from episodeguide.catalog.client import CatalogClient
from episodeguide.catalog.models import Episode
from episodeguide.config.logging import setup_logging
from episodeguide.config.manager import ConfigManager
from episodeguide.config.schema import GlobalConfig
from episodeguide.session.cache import SessionCache
from episodeguide.session.commands import (
    HELP_TEXT,
    CommandKind,
    PromptCommand,
    normalize_code,
    parse_prompt,
)
from episodeguide.session.controller import (
    BrowseController,
    BrowseSession,
    ShowFailed,
    ShowLoaded,
)
from episodeguide.ui.theme import get_theme, set_theme
from episodeguide.utils.errors import EpisodeGuideError, NetworkError
from episodeguide.view.console import draw_options, draw_page
from episodeguide.view.models import ALL_EPISODES
from episodeguide.view.renderer import render_show_options, render_status
from episodeguide.view.summary import summary_to_plain

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="episodeguide",
    help="Browse TV shows and episodes from the TVMaze catalog",
    no_args_is_help=True,
)
console = Console()


def create_catalog(config: GlobalConfig) -> CatalogClient:
    """Build the catalog client for a command."""
    return CatalogClient(base_url=config.api_base, timeout=config.request_timeout)


def _config(ctx: typer.Context) -> GlobalConfig:
    return ctx.obj["config"]


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """episodeguide - browse TV shows and their episodes."""
    try:
        config = ConfigManager().load_config()
    except EpisodeGuideError as e:
        setup_logging(verbose=verbose, log_file=log_file)
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)

    setup_logging(verbose=verbose, log_file=log_file, level=config.log_level)
    set_theme(config.theme)
    ctx.obj = {"config": config}


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from episodeguide import __version__

    console.print(f"[bold cyan]episodeguide[/bold cyan] v{__version__}")


@app.command("shows")
def list_shows(
    ctx: typer.Context,
    search: Annotated[
        str | None, typer.Option("--search", "-s", help="Only shows whose name contains this")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List all shows in the catalog, sorted by name.

    Examples:
        episodeguide shows

        episodeguide shows --search "thrones"
    """
    config = _config(ctx)

    async def run_shows() -> None:
        async with create_catalog(config) as catalog:
            cache = SessionCache(catalog)
            if json_output:
                shows = await cache.get_shows()
            else:
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    console=console,
                    transient=True,
                ) as progress:
                    progress.add_task("Fetching shows...", total=None)
                    shows = await cache.get_shows()

        if search:
            needle = search.casefold()
            shows = [show for show in shows if needle in show.name.casefold()]

        if json_output:
            result = {
                "shows": [{"id": show.id, "name": show.name} for show in shows],
                "total": len(shows),
            }
            print(json.dumps(result, indent=2))
            return

        if not shows:
            console.print("[yellow]No shows found.[/yellow]")
            return

        draw_options(render_show_options(shows), "Shows", out=console)
        console.print(f"\n[dim]Total: {len(shows)} show(s)[/dim]")
        console.print("\n[bold]To browse a show:[/bold] episodeguide browse <id>")

    try:
        asyncio.run(run_shows())
    except EpisodeGuideError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


def _episode_json(episode: Episode) -> dict[str, Any]:
    return {
        "code": episode.code,
        "season": episode.season,
        "number": episode.number,
        "name": episode.name,
        "summary": summary_to_plain(episode.summary or ""),
        "image": episode.image_url,
        "url": episode.url,
    }


@app.command("episodes")
def list_episodes(
    ctx: typer.Context,
    show_id: Annotated[int, typer.Argument(help="Catalog id of the show", min=1)],
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Only episodes whose name or summary contains this"),
    ] = None,
    episode: Annotated[
        str | None, typer.Option("--episode", "-e", help="Only the episode with this code, e.g. S01E02")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show the episodes of one show.

    --search and --episode cannot be combined.

    Examples:
        episodeguide episodes 82

        episodeguide episodes 82 --search "dragon"

        episodeguide episodes 82 --episode S01E02
    """
    if search is not None and episode is not None:
        raise typer.BadParameter("--search and --episode cannot be used together")

    config = _config(ctx)

    async def run_episodes() -> None:
        async with create_catalog(config) as catalog:
            controller = BrowseController(BrowseSession(cache=SessionCache(catalog)))
            state = await controller.select_show(show_id)

        if isinstance(state, ShowFailed):
            if json_output:
                print(json.dumps({"error": state.message}, indent=2))
            else:
                console.print(f"[red]✗[/red] Error: {escape(state.message)}")
            sys.exit(1)

        if search is not None:
            controller.search(search)
        elif episode is not None:
            controller.select_episode(normalize_code(episode))

        if json_output:
            displayed = controller.session.displayed
            status = render_status(len(displayed), len(controller.current_episodes))
            result = {
                "show_id": show_id,
                "search": controller.session.search_text,
                "episode": controller.session.selected_episode,
                "episodes": [_episode_json(ep) for ep in displayed],
                "showing": status.shown,
                "total": status.total,
                "status": status.text,
            }
            print(json.dumps(result, indent=2))
            return

        draw_page(controller.view(), out=console)

    asyncio.run(run_episodes())


async def _select_show(controller: BrowseController, show_id: int) -> None:
    if controller.session.cache.is_cached(show_id):
        await controller.select_show(show_id)
        return
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Loading episodes for show {show_id}...", total=None)
        await controller.select_show(show_id)


async def _handle_command(controller: BrowseController, command: PromptCommand) -> bool:
    """Apply one prompt command. Returns False when the session should end."""
    theme = get_theme()
    session = controller.session

    if command.kind == CommandKind.QUIT:
        return False

    if command.kind == CommandKind.HELP:
        console.print(HELP_TEXT, markup=False)
        return True

    if command.kind == CommandKind.INVALID:
        console.print(theme.warning_text(f"Unknown command: {escape(command.argument)}"))
        console.print(theme.muted_text("Type :help for commands"))
        return True

    if command.kind == CommandKind.SHOW:
        await _select_show(controller, int(command.argument))
        draw_page(controller.view(), out=console)
        return True

    if command.kind == CommandKind.SHOWS:
        if not session.shows:
            try:
                await controller.load_shows()
            except NetworkError as e:
                console.print(theme.error_text(escape(str(e))))
                return True
        show_id = getattr(controller.state, "show_id", None)
        selected = str(show_id) if show_id is not None else None
        draw_options(render_show_options(session.shows), "Shows", selected=selected, out=console)
        return True

    if not isinstance(controller.state, ShowLoaded):
        console.print(theme.warning_text("No show loaded. Use :show <id> to pick one."))
        return True

    if command.kind == CommandKind.EPISODES:
        page = controller.view()
        draw_options(
            page.episode_options, "Episodes", selected=page.selected_episode, out=console
        )
    elif command.kind == CommandKind.EPISODE:
        displayed = controller.select_episode(command.argument)
        if command.argument != ALL_EPISODES and not displayed:
            console.print(theme.warning_text(f"No episode {escape(command.argument)} in this show"))
        draw_page(controller.view(), out=console)
    else:
        controller.search(command.argument)
        draw_page(controller.view(), out=console)
    return True


async def _browse(config: GlobalConfig, show_id: int) -> None:
    theme = get_theme()
    async with create_catalog(config) as catalog:
        controller = BrowseController(BrowseSession(cache=SessionCache(catalog)))

        try:
            await controller.load_shows()
        except NetworkError as e:
            logger.warning(f"Show list unavailable: {e}")
            console.print(theme.warning_text("Show list unavailable; :shows will retry"))

        await _select_show(controller, show_id)
        draw_page(controller.view(), out=console)
        console.print(theme.muted_text("Type to search, :help for commands, :quit to leave"))

        while True:
            try:
                # Nothing else runs on the loop while waiting for input
                line = Prompt.ask(
                    "[bold]search[/bold]", default="", show_default=False, console=console
                )
            except EOFError:
                break
            if not await _handle_command(controller, parse_prompt(line)):
                break


@app.command("browse")
def browse(
    ctx: typer.Context,
    show_id: Annotated[
        int | None, typer.Argument(help="Show to start with (default from config)", min=1)
    ] = None,
) -> None:
    """Browse a show interactively.

    Type text to filter episodes, or use :episode <code>, :show <id>, :shows.
    The show list and every loaded show stay cached until you quit.

    Examples:
        episodeguide browse

        episodeguide browse 169
    """
    config = _config(ctx)
    start_id = show_id if show_id is not None else config.default_show_id

    try:
        asyncio.run(_browse(config, start_id))
    except KeyboardInterrupt:
        console.print()
    console.print("[dim]Bye![/dim]")


if __name__ == "__main__":
    app()
