"""Rich console adapter that draws view-models.

All drawing goes through a shared Console instance unless one is passed in,
which keeps tests able to capture output.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from episodeguide.ui.theme import Theme, get_theme
from episodeguide.utils.display import truncate_text
from episodeguide.view.models import (
    ALL_EPISODES,
    EpisodeCard,
    ErrorNotice,
    PageView,
    SelectOption,
    StatusLine,
)
from episodeguide.view.summary import summary_to_text

# Shared console instance for all drawing functions
console = Console()


def _selected_label(options: Sequence[SelectOption], value: str | None) -> str | None:
    for option in options:
        if option.value == value:
            return option.label
    return None


def card_renderable(card: EpisodeCard, theme: Theme) -> Panel:
    """Build the panel for one episode card."""
    body = Text()
    summary = summary_to_text(card.summary)
    if summary.plain:
        body.append_text(summary)
        body.append("\n\n")
    body.append("Image: ", style=theme.muted)
    body.append(card.image_url, style=theme.muted)
    body.append("\n")
    body.append(card.link.text, style=f"{theme.link} link {card.link.url}")
    body.append(f" ({card.link.url})", style=theme.muted)

    title = Text()
    title.append(card.code, style=theme.episode_code)
    title.append(" - ")
    title.append(card.heading.removeprefix(f"{card.code} - "), style=f"bold {theme.primary}")

    return Panel(body, title=title, title_align="left", border_style=theme.card_border)


def draw_cards(
    cards: Sequence[EpisodeCard], out: Console | None = None, theme: Theme | None = None
) -> None:
    out = out or console
    theme = theme or get_theme()
    for card in cards:
        out.print(card_renderable(card, theme))


def draw_status(status: StatusLine, out: Console | None = None, theme: Theme | None = None) -> None:
    out = out or console
    theme = theme or get_theme()
    out.print(Text(status.text, style=theme.muted))


def draw_error(error: ErrorNotice, out: Console | None = None, theme: Theme | None = None) -> None:
    out = out or console
    theme = theme or get_theme()
    out.print(theme.error_text(escape(error.message)))


def draw_controls(page: PageView, out: Console | None = None, theme: Theme | None = None) -> None:
    """Draw the show selector, search box and episode selector as one block."""
    out = out or console
    theme = theme or get_theme()

    show_label = _selected_label(page.show_options, page.selected_show) or page.title or "-"
    episode_label = _selected_label(page.episode_options, page.selected_episode) or "-"
    # The sentinel option does not count as an episode
    episode_count = max(len(page.episode_options) - 1, 0)

    controls = Table.grid(padding=(0, 2))
    controls.add_column(style="bold")
    controls.add_column()
    controls.add_row("Show", Text(show_label, style=theme.primary))
    controls.add_row(
        "Search",
        Text(page.search_text, style=theme.option_selected)
        if page.search_text
        else Text("(none)", style=theme.muted),
    )
    episode_text = Text(
        truncate_text(episode_label, 60),
        style=theme.muted if page.selected_episode == ALL_EPISODES else theme.option_selected,
    )
    episode_text.append(f"  [{episode_count} to choose from]", style=theme.muted)
    controls.add_row("Episode", episode_text)
    out.print(controls)
    out.print()


def draw_page(page: PageView, out: Console | None = None, theme: Theme | None = None) -> None:
    """Draw a full page, top to bottom.

    Args:
        page: Page to draw
        out: Console to draw on (defaults to the shared console)
        theme: Theme to use (defaults to the active theme)
    """
    out = out or console
    theme = theme or get_theme()

    if page.title:
        out.rule(Text(page.title, style=f"bold {theme.primary}"))
    draw_controls(page, out, theme)

    if page.loading:
        out.print(theme.info_text("Loading episodes..."))
    elif page.error is not None:
        draw_error(page.error, out, theme)
    else:
        draw_cards(page.cards, out, theme)
        if page.status is not None:
            draw_status(page.status, out, theme)

    attribution = Text(page.attribution.text, style=f"{theme.muted} link {page.attribution.url}")
    out.print(attribution)


def draw_options(
    options: Sequence[SelectOption],
    title: str,
    selected: str | None = None,
    out: Console | None = None,
    theme: Theme | None = None,
) -> None:
    """Draw selector options as a two-column table.

    Args:
        options: Options to list
        title: Table title
        selected: Value of the currently selected option, if any
        out: Console to draw on
        theme: Theme to use
    """
    out = out or console
    theme = theme or get_theme()

    table = Table(title=f"[bold]{escape(title)}[/bold]", title_justify="left")
    table.add_column("Value", style=theme.primary, no_wrap=True)
    table.add_column("Label")

    for option in options:
        label = escape(option.label)
        if option.value == selected:
            label = f"[{theme.option_selected}]{label}[/{theme.option_selected}]"
        table.add_row(escape(option.value), label)

    out.print(table)
