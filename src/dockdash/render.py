"""
Frame rendering: DashboardState -> one rich renderable.

render() is a pure function of the state and a StyleConfig; nothing here
mutates the state or keeps global style objects. render_text() prints the
same frame to a string, which is what the tests and exports use.
"""

import io
from dataclasses import dataclass
from typing import Optional

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .categories import Category
from .config import ColorTheme
from .layout import compute_layout
from .state import DashboardState, Phase
from .widgets import ListWidget

HELP_TEXT = "↑/↓: navigate • Tab: switch list • r: refresh • q: quit"
LOADING_TEXT = "Loading data..."
QUIT_HINT = "Press q to quit."


@dataclass(frozen=True)
class StyleConfig:
    border: str = "color(240)"
    focused_border: str = "color(170)"
    title: str = "bold color(170)"
    header: str = "bold color(170)"
    selected: str = "color(229) on color(57)"
    help: str = "color(241)"
    error: str = "bold red"

    @classmethod
    def from_theme(cls, theme: ColorTheme) -> "StyleConfig":
        return cls(
            border=theme.border,
            focused_border=theme.focused_border,
            title=theme.title,
            header=theme.header,
            selected=theme.selected,
            help=theme.help,
            error=theme.error,
        )


def render_list(category: Category, widget: ListWidget, style: StyleConfig) -> Table:
    table = Table(
        box=box.SIMPLE_HEAD,
        header_style=style.header,
        show_edge=False,
        pad_edge=False,
        expand=False,
        width=widget.visible_width,
    )
    for column in category.columns:
        table.add_column(column.title, width=column.width, no_wrap=True, overflow="ellipsis")
    for index, row in widget.visible_rows():
        row_style = style.selected if index == widget.selected_index else None
        table.add_row(*(Text(cell) for cell in row), style=row_style)
    return table


def _dashboard(state: DashboardState, style: StyleConfig) -> RenderableType:
    layout = compute_layout(state.terminal_width, state.terminal_height)

    lists = []
    for category, widget in zip(state.categories, state.widgets):
        lists.append(Panel(
            render_list(category, widget, style),
            title=Text(category.list_title, style=style.title),
            title_align="left",
            border_style=style.focused_border if widget.focused else style.border,
            box=box.SQUARE,
            padding=0,
            expand=False,
            width=layout.left_width if layout else None,
        ))

    info_title, info_body = state.detail()
    info = Panel(
        Text(info_body),
        title=Text(info_title, style=style.title),
        title_align="left",
        border_style=style.border,
        box=box.SQUARE,
        padding=0,
        expand=True,
        width=layout.detail_width + 2 if layout else None,
        height=layout.detail_height + 2 if layout else None,
    )

    grid = Table.grid()
    if layout:
        grid.add_column(width=layout.left_width, no_wrap=True)
        grid.add_column(width=layout.right_width)
    else:
        grid.add_column()
        grid.add_column()
    grid.add_row(Group(*lists), info)
    return grid


def render(state: DashboardState, style: Optional[StyleConfig] = None) -> RenderableType:
    style = style or StyleConfig()
    phase = state.phase

    if phase is Phase.ERROR:
        return Text(f"\n  Error: {state.snapshot.load_error}\n\n  {QUIT_HINT}\n", style=style.error)

    if phase is Phase.LOADING and not state.has_data:
        return Text(f"\n  {LOADING_TEXT}\n")

    parts = [_dashboard(state, style)]
    if phase is Phase.LOADING:
        parts.append(Text(f"  {LOADING_TEXT}", style=style.help))
    parts.append(Text(f"\n  {HELP_TEXT}\n", style=style.help))
    return Group(*parts)


def render_text(state: DashboardState, style: Optional[StyleConfig] = None, width: Optional[int] = None) -> str:
    """Render the frame as plain text (no colors)."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width or state.terminal_width or 120,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )
    console.print(render(state, style), highlight=False)
    return buffer.getvalue()
