"""
Dashboard state and its transition function.

Architecture:
  - DashboardState: snapshot + four ListWidgets + FocusController + flags
  - Events: a closed set of messages (Resize, KeyPressed, DataLoaded)
  - update(state, event): returns (new_state, fetch_requested); the input
    state is never modified, so every transition can be tested without a
    terminal or a Docker daemon

Phases (derived, see DashboardState.phase):
  - LOADING: a fetch is outstanding
  - READY: the last fetch succeeded
  - ERROR: the last fetch failed; only the error is shown

Snapshot Policy:
  - A successful fetch replaces the snapshot and every list at once
  - A failed fetch discards the previous snapshot and clears every list
  - Refresh keeps the current lists on screen until the result arrives
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .categories import CATEGORIES, Category
from .detail import DetailResolver
from .focus import FocusController
from .layout import compute_layout
from .model import ResourceSnapshot
from .widgets import ListWidget

DEFAULT_LIST_HEIGHTS = (12, 8, 8, 12)

_resolver = DetailResolver(CATEGORIES)


class Phase(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Command(Enum):
    QUIT = "quit"
    REFRESH = "refresh"
    FOCUS_NEXT = "focus_next"
    FOCUS_ALTERNATE = "focus_alternate"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HALF_PAGE_UP = "half_page_up"
    HALF_PAGE_DOWN = "half_page_down"
    TOP = "top"
    BOTTOM = "bottom"


NAVIGATION = {
    Command.UP: lambda w: w.move_selection(-1),
    Command.DOWN: lambda w: w.move_selection(1),
    Command.PAGE_UP: lambda w: w.page(-1),
    Command.PAGE_DOWN: lambda w: w.page(1),
    Command.HALF_PAGE_UP: lambda w: w.half_page(-1),
    Command.HALF_PAGE_DOWN: lambda w: w.half_page(1),
    Command.TOP: lambda w: w.goto_top(),
    Command.BOTTOM: lambda w: w.goto_bottom(),
}


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class KeyPressed:
    command: Command


@dataclass(frozen=True)
class DataLoaded:
    snapshot: ResourceSnapshot


Event = Union[Resize, KeyPressed, DataLoaded]


@dataclass
class DashboardState:
    widgets: List[ListWidget]
    focus: FocusController
    snapshot: Optional[ResourceSnapshot] = None
    loading: bool = True
    terminal_width: int = 0
    terminal_height: int = 0
    terminated: bool = False
    reverse_focus_cycle: bool = False
    categories: Tuple[Category, ...] = field(default=CATEGORIES)

    @property
    def phase(self) -> Phase:
        if self.loading:
            return Phase.LOADING
        if self.snapshot is not None and not self.snapshot.ok:
            return Phase.ERROR
        return Phase.READY

    @property
    def has_data(self) -> bool:
        """True when the lists hold a successfully loaded snapshot."""
        return self.snapshot is not None and self.snapshot.ok

    @property
    def active_category(self) -> Category:
        return self.categories[self.focus.active_index]

    @property
    def active_widget(self) -> ListWidget:
        return self.focus.active

    def detail(self) -> Tuple[str, str]:
        """(title, body) of the detail panel for the focused list."""
        category = self.active_category
        body = _resolver.resolve(category.name, self.snapshot, self.active_widget.selected_row())
        return category.info_title, body

    def clone(self) -> "DashboardState":
        widgets = [w.clone() for w in self.widgets]
        return replace(self, widgets=widgets, focus=FocusController(widgets, self.focus.active_index))


def initial_state(
    list_heights: Sequence[int] = DEFAULT_LIST_HEIGHTS,
    reverse_focus_cycle: bool = False,
) -> DashboardState:
    """Startup state: loading, empty lists, containers focused."""
    heights = tuple(list_heights)[:len(CATEGORIES)]
    heights += DEFAULT_LIST_HEIGHTS[len(heights):]
    widgets = [
        ListWidget(c.build_row, c.key_index, height)
        for c, height in zip(CATEGORIES, heights)
    ]
    focus = FocusController(widgets)
    focus.sync()
    return DashboardState(widgets=widgets, focus=focus, reverse_focus_cycle=reverse_focus_cycle)


def _apply_layout(state: DashboardState) -> None:
    layout = compute_layout(state.terminal_width, state.terminal_height)
    width = layout.list_width if layout else None
    for widget in state.widgets:
        widget.set_visible_width(width)


def _install_snapshot(state: DashboardState, snapshot: ResourceSnapshot) -> None:
    state.loading = False
    state.snapshot = snapshot
    for category, widget in zip(state.categories, state.widgets):
        if snapshot.ok:
            widget.load(snapshot.collection(category.name))
        else:
            widget.set_rows([])
    state.focus.sync()


def _handle_command(state: DashboardState, command: Command) -> bool:
    if command is Command.QUIT:
        state.terminated = True
        return False
    if command is Command.REFRESH:
        state.loading = True
        return True
    if not state.has_data:
        return False
    if command is Command.FOCUS_NEXT:
        state.focus.advance()
    elif command is Command.FOCUS_ALTERNATE:
        if state.reverse_focus_cycle:
            state.focus.retreat()
        else:
            state.focus.advance()
    elif command in NAVIGATION:
        NAVIGATION[command](state.active_widget)
    return False


def update(state: DashboardState, event: Event) -> Tuple[DashboardState, bool]:
    """
    Apply one event and return (new_state, fetch_requested).

    fetch_requested tells the caller to start a snapshot fetch and deliver
    its result later as a DataLoaded event.
    """
    state = state.clone()
    if isinstance(event, Resize):
        state.terminal_width = max(0, event.width)
        state.terminal_height = max(0, event.height)
        _apply_layout(state)
        return state, False
    if isinstance(event, DataLoaded):
        _install_snapshot(state, event.snapshot)
        return state, False
    if isinstance(event, KeyPressed):
        return state, _handle_command(state, event.command)
    raise TypeError(f"Unknown event: {event!r}")
