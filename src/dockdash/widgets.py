"""
Scrollable list widget state and the per-category row builders.

One generic ListWidget is instantiated per resource category; what differs
between categories is only how a record becomes a row and which cell of the
row identifies it. Both are supplied by the category registry.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .formatting import format_size_mb, short_id, shorten_id, trim_to
from .model import ContainerInfo, ImageInfo, NetworkInfo, VolumeInfo

Row = Tuple[str, ...]

NONE_TAG = "<none>:<none>"


@dataclass(frozen=True)
class Column:
    title: str
    width: Optional[int] = None  # None: sized to content


CONTAINER_COLUMNS = (
    Column("Container ID", 12),
    Column("Image", 25),
    Column("Command"),
    Column("Status"),
    Column("Name"),
)
IMAGE_COLUMNS = (Column("Repository:Tag", 30), Column("Image ID", 12), Column("Size", 10))
VOLUME_COLUMNS = (Column("Name", 25), Column("Driver", 12), Column("Mountpoint", 40))
NETWORK_COLUMNS = (
    Column("Name", 22),
    Column("Network ID", 12),
    Column("Driver", 10),
    Column("Scope", 10),
)


def container_row(c: ContainerInfo) -> Row:
    return (short_id(c.id), trim_to(c.image, 25), trim_to(c.command, 20), c.status, c.name)


def image_row(i: ImageInfo) -> Row:
    repo_tag = i.repo_tags[0] if i.repo_tags else NONE_TAG
    return (repo_tag, shorten_id(i.id), format_size_mb(i.size))


def volume_row(v: VolumeInfo) -> Row:
    return (v.name, v.driver, trim_to(v.mountpoint, 40))


def network_row(n: NetworkInfo) -> Row:
    return (n.name, shorten_id(n.id), n.driver, n.scope)


class ListWidget:
    """Rows, selection cursor, scroll window and focus flag of one list."""

    def __init__(self, build_row: Callable[[object], Row], key_index: int = 0, visible_height: int = 10):
        self.build_row = build_row
        self.key_index = key_index
        self.rows: List[Row] = []
        self.selected_index: Optional[int] = None
        self.scroll_offset = 0
        self.focused = False
        self.visible_width: Optional[int] = None
        self.visible_height = max(1, visible_height)

    def clone(self) -> "ListWidget":
        other = ListWidget(self.build_row, self.key_index, self.visible_height)
        other.rows = list(self.rows)
        other.selected_index = self.selected_index
        other.scroll_offset = self.scroll_offset
        other.focused = self.focused
        other.visible_width = self.visible_width
        return other

    def load(self, records: Sequence[object]) -> None:
        self.set_rows([self.build_row(r) for r in records])

    def set_rows(self, rows: Sequence[Row]) -> None:
        self.rows = list(rows)
        if not self.rows:
            self.selected_index = None
            self.scroll_offset = 0
            return
        index = self.selected_index or 0
        self.selected_index = max(0, min(index, len(self.rows) - 1))
        self._scroll_into_view()

    def move_selection(self, delta: int) -> None:
        if not self.rows:
            return
        index = (self.selected_index or 0) + delta
        self.selected_index = max(0, min(index, len(self.rows) - 1))
        self._scroll_into_view()

    def goto_top(self) -> None:
        if self.rows:
            self.move_selection(-len(self.rows))

    def goto_bottom(self) -> None:
        if self.rows:
            self.move_selection(len(self.rows))

    def page(self, direction: int) -> None:
        self.move_selection(direction * self.visible_height)

    def half_page(self, direction: int) -> None:
        self.move_selection(direction * max(1, self.visible_height // 2))

    def _scroll_into_view(self) -> None:
        index = self.selected_index or 0
        if index < self.scroll_offset:
            self.scroll_offset = index
        elif index >= self.scroll_offset + self.visible_height:
            self.scroll_offset = index - self.visible_height + 1
        max_offset = max(0, len(self.rows) - self.visible_height)
        self.scroll_offset = max(0, min(self.scroll_offset, max_offset))

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def set_visible_width(self, width: Optional[int]) -> None:
        self.visible_width = width

    def set_visible_height(self, height: int) -> None:
        self.visible_height = max(1, height)
        if self.rows:
            self._scroll_into_view()

    def selected_row(self) -> Optional[Row]:
        if self.selected_index is None:
            return None
        return self.rows[self.selected_index]

    def selected_key(self) -> Optional[str]:
        row = self.selected_row()
        if row is None or len(row) <= self.key_index:
            return None
        return row[self.key_index]

    def visible_rows(self) -> List[Tuple[int, Row]]:
        """(index, row) pairs inside the scroll window."""
        end = self.scroll_offset + self.visible_height
        return list(enumerate(self.rows))[self.scroll_offset:end]
