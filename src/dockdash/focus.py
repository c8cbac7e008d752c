"""Keyboard focus cursor over the list widgets."""

from typing import Sequence

from .widgets import ListWidget


class FocusController:
    """
    Owns which list receives navigation keys and drives the detail panel.

    Every change re-syncs the widgets so exactly one of them is focused.
    """

    def __init__(self, widgets: Sequence[ListWidget], active_index: int = 0):
        if not widgets:
            raise ValueError("FocusController needs at least one widget")
        self.widgets = list(widgets)
        self.active_index = active_index % len(self.widgets)

    @property
    def active(self) -> ListWidget:
        return self.widgets[self.active_index]

    def advance(self) -> int:
        return self.set_index(self.active_index + 1)

    def retreat(self) -> int:
        return self.set_index(self.active_index - 1)

    def set_index(self, index: int) -> int:
        self.active_index = index % len(self.widgets)
        self.sync()
        return self.active_index

    def sync(self) -> None:
        for i, widget in enumerate(self.widgets):
            if i == self.active_index:
                widget.focus()
            else:
                widget.blur()
