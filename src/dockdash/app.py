"""Textual-based UI for dockdash."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from .backend import DockerBackend
from .config import AppConfig
from .model import ResourceSnapshot
from .render import StyleConfig, render
from .state import Command, DataLoaded, DashboardState, Event, KeyPressed, Resize, initial_state, update

logger = logging.getLogger(__name__)


class DashboardApp(App[None]):
    TITLE = "dockdash"

    CSS = """
    Screen {
      layout: vertical;
      overflow: hidden;
    }

    #frame {
      width: 100%;
      height: 100%;
    }
    """

    def __init__(self, config: Optional[AppConfig] = None, backend: Optional[DockerBackend] = None) -> None:
        super().__init__()
        self.app_config = config or AppConfig()
        self.backend = backend or DockerBackend()
        self.frame_style = StyleConfig.from_theme(self.app_config.ui.color_theme)
        self.state: DashboardState = initial_state(
            list_heights=self.app_config.ui.list_heights,
            reverse_focus_cycle=self.app_config.ui.reverse_focus_cycle,
        )

    def compose(self) -> ComposeResult:
        yield Static("", id="frame")

    def on_mount(self) -> None:
        self._start_fetch()
        self._render_frame()

    def on_resize(self, event: events.Resize) -> None:
        self.apply_event(Resize(event.size.width, event.size.height))

    async def on_key(self, event: events.Key) -> None:
        name = self.app_config.keybindings.command_for(event.key)
        if name is None:
            return
        event.stop()
        event.prevent_default()
        self.apply_event(KeyPressed(Command(name)))

    def apply_event(self, event: Event) -> None:
        """Feed one event through update() and act on the result."""
        if self.state.terminated:
            return
        self.state, fetch_requested = update(self.state, event)
        if self.state.terminated:
            self.exit()
            return
        if fetch_requested:
            self._start_fetch()
        self._render_frame()

    def _start_fetch(self) -> None:
        # Not exclusive: overlapping refreshes all finish and the last one wins.
        self.run_worker(self._load_snapshot(), group="fetch", exclusive=False, thread=False)

    async def _load_snapshot(self) -> None:
        logger.debug("Fetching resource snapshot")
        snapshot: ResourceSnapshot = await asyncio.to_thread(self.backend.fetch_snapshot)
        self.apply_event(DataLoaded(snapshot))

    def _render_frame(self) -> None:
        self.query_one("#frame", Static).update(render(self.state, self.frame_style))
