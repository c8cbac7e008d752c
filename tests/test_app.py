from unittest.mock import MagicMock

import pytest

from dockdash.app import DashboardApp
from dockdash.config import AppConfig
from dockdash.state import Command, DataLoaded, KeyPressed, Phase, Resize


@pytest.fixture
def app(mocker, snapshot):
    backend = MagicMock()
    backend.fetch_snapshot.return_value = snapshot
    dashboard = DashboardApp(AppConfig(), backend=backend)
    mocker.patch.object(dashboard, "_render_frame")
    mocker.patch.object(dashboard, "_start_fetch")
    mocker.patch.object(dashboard, "exit")
    return dashboard


def test_data_loaded_renders_ready_state(app, snapshot):
    app.apply_event(DataLoaded(snapshot))
    assert app.state.phase is Phase.READY
    app._render_frame.assert_called_once()
    app._start_fetch.assert_not_called()


def test_refresh_starts_fetch(app, snapshot):
    app.apply_event(DataLoaded(snapshot))
    app.apply_event(KeyPressed(Command.REFRESH))
    app._start_fetch.assert_called_once()
    assert app.state.phase is Phase.LOADING


def test_quit_exits_and_ignores_later_events(app, snapshot):
    app.apply_event(KeyPressed(Command.QUIT))
    app.exit.assert_called_once()
    app.apply_event(DataLoaded(snapshot))
    assert app.state.phase is Phase.LOADING
    app._render_frame.assert_not_called()


def test_resize_updates_dimensions(app):
    app.apply_event(Resize(120, 40))
    assert (app.state.terminal_width, app.state.terminal_height) == (120, 40)


def test_config_drives_initial_state():
    config = AppConfig()
    config.ui.list_heights = [3, 3, 3, 3]
    config.ui.reverse_focus_cycle = True
    dashboard = DashboardApp(config, backend=MagicMock())
    assert [w.visible_height for w in dashboard.state.widgets] == [3, 3, 3, 3]
    assert dashboard.state.reverse_focus_cycle is True
