from dockdash.config import ColorTheme
from dockdash.model import FetchFailure, ResourceSnapshot
from dockdash.render import HELP_TEXT, StyleConfig, render_text
from dockdash.state import Command, DataLoaded, KeyPressed, Resize, initial_state, update


def _ready(snapshot, size=None):
    state, _ = update(initial_state(), DataLoaded(snapshot))
    if size:
        state, _ = update(state, Resize(*size))
    return state


def test_loading_frame():
    text = render_text(initial_state(), width=80)
    assert text.strip() == "Loading data..."


def test_error_frame_has_no_tables(snapshot):
    state = _ready(snapshot)
    state, _ = update(state, KeyPressed(Command.REFRESH))
    state, _ = update(state, DataLoaded(ResourceSnapshot.failed(FetchFailure(OSError("daemon unreachable")))))
    text = render_text(state, width=120)
    assert "Error: daemon unreachable" in text
    assert "Press q to quit." in text
    assert "Docker Containers" not in text
    assert "Container Info" not in text
    assert "nginx" not in text


def test_ready_frame_stacked(snapshot):
    text = render_text(_ready(snapshot), width=220)
    for title in ("Docker Containers", "Docker Images", "Docker Volumes", "Docker Networks", "Container Info"):
        assert title in text
    assert "pgdata" in text
    assert "Name: web" in text
    assert HELP_TEXT in text
    assert "Loading data..." not in text


def test_ready_frame_split_layout(snapshot):
    state = _ready(snapshot, size=(160, 50))
    text = render_text(state)
    lines = text.splitlines()
    assert max(len(line) for line in lines) <= 160
    assert "Image Info" not in text
    assert "Container Info" in text


def test_detail_title_follows_focus(snapshot):
    state = _ready(snapshot, size=(160, 50))
    state, _ = update(state, KeyPressed(Command.FOCUS_NEXT))
    text = render_text(state)
    assert "Image Info" in text
    assert "RepoTags: nginx:latest, nginx:1.27" in text


def test_refresh_keeps_dashboard_with_notice(snapshot):
    state = _ready(snapshot)
    state, _ = update(state, KeyPressed(Command.REFRESH))
    text = render_text(state, width=220)
    assert "Docker Containers" in text
    assert "Loading data..." in text


def test_style_from_theme():
    theme = ColorTheme(border="blue", selected="black on white")
    style = StyleConfig.from_theme(theme)
    assert style.border == "blue"
    assert style.selected == "black on white"
    assert style.help == theme.help


def test_detail_box_spans_right_column(snapshot):
    lines = render_text(_ready(snapshot, size=(100, 40))).splitlines()
    top = lines[0].rstrip()
    detail_start = top.index("┌", 1)
    assert detail_start == 30
    assert len(top) - detail_start == 70
    assert top.endswith("┐")


def test_list_table_fills_panel_inner_width(snapshot):
    lines = render_text(_ready(snapshot, size=(100, 40))).splitlines()
    # Header separator row of the containers table, between the panel borders.
    assert lines[2][:30] == "│" + "─" * 28 + "│"


def test_invalid_style_is_rejected_before_render(tmp_path, snapshot):
    from dockdash.config import ConfigManager

    path = tmp_path / "config.yaml"
    path.write_text("ui:\n  color_theme:\n    border: not-a-colour\n")
    style = StyleConfig.from_theme(ConfigManager(path).get_config().ui.color_theme)
    assert "Docker Containers" in render_text(_ready(snapshot, size=(100, 40)), style)
