import textwrap

from dockdash.config import AppConfig, ConfigManager, KeyBindings, default_config_path


def _write(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(body))
    return path


def test_missing_file_uses_defaults_and_writes_nothing(tmp_path):
    path = tmp_path / "nope" / "config.yaml"
    manager = ConfigManager(path)
    assert manager.get_config() == AppConfig()
    assert not path.exists()


def test_user_values_merge_over_defaults(tmp_path):
    path = _write(tmp_path, """
        keybindings:
          quit: x
          refresh: [r, F5]
        ui:
          reverse_focus_cycle: true
          list_heights: [6, 6, 6, 6]
          color_theme:
            border: blue
        logging:
          level: debug
    """)
    config = ConfigManager(path).get_config()

    assert config.keybindings.quit == ["x"]
    assert config.keybindings.refresh == ["r", "F5"]
    assert config.keybindings.up == ["up", "k"]
    assert config.ui.reverse_focus_cycle is True
    assert config.ui.list_heights == [6, 6, 6, 6]
    assert config.ui.color_theme.border == "blue"
    assert config.ui.color_theme.title == "bold color(170)"
    assert ConfigManager(path).get_log_level() == "DEBUG"


def test_invalid_yaml_falls_back_to_defaults(tmp_path):
    path = _write(tmp_path, "ui: [unclosed\n")
    assert ConfigManager(path).get_config() == AppConfig()


def test_non_mapping_falls_back_to_defaults(tmp_path):
    path = _write(tmp_path, "- just\n- a list\n")
    assert ConfigManager(path).get_config() == AppConfig()


def test_env_var_overrides_path(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCKDASH_CONFIG", str(tmp_path / "custom.yaml"))
    assert default_config_path() == tmp_path / "custom.yaml"


def test_command_lookup_is_case_sensitive():
    bindings = KeyBindings()
    assert bindings.command_for("g") == "top"
    assert bindings.command_for("G") == "bottom"
    assert bindings.command_for("tab") == "focus_next"
    assert bindings.command_for("left") == "focus_alternate"
    assert bindings.command_for("ctrl+c") == "quit"
    assert bindings.command_for("z") is None


def test_custom_log_path(tmp_path):
    path = _write(tmp_path, """
        logging:
          file_path: /tmp/dd.log
    """)
    assert ConfigManager(path).get_custom_log_path() == "/tmp/dd.log"


def test_non_mapping_sections_fall_back_to_defaults(tmp_path):
    path = _write(tmp_path, """
        ui:
          color_theme: dark
        logging: verbose
    """)
    assert ConfigManager(path).get_config() == AppConfig()


def test_scalar_logging_section_falls_back_to_defaults(tmp_path):
    path = _write(tmp_path, "logging: verbose\n")
    assert ConfigManager(path).get_config() == AppConfig()


def test_invalid_theme_style_falls_back_to_defaults(tmp_path):
    path = _write(tmp_path, """
        ui:
          reverse_focus_cycle: true
          color_theme:
            border: not-a-colour
    """)
    config = ConfigManager(path).get_config()
    assert config == AppConfig()
    assert config.ui.reverse_focus_cycle is False


def test_valid_theme_styles_are_kept(tmp_path):
    path = _write(tmp_path, """
        ui:
          color_theme:
            selected: "black on white"
            error: "bold #ff0000"
    """)
    theme = ConfigManager(path).get_config().ui.color_theme
    assert theme.selected == "black on white"
    assert theme.error == "bold #ff0000"
