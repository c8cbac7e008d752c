"""
Configuration management for dockdash.

This module provides configuration file support with YAML format,
user preferences, and default settings.

Features:
- YAML configuration file at ~/.config/dockdash/config.yaml
  (or the path in $DOCKDASH_CONFIG)
- Default values with user overrides
- Keybinding customization (several keys per command)
- Color theme support
- Log location override

Architecture:
- ConfigManager: Main configuration interface
- Merges user config with defaults
- Provides typed access to settings
- Handles missing/invalid config gracefully (the file is only read)
"""

import os
import yaml
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field, fields
from pathlib import Path

from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DOCKDASH_CONFIG"


def _keys(*names: str):
    return field(default_factory=lambda: list(names))


@dataclass
class KeyBindings:
    """Customizable key bindings, one list of key names per command."""
    quit: List[str] = _keys("q", "ctrl+c", "escape")
    refresh: List[str] = _keys("r")
    focus_next: List[str] = _keys("tab", "right")
    focus_alternate: List[str] = _keys("left")
    up: List[str] = _keys("up", "k")
    down: List[str] = _keys("down", "j")
    page_up: List[str] = _keys("pageup", "b")
    page_down: List[str] = _keys("pagedown", "f", "space")
    half_page_up: List[str] = _keys("ctrl+u", "u")
    half_page_down: List[str] = _keys("ctrl+d", "d")
    top: List[str] = _keys("home", "g")
    bottom: List[str] = _keys("end", "G")

    def command_for(self, key: str) -> Optional[str]:
        """Name of the command bound to `key`, or None. Case-sensitive ("g" vs "G")."""
        for f in fields(self):
            if key in getattr(self, f.name):
                return f.name
        return None


@dataclass
class ColorTheme:
    """Color theme configuration (rich style strings)."""
    name: str = "default"
    border: str = "color(240)"
    focused_border: str = "color(170)"
    title: str = "bold color(170)"
    header: str = "bold color(170)"
    selected: str = "color(229) on color(57)"
    help: str = "color(241)"
    error: str = "bold red"


@dataclass
class UIConfig:
    """UI-related configuration."""
    color_theme: ColorTheme = field(default_factory=ColorTheme)
    list_heights: List[int] = field(default_factory=lambda: [12, 8, 8, 12])
    reverse_focus_cycle: bool = False


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file_path: Optional[str] = None  # None for default
    max_size_mb: int = 10
    backup_count: int = 5


@dataclass
class AppConfig:
    """Main application configuration."""
    keybindings: KeyBindings = field(default_factory=KeyBindings)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LogConfig = field(default_factory=LogConfig)


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "dockdash" / "config.yaml"


class ConfigManager:
    """Configuration manager with YAML file support."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else default_config_path()
        self._config: AppConfig = AppConfig()
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_file.exists():
            logger.debug(f"No configuration at {self.config_file}, using defaults")
            self._config = AppConfig()
            return
        try:
            with open(self.config_file, 'r') as f:
                user_config = yaml.safe_load(f) or {}
            if not isinstance(user_config, dict):
                raise ValueError("top level must be a mapping")

            # Merge with defaults
            config = self._merge_configs(AppConfig(), user_config)
            self._validate_theme(config.ui.color_theme)
            self._config = config
            logger.debug(f"Loaded configuration from {self.config_file}")
        except (OSError, yaml.YAMLError, ValueError, TypeError, StyleSyntaxError) as e:
            logger.error(f"Failed to load config: {e}, using defaults")
            self._config = AppConfig()

    def get_config(self) -> AppConfig:
        """Get current configuration."""
        return self._config

    def _merge_configs(self, default: AppConfig, user: Dict[str, Any]) -> AppConfig:
        """Merge user config with defaults."""
        if 'keybindings' in user:
            bindings = {
                action: [keys] if isinstance(keys, str) else list(keys)
                for action, keys in self._section(user, 'keybindings').items()
            }
            self._merge_dataclass(default.keybindings, bindings)
        if 'ui' in user:
            ui = self._section(user, 'ui')
            theme = self._section(ui, 'color_theme')
            ui.pop('color_theme', None)
            self._merge_dataclass(default.ui, ui)
            self._merge_dataclass(default.ui.color_theme, theme)
            default.ui.list_heights = [int(h) for h in default.ui.list_heights]
        if 'logging' in user:
            self._merge_dataclass(default.logging, self._section(user, 'logging'))

        return default

    @staticmethod
    def _section(parent: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Copy of a nested mapping; an empty or absent section is {}."""
        value = parent.get(name) or {}
        if not isinstance(value, dict):
            raise ValueError(f"'{name}' must be a mapping, got {type(value).__name__}")
        return dict(value)

    @staticmethod
    def _validate_theme(theme: ColorTheme) -> None:
        """Parse every style string so a bad one fails here, not mid-render."""
        for f in fields(theme):
            if f.name == 'name':
                continue
            value = getattr(theme, f.name)
            if not isinstance(value, str):
                raise TypeError(f"color_theme.{f.name} must be a string")
            Style.parse(value)

    def _merge_dataclass(self, obj: Any, updates: Dict[str, Any]) -> None:
        """Merge updates into dataclass object."""
        for key, value in updates.items():
            if hasattr(obj, key):
                setattr(obj, key, value)
            else:
                logger.warning(f"Ignoring unknown config key: {key}")

    def get_log_level(self) -> str:
        """Get configured log level."""
        return self._config.logging.level.upper()

    def get_custom_log_path(self) -> Optional[str]:
        """Get custom log file path if configured."""
        return self._config.logging.file_path
