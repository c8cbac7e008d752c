"""
dockdash - A read-only Terminal User Interface (TUI) dashboard for Docker.

This module provides a Textual-based dashboard showing containers, images,
volumes and networks side by side with a detail panel for the selected item.

Features:
  - Four stacked, independently scrollable lists (Containers, Images, Volumes, Networks)
  - Detail panel synchronized with the focused list
  - Background loading (the UI stays responsive while Docker answers)
  - Responsive two-column layout
  - Manual refresh

Main Components:
  - app.py: Textual application and event wiring
  - state.py: Dashboard state and the update() transition function
  - backend.py: Docker API wrapper (one all-or-nothing snapshot fetch)
  - render.py: rich rendering of a frame
  - model.py: Data structures (ContainerInfo, ImageInfo, VolumeInfo, ...)

Usage:
  python -m dockdash

Dependencies:
  - docker>=7.0.0
  - textual, rich, PyYAML
  - Python 3.10+
"""

import os
from pathlib import Path

__version__ = "0.1.0"


def get_log_path() -> str:
    """
    Get the log file path following XDG Base Directory spec.

    Returns XDG_DATA_HOME/dockdash/logs/dockdash.log with fallback to /tmp.
    Creates directory if it doesn't exist.

    Returns:
        str: Absolute path to log file (/tmp/dockdash.log as fallback)
    """
    # Try XDG_DATA_HOME first (Linux/macOS)
    xdg_data_home = os.environ.get('XDG_DATA_HOME')
    if not xdg_data_home:
        # Default fallback: ~/.local/share
        home = Path.home()
        xdg_data_home = home / '.local' / 'share'
    else:
        xdg_data_home = Path(xdg_data_home)

    log_dir = xdg_data_home / 'dockdash' / 'logs'

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        return str(log_dir / 'dockdash.log')
    except (PermissionError, OSError):
        # Fallback to /tmp if permission denied
        return '/tmp/dockdash.log'
