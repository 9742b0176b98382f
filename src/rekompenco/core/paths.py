"""
Platform application-data directory resolution.

The achievement file lives in the per-user, roaming application-data
directory of the current platform:

    Windows   %APPDATA%\\Rekompenco\\default_rekompenco.rkpc
    macOS     ~/Library/Application Support/Rekompenco/default_rekompenco.rkpc
    other     $XDG_DATA_HOME/Rekompenco/default_rekompenco.rkpc
              (XDG_DATA_HOME defaults to ~/.local/share)

Nothing here creates directories; the store does that on first use.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from rekompenco.core.constants import APP_DIR_NAME, CONFIG_FILENAME, STORE_FILENAME


def application_data_dir(platform: str | None = None) -> Path:
    """Return the user application-data directory for ``platform`` (default: current)."""
    platform = platform or sys.platform
    if platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg_data = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(xdg_data)


def rekompenco_dir(platform: str | None = None) -> Path:
    """Return the Rekompenco directory inside the application-data directory."""
    return application_data_dir(platform) / APP_DIR_NAME


def default_store_path(platform: str | None = None) -> Path:
    """Return the full path of the default achievement file."""
    return rekompenco_dir(platform) / STORE_FILENAME


def default_config_path(platform: str | None = None) -> Path:
    """Return the full path of the default config file."""
    return rekompenco_dir(platform) / CONFIG_FILENAME
