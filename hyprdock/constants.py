"""Shared constants for hyprdock."""

import os
from pathlib import Path

__all__ = [
    "ACPID_SOCKET",
    "CONFIG_FILE",
    "DEFAULT_SETTLE_DELAY_MS",
    "EVENT_READ_SIZE",
    "EXTERNAL_MONITOR_MARKER",
    "LID_CLOSE_RECORD",
    "LID_OPEN_RECORD",
]

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "hypr" / "hyprdock.toml"

ACPID_SOCKET = "/var/run/acpid.socket"

# A single acpid record always fits in one read
EVENT_READ_SIZE = 1024

LID_CLOSE_RECORD = "button/lid LID close\n"
LID_OPEN_RECORD = "button/lid LID open\n"

# Present in the monitor listing only when a second display is enumerated
EXTERNAL_MONITOR_MARKER = "ID 1"

# Wait after switching to the external monitor, before restarting bar & wallpaper
DEFAULT_SETTLE_DELAY_MS = 1000
