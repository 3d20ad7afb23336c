"""Monitor configuration: the immutable set of commands the daemon runs."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from .constants import ACPID_SOCKET, DEFAULT_SETTLE_DELAY_MS
from .models import HyprDockError

if TYPE_CHECKING:
    import logging

__all__ = ["COMMAND_FIELDS", "DEFAULT_CONFIG", "MonitorConfiguration", "expand_variables"]

DEFAULT_CONFIG = """\
monitor_name = 'eDP-1'
open_bar_command = 'eww open bar'
close_bar_command = 'eww close-all'
reload_bar_command = 'eww reload'
suspend_command = 'systemctl suspend'
lock_command = 'swaylock -c 000000'
utility_command = 'playerctl --all-players -a pause'
get_monitors_command = 'hyprctl monitors'
enable_internal_monitor_command = 'hyprctl keyword monitor {monitor_name},highrr,0x0,1'
disable_internal_monitor_command = 'hyprctl keyword monitor {monitor_name},disabled'
enable_external_monitor_command = 'hyprctl keyword monitor ,highrr,0x0,1'
disable_external_monitor_command = 'hyprctl keyword monitor ,disabled'
extend_command = 'hyprctl keyword monitor ,highrr,1920x0,1'
mirror_command = 'hyprctl keyword monitor ,highrr,0x0,1'
wallpaper_command = 'hyprctl dispatch hyprpaper'
"""

COMMAND_FIELDS = (
    "open_bar_command",
    "close_bar_command",
    "reload_bar_command",
    "suspend_command",
    "lock_command",
    "utility_command",
    "get_monitors_command",
    "enable_internal_monitor_command",
    "disable_internal_monitor_command",
    "enable_external_monitor_command",
    "disable_external_monitor_command",
    "extend_command",
    "mirror_command",
    "wallpaper_command",
)


def expand_variables(template: str, variables: dict[str, str]) -> str:
    """Replace {var_name} with content from supplied variables.

    Unknown variables are left untouched.

    Args:
        template: the string template
        variables: a dict containing the variables to replace
    """

    def replace(match: re.Match[str]) -> str:
        return variables.get(match.group(1), match.group(0))

    return re.sub(r"\{([a-z_]+)\}", replace, template)


@dataclass(frozen=True)
class MonitorConfiguration:  # pylint: disable=too-many-instance-attributes
    """Configured monitor name & command lines, read-only once loaded."""

    monitor_name: str
    open_bar_command: str
    close_bar_command: str
    reload_bar_command: str
    suspend_command: str
    lock_command: str
    utility_command: str
    get_monitors_command: str
    enable_internal_monitor_command: str
    disable_internal_monitor_command: str
    enable_external_monitor_command: str
    disable_external_monitor_command: str
    extend_command: str
    mirror_command: str
    wallpaper_command: str
    settle_delay_ms: int = DEFAULT_SETTLE_DELAY_MS
    event_socket: str = ACPID_SOCKET

    @property
    def settle_delay(self) -> float:
        """Settle delay in seconds."""
        return self.settle_delay_ms / 1000

    @classmethod
    def from_dict(cls, data: dict[str, Any], log: logging.Logger) -> MonitorConfiguration:
        """Build a configuration from parsed TOML, validating every field.

        `{monitor_name}` in command templates is replaced with the monitor name.

        Raises:
            HyprDockError: on missing or empty strings, bad delay or socket path
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            log.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values: dict[str, Any] = {}
        for name in ("monitor_name", *COMMAND_FIELDS):
            value = data.get(name)
            if not isinstance(value, str) or not value.split():
                log.critical("Configuration option `%s` must be a non-empty string, got %r", name, value)
                raise HyprDockError
            values[name] = value.strip()

        delay = data.get("settle_delay_ms", DEFAULT_SETTLE_DELAY_MS)
        if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
            log.critical("Configuration option `settle_delay_ms` must be a non-negative integer, got %r", delay)
            raise HyprDockError
        values["settle_delay_ms"] = delay

        socket_path = data.get("event_socket", ACPID_SOCKET)
        if not isinstance(socket_path, str) or not socket_path.strip():
            log.critical("Configuration option `event_socket` must be a path, got %r", socket_path)
            raise HyprDockError
        values["event_socket"] = socket_path.strip()

        variables = {"monitor_name": values["monitor_name"]}
        for name in COMMAND_FIELDS:
            values[name] = expand_variables(values[name], variables)
        return cls(**values)
