"""Help text for the command line."""

from __future__ import annotations

__all__ = ["FLAGS", "get_help"]

from .app import HyprDock

# command name: flags, in help order
COMMAND_FLAGS: dict[str, tuple[str, ...]] = {
    "extend": ("--extend", "-eo"),
    "mirror": ("--mirror", "-io"),
    "internal": ("--internal", "-i"),
    "external": ("--external", "-e"),
    "server": ("--server", "-s"),
    "suspend": ("--suspend", "-su"),
    "open": ("--open",),
    "close": ("--close",),
    "wallpaper": ("--wallpaper", "-w"),
    "bar": ("--bar", "-b"),
    "fix_bar": ("--fix-bar",),
    "status": ("--status",),
    "help": ("--help", "-h"),
    "version": ("--version", "-v"),
}

BUILTIN_DOCS = {
    "help": "Show this help.",
    "version": "Show the version.",
}

FLAGS: dict[str, str] = {flag: name for name, flags in COMMAND_FLAGS.items() for flag in flags}


def get_command_doc(name: str) -> str:
    """Return the first line of the command documentation."""
    if name in BUILTIN_DOCS:
        return BUILTIN_DOCS[name]
    doc = getattr(HyprDock, f"run_{name}").__doc__ or "N/A"
    return doc.strip().split("\n")[0]


def get_help() -> str:
    """Get the documentation."""
    intro = """Syntax: hyprdock [--config <file>] [--debug <logfile>] <flag> [<flag> ...]

Flags are run in the given order.

Possible arguments are:
"""
    lines = [f"  {'/'.join(flags):20s} {get_command_doc(name)}" for name, flags in COMMAND_FLAGS.items()]
    return intro + "\n".join(lines)
