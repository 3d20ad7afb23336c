"""Hyprdock - a laptop docking daemon for Hyprland (command line entry point)."""

import asyncio
import signal
import sys

from .app import HyprDock
from .help import FLAGS, get_help
from .logging_setup import get_logger, init_logger
from .models import ExitCode, HyprDockError
from .version import VERSION

__all__ = ["main", "run_commands", "use_param"]


async def run_commands(args: list[str], config_filename: str = "") -> ExitCode:
    """Run every flag of `args`, in order.

    The configuration is only loaded once a flag needs it.
    """
    app: HyprDock | None = None
    for arg in args:
        name = FLAGS.get(arg)
        if name is None:
            print(f"Could not parse {arg}")
            print(get_help())
            return ExitCode.USAGE_ERROR
        if name == "help":
            print(get_help())
            return ExitCode.SUCCESS
        if name == "version":
            print(VERSION)
            continue
        if app is None:
            app = await HyprDock.create(config_filename)
        await getattr(app, f"run_{name}")()
    return ExitCode.SUCCESS


def use_param(txt: str, args: list[str]) -> str:
    """Check if parameter `txt` is in `args`.

    if found, removes it from `args` & returns the argument value
    """
    v = ""
    if txt in args:
        i = args.index(txt)
        v = args[i + 1] if i + 1 < len(args) else ""
        del args[i : i + 2]
    return v


def main() -> None:
    """Run the command."""
    args = sys.argv[1:]
    debug_flag = use_param("--debug", args)
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")
    config_override = use_param("--config", args)

    if not args:
        print(get_help())
        return

    signal.signal(signal.SIGTERM, lambda *_: sys.exit(ExitCode.SUCCESS))
    try:
        exit_code = asyncio.run(run_commands(args, config_override))
    except KeyboardInterrupt:
        exit_code = ExitCode.SUCCESS
    except HyprDockError:
        log.critical("Command failed.")
        exit_code = ExitCode.FATAL_ERROR
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
