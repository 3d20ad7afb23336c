" generic fixtures "
import pytest

from hyprdock.config import MonitorConfiguration
from hyprdock.logging_setup import get_logger

from .testtools import FakeRunner


def pytest_configure():
    "Runs once before all"
    from hyprdock.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


# Sample `hyprctl monitors` outputs

INTERNAL_MON = """Monitor eDP-1 (ID 0):
	1920x1080@60.00800 at 0x0
	description: Chimei Innolux Corporation 0x14E5
	focused: yes
"""

EXTERNAL_MON = """Monitor HDMI-A-1 (ID 1):
	2560x1440@59.95100 at 1920x0
	description: Dell Inc. DELL U2719D
	focused: no
"""

BOTH_MONS = INTERNAL_MON + "\n" + EXTERNAL_MON


@pytest.fixture
def test_logger():
    return get_logger("tests")


@pytest.fixture
def config():
    "Configuration where every command is named after its purpose"
    return MonitorConfiguration(
        monitor_name="eDP-1",
        open_bar_command="open-bar",
        close_bar_command="close-bar",
        reload_bar_command="reload-bar",
        suspend_command="suspend",
        lock_command="lock",
        utility_command="pause-media",
        get_monitors_command="list-monitors",
        enable_internal_monitor_command="enable-internal",
        disable_internal_monitor_command="disable-internal",
        enable_external_monitor_command="enable-external",
        disable_external_monitor_command="disable-external",
        extend_command="extend",
        mirror_command="mirror",
        wallpaper_command="wallpaper",
    )


@pytest.fixture
def runner():
    return FakeRunner()
