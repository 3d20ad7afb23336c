import pytest

from hyprdock.config import COMMAND_FIELDS, DEFAULT_CONFIG, MonitorConfiguration, expand_variables
from hyprdock.config_loader import ConfigLoader
from hyprdock.constants import ACPID_SOCKET
from hyprdock.models import HyprDockError


def test_expand_variables():
    assert expand_variables("hyprctl keyword monitor {monitor_name},disabled", {"monitor_name": "eDP-1"}) == (
        "hyprctl keyword monitor eDP-1,disabled"
    )
    assert expand_variables("echo {unknown}", {"monitor_name": "eDP-1"}) == "echo {unknown}"


@pytest.mark.asyncio
async def test_missing_file_uses_defaults(tmp_path, test_logger):
    conf = await ConfigLoader(test_logger).load(str(tmp_path / "missing.toml"))
    assert conf.monitor_name == "eDP-1"
    assert conf.get_monitors_command == "hyprctl monitors"
    assert conf.enable_internal_monitor_command == "hyprctl keyword monitor eDP-1,highrr,0x0,1"
    assert conf.disable_internal_monitor_command == "hyprctl keyword monitor eDP-1,disabled"
    assert conf.settle_delay_ms == 1000
    assert conf.settle_delay == 1.0
    assert conf.event_socket == ACPID_SOCKET
    for name in COMMAND_FIELDS:
        assert getattr(conf, name).split()
    assert "{" not in "".join(getattr(conf, name) for name in COMMAND_FIELDS)


@pytest.mark.asyncio
async def test_partial_override(tmp_path, test_logger):
    path = tmp_path / "hyprdock.toml"
    path.write_text("monitor_name = 'eDP-2'\nopen_bar_command = 'waybar'\nsettle_delay_ms = 500\n")
    conf = await ConfigLoader(test_logger).load(str(path))
    assert conf.monitor_name == "eDP-2"
    assert conf.open_bar_command == "waybar"
    assert conf.close_bar_command == "eww close-all"
    assert conf.enable_internal_monitor_command == "hyprctl keyword monitor eDP-2,highrr,0x0,1"
    assert conf.settle_delay == 0.5


@pytest.mark.asyncio
async def test_malformed_file(tmp_path, test_logger):
    path = tmp_path / "hyprdock.toml"
    path.write_text("monitor_name = 'eDP-1\n")
    with pytest.raises(HyprDockError):
        await ConfigLoader(test_logger).load(str(path))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "contents",
    [
        "lock_command = ''",
        "lock_command = '   '",
        "suspend_command = 42",
        "settle_delay_ms = -1",
        "settle_delay_ms = 'slow'",
        "event_socket = ''",
    ],
)
async def test_invalid_values(tmp_path, test_logger, contents):
    path = tmp_path / "hyprdock.toml"
    path.write_text(contents + "\n")
    with pytest.raises(HyprDockError):
        await ConfigLoader(test_logger).load(str(path))


def test_from_dict_missing_field(test_logger):
    with pytest.raises(HyprDockError):
        MonitorConfiguration.from_dict({"monitor_name": "eDP-1"}, test_logger)


def test_default_config_is_complete(test_logger):
    import tomllib

    data = tomllib.loads(DEFAULT_CONFIG)
    assert set(data) == {"monitor_name", *COMMAND_FIELDS}
    conf = MonitorConfiguration.from_dict(data, test_logger)
    with pytest.raises(AttributeError):
        conf.monitor_name = "HDMI-A-1"  # type: ignore[misc]


@pytest.mark.asyncio
async def test_unknown_keys_are_ignored(tmp_path, test_logger, mocker):
    path = tmp_path / "hyprdock.toml"
    path.write_text("monitor_name = 'eDP-1'\ncss_string = 'x'\n")
    warning = mocker.spy(test_logger, "warning")
    conf = await ConfigLoader(test_logger).load(str(path))
    assert conf.monitor_name == "eDP-1"
    assert not hasattr(conf, "css_string")
    warning.assert_called_once_with("Ignoring unknown configuration keys: %s", "css_string")


@pytest.mark.asyncio
async def test_zero_settle_delay(tmp_path, test_logger):
    path = tmp_path / "hyprdock.toml"
    path.write_text("settle_delay_ms = 0\n")
    conf = await ConfigLoader(test_logger).load(str(path))
    assert conf.settle_delay == 0


@pytest.mark.asyncio
async def test_negative_settle_delay_message(tmp_path, test_logger, mocker):
    path = tmp_path / "hyprdock.toml"
    path.write_text("settle_delay_ms = -5\n")
    critical = mocker.spy(test_logger, "critical")
    with pytest.raises(HyprDockError):
        await ConfigLoader(test_logger).load(str(path))
    assert "non-negative integer" in critical.call_args[0][0]
