"""
Tests for the devlocker command line — devices and config are mocked.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from devlocker import Device, ErrorLockDevice, ErrorOpenDevicePermissionDenied
from devlocker.cli import cli, main
from devlocker.config import DEFAULTS


class FakePort(Device):
    open_error = None
    instances = []

    def __init__(self, device, baudrate=115200, lock=True):
        Device.__init__(self, device)
        self.baudrate = baudrate
        self.lock = lock
        self.closed = False
        FakePort.instances.append(self)

    def open(self):
        if self.open_error:
            raise self.open_error

    def close(self):
        self.closed = True


@pytest.fixture
def fake_port():
    FakePort.open_error = None
    FakePort.instances = []
    with patch("devlocker.cli.load_config", return_value=dict(DEFAULTS)), \
            patch("devlocker.cli.SerialPort", FakePort):
        yield FakePort


def _invoke(args):
    return CliRunner().invoke(cli, args, obj={})


def test_check_ok(fake_port):
    result = _invoke(["check", "-d", "/dev/ttyUSB0"])

    assert result.exit_code == 0
    assert "Open /dev/ttyUSB0 OK" in result.output
    port = fake_port.instances[0]
    assert port.closed
    assert port.baudrate == 115200
    assert port.lock is True


def test_check_options(fake_port):
    result = _invoke(["-d", "/dev/ttyACM0", "check", "--baudrate", "921600", "--no-lock"])

    assert result.exit_code == 0
    port = fake_port.instances[0]
    assert port.name == "/dev/ttyACM0"
    assert port.baudrate == 921600
    assert port.lock is False


def test_check_lock_error_shows_tip(fake_port):
    fake_port.open_error = ErrorLockDevice("Could not lock device /dev/ttyUSB0")

    result = _invoke(["check", "-d", "/dev/ttyUSB0"])

    assert result.exit_code == 1
    assert "Could not lock device /dev/ttyUSB0" in result.output
    assert "TIP" in result.output


def test_check_permission_error(fake_port):
    fake_port.open_error = ErrorOpenDevicePermissionDenied("Permission denied to open device /dev/ttyUSB0")

    with patch("devlocker.cli.platform.system", return_value="Darwin"):
        result = _invoke(["check", "-d", "/dev/ttyUSB0"])

    assert result.exit_code == 1
    assert "Permission denied" in result.output


def test_devices(fake_port):
    ports = [("/dev/ttyUSB0", "FT231X USB UART", "USB VID:PID=0403:6015 SER=bc-123")]
    with patch("devlocker.cli.get_devices", return_value=ports):
        result = _invoke(["devices", "-v"])

    assert result.exit_code == 0
    assert "/dev/ttyUSB0" in result.output
    assert "desc: FT231X USB UART" in result.output
    assert "SER=bc-123" in result.output


def test_help(fake_port):
    result = _invoke(["help", "check"])
    assert result.exit_code == 0
    assert "Open and close device." in result.output


def test_main_reports_error(fake_port, capsys, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr("sys.argv", ["devlocker", "check", "-d", "/dev/ttyUSB0"])
    fake_port.open_error = IOError("Input/output error")

    with pytest.raises(SystemExit) as excinfo:
        main()

    assert excinfo.value.code == 1
    assert "Input/output error" in capsys.readouterr().err
