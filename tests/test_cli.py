"""
Tests for the command line interface.
"""

from unittest import mock

import pytest
from atmodem import cli
from atmodem.types import Info
from atmodem.exceptions import TransportError


def test_format_record():
    """Test records are printed one aligned field per line."""
    text = cli.format_record(Info(manufacturer="huawei", imei_sv=20, gcap=["+CGSM"]))
    lines = text.splitlines()

    assert lines[0] == "manufacturer  huawei"
    assert "imei_sv       20" in lines
    assert "gcap          ['+CGSM']" in lines


def test_main_info(capsys):
    """Test the info command prints the parsed record."""
    fake = mock.Mock()
    fake.info.return_value = Info(model="MC7455")

    with mock.patch.object(cli.ATModem, "dial", return_value=fake) as dial:
        assert cli.main(["/dev/ttyUSB2", "info", "-b", "9600"]) == 0

    dial.assert_called_once_with("/dev/ttyUSB2", baudrate=9600, timeout=1.0)
    assert "model         MC7455" in capsys.readouterr().out
    fake.close.assert_called_once()


def test_main_connection_error(capsys):
    """Test connection failures exit with status 1."""
    with mock.patch.object(cli.ATModem, "dial", side_effect=TransportError("no port")):
        assert cli.main(["/dev/ttyUSB9", "status"]) == 1

    assert "no port" in capsys.readouterr().err


def test_main_rejects_unknown_command():
    """Test argparse rejects unknown commands."""
    with pytest.raises(SystemExit):
        cli.main(["/dev/ttyUSB2", "reboot"])
