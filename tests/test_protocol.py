"""
Tests for AT command execution: echo, final result codes and timeouts.
"""

import pytest
from atmodem import ATModem, MockTransport
from atmodem.core import ModemCore
from atmodem.exceptions import ATTimeoutError, CommandError, ModemClosedError


def test_echo_stripped(modem, mock_transport):
    """Test that the command echo is stripped from responses."""
    mock_transport.add_response(["ATI", "Manufacturer: huawei", "Model: E173", "OK"])

    info = modem.info()

    assert info.manufacturer == "huawei"
    assert info.model == "E173"


def test_raw_at_keeps_ok(modem, mock_transport):
    """Test send_raw_at returns the final OK unless asked to strip it."""
    mock_transport.add_response(["AT+CGMR", "SWI9X30C_02.33.03.00", "OK"])
    response = modem.send_raw_at("AT+CGMR")

    assert response == ["SWI9X30C_02.33.03.00", "OK"]

    mock_transport.add_response(["SWI9X30C_02.33.03.00", "OK"])
    response = modem.send_raw_at("+CGMR", strip_ok=True)

    assert response == ["SWI9X30C_02.33.03.00"]
    assert mock_transport.writes[-1] == b"AT+CGMR\r\n"


def test_remove_cmd_prefix(modem, mock_transport):
    """Test removing the command prefix from the first line."""
    mock_transport.add_response(["+CSQ: 24,99", "OK"])

    response = modem.send_raw_at("AT+CSQ", strip_ok=True, remove_cmd_prefix=True)

    assert response == ["24,99"]


@pytest.mark.parametrize("result", ["ERROR", "+CME ERROR: 10", "+CMS ERROR: 500"])
def test_error_results(modem, mock_transport, result):
    """Test that error result codes raise CommandError."""
    mock_transport.add_response(["AT+CPIN?", result])

    with pytest.raises(CommandError) as exc_info:
        modem.send_raw_at("AT+CPIN?")

    assert exc_info.value.response == [result]


def test_timeout(mock_transport):
    """Test that an unanswered command times out."""
    modem = ATModem(transport=mock_transport, timeout=0.1)

    with pytest.raises(ATTimeoutError):
        modem.send_raw_at("ATI")

    modem.close()


def test_command_after_timeout(mock_transport):
    """Test that the modem keeps working after a timeout."""
    modem = ATModem(transport=mock_transport, timeout=0.2)

    with pytest.raises(ATTimeoutError):
        modem.send_raw_at("ATI")

    mock_transport.add_response(["Model: E173", "OK"])
    assert modem.info().model == "E173"

    modem.close()


def test_closed_modem_refuses_commands():
    """Test that commands on a closed modem fail without touching the transport."""
    transport = MockTransport()
    modem = ATModem(transport=transport)
    modem.close()
    modem.close()

    with pytest.raises(ModemClosedError) as exc_info:
        modem.info()

    assert exc_info.value.command == "ATI"
    assert transport.writes == []


def test_timeout_keeps_partial_response(mock_transport):
    """Test that a timeout carries the lines read before it."""
    modem = ATModem(transport=mock_transport, timeout=0.1)
    mock_transport.add_response(["Manufacturer: huawei"])

    with pytest.raises(ATTimeoutError) as exc_info:
        modem.send_raw_at("ATI")

    assert exc_info.value.response == ["Manufacturer: huawei"]
    modem.close()


def test_blank_lines_dropped(modem, mock_transport):
    """Test that blank lines never reach the caller."""
    mock_transport.add_response(["", "ATI", "", "Model: E173", "", "OK"])

    assert modem.send_raw_at("ATI") == ["Model: E173", "OK"]


def test_stale_input_discarded(modem, mock_transport):
    """Test that lines left over from an earlier exchange are dropped."""
    mock_transport.add_response(["+CREG: 1", "OK"])
    mock_transport.write(b"AT+CREG?\r\n")
    mock_transport.add_response(["Model: E173", "OK"])

    assert modem.send_raw_at("ATI", strip_ok=True) == ["Model: E173"]


def test_core_send_at(modem_core, mock_transport):
    """Test ModemCore passes commands through to the protocol."""
    mock_transport.add_response(["Model: MC7455", "OK"])

    assert modem_core.send_at("ATI") == ["Model: MC7455", "OK"]
    assert modem_core.is_open() is True


def test_core_context_manager(mock_transport):
    """Test ModemCore closes its transport on exit."""
    with ModemCore(transport=mock_transport) as core:
        core.send_raw(b"\x1b")

    assert core.is_open() is False
    assert mock_transport.is_open() is False
    with pytest.raises(ModemClosedError):
        core.send_raw(b"\x1b")
