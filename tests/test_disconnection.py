"""
Tests for device disconnection handling.
"""

import pytest
from atmodem import ATModem, MockTransport, DeviceDisconnectedError, TransportError


def test_disconnection_callback():
    """Test that disconnection callback is called when device disconnects."""
    errors = []

    transport = MockTransport()
    modem = ATModem(transport=transport, on_disconnect=errors.append)

    assert modem.is_open is True
    assert modem.is_disconnected is False

    # Simulate disconnection
    transport.close()

    with pytest.raises(DeviceDisconnectedError):
        modem.info()
    with pytest.raises(DeviceDisconnectedError):
        modem.status()

    assert len(errors) == 1
    assert isinstance(errors[0], DeviceDisconnectedError)
    assert modem.is_disconnected is True

    modem.close()
    assert modem.is_open is False


def test_disconnection_without_callback():
    """Test that disconnection works even without a callback."""
    transport = MockTransport()
    modem = ATModem(transport=transport)

    transport.close()

    with pytest.raises(DeviceDisconnectedError):
        modem.send_raw_at("AT")

    assert modem.is_disconnected is True
    modem.close()


def test_disconnect_during_read():
    """Test that a device lost mid-response is reported as disconnected."""
    class DroppingTransport(MockTransport):
        def read_until(self, terminator=b"\r\n", timeout=None):
            raise DeviceDisconnectedError("Serial device disconnected: no such device")

    errors = []
    modem = ATModem(transport=DroppingTransport(), on_disconnect=errors.append)

    with pytest.raises(DeviceDisconnectedError):
        modem.send_raw_at("ATI")

    assert modem.is_disconnected is True
    assert len(errors) == 1


def test_read_error_propagates():
    """Test that other transport errors reach the caller without a disconnect."""
    class ErrorTransport(MockTransport):
        def __init__(self):
            super().__init__()
            self.read_count = 0

        def read_until(self, terminator=b"\r\n", timeout=None):
            self.read_count += 1
            raise TransportError("Serial read failed: Test error")

    errors = []
    transport = ErrorTransport()
    modem = ATModem(transport=transport, on_disconnect=errors.append)

    with pytest.raises(TransportError):
        modem.send_raw_at("ATI")

    assert transport.read_count == 1
    assert modem.is_disconnected is False
    assert errors == []

    modem.close()
