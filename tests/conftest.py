"""
Pytest configuration and fixtures.

Provides shared test fixtures for atmodem tests.
"""

import pytest
import logging

from atmodem.core import MockTransport, ModemCore
from atmodem import ATModem


# Enable logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def mock_transport():
    """
    Create a MockTransport instance for testing.

    Example:
        def test_something(mock_transport):
            mock_transport.add_response(["OK"])
            # ... test code ...
    """
    transport = MockTransport()
    yield transport
    transport.close()


@pytest.fixture
def modem_core(mock_transport):
    """
    Create a ModemCore instance with MockTransport.

    Example:
        def test_at_command(modem_core, mock_transport):
            mock_transport.add_response(["Model: MC7455", "OK"])
            response = modem_core.send_at("ATI")
            assert "Model: MC7455" in response
    """
    core = ModemCore(transport=mock_transport)
    yield core
    core.close()


@pytest.fixture
def modem(mock_transport):
    """
    Create an ATModem instance with MockTransport.

    The initialization handshake is not run, so every queued response
    answers a command issued by the test itself.
    """
    modem_instance = ATModem(transport=mock_transport)
    yield modem_instance
    modem_instance.close()


@pytest.fixture
def mock_info_response():
    """Mock response for ATI command on a Huawei E173."""
    return [
        "Manufacturer: huawei",
        "Model: E173",
        "Revision: 21.017.09.00.314",
        "IMEI: 1234567",
        "+GCAP: +CGSM,+DS,+ES",
        "OK",
    ]


@pytest.fixture
def gstatus_lines():
    """AT!GSTATUS? response lines from a Sierra Wireless MC7455, OK stripped."""
    return [
        "!GSTATUS:",
        "Current Time:  71465\t\tTemperature: 41",
        "Reset Counter: 1\t\tMode:        ONLINE",
        "System mode:   LTE        \tPS state:    Attached",
        "LTE band:      B12     \t\tLTE bw:      5 MHz",
        "LTE Rx chan:   5110\t\tLTE Tx chan: 23110",
        "LTE CA state:  NOT ASSIGNED",
        "EMM state:     Registered     \tNormal Service",
        "RRC state:     RRC Connected",
        "IMS reg state: No Srv",
        "PCC RxM RSSI:  -84\t\tRSRP (dBm):  -113",
        "PCC RxD RSSI:  -84\t\tRSRP (dBm):  -111",
        "Tx Power:      0\t\tTAC:         2b0e (11022)",
        "RSRQ (dB):     -12.4\t\tCell ID:     0142ac0b (21146635)",
        "SINR (dB):      2.2",
    ]
