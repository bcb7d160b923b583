"""
Device information manager.

Handles device-related operations: initialization, identity and status.
"""

import logging
from typing import TYPE_CHECKING

from ..types import Info, Status
from ..parsers.info import InfoParser
from ..parsers.status import StatusParser

if TYPE_CHECKING:
    from ..core import ModemCore

logger = logging.getLogger(__name__)

# ESC aborts any half-typed command line before ATZ; no reply is expected.
ESCAPE_SEQUENCE = b"\x1b\r\n\r\n"


class DeviceManager:
    """
    Manages device information and status.

    Provides methods for initializing the device and querying its identity
    (ATI) and radio status (AT!GSTATUS?).
    """

    def __init__(self, modem_core: "ModemCore") -> None:
        """
        Initialize device manager.

        Args:
            modem_core: ModemCore instance for AT command execution
        """
        self.modem = modem_core

        self._info_parser = InfoParser()
        self._status_parser = StatusParser()

        logger.debug("Initialized DeviceManager")

    def initialize(self) -> None:
        """
        Bring the device into a known state.

        Sends the escape sequence, resets the device with ATZ and disables
        command echo with ATE0.
        """
        logger.info("Initializing device")
        self.modem.send_raw(ESCAPE_SEQUENCE)
        self.modem.send_at("ATZ")
        self.modem.send_at("ATE0")

    def get_info(self) -> Info:
        """
        Get device information.

        Returns:
            Info with manufacturer, model, revision, IMEI and capabilities

        Raises:
            ATParseError: If the response cannot be parsed

        Example:

        .. code-block:: python

            info = modem.device.get_info()
            print(f"{info.manufacturer} {info.model} {info.revision}")
        """
        logger.info("Getting device info")
        response = self.modem.send_at("ATI", strip_ok=True)
        info = self._info_parser.parse(response)
        logger.debug(f"Device info: {info}")
        return info

    def get_status(self) -> Status:
        """
        Get device radio status (Sierra Wireless modems).

        Returns:
            Status with temperature, LTE band, channels and signal metrics

        Raises:
            ATParseError: If the response cannot be parsed

        Example:

        .. code-block:: python

            status = modem.device.get_status()
            print(f"{status.system_mode} {status.lte_band}: RSRP {status.pcc_rxm_rsrp} dBm")
        """
        logger.info("Getting device status")
        response = self.modem.send_at("AT!GSTATUS?", strip_ok=True)
        status = self._status_parser.parse(response)
        logger.debug(f"Device status: {status}")
        return status

    def set_echo_mode(self, enabled: bool) -> None:
        """
        Set AT command echo mode on the device.

        Args:
            enabled: True to enable echo (ATE1), False to disable (ATE0)
        """
        cmd = "ATE1" if enabled else "ATE0"
        logger.info(f"Setting echo mode: {'ON' if enabled else 'OFF'} via {cmd}")
        self.modem.send_at(cmd)
