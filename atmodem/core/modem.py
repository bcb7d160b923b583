"""
Modem session: one transport, one protocol handler and a closed flag.

Feature managers talk to the device through ``send_at`` and ``send_raw``.
"""

import logging
from typing import Callable, Optional

from .transport import Transport
from .protocol import ATProtocol
from ..exceptions import DeviceDisconnectedError, ModemClosedError

logger = logging.getLogger(__name__)


class ModemCore:
    """
    Synchronous modem session.

    Every command is a single request/response exchange run on the calling
    thread. When the transport reports that the device went away the
    session is marked disconnected, ``on_disconnect`` is called once and the
    error is re-raised to the caller.
    """

    def __init__(
        self,
        transport: Transport,
        timeout: float = 1.0,
        on_disconnect: Optional[Callable[[Exception], None]] = None
    ) -> None:
        self.transport = transport
        self.protocol = ATProtocol(transport, default_timeout=timeout)

        self._on_disconnect = on_disconnect
        self._disconnected = False
        self._closed = False

    def send_at(
        self,
        cmd: str,
        strip_ok: bool = False,
        remove_cmd_prefix: bool = False,
        timeout: Optional[float] = None
    ) -> list[str]:
        """
        Send an AT command and return its response lines.

        Raises:
            ModemClosedError: If the session has been closed
            DeviceDisconnectedError: If the device went away mid-command
            ATTimeoutError: If command times out
            CommandError: If command returns an error result code
        """
        self._check_open(cmd)
        try:
            return self.protocol.send_command(
                cmd=cmd,
                strip_ok=strip_ok,
                remove_cmd_prefix=remove_cmd_prefix,
                timeout=timeout
            )
        except DeviceDisconnectedError as e:
            self._handle_disconnect(e)
            raise

    def send_raw(self, data: bytes) -> None:
        """Write bytes that expect no response."""
        self._check_open(repr(data))
        try:
            self.protocol.send_raw(data)
        except DeviceDisconnectedError as e:
            self._handle_disconnect(e)
            raise

    def close(self) -> None:
        """Close the transport. Closing twice is a no-op."""
        if self._closed:
            return

        self._closed = True
        self.transport.close()
        logger.info("Modem connection closed")

    def is_open(self) -> bool:
        """True until close() is called."""
        return not self._closed

    def is_disconnected(self) -> bool:
        """True if the device was disconnected during a command."""
        return self._disconnected

    def _check_open(self, cmd: str) -> None:
        if self._closed:
            raise ModemClosedError("Modem connection is closed", command=cmd)

    def _handle_disconnect(self, error: DeviceDisconnectedError) -> None:
        if self._disconnected:
            return

        logger.error(f"Device disconnected: {error}")
        self._disconnected = True
        if self._on_disconnect:
            self._on_disconnect(error)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

