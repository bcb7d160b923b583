"""
AT command protocol handler.

Issues one command at a time and reads response lines straight from the
transport until a final result code ends the exchange.
"""

import logging
import threading
import time
from typing import Optional

from .transport import Transport
from ..exceptions import ATTimeoutError, CommandError, TransportError

logger = logging.getLogger(__name__)

# Final result codes which end a command response.
FINAL_OK = "OK"
FINAL_ERRORS = ("ERROR", "NO CARRIER", "+CME ERROR:", "+CMS ERROR:")


def is_final(line: str) -> bool:
    """True if the line is a final result code."""
    return line == FINAL_OK or line.startswith(FINAL_ERRORS)


def response_prefix(cmd: str) -> str:
    """
    Build the response prefix of a command.

    "AT+CGSN?" -> "+CGSN:", "AT!GSTATUS?" -> "!GSTATUS:"
    """
    raw = cmd[2:] if cmd.upper().startswith("AT") else cmd
    return raw.replace("?", "").split("=")[0] + ":"


class ATProtocol:
    """
    AT command protocol handler.

    A command is written, then lines are read until OK or an error result
    code. Blank lines are dropped and the command echo, if the device still
    echoes, is removed, so callers only see the body and the result code.
    """

    def __init__(
        self,
        transport: Transport,
        default_timeout: float = 1.0
    ) -> None:
        """
        Initialize AT protocol handler.

        Args:
            transport: Transport instance for communication
            default_timeout: Default timeout for AT commands in seconds
        """
        self.transport = transport
        self.default_timeout = default_timeout
        self._lock = threading.Lock()

    def send_command(
        self,
        cmd: str = "AT",
        strip_ok: bool = False,
        remove_cmd_prefix: bool = False,
        timeout: Optional[float] = None
    ) -> list[str]:
        """
        Send an AT command and collect its response.

        Args:
            cmd: AT command to send (e.g., "ATI" or "!GSTATUS?")
            strip_ok: Remove the final "OK" from response lines
            remove_cmd_prefix: Remove command prefix from first response line
            timeout: Command timeout in seconds (uses default if None)

        Returns:
            List of response lines

        Raises:
            ATTimeoutError: If no final result code arrives in time
            CommandError: If command returns an error result code
            TransportError: If the command cannot be written or read
        """
        cmd = self._normalize_command(cmd)
        sent = cmd.strip()
        wait = timeout if timeout is not None else self.default_timeout

        with self._lock:
            logger.debug(f"Sending AT command: {sent}")
            self.transport.reset_input_buffer()
            if not self.transport.write(cmd.encode("utf-8")):
                raise TransportError(f"Failed to write AT command: {sent}", command=sent)

            lines = self._read_response(sent, wait)

        logger.debug(f"Received response: {lines}")

        if lines[-1] == FINAL_OK:
            if strip_ok:
                lines = lines[:-1]
        else:
            logger.error(f"AT command {sent} returned {lines[-1]}")
            raise CommandError(
                f"AT command returned {lines[-1]}",
                command=sent,
                response=lines
            )

        if remove_cmd_prefix and lines:
            prefix = response_prefix(sent)
            if lines[0].startswith(prefix):
                lines[0] = lines[0][len(prefix):].strip()

        return lines

    def _read_response(self, sent: str, wait: float) -> list[str]:
        """Read lines up to and including the final result code."""
        deadline = time.monotonic() + wait
        lines: list[str] = []

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.error(f"AT command timed out: {sent}")
                raise ATTimeoutError(
                    f"AT command timed out after {wait}s",
                    command=sent,
                    response=lines
                )

            raw = self.transport.read_until(b"\r\n", timeout=remaining)
            line = raw.decode("utf-8", errors="ignore").strip()
            if not line:
                continue

            if not lines and line == sent:
                logger.debug(f"Stripping echo line: {line}")
                continue

            lines.append(line)
            if is_final(line):
                return lines

    def send_raw(self, data: bytes) -> None:
        """
        Write bytes that expect no response (e.g., an escape sequence).

        Args:
            data: Bytes to write
        """
        with self._lock:
            logger.debug(f"Sending raw bytes: {data!r}")
            self.transport.write(data)

    @staticmethod
    def _normalize_command(cmd: str) -> str:
        """Ensure command starts with "AT" and ends with "\\r\\n"."""
        cmd = cmd.strip()
        if not cmd.upper().startswith("AT"):
            cmd = "AT" + cmd
        return cmd + "\r\n"
