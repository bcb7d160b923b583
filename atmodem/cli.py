"""
Command line interface for atmodem.

Prints device info or status, or runs an interactive AT command terminal.
"""

import sys
import logging
from dataclasses import fields
from typing import Optional

from .modem import ATModem
from .version import __version__
from .exceptions import ATModemError


def format_record(record) -> str:
    """Format an Info or Status record as aligned ``name: value`` lines."""
    names = [f.name for f in fields(record)]
    width = max(len(name) for name in names)
    return "\n".join(f"{name:<{width}}  {getattr(record, name)}" for name in names)


class ATModemCLI:
    """Interactive AT command REPL."""

    def __init__(self, port: str, baudrate: int = 115200, timeout: float = 1.0):
        """
        Initialize CLI.

        Args:
            port: Serial port path
            baudrate: Baud rate
            timeout: AT command timeout in seconds
        """
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout
        self.modem: Optional[ATModem] = None

    def run(self, command: str = "repl") -> int:
        """
        Connect and run a command.

        Args:
            command: "info", "status" or "repl"

        Returns:
            Process exit code
        """
        try:
            self.modem = ATModem.dial(
                self.port,
                baudrate=self.baudrate,
                timeout=self.timeout
            )

            if command == "info":
                print(format_record(self.modem.info()))
            elif command == "status":
                print(format_record(self.modem.status()))
            else:
                self._repl()

        except ATModemError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        finally:
            if self.modem:
                self.modem.close()

        return 0

    def _repl(self) -> None:
        """Read AT commands from stdin until quit or EOF."""
        print(f"atmodem CLI v{__version__}")
        print(f"Connected to {self.port} at {self.baudrate} baud")
        print("Type 'help' for commands, 'quit' to exit\n")

        while True:
            try:
                cmd = input("> ").strip()
            except KeyboardInterrupt:
                print("\nUse 'quit' to exit")
                continue
            except EOFError:
                break

            if not cmd:
                continue

            lowered = cmd.lower()
            if lowered in ("quit", "exit", "q"):
                break
            elif lowered == "help":
                self._print_help()
            elif lowered in ("info", "status"):
                self._show_record(lowered)
            else:
                self._send_command(cmd)

    def _show_record(self, name: str) -> None:
        """Show parsed device info or status."""
        try:
            record = self.modem.info() if name == "info" else self.modem.status()
            print(format_record(record))
        except ATModemError as e:
            print(f"Error: {e}")

    def _send_command(self, cmd: str) -> None:
        """Send AT command and display response."""
        try:
            for line in self.modem.send_raw_at(cmd):
                print(line)
        except ATModemError as e:
            print(f"Error: {e}")

    def _print_help(self) -> None:
        """Print help message."""
        print("""
Available commands:
  <AT command>  - Send AT command to modem (e.g., ATI)
  info          - Show parsed device information (ATI)
  status        - Show parsed device status (AT!GSTATUS?)
  help          - Show this help message
  quit/exit/q   - Exit CLI
        """)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="atmodem CLI - query AT command modems",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  atmodem-cli /dev/ttyUSB2 info
  atmodem-cli /dev/ttyUSB2 status --baudrate 9600
  atmodem-cli /dev/ttyUSB2
        """
    )

    parser.add_argument(
        "port",
        help="Serial port (e.g., /dev/ttyUSB2, COM3)"
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=("info", "status", "repl"),
        default="repl",
        help="What to do (default: repl)"
    )
    parser.add_argument(
        "-b", "--baudrate",
        type=int,
        default=115200,
        help="Baud rate (default: 115200)"
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=1.0,
        help="AT command timeout in seconds (default: 1.0)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )

    cli = ATModemCLI(
        port=args.port,
        baudrate=args.baudrate,
        timeout=args.timeout
    )

    return cli.run(args.command)


if __name__ == "__main__":
    sys.exit(main())
