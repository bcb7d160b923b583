"""
Basic connection example.

Demonstrates connecting to a modem and getting device information.
"""

from atmodem import ATModem, ATModemError

# Replace with your serial port
PORT = "/dev/ttyUSB2"


def main():
    """Main function."""
    print("atmodem - Basic Connection Example\n")

    # dial() opens the port and runs the ATZ/ATE0 handshake
    with ATModem.dial(PORT) as modem:
        print("Connected to modem!\n")

        print("=== Device Information ===")
        try:
            info = modem.info()
        except ATModemError as e:
            print(f"Error: {e}")
            return

        print(f"Manufacturer: {info.manufacturer}")
        print(f"Model: {info.model}")
        print(f"Revision: {info.revision}")
        print(f"IMEI: {info.imei}")
        print(f"Capabilities: {', '.join(info.gcap)}")

    print("\nConnection closed.")


if __name__ == "__main__":
    main()
