"""
Device status monitoring example.

Demonstrates polling AT!GSTATUS? on a Sierra Wireless modem.
"""

import time
from atmodem import ATModem

# Replace with your serial port
PORT = "/dev/ttyUSB2"


def main():
    """Main function."""
    print("atmodem - Status Monitor\n")

    with ATModem.dial(PORT, timeout=2.0) as modem:
        print("Monitoring device status (Ctrl+C to stop)...\n")

        try:
            while True:
                status = modem.status()

                print(f"Uptime: {status.current_time}  Temperature: {status.temperature} C")
                print(f"{status.system_mode} {status.lte_band} ({status.lte_bandwidth_mhz} MHz), {status.ps_state}")
                print(f"RSRP: RxM {status.pcc_rxm_rsrp} dBm, RxD {status.pcc_rxd_rsrp} dBm")
                print(f"RSRQ: {status.rsrq} dB  SINR: {status.sinr} dB")
                print("-" * 40)
                time.sleep(5)

        except KeyboardInterrupt:
            print("\nStopping monitor...")


if __name__ == "__main__":
    main()
