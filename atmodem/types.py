"""
Data types and structures for atmodem.

Provides type-safe representations of modem data.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Mapping, NamedTuple, Optional, Union


class ValueKind(Enum):
    """Semantic type of a response field."""
    INTEGER = "integer"
    FLOAT = "float"
    DURATION = "duration"
    STRING = "string"
    LIST = "list"


class AntennaPath(Enum):
    """
    Which primary component carrier RSSI key was seen last.

    Routes the shared "RSRP (dBm):" key of AT!GSTATUS? to the main (RxM)
    or diversity (RxD) receive path.
    """
    UNSET = "unset"
    RXM = "rxm"
    RXD = "rxd"


class FieldSpec(NamedTuple):
    """
    Key table entry.

    Attributes:
        field: Target record field, or a mapping of AntennaPath to field
               for a key whose target depends on an earlier key
        kind: How the value tokens are converted
        path: AntennaPath the key moves the parser to, if any
    """
    field: Union[str, Mapping[AntennaPath, str]]
    kind: ValueKind
    path: Optional[AntennaPath] = None


@dataclass(frozen=True)
class Info:
    """Device information from ATI."""
    manufacturer: str = ""      # e.g., "Sierra Wireless, Incorporated"
    model: str = ""             # e.g., "MC7455"
    revision: str = ""          # Firmware revision
    imei: str = ""
    meid: str = ""
    imei_sv: int = 0            # IMEI software version
    fsn: str = ""               # Factory serial number
    gcap: list[str] = field(default_factory=list)  # Capabilities, e.g. ["+CGSM"]


@dataclass(frozen=True)
class Status:
    """
    Device status from AT!GSTATUS? (Sierra Wireless).

    RSSI and RSRP are reported per primary component carrier receive path:
    RxM is the main antenna, RxD the diversity antenna.
    """
    current_time: timedelta = timedelta(0)  # Time since boot
    temperature: int = 0                    # Degrees Celsius
    reset_counter: int = 0
    mode: str = ""                          # e.g., "ONLINE"
    system_mode: str = ""                   # e.g., "LTE"
    ps_state: str = ""                      # Packet switched state, e.g. "Attached"
    lte_band: str = ""                      # e.g., "B12"
    lte_bandwidth_mhz: float = 0.0
    lte_rx_channel: int = 0
    lte_tx_channel: int = 0
    lte_ca_state: str = ""                  # Carrier aggregation state
    emm_state: str = ""
    rrc_state: str = ""
    ims_reg_state: str = ""
    pcc_rxm_rssi: int = 0                   # dBm
    pcc_rxm_rsrp: int = 0                   # dBm
    pcc_rxd_rssi: int = 0                   # dBm
    pcc_rxd_rsrp: int = 0                   # dBm
    tx_power: int = 0
    tac: str = ""                           # Tracking area code, e.g. "2b0e (11022)"
    cell_id: str = ""                       # e.g., "0142ac0b (21146635)"
    rsrq: float = 0.0                       # dB
    sinr: float = 0.0                       # dB
