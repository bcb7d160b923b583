"""
Device status response parser.

Parses the column-aligned AT!GSTATUS? table of Sierra Wireless modems,
which packs one or two ``Key: value`` pairs into each line:

    !GSTATUS:
    Current Time:  71465		Temperature: 41
    Reset Counter: 1		Mode:        ONLINE
    System mode:   LTE        	PS state:    Attached
    LTE band:      B12     		LTE bw:      5 MHz
    LTE Rx chan:   5110		LTE Tx chan: 23110
    LTE CA state:  NOT ASSIGNED
    EMM state:     Registered     	Normal Service
    RRC state:     RRC Connected
    IMS reg state: No Srv
    PCC RxM RSSI:  -84		RSRP (dBm):  -113
    PCC RxD RSSI:  -84		RSRP (dBm):  -111
    Tx Power:      0		TAC:         2b0e (11022)
    RSRQ (dB):     -12.4		Cell ID:     0142ac0b (21146635)
    SINR (dB):      2.2
"""

import logging
from collections.abc import Mapping

from .base import ResponseParser, ValueParser
from ..types import AntennaPath, FieldSpec, Status, ValueKind
from ..exceptions import (
    AmbiguousFieldError,
    EmptyInputError,
    EmptyResponseError,
    UnexpectedSegmentCountError,
)

logger = logging.getLogger(__name__)

STATUS_FIELDS: dict[str, FieldSpec] = {
    "Current Time:": FieldSpec("current_time", ValueKind.DURATION),
    "Temperature:": FieldSpec("temperature", ValueKind.INTEGER),
    "Reset Counter:": FieldSpec("reset_counter", ValueKind.INTEGER),
    "Mode:": FieldSpec("mode", ValueKind.STRING),
    "System mode:": FieldSpec("system_mode", ValueKind.STRING),
    "PS state:": FieldSpec("ps_state", ValueKind.STRING),
    "LTE band:": FieldSpec("lte_band", ValueKind.STRING),
    "LTE bw:": FieldSpec("lte_bandwidth_mhz", ValueKind.FLOAT),
    "LTE Rx chan:": FieldSpec("lte_rx_channel", ValueKind.INTEGER),
    "LTE Tx chan:": FieldSpec("lte_tx_channel", ValueKind.INTEGER),
    "LTE CA state:": FieldSpec("lte_ca_state", ValueKind.STRING),
    "EMM state:": FieldSpec("emm_state", ValueKind.STRING),
    "RRC state:": FieldSpec("rrc_state", ValueKind.STRING),
    "IMS reg state:": FieldSpec("ims_reg_state", ValueKind.STRING),
    "PCC RxM RSSI:": FieldSpec("pcc_rxm_rssi", ValueKind.INTEGER, AntennaPath.RXM),
    "PCC RxD RSSI:": FieldSpec("pcc_rxd_rssi", ValueKind.INTEGER, AntennaPath.RXD),
    "RSRP (dBm):": FieldSpec(
        {AntennaPath.RXM: "pcc_rxm_rsrp", AntennaPath.RXD: "pcc_rxd_rsrp"},
        ValueKind.INTEGER
    ),
    "Tx Power:": FieldSpec("tx_power", ValueKind.INTEGER),
    "TAC:": FieldSpec("tac", ValueKind.STRING),
    "Cell ID:": FieldSpec("cell_id", ValueKind.STRING),
    "RSRQ (dB):": FieldSpec("rsrq", ValueKind.FLOAT),
    "SINR (dB):": FieldSpec("sinr", ValueKind.FLOAT),
}


def next_path(current: AntennaPath, target: AntennaPath) -> AntennaPath:
    """
    Antenna path after a key that names one.

    RxM is only taken from the initial state. RxD is sticky by design:
    once seen, a later RxM key does not move the path back.
    """
    if target is AntennaPath.RXM and current is not AntennaPath.UNSET:
        return current
    return target


def split_segments(line: str) -> list[list[str]]:
    """
    Split a status line into one or two key/value token segments.

    With two keys on a line the first value is a single token, so the
    second segment starts two tokens after the first key terminator.

    Raises:
        UnexpectedSegmentCountError: If the line has no key or more than two
        EmptyInputError: If the first of two keys has no value
    """
    tokens = line.split()
    keys = [i for i, token in enumerate(tokens) if token.endswith(":")]

    if len(keys) == 1:
        return [tokens]
    if len(keys) != 2:
        raise UnexpectedSegmentCountError(line, len(keys))

    split = keys[0] + 2
    if split > keys[1]:
        raise EmptyInputError(f"No value for key in line: {line!r}")

    return [tokens[:split], tokens[split:]]


def split_key(segment: list[str]) -> tuple[str, list[str]]:
    """Split a segment into its key (colon included) and value tokens."""
    for i, token in enumerate(segment):
        if token.endswith(":"):
            return " ".join(segment[:i + 1]), segment[i + 1:]

    raise EmptyInputError(f"No key in segment: {segment!r}")


class StatusParser(ResponseParser[Status]):
    """Parser for AT!GSTATUS? (device status) response."""

    def parse(self, response: list[str]) -> Status:
        """
        Parse AT!GSTATUS? response.

        The first line is the response header and is skipped.
        Unknown keys are ignored.
        """
        if not response:
            raise EmptyResponseError(
                "Empty status response",
                command="AT!GSTATUS?",
                response=response
            )

        values = {}
        path = AntennaPath.UNSET

        for line in response[1:]:
            for segment in split_segments(line):
                key, tokens = split_key(segment)
                vp = ValueParser(tokens)

                spec = STATUS_FIELDS.get(key)
                if spec is None:
                    logger.debug(f"Ignoring unknown status key: {key!r}")
                    continue

                values[self._resolve(spec, path, key, line)] = vp.convert(spec.kind)
                if vp.err is not None:
                    raise vp.err

                if spec.path is not None:
                    path = next_path(path, spec.path)

        return Status(**values)

    def _resolve(self, spec: FieldSpec, path: AntennaPath, key: str, line: str) -> str:
        """Return the record field for a key, given the current antenna path."""
        if not isinstance(spec.field, Mapping):
            return spec.field

        if path not in spec.field:
            raise AmbiguousFieldError(key, line)

        return spec.field[path]
