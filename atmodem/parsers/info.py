"""
Device information response parser.

Parses the ``Key: value`` lines returned by ATI.
"""

import logging

from .base import ResponseParser, ValueParser
from ..types import FieldSpec, Info, ValueKind
from ..exceptions import EmptyResponseError, MalformedLineError

logger = logging.getLogger(__name__)

INFO_FIELDS: dict[str, FieldSpec] = {
    "Manufacturer": FieldSpec("manufacturer", ValueKind.STRING),
    "Model": FieldSpec("model", ValueKind.STRING),
    "Revision": FieldSpec("revision", ValueKind.STRING),
    "IMEI": FieldSpec("imei", ValueKind.STRING),
    "MEID": FieldSpec("meid", ValueKind.STRING),
    "IMEI SV": FieldSpec("imei_sv", ValueKind.INTEGER),
    "FSN": FieldSpec("fsn", ValueKind.STRING),
    "+GCAP": FieldSpec("gcap", ValueKind.LIST),
}


class InfoParser(ResponseParser[Info]):
    """Parser for ATI (device information) response."""

    def parse(self, response: list[str]) -> Info:
        """
        Parse ATI response.

        Expected format:
            Manufacturer: Sierra Wireless, Incorporated
            Model: MC7455
            Revision: SWI9X30C_02.33.03.00 r8209 CARMD-EV-FRMWR2 2019/08/28 20:59:30
            IMEI: 111111111111110
            IMEI SV: 20
            +GCAP: +CGSM

        Only the first colon separates key and value. Unknown keys are ignored.
        """
        if not response:
            raise EmptyResponseError(
                "Empty info response",
                command="ATI",
                response=response
            )

        values = {}
        for line in response:
            key, sep, rest = line.partition(":")
            if not sep:
                raise MalformedLineError(line, command="ATI", response=response)

            spec = INFO_FIELDS.get(key)
            if spec is None:
                logger.debug(f"Ignoring unknown info key: {key!r}")
                continue

            vp = ValueParser([rest.strip()])
            values[spec.field] = vp.convert(spec.kind)
            if vp.err is not None:
                raise vp.err

        return Info(**values)
