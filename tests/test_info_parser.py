"""
Tests for InfoParser.
"""

import pytest
from atmodem.parsers import InfoParser, INFO_FIELDS
from atmodem.types import Info, ValueKind
from atmodem.exceptions import (
    ConversionError,
    EmptyResponseError,
    MalformedLineError,
)


def test_parse_e173():
    """Test parsing a Huawei E173 response."""
    info = InfoParser().parse([
        "Manufacturer: huawei",
        "Model: E173",
        "Revision: 21.017.09.00.314",
        "IMEI: 1234567",
        "+GCAP: +CGSM,+DS,+ES",
    ])

    assert info == Info(
        manufacturer="huawei",
        model="E173",
        revision="21.017.09.00.314",
        imei="1234567",
        gcap=["+CGSM", "+DS", "+ES"],
    )


def test_parse_mc7455():
    """Test parsing a Sierra Wireless MC7455 response."""
    info = InfoParser().parse([
        "Manufacturer: Sierra Wireless, Incorporated",
        "Model: MC7455",
        "Revision: SWI9X30C_02.33.03.00 r8209 CARMD-EV-FRMWR2 2019/08/28 20:59:30",
        "MEID: 11111111111111",
        "IMEI: 111111111111110",
        "IMEI SV: 20",
        "FSN: ABCDEF12345678",
        "+GCAP: +CGSM",
    ])

    assert info.manufacturer == "Sierra Wireless, Incorporated"
    assert info.model == "MC7455"
    # Only the first colon separates key and value
    assert info.revision == "SWI9X30C_02.33.03.00 r8209 CARMD-EV-FRMWR2 2019/08/28 20:59:30"
    assert info.meid == "11111111111111"
    assert info.imei == "111111111111110"
    assert info.imei_sv == 20
    assert info.fsn == "ABCDEF12345678"
    assert info.gcap == ["+CGSM"]


def test_parse_empty():
    """Test that an empty response is rejected."""
    with pytest.raises(EmptyResponseError):
        InfoParser().parse([])


def test_parse_malformed():
    """Test that a line without a colon is rejected."""
    with pytest.raises(MalformedLineError) as exc_info:
        InfoParser().parse(["Manufacturer: huawei", "Manufacturer"])

    assert exc_info.value.line == "Manufacturer"


def test_parse_bad_imei_sv():
    """Test that a non-numeric IMEI SV fails the whole parse."""
    with pytest.raises(ConversionError) as exc_info:
        InfoParser().parse(["Manufacturer: huawei", "IMEI SV: notanumber"])

    assert exc_info.value.kind == ValueKind.INTEGER
    assert exc_info.value.value == "notanumber"


def test_parse_ignores_unknown_keys():
    """Test that unknown keys are skipped."""
    info = InfoParser().parse([
        "Manufacturer: huawei",
        "ESN: 0x12345678",
        "manufacturer: ignored",
    ])

    assert info == Info(manufacturer="huawei")


def test_records_are_independent():
    """Test that each parse returns a fresh record."""
    parser = InfoParser()

    first = parser.parse(["+GCAP: +CGSM"])
    second = parser.parse(["Model: E173"])

    assert first.gcap == ["+CGSM"]
    assert second.gcap == []
    assert second.model == "E173"


@pytest.mark.parametrize("key,spec", list(INFO_FIELDS.items()))
def test_every_info_key(key, spec):
    """Test that each known key lands in its field."""
    info = InfoParser().parse([f"{key}: 42"])

    expected = {
        ValueKind.STRING: "42",
        ValueKind.INTEGER: 42,
        ValueKind.LIST: ["42"],
    }[spec.kind]
    assert getattr(info, spec.field) == expected
