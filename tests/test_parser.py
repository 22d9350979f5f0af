import logging

import pytest

from macparse.eui import MACAddress
from macparse.exceptions import InvalidLength, InvalidMAC
from macparse.parser import normalize, parse


@pytest.mark.parametrize(
    "arg",
    [
        "00:11:22:aa:bb:cc",
        "00-11-22-aa-bb-cc",
        "0011.22aa.bbcc",
        "001122aabbcc",
        "001122AABBCC",
        " 0011.22aa.bbcc ",
        "00 11 22 AA BB CC",
        "001122-AABBCC",
        "\t00:11:22:AA:bb:cc\n",
    ],
)
def test_parse(arg):
    address = parse(arg)
    assert address == MACAddress(b"\x00\x11\x22\xaa\xbb\xcc")
    assert address.raw() == "001122aabbcc"


@pytest.mark.parametrize(
    (
        "arg",
        "normalized",
    ),
    [
        ("00:11:22:AA:BB:CC", "001122aabbcc"),
        ("  0011.22aa.bbcc  ", "001122aabbcc"),
        ("0:0-1.1 2", "00112"),
        ("", ""),
    ],
)
def test_normalize(arg, normalized):
    assert normalize(arg) == normalized


@pytest.mark.parametrize(
    "arg",
    [
        "bgf",
        "",
        "   ",
        "00:11:22:aa:bb",
        "00:11:22:aa:bb:cc:dd",
        "00_11_22_aa_bb_cc",
        "0011\t22aabbcc",
    ],
)
def test_parse_invalid_length(arg):
    with pytest.raises(InvalidLength) as excinfo:
        parse(arg)
    assert excinfo.value.address == arg


@pytest.mark.parametrize(
    "arg",
    [
        "xy-z1-23-bg-t7-89",
        "00:11:22:aa:bb:cg",
        "0x1122aabbcc",
        "+01122aabbcc",
    ],
)
def test_parse_invalid_mac(arg):
    with pytest.raises(InvalidMAC) as excinfo:
        parse(arg)
    assert excinfo.value.address == arg


def test_parse_keeps_original_input():
    with pytest.raises(InvalidLength) as excinfo:
        parse("  00:11:22  ")
    assert excinfo.value == InvalidLength("  00:11:22  ")
    assert str(excinfo.value) == "address: `  00:11:22  ` is not 12 characters long"


def test_parse_length_checked_first():
    # Non-hex and too short
    with pytest.raises(InvalidLength):
        parse("zz")


def test_parse_not_str():
    with pytest.raises(TypeError):
        parse(b"001122aabbcc")


def test_parse_logs_rejection(caplog):
    with caplog.at_level(logging.DEBUG, logger="macparse.parser"):
        with pytest.raises(InvalidMAC):
            parse("00112233445g")
    assert "'g' is not a hex digit" in caplog.text
