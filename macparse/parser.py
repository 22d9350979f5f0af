"""
macparse/parser.py - Parse MAC addresses from text
"""

import logging

from macparse.eui import MACAddress
from macparse.exceptions import InvalidLength, InvalidMAC


logger = logging.getLogger(__name__)

DELIMITERS = str.maketrans("", "", ":-. ")
HEX_DIGITS = frozenset("0123456789abcdef")
ADDRESS_LENGTH = 12


def normalize(address: str) -> str:
    """
    Strip surrounding whitespace and every delimiter, and lowercase what is
    left. The result is not validated.
    """
    return address.strip().translate(DELIMITERS).lower()


def parse(address: str) -> MACAddress:
    """
    Parse a MAC address written with common delimiters or none at all::

        00:11:22:aa:bb:cc
        00-11-22-aa-bb-cc
        0011.22aa.bbcc
        001122aabbcc
        00 11 22 AA BB CC
        001122-AABBCC

    Raises ``InvalidLength`` if the address does not have 12 digits once
    delimiters are removed, and ``InvalidMAC`` if any of them is not a
    hexadecimal digit. Both carry the original input.
    """
    if not isinstance(address, str):
        raise TypeError(f"expected str, got {type(address).__name__}")

    raw = normalize(address)

    # Length is checked first so short garbage reports InvalidLength
    if len(raw) != ADDRESS_LENGTH:
        logger.debug(f"Rejecting {address!r}: {len(raw)} digits after normalization")
        raise InvalidLength(address)

    for c in raw:
        if c not in HEX_DIGITS:
            logger.debug(f"Rejecting {address!r}: {c!r} is not a hex digit")
            raise InvalidMAC(address)

    return MACAddress(bytes.fromhex(raw))
