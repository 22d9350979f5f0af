"""
macparse -- MAC address parsing and formatting
"""

from macparse.eui import MACAddress
from macparse.exceptions import AddressError, InvalidLength, InvalidMAC
from macparse.parser import normalize, parse

VERSION = "0.1.0"

__all__ = [
    "AddressError",
    "InvalidLength",
    "InvalidMAC",
    "MACAddress",
    "VERSION",
    "normalize",
    "parse",
]
