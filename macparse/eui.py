"""
macparse/eui.py - EUI-48 hardware address objects
"""

import binascii
from dataclasses import dataclass
import ipaddress


MULTICAST_OUI = "01005e"
LINK_LOCAL_PREFIX = "fe80::"

# Inserted between the OUI and NIC halves when expanding to EUI-64
EUI64_FILLER = b"\xff\xfe"

# Universal/Local administration bit of the first octet
UL_BIT = 0x02


def _group(s: str, size: int, delimiter: str) -> str:
    return delimiter.join(s[i:i+size] for i in range(0, len(s), size))


@dataclass(frozen=True, repr=False)
class MACAddress:
    """
    Represents an EUI-48 (MAC) hardware address.

    Instances are normally obtained from ``macparse.parse``. They are immutable
    and compare equal when their octets are equal.
    """

    data: bytes

    def __post_init__(self):
        if not isinstance(self.data, bytes) or len(self.data) != 6:
            raise ValueError(f"{self.data!r} is not a 6 octet hardware address")

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.hex()}')"

    def __len__(self) -> int:
        return len(self.data)

    @property
    def octet_values(self) -> tuple[int, ...]:
        return tuple(self.data)

    @property
    def nibbles(self) -> tuple[int, ...]:
        """
        The 12 hex digit values of the address, high nibble of each octet
        first.
        """
        return tuple(n for b in self.data for n in (b >> 4, b & 0x0f))

    def raw(self) -> str:
        """
        Return the address as ``001122aabbcc``.
        """
        return binascii.hexlify(self.data).decode()

    def eui(self) -> str:
        """
        Return the address as ``00-11-22-aa-bb-cc``.
        """
        return _group(self.raw(), 2, "-")

    def hex(self) -> str:
        """
        Return the address as ``00:11:22:aa:bb:cc``.
        """
        return _group(self.raw(), 2, ":")

    def dot(self) -> str:
        """
        Return the address as ``0011.22aa.bbcc``.
        """
        return _group(self.raw(), 4, ".")

    def octets(self) -> list[str]:
        return [f"{b:02x}" for b in self.data]

    def bits(self) -> list[str]:
        """
        Return one 4 character binary string per hex digit, eg. ``a`` is
        ``1010``.
        """
        return [f"{n:04b}" for n in self.nibbles]

    def binary(self) -> str:
        return "".join(self.bits())

    def oui(self) -> str:
        """
        Return the Organizationally Unique Identifier, the first 3 octets, as
        ``001122``.
        """
        return self.raw()[:6]

    def nic(self) -> str:
        """
        Return the Network Interface Controller portion, the last 3 octets, as
        ``aabbcc``.
        """
        return self.raw()[6:]

    @property
    def eui64_data(self) -> bytes:
        """
        The modified EUI-64 identifier derived from this address (RFC 4291
        appendix A). ``ff:fe`` is inserted between the OUI and NIC halves and
        the U/L bit of the first octet is inverted::

            00:15:2b:e4:9b:60 -> 02:15:2b:ff:fe:e4:9b:60
        """
        return bytes([self.data[0] ^ UL_BIT]) + self.data[1:3] + EUI64_FILLER + self.data[3:]

    def eui64(self) -> str:
        """
        Return the EUI-64 expansion as ``02-11-22-ff-fe-aa-bb-cc``.
        """
        return _group(binascii.hexlify(self.eui64_data).decode(), 2, "-")

    def ipv6_link_local(self) -> str:
        """
        Return the IPv6 link local address for this hardware address as
        ``fe80::0211:22ff:feaa:bbcc``. Groups are not compressed.
        """
        return LINK_LOCAL_PREFIX + _group(binascii.hexlify(self.eui64_data).decode(), 4, ":")

    @property
    def ipv6_link_local_address(self) -> ipaddress.IPv6Address:
        return ipaddress.IPv6Address(self.ipv6_link_local())

    def summary(self) -> str:
        return f"EUI-48: {self.eui()}\nEUI-64: {self.eui64()}"

    def is_broadcast(self) -> bool:
        return self.data == b"\xff" * 6

    def is_multicast(self) -> bool:
        return self.oui() == MULTICAST_OUI

    def is_unicast(self) -> bool:
        return not (self.is_broadcast() or self.is_multicast())

    def is_universal(self) -> bool:
        """
        Universally administered addresses have the U/L bit of the first octet
        cleared.
        """
        return not self.data[0] & UL_BIT

    def is_local(self) -> bool:
        return not self.is_universal()
