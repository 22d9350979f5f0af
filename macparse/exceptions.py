"""
macparse/exceptions.py - Exceptions for macparse
"""


class AddressError(ValueError):
    """
    Raised when a string cannot be parsed as a MAC address. ``address`` is the
    input exactly as it was given.
    """

    message = "address: `{address}` is invalid"

    def __init__(self, address: str):
        super().__init__(self.message.format(address=address))
        self.address = address

    def __eq__(self, other):
        if not isinstance(other, AddressError):
            return NotImplemented
        return type(self) is type(other) and self.address == other.address

    def __hash__(self):
        return hash((type(self), self.address))


class InvalidLength(AddressError):
    message = "address: `{address}` is not 12 characters long"


class InvalidMAC(AddressError):
    message = "address: `{address}` is not a MAC address"
