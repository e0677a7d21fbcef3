"""
Pad Algorithms
The closed set of supported block cipher paddings.

Only ARBITRARY_TAIL_BYTE and NOT_LAST_BYTE are immune to a padding oracle
attack. All other paddings should only be used with integrity protection.
"""

from enum import IntEnum

from blockpad.errors import InvalidPadAlgorithmError


class PadAlgorithm(IntEnum):
    """Supported pad algorithms. The value is the index into the registry."""

    # ISO 10118-1, ISO 9797-1 method 1. Data must not end with a 0 byte.
    ZERO = 0
    # RFC 5652
    PKCS7 = 1
    # ANSI X.923
    X923 = 2
    ISO10126 = 3
    # IPSec
    RFC4303 = 4
    # ISO 9797-1 method 2, smart cards
    ISO78164 = 5
    ARBITRARY_TAIL_BYTE = 6
    NOT_LAST_BYTE = 7

    @classmethod
    def coerce(cls, value) -> "PadAlgorithm":
        """
        Turn a member, an ordinal or a name into a PadAlgorithm.

        Names are case-insensitive and may use '-' instead of '_'.

        Raises:
            InvalidPadAlgorithmError: If the value does not denote an algorithm.
        """
        if isinstance(value, cls):
            return value

        # bool is an int, but True is not an algorithm
        if isinstance(value, bool):
            raise InvalidPadAlgorithmError()

        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidPadAlgorithmError() from None

        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_").replace(" ", "_")
            try:
                return cls[key]
            except KeyError:
                raise InvalidPadAlgorithmError() from None

        raise InvalidPadAlgorithmError()
