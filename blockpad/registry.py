"""
Algorithm Registry
The fixed table of padding implementations.

The table is built once at import time and never changes. Its index is the
PadAlgorithm value, so selecting an implementation is a single tuple lookup.
"""

from dataclasses import dataclass
from typing import Callable

from blockpad import fillers, removers
from blockpad.algorithms import PadAlgorithm

Filler = Callable[[bytearray, int, object, int, int], None]
Remover = Callable[[object, int, int], tuple[int, int]]


@dataclass(frozen=True)
class Implementation:
    """Everything needed to pad and unpad with one algorithm."""
    name: str
    filler: Filler
    remover: Remover


_IMPLEMENTATIONS: tuple[Implementation, ...] = (
    Implementation("Zero", fillers.zero_filler, removers.zero_remover),
    Implementation("PKCS#7", fillers.pkcs7_filler, removers.pkcs7_remover),
    Implementation("X.923", fillers.x923_filler, removers.x923_remover),
    Implementation("ISO 10126", fillers.iso10126_filler, removers.iso10126_remover),
    Implementation("RFC 4303", fillers.rfc4303_filler, removers.rfc4303_remover),
    Implementation("ISO 7816-4", fillers.iso78164_filler, removers.iso78164_remover),
    Implementation("Arbitrary Tail Byte", fillers.arbitrary_tail_byte_filler, removers.arbitrary_tail_byte_remover),
    # Same filler, faster remover
    Implementation("Not Last Byte", fillers.arbitrary_tail_byte_filler, removers.not_last_byte_remover),
)

ALGORITHM_NAMES = {algorithm: _IMPLEMENTATIONS[algorithm].name for algorithm in PadAlgorithm}


def implementation_for(algorithm: PadAlgorithm) -> Implementation:
    """Get the implementation of an already validated algorithm."""
    return _IMPLEMENTATIONS[algorithm]
