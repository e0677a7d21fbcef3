"""
Blockpad — Block Cipher Paddings
Pad data to a multiple of a cipher's block size and remove the padding again.

Block ciphers in ECB, CBC or PCBC mode only encrypt whole blocks. Blockpad
supports eight paddings: Zero, PKCS#7, ANSI X.923, ISO 10126, RFC 4303,
ISO 7816-4, Arbitrary Tail Byte and Not Last Byte.

Padding and unpadding take the same time whatever the pad length, so the
padder itself does not leak where the padding starts. Only the two tail byte
paddings accept every last block as valid and are therefore immune to a
padding oracle attack. Use the others only with integrity protection.

Usage:
    from blockpad import BlockPad, PadAlgorithm
    padder = BlockPad(PadAlgorithm.ARBITRARY_TAIL_BYTE, 16)
    padded = padder.pad(b"Beware the ides of march")
    data = padder.unpad(padded)
"""

from blockpad.algorithms import PadAlgorithm
from blockpad.errors import (
    BlockPadError,
    InvalidBlockSizeError,
    InvalidPadAlgorithmError,
    InvalidPaddedDataLenError,
    InvalidPaddingError,
    PaddingPreconditionError,
)
from blockpad.padder import BlockPad, new_block_padding, MIN_BLOCK_SIZE, MAX_BLOCK_SIZE, DEFAULT_BLOCK_SIZE
from blockpad.registry import ALGORITHM_NAMES

__version__ = "0.1.0"
__all__ = [
    "BlockPad",
    "PadAlgorithm",
    "new_block_padding",
    "ALGORITHM_NAMES",
    "MIN_BLOCK_SIZE",
    "MAX_BLOCK_SIZE",
    "DEFAULT_BLOCK_SIZE",
    "BlockPadError",
    "InvalidBlockSizeError",
    "InvalidPadAlgorithmError",
    "InvalidPaddedDataLenError",
    "InvalidPaddingError",
    "PaddingPreconditionError",
]
