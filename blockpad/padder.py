"""
Block Padder
Pad data for a block cipher and remove the padding again.

A BlockPad binds one pad algorithm to one block size. It is immutable after
construction, so one instance can be shared by any number of threads.

Pad and unpad do the same amount of work in the last block whatever the pad
length is. This keeps the pad length from leaking through timing, which in
CBC mode is all an attacker needs for a padding oracle attack.
"""

import logging

from blockpad.algorithms import PadAlgorithm
from blockpad.errors import (
    InvalidBlockSizeError,
    InvalidPaddedDataLenError,
    InvalidPaddingError,
)
from blockpad.registry import implementation_for

logger = logging.getLogger(__name__)

# A pad length has to fit into one byte
MIN_BLOCK_SIZE = 1
MAX_BLOCK_SIZE = 255

# AES block size
DEFAULT_BLOCK_SIZE = 16


def check_block_size(block_size) -> int:
    """
    Validate a block size.

    Raises:
        InvalidBlockSizeError: If the block size is not an int in [1, 255].
    """
    if isinstance(block_size, bool) or not isinstance(block_size, int):
        raise InvalidBlockSizeError()
    if block_size < MIN_BLOCK_SIZE or block_size > MAX_BLOCK_SIZE:
        raise InvalidBlockSizeError()
    return block_size


def pad_lengths(data_len: int, block_size: int) -> tuple[int, int, int]:
    """
    Split a data length for padding.

    Returns:
        (length of the full blocks, length of the data in the last block, pad length).
        The pad length is always in [1, block_size].
    """
    full_block_len = (data_len // block_size) * block_size
    last_data_len = data_len - full_block_len
    return full_block_len, last_data_len, block_size - last_data_len


class BlockPad:
    """
    A block cipher padding.

    Args:
        pad_algorithm: A PadAlgorithm, its value or its name.
        block_size: The block size of the cipher in bytes, 1 to 255.

    Raises:
        InvalidPadAlgorithmError: If the pad algorithm is unknown.
        InvalidBlockSizeError: If the block size is out of range.
    """

    __slots__ = ("_algorithm", "_block_size", "_implementation", "_zero_block")

    def __init__(self, pad_algorithm: PadAlgorithm | int | str, block_size: int = DEFAULT_BLOCK_SIZE):
        block_size = check_block_size(block_size)
        algorithm = PadAlgorithm.coerce(pad_algorithm)

        object.__setattr__(self, "_algorithm", algorithm)
        object.__setattr__(self, "_block_size", block_size)
        object.__setattr__(self, "_implementation", implementation_for(algorithm))
        object.__setattr__(self, "_zero_block", bytes(block_size))

        logger.debug("Created %s padder, block size %d", self._implementation.name, block_size)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def algorithm(self) -> PadAlgorithm:
        return self._algorithm

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def name(self) -> str:
        """Human readable name of the pad algorithm."""
        return self._implementation.name

    def pad(self, data) -> bytes:
        """
        Pad data.

        Returns a new bytes object holding a copy of the data plus padding.
        For large data pad_last_block is cheaper, as it does not copy the
        full blocks.

        Raises:
            PaddingPreconditionError: Zero padding of data that ends with a 0 byte.
        """
        full_block_data, last_block = self.pad_last_block(data)
        return b"".join((full_block_data, last_block))

    def pad_last_block(self, data) -> tuple[memoryview, bytes]:
        """
        Pad data without copying the full blocks.

        Returns:
            (full_block_data, last_block). full_block_data is a memoryview of
            the leading full blocks of data, its length is a multiple of the
            block size. last_block is exactly one block: the rest of the data
            followed by the padding.

        Raises:
            PaddingPreconditionError: Zero padding of data that ends with a 0 byte.
        """
        view = memoryview(data)
        data = view.cast("B")
        block_size = self._block_size

        full_block_len, last_data_len, pad_len = pad_lengths(len(data), block_size)
        last_data = data[full_block_len:]
        last_block = bytearray(block_size)

        # Functionally unnecessary. pad_len bytes here plus last_data_len bytes
        # below always add up to block_size copied bytes.
        last_block[:pad_len] = self._zero_block[:pad_len]

        try:
            self._implementation.filler(last_block, block_size, last_data, last_data_len, pad_len)
        except Exception:
            # Do not keep the caller's buffer exported while the error is handled
            last_data.release()
            data.release()
            view.release()
            raise

        last_block[:last_data_len] = last_data
        last_data.release()

        return data[:full_block_len], bytes(last_block)

    def unpad(self, padded_data) -> bytes:
        """
        Remove the padding from padded data.

        Returns the clear data. An empty bytes object is returned if the
        padded data consisted of padding only.

        Raises:
            InvalidPaddedDataLenError: If the length is not a positive multiple
                of the block size. Checked before any byte is read.
            InvalidPaddingError: If the padding is malformed. Raised only after
                the whole last block has been examined.
        """
        with memoryview(padded_data) as view, view.cast("B") as data:
            data_len = len(data)
            if data_len == 0 or data_len % self._block_size != 0:
                raise InvalidPaddedDataLenError()

            end, valid = self._implementation.remover(data, data_len, self._block_size)
            if not valid:
                raise InvalidPaddingError()

            return data[:end].tobytes()

    def __str__(self) -> str:
        return self._implementation.name

    def __repr__(self) -> str:
        return f"BlockPad({self._algorithm.name}, block_size={self._block_size})"


def new_block_padding(pad_algorithm: PadAlgorithm | int | str, block_size: int = DEFAULT_BLOCK_SIZE) -> BlockPad:
    """Create a BlockPad. Same as calling BlockPad directly."""
    return BlockPad(pad_algorithm, block_size)
