"""
Padding Fillers
Write the padding of one algorithm into the last block.

Every filler gets the freshly allocated last block, the block size, the clear
data that falls into the last block, its length and the pad length. The
padder copies the clear data over the start of the block *after* the filler
has run, so a filler may simply write the whole block. This keeps the number
of bytes written independent of the pad length.
"""

import os
import secrets

from blockpad.errors import PaddingPreconditionError
from blockpad.fill import fill


def zero_filler(last_block: bytearray, block_size: int, last_data, last_data_len: int, pad_len: int) -> None:
    """
    Zero padding. The block is already all zeroes.

    Only data that ends inside the last block is checked. Block-aligned data
    ending with a 0 byte gets a whole block of zeroes, and the remover only
    scans that block, so the trailing 0 survives unpadding.

    Raises:
        PaddingPreconditionError: If the clear data ends with a 0 byte, as the
            padding could not be told apart from the data on removal.
    """
    if last_data_len > 0 and last_data[last_data_len - 1] == 0:
        raise PaddingPreconditionError("last data byte must not be 0 with zero padding")


def pkcs7_filler(last_block: bytearray, block_size: int, last_data, last_data_len: int, pad_len: int) -> None:
    """Every pad byte holds the pad length."""
    fill(last_block, pad_len)


def x923_filler(last_block: bytearray, block_size: int, last_data, last_data_len: int, pad_len: int) -> None:
    """Zero bytes followed by the pad length."""
    last_block[block_size - 1] = pad_len


def iso10126_filler(last_block: bytearray, block_size: int, last_data, last_data_len: int, pad_len: int) -> None:
    """Random bytes followed by the pad length."""
    last_block[:] = os.urandom(block_size)
    last_block[block_size - 1] = pad_len


def rfc4303_filler(last_block: bytearray, block_size: int, last_data, last_data_len: int, pad_len: int) -> None:
    """Bytes counting down from the pad length at the end of the block."""
    pad_byte = pad_len
    for i in range(block_size - 1, -1, -1):
        last_block[i] = pad_byte
        pad_byte = (pad_byte - 1) & 0xFF


def iso78164_filler(last_block: bytearray, block_size: int, last_data, last_data_len: int, pad_len: int) -> None:
    """A 0x80 marker followed by zero bytes."""
    last_block[last_data_len] = 0x80


def arbitrary_tail_byte_filler(last_block: bytearray, block_size: int, last_data, last_data_len: int, pad_len: int) -> None:
    """
    All pad bytes hold one random value that differs from the last data byte.

    This is the only kind of padding that is not susceptible to a padding
    oracle: any last block is valid padding.
    """
    fill(last_block, tail_fill_byte(last_data, last_data_len))


def tail_fill_byte(last_data, last_data_len: int) -> int:
    """
    Draw the fill byte for tail byte paddings.

    Exactly one random draw: uniform over the 255 values that are not the
    last data byte, or over all 256 values if the last block is padding only.
    """
    if last_data_len == 0:
        return secrets.randbelow(256)

    return (last_data[last_data_len - 1] + 1 + secrets.randbelow(255)) & 0xFF
