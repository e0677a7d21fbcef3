"""
Padding Removers
Find the end of the clear data in padded data.

Every remover returns a tuple (end, valid): the length of the clear data and
a 0/1 flag telling whether the padding is well-formed. Removers never raise
and never leave a loop early. Every byte of the last block is read and every
decision is folded into flags, so the time taken does not depend on where the
padding starts. The padder turns valid == 0 into an InvalidPaddingError
afterwards.

The caller guarantees that data_len is a positive multiple of block_size.
"""

from blockpad.fill import ct_eq, ct_le, ct_ne, ct_select, fill


def _length_byte(data, data_len: int, block_size: int) -> tuple[int, int]:
    """Read the pad length from the last byte. Returns (pad_len, in_range)."""
    pad_len = data[data_len - 1]
    in_range = ct_ne(pad_len, 0) & ct_le(pad_len, block_size)
    return pad_len, in_range


def zero_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """Zero padding. The last byte must be 0, data ends after the last non-zero byte."""
    block_start = data_len - block_size
    valid = ct_eq(data[data_len - 1], 0)

    end = block_start
    found = 0
    for index in range(data_len - 1, block_start - 1, -1):
        non_zero = ct_ne(data[index], 0)
        first = non_zero & (1 ^ found)
        end = ct_select(first, index + 1, end)
        found |= non_zero

    return end, valid


def pkcs7_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """PKCS#7 padding. The last pad_len bytes must all be pad_len."""
    pad_len, valid = _length_byte(data, data_len, block_size)

    bad = 0
    for offset in range(1, block_size + 1):
        in_pad = ct_le(offset, pad_len)
        bad |= in_pad & ct_ne(data[data_len - offset], pad_len)

    return data_len - pad_len, valid & (1 ^ bad)


def x923_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """ANSI X.923 padding. The pad_len - 1 bytes before the length byte must be 0."""
    pad_len, valid = _length_byte(data, data_len, block_size)

    bad = 0
    for offset in range(2, block_size + 1):
        in_pad = ct_le(offset, pad_len)
        bad |= in_pad & ct_ne(data[data_len - offset], 0)

    return data_len - pad_len, valid & (1 ^ bad)


def iso10126_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """
    ISO 10126 padding. Only the length byte carries information.

    Nothing but the length byte is read, so the cost is the same for
    every pad length. This is the fastest remover.
    """
    pad_len, valid = _length_byte(data, data_len, block_size)
    return data_len - pad_len, valid


def rfc4303_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """RFC 4303 padding. The pad bytes count down to the length byte, i.e. 1, 2, ..., pad_len."""
    pad_len, valid = _length_byte(data, data_len, block_size)

    bad = 0
    for offset in range(1, block_size + 1):
        in_pad = ct_le(offset, pad_len)
        expected = (pad_len - offset + 1) & 0xFF
        bad |= in_pad & ct_ne(data[data_len - offset], expected)

    return data_len - pad_len, valid & (1 ^ bad)


def iso78164_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """ISO 7816-4 padding. Zero bytes back to a 0x80 marker inside the last block."""
    block_start = data_len - block_size

    end = block_start
    found = 0
    marker = 0
    for index in range(data_len - 1, block_start - 1, -1):
        value = data[index]
        first = ct_ne(value, 0) & (1 ^ found)
        marker |= first & ct_eq(value, 0x80)
        end = ct_select(first, index, end)
        found |= first

    return end, marker


def arbitrary_tail_byte_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """
    Arbitrary tail byte padding. Data ends after the last byte that differs
    from the tail byte.

    Every last block is valid, so this remover can not act as an oracle.
    """
    block_start = data_len - block_size
    pad_byte = data[data_len - 1]

    end = block_start
    found = 0
    for index in range(data_len - 2, block_start - 1, -1):
        differs = ct_ne(data[index], pad_byte)
        first = differs & (1 ^ found)
        end = ct_select(first, index + 1, end)
        found |= differs

    return end, 1


def not_last_byte_remover(data, data_len: int, block_size: int) -> tuple[int, int]:
    """
    Not last byte padding. Same layout as arbitrary tail byte padding.

    The whole last block is handled as one little-endian integer and XORed
    with a block of tail bytes. The pad bytes become the most significant zero
    bytes of the result, so the bit length of the result marks the end of the
    data. No per-byte loop, which makes this faster than the byte scan.
    """
    block_start = data_len - block_size

    pad_block = bytearray(block_size)
    fill(pad_block, data[data_len - 1])

    diff = int.from_bytes(data[block_start:data_len], "little") ^ int.from_bytes(pad_block, "little")

    return block_start + ((diff.bit_length() + 7) >> 3), 1
