"""
Constant-Time Helpers
Buffer filling and branchless flag arithmetic.

The flag helpers work on small non-negative ints (bytes and block offsets)
and return 0 or 1. They use arithmetic instead of comparisons so that the
removers can accumulate their result over a whole block without an `if`
that depends on the data being unpadded.
"""

# Flags are computed over ints below this bound (byte values, block offsets).
_FLAG_SHIFT = 16


def fill(buffer: bytearray, value: int) -> None:
    """
    Fill a buffer with a byte value.

    Sets the first byte, then doubles the filled region with slice copies,
    so a buffer of length n takes about log2(n) copies, whatever the value.
    """
    length = len(buffer)
    if length == 0:
        return

    buffer[0] = value
    filled = 1
    while filled < length:
        count = min(filled, length - filled)
        buffer[filled:filled + count] = buffer[:count]
        filled += count


def ct_eq(a: int, b: int) -> int:
    """1 if a == b else 0."""
    return (((a ^ b) - 1) >> _FLAG_SHIFT) & 1


def ct_ne(a: int, b: int) -> int:
    """1 if a != b else 0."""
    return 1 ^ ct_eq(a, b)


def ct_le(a: int, b: int) -> int:
    """1 if a <= b else 0."""
    return 1 ^ (((b - a) >> _FLAG_SHIFT) & 1)


def ct_select(flag: int, a: int, b: int) -> int:
    """a if flag is 1, b if flag is 0."""
    return b ^ (-flag & (a ^ b))
