"""Shared test data helpers."""

import os

from blockpad import PadAlgorithm

# Block size used by most tests (AES)
TEST_BLOCK_SIZE = 16

# Block sizes for the round trip sweep, including both ends of the range
BLOCK_SIZES = [1, 2, 3, 8, 15, 16, 17, 64, 255]

# Paddings whose output does not depend on random numbers
DETERMINISTIC = [
    PadAlgorithm.ZERO,
    PadAlgorithm.PKCS7,
    PadAlgorithm.X923,
    PadAlgorithm.RFC4303,
    PadAlgorithm.ISO78164,
]

# Paddings that accept every last block
ORACLE_FREE = [PadAlgorithm.ARBITRARY_TAIL_BYTE, PadAlgorithm.NOT_LAST_BYTE]


def make_test_data(algorithm: PadAlgorithm, length: int) -> bytes:
    """Random test data. Zero padding data never ends with a 0 byte."""
    data = bytearray(os.urandom(length))
    if algorithm == PadAlgorithm.ZERO and length > 0 and data[-1] == 0:
        data[-1] = 0xFF
    return bytes(data)


class ReadTracker:
    """Wraps bytes and records every index that is read."""

    def __init__(self, data: bytes):
        self._data = data
        self.reads = []

    def __len__(self):
        return len(self._data)

    def __getitem__(self, key):
        if isinstance(key, slice):
            self.reads.extend(range(*key.indices(len(self._data))))
        else:
            self.reads.append(key)
        return self._data[key]


class WriteTracker(bytearray):
    """A bytearray that counts item assignments and the bytes they write."""

    def __init__(self, length: int):
        super().__init__(length)
        self.writes = 0
        self.written = 0

    def __setitem__(self, key, value):
        self.writes += 1
        self.written += len(value) if isinstance(key, slice) else 1
        super().__setitem__(key, value)
