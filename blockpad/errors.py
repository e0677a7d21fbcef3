"""
Errors
Everything the padder can raise.

Recoverable errors derive from BlockPadError (a ValueError), so callers can
catch them in one place. Invalid padding is a single, undifferentiated error:
telling an attacker *why* the padding was wrong is itself a padding oracle.

PaddingPreconditionError is not a BlockPadError. It signals a caller bug,
not bad data, and must not be caught along with the ordinary errors.
"""


class BlockPadError(ValueError):
    """Base class for all recoverable padding errors."""


class InvalidBlockSizeError(BlockPadError):
    """The block size is outside of the allowed range."""

    def __init__(self, message: str = "invalid block size"):
        super().__init__(message)


class InvalidPadAlgorithmError(BlockPadError):
    """The pad algorithm is not one of the known algorithms."""

    def __init__(self, message: str = "invalid pad algorithm"):
        super().__init__(message)


class InvalidPaddedDataLenError(BlockPadError):
    """The "padded" data can not be padded, judging by its length alone."""

    def __init__(self, message: str = "padded data length is not a multiple of the block size"):
        super().__init__(message)


class InvalidPaddingError(BlockPadError):
    """
    Something is wrong with the padding.

    It is deliberately not stated what exactly is wrong.
    """

    def __init__(self, message: str = "invalid padding"):
        super().__init__(message)


class PaddingPreconditionError(RuntimeError):
    """Data violates a hard precondition of the pad algorithm (caller bug)."""
