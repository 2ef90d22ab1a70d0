"""Exceptions raised while encoding, packing and unpacking messages."""

from __future__ import annotations


class EncodingError(ValueError):
    """Raised when data cannot be encoded or decoded.

    The message is safe to show; the underlying reason, if any, is kept
    as ``__cause__``.
    """


class UnpackError(Exception):
    """Raised when a message cannot be unpacked.

    Keeps the identifier of the failing field and the raw message so
    that callers can inspect what was received.
    """

    def __init__(self, err: BaseException, field_id: str = "", raw_message: bytes = b"") -> None:
        super().__init__(str(err))
        self.err = err
        self.field_id = field_id
        self.raw_message = bytes(raw_message)
        self.__cause__ = err

    def __str__(self) -> str:
        return str(self.err)


class PackError(Exception):
    """Raised when a message cannot be packed."""

    def __init__(self, err: BaseException) -> None:
        super().__init__(str(err))
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return str(self.err)