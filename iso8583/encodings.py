"""Encoders that turn field content into wire bytes and back."""

from __future__ import annotations

import binascii
from abc import ABC, abstractmethod

from .errors import EncodingError

__all__ = [
    "Encoder",
    "AsciiEncoder",
    "BcdEncoder",
    "LbcdEncoder",
    "BinaryEncoder",
    "BytesToAsciiHexEncoder",
    "AsciiHexToBytesEncoder",
    "BerTlvTagEncoder",
    "ASCII",
    "BCD",
    "LBCD",
    "BINARY",
    "BYTES_TO_ASCII_HEX",
    "ASCII_HEX_TO_BYTES",
    "BER_TLV_TAG",
]


class Encoder(ABC):
    """Converts field content to and from its wire representation."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Return the wire form of ``data``."""

    @abstractmethod
    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        """Decode ``length`` units from ``data``.

        Returns the decoded bytes and the number of bytes consumed.
        """


def _require_non_negative(length: int) -> None:
    if length < 0:
        raise EncodingError(f"length should be positive, got {length}")


class AsciiEncoder(Encoder):
    """Plain 7-bit ASCII: one byte per character."""

    @staticmethod
    def _check(data: bytes, message: str) -> None:
        for byte in data:
            if byte > 127:
                raise EncodingError(message) from ValueError(
                    f"invalid ASCII char: {chr(byte)!r}"
                )

    def encode(self, data: bytes) -> bytes:
        data = bytes(data)
        self._check(data, "failed to perform ASCII encoding")
        return data

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        if length < 0:
            raise EncodingError(f"invalid length: {length}")
        data = bytes(data)
        if len(data) < length:
            raise EncodingError(
                f"not enough data to decode. expected len {length}, got {len(data)}"
            )
        chunk = data[:length]
        self._check(chunk, "failed to perform ASCII decoding")
        return chunk, length


def _pack_digits(digits: bytes) -> bytes:
    """Pack an even number of ASCII digits into BCD nibbles."""
    for ch in digits:
        if not 0x30 <= ch <= 0x39:
            raise ValueError(f"bad BCD input: {chr(ch)!r}")
    it = iter(digits)
    return bytes(((hi - 0x30) << 4) | (lo - 0x30) for hi, lo in zip(it, it))


def _unpack_digits(packed: bytes) -> bytes:
    """Expand BCD bytes into ASCII digits."""
    out = bytearray()
    for byte in packed:
        hi, lo = divmod(byte, 16)
        if hi > 9 or lo > 9:
            raise ValueError(f"bad BCD byte: 0x{byte:02X}")
        out += bytes((hi + 0x30, lo + 0x30))
    return bytes(out)


def _bcd_read_size(length: int) -> tuple[int, int]:
    decoded_len = length + length % 2
    return decoded_len, decoded_len // 2


class BcdEncoder(Encoder):
    """Right-aligned packed BCD: odd-length values get a leading zero."""

    def encode(self, data: bytes) -> bytes:
        data = bytes(data)
        if len(data) % 2:
            data = b"0" + data
        try:
            return _pack_digits(data)
        except ValueError as exc:
            raise EncodingError("failed to perform BCD encoding") from exc

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        _require_non_negative(length)
        data = bytes(data)
        decoded_len, read = _bcd_read_size(length)
        if len(data) < read:
            raise EncodingError(
                f"not enough data to decode. expected len {read}, got {len(data)}"
            )
        try:
            digits = _unpack_digits(data[:read])
        except ValueError as exc:
            raise EncodingError("failed to perform BCD decoding") from exc
        return digits[decoded_len - length:], read


class LbcdEncoder(Encoder):
    """Left-aligned packed BCD: odd-length values get a trailing zero."""

    def encode(self, data: bytes) -> bytes:
        data = bytes(data)
        if len(data) % 2:
            data = data + b"0"
        try:
            return _pack_digits(data)
        except ValueError as exc:
            raise EncodingError("failed to perform BCD encoding") from exc

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        _require_non_negative(length)
        data = bytes(data)
        _, read = _bcd_read_size(length)
        if len(data) < read:
            raise EncodingError(
                f"not enough data to decode. expected len {read}, got {len(data)}"
            )
        try:
            digits = _unpack_digits(data[:read])
        except ValueError as exc:
            raise EncodingError("failed to perform BCD decoding") from exc
        return digits[:length], read


class BinaryEncoder(Encoder):
    """Raw bytes, passed through unchanged."""

    def encode(self, data: bytes) -> bytes:
        return bytes(data)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        _require_non_negative(length)
        data = bytes(data)
        if length > len(data):
            raise EncodingError(
                "failed to perform binary decoding: "
                f"length {length} exceeds the data size {len(data)}"
            )
        return data[:length], length


class BytesToAsciiHexEncoder(Encoder):
    """Bytes on the inside, upper-case ASCII hex digits on the wire.

    ``decode`` takes the number of bytes to produce; it reads twice as
    many hex characters.
    """

    def encode(self, data: bytes) -> bytes:
        return bytes(data).hex().upper().encode("ascii")

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        _require_non_negative(length)
        data = bytes(data)
        read = length * 2
        if read > len(data):
            raise EncodingError("not enough data to read")
        try:
            out = binascii.unhexlify(data[:read])
        except (binascii.Error, ValueError) as exc:
            raise EncodingError("failed to perform hex decoding") from exc
        return out, read


class AsciiHexToBytesEncoder(Encoder):
    """ASCII hex digits on the inside, raw bytes on the wire.

    ``decode`` takes the number of wire bytes to read and returns their
    upper-case hex text.
    """

    def encode(self, data: bytes) -> bytes:
        try:
            return binascii.unhexlify(bytes(data))
        except (binascii.Error, ValueError) as exc:
            raise EncodingError("failed to perform hex decoding") from exc

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        _require_non_negative(length)
        data = bytes(data)
        if length > len(data):
            raise EncodingError("not enough data to read")
        return data[:length].hex().upper().encode("ascii"), length


class BerTlvTagEncoder(Encoder):
    """BER-TLV tags: hex text inside, variable-length tag bytes on the wire.

    ``decode`` ignores ``length``: the tag's own bits say how long it is.
    """

    def encode(self, data: bytes) -> bytes:
        return ASCII_HEX_TO_BYTES.encode(data)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        data = bytes(data)
        if not data:
            raise EncodingError("failed to read byte") from EOFError()
        tag_len = 1
        # low five bits all set: the tag number continues in later bytes
        if data[0] & 0x1F == 0x1F:
            while True:
                if tag_len >= len(data):
                    raise EncodingError("failed to decode TLV tag") from EOFError()
                byte = data[tag_len]
                tag_len += 1
                if not byte & 0x80:
                    break
        return ASCII_HEX_TO_BYTES.decode(data[:tag_len], tag_len)


ASCII = AsciiEncoder()
BCD = BcdEncoder()
LBCD = LbcdEncoder()
BINARY = BinaryEncoder()
BYTES_TO_ASCII_HEX = BytesToAsciiHexEncoder()
ASCII_HEX_TO_BYTES = AsciiHexToBytesEncoder()
BER_TLV_TAG = BerTlvTagEncoder()