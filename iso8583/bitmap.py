"""A 1-indexed, big-endian bitmap field that can grow by whole bitmaps."""

from __future__ import annotations

import json

from .encodings import Encoder
from .errors import EncodingError

__all__ = ["Bitmap", "DEFAULT_BITMAP_LENGTH"]

DEFAULT_BITMAP_LENGTH = 8
_FIRST_BIT_ON = 0b10000000


def _mask(n: int) -> int:
    return 0x80 >> ((n - 1) % 8)


class Bitmap:
    """Bitmap of field presence.

    ``length`` is the size in bytes of one bitmap (8 when zero). Unless
    ``disable_auto_expand`` is set, the first bit of each bitmap tells
    whether another bitmap follows, and setting a bit beyond the current
    size appends bitmaps as needed.
    """

    def __init__(
        self,
        encoder: Encoder,
        length: int = 0,
        disable_auto_expand: bool = False,
        description: str = "Bitmap",
    ) -> None:
        self.encoder = encoder
        self.spec_length = length
        self.disable_auto_expand = disable_auto_expand
        self.description = description
        self.bitmap_length = length or DEFAULT_BITMAP_LENGTH
        self._data = bytearray(self.bitmap_length)

    @property
    def data(self) -> bytes:
        """Raw bitmap bytes."""
        return bytes(self._data)

    @data.setter
    def data(self, value: bytes) -> None:
        self._data = bytearray(value)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        """Number of bits the bitmap currently holds."""
        return len(self._data) * 8

    def __str__(self) -> str:
        return " ".join(f"{byte:08b}" for byte in self._data)

    def __repr__(self) -> str:
        return f"Bitmap({self._data.hex().upper()!r})"

    def pack(self) -> bytes:
        """Return the encoded bitmap."""
        try:
            return self.encoder.encode(bytes(self._data))
        except EncodingError as exc:
            raise EncodingError(f"failed to encode content: {exc}") from exc

    def unpack(self, data: bytes) -> int:
        """Read the bitmap from ``data`` and return the number of bytes read.

        Keeps reading further bitmaps while the first bit of the last one
        read is set, unless auto expansion is disabled.
        """
        data = bytes(data)
        self._data = bytearray()
        read = 0
        index = 0
        while True:
            index += 1
            try:
                decoded, consumed = self.encoder.decode(data[read:], self.bitmap_length)
            except EncodingError as exc:
                raise EncodingError(
                    f"failed to decode content for {index} bitmap: {exc}"
                ) from exc
            read += consumed
            self._data += decoded
            if self.disable_auto_expand or not decoded or not decoded[0] & _FIRST_BIT_ON:
                return read

    def set(self, n: int) -> None:
        """Set bit ``n``, expanding the bitmap if allowed and needed."""
        if n <= 0:
            return
        if n > len(self._data) * 8:
            if self.disable_auto_expand:
                return
            size = self.bitmap_length
            needed = (n - 1) // (size * 8) + 1
            self._data[len(self._data) - size] |= _FIRST_BIT_ON
            for remaining in range(needed - len(self._data) // size, 0, -1):
                extra = bytearray(size)
                if remaining > 1:
                    extra[0] = _FIRST_BIT_ON
                self._data += extra
        self._data[(n - 1) // 8] |= _mask(n)

    def is_set(self, n: int) -> bool:
        """Whether bit ``n`` is set; bits outside the bitmap are not."""
        if n <= 0 or n > len(self._data) * 8:
            return False
        return bool(self._data[(n - 1) // 8] & _mask(n))

    def reset(self) -> None:
        """Clear the bitmap back to a single empty bitmap."""
        self.bitmap_length = self.spec_length or DEFAULT_BITMAP_LENGTH
        self._data = bytearray(self.bitmap_length)

    def is_bitmap_presence_bit(self, n: int) -> bool:
        """Whether bit ``n`` marks the presence of a following bitmap."""
        if self.disable_auto_expand or n <= 0:
            return False
        return n % (self.bitmap_length * 8) == 1

    def marshal(self, other: Bitmap | None) -> None:
        """Take the bits of ``other``."""
        if other is None:
            return
        if not isinstance(other, Bitmap):
            raise TypeError("data does not match required Bitmap type")
        self._data = bytearray(other._data)

    def unmarshal(self, other: Bitmap | None) -> None:
        """Copy these bits into ``other``."""
        if other is None:
            return
        if not isinstance(other, Bitmap):
            raise TypeError(f"unsupported type: expected Bitmap, got {type(other).__name__}")
        other._data = bytearray(self._data)

    def to_json(self) -> str:
        """Return the bitmap as a JSON string of upper-case hex."""
        return json.dumps(self._data.hex().upper())

    def from_json(self, text: str | bytes) -> None:
        """Set the bitmap from a JSON string of hex digits."""
        try:
            value = json.loads(text)
        except ValueError as exc:
            raise ValueError(f"failed to unquote input: {exc}") from exc
        if not isinstance(value, str):
            raise ValueError("failed to unquote input: invalid syntax")
        try:
            self._data = bytearray.fromhex(value)
        except ValueError as exc:
            raise ValueError(f"failed to decode hex string: {exc}") from exc