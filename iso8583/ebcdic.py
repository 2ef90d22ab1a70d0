"""EBCDIC encoders: a legacy ASCII mapping and IBM code page 1047."""

from __future__ import annotations

from .encodings import Encoder
from .errors import EncodingError

__all__ = ["EbcdicEncoder", "Ebcdic1047Encoder", "EBCDIC", "EBCDIC1047"]

_ASCII_TO_EBCDIC = bytes.fromhex(
    "00 01 02 03 37 2D 2E 2F 16 05 25 0B 0C 0D 0E 0F"
    "10 11 12 13 3C 3D 32 26 18 19 3F 27 1C 1D 1E 1F"
    "40 4F 7F 7B 5B 6C 50 7D 4D 5D 5C 4E 6B 60 4B 61"
    "F0 F1 F2 F3 F4 F5 F6 F7 F8 F9 7A 5E 4C 7E 6E 6F"
    "7C C1 C2 C3 C4 C5 C6 C7 C8 C9 D1 D2 D3 D4 D5 D6"
    "D7 D8 D9 E2 E3 E4 E5 E6 E7 E8 E9 4A E0 5A 5F 6D"
    "79 81 82 83 84 85 86 87 88 89 91 92 93 94 95 96"
    "97 98 99 A2 A3 A4 A5 A6 A7 A8 A9 C0 6A D0 A1 07"
    "20 21 22 23 24 15 06 17 28 29 2A 2B 2C 09 0A 1B"
    "30 31 1A 33 34 35 36 08 38 39 3A 3B 04 14 3E E1"
    "41 42 43 44 45 46 47 48 49 51 52 53 54 55 56 57"
    "58 59 62 63 64 65 66 67 68 69 70 71 72 73 74 75"
    "76 77 78 80 8A 8B 8C 8D 8E 8F 90 9A 9B 9C 9D 9E"
    "9F A0 AA AB AC AD AE AF B0 B1 B2 B3 B4 B5 B6 B7"
    "B8 B9 BA BB BC BD BE BF CA CB CC CD CE CF DA DB"
    "DC DD DE DF EA EB EC ED EE EF FA FB FC FD FE FF"
)

_EBCDIC_TO_ASCII = bytes.fromhex(
    "00 01 02 03 9C 09 86 7F 97 8D 8E 0B 0C 0D 0E 0F"
    "10 11 12 13 9D 85 08 87 18 19 92 8F 1C 1D 1E 1F"
    "80 81 82 83 84 0A 17 1B 88 89 8A 8B 8C 05 06 07"
    "90 91 16 93 94 95 96 04 98 99 9A 9B 14 15 9E 1A"
    "20 A0 A1 A2 A3 A4 A5 A6 A7 A8 5B 2E 3C 28 2B 21"
    "26 A9 AA AB AC AD AE AF B0 B1 5D 24 2A 29 3B 5E"
    "2D 2F B2 B3 B4 B5 B6 B7 B8 B9 7C 2C 25 5F 3E 3F"
    "BA BB BC BD BE BF C0 C1 C2 60 3A 23 40 27 3D 22"
    "C3 61 62 63 64 65 66 67 68 69 C4 C5 C6 C7 C8 C9"
    "CA 6A 6B 6C 6D 6E 6F 70 71 72 CB CC CD CE CF D0"
    "D1 7E 73 74 75 76 77 78 79 7A D2 D3 D4 D5 D6 D7"
    "D8 D9 DA DB DC DD DE DF E0 E1 E2 E3 E4 E5 E6 E7"
    "7B 41 42 43 44 45 46 47 48 49 E8 E9 EA EB EC ED"
    "7D 4A 4B 4C 4D 4E 4F 50 51 52 EE EF F0 F1 F2 F3"
    "5C 9F 53 54 55 56 57 58 59 5A F4 F5 F6 F7 F8 F9"
    "30 31 32 33 34 35 36 37 38 39 FA FB FC FD FE FF"
)


def _check_length(data: bytes, length: int) -> None:
    if length < 0:
        raise EncodingError(f"length should be positive, got {length}")
    if len(data) < length:
        raise EncodingError(
            f"not enough data to decode. expected len {length}, got {len(data)}"
        )


class EbcdicEncoder(Encoder):
    """Byte-for-byte mapping between ASCII (Latin-1 range) and EBCDIC."""

    def encode(self, data: bytes) -> bytes:
        return bytes(data).translate(_ASCII_TO_EBCDIC)

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        data = bytes(data)
        _check_length(data, length)
        return data[:length].translate(_EBCDIC_TO_ASCII), length


def _build_1047_table() -> str:
    # Code page 1047 equals code page 037 apart from three swapped pairs.
    chars = list(bytes(range(256)).decode("cp037"))
    for a, b in ((0x5F, 0xB0), (0xAD, 0xBA), (0xBB, 0xBD)):
        chars[a], chars[b] = chars[b], chars[a]
    return "".join(chars)


_DECODE_1047 = _build_1047_table()
_ENCODE_1047 = {ch: code for code, ch in enumerate(_DECODE_1047)}


class Ebcdic1047Encoder(Encoder):
    """IBM code page 1047: UTF-8 text inside, EBCDIC bytes on the wire."""

    def encode(self, data: bytes) -> bytes:
        try:
            text = bytes(data).decode("utf-8")
            return bytes(_ENCODE_1047[ch] for ch in text)
        except (UnicodeDecodeError, KeyError) as exc:
            raise EncodingError("failed to encode EBCDIC") from exc

    def decode(self, data: bytes, length: int) -> tuple[bytes, int]:
        data = bytes(data)
        _check_length(data, length)
        text = "".join(_DECODE_1047[byte] for byte in data[:length])
        return text.encode("utf-8"), length


EBCDIC = EbcdicEncoder()
EBCDIC1047 = Ebcdic1047Encoder()