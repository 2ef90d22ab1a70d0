# iso8583

This package gives you building blocks for ISO 8583 card-payment messages in
Python. It has field encoders, auto-expanding bitmaps, the standard message
type indicators, and helpers for laying out messages for display.

## Installation

```
pip install .
```

The package uses only the standard library at runtime.

## Encoders

Every encoder has two methods:

- `encode(data)` turns bytes into their wire form.
- `decode(data, length)` reads `length` units from the start of `data` and returns `(decoded, bytes_read)`.

Both raise `iso8583.errors.EncodingError` on bad input. A negative length counts as bad input. So does too little data, or characters the encoding cannot represent.

```python
from iso8583.encodings import AsciiEncoder, BcdEncoder, BytesToAsciiHexEncoder

BcdEncoder().encode(b"123")              # b"\x01\x23" (right aligned)
BcdEncoder().decode(b"\x01\x23", 3)      # (b"123", 2)
BytesToAsciiHexEncoder().encode(b"\xaa") # b"AA"
AsciiEncoder().decode(b"hello", 5)       # (b"hello", 5)
```

| Class                    | Module               | Ready-made instance  | Wire form                                      |
|--------------------------|----------------------|----------------------|------------------------------------------------|
| `AsciiEncoder`           | `iso8583.encodings`  | `ASCII`              | 7-bit ASCII                                    |
| `BinaryEncoder`          | `iso8583.encodings`  | `BINARY`             | raw bytes, unchanged                           |
| `BcdEncoder`             | `iso8583.encodings`  | `BCD`                | packed BCD, right aligned (leading zero)       |
| `LbcdEncoder`            | `iso8583.encodings`  | `LBCD`               | packed BCD, left aligned (trailing zero)       |
| `BytesToAsciiHexEncoder` | `iso8583.encodings`  | `BYTES_TO_ASCII_HEX` | bytes written as upper-case hex text           |
| `AsciiHexToBytesEncoder` | `iso8583.encodings`  | `ASCII_HEX_TO_BYTES` | hex text written as raw bytes                  |
| `BerTlvTagEncoder`       | `iso8583.encodings`  | `BER_TLV_TAG`        | BER-TLV tags (`b"9F02"` ↔ `b"\x9f\x02"`)       |
| `EbcdicEncoder`          | `iso8583.ebcdic`     | `EBCDIC`             | EBCDIC, classic byte-for-byte table            |
| `Ebcdic1047Encoder`      | `iso8583.ebcdic`     | `EBCDIC1047`         | IBM code page 1047; UTF-8 text on the inside   |

Some encoders treat `length` in their own way:

- For `BcdEncoder` and `LbcdEncoder`, `length` counts digits.
- For `BytesToAsciiHexEncoder`, it counts the bytes to produce, so twice as many hex characters are read.
- `BerTlvTagEncoder.decode` ignores `length`, because the tag's own bits say how long it is.

All encoders derive from the abstract base class `iso8583.encodings.Encoder`.

## Bitmaps

```python
from iso8583.bitmap import Bitmap
from iso8583.encodings import BytesToAsciiHexEncoder

bitmap = Bitmap(BytesToAsciiHexEncoder(), 8, False, "Bitmap")
bitmap.set(20)
bitmap.set(70)        # grows into a secondary bitmap and sets bit 1
bitmap.pack()         # 32 hex characters
bitmap.is_set(70)     # True
len(bitmap)           # 128 bits
str(bitmap)           # "10000000 00000000 00010000 ..." one block per byte

fresh = Bitmap(BytesToAsciiHexEncoder())
fresh.unpack(bitmap.pack())  # 32: the number of bytes read
```

The `length` argument sets the size of one bitmap in bytes. Zero means the default of 8 bytes.

By default the first bit of each bitmap says whether another bitmap follows:

- `unpack` keeps reading bitmaps while that bit is set.
- `set` adds bitmaps as needed.

With `disable_auto_expand=True` the bitmap keeps a fixed size. Bits beyond its length are then ignored, and bit 1 is an ordinary bit.

The bitmap has these other members:

- `reset()` returns the bitmap to one empty bitmap.
- `is_bitmap_presence_bit(n)` tells whether bit `n` marks a following bitmap.
- `marshal(other)` and `unmarshal(other)` copy bits from or to another `Bitmap`.
- `to_json()` and `from_json(text)` read and write the bitmap as a JSON string of hex digits.
- The `data` property holds the raw bytes, and `bytes(bitmap)` returns them too.

## Message type indicators

`iso8583.mti.MessageTypeIndicator` is a string enum of the ISO 8583:1987 codes:

```python
from iso8583.mti import MessageTypeIndicator

MessageTypeIndicator("0100") is MessageTypeIndicator.AUTHORIZATION_REQUEST  # True
str(MessageTypeIndicator.NETWORK_MANAGEMENT_REQUEST)                         # "0800"
```

## Display helpers

`iso8583.describe` has two helpers for laying out message contents:

```python
from iso8583.describe import split_and_annotate, sort_field_ids

print(split_and_annotate("01100000 00000000 00000000 00000000"))
# [1-8]01100000 [9-16]00000000 [17-24]00000000 [25-32]00000000

sort_field_ids(["z", "17", "2", "a", "0"])   # ["0", "2", "17", "a", "z"]
```

`split_and_annotate`:

- labels each block of bits with the bit numbers it covers;
- starts a new line after every 32 bits;
- right-aligns the labels when there are more than four blocks.

`sort_field_ids` puts numeric ids first, by value, and then the others in string order.

## Errors

`iso8583.errors` defines the following errors:

- `EncodingError` is a `ValueError` subclass. The encoders and `Bitmap.pack` / `Bitmap.unpack` raise it.
- `PackError` wraps the cause of a failed pack.
- `UnpackError` wraps the cause of a failed unpack and keeps `field_id` and `raw_message`.

The package itself does not raise `PackError` or `UnpackError`. They are there for code that packs and unpacks whole messages on top of these parts.

`Bitmap.marshal` and `Bitmap.unmarshal` raise `TypeError` when given something other than a `Bitmap`. `Bitmap.from_json` raises `ValueError` on text that is not a JSON hex string.

## What this package does not do

This package has no message type that holds fields and no field types for strings, numbers or composite TLV data. It also has no length-prefix or padding handling and no message specifications. So it cannot pack or unpack a complete ISO 8583 message or print a full description of one. There is no command-line tool either. It gives you the encoders, bitmaps, indicators and display helpers described above, for you to build those on.

## Running the tests

```
pip install ".[test]"
pytest
```