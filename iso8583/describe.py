"""Helpers for rendering messages and bitmaps in a human-readable form."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["split_and_annotate", "sort_field_ids"]

_BITS_PER_ROW = 32
_ROW_PAD = 9


def _field_id_key(field_id: str) -> tuple[int, int, str]:
    try:
        return (0, int(field_id), field_id)
    except ValueError:
        return (1, 0, field_id)


def sort_field_ids(ids: Iterable[str]) -> list[str]:
    """Return field identifiers in display order.

    Numeric identifiers come first, ordered by value; the rest follow in
    plain string order.
    """
    return sorted(ids, key=_field_id_key)


def split_and_annotate(bits: str) -> str:
    """Annotate space-separated bit blocks with the bit numbers they cover.

    Blocks are kept on one line, joined by spaces, until a block ends on a
    multiple of 32 bits; the next block then starts a new line. When there
    are more than four blocks every label is right-aligned so that rows
    line up.
    """
    if not bits:
        return ""

    blocks = bits.split(" ")
    width = len(blocks[0])
    pad = _ROW_PAD if len(blocks) > 4 else 0
    last = len(blocks) - 1

    parts = []
    for index, block in enumerate(blocks):
        start = index * width + 1
        end = (index + 1) * width
        label = f"[{start}-{end}]".rjust(pad)
        parts.append(label + block)
        if index != last:
            parts.append("\n" if end % _BITS_PER_ROW == 0 else " ")
    return "".join(parts)