"""Split raw NDJSON input into numbered candidate lines.

``split_lines(raw)`` accepts either one undivided buffer (``str``,
``bytes`` or ``bytearray``) or an iterable of line buffers such as an open
file or ``text.splitlines(keepends=True)``, and returns an ordered list
of :class:`CandidateLine`.

Splitting rules:

- A line ends at ``\\n``; a ``\\r`` directly before it is part of the
  terminator and is dropped with it.
- The empty segment after a final terminator is not a line, so
  ``"1\\n2\\n"`` and ``"1\\n2"`` both give two candidates and ``""`` gives
  none.
- Interior empty lines are kept.  They are not valid JSON and are
  reported by the decoder.

Pre-split elements go through the same rules: each element's own
terminator is stripped, an element with embedded newlines is split
further, and a zero-length final element is dropped.  A list of lines
and the buffer it came from therefore always split identically.

Bytes are never decoded here; that happens per line in :mod:`ndline.codec`
so an encoding error can be tied to its line number.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

Buffer = str | bytes | bytearray
RawInput = Buffer | Iterable[str | bytes]


@dataclass(frozen=True)
class CandidateLine:
    """One line of input with its terminator removed."""

    line_number: int
    content: str | bytes


def _split_buffer(buf: str | bytes) -> list[str | bytes]:
    nl, cr = ("\n", "\r") if isinstance(buf, str) else (b"\n", b"\r")
    parts = buf.split(nl)
    tail = parts.pop()
    lines: list[str | bytes] = [p[:-1] if p.endswith(cr) else p for p in parts]
    if tail:
        lines.append(tail)
    return lines


def _split_element(element: str | bytes) -> list[str | bytes]:
    if isinstance(element, bytearray):
        element = bytes(element)
    if isinstance(element, str):
        return _split_buffer(element if element.endswith("\n") else element + "\n")
    if isinstance(element, bytes):
        return _split_buffer(element if element.endswith(b"\n") else element + b"\n")
    raise TypeError(f"lines must be str or bytes, got {type(element).__name__}")


def split_lines(raw: RawInput) -> list[CandidateLine]:
    """Split *raw* into candidate lines, numbered from 1.

    Raises:
        TypeError: *raw* is neither a buffer nor an iterable of str/bytes.
    """
    if isinstance(raw, (str, bytes, bytearray)):
        segments = _split_buffer(bytes(raw) if isinstance(raw, bytearray) else raw)
    elif isinstance(raw, Iterable):
        elements = list(raw)
        if elements and len(elements[-1]) == 0:
            elements.pop()
        segments = [seg for element in elements for seg in _split_element(element)]
    else:
        raise TypeError(f"cannot split {type(raw).__name__} into lines")

    return [CandidateLine(line_number=n, content=seg) for n, seg in enumerate(segments, start=1)]
