"""Public entry points: marshal and unmarshal NDJSON.

These wire the pure splitter and codec to settings and the file helpers.
They hold no state between calls and are safe to use from several
threads at once.

    >>> marshal([{"id": 1}, [1, 2, 3]])
    '{"id":1}\\n[1,2,3]\\n'
    >>> unmarshal('{"id": 1}\\n[1, 2, 3]\\r\\n')
    Valid(values=[{'id': 1}, [1, 2, 3]])
    >>> unmarshal("1\\nnope\\n").error.line_number
    2
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ndline.codec import DecodeOutcome, decode_all, encode_all, iter_encoded
from ndline.config import Settings, get_settings
from ndline.files import read_lines, write_data
from ndline.splitter import RawInput, split_lines
from ndline.values import JsonValue, StructuredValue


def unmarshal(raw: RawInput, *, settings: Settings | None = None) -> DecodeOutcome:
    """Decode NDJSON from a buffer or a sequence of lines.

    Returns :class:`~ndline.codec.Valid` or :class:`~ndline.codec.Invalid`;
    malformed data never raises.
    """
    settings = settings or get_settings()
    return decode_all(split_lines(raw), encoding=settings.codec.encoding)


def unmarshal_file(path: Path | str, *, settings: Settings | None = None) -> DecodeOutcome:
    """Decode the NDJSON file at *path*.

    Raises:
        ResourceError: the file cannot be read.
    """
    return unmarshal(read_lines(Path(path)), settings=settings)


def marshal(
    values: Iterable[JsonValue | StructuredValue], *, settings: Settings | None = None
) -> str:
    """Encode *values* as NDJSON text, one ``\\n``-terminated line each.

    Raises:
        TypeError, ValueError: a value is not representable as JSON.
    """
    settings = settings or get_settings()
    return encode_all(values, ensure_ascii=settings.codec.ensure_ascii)


def marshal_to_file(
    path: Path | str,
    values: Iterable[JsonValue | StructuredValue],
    *,
    append: bool = False,
    settings: Settings | None = None,
) -> int:
    """Write *values* to *path* as NDJSON and return how many were written.

    Every value is serialised and encoded to the configured charset before
    the file is opened, so an unencodable value leaves the file untouched.

    Raises:
        TypeError, ValueError: a value is not representable as JSON.
        UnicodeEncodeError: a value has characters the configured encoding
            cannot hold.
        ResourceError: the file cannot be written.
    """
    settings = settings or get_settings()
    lines = list(iter_encoded(values, ensure_ascii=settings.codec.ensure_ascii))
    data = "".join(lines).encode(settings.codec.encoding)
    write_data(Path(path), data, append=append)
    return len(lines)
