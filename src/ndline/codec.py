"""Record codec: one JSON document per NDJSON line.

Decoding
--------
``decode_all(lines)`` decodes :class:`~ndline.splitter.CandidateLine`
objects in order and returns a :data:`DecodeOutcome`:

- :class:`Valid` with one value per line, in line order, or
- :class:`Invalid` with the :class:`LineError` of the *first* line that
  failed.  Nothing after that line is evaluated and no partial list is
  returned.

Malformed input is a normal outcome, so ``decode_all`` never raises for
it.  ``decode_line`` and ``Invalid.unwrap()`` raise :class:`LineDecodeError`
for callers that prefer exceptions.

Grammar-level decoding is delegated to :func:`json.loads`.  This module
adds the line policy on top: blank lines are errors, bytes are decoded
per line, the non-standard ``NaN`` / ``Infinity`` constants that
:mod:`json` accepts by default are rejected, and so are numbers such as
``1e400`` that overflow to infinity.  Nesting deeper than the interpreter
can recurse is reported as a bad line, not raised.

Encoding
--------
``encode_all(values)`` serialises each value to compact single-line JSON
and terminates every line (including the last) with ``\\n``.  ``json``
always escapes control characters, so an encoded value can never span
lines.  Values outside the closed JSON type raise ``TypeError`` or
``ValueError`` (see :func:`ndline.values.from_python`).
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from ndline.splitter import CandidateLine
from ndline.values import JsonValue, StructuredValue, from_python, to_python

# ---------------------------------------------------------------------------
# Outcome types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LineError:
    """The first line of an input that is not a valid JSON document."""

    line_number: int
    reason: str
    raw_text: str
    # 1-based column reported by the JSON codec, when it reports one.
    column: int | None = None

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.reason}"


class LineDecodeError(ValueError):
    """Exception form of a :class:`LineError`."""

    def __init__(self, error: LineError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Valid:
    """Every line decoded; ``values[i]`` is line ``i + 1``."""

    values: list[JsonValue]

    ok = True

    def unwrap(self) -> list[JsonValue]:
        return self.values

    def structured(self) -> list[StructuredValue]:
        """Return the decoded values in tagged form."""
        return [from_python(v) for v in self.values]


@dataclass(frozen=True)
class Invalid:
    """Decoding stopped at ``error.line_number``."""

    error: LineError

    ok = False

    def unwrap(self) -> list[JsonValue]:
        raise LineDecodeError(self.error)


DecodeOutcome = Valid | Invalid

# ---------------------------------------------------------------------------
# Decode path
# ---------------------------------------------------------------------------


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard constant {name!r}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range {literal!r}")
    return value


def _as_text(content: str | bytes, encoding: str) -> str:
    if isinstance(content, str):
        return content
    return content.decode(encoding)


def decode_line(line: CandidateLine, *, encoding: str = "utf-8") -> JsonValue:
    """Decode exactly one JSON document from *line*.

    Raises:
        LineDecodeError: the line is blank, is not valid in *encoding*, or
            is not a single complete JSON document.
    """
    try:
        text = _as_text(line.content, encoding)
    except UnicodeDecodeError as exc:
        raise LineDecodeError(
            LineError(
                line_number=line.line_number,
                reason=f"invalid {encoding}: {exc.reason} (byte {exc.start + 1})",
                raw_text=line.content.decode(encoding, errors="replace"),
                column=exc.start + 1,
            )
        ) from exc

    if not text.strip():
        raise LineDecodeError(
            LineError(line_number=line.line_number, reason="empty line", raw_text=text)
        )

    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as exc:
        raise LineDecodeError(
            LineError(
                line_number=line.line_number,
                reason=f"invalid JSON: {exc.msg} (col {exc.colno})",
                raw_text=text,
                column=exc.colno,
            )
        ) from exc
    except ValueError as exc:
        raise LineDecodeError(
            LineError(line_number=line.line_number, reason=f"invalid JSON: {exc}", raw_text=text)
        ) from exc
    except RecursionError as exc:
        raise LineDecodeError(
            LineError(
                line_number=line.line_number,
                reason="invalid JSON: nesting too deep",
                raw_text=text,
            )
        ) from exc


def decode_all(lines: Iterable[CandidateLine], *, encoding: str = "utf-8") -> DecodeOutcome:
    """Decode *lines* in order, stopping at the first bad one."""
    values: list[JsonValue] = []
    for line in lines:
        try:
            values.append(decode_line(line, encoding=encoding))
        except LineDecodeError as exc:
            return Invalid(exc.error)
    return Valid(values)


# ---------------------------------------------------------------------------
# Encode path
# ---------------------------------------------------------------------------


def encode_line(value: JsonValue | StructuredValue, *, ensure_ascii: bool = False) -> str:
    """Serialise one value to compact JSON, without a line terminator."""
    return json.dumps(
        to_python(from_python(value)),
        separators=(",", ":"),
        ensure_ascii=ensure_ascii,
        allow_nan=False,
    )


def iter_encoded(
    values: Iterable[JsonValue | StructuredValue], *, ensure_ascii: bool = False
) -> Iterator[str]:
    """Yield one ``\\n``-terminated line per value."""
    for value in values:
        yield encode_line(value, ensure_ascii=ensure_ascii) + "\n"


def encode_all(
    values: Iterable[JsonValue | StructuredValue], *, ensure_ascii: bool = False
) -> str:
    """Return the NDJSON text for *values*; ``""`` for no values."""
    return "".join(iter_encoded(values, ensure_ascii=ensure_ascii))
