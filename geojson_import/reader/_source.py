"""Top-level JSON value stream.

Turns the caller's input (stream, ``str`` or ``bytes``) into a sequence
of decoded top-level JSON values. A source may hold several
concatenated values; each one is yielded as soon as it is decoded, so
primitives from the first value are already in the store when a later
value turns out to be malformed.

Decoding choices:
- Every number decodes to ``JsonNumber``, a ``decimal.Decimal`` that
  remembers its literal token, so tag values repeat the source text
  (``1.50`` stays ``"1.50"``, ``0.00000001`` does not become ``"1E-8"``).
  Integers of any length decode without hitting ``int``'s digit limit.
- ``NaN``, ``Infinity`` and ``-Infinity`` are rejected.
"""

from __future__ import annotations

import json
import re
from decimal import Decimal
from typing import TYPE_CHECKING

from geojson_import.reader._validation import IllegalDataError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import IO

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_BOM = "\ufeff"


def _reject_constant(name: str) -> object:
    msg = f"Non-finite number '{name}' is not allowed in GeoJSON"
    raise IllegalDataError(msg)


class JsonNumber(Decimal):
    """A decoded JSON number that keeps its source token in ``text``."""

    __slots__ = ("text",)

    def __new__(cls, text: str) -> JsonNumber:
        number = super().__new__(cls, text)
        number.text = text
        return number


_DECODER = json.JSONDecoder(
    parse_float=JsonNumber,
    parse_int=JsonNumber,
    parse_constant=_reject_constant,
)


def read_text(source: IO[bytes] | IO[str] | bytes | str, encoding: str) -> str:
    """Read the whole source as text.

    Raises:
        IllegalDataError: If byte input cannot be decoded with ``encoding``.
        TypeError: If ``source`` is neither text, bytes nor a readable stream.
    """
    if hasattr(source, "read"):
        raw = source.read()  # type: ignore[union-attr]
    else:
        raw = source

    if isinstance(raw, bytes | bytearray):
        try:
            raw = bytes(raw).decode(encoding)
        except UnicodeDecodeError as exc:
            msg = f"GeoJSON input is not valid {encoding}: {exc}"
            raise IllegalDataError(msg) from exc

    if not isinstance(raw, str):
        msg = f"GeoJSON source must be text, bytes or a readable stream, got {type(raw).__name__}"
        raise TypeError(msg)

    return raw.removeprefix(_BOM)


def iter_values(text: str) -> Iterator[object]:
    """Yield each top-level JSON value in ``text``, in order.

    Raises:
        IllegalDataError: On invalid JSON or nesting too deep to decode.
    """
    end = len(text)
    idx = _WHITESPACE.match(text, 0).end()  # type: ignore[union-attr]
    while idx < end:
        try:
            value, idx = _DECODER.raw_decode(text, idx)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
            raise IllegalDataError(msg) from exc
        except RecursionError as exc:
            msg = "JSON nesting is too deep to decode"
            raise IllegalDataError(msg) from exc
        yield value
        idx = _WHITESPACE.match(text, idx).end()  # type: ignore[union-attr]
