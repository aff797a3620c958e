"""Reader and writer for the line-oriented ``.properties`` text format.

The format follows ``java.util.Properties``:

- ``#`` and ``!`` start comment lines; blank lines are ignored
- a key ends at the first unescaped ``=``, ``:`` or whitespace
- a line ending in an odd number of backslashes continues on the next line
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes are recognised;
  any other escaped character stands for itself
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from propdiff.domain.errors import PropertyFormatError
from propdiff.domain.property_map import PropertyMap, PropertyMapBuilder

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

_LINE_BREAK: Final = re.compile(r"\r\n|\r|\n")
_WHITESPACE: Final[str] = " \t\f"
_SEPARATORS: Final[str] = "=:"
_COMMENT_MARKERS: Final[str] = "#!"
_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")

_UNESCAPES: Final[dict[str, str]] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "=": "\\=",
    ":": "\\:",
    "#": "\\#",
    "!": "\\!",
}

# Same rendering as java.util.Date#toString, e.g. "Sun Oct 18 09:30:00 UTC 2026".
TIMESTAMP_FORMAT: Final[str] = "%a %b %d %H:%M:%S %Z %Y"


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, logical_line)`` for every non-comment entry."""

    physical = _LINE_BREAK.split(text)
    index = 0
    while index < len(physical):
        number = index + 1
        line = physical[index].lstrip(_WHITESPACE)
        index += 1
        if not line or line[0] in _COMMENT_MARKERS:
            continue
        parts: list[str] = []
        while _continues(line):
            parts.append(line[:-1])
            if index >= len(physical):
                line = ""
                break
            line = physical[index].lstrip(_WHITESPACE)
            index += 1
        parts.append(line)
        yield number, "".join(parts)


def _split_entry(line: str) -> tuple[str, str]:
    key_end = len(line)
    escaped = False
    for position, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS or char in _WHITESPACE:
            key_end = position
            break

    rest = line[key_end:].lstrip(_WHITESPACE)
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return line[:key_end], rest


def _unescape(raw: str, *, source: str, line: int) -> str:
    chars: list[str] = []
    position = 0
    while position < len(raw):
        char = raw[position]
        position += 1
        if char != "\\":
            chars.append(char)
            continue
        if position >= len(raw):
            break
        char = raw[position]
        position += 1
        if char == "u":
            digits = raw[position : position + 4]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                raise PropertyFormatError(source, "Malformed \\uxxxx encoding", line=line)
            chars.append(chr(int(digits, 16)))
            position += 4
        else:
            chars.append(_UNESCAPES.get(char, char))
    text = "".join(chars)
    # Characters outside the BMP arrive as two \u escapes (UTF-16 surrogates).
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def parse_properties(text: str, *, source: str = "<string>") -> PropertyMap:
    """Parse ``.properties`` text into a :class:`PropertyMap`.

    When a key repeats, the last value wins. Raises
    :class:`~propdiff.domain.errors.PropertyFormatError` for malformed escapes or
    entries without a key.
    """

    builder = PropertyMapBuilder()
    for number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, source=source, line=number)
        if not key:
            raise PropertyFormatError(source, "entry has an empty key", line=number)
        builder.put(key, _unescape(raw_value, source=source, line=number))
    return builder.build()


def _unicode_escape(code: int) -> str:
    if code > 0xFFFF:
        high, low = divmod(code - 0x10000, 0x400)
        return f"\\u{0xD800 + high:04X}\\u{0xDC00 + low:04X}"
    return f"\\u{code:04X}"


def _escape_char(char: str, *, escape_unicode: bool) -> str:
    escaped = _ESCAPES.get(char)
    if escaped is not None:
        return escaped
    code = ord(char)
    if escape_unicode and (code < 0x20 or code > 0x7E):
        return _unicode_escape(code)
    return char


def escape_key(key: str, *, escape_unicode: bool = True) -> str:
    return "".join(
        "\\ " if char == " " else _escape_char(char, escape_unicode=escape_unicode)
        for char in key
    )


def escape_value(value: str, *, escape_unicode: bool = True) -> str:
    # Only a leading space is significant to the reader.
    return "".join(
        "\\ "
        if char == " " and position == 0
        else _escape_char(char, escape_unicode=escape_unicode)
        for position, char in enumerate(value)
    )


def _comment_lines(comment: str, *, escape_unicode: bool) -> list[str]:
    if escape_unicode:
        comment = "".join(
            _unicode_escape(ord(char)) if ord(char) > 0xFF else char for char in comment
        )
    first, *rest = _LINE_BREAK.split(comment)
    lines = [f"#{first}"]
    # Continuation lines already marked as comments are kept verbatim.
    lines.extend(line if line[:1] in ("#", "!") else f"#{line}" for line in rest)
    return lines


def dump_properties(
    properties: PropertyMap,
    *,
    comment: str | None = None,
    timestamp: datetime | None = None,
    line_separator: str = "\n",
    escape_unicode: bool = True,
) -> str:
    """Render ``properties`` as ``.properties`` text.

    ``comment`` becomes ``#``-prefixed header lines, followed by ``timestamp``
    when given. Entries are written in map order, one per line, each line
    terminated by ``line_separator``.
    """

    lines: list[str] = []
    if comment is not None:
        lines.extend(_comment_lines(comment, escape_unicode=escape_unicode))
    if timestamp is not None:
        lines.append(f"#{timestamp.strftime(TIMESTAMP_FORMAT)}")
    lines.extend(
        f"{escape_key(key, escape_unicode=escape_unicode)}="
        f"{escape_value(value, escape_unicode=escape_unicode)}"
        for key, value in properties.items()
    )
    return "".join(f"{line}{line_separator}" for line in lines)
