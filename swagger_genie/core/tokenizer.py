"""Quote- and escape-aware splitting for call arguments and directive values.

WHY: Call arguments are comma-separated, but descriptions routinely
contain commas and quotes ("Returns a user, or 404"). Directive values
are whitespace-separated, but quoted descriptions contain spaces. Both
directions need a splitter that treats a double-quoted span as one unit
and honours backslash escapes.

HOW: A single left-to-right scan tracks two flags: inside-quotes and
escaped. A backslash marks the next character as literal, so an escaped
quote neither opens nor closes a span and an escaped separator does not
split. Raw token text is kept intact during the scan so the resolver can
still see which ``=`` is escaped; decoding (``unquote``) happens per
token afterwards.

Call form and directive form escape differently. In call form every
``\\x`` decodes to ``x``, as in a string literal. swag reads directive
descriptions almost verbatim, so there only ``\\"`` and ``\\\\`` are
escapes and any other backslash is literal text.

RULES:
- split_raw_args: separator is a comma outside quotes; tokens are
  trimmed, empty tokens are dropped, nothing is decoded
- split_args: split_raw_args followed by unquote on every token
- unquote strips quotes from a token that starts AND ends with one, then
  decodes every escape
- quote escapes backslashes and quotes (call form)
- quote_directive escapes quotes and only the backslashes that would
  otherwise read as an escape (directive form)
- scan_words: separator is whitespace outside quotes; spans are kept so
  the validator can anchor diagnostics; an empty quoted word ("") is kept
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

_QUOTE = '"'
_ESCAPE = "\\"

_CALL_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_DIRECTIVE_ESCAPE_RE = re.compile(r'\\(["\\])')
_DIRECTIVE_BACKSLASH_RE = re.compile(r'\\(?=["\\]|$)')


def _is_wrapped(text: str) -> bool:
    return len(text) >= 2 and text.startswith(_QUOTE) and text.endswith(_QUOTE)


def strip_quotes(value: str) -> str:
    """Trim and remove surrounding quotes without decoding escapes."""
    trimmed = value.strip()
    if _is_wrapped(trimmed):
        return trimmed[1:-1]
    return trimmed


def unescape(text: str) -> str:
    """Decode call-form escapes: every ``\\x`` becomes ``x``."""
    return _CALL_ESCAPE_RE.sub(r"\1", text)


def unquote(value: str) -> str:
    """Strip surrounding quotes and decode every escape."""
    return unescape(strip_quotes(value))


def quote(value: str) -> str:
    """Wrap ``value`` in double quotes for call form."""
    return _QUOTE + value.replace(_ESCAPE, "\\\\").replace(_QUOTE, '\\"') + _QUOTE


def quote_directive(value: str) -> str:
    """Wrap ``value`` in double quotes for a swag comment.

    A backslash is doubled only when it precedes a quote, another
    backslash or the closing quote, so ``\\d+`` stays readable.
    """
    escaped = _DIRECTIVE_BACKSLASH_RE.sub(r"\\\\", value)
    return _QUOTE + escaped.replace(_QUOTE, '\\"') + _QUOTE


def unquote_directive(value: str) -> str:
    """Inverse of quote_directive; bare text is only trimmed."""
    trimmed = value.strip()
    if _is_wrapped(trimmed):
        return _DIRECTIVE_ESCAPE_RE.sub(r"\1", trimmed[1:-1])
    return trimmed


def find_unquoted(text: str, target: str) -> int:
    """Index of the first ``target`` outside quotes and not escaped, or -1."""
    in_quotes = False
    escaped = False
    for index, ch in enumerate(text):
        if escaped:
            escaped = False
            continue
        if ch == _ESCAPE:
            escaped = True
            continue
        if ch == _QUOTE:
            in_quotes = not in_quotes
            continue
        if ch == target and not in_quotes:
            return index
    return -1


def split_raw_args(raw_args: str) -> List[str]:
    """Split the text between a call's parentheses, keeping quotes and escapes."""
    tokens: List[str] = []
    current: List[str] = []
    in_quotes = False
    escaped = False

    def _flush() -> None:
        token = "".join(current).strip()
        if token:
            tokens.append(token)
        current.clear()

    for ch in raw_args:
        if escaped:
            current.append(ch)
            escaped = False
            continue
        if ch == _ESCAPE:
            current.append(ch)
            escaped = True
            continue
        if ch == _QUOTE:
            in_quotes = not in_quotes
            current.append(ch)
            continue
        if ch == "," and not in_quotes:
            _flush()
            continue
        current.append(ch)

    _flush()
    return tokens


def split_args(raw_args: str) -> List[str]:
    """Split the text between a call's parentheses into decoded tokens.

    Example::

        >>> split_args('a, "b,c", d="e,f", x\\\\,y')
        ['a', 'b,c', 'd="e,f"', 'x,y']
    """
    return [unquote(token) for token in split_raw_args(raw_args)]


@dataclass(frozen=True)
class Word:
    """One whitespace-delimited word of a directive value.

    RULES:
    - raw is the exact source text, quotes and escapes included
    - start/end are offsets into the scanned text (end exclusive)
    """

    raw: str
    start: int
    end: int

    @property
    def quoted(self) -> bool:
        return _is_wrapped(self.raw)

    @property
    def text(self) -> str:
        return unquote_directive(self.raw)

    def unbracket(self, opening: str, closing: str) -> Optional[str]:
        """Return the inside of ``{...}``-style markers, or None if absent."""
        if len(self.raw) >= 2 and self.raw.startswith(opening) and self.raw.endswith(closing):
            return self.raw[1:-1]
        return None


def scan_words(text: str) -> List[Word]:
    """Split ``text`` on whitespace outside quotes, keeping source spans."""
    words: List[Word] = []
    start: Optional[int] = None
    in_quotes = False
    escaped = False

    for index, ch in enumerate(text):
        if start is None:
            if ch.isspace():
                continue
            start = index
        if escaped:
            escaped = False
            continue
        if ch == _ESCAPE:
            escaped = True
            continue
        if ch == _QUOTE:
            in_quotes = not in_quotes
            continue
        if ch.isspace() and not in_quotes:
            words.append(Word(raw=text[start:index], start=start, end=index))
            start = None

    if start is not None:
        words.append(Word(raw=text[start:], start=start, end=len(text)))
    return words


def split_by_comma(value: str) -> List[str]:
    """Plain comma split with trimming; used for the Tags directive value."""
    return [item.strip() for item in value.split(",") if item.strip()]


def split_by_whitespace(value: str) -> List[str]:
    return value.split()
