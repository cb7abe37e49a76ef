"""Structural checks for type paths in generated directives.

WHY: swag resolves ``dto.User``-style references against the Go code at
generation time; a typo such as ``dtoUser`` or ``dto..User`` only fails
much later. A cheap structural check right after the transform lets the
editor underline the token immediately. Nothing is resolved against real
code.

HOW: Only directives that carry types (Param, Header, Success, Failure)
are inspected. Two passes run over the unquoted words of the value:

  1. Every ``[\\w.]+`` run that contains a dot must be exactly
     ``\\w+\\.\\w+``.
  2. The type-path slot (Success/Failure word after ``{kind}``, or the
     second word when no kind is written; the Param type when ``in`` is
     ``body``) must be dotted unless it is a Go or schema primitive.

RULES:
- Diagnostics are warnings and never block a transform
- Spans are columns in the line passed to validate(), end exclusive
- A token is reported at most once
- Quoted words (descriptions) are never inspected
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple

from swagger_genie.core.ir import Diagnostic, Severity, Tag
from swagger_genie.core.lines import parse_directive_line
from swagger_genie.core.tokenizer import Word, scan_words

TYPE_PATH_RE = re.compile(r"^\w+\.\w+$")
_DOTTED_RUN_RE = re.compile(r"[\w.]+")
_IDENTIFIER_RE = re.compile(r"^\w+$")
_SLOT_PREFIX_RE = re.compile(r"^(?:\[\]|\*)+")

TYPED_TAGS = frozenset({Tag.PARAM, Tag.HEADER, Tag.SUCCESS, Tag.FAILURE})

PRIMITIVE_TYPES = frozenset({
    "object", "array", "string", "number", "integer", "boolean", "file",
    "bool", "byte", "rune", "any",
    "int", "int8", "int16", "int32", "int64",
    "uint", "uint8", "uint16", "uint32", "uint64",
    "float32", "float64",
})


def _message(token: str) -> str:
    return "'{}' does not match 'packageName.TypeName' or 'packageName.FunctionName'.".format(token)


def _type_slot(tag: Tag, words: Sequence[Word]) -> Optional[Word]:
    if tag in (Tag.SUCCESS, Tag.FAILURE):
        if len(words) < 2 or words[1].quoted:
            return None
        index = 2 if words[1].unbracket("{", "}") is not None else 1
        if index < len(words) and not words[index].quoted:
            return words[index]
        return None
    if tag is Tag.PARAM and len(words) >= 3 and words[1].text.lower() == "body":
        return words[2]
    return None


def validate(directive_text: str) -> List[Diagnostic]:
    """Return warning diagnostics for malformed type paths in a directive line."""
    parsed = parse_directive_line(directive_text)
    if parsed is None:
        return []
    tag = Tag.parse(parsed.tag)
    if tag not in TYPED_TAGS:
        return []

    offset = parsed.value_start
    words = scan_words(parsed.value)
    found: Dict[Tuple[int, int], str] = {}

    for word in words:
        if word.quoted:
            continue
        for run in _DOTTED_RUN_RE.finditer(word.raw):
            token = run.group(0)
            if "." in token and not TYPE_PATH_RE.match(token):
                start = offset + word.start + run.start()
                found[(start, start + len(token))] = token

    slot = _type_slot(tag, words)
    if slot is not None:
        prefix = _SLOT_PREFIX_RE.match(slot.raw)
        skip = prefix.end() if prefix else 0
        token = slot.raw[skip:]
        if _IDENTIFIER_RE.match(token) and token not in PRIMITIVE_TYPES:
            start = offset + slot.start + skip
            found[(start, start + len(token))] = token

    return [
        Diagnostic(start=start, end=end, message=_message(token), severity=Severity.WARNING)
        for (start, end), token in sorted(found.items())
    ]
