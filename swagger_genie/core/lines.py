"""Line-shape recognition for call-form and directive-form text.

WHY: Both directions start from a single editor line. The forward
direction only fires on ``@Tag(args)`` lines; the reverse direction only
on ``// @Tag value`` lines. Because the two shapes are disjoint, running
the forward transform on its own output is a no-op.

HOW: Two anchored regular expressions. The call pattern requires the
whole line to be ``<indent>[@#]Tag(...)`` with optional trailing
whitespace; the directive pattern requires ``<indent>//`` followed by
``@Tag``.

RULES:
- Tag names start with a letter and continue with word characters
- The call's argument text is everything between the first ``(`` after
  the tag and the last ``)`` on the line
- Directive values are right-trimmed; value_start records their column
- build_directive_line emits ``// @Tag`` when the value is empty
"""

from __future__ import annotations

import re
from typing import Optional

from swagger_genie.core.ir import AnnotationCall, DirectiveLine

_CALL_RE = re.compile(r"^(\s*)[@#]([A-Za-z]\w*)\((.*)\)\s*$")
_DIRECTIVE_RE = re.compile(r"^(\s*)//\s*@([A-Za-z]\w*)\s*(.*)$")


def parse_call_line(line: str) -> Optional[AnnotationCall]:
    """Parse ``<indent>@Tag(args)``; None when the line is not call form."""
    match = _CALL_RE.match(line)
    if not match:
        return None
    return AnnotationCall(indent=match.group(1), tag=match.group(2), raw_args=match.group(3))


def parse_directive_line(line: str) -> Optional[DirectiveLine]:
    """Parse ``<indent>// @Tag value``; None when the line is not a directive."""
    match = _DIRECTIVE_RE.match(line)
    if not match:
        return None
    return DirectiveLine(
        indent=match.group(1),
        tag=match.group(2),
        value=match.group(3).rstrip(),
        value_start=match.start(3),
    )


def build_directive_line(indent: str, tag: str, value: str) -> str:
    if not value:
        return "{}// @{}".format(indent, tag)
    return "{}// @{} {}".format(indent, tag, value)


def is_cursor_inside_args(line: str, cursor: int) -> bool:
    """True when ``cursor`` sits after the first ``(`` and at or before the last ``)``."""
    open_index = line.find("(")
    close_index = line.rfind(")")
    if open_index == -1 or close_index == -1:
        return False
    return open_index < cursor <= close_index
