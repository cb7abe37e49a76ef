"""Per-line processing and a caller-owned diagnostics store.

WHY: The core transforms one line at a time and returns nothing but
text. Hosts need a little more: skip a line while the author is still
typing inside its parentheses, validate what was produced, and keep a
per-document list of diagnostics where each processed line replaces its
own previous entries.

HOW: Two components:
  LineProcessor    — wraps expand_line() with the cursor skip rule,
                     validation and line-number anchoring; returns a
                     LineResult that says what happened and why
  DiagnosticsStore — thread-safe dict of document → diagnostics with
                     per-line replace semantics

RULES:
- A line that is not call form yields an empty diagnostics list, which
  clears any stale entries for that line when stored
- A cursor strictly after the first "(" and at or before the last ")"
  suppresses processing (the call is still being typed)
- Incomplete arguments are not an error: the line is left untouched
- An unknown tag with passthrough off is reported as unsupported_tag
- Diagnostics produced here always carry the processed line number
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from swagger_genie import config
from swagger_genie.core.ir import Diagnostic, Tag
from swagger_genie.core.lines import is_cursor_inside_args, parse_call_line
from swagger_genie.core.transcoder import expand_line, validate

logger = logging.getLogger(__name__)


class NoOpReason(str, enum.Enum):
    """Why a line was left unchanged."""

    UNMATCHED_PATTERN = "unmatched_pattern"
    CURSOR_INSIDE_ARGS = "cursor_inside_args"
    INCOMPLETE_ARGUMENTS = "incomplete_arguments"
    UNSUPPORTED_TAG = "unsupported_tag"


@dataclass
class LineResult:
    """Outcome of processing one line.

    RULES:
    - text: the replacement line, or the original line when unchanged
    - changed: True only when text differs from the input
    - reason: None when changed, otherwise why nothing happened
    - diagnostics: warnings for the produced line (empty when unchanged)
    """

    text: str
    changed: bool
    reason: Optional[NoOpReason] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)


class LineProcessor:
    """Expand call-form lines and validate the result."""

    def __init__(self, passthrough_unknown: Optional[bool] = None) -> None:
        self._passthrough_unknown = passthrough_unknown

    def _expands_unknown(self) -> bool:
        if self._passthrough_unknown is None:
            return config.PASSTHROUGH_UNKNOWN_TAGS
        return self._passthrough_unknown

    def process_line(
        self,
        text: str,
        line_number: int = 0,
        cursor: Optional[int] = None,
    ) -> LineResult:
        """Process a single line of a document.

        Args:
            text: The current line text.
            line_number: 0-based line number, attached to diagnostics.
            cursor: Cursor column when the cursor is on this line.

        Returns:
            LineResult with the replacement text and its diagnostics.
        """
        parsed = parse_call_line(text)
        if parsed is None:
            logger.debug("Line %d left as-is: not call form", line_number)
            return LineResult(text=text, changed=False, reason=NoOpReason.UNMATCHED_PATTERN)

        if cursor is not None and is_cursor_inside_args(text, cursor):
            logger.debug("Line %d skipped: cursor at %d inside arguments", line_number, cursor)
            return LineResult(text=text, changed=False, reason=NoOpReason.CURSOR_INSIDE_ARGS)

        if Tag.parse(parsed.tag) is Tag.UNKNOWN and not self._expands_unknown():
            logger.debug("Line %d left as-is: unknown tag %r", line_number, parsed.tag)
            return LineResult(text=text, changed=False, reason=NoOpReason.UNSUPPORTED_TAG)

        expanded = expand_line(text, self._passthrough_unknown)
        if expanded is None:
            logger.debug("Line %d left as-is: arguments incomplete", line_number)
            return LineResult(text=text, changed=False, reason=NoOpReason.INCOMPLETE_ARGUMENTS)

        diagnostics = [
            dataclasses.replace(diagnostic, line=line_number)
            for diagnostic in validate(expanded)
        ]
        return LineResult(text=expanded, changed=True, diagnostics=diagnostics)


class DiagnosticsStore:
    """Thread-safe per-document diagnostics with per-line replacement.

    WHY: Editors keep one diagnostics collection per document. Each time
    a line is processed, its old diagnostics must go and the new ones
    must be merged in without disturbing other lines.

    HOW: cli.expand_text() fills one per run; editor integrations that
    embed the package keep one for the whole session.

    RULES:
    - set_line() replaces every entry whose line equals line_number
    - get() returns a copy ordered by (line, start)
    - Unknown documents read as an empty list
    """

    def __init__(self) -> None:
        self._by_document: Dict[str, List[Diagnostic]] = {}
        self._lock = threading.Lock()

    def set_line(
        self,
        document: str,
        line_number: int,
        diagnostics: List[Diagnostic],
    ) -> List[Diagnostic]:
        """Replace one line's diagnostics and return the document's full list."""
        anchored = [dataclasses.replace(d, line=line_number) for d in diagnostics]
        with self._lock:
            existing = self._by_document.get(document, [])
            kept = [d for d in existing if d.line != line_number]
            updated = sorted(kept + anchored, key=lambda d: (d.line or 0, d.start))
            self._by_document[document] = updated
            return list(updated)

    def get(self, document: str) -> List[Diagnostic]:
        with self._lock:
            return list(self._by_document.get(document, []))

    def clear(self, document: str) -> None:
        with self._lock:
            self._by_document.pop(document, None)
