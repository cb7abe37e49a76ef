"""Abstract base renderer for the directive → call direction.

WHY: The editor shows swag directives in their compact call form and
the CLI can collapse a file back to call form. Each tag needs its own
inverse of the forward formatter; this base class gives them a shared
contract and the argument-writing helpers that keep the output
re-parseable.

HOW: BaseRenderer is an ABC with a single ``render(tag, value)`` method
returning ``@Tag(k=v, ...)`` or None. ``call()`` assembles the text;
``bare_or_quoted()`` decides whether a value can be written without
quotes.

RULES:
- Rendered calls use explicit keys in a fixed per-tag order
- A rendered call must forward-transform back to the same directive value
- Values with whitespace, commas, quotes or backslashes are always quoted
- None means "cannot be shown as a call" (the line is left as-is)
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from swagger_genie.core.ir import Tag
from swagger_genie.core.tokenizer import quote

_BARE_VALUE_RE = re.compile(r'^[^\s",\\]+$')


def bare_or_quoted(value: str) -> str:
    if _BARE_VALUE_RE.match(value):
        return value
    return quote(value)


def call(tag: Tag, segments: Iterable[str]) -> str:
    return "@{}({})".format(tag.value, ", ".join(segments))


class BaseRenderer(ABC):
    """Render a directive value as call-form text."""

    @abstractmethod
    def render(self, tag: Tag, value: str) -> Optional[str]:
        """Return ``@Tag(...)`` for ``value``, or None if it cannot be shown."""
