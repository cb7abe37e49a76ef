"""Abstract base formatter for the call → directive direction.

WHY: Every tag consumes the same raw token list but resolves it into
a different record and renders a different directive value. This base
class fixes the two-step contract (resolve, then render) so the
transcoder can drive any tag generically and so incomplete input is
handled in exactly one place.

HOW: BaseFormatter is an ABC with three requirements — a ``name``
property, ``resolve()`` (tokens → record) and ``render()`` (complete
record → value text). The concrete ``format()`` glues them together and
returns None when the record is incomplete.

RULES:
- Subclasses MUST implement ``name``, ``resolve()`` and ``render()``
- ``render()`` is only called with a complete record
- ``format()`` never raises; None means "leave the line untouched"
- The returned value excludes the ``// @Tag`` prefix

To add a tag:
1. Add a variant to ``Tag`` in core/ir.py
2. Subclass BaseFormatter in formatters/
3. Register it in FORMATTERS in formatters/__init__.py
4. Add the matching renderer in renderers/
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from swagger_genie.core.ir import Record, Tag

logger = logging.getLogger(__name__)


class BaseFormatter(ABC):
    """Resolve a tag's arguments and render its directive value."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable formatter name, e.g. 'Param'."""

    @abstractmethod
    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        """Build the tag's record from raw (undecoded) argument tokens."""

    @abstractmethod
    def render(self, record: Record) -> str:
        """Render a complete record as the directive value."""

    def format(self, tag: Tag, tokens: Sequence[str]) -> Optional[str]:
        """Resolve and render, or return None while arguments are incomplete."""
        record = self.resolve(tag, tokens)
        if not record.is_complete:
            logger.debug("%s formatter: incomplete %s arguments: %r", self.name, tag.value, record)
            return None
        return self.render(record)
