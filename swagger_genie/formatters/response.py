"""Formatter for Success and Failure directives.

WHY: Response directives are the most ambiguous tag family. A schema
kind (``array``), a type path (``dto.User``) and a description can each
be present or absent, and authors mix keys with positionals. The
resolver decides which value is which; this module decides how much of
the full ``<code> {<kind>} <typePath> "<desc>"`` shape can be written.

HOW: Four layouts are tried from richest to poorest:

  1. ``<code> {<kind-or-object>} <typePath> "<desc>"``
  2. ``<code> {<kind-or-object>} <typePath>``
  3. ``<code> {<kind>} "<desc>"``      (kind given, no type path)
  4. ``<code> "<desc>"``

RULES:
- ``object`` is only applied here, never during resolution
- Layout 3 requires an explicit kind; otherwise layout 4 is used
- A record with only a code (or a code and a kind) is incomplete
"""

from __future__ import annotations

from typing import Sequence, cast

from swagger_genie.core.ir import Record, ResponseRecord, SchemaKind, Tag
from swagger_genie.core.resolver import resolve_response
from swagger_genie.core.tokenizer import quote_directive
from swagger_genie.formatters.base import BaseFormatter


class ResponseFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Response"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return resolve_response(tokens)

    def render(self, record: Record) -> str:
        response = cast(ResponseRecord, record)
        kind = response.schema_kind if SchemaKind.is_kind(response.schema_kind) else None

        if response.type_path is not None:
            value = "{} {{{}}} {}".format(
                response.code, kind or SchemaKind.OBJECT.value, response.type_path,
            )
            if response.description is not None:
                value += " " + quote_directive(response.description)
            return value

        if kind is not None:
            return "{} {{{}}} {}".format(response.code, kind, quote_directive(response.description or ""))
        return "{} {}".format(response.code, quote_directive(response.description or ""))
