"""Formatters for Param and Header directives.

WHY: Param and Header are the positional-heavy tags: a swag Param line
is ``<name> <in> <type> <required> "<description>"`` and a Header line
is ``<code> {<type>} <name> "<description>"``. Authors rarely remember
the order, so the call form accepts keys and the resolver fills gaps.

HOW: Both formatters delegate to the resolver and only concern
themselves with the final layout.

RULES:
- Param needs all five fields; the description is always quoted
- Header needs code, type and name; the description is optional
- Quoted descriptions escape internal quotes as ``\\"`` (quote_directive)
"""

from __future__ import annotations

from typing import Sequence, cast

from swagger_genie.core.ir import HeaderRecord, ParamRecord, Record, Tag
from swagger_genie.core.resolver import resolve_header, resolve_param
from swagger_genie.core.tokenizer import quote_directive
from swagger_genie.formatters.base import BaseFormatter


class ParamFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Param"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return resolve_param(tokens)

    def render(self, record: Record) -> str:
        param = cast(ParamRecord, record)
        return "{} {} {} {} {}".format(
            param.name,
            param.location,
            param.type,
            param.required,
            quote_directive(param.description or ""),
        )


class HeaderFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Header"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return resolve_header(tokens)

    def render(self, record: Record) -> str:
        header = cast(HeaderRecord, record)
        value = "{} {{{}}} {}".format(header.code, header.type, header.name)
        if header.description is not None:
            value += " " + quote_directive(header.description)
        return value
