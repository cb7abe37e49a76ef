"""Formatters for free-text, list and flag tags.

WHY: Most swag tags carry either a sentence (Summary, Description, ID),
a list (Tags, Accept, Produce, Schemes, Security) or nothing at all
(Deprecated). None of them has mandatory fields, so they always
transform.

HOW: Text tags accept their value under a handful of keys; otherwise
positional tokens are joined with spaces. Tags are comma-joined without
spaces. The MIME/scheme/security lists are space-joined. Unknown tags
(swag general-info tags like ``@title``) reuse the list formatter.

RULES:
- Summary keys: summary, description, desc, value, text
- Description keys: description, desc, value, text
- ID keys: id, value, text
- Tags: a single token is emitted as-is; ≥2 tokens → "a,b,c"
- Deprecated: always an empty value → ``// @Deprecated``
"""

from __future__ import annotations

from typing import Sequence, cast

from swagger_genie.core.ir import ListRecord, Record, Tag, TextRecord
from swagger_genie.core.resolver import resolve_list, resolve_text
from swagger_genie.formatters.base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Summary, Description and ID."""

    @property
    def name(self) -> str:
        return "Text"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return resolve_text(tag, tokens)

    def render(self, record: Record) -> str:
        return cast(TextRecord, record).text


class TagsFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Tags"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return resolve_list(tokens)

    def render(self, record: Record) -> str:
        return ",".join(cast(ListRecord, record).items)


class ListFormatter(BaseFormatter):
    """Accept, Produce, Schemes, Security — space-separated values."""

    @property
    def name(self) -> str:
        return "List"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return resolve_list(tokens)

    def render(self, record: Record) -> str:
        return " ".join(cast(ListRecord, record).items)


class DeprecatedFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Deprecated"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return ListRecord()

    def render(self, record: Record) -> str:
        return ""
