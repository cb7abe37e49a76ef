"""Per-tag renderers that turn directive values back into call form.

WHY: A directive value such as ``200 {array} dto.User "OK"`` is
positional and uses bracket markers. The call form shown to the author
should be explicit (``@Success(code=200, schema="array", type=dto.User,
desc="OK")``) yet still expand to exactly the same directive.

HOW: Values are re-tokenized with the quote-aware whitespace scanner,
bracket markers (``{type}``, ``[method]``) are removed, and the fields
are written back with keys. Quotedness of the scanned words is what
separates a response description from a type path.

RULES:
- Summary/Description → ``desc=``; ID → ``id=``
- Tags are split on commas; list tags on whitespace; items are quoted
- Param needs ≥5 words, Header ≥3, Router ≥2, Success/Failure ≥2
- Response ``schema`` is omitted only when it is ``object``, a type path
  is present and that type path is not itself a schema kind
"""

from __future__ import annotations

from typing import List, Optional

from swagger_genie.core.ir import SchemaKind, Tag
from swagger_genie.core.tokenizer import quote, scan_words, split_by_comma, split_by_whitespace
from swagger_genie.renderers.base import BaseRenderer, bare_or_quoted, call


class TextRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        if not value:
            return call(tag, [])
        key = "id" if tag is Tag.ID else "desc"
        return call(tag, ["{}={}".format(key, quote(value))])


class TagsRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        return call(tag, [quote(item) for item in split_by_comma(value)])


class ListRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        return call(tag, [quote(item) for item in split_by_whitespace(value)])


class DeprecatedRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        return call(tag, [])


class ParamRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        words = scan_words(value)
        # Param calls without desc= do not expand.
        if len(words) < 5:
            return None
        name, location, param_type, required = (word.text for word in words[:4])
        description = " ".join(word.text for word in words[4:])
        return call(tag, [
            "in={}".format(quote(location)),
            "name={}".format(quote(name)),
            "type={}".format(bare_or_quoted(param_type)),
            "required={}".format(bare_or_quoted(required)),
            "desc={}".format(quote(description)),
        ])


class HeaderRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        words = scan_words(value)
        if len(words) < 3:
            return None
        header_type = words[1].unbracket("{", "}")
        if header_type is None:
            header_type = words[1].text
        segments = [
            "code={}".format(bare_or_quoted(words[0].text)),
            "type={}".format(bare_or_quoted(header_type)),
            "name={}".format(quote(words[2].text)),
        ]
        if len(words) > 3:
            description = " ".join(word.text for word in words[3:])
            segments.append("desc={}".format(quote(description)))
        return call(tag, segments)


class ResponseRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        words = scan_words(value)
        if len(words) < 2:
            return None

        code = words[0].text
        rest = words[1:]

        kind: Optional[str] = None
        if not rest[0].quoted:
            kind = rest[0].unbracket("{", "}")
            if kind is not None:
                rest = rest[1:]

        type_path: Optional[str] = None
        if rest and not rest[0].quoted:
            type_path = rest[0].text
            rest = rest[1:]

        description: Optional[str] = None
        if rest:
            description = " ".join(word.text for word in rest)

        if type_path is None and description is None:
            return None

        segments: List[str] = ["code={}".format(bare_or_quoted(code))]
        if type_path is not None:
            effective_kind = kind or SchemaKind.OBJECT.value
            if effective_kind != SchemaKind.OBJECT.value or SchemaKind.is_kind(type_path):
                segments.append("schema={}".format(quote(effective_kind)))
            segments.append("type={}".format(bare_or_quoted(type_path)))
        elif kind is not None:
            segments.append("schema={}".format(quote(kind)))
        if description is not None:
            segments.append("desc={}".format(quote(description)))
        return call(tag, segments)


class RouterRenderer(BaseRenderer):

    def render(self, tag: Tag, value: str) -> Optional[str]:
        words = scan_words(value)
        if len(words) < 2:
            return None
        method = words[1].unbracket("[", "]")
        if method is None:
            method = words[1].text
        return call(tag, [
            "path={}".format(quote(words[0].text)),
            "method={}".format(quote(method)),
        ])


class UnsupportedRenderer(BaseRenderer):
    """Unknown tags are never shown in call form."""

    def render(self, tag: Tag, value: str) -> Optional[str]:
        return None
