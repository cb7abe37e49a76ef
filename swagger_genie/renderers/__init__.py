"""Reverse renderer registry — one renderer per Tag variant.

WHY: Mirrors formatters.FORMATTERS for the directive → call direction so
both registries can be checked for full Tag coverage side by side.

RULES:
- Every Tag member, UNKNOWN included, has an entry
- UNKNOWN maps to UnsupportedRenderer, which always returns None
"""

from __future__ import annotations

from typing import Dict, Type

from swagger_genie.core.ir import Tag
from swagger_genie.renderers.base import BaseRenderer
from swagger_genie.renderers.call_form import (
    DeprecatedRenderer,
    HeaderRenderer,
    ListRenderer,
    ParamRenderer,
    ResponseRenderer,
    RouterRenderer,
    TagsRenderer,
    TextRenderer,
    UnsupportedRenderer,
)

RENDERERS: Dict[Tag, Type[BaseRenderer]] = {
    Tag.SUMMARY: TextRenderer,
    Tag.DESCRIPTION: TextRenderer,
    Tag.ID: TextRenderer,
    Tag.TAGS: TagsRenderer,
    Tag.ACCEPT: ListRenderer,
    Tag.PRODUCE: ListRenderer,
    Tag.SCHEMES: ListRenderer,
    Tag.SECURITY: ListRenderer,
    Tag.DEPRECATED: DeprecatedRenderer,
    Tag.PARAM: ParamRenderer,
    Tag.HEADER: HeaderRenderer,
    Tag.SUCCESS: ResponseRenderer,
    Tag.FAILURE: ResponseRenderer,
    Tag.ROUTER: RouterRenderer,
    Tag.UNKNOWN: UnsupportedRenderer,
}
