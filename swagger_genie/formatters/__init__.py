"""Forward formatter registry — one formatter per Tag variant.

WHY: The transcoder needs a single lookup from a parsed tag to the code
that resolves and renders it. Keying the dict by the closed ``Tag`` enum
(instead of raw strings) lets a test assert that every variant is
covered.

HOW: FORMATTERS maps each Tag to a formatter *class*. Callers
instantiate as needed: ``formatter = FORMATTERS[Tag.PARAM]()``.

RULES:
- Every Tag member, UNKNOWN included, has an entry
- Values are BaseFormatter subclasses (not instances)
- Formatters are stateless and importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from swagger_genie.core.ir import Tag
from swagger_genie.formatters.param import HeaderFormatter, ParamFormatter
from swagger_genie.formatters.response import ResponseFormatter
from swagger_genie.formatters.router import RouterFormatter
from swagger_genie.formatters.text import (
    DeprecatedFormatter,
    ListFormatter,
    TagsFormatter,
    TextFormatter,
)

if TYPE_CHECKING:
    from swagger_genie.formatters.base import BaseFormatter

FORMATTERS: Dict[Tag, Type[BaseFormatter]] = {
    Tag.SUMMARY: TextFormatter,
    Tag.DESCRIPTION: TextFormatter,
    Tag.ID: TextFormatter,
    Tag.TAGS: TagsFormatter,
    Tag.ACCEPT: ListFormatter,
    Tag.PRODUCE: ListFormatter,
    Tag.SCHEMES: ListFormatter,
    Tag.SECURITY: ListFormatter,
    Tag.DEPRECATED: DeprecatedFormatter,
    Tag.PARAM: ParamFormatter,
    Tag.HEADER: HeaderFormatter,
    Tag.SUCCESS: ResponseFormatter,
    Tag.FAILURE: ResponseFormatter,
    Tag.ROUTER: RouterFormatter,
    Tag.UNKNOWN: ListFormatter,
}
