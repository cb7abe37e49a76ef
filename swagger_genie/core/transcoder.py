"""Public entry points of the transcoding engine.

WHY: Hosts (the CLI, the HTTP API, editor integrations) should not need
to know about tokenizers, resolvers or registries. This module exposes
the engine as a handful of pure functions from text to text.

HOW: The forward direction splits the raw arguments, looks up the tag's
formatter and lets it resolve and render. The reverse direction parses
the directive line and looks up the tag's renderer. Line-level helpers
combine parsing, transcoding and indentation.

RULES:
- No function here raises or performs I/O
- None is the only failure signal ("leave the line alone")
- Forward-transforming a directive line is a no-op (pattern mismatch)
- Unknown tags expand as space-joined tokens unless passthrough is off;
  they are never collapsed back to call form
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from swagger_genie import config
from swagger_genie.core.ir import Diagnostic, DirectiveLine, Tag
from swagger_genie.core.lines import build_directive_line, parse_call_line
from swagger_genie.core.lines import parse_directive_line as _parse_directive_line
from swagger_genie.core.tokenizer import split_raw_args
from swagger_genie.core.validator import validate as _validate
from swagger_genie.formatters import FORMATTERS
from swagger_genie.renderers import RENDERERS

logger = logging.getLogger(__name__)

TagLike = Union[Tag, str]


def _as_tag(tag: TagLike) -> Tag:
    return tag if isinstance(tag, Tag) else Tag.parse(tag)


def transform_call_line(
    tag: TagLike,
    raw_args: str,
    passthrough_unknown: Optional[bool] = None,
) -> Optional[str]:
    """Turn a call's argument text into the directive value for ``tag``.

    Args:
        tag: Tag variant or raw tag name as written in the call.
        raw_args: Text between the call's parentheses.
        passthrough_unknown: Override for config.PASSTHROUGH_UNKNOWN_TAGS.

    Returns:
        The directive value (without ``// @Tag``), or None when the
        arguments are incomplete or the tag is not expanded.
    """
    variant = _as_tag(tag)
    if variant is Tag.UNKNOWN:
        if passthrough_unknown is None:
            passthrough_unknown = config.PASSTHROUGH_UNKNOWN_TAGS
        if not passthrough_unknown:
            logger.debug("Unknown tag %r left untouched", tag)
            return None
    formatter = FORMATTERS[variant]()
    return formatter.format(variant, split_raw_args(raw_args))


def parse_directive_line(line: str) -> Optional[DirectiveLine]:
    """Parse ``<indent>// @Tag value`` into its parts, or None."""
    return _parse_directive_line(line)


def render_directive_as_call(tag: TagLike, value: str) -> Optional[str]:
    """Render a directive value as ``@Tag(k=v, ...)``, or None if unsupported."""
    variant = _as_tag(tag)
    return RENDERERS[variant]().render(variant, value)


def validate(directive_text: str) -> List[Diagnostic]:
    """Warning diagnostics for malformed type paths in a directive line."""
    return _validate(directive_text)


def expand_line(line: str, passthrough_unknown: Optional[bool] = None) -> Optional[str]:
    """Replace a whole call-form line with its directive line, or None."""
    parsed = parse_call_line(line)
    if parsed is None:
        return None
    value = transform_call_line(parsed.tag, parsed.raw_args, passthrough_unknown)
    if value is None:
        return None
    return build_directive_line(parsed.indent, parsed.tag, value)


def collapse_line(line: str) -> Optional[str]:
    """Replace a whole directive line with its call-form line, or None."""
    parsed = _parse_directive_line(line)
    if parsed is None:
        return None
    rendered = render_directive_as_call(parsed.tag, parsed.value)
    if rendered is None:
        return None
    return parsed.indent + rendered
