"""go-swagger-genie — compact call-form annotations for swag comments.

WHY: swag documents Go HTTP handlers through structured comments like
``// @Param id path int true "User ID"`` whose positional layout is easy
to get wrong. This package lets authors write ``@Param(in=path, name=id,
type=int, required=true, desc="User ID")`` instead, expands it to the
canonical comment, and can show existing comments in call form again.

HOW: Two pipelines over single lines — forward (tokenize → resolve →
format) and reverse (parse directive → scan words → render call) — plus
a structural validator for type paths. Hosts (CLI, HTTP API) wrap the
pure core.

RULES:
- The core is stateless; hosts own diagnostics and file handling
- Expanded output must collapse and re-expand to the same directive
"""

from swagger_genie.core.transcoder import (
    collapse_line,
    expand_line,
    parse_directive_line,
    render_directive_as_call,
    transform_call_line,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "collapse_line",
    "expand_line",
    "parse_directive_line",
    "render_directive_as_call",
    "transform_call_line",
    "validate",
]
