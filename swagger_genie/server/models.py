"""Pydantic request/response models for the HTTP API.

WHY: Editor integrations talk to the engine over HTTP. Typed schemas
give request validation for free and make the /docs page describe every
field.

HOW: One request and one response model per endpoint. No-ops are
represented by null fields, never by error status codes.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Columns and lines are 0-based; span end is exclusive
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from swagger_genie.core.ir import Diagnostic


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class DiagnosticModel(BaseModel):
    """A warning anchored at a character span."""

    start: int = Field(description="0-based start column.")
    end: int = Field(description="0-based end column (exclusive).")
    message: str = Field(description="Human-readable explanation.")
    severity: str = Field(description="error, warning, information or hint.")
    source: str = Field(description="Diagnostic source label.")
    line: Optional[int] = Field(default=None, description="0-based line number, when known.")

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic, source: str) -> "DiagnosticModel":
        return cls(
            start=diagnostic.start,
            end=diagnostic.end,
            message=diagnostic.message,
            severity=diagnostic.severity.value,
            source=source,
            line=diagnostic.line,
        )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TransformRequest(BaseModel):
    tag: str = Field(description="Tag name as written, e.g. 'Param'.", json_schema_extra={"example": "Router"})
    args: str = Field(
        description="Text between the call's parentheses.",
        json_schema_extra={"example": '"/classrooms", "post"'},
    )


class RenderRequest(BaseModel):
    tag: str = Field(description="Directive tag name.", json_schema_extra={"example": "Router"})
    value: str = Field(description="Directive value after the tag.", json_schema_extra={"example": "/classrooms [post]"})


class ValidateRequest(BaseModel):
    text: str = Field(
        description="A directive line.",
        json_schema_extra={"example": '// @Success 200 {object} dto.User "OK"'},
    )


class LineRequest(BaseModel):
    text: str = Field(description="The current line text.")
    line: int = Field(default=0, ge=0, description="0-based line number.")
    cursor: Optional[int] = Field(
        default=None,
        ge=0,
        description="Cursor column if the cursor is on this line; suppresses processing inside the parentheses.",
    )


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class TransformResponse(BaseModel):
    value: Optional[str] = Field(description="Directive value, or null when arguments are incomplete.")
    directive: Optional[str] = Field(description="Full '// @Tag value' text, or null.")


class RenderResponse(BaseModel):
    call: Optional[str] = Field(description="Call-form text, or null when the tag is unsupported.")


class ValidateResponse(BaseModel):
    diagnostics: List[DiagnosticModel] = Field(description="Zero or more warnings.")


class LineResponse(BaseModel):
    text: str = Field(description="Replacement line (the input line when unchanged).")
    changed: bool = Field(description="True when the line was rewritten.")
    reason: Optional[str] = Field(default=None, description="Why the line was left unchanged.")
    diagnostics: List[DiagnosticModel] = Field(description="Diagnostics for this line; replaces earlier ones.")


class TagsResponse(BaseModel):
    tags: List[str] = Field(description="Supported tag names.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
