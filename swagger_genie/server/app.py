"""FastAPI application exposing the transcoder to editor integrations.

WHY: Editor plugins written in other languages (VS Code, JetBrains,
Neovim) want the engine without embedding Python. A small local HTTP
service with OpenAPI docs is the simplest bridge.

HOW: Stateless endpoints that map one-to-one onto the core entry points
plus a line endpoint that applies the cursor rule and validation.
Diagnostics ownership stays with the client: /lines returns the
complete diagnostics list for the line and the client replaces its old
entries.

RULES:
- No endpoint returns an error for a no-op; nulls signal "no change"
- Request bodies are validated by pydantic (422 on malformed input)
- No state is kept between requests
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from swagger_genie import __version__, config
from swagger_genie.core.ir import Tag
from swagger_genie.core.lines import build_directive_line
from swagger_genie.core.transcoder import render_directive_as_call, transform_call_line, validate
from swagger_genie.host import LineProcessor
from swagger_genie.server.models import (
    DiagnosticModel,
    HealthResponse,
    LineRequest,
    LineResponse,
    RenderRequest,
    RenderResponse,
    TagsResponse,
    TransformRequest,
    TransformResponse,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="go-swagger-genie API",
    description=(
        "Expand compact @Tag(args) annotations into swag comments, render "
        "swag comments back as calls, and validate type paths."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

processor = LineProcessor()


@app.post(
    "/transform",
    response_model=TransformResponse,
    tags=["transcode"],
    summary="Expand call arguments into a directive value",
)
async def transform(request: TransformRequest) -> TransformResponse:
    value = transform_call_line(request.tag, request.args)
    if value is None:
        logger.debug("No transform for %s(%s)", request.tag, request.args)
        return TransformResponse(value=None, directive=None)
    return TransformResponse(value=value, directive=build_directive_line("", request.tag, value))


@app.post(
    "/render",
    response_model=RenderResponse,
    tags=["transcode"],
    summary="Render a directive value as call form",
)
async def render(request: RenderRequest) -> RenderResponse:
    return RenderResponse(call=render_directive_as_call(request.tag, request.value))


@app.post(
    "/validate",
    response_model=ValidateResponse,
    tags=["diagnostics"],
    summary="Check type paths in a directive line",
)
async def validate_line(request: ValidateRequest) -> ValidateResponse:
    diagnostics = [
        DiagnosticModel.from_diagnostic(d, config.DIAGNOSTIC_SOURCE)
        for d in validate(request.text)
    ]
    return ValidateResponse(diagnostics=diagnostics)


@app.post(
    "/lines",
    response_model=LineResponse,
    tags=["transcode"],
    summary="Process one edited line",
    description=(
        "Expands a call-form line unless the cursor is inside its parentheses, "
        "and returns the diagnostics that replace the line's previous ones."
    ),
)
async def process_line(request: LineRequest) -> LineResponse:
    result = processor.process_line(request.text, line_number=request.line, cursor=request.cursor)
    return LineResponse(
        text=result.text,
        changed=result.changed,
        reason=result.reason.value if result.reason else None,
        diagnostics=[
            DiagnosticModel.from_diagnostic(d, config.DIAGNOSTIC_SOURCE)
            for d in result.diagnostics
        ],
    )


@app.get(
    "/tags",
    response_model=TagsResponse,
    tags=["meta"],
    summary="List supported tags",
)
async def list_tags() -> TagsResponse:
    return TagsResponse(tags=[tag.value for tag in Tag.supported()])


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the swagger-genie-api console script."""
    import uvicorn

    logging.basicConfig(level=config.LOG_LEVEL)
    uvicorn.run(app, host=config.API_HOST, port=config.load_port())
