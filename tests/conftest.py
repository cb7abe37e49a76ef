"""Shared test fixtures for the swagger_genie test suite.

WHY: Several test modules exercise the same realistic annotations — a
handler block written in call form and its expected swag comments.
Centralizing them keeps the forward, reverse, CLI and API tests in
agreement about what "correct" output is.

HOW: Module-level constants hold the canonical call lines and expected
directive lines; fixtures hand out copies and assembled Go sources.

RULES:
- CALL_TO_DIRECTIVE pairs are verified by hand against swag's syntax
- Go sources use tab indentation, as gofmt would
"""

from typing import List, Tuple

import pytest


# ---------------------------------------------------------------------------
# Canonical call → directive pairs
# ---------------------------------------------------------------------------

CALL_TO_DIRECTIVE: List[Tuple[str, str]] = [
    ('@Summary("List classrooms")', "// @Summary List classrooms"),
    ('@Description(desc="Returns every classroom, paginated")', "// @Description Returns every classroom, paginated"),
    ("@ID(listClassrooms)", "// @ID listClassrooms"),
    ("@Tags(classrooms, admin)", "// @Tags classrooms,admin"),
    ("@Accept(json)", "// @Accept json"),
    ("@Produce(json, xml)", "// @Produce json xml"),
    ("@Deprecated()", "// @Deprecated"),
    (
        '@Param(in="query", name="page", type=int, required=false, desc="Page number")',
        '// @Param page query int false "Page number"',
    ),
    (
        '@Header(200, string, X-Request-ID, "Request identifier")',
        '// @Header 200 {string} X-Request-ID "Request identifier"',
    ),
    (
        '@Success(code=200, schema="array", type=dto.Classroom, desc="OK")',
        '// @Success 200 {array} dto.Classroom "OK"',
    ),
    ('@Failure(404, dto.Error, "Not found")', '// @Failure 404 {object} dto.Error "Not found"'),
    ('@Router("/classrooms", "get")', "// @Router /classrooms [get]"),
]


GO_CALL_SOURCE = """package handlers

\t@Summary("List classrooms")
\t@Tags(classrooms)
\t@Param(query, page, int, false, "Page number")
\t@Success(200, array, dto.Classroom, "OK")
\t@Failure(404, dtoError, "Not found")
\t@Router("/classrooms", "get")
func ListClassrooms(c *gin.Context) {}
"""

GO_DIRECTIVE_SOURCE = """package handlers

\t// @Summary List classrooms
\t// @Tags classrooms
\t// @Param page query int false "Page number"
\t// @Success 200 {array} dto.Classroom "OK"
\t// @Failure 404 {object} dtoError "Not found"
\t// @Router /classrooms [get]
func ListClassrooms(c *gin.Context) {}
"""


@pytest.fixture
def call_directive_pairs():
    """Call-form lines with their expected directive lines."""
    return list(CALL_TO_DIRECTIVE)


@pytest.fixture
def go_call_source():
    """A Go handler annotated in call form (one malformed type path)."""
    return GO_CALL_SOURCE


@pytest.fixture
def go_directive_source():
    """The same handler after expansion."""
    return GO_DIRECTIVE_SOURCE


@pytest.fixture
def go_call_file(tmp_path):
    """GO_CALL_SOURCE written to a temporary handlers.go."""
    path = tmp_path / "handlers.go"
    path.write_text(GO_CALL_SOURCE, encoding="utf-8")
    return path
