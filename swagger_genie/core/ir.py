"""Intermediate representation for annotation calls and swag directives.

WHY: The forward direction (call form → directive) and the reverse
direction (directive → call form) both need the same vocabulary: which
tags exist, what an argument is, what a parsed line looks like and what
a tag's resolved field set is. Keeping these types in one module makes
the tokenizer, resolver, formatters and renderers independent of each
other.

HOW: A closed ``Tag`` enum replaces string dispatch. Arguments are
``Positional`` or ``Named``. Parsed lines are ``AnnotationCall`` and
``DirectiveLine``. Each tag family resolves into a frozen record of
optional fields that knows whether its mandatory fields are present.

RULES:
- Every dataclass here is frozen — records are built once and never mutated
- Tag matching is case-sensitive ("ID", not "Id"); anything else is UNKNOWN
- Named keys are stored lower-cased
- SchemaKind membership is case-sensitive
- A record with missing mandatory fields is not an error, just incomplete
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple, Union


class Tag(str, enum.Enum):
    """Closed set of swag tags the transcoder knows how to handle."""

    SUMMARY = "Summary"
    DESCRIPTION = "Description"
    ID = "ID"
    TAGS = "Tags"
    ACCEPT = "Accept"
    PRODUCE = "Produce"
    SCHEMES = "Schemes"
    SECURITY = "Security"
    DEPRECATED = "Deprecated"
    PARAM = "Param"
    HEADER = "Header"
    SUCCESS = "Success"
    FAILURE = "Failure"
    ROUTER = "Router"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, name: str) -> "Tag":
        """Map a tag name to its variant, falling back to UNKNOWN."""
        for tag in cls:
            if tag is not cls.UNKNOWN and tag.value == name:
                return tag
        return cls.UNKNOWN

    @classmethod
    def supported(cls) -> Tuple["Tag", ...]:
        """All variants except UNKNOWN, in declaration order."""
        return tuple(tag for tag in cls if tag is not cls.UNKNOWN)


class SchemaKind(str, enum.Enum):
    """Body-shape markers written inside ``{...}`` in response directives."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"

    @classmethod
    def is_kind(cls, value: Optional[str]) -> bool:
        return value is not None and value in _SCHEMA_KIND_VALUES


_SCHEMA_KIND_VALUES = frozenset(kind.value for kind in SchemaKind)

# Locations a Param may live in; compared lower-cased.
PARAM_LOCATIONS = frozenset({"query", "path", "header", "body", "formdata"})


# ---------------------------------------------------------------------------
# Arguments and parsed lines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Positional:
    """An argument without a recognized ``key=`` prefix."""

    value: str


@dataclass(frozen=True)
class Named:
    """A ``key=value`` argument whose key is recognized for the tag."""

    key: str
    value: str


Argument = Union[Positional, Named]


@dataclass(frozen=True)
class AnnotationCall:
    """A call-form line such as ``    @Param(id, path, int, true, "User ID")``.

    RULES:
    - indent: leading whitespace, preserved in the output line
    - tag: the raw tag name as written (may be unknown)
    - raw_args: the text between the outer parentheses, untouched
    """

    indent: str
    tag: str
    raw_args: str


@dataclass(frozen=True)
class DirectiveLine:
    """A structured comment line such as ``// @Router /users [get]``.

    RULES:
    - value is right-trimmed; the leading whitespace after the tag is dropped
    - value_start is the column where value begins in the source line
    """

    indent: str
    tag: str
    value: str
    value_start: int = 0


@dataclass(frozen=True)
class ResolvedArgs:
    """Named/positional split of a token list, built once per call."""

    named: Mapping[str, str] = field(default_factory=dict)
    positional: Tuple[str, ...] = ()

    def lookup(self, *aliases: str) -> Optional[str]:
        """Return the value of the first alias that was supplied by key."""
        for alias in aliases:
            if alias in self.named:
                return self.named[alias]
        return None


# ---------------------------------------------------------------------------
# Resolved records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextRecord:
    """Summary / Description / ID — a single free text value."""

    text: str = ""

    @property
    def is_complete(self) -> bool:
        return True


@dataclass(frozen=True)
class ListRecord:
    """Tags and the MIME/scheme/security lists — an ordered list of items."""

    items: Tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        return True


@dataclass(frozen=True)
class ParamRecord:
    name: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    required: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return None not in (
            self.name, self.location, self.type, self.required, self.description,
        )


@dataclass(frozen=True)
class HeaderRecord:
    code: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.code, self.type, self.name)


@dataclass(frozen=True)
class ResponseRecord:
    """Success / Failure fields.

    RULES:
    - schema_kind is None when no kind was given; ``object`` is applied
      by the formatter, never here
    - complete when code is present and at least one renderable shape
      exists: a type path, a kind with a description, or a description
    """

    code: Optional[str] = None
    schema_kind: Optional[str] = None
    type_path: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        if self.code is None:
            return False
        if self.type_path is not None or self.description is not None:
            return True
        return False


@dataclass(frozen=True)
class RouterRecord:
    path: Optional[str] = None
    method: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.path is not None and self.method is not None


Record = Union[TextRecord, ListRecord, ParamRecord, HeaderRecord, ResponseRecord, RouterRecord]


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class Severity(str, enum.Enum):
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"


@dataclass(frozen=True)
class Diagnostic:
    """A problem anchored at a character span of one line.

    RULES:
    - start/end are 0-based columns, end exclusive
    - line is None until a host attaches the diagnostic to a document line
    """

    start: int
    end: int
    message: str
    severity: Severity = Severity.WARNING
    line: Optional[int] = None
