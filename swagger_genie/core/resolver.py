"""Named/positional argument classification and per-tag field resolution.

WHY: Authors write the same annotation many ways —
``@Param(id, path, int, true, "User ID")``,
``@Param(in=path, name=id, type=int, required=true, desc="User ID")`` or
any mix of the two. The resolver turns a token list into a tag-specific
record of fields regardless of which style was used.

HOW: ``extract_named_args`` splits tokens into a key→value mapping and
an ordered tuple of positional leftovers, recognizing only the keys the
tag accepts. Each ``resolve_*`` function then walks its fields in a
fixed order: a named value wins, otherwise the next unconsumed
positional token is taken. The final description-like field swallows
every remaining positional token so unquoted descriptions containing
commas survive.

RULES:
- Key matching is case-insensitive; an unrecognized ``key=`` prefix
  leaves the whole token positional (so ``a=b`` type paths are kept)
- A named value always wins over a positional match for the same field
- Positional order is preserved
- Param: ``(in, name, ...)`` order only when neither name nor in is
  keyed, ≥2 positionals remain, the first is a location and the second
  is not
- Success/Failure kind precedence: schematype → schema → type → next
  positional; a kind is never defaulted here
- Resolution never raises; missing fields stay None
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from swagger_genie.core.ir import (
    PARAM_LOCATIONS,
    Argument,
    HeaderRecord,
    ListRecord,
    Named,
    ParamRecord,
    Positional,
    ResolvedArgs,
    ResponseRecord,
    RouterRecord,
    SchemaKind,
    Tag,
    TextRecord,
)
from swagger_genie.core.tokenizer import find_unquoted, strip_quotes, unquote

logger = logging.getLogger(__name__)

# Aliases for the single text field of Summary / Description / ID.
TEXT_ALIASES: Dict[Tag, Tuple[str, ...]] = {
    Tag.SUMMARY: ("summary", "description", "desc", "value", "text"),
    Tag.DESCRIPTION: ("description", "desc", "value", "text"),
    Tag.ID: ("id", "value", "text"),
}

PARAM_KEYS: FrozenSet[str] = frozenset({"in", "name", "type", "required", "description", "desc"})
HEADER_KEYS: FrozenSet[str] = frozenset({"code", "type", "name", "description", "desc"})
RESPONSE_KEYS: FrozenSet[str] = frozenset({
    "code", "schema", "schematype", "type", "typepath", "description", "desc", "message",
})
ROUTER_KEYS: FrozenSet[str] = frozenset({"path", "method"})

DESCRIPTION_ALIASES = ("description", "desc")
RESPONSE_DESCRIPTION_ALIASES = ("description", "desc", "message")


def classify(tokens: Iterable[str], keys: FrozenSet[str]) -> List[Argument]:
    """Tag each raw token as Named (recognized key) or Positional, keeping order.

    Tokens arrive undecoded so an escaped ``\\=`` is never a separator.
    A token wrapped in quotes is looked at without them, so ``"desc=x"``
    still reads as named. Values are decoded here.
    """
    arguments: List[Argument] = []
    for token in tokens:
        body = strip_quotes(token)
        equal_index = find_unquoted(body, "=")
        if equal_index == -1:
            arguments.append(Positional(unquote(token)))
            continue
        key = body[:equal_index].strip().lower()
        if key not in keys:
            arguments.append(Positional(unquote(token)))
            continue
        arguments.append(Named(key, unquote(body[equal_index + 1:])))
    return arguments


def extract_named_args(tokens: Iterable[str], keys: FrozenSet[str]) -> ResolvedArgs:
    """Split ``tokens`` into named values and ordered positional leftovers.

    A later duplicate key replaces an earlier one.
    """
    named: Dict[str, str] = {}
    positional: List[str] = []
    for argument in classify(tokens, keys):
        if isinstance(argument, Named):
            named[argument.key] = argument.value
        else:
            positional.append(argument.value)
    return ResolvedArgs(named=named, positional=tuple(positional))


class _Cursor:
    """Hands out positional tokens in order."""

    def __init__(self, positional: Sequence[str]) -> None:
        self._tokens = tuple(positional)
        self._index = 0

    def peek(self) -> Optional[str]:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def take(self) -> Optional[str]:
        value = self.peek()
        if value is not None:
            self._index += 1
        return value

    def take_rest(self) -> Optional[str]:
        """Comma-join every remaining token, or None when nothing is left."""
        if self._index >= len(self._tokens):
            return None
        rest = ", ".join(self._tokens[self._index:])
        self._index = len(self._tokens)
        return rest


# ---------------------------------------------------------------------------
# Text and list tags
# ---------------------------------------------------------------------------


def resolve_text(tag: Tag, tokens: Sequence[str]) -> TextRecord:
    """Summary / Description / ID: keyed text verbatim, else space-joined positionals."""
    aliases = TEXT_ALIASES[tag]
    args = extract_named_args(tokens, frozenset(aliases))
    named = args.lookup(*aliases)
    if named is not None:
        return TextRecord(text=named)
    return TextRecord(text=" ".join(args.positional))


def resolve_list(tokens: Sequence[str]) -> ListRecord:
    return ListRecord(items=tuple(unquote(token) for token in tokens))


# ---------------------------------------------------------------------------
# Param
# ---------------------------------------------------------------------------

_PARAM_DEFAULT_ORDER = ("name", "location", "type", "required", "description")
_PARAM_LOCATION_FIRST_ORDER = ("location", "name", "type", "required", "description")


def _param_order(fields: Dict[str, Optional[str]], positional: Sequence[str]) -> Tuple[str, ...]:
    if fields["name"] is None and fields["location"] is None and len(positional) >= 2:
        first_is_location = positional[0].lower() in PARAM_LOCATIONS
        second_is_location = positional[1].lower() in PARAM_LOCATIONS
        if first_is_location and not second_is_location:
            return _PARAM_LOCATION_FIRST_ORDER
    return _PARAM_DEFAULT_ORDER


def resolve_param(tokens: Sequence[str]) -> ParamRecord:
    args = extract_named_args(tokens, PARAM_KEYS)
    fields: Dict[str, Optional[str]] = {
        "name": args.lookup("name"),
        "location": args.lookup("in"),
        "type": args.lookup("type"),
        "required": args.lookup("required"),
        "description": args.lookup(*DESCRIPTION_ALIASES),
    }

    cursor = _Cursor(args.positional)
    for key in _param_order(fields, args.positional):
        if fields[key] is not None:
            continue
        if cursor.peek() is None:
            break
        if key == "description":
            fields[key] = cursor.take_rest()
        else:
            fields[key] = cursor.take()

    return ParamRecord(**fields)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------


def resolve_header(tokens: Sequence[str]) -> HeaderRecord:
    args = extract_named_args(tokens, HEADER_KEYS)
    cursor = _Cursor(args.positional)

    code = args.lookup("code")
    if code is None:
        code = cursor.take()
    header_type = args.lookup("type")
    if header_type is None:
        header_type = cursor.take()
    name = args.lookup("name")
    if name is None:
        name = cursor.take()
    description = args.lookup(*DESCRIPTION_ALIASES)
    if description is None:
        description = cursor.take_rest()

    return HeaderRecord(code=code, type=header_type, name=name, description=description)


# ---------------------------------------------------------------------------
# Success / Failure
# ---------------------------------------------------------------------------


def resolve_response(tokens: Sequence[str]) -> ResponseRecord:
    """Resolve code, schema kind, type path and description.

    Kind candidates, first match wins: ``schematype`` key, ``schema`` key,
    ``type`` key, then the next positional token — each only if it is a
    SchemaKind member. The type path is the first of ``typepath``,
    ``type``, ``schema`` (skipping whichever became the kind) and then
    the next positional token.
    """
    args = extract_named_args(tokens, RESPONSE_KEYS)
    cursor = _Cursor(args.positional)

    code = args.lookup("code")
    if code is None:
        code = cursor.take()

    keyed_kind_sources = ("schematype", "schema", "type")
    kind_source: Optional[str] = None
    for source in keyed_kind_sources:
        if SchemaKind.is_kind(args.lookup(source)):
            kind_source = source
            break

    schema_kind: Optional[str] = args.lookup(kind_source) if kind_source else None
    if schema_kind is None and SchemaKind.is_kind(cursor.peek()):
        schema_kind = cursor.take()

    type_path: Optional[str] = None
    for source in ("typepath", "type", "schema"):
        if source == kind_source:
            continue
        value = args.lookup(source)
        if value is not None:
            type_path = value
            break
    if type_path is None:
        type_path = cursor.take()

    description = args.lookup(*RESPONSE_DESCRIPTION_ALIASES)
    if description is None:
        description = cursor.take_rest()

    if schema_kind is None:
        logger.debug("No schema kind for response %s; formatter will default it", code)

    return ResponseRecord(
        code=code,
        schema_kind=schema_kind,
        type_path=type_path,
        description=description,
    )


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------


def resolve_router(tokens: Sequence[str]) -> RouterRecord:
    args = extract_named_args(tokens, ROUTER_KEYS)
    cursor = _Cursor(args.positional)
    path = args.lookup("path")
    if path is None:
        path = cursor.take()
    method = args.lookup("method")
    if method is None:
        method = cursor.take()
    return RouterRecord(path=path, method=method)
