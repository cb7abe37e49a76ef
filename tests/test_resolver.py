"""Unit tests for argument classification and per-tag field resolution.

WHY: The resolver carries the heuristics that make the call form
forgiving — alias keys, the Param location-first ordering and the
Success/Failure kind-vs-type-path precedence. Each branch is easy to
break and hard to notice, so each is pinned here explicitly.

HOW: Token lists are built by hand (raw, as split_raw_args would
produce) and passed to the resolve_* functions.

RULES:
- Records are compared field by field, never through rendered text
- The response precedence table is tested row by row
"""

import pytest

from swagger_genie.core.ir import (
    HeaderRecord,
    Named,
    ParamRecord,
    Positional,
    ResponseRecord,
    RouterRecord,
    Tag,
)
from swagger_genie.core.resolver import (
    PARAM_KEYS,
    classify,
    extract_named_args,
    resolve_header,
    resolve_param,
    resolve_response,
    resolve_router,
    resolve_text,
)


class TestClassify:
    """Only recognized keys make a token named."""

    def test_recognized_key_is_named_and_lowercased(self):
        assert classify(['Name="id"'], PARAM_KEYS) == [Named("name", "id")]

    def test_unrecognized_key_stays_positional(self):
        assert classify(["dto.Filter=x"], PARAM_KEYS) == [Positional("dto.Filter=x")]

    def test_no_equals_is_positional(self):
        assert classify(["query"], PARAM_KEYS) == [Positional("query")]

    def test_equals_inside_quoted_value(self):
        assert classify(['desc="a=b"'], PARAM_KEYS) == [Named("desc", "a=b")]

    def test_whitespace_around_key(self):
        assert classify([" In =query"], PARAM_KEYS) == [Named("in", "query")]

    def test_escaped_equals_stays_positional_and_is_decoded(self):
        assert classify([r"desc\=x"], PARAM_KEYS) == [Positional("desc=x")]

    def test_fully_quoted_token_with_key_reads_as_named(self):
        assert classify(['"desc=x"'], PARAM_KEYS) == [Named("desc", "x")]

    def test_named_value_escapes_are_decoded(self):
        assert classify([r'desc="a\,b \"c\""'], PARAM_KEYS) == [Named("desc", 'a,b "c"')]

    def test_positional_quotes_are_removed(self):
        assert classify(['"dto.User"'], PARAM_KEYS) == [Positional("dto.User")]


class TestExtractNamedArgs:

    def test_splits_named_and_positional_in_order(self):
        args = extract_named_args(["a", "name=x", "b", "c"], PARAM_KEYS)
        assert dict(args.named) == {"name": "x"}
        assert args.positional == ("a", "b", "c")

    def test_later_duplicate_wins(self):
        args = extract_named_args(["name=x", "name=y"], PARAM_KEYS)
        assert args.lookup("name") == "y"

    def test_lookup_takes_first_alias_present(self):
        args = extract_named_args(["desc=short", "description=long"], PARAM_KEYS)
        assert args.lookup("description", "desc") == "long"
        assert args.lookup("missing") is None


class TestResolveText:

    def test_named_value_wins(self):
        record = resolve_text(Tag.SUMMARY, ["ignored", 'text="Chosen"'])
        assert record.text == "Chosen"

    def test_positional_space_joined(self):
        assert resolve_text(Tag.SUMMARY, ["List", "users"]).text == "List users"

    def test_id_does_not_accept_desc(self):
        assert resolve_text(Tag.ID, ["desc=x"]).text == "desc=x"

    def test_description_accepts_value(self):
        assert resolve_text(Tag.DESCRIPTION, ["value=Long text"]).text == "Long text"

    def test_empty(self):
        assert resolve_text(Tag.SUMMARY, []).text == ""


class TestResolveParam:
    """Param ordering heuristics."""

    def test_default_order(self):
        record = resolve_param(["id", "path", "int", "true", "User ID"])
        assert record == ParamRecord("id", "path", "int", "true", "User ID")

    def test_location_first_when_first_is_location(self):
        record = resolve_param(["query", "page", "int", "false", "Page"])
        assert record == ParamRecord("page", "query", "int", "false", "Page")

    def test_location_check_is_case_insensitive(self):
        record = resolve_param(["Query", "page", "int", "false", "Page"])
        assert record.location == "Query"
        assert record.name == "page"

    def test_default_order_when_both_look_like_locations(self):
        # A parameter literally named "path" in the query string is ambiguous;
        # both tokens are locations so the default order applies.
        record = resolve_param(["path", "query", "string", "true", "Path filter"])
        assert record.name == "path"
        assert record.location == "query"

    def test_keyed_name_disables_heuristic(self):
        record = resolve_param(["name=page", "query", "int", "false", "Page"])
        assert record == ParamRecord("page", "query", "int", "false", "Page")

    def test_named_wins_over_positional(self):
        record = resolve_param(["in=header", "token", "string", "true", "Auth"])
        assert record.location == "header"
        assert record.name == "token"

    def test_description_swallows_remaining_tokens(self):
        record = resolve_param(["q", "query", "string", "false", "Search", "by name", "or email"])
        assert record.description == "Search, by name, or email"

    def test_partial_resolution_is_incomplete(self):
        record = resolve_param(['name=id'])
        assert record.name == "id"
        assert record.location is None
        assert not record.is_complete

    def test_mixed_named_and_positional(self):
        record = resolve_param(["type=string", "id", "path", "true", 'desc="ID"'])
        assert record == ParamRecord("id", "path", "string", "true", "ID")


class TestResolveHeader:

    def test_positional(self):
        record = resolve_header(["200", "string", "X-Token", "The token"])
        assert record == HeaderRecord("200", "string", "X-Token", "The token")

    def test_named_code_then_positionals(self):
        record = resolve_header(["code=201", "int", "X-Count"])
        assert record == HeaderRecord("201", "int", "X-Count", None)
        assert record.is_complete

    def test_missing_name_is_incomplete(self):
        assert not resolve_header(["200", "string"]).is_complete


class TestResolveResponse:
    """Success/Failure schema-kind vs. type-path precedence."""

    @pytest.mark.parametrize(
        "tokens, kind, type_path",
        [
            # explicit schema key
            (["code=200", "schema=array", "type=dto.User"], "array", "dto.User"),
            # explicit schematype key beats schema key; schema becomes the type path
            (["200", "schematype=array", "schema=dto.User"], "array", "dto.User"),
            # schematype beats a kind-valued type key
            (["200", "schematype=array", "type=string"], "array", "string"),
            # type key holding a kind is the kind when no schema key is given
            (["200", "type=array", "typepath=dto.User"], "array", "dto.User"),
            # type key that is not a kind is the type path
            (["200", "type=dto.User"], None, "dto.User"),
            # positional kind
            (["200", "array", "dto.User"], "array", "dto.User"),
            # positional non-kind is the type path, kind stays absent
            (["200", "dto.User"], None, "dto.User"),
            # named kind leaves the next positional for the type path
            (["200", "schema=array", "dto.User"], "array", "dto.User"),
            # schema key that is not a kind falls through to the type path
            (["200", "schema=dto.User"], None, "dto.User"),
            # kind membership is case-sensitive
            (["200", "Array", "dto.User"], None, "Array"),
        ],
    )
    def test_precedence(self, tokens, kind, type_path):
        record = resolve_response(tokens)
        assert record.code == "200"
        assert record.schema_kind == kind
        assert record.type_path == type_path

    def test_kind_is_never_defaulted(self):
        record = resolve_response(["200", "dto.User", "OK"])
        assert record.schema_kind is None

    def test_description_aliases(self):
        assert resolve_response(["200", "message=Done"]).description == "Done"
        assert resolve_response(["200", "desc=Done"]).description == "Done"

    def test_positional_description_joins_rest(self):
        record = resolve_response(["500", "dto.Error", "Server", "retry later"])
        assert record.description == "Server, retry later"

    def test_named_code(self):
        record = resolve_response(["dto.User", "code=201"])
        assert record.code == "201"
        assert record.type_path == "dto.User"

    def test_code_only_is_incomplete(self):
        assert not resolve_response(["200"]).is_complete

    def test_code_and_kind_only_is_incomplete(self):
        record = resolve_response(["200", "array"])
        assert record.schema_kind == "array"
        assert not record.is_complete

    def test_keyed_description_only_is_complete(self):
        record = resolve_response(["code=204", "desc=No content"])
        assert record == ResponseRecord("204", None, None, "No content")
        assert record.is_complete


class TestResolveRouter:

    def test_positional(self):
        assert resolve_router(["/users", "get"]) == RouterRecord("/users", "get")

    def test_named_out_of_order(self):
        assert resolve_router(["method=post", "path=/users"]) == RouterRecord("/users", "post")

    def test_missing_method(self):
        assert not resolve_router(["/users"]).is_complete
