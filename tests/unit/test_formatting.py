"""
Unit tests for error formatting and JSON rendering.
"""

import json

import pytest
from graphql import GraphQLError, Source, parse

from django_graphql_http.errors import InvalidVariablesError
from django_graphql_http.formatting import (
    ErrorEntry,
    format_error,
    format_errors,
    render_json_response,
)
from django_graphql_http.pipeline import PipelineResult

pytestmark = pytest.mark.unit


def test_syntax_errors_keep_their_locations():
    with pytest.raises(GraphQLError) as excinfo:
        parse(Source("{ hello", "GraphQL request"))

    entry = format_error(excinfo.value)

    assert entry.message.startswith("Syntax Error")
    assert entry.locations == [{"line": 1, "column": 8}]
    assert entry.raw is excinfo.value


def test_plain_exceptions_expose_only_their_message():
    error = InvalidVariablesError()

    entry = format_error(error)

    assert entry.to_dict() == {"message": "Variables are invalid JSON."}
    assert entry.raw is error


def test_wrapped_errors_point_at_the_original_error():
    original = ValueError("boom")

    entry = format_error(GraphQLError("boom", original_error=original))

    assert entry.raw is original


def test_custom_formatter_may_return_dicts():
    def formatter(error):
        return {"message": str(error).upper(), "extensions": {"code": "X"}}

    entries = format_errors([ValueError("boom")], formatter)

    assert entries == [ErrorEntry(message="BOOM", extensions={"code": "X"}, raw=entries[0].raw)]
    assert isinstance(entries[0].raw, ValueError)


def test_request_errors_render_without_data():
    result = PipelineResult.from_error(InvalidVariablesError(), 400)
    result.errors = format_errors(result.errors)

    response = render_json_response(result)

    assert response.status_code == 400
    assert response["Content-Type"] == "application/json"
    assert json.loads(response.content) == {
        "errors": [{"message": "Variables are invalid JSON."}]
    }


def test_json_is_compact_unless_pretty():
    result = PipelineResult(data={"hello": "world"}, has_data=True)

    assert render_json_response(result).content == b'{"data":{"hello":"world"}}'
    assert render_json_response(result, pretty=True).content == (
        b'{\n  "data": {\n    "hello": "world"\n  }\n}'
    )


def test_errors_are_omitted_when_empty():
    result = PipelineResult(data=None, has_data=True)

    assert render_json_response(result).content == b'{"data":null}'
