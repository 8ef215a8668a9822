"""
Document stages.

Parses and validates the GraphQL document and restricts GET requests to
query operations.
"""

from graphql import GraphQLError, OperationType, Source, parse, validate
from graphql.utilities import get_operation_ast

from ...errors import OperationNotAllowedError
from ..base import PipelineStage
from ..context import Continue, PipelineResult, PipelineState, StageResult, Terminal

SOURCE_NAME = "GraphQL request"


class ParseStage(PipelineStage):
    """Parse the query into a document, reporting syntax errors with 400."""

    order = 60
    name = "parse"
    key = "document"

    async def run(self, state: PipelineState) -> StageResult:
        query = state.params.query
        if not isinstance(query, str):
            error = GraphQLError(f"Query must be a string, got {type(query).__name__}.")
            return Terminal(PipelineResult.from_error(error, 400))
        try:
            document = parse(Source(query, SOURCE_NAME))
        except GraphQLError as syntax_error:
            return Terminal(PipelineResult.from_error(syntax_error, 400))
        return Continue(document)


class ValidationStage(PipelineStage):
    """Validate the document against the schema, reporting every error with 400."""

    order = 70
    name = "validation"

    async def run(self, state: PipelineState) -> StageResult:
        validation_errors = validate(state.options.schema, state.document)
        if validation_errors:
            return Terminal(PipelineResult.from_errors(validation_errors, 400))
        return Continue()


class OperationKindStage(PipelineStage):
    """
    Only allow query operations on GET requests.

    When GraphiQL can be shown the operation is handed to it unexecuted, so
    the requester may run it themselves.
    """

    order = 80
    name = "operation_kind"

    async def run(self, state: PipelineState) -> StageResult:
        if state.method != "GET":
            return Continue()
        operation = get_operation_ast(state.document, state.params.operation_name)
        if operation is None or operation.operation == OperationType.QUERY:
            return Continue()
        if state.show_graphiql:
            return Terminal(PipelineResult.empty())
        error = OperationNotAllowedError(operation.operation.value)
        return Terminal(PipelineResult.from_error(error, error.status_code, error.headers))
