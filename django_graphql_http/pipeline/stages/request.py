"""
Request stages.

Handles the HTTP method check, body decoding, content negotiation, parameter
extraction and the missing query check.
"""

from typing import Optional

from ...body import BodyDecoderProtocol, default_body_decoder
from ...errors import (
    BodyDecodeError,
    InvalidVariablesError,
    MethodNotAllowedError,
    MissingQueryError,
)
from ...negotiation import may_show_graphiql
from ...params import extract_params
from ..base import PipelineStage
from ..context import Continue, PipelineResult, PipelineState, StageResult, Terminal

ALLOWED_METHODS = ("GET", "POST")


class MethodCheckStage(PipelineStage):
    """Reject every method other than GET and POST."""

    order = 10
    name = "method_check"

    async def run(self, state: PipelineState) -> StageResult:
        if state.method in ALLOWED_METHODS:
            return Continue()
        error = MethodNotAllowedError()
        return Terminal(PipelineResult.from_error(error, error.status_code, error.headers))


class BodyDecodeStage(PipelineStage):
    """
    Decode the request body.

    Delegates to the configured body decoder; decoding failures end the
    pipeline with the decoder's status.
    """

    order = 20
    name = "body_decode"
    key = "body"

    def __init__(self, body_decoder: Optional[BodyDecoderProtocol] = None):
        self.body_decoder = body_decoder or default_body_decoder

    async def run(self, state: PipelineState) -> StageResult:
        try:
            body = await self.body_decoder.decode(state.context.request)
        except BodyDecodeError as exc:
            return Terminal(PipelineResult.from_error(exc, exc.status_code, exc.headers))
        return Continue(body if body is not None else {})


class NegotiationStage(PipelineStage):
    """Decide once whether the GraphiQL page may be shown."""

    order = 30
    name = "negotiation"
    key = "show_graphiql"

    async def run(self, state: PipelineState) -> StageResult:
        return Continue(
            may_show_graphiql(state.context, state.body, bool(state.options.graphiql))
        )


class ParamExtractionStage(PipelineStage):
    """Extract query, variables and operation name."""

    order = 40
    name = "param_extraction"
    key = "params"

    async def run(self, state: PipelineState) -> StageResult:
        try:
            params = extract_params(state.context.query_params, state.body)
        except InvalidVariablesError as exc:
            return Terminal(PipelineResult.from_error(exc, exc.status_code))
        return Continue(params)


class QueryPresenceStage(PipelineStage):
    """
    Require a query unless GraphiQL will be shown.

    Without a query GraphiQL is rendered empty so the requester can write one.
    """

    order = 50
    name = "query_presence"

    async def run(self, state: PipelineState) -> StageResult:
        if state.params.query:
            return Continue()
        if state.show_graphiql:
            return Terminal(PipelineResult.empty())
        error = MissingQueryError()
        return Terminal(PipelineResult.from_error(error, error.status_code))
