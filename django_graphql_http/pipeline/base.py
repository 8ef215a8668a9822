"""
Base classes for the request pipeline.

Provides the PipelineStage abstract base class and the RequestPipeline
orchestrator.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from graphql import GraphQLError

from ..conf import get_settings, is_debug
from ..errors import GraphQLHTTPError, get_error_status
from ..formatting import format_errors
from ..reporting import report_exception
from .context import PipelineResult, PipelineState, StageResult, Terminal

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _client_error_level() -> int:
    return logging.INFO if get_settings().log_client_errors else logging.DEBUG


class PipelineStage(ABC):
    """
    Base class for request pipeline stages.

    Each stage performs one check or transformation of the request and either
    lets the pipeline continue or ends it with a terminal result.

    Attributes:
        order: Integer determining stage execution order (lower = earlier)
        name: String identifier for debugging and logging
        key: ``PipelineState`` attribute receiving the stage's ``Continue`` value

    Example:
        class RejectEmptyBodyStage(PipelineStage):
            order = 25
            name = "reject_empty_body"

            async def run(self, state):
                if not state.body:
                    return Terminal(PipelineResult.from_error(...))
                return Continue()
    """

    order: int = 100
    name: str = "base"
    key: Optional[str] = None

    @abstractmethod
    async def run(self, state: PipelineState) -> StageResult:
        """
        Run this stage.

        Args:
            state: Values produced by earlier stages

        Returns:
            ``Continue`` to proceed, ``Terminal`` to end the pipeline
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} order={self.order} name={self.name}>"


class RequestPipeline:
    """
    Runs an ordered sequence of stages for one request at a time.

    The pipeline itself holds no per-request data, so one instance can serve
    concurrent requests.
    """

    def __init__(self, stages: Iterable[PipelineStage]):
        self.stages = sorted(stages, key=lambda s: s.order)

    async def run(self, state: PipelineState) -> PipelineResult:
        """
        Run all stages in order until one returns ``Terminal``.

        Args:
            state: Fresh state for the request

        Returns:
            The final result with formatted errors
        """
        result = None
        for stage in self.stages:
            try:
                outcome = await stage.run(state)
            except Exception as exc:
                result = self._handle_unexpected(exc, state, stage)
                break
            if isinstance(outcome, Terminal):
                result = outcome.result
                self._log_terminal(stage, result)
                break
            if stage.key is not None:
                setattr(state, stage.key, outcome.value)

        if result is None:
            result = self.build_success(state)
        return self._finalize(result, state)

    def build_success(self, state: PipelineState) -> PipelineResult:
        if state.execution_result is None:
            return PipelineResult.empty()
        return PipelineResult.from_execution(state.execution_result)

    def _handle_unexpected(
        self, error: Exception, state: PipelineState, stage: PipelineStage
    ) -> PipelineResult:
        status_code = get_error_status(error)
        headers = error.headers if isinstance(error, GraphQLHTTPError) else None
        if status_code < 500:
            logger.log(
                _client_error_level(),
                "Stage '%s' raised %s: %s",
                stage.name,
                type(error).__name__,
                error,
            )
            return PipelineResult.from_error(error, status_code, headers)

        params = state.params
        report_exception(
            error,
            method=state.method,
            operation_name=params.operation_name if params else None,
        )
        if get_settings().mask_internal_errors and not is_debug():
            error = GraphQLError(INTERNAL_ERROR_MESSAGE, original_error=error)
        return PipelineResult.from_error(error, status_code, headers)

    def _log_terminal(self, stage: PipelineStage, result: PipelineResult) -> None:
        if result.status_code < 400:
            logger.debug("Stage '%s' ended the pipeline without a result", stage.name)
            return
        logger.log(
            _client_error_level(),
            "Stage '%s' rejected the request with status %s",
            stage.name,
            result.status_code,
        )

    def _finalize(self, result: PipelineResult, state: PipelineState) -> PipelineResult:
        result.show_graphiql = state.show_graphiql
        result.errors = format_errors(result.errors, state.options.format_error)
        return result

    def get_stage_names(self) -> list[str]:
        return [s.name for s in self.stages]

    def __repr__(self) -> str:
        return f"<RequestPipeline stages={self.get_stage_names()}>"
