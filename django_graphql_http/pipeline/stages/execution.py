"""
Execution stage.

Runs the validated document through the graphql-core executor. Synchronous
resolvers are moved off the event loop so they may use the Django ORM.
"""

import asyncio

from asgiref.sync import sync_to_async
from graphql import ExecutionResult, GraphQLError, MiddlewareManager, execute
from graphql.pyutils import is_awaitable

from ..base import PipelineStage
from ..context import Continue, PipelineResult, PipelineState, StageResult, Terminal


def _in_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


async def _resolve_in_thread(next_, root, info, **kwargs):
    result = await sync_to_async(next_, thread_sensitive=True)(root, info, **kwargs)
    if is_awaitable(result):
        result = await result
    return result


class SyncResolverMiddleware:
    """
    Run resolvers in Django's sync thread when called on the event loop.

    Async resolvers are created in the thread and awaited on the loop, so
    their awaits still run concurrently.
    """

    def resolve(self, next_, root, info, **kwargs):
        if not _in_event_loop():
            return next_(root, info, **kwargs)
        return _resolve_in_thread(next_, root, info, **kwargs)


def build_middleware(middleware=None) -> MiddlewareManager:
    """Put ``SyncResolverMiddleware`` outermost, around any view middleware."""
    if isinstance(middleware, MiddlewareManager):
        middleware = middleware.middlewares
    return MiddlewareManager(SyncResolverMiddleware(), *(middleware or ()))


def is_context_error(result: ExecutionResult) -> bool:
    """
    Tell whether execution never started.

    Errors raised while building the execution context (variable coercion,
    unknown operation name) are returned without data and without a path.
    """
    if result.data is not None or not result.errors:
        return False
    return all(not getattr(error, "path", None) for error in result.errors)


class ExecutionStage(PipelineStage):
    """
    Execute the operation.

    Errors creating the execution context end the pipeline with 400; any
    executed result, including partial data with errors, is a success.
    """

    order = 90
    name = "execution"
    key = "execution_result"

    async def run(self, state: PipelineState) -> StageResult:
        options = state.options
        params = state.params
        context_value = options.context_value
        if context_value is None:
            context_value = state.context.request

        try:
            result = execute(
                options.schema,
                state.document,
                root_value=options.root_value,
                context_value=context_value,
                variable_values=params.variables,
                operation_name=params.operation_name,
                middleware=build_middleware(options.middleware),
            )
        except (GraphQLError, TypeError) as context_error:
            return Terminal(PipelineResult.from_error(context_error, 400))

        if is_awaitable(result):
            result = await result

        if is_context_error(result):
            return Terminal(PipelineResult.from_errors(result.errors, 400))
        return Continue(result)
