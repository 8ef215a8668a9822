"""
Django views serving a GraphQL schema over HTTP.
"""

import logging
from typing import Any, Optional

from django.http import HttpRequest, HttpResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import View

from .body import BodyDecoderProtocol
from .formatting import render_response
from .options import OptionsProvider, as_options_provider
from .pipeline import PipelineState, RequestContext, RequestPipeline, build_default_pipeline

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class GraphQLHTTPView(View):
    """
    GraphQL endpoint accepting GET and POST requests.

    Every HTTP method is routed through the request pipeline, which answers
    unsupported methods itself. Options are either static (validated when the
    view is created) or computed from each request.

    Example:
        urlpatterns = [
            path("graphql/", GraphQLHTTPView.as_view(graphql_options={"schema": schema})),
        ]
    """

    graphql_options: Any = None
    body_decoder: Optional[BodyDecoderProtocol] = None
    pipeline: Optional[RequestPipeline] = None

    @classmethod
    def as_view(cls, **initkwargs):
        options = initkwargs.get("graphql_options", cls.graphql_options)
        initkwargs["graphql_options"] = as_options_provider(options)
        if initkwargs.get("pipeline", cls.pipeline) is None:
            initkwargs["pipeline"] = build_default_pipeline(
                initkwargs.get("body_decoder", cls.body_decoder)
            )
        return super().as_view(**initkwargs)

    async def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        return await self.execute_request(request)

    async def get(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        return await self.execute_request(request)

    async def post(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        return await self.execute_request(request)

    def get_options_provider(self) -> OptionsProvider:
        return as_options_provider(self.graphql_options)

    async def execute_request(self, request: HttpRequest) -> HttpResponse:
        """
        Serve one GraphQL request.

        Raises:
            ConfigurationError: If computed options are invalid
        """
        options = self.get_options_provider().resolve(request)
        state = PipelineState(context=RequestContext.from_request(request), options=options)
        result = await self.pipeline.run(state)
        logger.debug(
            "GraphQL %s request finished with status %s", state.method, result.status_code
        )
        return render_response(result, state.params, options, request)


def graphql_http(options: Any, **initkwargs):
    """
    Return a view serving GraphQL with ``options``.

    Args:
        options: An ``OptionsConfig``, a dict of options, or a function
            taking the request and returning either

    Raises:
        ConfigurationError: If ``options`` is missing or static options are invalid
    """
    return GraphQLHTTPView.as_view(graphql_options=options, **initkwargs)
