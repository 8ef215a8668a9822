"""
Request pipeline for serving GraphQL over HTTP.

Core Components:
- RequestContext: Read-only view of the request
- PipelineState: Values produced by each stage for one request
- PipelineStage: Abstract base for each pipeline stage
- RequestPipeline: Runs stages in order until one ends the request
- PipelineBuilder: Builds pipelines with configurable stages

Usage:
    from django_graphql_http.pipeline import PipelineState, RequestContext, build_default_pipeline

    pipeline = build_default_pipeline()
    state = PipelineState(context=RequestContext.from_request(request), options=options)
    result = await pipeline.run(state)
"""

from .base import PipelineStage, RequestPipeline
from .builder import PipelineBuilder, build_default_pipeline
from .context import (
    Continue,
    PipelineResult,
    PipelineState,
    RequestContext,
    StageResult,
    Terminal,
)

__all__ = [
    "RequestContext",
    "PipelineState",
    "PipelineResult",
    "Continue",
    "Terminal",
    "StageResult",
    "PipelineStage",
    "RequestPipeline",
    "PipelineBuilder",
    "build_default_pipeline",
]
