"""
Pipeline Builder - Builds request pipelines with configurable stages.
"""

from typing import List, Optional

from ..body import BodyDecoderProtocol
from .base import PipelineStage, RequestPipeline
from .stages import (
    BodyDecodeStage,
    ExecutionStage,
    MethodCheckStage,
    NegotiationStage,
    OperationKindStage,
    ParamExtractionStage,
    ParseStage,
    QueryPresenceStage,
    ValidationStage,
)


class PipelineBuilder:
    """
    Builds request pipelines.

    Example:
        builder = PipelineBuilder(body_decoder=MyDecoder())
        builder.add_stage(AuditStage())
        pipeline = builder.build()
    """

    def __init__(self, body_decoder: Optional[BodyDecoderProtocol] = None):
        self.body_decoder = body_decoder
        self._custom_stages: List[PipelineStage] = []
        self._skip_stages: List[str] = []

    def add_stage(self, stage: PipelineStage) -> "PipelineBuilder":
        self._custom_stages.append(stage)
        return self

    def skip_stage(self, name: str) -> "PipelineBuilder":
        self._skip_stages.append(name)
        return self

    def get_default_stages(self) -> List[PipelineStage]:
        return [
            MethodCheckStage(),
            BodyDecodeStage(self.body_decoder),
            NegotiationStage(),
            ParamExtractionStage(),
            QueryPresenceStage(),
            ParseStage(),
            ValidationStage(),
            OperationKindStage(),
            ExecutionStage(),
        ]

    def build(self) -> RequestPipeline:
        stages = [
            stage
            for stage in self.get_default_stages() + self._custom_stages
            if stage.name not in self._skip_stages
        ]
        return RequestPipeline(stages)


def build_default_pipeline(body_decoder: Optional[BodyDecoderProtocol] = None) -> RequestPipeline:
    return PipelineBuilder(body_decoder=body_decoder).build()
