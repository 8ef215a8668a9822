"""
Pipeline stages for GraphQL request processing.

Each stage handles one step of serving a request:
- HTTP method check
- Body decoding and content negotiation
- Parameter extraction and the missing query check
- Parsing, validation and the GET operation check
- Execution
"""

from .document import OperationKindStage, ParseStage, ValidationStage
from .execution import ExecutionStage, SyncResolverMiddleware
from .request import (
    BodyDecodeStage,
    MethodCheckStage,
    NegotiationStage,
    ParamExtractionStage,
    QueryPresenceStage,
)

__all__ = [
    # Request
    "MethodCheckStage",
    "BodyDecodeStage",
    "NegotiationStage",
    "ParamExtractionStage",
    "QueryPresenceStage",
    # Document
    "ParseStage",
    "ValidationStage",
    "OperationKindStage",
    # Execution
    "ExecutionStage",
    "SyncResolverMiddleware",
]
