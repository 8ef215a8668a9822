"""
Per-request records carried through the request pipeline.

``RequestContext`` is a read-only view of the incoming request,
``PipelineState`` collects what each stage produced, and ``PipelineResult``
is the terminal outcome handed to the response formatter. A fresh set is
created for every request; nothing here is shared between requests.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

from django.http import HttpRequest

if TYPE_CHECKING:
    from graphql import DocumentNode, ExecutionResult

    from ..options import OptionsConfig
    from ..params import QueryParams


@dataclass(frozen=True)
class RequestContext:
    """
    Read-only view of the request.

    Attributes:
        method: Upper-cased HTTP method
        query_params: The URL query string
        accept: Raw ``Accept`` header, empty when absent
        content_type: Media type of the body without parameters
        request: The underlying Django request
    """

    method: str
    query_params: Any
    accept: str
    content_type: str
    request: HttpRequest

    @classmethod
    def from_request(cls, request: HttpRequest) -> "RequestContext":
        return cls(
            method=(request.method or "").upper(),
            query_params=request.GET,
            accept=request.headers.get("Accept", ""),
            content_type=(getattr(request, "content_type", "") or "").lower(),
            request=request,
        )


@dataclass
class PipelineResult:
    """
    Terminal outcome of the pipeline.

    Attributes:
        data: Execution data, ``None`` when nothing was executed
        errors: Errors to report, formatted once the pipeline finishes
        status_code: HTTP status, decided by the stage that ended the pipeline
        show_graphiql: Render the GraphiQL page instead of JSON
        headers: Extra response headers (``Allow``)
        has_data: Whether ``data`` belongs in the JSON body
    """

    data: Any = None
    errors: list[Any] = field(default_factory=list)
    status_code: int = 200
    show_graphiql: bool = False
    headers: dict[str, str] = field(default_factory=dict)
    has_data: bool = False

    @classmethod
    def from_error(
        cls,
        error: BaseException,
        status_code: int,
        headers: Optional[dict[str, str]] = None,
    ) -> "PipelineResult":
        return cls(errors=[error], status_code=status_code, headers=dict(headers or {}))

    @classmethod
    def from_errors(cls, errors: list[Any], status_code: int) -> "PipelineResult":
        return cls(errors=list(errors), status_code=status_code)

    @classmethod
    def empty(cls) -> "PipelineResult":
        """Result for a request GraphiQL will handle without executing anything."""
        return cls(data=None, has_data=True)

    @classmethod
    def from_execution(cls, execution_result: "ExecutionResult") -> "PipelineResult":
        return cls(
            data=execution_result.data,
            errors=list(execution_result.errors or []),
            has_data=True,
        )

    @property
    def is_empty(self) -> bool:
        return self.data is None and not self.errors

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.has_data:
            payload["data"] = self.data
        if self.errors:
            payload["errors"] = [
                error.to_dict() if hasattr(error, "to_dict") else error
                for error in self.errors
            ]
        return payload


@dataclass
class PipelineState:
    """
    Values produced by the stages of one request.

    Each stage's ``Continue`` value is stored under the stage's key.
    """

    context: RequestContext
    options: "OptionsConfig"
    body: Any = None
    show_graphiql: bool = False
    params: Optional["QueryParams"] = None
    document: Optional["DocumentNode"] = None
    execution_result: Optional["ExecutionResult"] = None

    @property
    def method(self) -> str:
        return self.context.method


@dataclass(frozen=True)
class Continue:
    """Stage outcome letting the pipeline proceed with ``value``."""

    value: Any = None


@dataclass(frozen=True)
class Terminal:
    """Stage outcome ending the pipeline with ``result``."""

    result: PipelineResult


StageResult = Union[Continue, Terminal]
