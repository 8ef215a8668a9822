"""
Reporting of unexpected pipeline failures.

Failures are always logged; when ``enable_sentry_integration`` is set they
are also captured by Sentry with the request method and operation tagged on
the scope.
"""

import logging
from typing import Optional

import sentry_sdk

from .conf import get_settings

logger = logging.getLogger(__name__)


def report_exception(
    error: BaseException,
    *,
    method: Optional[str] = None,
    operation_name: Optional[str] = None,
) -> None:
    logger.error(
        "Unhandled error while serving GraphQL %s request (operation=%s): %s",
        method or "?",
        operation_name or "-",
        error,
        exc_info=error,
    )
    if not get_settings().enable_sentry_integration:
        return
    with sentry_sdk.new_scope() as scope:
        scope.set_tag("graphql.http_method", method or "")
        if operation_name:
            scope.set_tag("graphql.operation_name", operation_name)
        sentry_sdk.capture_exception(error)
