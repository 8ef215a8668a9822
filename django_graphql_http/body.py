"""
Decoding of GraphQL request bodies.

The decoder turns a Django request into a plain mapping of GraphQL
parameters. It never inspects the parameters themselves; that is left to
``params.extract_params``.
"""

import codecs
import json
import logging
from typing import Any, Protocol

from django.http import HttpRequest

from .errors import BodyDecodeError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
GRAPHQL_CONTENT_TYPE = "application/graphql"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class BodyDecoderProtocol(Protocol):
    async def decode(self, request: HttpRequest) -> Any:
        ...


def _get_charset(request: HttpRequest) -> str:
    charset = (getattr(request, "content_params", None) or {}).get("charset", "utf-8")
    charset = str(charset).strip().lower()
    if not charset.startswith("utf-"):
        raise BodyDecodeError(f'Unsupported charset "{charset.upper()}".', status_code=415)
    try:
        codecs.lookup(charset)
    except LookupError:
        raise BodyDecodeError(f'Unsupported charset "{charset.upper()}".', status_code=415)
    return charset


def _read_text(request: HttpRequest) -> str:
    charset = _get_charset(request)
    try:
        return request.body.decode(charset)
    except UnicodeDecodeError:
        raise BodyDecodeError("Invalid body encoding.")


class BodyDecoder:
    """Default decoder supporting JSON, GraphQL and form encoded bodies."""

    async def decode(self, request: HttpRequest) -> Any:
        """
        Decode the body of ``request``.

        Returns:
            A mapping of body parameters, empty when there is no body

        Raises:
            BodyDecodeError: If the body is malformed or uses an unsupported charset
        """
        if request.method != "POST":
            return {}

        content_type = (getattr(request, "content_type", "") or "").lower()

        if content_type in FORM_CONTENT_TYPES:
            return request.POST

        if not request.body:
            return {}

        if content_type == GRAPHQL_CONTENT_TYPE:
            return {"query": _read_text(request)}

        if content_type == JSON_CONTENT_TYPE:
            return self.decode_json(_read_text(request))

        logger.debug("Ignoring request body with content type '%s'", content_type)
        return {}

    @staticmethod
    def decode_json(text: str) -> dict[str, Any]:
        try:
            data = json.loads(text)
        except ValueError:
            raise BodyDecodeError("POST body sent invalid JSON.")
        if not isinstance(data, dict):
            raise BodyDecodeError("POST body sent invalid JSON.")
        return data


default_body_decoder = BodyDecoder()
