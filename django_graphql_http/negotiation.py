"""
Content negotiation between the JSON response and the GraphiQL page.

The ``Accept`` header is parsed into media ranges with quality values and
each candidate representation is ranked the way HTTP negotiators rank them:
by quality, then by how specifically a range matched, then by the position of
the range in the header, then by the order the candidates were offered in.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from .params import has_raw_flag

JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"


@dataclass(frozen=True)
class MediaRange:
    """A single entry of an ``Accept`` header."""

    type: str
    subtype: str
    params: tuple[tuple[str, str], ...]
    quality: float
    position: int

    def specificity(self, media_type: str) -> int:
        """Return how specifically this range matches, or -1 if it does not."""
        # Candidates are bare media types; a parameterized range never matches them
        if self.params:
            return -1

        main, _, sub = media_type.partition("/")
        score = 0
        if self.type == main:
            score |= 4
        elif self.type != "*":
            return -1
        if self.subtype == sub:
            score |= 2
        elif self.subtype != "*":
            return -1
        return score


def _parse_media_range(entry: str, position: int) -> Optional[MediaRange]:
    parts = [part.strip() for part in entry.split(";")]
    full_type = parts[0].lower()
    if "/" not in full_type:
        return None
    main, _, sub = full_type.partition("/")
    if not main or not sub:
        return None

    quality = 1.0
    params = []
    for param in parts[1:]:
        key, _, value = param.partition("=")
        key = key.strip().lower()
        value = value.strip().strip('"')
        if key == "q":
            try:
                quality = float(value)
            except ValueError:
                return None
        elif key:
            params.append((key, value))
    return MediaRange(main, sub, tuple(params), quality, position)


def parse_accept(header: Optional[str]) -> list[MediaRange]:
    """Parse an ``Accept`` header; a missing or blank header accepts anything."""
    if not header or not header.strip():
        header = "*/*"
    ranges = []
    for position, entry in enumerate(header.split(",")):
        media_range = _parse_media_range(entry, position)
        if media_range is not None:
            ranges.append(media_range)
    return ranges


def preferred_media_type(header: Optional[str], candidates: Sequence[str]) -> Optional[str]:
    """
    Return the candidate media type the client prefers, or ``None``.

    Args:
        header: Raw ``Accept`` header value
        candidates: Media types the server can produce, in server preference order
    """
    ranges = parse_accept(header)
    ranked = []
    for index, candidate in enumerate(candidates):
        best = None
        for media_range in ranges:
            specificity = media_range.specificity(candidate)
            if specificity < 0:
                continue
            key = (specificity, media_range.quality, media_range.position)
            if best is None or key > best:
                best = key
        if best is None:
            continue
        specificity, quality, position = best
        if quality <= 0:
            continue
        ranked.append((-quality, -specificity, position, index, candidate))
    if not ranked:
        return None
    return min(ranked)[-1]


def may_show_graphiql(context: Any, body: Mapping[str, Any], graphiql_enabled: bool) -> bool:
    """
    Decide whether the GraphiQL page may be rendered for this request.

    Args:
        context: The request context (query string and accept header)
        body: The decoded request body
        graphiql_enabled: Whether the view allows GraphiQL at all
    """
    if not graphiql_enabled:
        return False
    if has_raw_flag(context.query_params, body):
        return False
    preferred = preferred_media_type(context.accept, [JSON_MEDIA_TYPE, HTML_MEDIA_TYPE])
    return preferred == HTML_MEDIA_TYPE
