"""
Project-wide settings for django-graphql-http.

Settings are resolved from library defaults overridden by the
``GRAPHQL_HTTP`` dict in Django settings.
"""

import logging
from dataclasses import dataclass

from django.conf import settings as django_settings

from .defaults import BOOLEAN_SETTINGS, LIBRARY_DEFAULTS, SETTINGS_NAME, merge_settings
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphQLHTTPSettings:
    """Settings controlling default view behaviour.

    Attributes:
        pretty: Indent JSON responses when view options do not say otherwise.
        graphiql: Enable GraphiQL when view options do not say otherwise.
        graphiql_version: Version of the GraphiQL assets loaded by the page.
        graphiql_template: Template used to render the GraphiQL page.
        mask_internal_errors: Hide messages of unexpected errors outside DEBUG.
        log_client_errors: Log 4xx results at INFO level instead of DEBUG.
        enable_sentry_integration: Report unexpected errors to Sentry.
    """

    pretty: bool = False
    graphiql: bool = False
    graphiql_version: str = LIBRARY_DEFAULTS["graphiql_version"]
    graphiql_template: str = LIBRARY_DEFAULTS["graphiql_template"]
    mask_internal_errors: bool = True
    log_client_errors: bool = False
    enable_sentry_integration: bool = False

    @classmethod
    def from_django(cls) -> "GraphQLHTTPSettings":
        """Create settings from library defaults and Django settings."""
        overrides = getattr(django_settings, SETTINGS_NAME, None) or {}
        if not isinstance(overrides, dict):
            raise ConfigurationError(f"{SETTINGS_NAME} must be a dict.")

        valid_fields = set(cls.__dataclass_fields__.keys())
        unknown = sorted(set(overrides) - valid_fields)
        if unknown:
            logger.warning(
                "Ignoring unknown %s settings: %s", SETTINGS_NAME, ", ".join(unknown)
            )

        merged = merge_settings(LIBRARY_DEFAULTS, overrides)
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for settings of the wrong type."""
        for name in BOOLEAN_SETTINGS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{SETTINGS_NAME}['{name}'] must be a boolean, got {value!r}."
                )
        if not self.graphiql_template:
            raise ConfigurationError(f"{SETTINGS_NAME}['graphiql_template'] is empty.")


def get_settings() -> GraphQLHTTPSettings:
    """Return the current settings, honouring ``override_settings``."""
    return GraphQLHTTPSettings.from_django()


def is_debug() -> bool:
    return bool(getattr(django_settings, "DEBUG", False))
