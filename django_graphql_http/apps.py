"""
Django app configuration for django-graphql-http.

Installing the app makes the GraphiQL template available and validates the
``GRAPHQL_HTTP`` settings at startup.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for django-graphql-http."""

    name = "django_graphql_http"
    verbose_name = "GraphQL over HTTP"
    label = "django_graphql_http"

    def ready(self):
        """Validate library configuration."""
        from .conf import GraphQLHTTPSettings
        from .errors import ConfigurationError

        try:
            GraphQLHTTPSettings.from_django().validate()
            logger.debug("GraphQL HTTP settings validated")
        except ConfigurationError as e:
            logger.error(f"Invalid GraphQL HTTP configuration: {e}")
            if getattr(settings, "DEBUG", False):
                raise
