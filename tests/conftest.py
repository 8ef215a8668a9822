import django
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without HTTP round trips")
    config.addinivalue_line("markers", "integration: tests driving the GraphQL view")

    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        SECRET_KEY="django-graphql-http-tests",
        ALLOWED_HOSTS=["testserver"],
        INSTALLED_APPS=[
            "graphene_django",
            "django_graphql_http",
        ],
        DATABASES={
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": ":memory:",
            },
        },
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [],
                "APP_DIRS": True,
                "OPTIONS": {},
            },
        ],
        GRAPHQL_HTTP={},
        USE_TZ=True,
    )
    django.setup()
