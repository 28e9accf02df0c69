import django
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a GraphQL schema")
    config.addinivalue_line("markers", "integration: tests building a graphene schema")

    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[],
            USE_TZ=True,
            NODE_FILTERS={},
        )
        django.setup()
