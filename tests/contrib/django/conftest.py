from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            DATABASES={},
            INSTALLED_APPS=[],
            SECRET_KEY="test_secret",
            ALLOWED_HOSTS=["testserver"],
            AUTH_PUBLIC_PATHS=["/health"],
        )
        import django

        django.setup()
