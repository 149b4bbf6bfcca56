"""Root conftest: shared test configuration."""

import os

# Never talk to a real identity provider or database from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("IDENTITY_PROVIDER_URL", "https://idp.test/v1")
os.environ.setdefault("IDENTITY_LOGIN_URL", "https://idp.test/login")
os.environ.setdefault("SESSION_COOKIE_SECURE", "false")
os.environ.setdefault("ADMIN_EMAILS", '["admin@ecoaware.test"]')
