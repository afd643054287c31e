"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or a deployed .env account
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("BASIC_AUTH_USERNAME", "admin")
os.environ.setdefault("BASIC_AUTH_PASSWORD", "admin")
os.environ.setdefault("LOG_FORMAT", "text")
