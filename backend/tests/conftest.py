"""Root conftest — shared test configuration."""

import os

# Ensure tests never talk to a real database or use a real signing secret
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("LOG_FORMAT", "text")
