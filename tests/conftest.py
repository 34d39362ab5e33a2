"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch a real data file or wait on the feedback delay
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FEEDBACK_DELAY_SECONDS", "0")
os.environ.setdefault("LOG_FORMAT", "text")
