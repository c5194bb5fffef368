"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database file or wait on the payment delay
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PAYMENT_DELAY_SECONDS", "0")
os.environ.setdefault("LOG_FORMAT", "text")
