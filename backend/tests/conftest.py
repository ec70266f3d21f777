"""Root conftest — shared test configuration."""

import os

# Deterministic settings regardless of the developer's .env
os.environ.setdefault("ENABLE_FAULT_HOOKS", "true")
os.environ.setdefault("LOG_FORMAT", "text")
