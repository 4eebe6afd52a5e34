"""Root conftest - shared test configuration."""

import os

# Ensure tests never pick up a real deployment key
os.environ.setdefault("API_KEY", "sk-test-fake-key")
os.environ.setdefault("LOG_FORMAT", "text")
