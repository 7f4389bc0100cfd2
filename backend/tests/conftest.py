"""Root conftest: shared test configuration."""

import os

# Settings are read at import time of movies_api.main
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "text")
