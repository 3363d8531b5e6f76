"""Root conftest: shared test configuration."""

import os

# Ensure tests never point at a real deployment
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/nexuscore_test")
os.environ.setdefault("LOG_FORMAT", "text")
