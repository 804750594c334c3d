"""Global pytest configuration."""

import os

# Keep tests off any developer database before settings are read
os.environ.setdefault("MONGO_DB_NAME", "orgservice_test")
