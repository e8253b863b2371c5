"""Configuration settings for the Volders repositories."""

import os


REPOSITORY_BACKEND = os.environ.get("VOLDERS_REPOSITORY_BACKEND", "memory")

DATABASE_PATH = os.environ.get("VOLDERS_DATABASE_PATH", "data/volders.db")

# 0 disables the default deadline
HIERARCHY_TIMEOUT_SECONDS = float(os.environ.get("VOLDERS_HIERARCHY_TIMEOUT_SECONDS", "0"))

# SQLite VM instructions between two cancellation checks
PROGRESS_HANDLER_INTERVAL = 1000
