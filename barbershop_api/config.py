# barbershop_api/config.py

import os

# Read once at import time; set environment variables before importing the app.

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./barbershop.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in {"1", "true", "yes"}

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-later")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

# "advisory": check ownership, then mutate by id.
# "atomic": mutate with the ownership predicate in the same statement.
RESOLVER_STRATEGY = os.getenv("RESOLVER_STRATEGY", "advisory").lower()
