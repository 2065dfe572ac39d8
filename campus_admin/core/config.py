# /campus_admin/core/config.py

"""
Deployment settings, read once from the environment.
Every default is suitable for local development.
"""

import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./campus_admin.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PASSWORD_HASH_SCHEME = os.getenv("PASSWORD_HASH_SCHEME", "pbkdf2_sha256")
