"""
Configuration for the Access Assist API.

Database, server and logging values can be overridden through the environment.
"""

import os

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "access_assist")

# Server
PORT = int(os.getenv("PORT", 8000))

# Facility summary
COMMON_TAG_LIMIT = 3  # commonAccessTags never holds more than this
SUMMARY_MAX_RETRIES = int(os.getenv("SUMMARY_MAX_RETRIES", 5))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
