"""
MongoDB handle shared by the API.

The client connects lazily, so importing this module does not open a socket.
"""

from pymongo import MongoClient
from pymongo.database import Database

import settings

client = MongoClient(settings.DATABASE_URL)
db = client[settings.DATABASE_NAME]


def get_db() -> Database:
    return db
