"""MongoDB connection bootstrap for the HR API.

Expose:
 - connect(uri, db_name, timeout): open a client, verify it with a ping and
   return an immutable MongoInstance
 - get_mongo(): the MongoInstance attached to the current Flask app
 - get_collection(name): a collection handle from that instance
"""
import logging
import os
from typing import NamedTuple

import pymongo
from flask import current_app
from pymongo import MongoClient
from pymongo.database import Database

MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "fiber-hr")
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/" + MONGO_DB_NAME)

EMPLOYEES = "employees"

# seconds
CONNECT_TIMEOUT = 30
REQUEST_TIMEOUT = 10


class MongoInstance(NamedTuple):
    client: MongoClient
    db: Database


def connect(uri: str = MONGO_URI, db_name: str = MONGO_DB_NAME, timeout: float = CONNECT_TIMEOUT) -> MongoInstance:
    """Connect to MongoDB and return the client together with its database.

    MongoClient connects lazily, so a ping is issued to surface an
    unreachable server here instead of on the first request. Driver errors
    propagate to the caller.
    """
    timeout_ms = int(timeout * 1000)
    client = MongoClient(uri, connectTimeoutMS=timeout_ms, serverSelectionTimeoutMS=timeout_ms)
    try:
        with pymongo.timeout(timeout):
            client.admin.command("ping")
    except Exception:
        client.close()
        raise

    logging.info("Connected to MongoDB database %r", db_name)
    return MongoInstance(client=client, db=client.get_database(db_name))


def get_mongo() -> MongoInstance:
    """Return the handle stored on the running app by `create_app()`."""
    return current_app.extensions["mongo"]


def get_collection(name: str = EMPLOYEES):
    return get_mongo().db.get_collection(name)
