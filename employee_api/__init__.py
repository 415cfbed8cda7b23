import logging
import os

from flask import Flask
from flask_cors import CORS
from pymongo.errors import PyMongoError

from employee_api.api.routes import api
from employee_api.extensions.db import MONGO_URI, connect


def create_app(mongo=None):
    """Build the Flask app.

    When `mongo` is not given a connection is opened here and any failure
    is fatal: it is logged and re-raised so the process never starts
    serving requests without a database.
    """
    app = Flask(__name__)

    if mongo is None:
        try:
            mongo = connect()
        except PyMongoError:
            logging.critical("Could not connect to MongoDB at %s", MONGO_URI, exc_info=True)
            raise
    app.extensions["mongo"] = mongo

    # Comma separated list, e.g. "http://localhost:8080,https://hr.example.com"
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:8080").split(",") if o.strip()]
    CORS(app, origins=origins)

    app.register_blueprint(api)

    return app
