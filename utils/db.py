"""
utils/db.py
-----------------
This module initializes and manages the MongoDB connection
for the entire Flask application.
"""

import atexit
import logging

from flask import current_app
from flask_pymongo import PyMongo
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Create a global MongoDB instance
mongo = PyMongo()

DB_EXTENSION_KEY = "attendance_db"


def init_db_connection(app, db=None):
    """
    Bind a MongoDB database handle to the Flask app.
    When `db` is given (tests, scripts) it is used as-is, otherwise
    Flask-PyMongo connects using MONGO_URI from the app config.
    """
    if db is None:
        mongo.init_app(app)
        # URIs without a database path (common on Atlas) fall back to a default name
        db = mongo.cx.get_default_database(default=app.config.get("MONGO_DBNAME", "AttendanceSystem"))
        atexit.register(mongo.cx.close)

        if app.config.get("CHECK_DB_ON_STARTUP"):
            check_connection(db)
            ensure_indexes(db, unique=app.config.get("ENFORCE_UNIQUE_STUDENT_KEYS", False))

    app.extensions[DB_EXTENSION_KEY] = db
    return db


def get_db():
    """Database handle of the current app."""
    return current_app.extensions[DB_EXTENSION_KEY]


def check_connection(db):
    # A failed check is logged only; the app keeps serving
    try:
        db.client.admin.command("ping")
        logger.info("MongoDB connection initialized successfully.")
        return True
    except PyMongoError as e:
        logger.error(f"MongoDB connection error: {e}")
        return False


def ensure_indexes(db, unique=False):
    try:
        db.students.create_index([("fingerprint_id", ASCENDING)], unique=unique)
        db.attendances.create_index([("timestamp", ASCENDING)])
        if unique:
            db.students.create_index([("roll_number", ASCENDING)], unique=True)
    except PyMongoError as e:
        logger.warning(f"Failed to create MongoDB index: {e}")
