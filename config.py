import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name, default):
    return bool(int(os.environ.get(name, default)))


class Config:
    # MongoDB
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/AttendanceSystem")
    MONGO_DBNAME = os.environ.get("MONGO_DBNAME", "AttendanceSystem")
    CHECK_DB_ON_STARTUP = _flag("CHECK_DB_ON_STARTUP", "1")
    ENFORCE_UNIQUE_STUDENT_KEYS = _flag("ENFORCE_UNIQUE_STUDENT_KEYS", "0")

    # Server
    PORT = int(os.environ.get("PORT", "3000"))
    DEBUG = _flag("FLASK_DEBUG", "0")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # All "today" and day-window calculations happen in this zone
    REFERENCE_TIMEZONE = os.environ.get("REFERENCE_TIMEZONE", "Asia/Kolkata")


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    MONGO_URI = "mongodb://localhost:27017/AttendanceSystemTest"
    CHECK_DB_ON_STARTUP = False
    ENFORCE_UNIQUE_STUDENT_KEYS = False
    REFERENCE_TIMEZONE = "Asia/Kolkata"
