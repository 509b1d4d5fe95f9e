"""
utils/errors.py
-----------------
Error types raised by the directory, ledger and query layer.
Controllers catch them and turn them into HTTP responses.
"""


class AttendanceError(Exception):
    """Base class for every error raised by this application."""

    status_code = 500

    def __init__(self, message=None):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class NotFound(AttendanceError):
    status_code = 404


class ValidationError(AttendanceError):
    status_code = 400


class StorageError(AttendanceError):
    """Any failure reported by MongoDB while reading or writing."""

    status_code = 500
