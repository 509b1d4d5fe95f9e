# models/__init__.py

from .student import Student, StudentDirectory
from .attendance import AttendanceEvent, AttendanceLedger

__all__ = [
    "Student",
    "StudentDirectory",
    "AttendanceEvent",
    "AttendanceLedger",
]
