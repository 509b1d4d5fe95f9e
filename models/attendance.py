import logging
from datetime import datetime, timezone

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from models.student import StudentDirectory
from utils.dates import from_storage, to_storage
from utils.errors import StorageError

logger = logging.getLogger(__name__)


class AttendanceEvent:

    def __init__(self, student_id, timestamp=None, _id=None):
        self.id = _id
        self.student_id = ObjectId(student_id) if isinstance(student_id, str) else student_id
        self.timestamp = to_storage(timestamp or datetime.now(timezone.utc))

    def to_dict(self):
        return {
            "student_id": self.student_id,
            "timestamp": self.timestamp,
        }

    def local_time(self, tz):
        return from_storage(self.timestamp, tz)

    @classmethod
    def from_document(cls, doc):
        return cls(student_id=doc.get("student_id"), timestamp=doc.get("timestamp"), _id=doc.get("_id"))

    def __repr__(self):
        return f"AttendanceEvent({self.student_id}, {self.timestamp.isoformat()})"


class AttendanceLedger:
    """
    Append-only log of fingerprint scans (`attendances` collection).

    Timestamps are stored as naive UTC datetimes; callers pass aware
    datetimes (or nothing, meaning "now") and get naive UTC back.
    """

    def __init__(self, db, tz=None):
        self.db = db
        self.tz = tz
        self.directory = StudentDirectory(db)

    def collection(self):
        return self.db.attendances

    def append(self, student_id, timestamp=None):
        if timestamp is None:
            timestamp = datetime.now(self.tz or timezone.utc)
        event = AttendanceEvent(student_id, timestamp)
        try:
            result = self.collection().insert_one(event.to_dict())
        except PyMongoError as e:
            raise StorageError("Error logging attendance") from e
        event.id = result.inserted_id
        logger.info(f"Attendance logged for student {event.student_id} at {event.timestamp.isoformat()}")
        return event

    def query_range(self, start_inclusive, end_inclusive):
        """
        Events with start <= timestamp <= end, oldest first, each paired
        with its Student (None when the student no longer exists).
        """
        query = {"timestamp": {"$gte": to_storage(start_inclusive), "$lte": to_storage(end_inclusive)}}
        try:
            events = [
                AttendanceEvent.from_document(doc)
                for doc in self.collection().find(query).sort("timestamp", ASCENDING)
            ]
        except PyMongoError as e:
            raise StorageError("Error fetching logs") from e

        students = self.directory.find_by_ids({event.student_id for event in events})
        return [(event, students.get(event.student_id)) for event in events]
