import logging
import re
from datetime import datetime, timezone

from bson import ObjectId
from pymongo.errors import PyMongoError

from utils.errors import StorageError

logger = logging.getLogger(__name__)

_TRAILING_DIGITS = re.compile(r"(\d+)$")


def roll_number_suffix(roll_number):
    """Integer value of the digits ending a roll number ("CS101" -> 101), or None."""
    match = _TRAILING_DIGITS.search(roll_number or "")
    return int(match.group(1)) if match else None


def _numeric_roll_key(student):
    suffix = roll_number_suffix(student.roll_number)
    # Roll numbers without trailing digits go after the numbered ones
    if suffix is None:
        return (1, 0, student.roll_number or "")
    return (0, suffix, "")


class Student:

    def __init__(self, name, roll_number, fingerprint_id, _id=None, created_at=None):
        self.id = _id
        self.name = name
        self.roll_number = roll_number
        self.fingerprint_id = fingerprint_id
        self.created_at = created_at or datetime.now(timezone.utc).replace(tzinfo=None)

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "name": self.name,
            "roll_number": self.roll_number,
            "fingerprint_id": self.fingerprint_id,
            "created_at": self.created_at,
        }

    # Shape returned by the JSON API
    def to_json(self):
        return {
            "_id": str(self.id) if self.id else None,
            "name": self.name,
            "roll_number": self.roll_number,
            "fingerprint_id": self.fingerprint_id,
        }

    @classmethod
    def from_document(cls, doc):
        if doc is None:
            return None
        return cls(
            name=doc.get("name"),
            roll_number=doc.get("roll_number"),
            fingerprint_id=doc.get("fingerprint_id"),
            _id=doc.get("_id"),
            created_at=doc.get("created_at"),
        )

    def __repr__(self):
        return f"Student({self.roll_number!r}, {self.name!r})"


class StudentDirectory:
    """Create and look up students in the `students` collection."""

    def __init__(self, db):
        self.db = db

    def collection(self):
        return self.db.students

    def register(self, name, roll_number, fingerprint_id):
        student = Student(name, roll_number, fingerprint_id)
        try:
            result = self.collection().insert_one(student.to_dict())
        except PyMongoError as e:
            raise StorageError("Error registering student") from e
        student.id = result.inserted_id
        logger.info(f"Registered student {roll_number} ({student.id})")
        return student

    def find_by_fingerprint(self, fingerprint_id):
        # {"fingerprint_id": None} would match students stored without one
        if not fingerprint_id:
            return None
        try:
            doc = self.collection().find_one({"fingerprint_id": fingerprint_id})
        except PyMongoError as e:
            raise StorageError("Error looking up fingerprint") from e
        return Student.from_document(doc)

    def find_by_ids(self, student_ids):
        ids = [ObjectId(sid) if isinstance(sid, str) else sid for sid in student_ids]
        if not ids:
            return {}
        try:
            docs = list(self.collection().find({"_id": {"$in": ids}}))
        except PyMongoError as e:
            raise StorageError("Error loading students") from e
        return {doc["_id"]: Student.from_document(doc) for doc in docs}

    def list_all(self):
        try:
            students = [Student.from_document(doc) for doc in self.collection().find()]
        except PyMongoError as e:
            raise StorageError("Error fetching students") from e
        return sorted(students, key=_numeric_roll_key)
