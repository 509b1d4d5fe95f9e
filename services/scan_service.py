"""
Fingerprint scan handling: resolve the scanned fingerprint to a student
and record one attendance event for them.
"""

import logging

from utils.errors import NotFound

logger = logging.getLogger(__name__)

FINGERPRINT_NOT_RECOGNIZED = "Fingerprint not recognized"


def log_scan(directory, ledger, fingerprint_id, timestamp=None):
    """
    Record a scan of `fingerprint_id`.

    Args:
        directory: StudentDirectory used for the lookup
        ledger: AttendanceLedger the event is appended to
        fingerprint_id: Opaque token produced by the scanner
        timestamp: Optional scan time, "now" in the ledger's timezone otherwise

    Returns:
        (Student, AttendanceEvent)

    Raises:
        NotFound: no student carries this fingerprint; nothing is written
        StorageError: the lookup or the insert failed
    """
    student = directory.find_by_fingerprint(fingerprint_id)
    if student is None:
        logger.info(f"Unrecognized fingerprint scanned: {fingerprint_id!r}")
        raise NotFound(FINGERPRINT_NOT_RECOGNIZED)

    event = ledger.append(student.id, timestamp)
    return student, event
