import logging

from flask import Blueprint, render_template, request, redirect, url_for, jsonify

from models.attendance import AttendanceLedger
from models.student import StudentDirectory
from services.attendance_query import resolve_day, list_attendance_for_day
from services.scan_service import log_scan
from utils.db import get_db
from utils.dates import reference_timezone
from utils.errors import NotFound, StorageError, ValidationError
from utils.export import export_attendance
from utils.request_data import INVALID_BODY_MESSAGE, request_fields

logger = logging.getLogger(__name__)

attendance_bp = Blueprint("attendance", __name__)


# ==========================================================
# VIEW ATTENDANCE FOR ONE DAY
# ==========================================================
@attendance_bp.route("/attendance", defaults={"day": None, "month": None, "year": None})
@attendance_bp.route("/attendance/<day>", defaults={"month": None, "year": None})
@attendance_bp.route("/attendance/<day>/<month>", defaults={"year": None})
@attendance_bp.route("/attendance/<day>/<month>/<year>")
def view_attendance(day, month, year):
    tz = reference_timezone()

    try:
        window, today = resolve_day(day, month, year, tz)
    except ValidationError as e:
        logger.info(f"Rejected attendance date {day}/{month}/{year}")
        return e.message, e.status_code

    # Canonical URL always carries an explicit date; the query string is kept
    if window is None:
        params = request.args.to_dict()
        params["day"], params["month"], params["year"] = today.split("/")
        return redirect(url_for("attendance.view_attendance", **params))

    try:
        logs = list_attendance_for_day(AttendanceLedger(get_db(), tz), window)
    except StorageError as e:
        logger.exception("Error fetching attendance logs")
        return "Error fetching logs", e.status_code

    export = export_attendance(request.args.get("export"), window.label, logs, tz)
    if export is not None:
        return export

    return render_template("attendance.html", logs=logs, date=window.label, tz=tz)


# ==========================================================
# LOG A FINGERPRINT SCAN
# ==========================================================
@attendance_bp.route("/log-scan", methods=["POST"])
def log_fingerprint_scan():
    data = request_fields()
    if data is None:
        return jsonify({"error": INVALID_BODY_MESSAGE}), 400

    fingerprint_id = data.get("fingerprint_id")
    db = get_db()

    try:
        student, _ = log_scan(
            StudentDirectory(db),
            AttendanceLedger(db, reference_timezone()),
            fingerprint_id,
        )
    except NotFound as e:
        return jsonify({"message": e.message}), e.status_code
    except StorageError as e:
        logger.exception("Error logging attendance")
        return jsonify({"error": "Error logging attendance"}), e.status_code

    return jsonify({"message": "Attendance logged", "student": student.to_json()})
