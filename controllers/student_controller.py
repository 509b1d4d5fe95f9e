import logging

from flask import Blueprint, render_template, jsonify

from models.student import StudentDirectory
from utils.db import get_db
from utils.errors import StorageError
from utils.request_data import INVALID_BODY_MESSAGE, request_fields

logger = logging.getLogger(__name__)

student_bp = Blueprint("students", __name__)


# ==========================================================
# VIEW STUDENTS (numeric roll-number order)
# ==========================================================
@student_bp.route("/students")
def view_students():
    try:
        students = StudentDirectory(get_db()).list_all()
    except StorageError as e:
        logger.exception("Error fetching students")
        return "Error fetching students", e.status_code

    return render_template("students.html", students=students)


# ==========================================================
# REGISTER STUDENT (JSON or form body)
# ==========================================================
@student_bp.route("/register", methods=["POST"])
def register_student():
    data = request_fields()
    if data is None:
        return jsonify({"error": INVALID_BODY_MESSAGE}), 400

    name = data.get("name")
    roll_number = data.get("roll_number")
    fingerprint_id = data.get("fingerprint_id")

    try:
        StudentDirectory(get_db()).register(name, roll_number, fingerprint_id)
    except StorageError as e:
        logger.exception("Error registering student")
        return jsonify({"error": "Error registering student"}), e.status_code

    return jsonify({"message": "Student registered successfully"}), 201
