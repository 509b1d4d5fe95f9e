from flask import Blueprint, render_template, jsonify
from pymongo.errors import PyMongoError

from utils.db import get_db
from utils.dates import reference_timezone, today_string

home_bp = Blueprint("home", __name__)


@home_bp.route("/")
def index():
    return render_template("index.html", today=today_string(reference_timezone()))


@home_bp.route("/health")
def health():
    try:
        get_db().client.admin.command("ping")
        db_status = "connected"
    except PyMongoError:
        db_status = "unavailable"
    return jsonify({"status": "ok", "database": db_status})
