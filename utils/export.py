import csv
import io

from flask import make_response
from openpyxl import Workbook
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

HEADER = ["#", "Name", "Roll Number", "Fingerprint ID", "Time"]
EXPORT_TYPES = ("csv", "xlsx", "pdf")


def attendance_rows(logs, tz):
    rows = []
    for i, (event, student) in enumerate(logs, start=1):
        rows.append([
            i,
            student.name if student else "Unknown student",
            student.roll_number if student else "",
            student.fingerprint_id if student else "",
            event.local_time(tz).strftime("%H:%M:%S"),
        ])
    return rows


def export_attendance(export_type, date_str, logs, tz):
    """File download of one day's attendance, or None for an unknown export type."""
    export_type = (export_type or "").lower()
    if export_type not in EXPORT_TYPES:
        return None

    rows = attendance_rows(logs, tz)
    filename = f"attendance_{date_str.replace('/', '-')}"
    if export_type == "csv":
        return _export_csv(date_str, rows, filename)
    elif export_type == "xlsx":
        return _export_excel(date_str, rows, filename)
    return _export_pdf(date_str, rows, filename)


# ================= EXPORT HELPERS =================

def _export_csv(date_str, rows, filename):
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["Attendance Report"])
    writer.writerow(["Date:", date_str])
    writer.writerow([])
    writer.writerow(HEADER)
    writer.writerows(rows)
    resp = make_response(buffer.getvalue())
    resp.headers["Content-Disposition"] = f"attachment; filename={filename}.csv"
    resp.headers["Content-Type"] = "text/csv"
    return resp


def _export_excel(date_str, rows, filename):
    wb = Workbook()
    ws = wb.active
    ws.title = "Attendance"
    ws.append(["Date:", date_str])
    ws.append([])
    ws.append(HEADER)
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    resp = make_response(buffer.getvalue())
    resp.headers["Content-Disposition"] = f"attachment; filename={filename}.xlsx"
    resp.headers["Content-Type"] = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    return resp


def _export_pdf(date_str, rows, filename):
    buffer = io.BytesIO()
    p = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4
    y = height - 80
    p.setFont("Helvetica-Bold", 14)
    p.drawString(60, y, f"Attendance Report - {date_str}")
    y -= 30
    p.setFont("Helvetica", 10)
    for i, name, roll_number, fingerprint_id, time_str in rows:
        p.drawString(60, y, f"{i}. {name} | {roll_number} | {fingerprint_id} | {time_str}")
        y -= 12
        if y < 100:
            p.showPage()
            p.setFont("Helvetica", 10)
            y = height - 80
    p.save()
    pdf = buffer.getvalue()
    buffer.close()
    resp = make_response(pdf)
    resp.headers["Content-Disposition"] = f"attachment; filename={filename}.pdf"
    resp.headers["Content-Type"] = "application/pdf"
    return resp
