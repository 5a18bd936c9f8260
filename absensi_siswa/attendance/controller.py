from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..core.constants import WILDCARD_CLASS
from ..container import Container
from .model import DayView


def _day_json(view: DayView) -> dict:
    return {
        "date": view.date,
        "kelas": view.selected_class,
        "students": [
            {
                "id": s.id,
                "nama": s.name,
                "nisn": s.national_id,
                "kelas": s.class_label,
                "status": view.statuses[s.id].value,
            }
            for s in view.students
        ],
        "summary": view.summary.to_dict(),
        "total": len(view.students),
    }


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_day")
    def attendance_day():
        date_s = request.args.get("date") or today_local().isoformat()
        selected = request.args.get("kelas") or WILDCARD_CLASS
        view = service.view_day(date_s, selected)
        return jsonify({"success": True, "data": _day_json(view)})

    @app.route("/api/attendance/status", methods=["POST"], endpoint="attendance_set_status")
    def attendance_set_status():
        data = request.get_json(silent=True) or {}
        status = service.set_status(
            str(data.get("date") or ""),
            str(data.get("student_id") or ""),
            data.get("status"),
        )
        return jsonify({"success": True, "status": status.value})

    @app.route("/api/attendance/save", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        data = request.get_json(silent=True) or {}
        message = service.save(str(data.get("date") or ""), data.get("kelas") or WILDCARD_CLASS)
        return jsonify({"success": True, "message": message})
