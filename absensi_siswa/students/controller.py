from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .model import Student


def _student_json(s: Student) -> dict:
    return {"id": s.id, "nama": s.name, "nisn": s.national_id, "kelas": s.class_label}


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        selected = request.args.get("kelas") or None
        students = roster.students_in(selected) if selected else roster.students
        return jsonify({"success": True, "data": [_student_json(s) for s in students]})

    @app.route("/api/students/refresh", methods=["POST"], endpoint="students_refresh")
    def students_refresh():
        students = roster.refresh()
        return jsonify({"success": True, "total": len(students)})

    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    def classes_list():
        return jsonify({"success": True, "data": roster.classes()})

    @app.route("/api/students", methods=["POST"], endpoint="students_add")
    def students_add():
        data = request.get_json(silent=True) or {}
        roster.add_student(
            national_id=data.get("nisn", ""),
            name=data.get("nama", ""),
            class_label=data.get("kelas", ""),
        )
        return jsonify({"success": True, "message": "Siswa berhasil ditambahkan!"}), 201

    @app.route("/api/students/<nisn>", methods=["PUT"], endpoint="students_update")
    def students_update(nisn: str):
        data = request.get_json(silent=True) or {}
        roster.update_student(
            old_national_id=nisn,
            national_id=data.get("nisn", ""),
            name=data.get("nama", ""),
            class_label=data.get("kelas", ""),
        )
        return jsonify({"success": True, "message": "Data siswa berhasil diperbarui"})

    @app.route("/api/students/<nisn>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(nisn: str):
        roster.delete_student(national_id=nisn)
        return jsonify({"success": True, "message": "Data siswa berhasil dihapus"})
