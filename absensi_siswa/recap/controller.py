from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..core.constants import MONTH_NAMES, WILDCARD_CLASS
from ..container import Container

EXPORT_FIELDS = [
    "nama",
    "kelas",
    "hadir",
    "alpha",
    "izin",
    "sakit",
    "persen_hadir",
    "persen_izin",
    "persen_sakit",
    "persen_alpha",
]


def register(app: Flask, container: Container) -> None:
    service = container.recap_service

    def _recap_from_args():
        return service.monthly_recap(
            month=request.args.get("bulan") or MONTH_NAMES[0],
            selected_class=request.args.get("kelas") or WILDCARD_CLASS,
        )

    @app.route("/api/recap", methods=["GET"], endpoint="recap_monthly")
    def recap_monthly():
        recap = _recap_from_args()
        return jsonify(
            {
                "success": True,
                "bulan": recap.month,
                "kelas": recap.selected_class,
                "summary": recap.summary.to_dict(),
                "data": [
                    {
                        "nama": r.student_name or "N/A",
                        "kelas": r.class_label or "N/A",
                        "hadir": r.present,
                        "alpa": r.absent,
                        "izin": r.leave,
                        "sakit": r.sick,
                        "persenHadir": r.attendance_percent,
                    }
                    for r in recap.rows
                ],
            }
        )

    @app.route("/api/recap.csv", methods=["GET"], endpoint="recap_monthly_csv")
    def recap_monthly_csv():
        recap = _recap_from_args()

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for row in service.export_rows(recap):
            writer.writerow(row)

        kelas = "semua" if recap.selected_class == WILDCARD_CLASS else recap.selected_class.replace(" ", "_")
        filename = f"rekap_{recap.month.lower()}_{kelas}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/graph", methods=["GET"], endpoint="recap_graph")
    def recap_graph():
        points = service.semester_graph(
            semester=request.args.get("semester") or "1",
            selected_class=request.args.get("kelas") or WILDCARD_CLASS,
        )
        return jsonify(
            {
                "success": True,
                "data": [
                    {"bulan": p.month, **p.summary.to_dict(), "persenHadir": p.attendance_percent}
                    for p in points
                ],
            }
        )
