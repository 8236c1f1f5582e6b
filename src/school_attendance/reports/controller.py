from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http import json_error, json_unexpected
from ..core.exceptions import ParseError
from ..container import Container
from ..ledger.snapshot import backup_filename, dump_snapshot

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "role",
    "id",
    "name",
    "details",
    "total_days",
    "present_days",
    "absent_days",
    "leave_days",
    "percentage",
    "band",
]


def register(app: Flask, container: Container) -> None:
    def _write_report_csv(*, rows, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports", methods=["GET"], endpoint="reports")
    def reports():
        data = container.report_service.build_attendance_report()
        return jsonify({"students": data.students, "teachers": data.teachers})

    @app.route("/api/reports.csv", methods=["GET"], endpoint="reports_csv")
    def reports_csv():
        data = container.report_service.build_attendance_report()
        filename = f"attendance_report_{now_local().strftime('%Y%m%d')}.csv"
        return _write_report_csv(rows=data.rows, filename=filename)

    @app.route("/api/export", methods=["GET"], endpoint="export_data")
    def export_data():
        body = dump_snapshot(container.ledger.export_snapshot())
        filename = backup_filename(container.app_slug, now_local().date())
        return app.response_class(
            body.encode("utf-8"),
            mimetype="application/json",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/import", methods=["POST"], endpoint="import_data")
    def import_data():
        upload = request.files.get("file")
        raw = upload.read() if upload else request.get_data()
        if not raw:
            return json_error("No import file provided", 400)

        try:
            container.ledger.import_snapshot(raw)
        except ParseError as e:
            logger.warning("Import rejected: %s", e)
            return json_error(f"Error importing data: {e}", 400)
        except Exception as e:
            return json_unexpected(e, "importing data")

        return jsonify({"success": True, "message": "Data imported successfully!"})
