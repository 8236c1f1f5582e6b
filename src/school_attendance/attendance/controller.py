from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_error, json_unexpected, request_payload, role_from_path
from ..core.enums import Role, Tab
from ..core.exceptions import ValidationError
from ..container import Container
from ..people.codec import person_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        try:
            return jsonify(container.dashboard_service.build_dashboard(request.args.get("date")))
        except ValidationError as e:
            return json_error(str(e), 400)

    @app.route(
        "/api/<any(students, teachers):role>/<int:person_id>/attendance",
        methods=["POST"],
        endpoint="mark_attendance",
    )
    def mark_attendance(role: str, person_id: int):
        r = role_from_path(role)
        data = request_payload()
        if data is None:
            return json_error("Request body must be a JSON object", 400)

        try:
            marked = container.dashboard_service.mark(
                r,
                person_id,
                status=data.get("status", ""),
                day=data.get("date") or None,
            )
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception as e:
            return json_unexpected(e, "marking attendance")

        if not marked:
            return json_error("Person not found", 404)
        return jsonify({"success": True, "person": person_to_dict(container.ledger.get_person(r, person_id))})

    @app.route("/api/tabs/<tab>", methods=["GET"], endpoint="tab_view")
    def tab_view(tab: str):
        try:
            t = Tab(tab)
        except ValueError:
            return json_error(f"Unknown tab: {tab}", 404)

        if t == Tab.DASHBOARD:
            body = container.dashboard_service.build_dashboard()
        elif t == Tab.REPORTS:
            report = container.report_service.build_attendance_report()
            body = {"students": report.students, "teachers": report.teachers}
        else:
            r = Role.STUDENT if t == Tab.STUDENTS else Role.TEACHER
            body = {r.value: [person_to_dict(p) for p in container.ledger.list_people(r)]}

        return jsonify({"tab": t.value, **body})
