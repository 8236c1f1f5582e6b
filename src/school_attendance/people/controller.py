from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_error, json_unexpected, request_payload, role_from_path
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container
from .codec import person_to_dict

ROLE_PATH = "<any(students, teachers):role>"

# Form field names per roster, matching the wire keys.
_FIELDS = {
    Role.STUDENT: ("class", "rollNumber"),
    Role.TEACHER: ("subject", "contact"),
}


def register(app: Flask, container: Container) -> None:
    @app.route(f"/api/{ROLE_PATH}", methods=["GET"], endpoint="list_people")
    def list_people(role: str):
        r = role_from_path(role)
        return jsonify([person_to_dict(p) for p in container.ledger.list_people(r)])

    @app.route(f"/api/{ROLE_PATH}/<int:person_id>", methods=["GET"], endpoint="get_person")
    def get_person(role: str, person_id: int):
        person = container.ledger.get_person(role_from_path(role), person_id)
        if not person:
            return json_error("Person not found", 404)
        return jsonify(person_to_dict(person))

    @app.route(f"/api/{ROLE_PATH}", methods=["POST"], endpoint="add_person")
    def add_person(role: str):
        r = role_from_path(role)
        data = request_payload()
        if data is None:
            return json_error("Request body must be a JSON object", 400)
        key1, key2 = _FIELDS[r]

        try:
            person = container.ledger.add_person(
                r,
                data.get("name", ""),
                data.get(key1, ""),
                data.get(key2, ""),
            )
            return jsonify({"success": True, "person": person_to_dict(person)}), 201
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception as e:
            return json_unexpected(e, f"adding to {r.value}")

    @app.route(f"/api/{ROLE_PATH}/<int:person_id>", methods=["DELETE"], endpoint="remove_person")
    def remove_person(role: str, person_id: int):
        r = role_from_path(role)
        try:
            removed = container.ledger.remove_person(r, person_id)
        except Exception as e:
            return json_unexpected(e, f"removing from {r.value}")

        if not removed:
            return json_error("Person not found", 404)
        return jsonify({"success": True})
