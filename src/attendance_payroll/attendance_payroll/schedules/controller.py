from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules", methods=["POST"], endpoint="api_assign_shift")
    def assign_shift():
        body = request.get_json(silent=True) or {}
        try:
            work_date = parse_iso_date(str(body.get("work_date") or ""))
        except ValueError:
            raise ValidationError("work_date must be YYYY-MM-DD")

        assignment_id = container.schedule_service.assign(
            employee_id=str(body.get("employee_id") or ""),
            work_date=work_date,
            shift_id=str(body.get("shift_id") or ""),
        )
        return jsonify({"assignment_id": assignment_id}), 201
