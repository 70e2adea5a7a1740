from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..container import Container
from ..core.enums import PunchType
from ..core.exceptions import ValidationError
from .daybook import DayResult
from .model import Punch


def _punch_json(p: Punch) -> dict:
    return {
        "punch_id": p.punch_id,
        "employee_id": p.employee_id,
        "type": p.punch_type.value,
        "timestamp": p.timestamp,
        "status": p.status.value if p.status else None,
        "shift_id": p.shift_id,
        "remarks": p.remarks,
    }


def _day_json(d: DayResult) -> dict:
    return {
        "date": d.work_date.isoformat(),
        "mark": d.mark.value,
        "outcome": d.outcome.value if d.outcome else None,
        "shift": d.shift.label if d.shift else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/punches", methods=["POST"], endpoint="api_record_punch")
    def record_punch():
        body = request.get_json(silent=True) or {}
        try:
            punch_type = PunchType(body.get("type"))
        except ValueError:
            raise ValidationError(f"type must be one of {[t.value for t in PunchType]}")

        now_ms = body.get("timestamp")
        if now_ms is not None:
            try:
                now_ms = int(now_ms)
            except (TypeError, ValueError):
                raise ValidationError("timestamp must be epoch milliseconds")

        punch = container.attendance_service.record_punch(
            str(body.get("employee_id") or ""),
            punch_type,
            now_ms=now_ms,
            remarks=body.get("remarks"),
        )
        return jsonify(_punch_json(punch)), 201

    @app.route("/api/attendance/<employee_id>/calendar", methods=["GET"], endpoint="api_attendance_calendar")
    def attendance_calendar(employee_id: str):
        today = now_local()
        month = request.args.get("month", default=today.month, type=int)
        year = request.args.get("year", default=today.year, type=int)

        days = container.attendance_service.month_calendar(employee_id, month=month, year=year)
        return jsonify({"employee_id": employee_id, "month": month, "year": year, "days": [_day_json(d) for d in days]})

    @app.route("/api/team/<manager_id>/status", methods=["GET"], endpoint="api_team_status")
    def team_status(manager_id: str):
        members = container.attendance_service.team_status(manager_id)
        return jsonify(
            [
                {
                    "employee_id": m.employee_id,
                    "name": m.name,
                    "status": m.status.value,
                    "shift": m.shift,
                    "punch_in": m.punch_in,
                    "punch_out": m.punch_out,
                }
                for m in members
            ]
        )
