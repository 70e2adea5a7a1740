from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/run", methods=["POST"], endpoint="api_payroll_run")
    def run_payroll():
        body = request.get_json(silent=True) or {}
        try:
            month = int(body.get("month"))
            year = int(body.get("year"))
        except (TypeError, ValueError):
            raise ValidationError("month and year are required integers")

        batch = container.payroll_service.run_month(
            month=month,
            year=year,
            force=bool(body.get("force", False)),
            generated_by=body.get("generated_by"),
        )
        return jsonify(
            {
                "run_id": batch.run_id,
                "month": batch.month,
                "records": [r.to_dict() for r in batch.records],
                "failures": [{"employee_id": f.employee_id, "reason": f.reason} for f in batch.failures],
            }
        ), 201

    @app.route("/api/payroll/<employee_id>", methods=["GET"], endpoint="api_payroll_history")
    def payroll_history(employee_id: str):
        return jsonify([r.to_dict() for r in container.payroll_service.history(employee_id)])

    @app.route("/api/payroll/<employee_id>/<record_id>/payslip", methods=["GET"], endpoint="api_payslip")
    def payslip(employee_id: str, record_id: str):
        text = container.payroll_service.payslip(employee_id=employee_id, record_id=record_id)
        return Response(text, mimetype="text/plain")
