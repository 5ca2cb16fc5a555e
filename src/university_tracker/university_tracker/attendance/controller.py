from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import Guards
from ..auth.model import Identity
from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.token_service)

    @app.route("/attendance", methods=["POST"], endpoint="api_mark_attendance")
    @guards.token_required
    def mark_attendance(current: Identity):
        data = json_body()
        container.attendance_service.mark(student_id=data.get("student_id"), status=data.get("status"))
        return jsonify({"message": "Attendance recorded"}), 201

    @app.route("/attendance/stats", methods=["GET"], endpoint="api_attendance_stats")
    @guards.token_required
    def attendance_stats(current: Identity):
        return jsonify(container.attendance_service.stats().to_dict())

    @app.route("/attendance/trends", methods=["GET"], endpoint="api_attendance_trends")
    @guards.token_required
    def attendance_trends(current: Identity):
        return jsonify(container.attendance_service.trends(request.args.get("days")))

    @app.route("/attendance/<int:student_id>", methods=["GET"], endpoint="api_attendance_history")
    @guards.token_required
    def attendance_history(current: Identity, student_id: int):
        rows = container.attendance_service.history(student_id)
        return jsonify([{"date": r.date, "status": r.status.value} for r in rows])
