from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guards import Guards
from ..auth.model import Identity
from ..common.http import json_body
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.token_service)

    @app.route("/students", methods=["GET"], endpoint="api_list_students")
    @guards.token_required
    def list_students(current: Identity):
        return jsonify(container.student_service.list_students())

    @app.route("/students/<int:student_id>", methods=["GET"], endpoint="api_get_student")
    @guards.token_required
    def get_student(current: Identity, student_id: int):
        return jsonify(container.student_service.get_student(student_id))

    @app.route("/students", methods=["POST"], endpoint="api_create_student")
    @guards.roles_required(Role.ADMIN)
    def create_student(current: Identity):
        student = container.student_service.create_student(
            current_role=current.role,
            data=json_body(),
        )
        return jsonify(student), 201

    @app.route("/students/<int:student_id>", methods=["PUT"], endpoint="api_update_student")
    @guards.roles_required(Role.ADMIN)
    def update_student(current: Identity, student_id: int):
        container.student_service.update_student(
            current_role=current.role,
            student_id=student_id,
            data=json_body(),
        )
        return jsonify({"message": "Student updated"})

    @app.route("/students/<int:student_id>", methods=["DELETE"], endpoint="api_delete_student")
    @guards.roles_required(Role.ADMIN)
    def delete_student(current: Identity, student_id: int):
        container.student_service.delete_student(current_role=current.role, student_id=student_id)
        return jsonify({"message": "Deleted"})
