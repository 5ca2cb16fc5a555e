from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import Guards
from ..auth.model import Identity
from ..common.http import json_body
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.token_service)

    @app.route("/assignments", methods=["POST"], endpoint="api_create_assignment")
    @guards.roles_required(Role.FACULTY, Role.ADMIN)
    def create_assignment(current: Identity):
        assignment = container.assignment_service.create_assignment(
            current=current,
            data=json_body(),
        )
        return jsonify(assignment), 201

    @app.route("/assignments", methods=["GET"], endpoint="api_list_all_assignments")
    @guards.token_required
    def list_all_assignments(current: Identity):
        rows = container.assignment_service.list_assignments(current=current, class_id=request.args.get("class_id"))
        return jsonify(rows)

    @app.route("/assignments/<int:class_id>", methods=["GET"], endpoint="api_list_assignments")
    @guards.token_required
    def list_assignments(current: Identity, class_id: int):
        return jsonify(container.assignment_service.list_for_class(class_id))

    @app.route("/submissions", methods=["POST"], endpoint="api_submit")
    @guards.roles_required(Role.STUDENT)
    def submit(current: Identity):
        submission = container.assignment_service.submit(current=current, data=json_body())
        return jsonify(submission), 201

    @app.route("/submissions", methods=["GET"], endpoint="api_list_submissions")
    @guards.token_required
    def list_submissions(current: Identity):
        rows = container.assignment_service.list_submissions(
            current=current,
            assignment_id=request.args.get("assignment_id"),
        )
        return jsonify(rows)

    @app.route("/submissions/<int:submission_id>/grade", methods=["PUT"], endpoint="api_grade_submission")
    @guards.roles_required(Role.FACULTY, Role.ADMIN)
    def grade_submission(current: Identity, submission_id: int):
        container.assignment_service.grade(
            current=current,
            submission_id=submission_id,
            data=json_body(),
        )
        return jsonify({"message": "Graded"})
