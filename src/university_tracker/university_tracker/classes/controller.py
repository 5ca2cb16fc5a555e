from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import Guards
from ..auth.model import Identity
from ..common.http import json_body
from ..common.validators import require_positive_int
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.token_service)

    @app.route("/classes", methods=["GET"], endpoint="api_list_classes")
    @guards.token_required
    def list_classes(current: Identity):
        return jsonify(container.class_service.list_classes())

    @app.route("/classes", methods=["POST"], endpoint="api_create_class")
    @guards.roles_required(Role.FACULTY, Role.ADMIN)
    def create_class(current: Identity):
        klass = container.class_service.create_class(current=current, data=json_body())
        return jsonify(klass), 201

    @app.route("/lectures", methods=["POST"], endpoint="api_create_lecture")
    @guards.roles_required(Role.FACULTY, Role.ADMIN)
    def create_lecture(current: Identity):
        lecture = container.class_service.create_lecture(current=current, data=json_body())
        return jsonify(lecture), 201

    @app.route("/lectures/<int:class_id>", methods=["GET"], endpoint="api_list_lectures")
    @guards.token_required
    def list_lectures(current: Identity, class_id: int):
        return jsonify(container.class_service.list_lectures(class_id))

    @app.route("/lectures", methods=["GET"], endpoint="api_list_lectures_by_query")
    @guards.token_required
    def list_lectures_by_query(current: Identity):
        class_id = require_positive_int(request.args.get("class_id"), "class_id")
        return jsonify(container.class_service.list_lectures(class_id))
