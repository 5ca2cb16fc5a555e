from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guards import Guards
from ..auth.model import Identity
from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.token_service)

    @app.route("/comments", methods=["POST"], endpoint="api_post_comment")
    @guards.token_required
    def post_comment(current: Identity):
        comment = container.comment_service.post(current=current, data=json_body())
        return jsonify({"id": comment.id, "title": comment.title, "body": comment.body}), 201

    @app.route("/comments", methods=["GET"], endpoint="api_list_comments")
    @guards.token_required
    def list_comments(current: Identity):
        return jsonify(container.comment_service.list_recent())
