from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guards import Guards
from ..auth.model import Identity
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.token_service)

    @app.route("/dashboard", methods=["GET"], endpoint="api_dashboard")
    @guards.token_required
    def dashboard(current: Identity):
        return jsonify(container.dashboard_service.summary_for(current))
