from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="api_login")
    def login():
        data = json_body()
        result = container.auth_service.login(data.get("email", ""), data.get("password", ""))
        return jsonify({"token": result.token, "email": result.email, "role": result.role.value})

    @app.route("/register", methods=["POST"], endpoint="api_register")
    def register_account():
        data = json_body()
        user_id = container.auth_service.register(
            email=data.get("email", ""),
            password=data.get("password", ""),
            role=data.get("role"),
        )
        return jsonify({"message": "User registered", "id": user_id}), 201
