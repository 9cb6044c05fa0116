from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body, json_errors
from ..common.serialization import user_to_dict
from ..container import Container
from .service import UPDATABLE_FIELDS


def _has_value(value) -> bool:
    return value is not None and str(value).strip() != ""


def register(app: Flask, container: Container) -> None:
    directory = container.user_directory

    @app.route("/api/add-user", methods=["POST"], endpoint="add_user")
    @json_errors
    def add_user():
        data = json_body()
        user = directory.create(
            full_name=data.get("fullName"),
            position=data.get("position"),
            department=data.get("department"),
            level=data.get("level"),
        )
        return jsonify({"user": user_to_dict(user)}), 201

    @app.route("/api/get-user", methods=["POST"], endpoint="get_user")
    @json_errors
    def get_user():
        badge_id = json_body().get("id")
        if not _has_value(badge_id):
            return error_response("Missing ID", 400)

        return jsonify(user_to_dict(directory.get(badge_id))), 200

    @app.route("/api/get-all-users", methods=["GET"], endpoint="get_all_users")
    @json_errors
    def get_all_users():
        users = directory.find_all()
        # An empty roster is reported as 404, which the admin page relies on.
        if not users:
            return error_response("No users found", 404)
        return jsonify([user_to_dict(u) for u in users]), 200

    @app.route("/api/update-user", methods=["PUT"], endpoint="update_user")
    @json_errors
    def update_user():
        data = json_body()
        badge_id = data.get("id")
        if not _has_value(badge_id):
            return error_response("User ID is required.", 400)
        if not _has_value(data.get("fullName")):
            return error_response("Full name is required.", 400)

        # The admin form historically posts "departement".
        if "department" not in data and "departement" in data:
            data["department"] = data["departement"]
        changes = {name: data[name] for name in UPDATABLE_FIELDS if name in data}

        user = directory.update(badge_id, full_name=data.get("fullName"), **changes)
        return jsonify(user_to_dict(user)), 200

    @app.route("/api/delete-user", methods=["DELETE"], endpoint="delete_user")
    @json_errors
    def delete_user():
        badge_id = request.args.get("id")
        if not _has_value(badge_id):
            return error_response("User ID is required.", 400)

        directory.delete(badge_id)
        return jsonify({"success": True}), 200
