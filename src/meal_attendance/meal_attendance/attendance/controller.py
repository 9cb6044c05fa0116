from __future__ import annotations

from flask import Flask, jsonify, request

from ..badges.codec import decode_badge
from ..common.http import error_response, json_body, json_errors
from ..common.serialization import entry_to_dict, user_to_dict
from ..container import Container
from ..core.enums import RegistrationStatus
from .registrar import RegistrationOutcome

_STATUS_CODES = {
    RegistrationStatus.REGISTERED: 201,
    RegistrationStatus.USER_NOT_FOUND: 404,
    RegistrationStatus.OUTSIDE_WINDOW: 400,
    RegistrationStatus.DUPLICATE_FOR_PERIOD: 409,
}


def _outcome_response(outcome: RegistrationOutcome):
    return jsonify({
        "success": outcome.registered,
        "status": outcome.status.value,
        "message": outcome.message,
        "period": outcome.period.value if outcome.period else None,
        "user": user_to_dict(outcome.user) if outcome.user else None,
        "entry": entry_to_dict(outcome.entry) if outcome.entry else None,
    }), _STATUS_CODES[outcome.status]


def register(app: Flask, container: Container) -> None:
    ledger = container.attendance_ledger
    registrar = container.registrar

    @app.route("/api/add-history", methods=["POST"], endpoint="add_history")
    @json_errors
    def add_history():
        data = json_body()
        entry = ledger.append(
            full_name=data.get("fullName"),
            level=data.get("level"),
            served_at=data.get("date"),
            period=data.get("period"),
        )
        return jsonify({"newRecord": entry_to_dict(entry)}), 201

    @app.route("/api/get-history", methods=["POST"], endpoint="get_history")
    @json_errors
    def get_history():
        data = json_body()
        entries = ledger.query(
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            period=data.get("period"),
        )
        return jsonify({"history": [entry_to_dict(e) for e in entries]}), 200

    @app.route("/api/register-scan", methods=["POST"], endpoint="register_scan")
    @json_errors
    def register_scan():
        """Front desk: register a badge payload already decoded by the camera widget."""
        code = json_body().get("code")
        if code is None or not str(code).strip():
            return error_response("QR code is empty", 400)

        return _outcome_response(registrar.register(str(code).strip()))

    @app.route("/api/register-scan/image", methods=["POST"], endpoint="register_scan_image")
    @json_errors
    def register_scan_image():
        """Front desk: decode an uploaded photo of a badge, then register it."""
        if "image" not in request.files:
            return error_response("Missing image file", 400)

        code = decode_badge(request.files["image"].stream)
        if not code:
            return error_response("No QR code detected in the image.", 400)

        return _outcome_response(registrar.register(code))
