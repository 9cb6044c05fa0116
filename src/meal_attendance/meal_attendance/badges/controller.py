from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.http import json_errors
from ..container import Container
from .codec import encode_badge


def register(app: Flask, container: Container) -> None:
    directory = container.user_directory

    @app.route("/api/users/<badge_id>/badge.png", methods=["GET"], endpoint="user_badge_image")
    @json_errors
    def user_badge_image(badge_id: str):
        """Printable QR badge carrying the user's ID."""
        user = directory.get(badge_id)
        return send_file(
            io.BytesIO(encode_badge(user.user_id)),
            mimetype="image/png",
            download_name=f"badge-{user.user_id}.png",
        )
