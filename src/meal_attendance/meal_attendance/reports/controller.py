from __future__ import annotations

import io
from datetime import date

from flask import Flask, request, send_file

from ..common.http import json_errors
from ..container import Container

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    exports = container.history_export_service

    @app.route("/api/export-history", methods=["GET"], endpoint="export_history")
    @json_errors
    def export_history():
        today = date.today().strftime("%Y-%m-%d")
        start_s = request.args.get("startDate") or today
        end_s = request.args.get("endDate") or today

        content = exports.build_workbook(
            start_date=start_s,
            end_date=end_s,
            period=request.args.get("period"),
            search=request.args.get("search"),
        )
        return send_file(
            io.BytesIO(content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name="history-export.xlsx",
        )
