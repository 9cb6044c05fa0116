from __future__ import annotations

import io
from datetime import datetime

import pandas as pd

from src.meal_attendance.meal_attendance.core.constants import EXPORT_COLUMNS, EXPORT_SHEET_NAME


def seed(ledger):
    ledger.append(full_name="Jane Doe", level="2", served_at=datetime(2025, 1, 10, 12, 0), period="lunch")
    ledger.append(full_name="John Smith", level=None, served_at=datetime(2025, 1, 10, 12, 30), period="lunch")
    ledger.append(full_name="Janet Roe", level="1", served_at=datetime(2025, 1, 10, 19, 0), period="dinner")


def test_build_rows_filters_by_name(container):
    seed(container.attendance_ledger)

    rows = container.history_export_service.build_rows(start_date="2025-01-10", end_date="2025-01-10", search="JAN")

    assert [r["fullName"] for r in rows] == ["Janet Roe", "Jane Doe"]
    assert rows[1]["date"] == "2025-01-10T12:00:00.000"


def test_workbook_has_expected_sheet_and_columns(container):
    seed(container.attendance_ledger)

    content = container.history_export_service.build_workbook(
        start_date="2025-01-10", end_date="2025-01-10", period="lunch"
    )

    df = pd.read_excel(io.BytesIO(content), sheet_name=EXPORT_SHEET_NAME, dtype=str, engine="openpyxl")
    assert list(df.columns) == EXPORT_COLUMNS
    assert list(df["fullName"]) == ["John Smith", "Jane Doe"]


def test_empty_workbook_keeps_header(container):
    content = container.history_export_service.build_workbook(start_date="2025-01-10", end_date="2025-01-10")

    df = pd.read_excel(io.BytesIO(content), engine="openpyxl")
    assert list(df.columns) == EXPORT_COLUMNS
    assert df.empty
