from __future__ import annotations

import io
from typing import Any, Optional, Sequence

import pandas as pd

from ..attendance.model import AttendanceEntry
from ..attendance.service import AttendanceLedger
from ..common.serialization import entry_to_dict
from ..core.constants import EXPORT_COLUMNS, EXPORT_SHEET_NAME


def filter_by_name(entries: Sequence[AttendanceEntry], search: Optional[str]) -> list[AttendanceEntry]:
    """Case-insensitive substring match on the snapshotted name."""
    needle = (search or "").strip().lower()
    if not needle:
        return list(entries)
    return [e for e in entries if needle in e.full_name.lower()]


class HistoryExportService:
    """Spreadsheet export of the meal history shown on the front desk."""

    def __init__(self, ledger: AttendanceLedger):
        self._ledger = ledger

    def build_rows(self, *, start_date: Any, end_date: Any, period: Any = None, search: Optional[str] = None) -> list[dict]:
        entries = self._ledger.query(start_date=start_date, end_date=end_date, period=period)
        return [entry_to_dict(e) for e in filter_by_name(entries, search)]

    def build_workbook(self, *, start_date: Any, end_date: Any, period: Any = None, search: Optional[str] = None) -> bytes:
        rows = self.build_rows(start_date=start_date, end_date=end_date, period=period, search=search)
        df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=EXPORT_SHEET_NAME, index=False)
        return out.getvalue()
