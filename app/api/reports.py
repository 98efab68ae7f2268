"""
app/api/reports.py

Purpose: Report endpoints

- JSON report for the reports page
- CSV download of the same rows
"""

from fastapi import APIRouter, Depends, Query, Response

from app.db.memory import MemStorage, get_storage
from app.schemas.report import Report
from app.services.report_service import build_report, export_report_csv, report_filename
from utils.time_utils import utcnow

router = APIRouter(prefix="/reports")


def _build(report_type: str, date_range: str, storage: MemStorage) -> Report:
    return build_report(
        report_type,
        date_range,
        clients=storage.get_all_clients(),
        payments=storage.get_all_payments(),
        now=utcnow(),
    )


@router.get("/{report_type}", response_model=Report)
async def get_report(
    report_type: str,
    date_range: str = Query("current_month", alias="range"),
    storage: MemStorage = Depends(get_storage),
):
    """
    revenue | outstanding | clients | services.
    The range applies to the revenue report only.
    """
    return _build(report_type, date_range, storage)


@router.get("/{report_type}/export")
async def export_report(
    report_type: str,
    date_range: str = Query("current_month", alias="range"),
    storage: MemStorage = Depends(get_storage),
):
    report = _build(report_type, date_range, storage)
    return Response(
        content=export_report_csv(report),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{report_filename(report)}"'},
    )
