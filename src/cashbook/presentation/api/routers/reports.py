"""Reports router: aggregated figures and CSV download (admin only)."""

from fastapi import APIRouter, Response

from cashbook.application.queries import ListMovementsQuery, ReportQuery
from cashbook.domain.shared.time import today_utc
from cashbook.infrastructure.export import CSV_MEDIA_TYPE, csv_filename, to_csv
from cashbook.presentation.api.dependencies import AdminSession, RepoFactory
from cashbook.presentation.api.schemas import ReportResponse

router = APIRouter()


@router.get("", summary="Financial report")
async def get_report(_admin: AdminSession, factory: RepoFactory) -> ReportResponse:
    """Balance, income and expense totals, and a per-month breakdown."""
    report = await ReportQuery.from_factory(factory).execute()
    return ReportResponse.from_report(report)


@router.get(
    "/csv",
    summary="Download movements as CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
async def download_csv(_admin: AdminSession, factory: RepoFactory) -> Response:
    movements = await ListMovementsQuery.from_factory(factory).all()
    filename = csv_filename(today_utc())
    return Response(
        content=to_csv(movements),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
