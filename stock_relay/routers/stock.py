"""Stock API endpoints."""
from typing import AsyncIterator, Optional

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..config import settings
from ..handlers import handle_get_stock
from ..logger import logger
from ..provider import resolve_trade_date
from ..schemas import (
    DataNotFound,
    ErrorResponse,
    LookupResult,
    LookupSuccess,
    StockInfo,
    UpstreamError,
    UpstreamUnreachable,
)

router = APIRouter(prefix="/api", tags=["Stock"])


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per request, closed after the handler returns."""
    async with httpx.AsyncClient(follow_redirects=True, timeout=settings.REQUEST_TIMEOUT) as client:
        yield client


_NO_DETAILS = object()


def error_response(status_code: int, error: str, details=_NO_DETAILS) -> JSONResponse:
    body = {"error": error}
    if details is not _NO_DETAILS:
        body["details"] = details
    return JSONResponse(body, status_code=status_code)


def render_result(result: LookupResult) -> JSONResponse:
    """Map a lookup result to its HTTP response."""
    if isinstance(result, LookupSuccess):
        return JSONResponse(result.stock.model_dump())
    if isinstance(result, DataNotFound):
        return error_response(404, "Could not find or parse stock data", result.details)
    if isinstance(result, UpstreamError):
        return error_response(result.status_code, "Error from external source", result.details)
    if isinstance(result, UpstreamUnreachable):
        return error_response(504, "No response received from external source")
    return error_response(500, "Internal server error while fetching data", result.message)


ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 404, 500, 504)
}


@router.get("/stock", response_model=StockInfo, responses=ERROR_RESPONSES)
async def get_stock_api(
    code: Optional[str] = None,
    date: Optional[str] = None,
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """Latest daily quote for a stock, e.g. GET /api/stock?code=2330.

    Without ``date`` the current month is queried, so a request made before
    the month's first trading day gets a 404.
    """
    if not code:
        return error_response(400, "Stock code is required")

    try:
        trade_date = resolve_trade_date(date)
    except ValueError:
        logger.warning(f"[STOCK] Rejected malformed date: {date}")
        return error_response(400, "Invalid date, expected YYYYMMDD")

    result = await handle_get_stock(code, client, trade_date)
    return render_result(result)
