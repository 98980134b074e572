"""TWSE daily trading report client.

The STOCK_DAY endpoint returns every trading day of the month containing the
requested date. Rows are positional: columns 3 to 6 hold open, high, low and
close, column 8 the share volume. The layout belongs to the provider and may
change without notice.
"""
import json
import math
from datetime import datetime
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

import httpx
from pydantic import ValidationError

from .config import settings
from .schemas import ProviderReport, StockInfo

DATE_FORMAT = "%Y%m%d"

OPEN_COLUMN = 3
HIGH_COLUMN = 4
LOW_COLUMN = 5
CLOSE_COLUMN = 6
VOLUME_COLUMN = 8

SHARES_PER_LOT = 1000
UNKNOWN_NAME = "N/A"


def resolve_trade_date(date: Optional[str] = None) -> str:
    """Return the YYYYMMDD date to query, defaulting to today in the market timezone.

    Raises ValueError when ``date`` is given but malformed.
    """
    if date is None:
        return datetime.now(ZoneInfo(settings.MARKET_TIMEZONE)).strftime(DATE_FORMAT)
    return datetime.strptime(date, DATE_FORMAT).strftime(DATE_FORMAT)


def build_report_url(code: str, trade_date: str) -> str:
    """Build the STOCK_DAY request URL for one stock and month."""
    url = httpx.URL(settings.stock_day_url, params={
        "response": "json",
        "date": trade_date,
        "stockNo": code,
    })
    return str(url)


async def fetch_daily_report(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """GET the report, raising httpx.HTTPStatusError on a non-success status."""
    response = await client.get(url, headers={"User-Agent": settings.USER_AGENT})
    response.raise_for_status()
    return response


def _reject_constant(token: str):
    raise ValueError(f"Non-standard JSON token: {token}")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        _reject_constant(token)
    return value


def read_body(response: httpx.Response) -> Any:
    """Decode the body as strict JSON, falling back to raw text.

    NaN and Infinity are not valid JSON and cannot be relayed, so bodies
    carrying them are kept as text.
    """
    try:
        return json.loads(response.content, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError:
        return response.text


def parse_report(body: Any) -> Optional[ProviderReport]:
    """Validate a provider body; None when it carries no usable rows."""
    if not isinstance(body, dict):
        return None
    try:
        report = ProviderReport.model_validate(body)
    except ValidationError:
        return None
    if report.stat != "OK" or not report.data:
        return None
    return report


def extract_name(title: Optional[str]) -> str:
    """Third space-separated token of the report title, e.g. "113年10月 2330 台積電"."""
    if not title:
        return UNKNOWN_NAME
    tokens = title.split(" ")
    if len(tokens) < 3:
        return UNKNOWN_NAME
    return tokens[2]


def shares_to_lots(raw: Any) -> Optional[Union[int, float]]:
    """Convert a raw share count such as "12,000,000" to round lots."""
    try:
        shares = float(str(raw).replace(",", ""))
    except ValueError:
        return None
    if not math.isfinite(shares):
        return None
    lots = shares / SHARES_PER_LOT
    return int(lots) if lots.is_integer() else lots


def to_stock_info(code: str, report: ProviderReport) -> StockInfo:
    """Map the latest row of a report to a StockInfo.

    Raises IndexError when the row is shorter than the expected layout.
    """
    latest = report.data[-1]
    return StockInfo(
        code=code,
        name=extract_name(report.title),
        open=latest[OPEN_COLUMN],
        high=latest[HIGH_COLUMN],
        low=latest[LOW_COLUMN],
        close=latest[CLOSE_COLUMN],
        volume=shares_to_lots(latest[VOLUME_COLUMN]),
    )
