"""Stock lookup handler."""
from typing import Optional

import httpx

from .logger import logger
from .provider import (
    build_report_url,
    fetch_daily_report,
    parse_report,
    read_body,
    resolve_trade_date,
    to_stock_info,
)
from .schemas import (
    DataNotFound,
    InternalError,
    LookupResult,
    LookupSuccess,
    UpstreamError,
    UpstreamUnreachable,
)


async def handle_get_stock(
    code: str,
    client: httpx.AsyncClient,
    trade_date: Optional[str] = None
) -> LookupResult:
    """Fetch the latest daily record for a stock code."""
    try:
        url = build_report_url(code, trade_date or resolve_trade_date())
        logger.info(f"[STOCK] Fetching data for {code} from {url}")
        response = await fetch_daily_report(client, url)

        body = read_body(response)
        report = parse_report(body)
        if report is None:
            logger.warning(f"[STOCK] Failed to parse data or no data found: {body}")
            return DataNotFound(details=body)

        stock = to_stock_info(code, report)
        logger.info(f"[STOCK] Data fetched successfully: {stock.model_dump()}")
        return LookupSuccess(stock=stock)

    except httpx.HTTPStatusError as e:
        details = read_body(e.response)
        logger.error(f"[STOCK] Error status: {e.response.status_code}")
        logger.error(f"[STOCK] Error data: {details}")
        return UpstreamError(status_code=e.response.status_code, details=details)
    except (httpx.UnsupportedProtocol, httpx.ProxyError) as e:
        logger.error(f"[STOCK] Request could not be sent: {e!r}")
        return InternalError(message=str(e))
    except httpx.TransportError as e:
        logger.error(f"[STOCK] No response received: {e!r}")
        return UpstreamUnreachable()
    except Exception as e:
        logger.error(f"[STOCK] Error fetching stock data: {str(e)}")
        return InternalError(message=str(e))
