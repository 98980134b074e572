"""Pydantic schemas for provider payloads and API responses."""
from pydantic import BaseModel
from typing import Optional, Any, List, Union


# --- Provider Schemas ---
class ProviderReport(BaseModel):
    """Daily trading report as returned by TWSE STOCK_DAY."""
    stat: str
    title: Optional[str] = None
    data: List[List[Any]] = []


# --- Response Schemas ---
class StockInfo(BaseModel):
    code: str
    name: str
    open: Any
    high: Any
    low: Any
    close: Any
    volume: Optional[Union[int, float]] = None


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None


# --- Lookup Results ---
class LookupSuccess(BaseModel):
    stock: StockInfo


class DataNotFound(BaseModel):
    """Provider answered but without a usable report."""
    details: Any = None


class UpstreamError(BaseModel):
    """Provider answered with a non-success HTTP status."""
    status_code: int
    details: Any = None


class UpstreamUnreachable(BaseModel):
    """Request was sent but no response came back."""


class InternalError(BaseModel):
    message: str


LookupResult = Union[LookupSuccess, DataNotFound, UpstreamError, UpstreamUnreachable, InternalError]
