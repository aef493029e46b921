from .errors import DashboardDataUnavailable, TransportError, DecodeError
from .fetcher import DashboardFetcher, RawDashboardData
from .builder import build_view_model
from .formatting import DateFormatter, format_display_date, get_date_formatter
from .dashboard import DashboardController

__all__ = [
    "DashboardDataUnavailable",
    "TransportError",
    "DecodeError",
    "DashboardFetcher",
    "RawDashboardData",
    "build_view_model",
    "DateFormatter",
    "format_display_date",
    "get_date_formatter",
    "DashboardController",
]
