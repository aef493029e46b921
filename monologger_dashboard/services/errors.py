class DashboardDataUnavailable(Exception):
    """Raised when a fetch cycle cannot produce a view model."""


class TransportError(DashboardDataUnavailable):
    """A request failed or returned a non-success status."""


class DecodeError(DashboardDataUnavailable):
    """A response body does not have the expected structure."""
