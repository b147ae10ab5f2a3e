class SalesReportError(ValueError):
    """Base class for fatal report errors. No partial report is produced."""


class InvalidInput(SalesReportError):
    """Sales data is missing, malformed, or one of its collections is empty."""


class MissingStrategy(SalesReportError):
    """The revenue or the bonus calculation function was not supplied."""
