"""
Service-level exceptions.

This module contains exceptions that can be raised by the services and the
cycle store, and that the API handler maps to HTTP status codes.
"""

class CycleTrackerError(Exception):
    """Base exception for cycle tracker errors."""
    pass

class RequestValidationError(CycleTrackerError):
    """Raised when a request body is missing fields or fails schema checks."""

    def __init__(self, error: str, details: str):
        super().__init__(details)
        self.error = error
        self.details = details

class StatisticsError(CycleTrackerError):
    """Base exception for statistics and prediction calculation errors."""
    pass

class MalformedCycleDataError(StatisticsError):
    """Raised when a cycle record carries a non-date start or non-numeric duration."""
    pass

class CycleStoreError(CycleTrackerError):
    """Raised when the cycle store cannot be read or written."""
    pass

class CycleDataError(CycleStoreError):
    """Raised when a stored cycle item cannot be turned back into a record."""
    pass
