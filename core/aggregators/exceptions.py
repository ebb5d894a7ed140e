"""
Aggregator exceptions.

Custom exceptions used throughout the aggregator system for error handling
and aggregation flow control.
"""


class AggregatorError(Exception):
    """Base exception for all aggregator errors."""

    pass


class ContentFetchError(AggregatorError):
    """
    Exception raised when fetching a source page fails.

    Attributes:
        message: Error description
        url: URL that could not be fetched
        original_error: Original exception that caused this error
    """

    def __init__(self, message: str, url: str = "", original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.url = url
        self.original_error = original_error


class ParseError(AggregatorError):
    """Exception raised when parsing fails."""

    pass


class UnrecognizedPayloadError(ParseError):
    """
    Exception raised when a page's embedded data matches no known shape.

    This aborts the aggregation run for the source.
    """

    def __init__(self, url: str):
        super().__init__(f"Unrecognized page data at {url}")
        self.url = url


class ValidationError(AggregatorError):
    """Exception raised when validation fails."""

    pass
