"""Custom exceptions for GOT Tracker."""


class GotTrackerError(Exception):
    """Base exception for all application errors."""

    pass


class ParsingError(GotTrackerError, ValueError):
    """Raised when a GPX file cannot be read or parsed.

    Attributes:
        source: Name of the file (or other input) that failed.
        details: Detailed error message.
    """

    def __init__(self, source: str, details: str):
        """Initializes ParsingError.

        Args:
            source: Name of the file (or other input) that failed.
            details: Detailed error message.
        """
        self.source = source
        self.details = details
        super().__init__(f"Failed to parse '{source}': {details}")


class MissingTimestampError(GotTrackerError, ValueError):
    """Raised when day bucketing meets a point without a timestamp.

    Attributes:
        index: Position of the offending point in its sequence.
    """

    def __init__(self, index: int):
        """Initializes MissingTimestampError.

        Args:
            index: Position of the offending point in its sequence.
        """
        self.index = index
        super().__init__(f"Track point #{index} has no timestamp; cannot assign it to a day")
