class EthcalError(Exception):
    """Base error."""

class OutOfRangeError(EthcalError, ValueError):
    """Raised when a month or weekday index falls outside its calendar's table."""

class InvalidDateError(EthcalError, ValueError):
    """Raised when a (year, month, day) triple or a JDN does not name a real day."""
