"""
Exceptions raised by the percolation modules.

All of them are programmer or input errors: nothing here is retried, and a
grid that rejected a call is left exactly as it was.
"""


class PercolationError(Exception):
    """Base exception for all percolation errors."""
    pass


class InvalidArgumentError(PercolationError, ValueError):
    """Raised when a grid size, trial count or fit input is not acceptable."""
    pass


class OutOfRangeError(PercolationError, IndexError):
    """Raised when a site or element index lies outside the structure."""
    pass


class TrialTimeoutError(PercolationError, RuntimeError):
    """Raised when a trial exceeds its cap on random draws without percolating."""
    pass
