from percolation_threshold.exceptions import (
    InvalidArgumentError,
    OutOfRangeError,
    PercolationError,
    TrialTimeoutError,
)
from percolation_threshold.percolation import Percolation
from percolation_threshold.percolation_stats import PercolationStats
from percolation_threshold.union_find import WeightedQuickUnionUF

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "OutOfRangeError",
    "Percolation",
    "PercolationError",
    "PercolationStats",
    "TrialTimeoutError",
    "WeightedQuickUnionUF",
]
