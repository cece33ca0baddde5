"""
Monte Carlo estimate of the site percolation threshold of an n-by-n grid.

Each trial opens uniformly random sites of a fresh grid until it percolates
and records the fraction of open sites. The thresholds of all trials give the
mean, the sample standard deviation and a 95% confidence interval.

Usage:
    python -m percolation_threshold.percolation_stats 200 100
"""
import argparse
import logging
import math

import numpy as np

from percolation_threshold.config import CONFIDENCE_Z_95, PROGRESS_LOG_INTERVAL
from percolation_threshold.exceptions import InvalidArgumentError, TrialTimeoutError
from percolation_threshold.percolation import Percolation
from percolation_threshold.union_find import is_integer, require_positive_int

logger = logging.getLogger(__name__)


def seed_sequence(seed):
    """
    Returns ``seed`` as a ``numpy.random.SeedSequence``.

    Accepts None (fresh OS entropy), a non-negative integer or an existing
    SeedSequence; anything else raises InvalidArgumentError.
    """
    if isinstance(seed, np.random.SeedSequence):
        return seed
    if seed is not None and not (is_integer(seed) and seed >= 0):
        raise InvalidArgumentError(f"seed must be a non-negative integer, got {seed!r}")
    return np.random.SeedSequence(None if seed is None else int(seed))


def run_trial(n: int, rng, max_attempts=None) -> float:
    """
    Runs a single trial on a fresh n-by-n grid and returns its threshold.

    :param n: Grid size.
    :param rng: Random source with an ``integers(low, high)`` method
        (high exclusive), e.g. a ``numpy.random.Generator``.
    :param max_attempts: Optional cap on the number of random draws.
    :raises TrialTimeoutError: If the cap is reached before the grid percolates.
    """
    simulator = Percolation(n)
    attempts = 0
    while not simulator.percolates():
        if max_attempts is not None and attempts >= max_attempts:
            raise TrialTimeoutError(
                f"grid of size {n} did not percolate within {max_attempts} draws "
                f"({simulator.numberOfOpenSites()} sites open)"
            )
        row = int(rng.integers(1, n + 1))
        col = int(rng.integers(1, n + 1))
        simulator.open_site(row, col)
        attempts += 1

    return simulator.open_fraction()


class PercolationStats:
    """
    Runs ``trials`` independent percolation experiments on n-by-n grids.

    Every trial gets its own random stream, spawned from ``seed`` with
    ``numpy.random.SeedSequence`` and turned into a source by ``rng_factory``.
    Trials share no grid and no random state.

    ``stddev()`` is the sample standard deviation. With a single trial it is
    undefined and returned as ``nan``; the confidence bounds are ``nan`` too.
    """

    def __init__(self, n: int, trials: int, seed=None, rng_factory=np.random.default_rng,
                 max_attempts=None):
        self.gridSize = require_positive_int(n, "n")
        self.trialCount = require_positive_int(trials, "trials")
        if max_attempts is not None:
            max_attempts = require_positive_int(max_attempts, "max_attempts")

        self._mean = None
        self._stddev = None

        streams = seed_sequence(seed).spawn(self.trialCount)
        results = np.empty(self.trialCount, dtype=np.float64)

        logger.debug(f"Running {self.trialCount} trials on a {self.gridSize}x{self.gridSize} grid")
        for i, stream in enumerate(streams):
            results[i] = run_trial(self.gridSize, rng_factory(stream), max_attempts)
            if (i + 1) % PROGRESS_LOG_INTERVAL == 0:
                logger.debug(f"  Progress: {i + 1}/{self.trialCount} trials")

        results.flags.writeable = False
        self.trialResults = results

    @property
    def size(self) -> int:
        return self.gridSize

    @property
    def trials(self) -> int:
        return self.trialCount

    @property
    def thresholds(self) -> np.ndarray:
        return self.trialResults

    def mean(self) -> float:
        if self._mean is None:
            self._mean = float(np.mean(self.trialResults))
        return self._mean

    def stddev(self) -> float:
        if self._stddev is None:
            if self.trialCount == 1:
                self._stddev = math.nan
            else:
                self._stddev = float(np.std(self.trialResults, ddof=1))
        return self._stddev

    def _half_width(self) -> float:
        return CONFIDENCE_Z_95 * self.stddev() / math.sqrt(self.trialCount)

    def confidenceLo(self) -> float:
        return self.mean() - self._half_width()

    def confidenceHi(self) -> float:
        return self.mean() + self._half_width()

    def report(self):
        print(f"mean                    = {self.mean():f}")
        print(f"stddev                  = {self.stddev():f}")
        print(f"95% confidence interval = [{self.confidenceLo():f}, {self.confidenceHi():f}]")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Estimate the site percolation threshold of an n-by-n grid by Monte Carlo simulation."
    )
    parser.add_argument('n', type=int, help="Size of the square grid (n x n).")
    parser.add_argument('trials', type=int, help="The number of Monte Carlo trials to perform.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for reproducible runs.")
    parser.add_argument(
        '--max-attempts',
        type=int,
        default=None,
        help="Give up on a trial after this many random draws."
    )
    parser.add_argument('-v', '--verbose', action='store_true', help="Log trial progress.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        stats = PercolationStats(args.n, args.trials, seed=args.seed, max_attempts=args.max_attempts)
    except InvalidArgumentError as e:
        parser.error(str(e))
    except TrialTimeoutError as e:
        logger.error(str(e))
        return 1

    stats.report()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
