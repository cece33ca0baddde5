"""
Finite-size scaling for the square-lattice site percolation threshold.

Runs ``PercolationStats`` over a range of grid sizes L and extrapolates the
mean threshold to L -> infinity by a straight-line fit of pc(L) against
L^exponent (exponent = -1/nu = -3/4 in two dimensions). The intercept is the
estimate of pc(infinity).
"""
import argparse
import logging
from dataclasses import dataclass

import numpy as np
from scipy.stats import linregress

from percolation_threshold.config import (
    FINITE_SIZE_EXPONENT,
    SQUARE_SITE_PC,
    SWEEP_L_MAX,
    SWEEP_L_MIN,
    SWEEP_L_STEP,
    SWEEP_TRIALS,
)
from percolation_threshold.exceptions import InvalidArgumentError, TrialTimeoutError
from percolation_threshold.percolation_stats import PercolationStats, seed_sequence
from percolation_threshold.union_find import require_positive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepPoint:
    size: int
    mean: float
    stddev: float
    confidence_lo: float
    confidence_hi: float


@dataclass(frozen=True)
class Extrapolation:
    pc_inf: float
    slope: float
    r_squared: float
    stderr: float


def run_sweep(sizes, trials: int, seed=None, max_attempts=None):
    """
    Runs one ``PercolationStats`` per grid size, each on its own child seed.

    :return: list of SweepPoint in the order of ``sizes``.
    """
    sizes = [require_positive_int(L, "size") for L in sizes]
    if not sizes:
        raise InvalidArgumentError("at least one grid size is required")

    children = seed_sequence(seed).spawn(len(sizes))
    points = []
    for L, child in zip(sizes, children):
        logger.debug(f"simulate n = {L}")
        stats = PercolationStats(L, trials, seed=child, max_attempts=max_attempts)
        points.append(SweepPoint(
            size=L,
            mean=stats.mean(),
            stddev=stats.stddev(),
            confidence_lo=stats.confidenceLo(),
            confidence_hi=stats.confidenceHi(),
        ))
    return points


def extrapolate(sizes, means, exponent=FINITE_SIZE_EXPONENT) -> Extrapolation:
    """
    Fits means against sizes**exponent and returns the intercept as pc(infinity).
    """
    L_values = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)

    if L_values.shape != means.shape or L_values.ndim != 1:
        raise InvalidArgumentError("sizes and means must be one-dimensional and of equal length")
    if len(np.unique(L_values)) < 2:
        raise InvalidArgumentError("at least two distinct grid sizes are needed to extrapolate")
    if np.any(L_values <= 0):
        raise InvalidArgumentError("grid sizes must be positive")

    X_scaling = L_values ** exponent
    fit = linregress(X_scaling, means)
    return Extrapolation(
        pc_inf=float(fit.intercept),
        slope=float(fit.slope),
        r_squared=float(fit.rvalue ** 2),
        stderr=float(fit.intercept_stderr),
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Run a Monte Carlo simulation for 2D site percolation over a range of grid sizes."
    )
    parser.add_argument('--Lmin', type=int, default=SWEEP_L_MIN,
                        help="Minimum size of the square grid (N_min x N_min).")
    parser.add_argument('--Lmax', type=int, default=SWEEP_L_MAX,
                        help="Maximum size of the square grid (N_max x N_max).")
    parser.add_argument('--Lstep', type=int, default=SWEEP_L_STEP,
                        help="Step size for increasing the grid size N.")
    parser.add_argument('--t', type=int, default=SWEEP_TRIALS,
                        help="The number of Monte Carlo trials to perform per size.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for reproducible runs.")
    parser.add_argument('--max-attempts', type=int, default=None,
                        help="Give up on a trial after this many random draws.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Log sweep progress.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.Lstep <= 0 or args.Lmin <= 0 or args.Lmax < args.Lmin:
        parser.error("need 0 < Lmin <= Lmax and Lstep > 0")
    sizes = list(range(args.Lmin, args.Lmax + 1, args.Lstep))

    print(f"System sizes (N): {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")

    try:
        points = run_sweep(sizes, args.t, seed=args.seed, max_attempts=args.max_attempts)
    except InvalidArgumentError as e:
        parser.error(str(e))
    except TrialTimeoutError as e:
        logger.error(str(e))
        return 1

    print("=" * 60)
    print(f"{'L':>6} {'mean':>10} {'stddev':>10} {'95% lo':>10} {'95% hi':>10}")
    for p in points:
        print(f"{p.size:>6} {p.mean:>10.6f} {p.stddev:>10.6f} {p.confidence_lo:>10.6f} {p.confidence_hi:>10.6f}")
    print("=" * 60)

    if len(points) >= 2:
        fit = extrapolate([p.size for p in points], [p.mean for p in points])
        print(f"pc(infinity) = {fit.pc_inf:.6f} +/- {fit.stderr:.6f}, R^2 = {fit.r_squared:.4f}")
        print(f"Theory: p_c = {SQUARE_SITE_PC}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
