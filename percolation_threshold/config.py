"""
Configuration constants for the percolation threshold estimator.
"""

# z-score of the two-sided 95% confidence interval (normal approximation)
CONFIDENCE_Z_95 = 1.96

# Site percolation threshold of the infinite square lattice
SQUARE_SITE_PC = 0.5927

# Finite-size scaling: pc(L) - pc(inf) ~ L^(-1/nu), nu = 4/3 in 2D
FINITE_SIZE_EXPONENT = -3 / 4

# Log a debug progress line every this many trials
PROGRESS_LOG_INTERVAL = 50

# Defaults for the size sweep command
SWEEP_L_MIN = 50
SWEEP_L_MAX = 200
SWEEP_L_STEP = 50
SWEEP_TRIALS = 500
