# Default parameters for the scalar minimizer and the proximal operator

TOL = 1e-6          # absolute x-distance at which the bracket stops narrowing
MAX_ITER = 100      # hard stop on golden-section iterations

# Bracket used by the original interactive notebooks. One valid configuration,
# callers still pass the interval explicitly.
DEFAULT_BOUNDS = (-5.0, 5.0)

# Range over which f and its envelope are drawn
PLOT_BOUNDS = (-3.0, 3.0)

# Proximal point iteration stops once a step moves less than this. Steps are
# only resolved to TOL by the search, so it must sit above it.
STEP_TOL = 1e-5
