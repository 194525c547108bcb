# Proximal operator of a scalar function
#
#   envelope:  h(x, u) = f(x) + (x - u)^2 / (2 rho)
#   prox:      prox_{rho f}(u) = argmin_x h(x, u)   over [lo, hi]
#
# h majorizes f and agrees with it at x = u, so minimizing h never increases f
# (majorize-minimize). Small rho pins the minimizer to u; large rho lets it
# move to the minimizer of f.

import math
import numpy as np

from algs import params
from algs.golden import minimize, check_interval
from algs.exceptions import InvalidSmoothnessError


def check_rho(rho):
    try:
        rho = float(rho)
    except (TypeError, ValueError):
        raise InvalidSmoothnessError(rho)

    if not (math.isfinite(rho) and rho > 0):
        raise InvalidSmoothnessError(rho)
    return rho


def envelope(x, u, rho, f):
    return f(x) + (1.0 / (2.0 * rho)) * (x - u) ** 2


def prox(u, rho, f, lo, hi, tol=params.TOL, max_iter=params.MAX_ITER, return_value=False):
    """Minimize the envelope of ``f`` around ``u`` over ``[lo, hi]``.

    Returns the minimizer, or ``(x, h(x))`` when ``return_value`` is set. ``u``
    may lie outside the interval; the minimizer never does. The anchor (clipped
    into the interval) is handed to the search as a probe, so the envelope value
    returned is never above its value there.
    """
    rho = check_rho(rho)
    lo, hi = check_interval(lo, hi)
    u = float(u)
    if not math.isfinite(u):
        raise ValueError('Anchor point u must be finite, got {}'.format(u))

    def h(x):
        return envelope(x, u, rho, f)

    res = minimize(h, lo, hi, tol=tol, max_iter=max_iter, x0=u)

    if return_value:
        return res.x, res.fx
    return res.x


def prox_map(us, rho, f, lo, hi, **kwargs):
    # Independent prox for every anchor, e.g. for drawing u -> prox(u)
    us = np.asarray(us, dtype=float)
    out = np.empty_like(us)
    for i, u in np.ndenumerate(us):
        out[i] = prox(u, rho, f, lo, hi, **kwargs)
    return out
