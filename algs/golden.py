# Golden-section search for bounded, derivative-free scalar minimization

import math
import warnings
import numpy as np

from algs import params
from algs.exceptions import InvalidIntervalError, NonFiniteObjectiveError, ConvergenceNotReached

INV_PHI = (math.sqrt(5.0) - 1.0) / 2.0  # 1/phi, the golden shrink factor
TIE_RTOL = 4.0 * np.finfo(float).eps     # values this close count as equal
TIE_ATOL = 1e-300


class MinimizeResult:
    """Outcome of a bounded scalar minimization.

    Unpacks as ``(x, fx)`` so ``x, fx = minimize(g, lo, hi)`` works.
    ``converged`` is False when the iteration cap was hit before the bracket
    shrank below the tolerance; ``x`` is then the best point probed so far.
    """

    def __init__(self, x, fx, n_iter, n_eval, converged):
        self.x         = x
        self.fx        = fx
        self.n_iter    = n_iter
        self.n_eval    = n_eval
        self.converged = converged

    def __iter__(self):
        return iter((self.x, self.fx))

    def __repr__(self):
        return ('MinimizeResult(x={}, fx={}, n_iter={}, n_eval={}, converged={})'
                .format(self.x, self.fx, self.n_iter, self.n_eval, self.converged))


def check_interval(lo, hi):
    try:
        lo, hi = float(lo), float(hi)
    except (TypeError, ValueError):
        raise InvalidIntervalError(lo, hi)

    if not (math.isfinite(lo) and math.isfinite(hi)) or lo >= hi:
        raise InvalidIntervalError(lo, hi)
    return lo, hi


def evaluate(g, x):
    fx = float(g(x))
    if not math.isfinite(fx):
        raise NonFiniteObjectiveError(x, fx)
    return fx


def _tied(fc, fd):
    return math.isclose(fc, fd, rel_tol=TIE_RTOL, abs_tol=TIE_ATOL)


def minimize(g, lo, hi, tol=params.TOL, max_iter=params.MAX_ITER, x0=None):
    """Minimize the scalar function ``g`` over ``[lo, hi]``.

    Golden-section search: each iteration discards the part of the bracket that
    cannot hold the minimizer if ``g`` is unimodal, costing one evaluation. It
    stops once the bracket is narrower than ``tol`` or after ``max_iter``
    iterations. Non-smooth points such as the kink of ``|x|`` are located to
    within ``tol`` since only function values are compared.

    For multimodal ``g`` the result is the best point found along the search
    path, which need not be the global minimizer. The endpoints, the final
    bracket midpoint and the optional hints ``x0`` (a float or an iterable of
    floats, clipped into the interval) are probed too, so the returned value is
    never worse than any of them.
    """
    lo, hi = check_interval(lo, hi)
    if not tol > 0:
        raise ValueError('Tolerance must be positive, got {}'.format(tol))
    if max_iter < 1:
        raise ValueError('max_iter must be at least 1, got {}'.format(max_iter))

    probes = []

    def probe(x):
        fx = evaluate(g, x)
        probes.append((x, fx))
        return fx

    hints = [] if x0 is None else [float(x) for x in np.clip(np.atleast_1d(np.asarray(x0, dtype=float)), lo, hi)]
    for x in hints:
        probe(x)

    a, b = lo, hi
    c = b - INV_PHI * (b - a)
    d = a + INV_PHI * (b - a)
    fc = probe(c)
    fd = probe(d)

    n_iter = 0
    converged = False
    while True:
        # Stop on tolerance, or once the probes can no longer be told apart
        if (b - a) <= tol or (d - c) <= TIE_RTOL * max(1.0, abs(c)):
            converged = True
            break
        if n_iter >= max_iter:
            break

        n_iter += 1
        if fc < fd or _tied(fc, fd):
            # Minimizer lies in [a, d]
            b, d, fd = d, c, fc
            c = b - INV_PHI * (b - a)
            fc = probe(c)
        else:
            # Minimizer lies in [c, b]
            a, c, fc = c, d, fd
            d = a + INV_PHI * (b - a)
            fd = probe(d)

    mid = 0.5 * (a + b)
    f_mid = evaluate(g, mid)
    probe(lo)
    probe(hi)

    # min keeps the first of equal values, so ties go to the bracket midpoint
    x_best, fx_best = min([(mid, f_mid)] + probes, key=lambda p: p[1])

    if not converged:
        warnings.warn('Golden-section search stopped after {} iterations with bracket '
                      'width {:.3e} > tol {:.3e}'.format(n_iter, b - a, tol),
                      ConvergenceNotReached, stacklevel=2)

    return MinimizeResult(x_best, fx_best, n_iter, len(probes) + 1, converged)
