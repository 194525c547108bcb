# Proximal operator of a convex objective, solved exactly with cvxpy

import cvxpy as cp

from algs.prox import check_rho
from algs.golden import check_interval
from algs.exceptions import ProxError


def prox_cvx(u, rho, objective, lo, hi, solver=None):
    """Envelope minimizer over ``[lo, hi]`` for objectives carrying ``cvx_func``.

    Serves as an independent check on the golden-section ``prox``.
    """
    if getattr(objective, 'cvx_func', None) is None:
        raise ValueError('{!r} has no convex (cvxpy) form'.format(objective))

    rho = check_rho(rho)
    lo, hi = check_interval(lo, hi)

    p = cp.Variable()  # variable of optimization
    prox_objective = objective.cvx_func(p) + (1.0 / (2.0 * rho)) * cp.square(p - float(u))
    prob = cp.Problem(cp.Minimize(prox_objective), [p >= lo, p <= hi])
    prob.solve(solver=solver)

    if prob.status not in [cp.OPTIMAL, cp.OPTIMAL_INACCURATE]:
        raise ProxError('Convex prox subproblem ended with status {}'.format(prob.status))

    # Solver output can sit a hair outside the box
    return min(max(float(p.value), lo), hi)
