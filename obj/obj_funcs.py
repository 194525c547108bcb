import math
import numpy as np
import cvxpy as cp
from obj.objective import Objective
from torch import abs, log, sin


def soft_threshold(u, t):
    return float(np.sign(u) * max(np.abs(u) - t, 0.0))


# lam*|x| + (x-c)^2 and its proximal operator. Completing the square,
#   lam*|x| + (x-c)^2 + (x-u)^2/(2 rho) = a*(x-m)^2 + lam*|x| + const
# with a = 1 + 1/(2 rho), m = (c + u/(2 rho))/a, which soft-thresholds at lam/(2a).
def _l1_quadratic(lam, c, name):
    assert lam >= 0

    def l1q_function(x):
        return (x - c)**2 + lam * abs(x)

    def l1q_cvx(x):
        return cp.square(x - c) + lam * cp.abs(x)

    def l1q_prox(u, rho):
        a = 1.0 + 1.0 / (2.0 * rho)
        m = (c + u / (2.0 * rho)) / a
        return soft_threshold(m, lam / (2.0 * a))

    return Objective(l1q_function, name=name, cvx_func=l1q_cvx, prox_func=l1q_prox,
                     argmin=soft_threshold(c, lam / 2.0))


# f(x) = (x-c)^2
def quadratic(c=1.0):
    return _l1_quadratic(0.0, c, 'quadratic')

# f(x) = (x-2)^2 + lam*|x|, the L1-penalized least squares cartoon.
# The minimizer max(2 - lam/2, 0) shrinks to 0 as the penalty grows.
def l1penalized(lam, c=2.0):
    return _l1_quadratic(lam, c, 'l1penalized')


Quadratic = quadratic(1.0)
AbsPlusQuadratic = _l1_quadratic(2.0, 2.0, 'absplusquadratic')


# f(x) = |x|, whose prox is the soft thresholding operator
def absval(x):
    return abs(x)
AbsVal = Objective(absval, cvx_func=cp.abs, argmin=0.0,
                   prox_func=lambda u, rho: soft_threshold(u, rho))


# Cauchy log-likelihood style, non-convex
def sumoflogs(x):
    return log(1 + x**2) + log(1 + (x - 0.5)**2) + log(1 + (x + 0.5)**2)
SumOfLogs = Objective(sumoflogs, argmin=0.0)


# Sum of absolute values with an oscillatory perturbation, many local minima
def wiggly(x):
    return abs(x) + abs(x - 2) + abs(x + 1) + 0.4 * sin(7.0 * math.pi * x)
Wiggly = Objective(wiggly)


OBJECTIVES = {'quadratic'        : Quadratic,
              'absval'           : AbsVal,
              'sumoflogs'        : SumOfLogs,
              'wiggly'           : Wiggly,
              'absplusquadratic' : AbsPlusQuadratic,
              }


def get_objective(name):
    try:
        return OBJECTIVES[name]
    except KeyError:
        raise KeyError('Unknown objective {!r}, choose from {}'.format(name, sorted(OBJECTIVES)))
