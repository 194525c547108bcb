# Errors raised by the scalar minimizer and the proximal operator


class ProxError(Exception):
    pass


class InvalidIntervalError(ProxError, ValueError):
    def __init__(self, lo, hi):
        self.lo = lo
        self.hi = hi
        super(InvalidIntervalError, self).__init__(
            'Search interval must satisfy lo < hi with finite bounds, got [{}, {}]'.format(lo, hi))


class InvalidSmoothnessError(ProxError, ValueError):
    def __init__(self, rho):
        self.rho = rho
        super(InvalidSmoothnessError, self).__init__(
            'Smoothness parameter rho must be positive and finite, got {}'.format(rho))


class NonFiniteObjectiveError(ProxError, ArithmeticError):
    def __init__(self, x, fx):
        self.x = x
        self.fx = fx
        super(NonFiniteObjectiveError, self).__init__(
            'Objective returned non-finite value {} at x = {}'.format(fx, x))


# Soft failure: the iteration cap was hit before the bracket reached tolerance.
# Issued through warnings so callers can escalate it with a filter.
class ConvergenceNotReached(RuntimeWarning):
    pass
