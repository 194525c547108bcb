import math
import warnings

import pytest

from algs.golden import minimize, MinimizeResult
from algs.exceptions import (InvalidIntervalError, NonFiniteObjectiveError,
                             ConvergenceNotReached, ProxError)
from obj.obj_funcs import Wiggly

TOL = 1e-6


@pytest.mark.parametrize('c', [-4.2, -1.0, 0.0, 0.3, 2.7, 4.99])
def test_quadratic_minimum_within_tolerance(c):
    x, fx = minimize(lambda x: (x - c)**2, -5, 5)
    assert abs(x - c) < TOL
    assert fx == pytest.approx(0.0, abs=1e-12)


def test_result_fields():
    res = minimize(lambda x: (x - 1.0)**2 + 3.0, -5, 5)
    assert isinstance(res, MinimizeResult)
    assert res.converged
    assert 0 < res.n_iter <= 100
    assert res.n_eval == res.n_iter + 5  # two initial probes, midpoint, both endpoints
    assert res.fx == pytest.approx(3.0)
    assert 'converged=True' in repr(res)


@pytest.mark.parametrize('lo, hi, expected', [(-3, 3, 3.0), (12, 20, 12.0)])
def test_minimizer_outside_interval_is_clamped(lo, hi, expected):
    x, _ = minimize(lambda x: (x - 10.0)**2, lo, hi)
    assert lo <= x <= hi
    assert x == pytest.approx(expected, abs=TOL)


@pytest.mark.parametrize('kink', [0.0, 0.3, -2.0])
def test_absolute_value_kink_is_located(kink):
    x, fx = minimize(lambda x: abs(x - kink), -5, 5)
    assert abs(x - kink) < TOL
    assert fx < TOL


def test_sum_of_absolute_values_kinks():
    # |x| + |x-2| + |x+1| is minimized at the median 0
    x, fx = minimize(lambda x: abs(x) + abs(x - 2) + abs(x + 1), -5, 5)
    assert abs(x) < TOL
    assert fx == pytest.approx(3.0, abs=2 * TOL)


def test_stays_inside_interval_for_multimodal():
    res = minimize(Wiggly, -5, 5)
    assert -5 <= res.x <= 5
    assert res.fx <= min(Wiggly(-5.0), Wiggly(5.0))
    assert res.fx == pytest.approx(Wiggly(res.x))


def test_hints_are_never_beaten_by_result():
    hints = [-1.0 / 14.0, 0.9, 3.3]
    res = minimize(Wiggly, -5, 5, x0=hints)
    assert res.fx <= min(Wiggly(h) for h in hints)


def test_hints_are_clipped_into_interval():
    seen = []

    def g(x):
        seen.append(x)
        return (x - 1.0)**2

    minimize(g, -2, 2, x0=[-10.0, 7.5])
    assert min(seen) >= -2 and max(seen) <= 2
    assert seen[:2] == [-2.0, 2.0]


def test_deterministic():
    assert minimize(Wiggly, -3, 3).x == minimize(Wiggly, -3, 3).x


def test_tolerance_controls_precision():
    coarse = minimize(lambda x: (x - 0.123)**2, -5, 5, tol=1e-2)
    fine = minimize(lambda x: (x - 0.123)**2, -5, 5, tol=1e-8)
    assert abs(coarse.x - 0.123) < 1e-2
    assert abs(fine.x - 0.123) < 1e-7
    assert coarse.n_iter < fine.n_iter


@pytest.mark.parametrize('lo, hi', [(5, 2), (1, 1), (float('nan'), 1), (0, float('inf')), ('a', 1)])
def test_invalid_interval(lo, hi):
    with pytest.raises(InvalidIntervalError):
        minimize(lambda x: x**2, lo, hi)


def test_invalid_interval_is_value_error():
    with pytest.raises(ValueError):
        minimize(lambda x: x**2, 5, 2)
    with pytest.raises(ProxError):
        minimize(lambda x: x**2, 5, 2)


def test_invalid_interval_checked_before_any_evaluation():
    calls = []
    with pytest.raises(InvalidIntervalError):
        minimize(lambda x: calls.append(x) or 0.0, 5, 2)
    assert calls == []


@pytest.mark.parametrize('kwargs', [{'tol': 0}, {'tol': -1e-3}, {'max_iter': 0}])
def test_invalid_search_settings(kwargs):
    with pytest.raises(ValueError):
        minimize(lambda x: x**2, -1, 1, **kwargs)


def test_nan_objective_raises():
    with pytest.raises(NonFiniteObjectiveError) as exc:
        minimize(lambda x: float('nan'), -1, 1)
    assert math.isnan(exc.value.fx)


def test_non_finite_at_single_probe_raises_without_retry():
    calls = []

    def g(x):
        calls.append(x)
        return float('inf') if x > 4.5 else x**2

    with pytest.raises(NonFiniteObjectiveError) as exc:
        minimize(g, -5, 5)
    assert exc.value.x > 4.5
    assert calls.count(exc.value.x) == 1
    assert isinstance(exc.value, ArithmeticError)


def test_iteration_cap_returns_best_point_with_warning():
    with pytest.warns(ConvergenceNotReached):
        res = minimize(lambda x: (x - 0.5)**2, -5, 5, max_iter=5)
    assert not res.converged
    assert res.n_iter == 5
    assert -5 <= res.x <= 5
    assert abs(res.x - 0.5) < 1.0


def test_iteration_cap_warning_can_be_escalated():
    with warnings.catch_warnings():
        warnings.simplefilter('error', ConvergenceNotReached)
        with pytest.raises(ConvergenceNotReached):
            minimize(lambda x: (x - 0.5)**2, -5, 5, max_iter=3)


def test_no_warning_when_converged():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        minimize(lambda x: (x - 0.5)**2, -5, 5)


def test_tiny_tolerance_terminates():
    res = minimize(lambda x: abs(x - 1.0), -5, 5, tol=1e-300)
    assert res.converged
    assert abs(res.x - 1.0) < 1e-12
