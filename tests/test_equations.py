import pytest

from applab.equations import cubic, cubic_deriv, func1, func1_deriv

DOCUMENTED_ROOTS = [35.687256, 52.632141, -50.809979]


def test_cubic_constant_term():
    assert cubic(0.0) == 1909.0


def test_cubic_deriv_at_zero():
    assert cubic_deriv(0.0) == -52.2


def _central_difference(f, x, h=1e-6):
    return (f(x + h) - f(x - h)) / (2 * h)


@pytest.mark.parametrize("x", [-60.0, -10.0, 0.0, 3.5, 40.0])
def test_cubic_deriv_matches_numeric_slope(x):
    assert cubic_deriv(x) == pytest.approx(_central_difference(cubic, x), rel=1e-5, abs=1e-5)


@pytest.mark.parametrize("x", [-4.0, -1.5, 0.0, 0.7, 2.0, 4.5])
def test_func1_deriv_matches_numeric_slope(x):
    assert func1_deriv(x) == pytest.approx(
        _central_difference(func1, x), rel=1e-5, abs=1e-6
    )


def test_func1_changes_sign_between_one_and_three():
    assert func1(1.0) < 0 < func1(3.0)


def test_func1_first_term_vanishes_at_zero():
    assert func1(0.0) == pytest.approx(func1(-0.0))
    assert func1(0.0) < 0