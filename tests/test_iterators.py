import numpy as np
import pytest

from fractals.complex_num import Complex
from fractals.errors import InvalidBudget
from fractals.iterators import escape_time, escape_time_at_pixel, escape_time_grid
from fractals.viewport import Viewport, pixel_axes


@pytest.mark.parametrize("n", [1, 2, 10, 1000])
@pytest.mark.parametrize("c", [Complex(3.0, 0.0), Complex(-2.0, -1.0), Complex(1.5, 1.5), Complex(0.0, -2.5)])
def test_outside_radius_escapes_after_one_step(c, n):
    assert c.sqmagnitude() > 4
    assert escape_time(c, n) == 1


def test_boundary_radius_is_not_escaped_at_first_check():
    # |c| == 2 exactly: |z1|^2 == 4 is still inside the bound
    assert escape_time(Complex(2.0, 0.0), 50) == 2
    assert escape_time(Complex(0.0, 2.0), 50) == 2
    # -2 is the tip of the set: 0 -> -2 -> 2 -> 2 -> ...
    assert escape_time(Complex(-2.0, 0.0), 50) == 50


@pytest.mark.parametrize("n", [1, 7, 100, 5000])
def test_origin_is_in_set(n):
    assert escape_time(Complex(), n) == n


def test_known_orbits():
    # 0 -> 1 -> 2 -> 5
    assert escape_time(Complex(1.0, 0.0), 100) == 3
    # i is preperiodic: i -> -1+i -> -i -> -1+i ...
    assert escape_time(Complex(0.0, 1.0), 100) == 100
    assert escape_time(Complex(-1.0, 0.0), 100) == 100


def test_result_never_exceeds_budget():
    assert escape_time(Complex(0.25, 0.0), 3) == 3


def test_deterministic():
    c = Complex(-0.743643887, 0.131825904)
    assert len({escape_time(c, 500) for _ in range(5)}) == 1


def test_accepts_builtin_complex():
    assert escape_time(1 + 0j, 100) == escape_time(Complex(1.0, 0.0), 100)


@pytest.mark.parametrize("n", [0, -5])
def test_non_positive_budget_rejected(n):
    with pytest.raises(InvalidBudget):
        escape_time(Complex(), n)
    with pytest.raises(InvalidBudget):
        escape_time_grid([0.0], [0.0], n)


def test_at_pixel_composes_mapper():
    vp = Viewport(Complex(-2.0, -1.0), Complex(1.0, 1.0))
    # pixel (0, 0) -> (-2, -1)
    assert escape_time_at_pixel(0, 0, 4, 4, vp, 50) == escape_time(Complex(-2.0, -1.0), 50)
    # pixel (2, 2) -> (-0.5, 0)
    assert escape_time_at_pixel(2, 2, 4, 4, vp, 50) == 50


def test_grid_matches_scalar_loop():
    vp = Viewport(Complex(-2.1, -1.3), Complex(0.7, 1.2))
    width, height, n = 23, 17, 80
    real, imag = pixel_axes(width, height, vp)

    grid = escape_time_grid(real, imag, n)

    assert grid.shape == (height, width)
    expected = np.array([
        [escape_time(Complex(float(real[x]), float(imag[y])), n) for x in range(width)]
        for y in range(height)
    ])
    np.testing.assert_array_equal(grid, expected)


def test_grid_accepts_2d_arrays():
    real = np.array([[0.0, 3.0], [1.0, -2.0]])
    imag = np.zeros((2, 2))
    np.testing.assert_array_equal(escape_time_grid(real, imag, 20), [[20, 1], [3, 20]])
