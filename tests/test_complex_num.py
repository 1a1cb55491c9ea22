import pytest

from fractals.complex_num import Complex


def test_arithmetic_returns_new_values():
    a = Complex(1.5, -2.0)
    b = Complex(0.5, 4.0)

    assert a + b == Complex(2.0, 2.0)
    assert a - b == Complex(1.0, -6.0)
    # (1.5 - 2i)(0.5 + 4i) = 0.75 + 6i - i + 8 = 8.75 + 5i
    assert a * b == Complex(8.75, 5.0)
    assert a == Complex(1.5, -2.0)


def test_immutable():
    z = Complex(1.0, 2.0)
    with pytest.raises(AttributeError):
        z.real = 3.0


def test_sqmagnitude():
    assert Complex(3.0, 4.0).sqmagnitude() == 25.0
    assert Complex().sqmagnitude() == 0.0


def test_real_scalars_are_promoted():
    z = Complex(1.0, 1.0)
    assert z * 2 == Complex(2.0, 2.0)
    assert 2 * z == Complex(2.0, 2.0)
    assert z + 0.5 == Complex(1.5, 1.0)
    assert 1 - z == Complex(0.0, -1.0)


def test_matches_builtin_complex():
    a = Complex(-0.7, 0.27)
    b = Complex(0.3, -1.1)
    expected = complex(a) * complex(b)
    product = a * b
    assert product.real == pytest.approx(expected.real)
    assert product.imag == pytest.approx(expected.imag)


def test_from_complex_roundtrip():
    z = Complex.from_complex(-0.5 + 0.25j)
    assert z == Complex(-0.5, 0.25)
    assert z.to_complex() == -0.5 + 0.25j
    assert Complex.from_complex(z) is z
