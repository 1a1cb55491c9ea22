import pytest

from fractals.complex_num import Complex
from fractals.utils import parse_complex


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.3+0.5j", Complex(0.3, 0.5)),
        ("-0.4-0.6j", Complex(-0.4, -0.6)),
        (" -0.75 ", Complex(-0.75, 0.0)),
        ("2J", Complex(0.0, 2.0)),
        ("1e-3+2j", Complex(0.001, 2.0)),
    ],
)
def test_parse_complex(text, expected):
    assert parse_complex(text) == expected


def test_parse_complex_rejects_garbage():
    with pytest.raises(ValueError):
        parse_complex("not a number")
