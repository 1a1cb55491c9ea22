# fractals/utils.py
from fractals.complex_num import Complex


def parse_complex(s: str) -> Complex:
    """
    Parse strings like '0.3+0.5j', '-0.4-0.6j' or '-0.75' into a Complex.
    """
    s = s.strip().lower().replace(" ", "")
    return Complex.from_complex(complex(s))
