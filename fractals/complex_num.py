"""
Minimal immutable complex number used by the escape-time recurrence.

Only the operations the Mandelbrot iteration needs are provided:
addition, subtraction, multiplication and squared magnitude.
Real scalars are promoted to Complex(x, 0) so that expressions such as
``Complex(1, 1) * scale + offset`` read the way they are written.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Complex:
    real: float = 0.0
    imag: float = 0.0

    @staticmethod
    def _coerce(other) -> Complex | None:
        if isinstance(other, Complex):
            return other
        if isinstance(other, Real):
            return Complex(float(other), 0.0)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        # (a + bi)(c + di) = (ac - bd) + (ad + cb)i
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + other.real * self.imag,
        )

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def sqmagnitude(self) -> float:
        """|z|^2, avoids the square root on the hot path."""
        return self.real * self.real + self.imag * self.imag

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

    def __complex__(self) -> complex:
        return self.to_complex()

    @classmethod
    def from_complex(cls, z) -> Complex:
        if isinstance(z, Complex):
            return z
        z = complex(z)
        return cls(z.real, z.imag)
