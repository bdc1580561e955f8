"""Complex numbers kept in polar form, with a small calculator command."""

from __future__ import annotations

import math
import sys


class Complexo:
    """A complex number stored as modulus and argument (radians)."""

    __slots__ = ("_mod", "_arg")

    def __init__(self, a: float, b: float) -> None:
        """Create the number a + bi."""
        self._mod = math.hypot(a, b)
        self._arg = math.atan2(b, a)

    @classmethod
    def _from_polar(cls, mod: float, arg: float) -> Complexo:
        number = cls.__new__(cls)
        number._mod = mod
        number._arg = arg
        return number

    def real(self) -> float:
        """Return the real part."""
        return self._mod * math.cos(self._arg)

    def imag(self) -> float:
        """Return the imaginary part."""
        return self._mod * math.sin(self._arg)

    def conjugate(self) -> Complexo:
        """Return the complex conjugate."""
        return self._from_polar(self._mod, -self._arg)

    def negated(self) -> Complexo:
        """Return the additive inverse."""
        return self._from_polar(self._mod, self._arg + math.pi)

    def inverse(self) -> Complexo:
        """Return the multiplicative inverse; zero raises ZeroDivisionError."""
        return self._from_polar(1.0 / self._mod, -self._arg)

    def __add__(self, other: object) -> Complexo:
        if not isinstance(other, Complexo):
            return NotImplemented
        return Complexo(self.real() + other.real(), self.imag() + other.imag())

    def __sub__(self, other: object) -> Complexo:
        if not isinstance(other, Complexo):
            return NotImplemented
        return self + other.negated()

    def __mul__(self, other: object) -> Complexo:
        if not isinstance(other, Complexo):
            return NotImplemented
        return self._from_polar(self._mod * other._mod, self._arg + other._arg)

    def __truediv__(self, other: object) -> Complexo:
        if not isinstance(other, Complexo):
            return NotImplemented
        return self * other.inverse()

    def __repr__(self) -> str:
        return f"Complexo({self.real()!r}, {self.imag()!r})"


def format_complex(k: Complexo) -> str:
    """Render ``k`` with two decimals, as the calculator prints it."""
    real, imag = k.real(), k.imag()
    if imag == 0:
        return f"{real:.2f}"
    if imag > 0:
        return f"{real:.2f} + {imag:.2f}i "
    return f"{real:.2f} - {-imag:.2f}i "


def execute(op: str, x: Complexo, y: Complexo) -> Complexo:
    """Apply ``op`` to x and y; any operator other than + - * divides."""
    if op == "+":
        return x + y
    if op == "-":
        return x - y
    if op == "*":
        return x * y
    return x / y


def main(argv=None) -> int:
    """Read an operator and two operands from standard input and print the result."""
    data = sys.stdin.read().lstrip()
    op, numbers = data[:1], data[1:].split()
    print("Digite uma operação (+, -, *, /): ")
    print("Digite o primeiro operando: ")
    print("Digite o segundo perando operando: ")
    try:
        if not op or len(numbers) < 4:
            raise ValueError("expected an operator and four numbers")
        r1, i1, r2, i2 = (float(n) for n in numbers[:4])
        print("Resultado: ")
        print(format_complex(execute(op, Complexo(r1, i1), Complexo(r2, i2))))
    except (ValueError, ZeroDivisionError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0