"""Unit-tagged scalars and 2D vectors.

Every physical number in the model is a :class:`Quantity`: a magnitude plus a
:class:`Unit`. A unit knows its scale relative to SI and its dimension vector
``(mass, length, time, angle)``, so conversions are explicit and checked.

Rules:
    - ``+`` / ``-`` need equal dimensions; the result keeps the left unit.
    - ``*`` / ``/`` combine dimensions; the result is expressed in SI.
    - A bare number may scale a quantity but is never added to one.
    - Trig functions only accept angles.

Any violation raises :class:`UnitMismatchError`; it is a programming error and
is not meant to be caught.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Tuple, TypeAlias, Union

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "UnitError",
    "UnitMismatchError",
    "UnknownUnitError",
    "Unit",
    "Quantity",
    "Vector2",
    "get_unit",
    "parse_quantity",
    "sqrt",
    "cos",
    "sin",
    "tan",
    "cross",
]


Dimension: TypeAlias = Tuple[int, int, int, int]
Scalar = Union[int, float]

DIMENSIONLESS: Dimension = (0, 0, 0, 0)
LENGTH: Dimension = (0, 1, 0, 0)
ANGLE: Dimension = (0, 0, 0, 1)
MASS: Dimension = (1, 0, 0, 0)
FORCE: Dimension = (1, 1, -2, 0)
TORQUE: Dimension = (1, 2, -2, 0)


class UnitError(ValueError):
    """Base class for unit related failures."""


class UnitMismatchError(UnitError):
    """Raised when quantities with incompatible dimensions are combined."""


class UnknownUnitError(UnitError):
    """Raised for unit names that are not registered."""


@dataclass(frozen=True)
class Unit:
    """A named unit.

    name: symbol used for display and lookup.
    scale: factor converting one of this unit to SI.
    dimension: exponents of (mass, length, time, angle).
    """

    name: str
    scale: float
    dimension: Dimension


_UNITS: Dict[str, Unit] = {
    u.name: u
    for u in (
        Unit("", 1.0, DIMENSIONLESS),
        Unit("m", 1.0, LENGTH),
        Unit("mm", 1e-3, LENGTH),
        Unit("m^2", 1.0, (0, 2, 0, 0)),
        Unit("m^3", 1.0, (0, 3, 0, 0)),
        Unit("kg", 1.0, MASS),
        Unit("s", 1.0, (0, 0, 1, 0)),
        Unit("m/s^2", 1.0, (0, 1, -2, 0)),
        Unit("N", 1.0, FORCE),
        Unit("dN", 0.1, FORCE),
        Unit("N*m", 1.0, TORQUE),
        Unit("Pa", 1.0, (1, -1, -2, 0)),
        Unit("kPa", 1e3, (1, -1, -2, 0)),
        Unit("kg/m^3", 1.0, (1, -3, 0, 0)),
        Unit("rad", 1.0, ANGLE),
        Unit("deg", math.pi / 180.0, ANGLE),
    )
}

# SI unit used to express the result of a product or quotient
_SI_BY_DIMENSION: Dict[Dimension, Unit] = {
    u.dimension: u for u in _UNITS.values() if u.scale == 1.0
}


def get_unit(name: str) -> Unit:
    """Look up a registered unit by symbol."""
    try:
        return _UNITS[name.strip()]
    except KeyError:
        raise UnknownUnitError(f"Unknown unit: {name!r}") from None


def _as_unit(unit: Union[str, Unit]) -> Unit:
    return unit if isinstance(unit, Unit) else get_unit(unit)


def _si_unit(dimension: Dimension) -> Unit:
    unit = _SI_BY_DIMENSION.get(dimension)
    if unit is not None:
        return unit
    symbols = ("kg", "m", "s", "rad")
    parts = []
    for symbol, power in zip(symbols, dimension):
        if power == 1:
            parts.append(symbol)
        elif power != 0:
            parts.append(f"{symbol}^{power}")
    return Unit("*".join(parts), 1.0, dimension)


def _combine(a: Dimension, b: Dimension, sign: int) -> Dimension:
    return tuple(x + sign * y for x, y in zip(a, b))  # type: ignore[return-value]


@dataclass(frozen=True)
class Quantity:
    """A magnitude tagged with a unit."""

    value: float
    unit: Unit

    @classmethod
    def of(cls, value: Scalar, unit: Union[str, Unit]) -> "Quantity":
        return cls(float(value), _as_unit(unit))

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension

    @property
    def si(self) -> float:
        """Magnitude expressed in the SI unit of this dimension."""
        return self.value * self.unit.scale

    def is_compatible(self, unit: Union[str, Unit]) -> bool:
        return self.dimension == _as_unit(unit).dimension

    def to(self, unit: Union[str, Unit]) -> "Quantity":
        target = _as_unit(unit)
        if target.dimension != self.dimension:
            raise UnitMismatchError(
                f"Cannot convert {self.unit.name or 'dimensionless'} "
                f"to {target.name or 'dimensionless'}"
            )
        if target == self.unit:
            return self
        return Quantity(self.value * self.unit.scale / target.scale, target)

    def to_number(self, unit: Union[str, Unit]) -> float:
        return self.to(unit).value

    def format(self, precision: int = 2) -> str:
        """Fixed notation, e.g. ``"3.13 kg"``."""
        text = f"{self.value:.{precision}f}"
        return f"{text} {self.unit.name}" if self.unit.name else text

    def __str__(self) -> str:
        return self.format()

    def __float__(self) -> float:
        if self.dimension != DIMENSIONLESS:
            raise UnitMismatchError(
                f"Only dimensionless quantities convert to float, got {self.unit.name}"
            )
        return self.si

    def _check_same(self, other: object, op: str) -> "Quantity":
        if not isinstance(other, Quantity):
            raise UnitMismatchError(
                f"Cannot {op} a bare number and a quantity in {self.unit.name!r}"
            )
        if other.dimension != self.dimension:
            raise UnitMismatchError(
                f"Cannot {op} {self.unit.name!r} and {other.unit.name!r}"
            )
        return other.to(self.unit)

    def __add__(self, other: "Quantity") -> "Quantity":
        rhs = self._check_same(other, "add")
        return Quantity(self.value + rhs.value, self.unit)

    def __sub__(self, other: "Quantity") -> "Quantity":
        rhs = self._check_same(other, "subtract")
        return Quantity(self.value - rhs.value, self.unit)

    def __radd__(self, other: object) -> "Quantity":
        return self._check_same(other, "add") + self

    def __rsub__(self, other: object) -> "Quantity":
        return self._check_same(other, "subtract") - self

    def __neg__(self) -> "Quantity":
        return Quantity(-self.value, self.unit)

    def __abs__(self) -> "Quantity":
        return Quantity(abs(self.value), self.unit)

    def __mul__(self, other: Union["Quantity", Scalar]) -> "Quantity":
        if isinstance(other, Quantity):
            dimension = _combine(self.dimension, other.dimension, 1)
            return Quantity(self.si * other.si, _si_unit(dimension))
        if isinstance(other, (int, float)):
            return Quantity(self.value * other, self.unit)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Quantity":
        if isinstance(other, (int, float)):
            return Quantity(other * self.value, self.unit)
        return NotImplemented

    def __truediv__(self, other: Union["Quantity", Scalar]) -> "Quantity":
        if isinstance(other, Quantity):
            dimension = _combine(self.dimension, other.dimension, -1)
            return Quantity(self.si / other.si, _si_unit(dimension))
        if isinstance(other, (int, float)):
            return Quantity(self.value / other, self.unit)
        return NotImplemented


def parse_quantity(text: str) -> Quantity:
    """Parse ``"<number> <unit>"``, e.g. ``"0.1 m"`` or ``"997 kg/m^3"``."""
    match = _QUANTITY_RE.match(text or "")
    if match is None:
        raise UnitError(f"Cannot parse quantity: {text!r}")
    value, unit = match.groups()
    # "kg / m^3" and "N * m" name the same units as "kg/m^3" and "N*m"
    unit = re.sub(r"\s*([/*^])\s*", r"\1", unit.strip())
    return Quantity.of(float(value), unit)


_QUANTITY_RE = re.compile(
    r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(.*?)\s*$"
)


def sqrt(q: Quantity) -> Quantity:
    if any(power % 2 for power in q.dimension):
        raise UnitMismatchError(f"Cannot take the square root of {q.unit.name!r}")
    dimension: Dimension = tuple(power // 2 for power in q.dimension)  # type: ignore[assignment]
    return Quantity(math.sqrt(q.si), _si_unit(dimension))


def _radians(angle: Quantity) -> float:
    if not isinstance(angle, Quantity) or angle.dimension != ANGLE:
        raise UnitMismatchError(f"Expected an angle, got {angle!r}")
    return angle.to_number("rad")


def cos(angle: Quantity) -> float:
    return math.cos(_radians(angle))


def sin(angle: Quantity) -> float:
    return math.sin(_radians(angle))


def tan(angle: Quantity) -> float:
    return math.tan(_radians(angle))


@dataclass(frozen=True)
class Vector2:
    """Ordered pair of quantities sharing one dimension."""

    x: Quantity
    y: Quantity

    def __post_init__(self) -> None:
        if self.x.dimension != self.y.dimension:
            raise UnitMismatchError(
                f"Vector components disagree: {self.x.unit.name!r} vs {self.y.unit.name!r}"
            )

    @classmethod
    def from_array(cls, values: NDArray[np.float64], unit: Union[str, Unit]) -> "Vector2":
        target = _as_unit(unit)
        return cls(Quantity(float(values[0]), target), Quantity(float(values[1]), target))

    @property
    def unit(self) -> Unit:
        return self.x.unit

    def to_array(self, unit: Union[str, Unit]) -> NDArray[np.float64]:
        return np.array([self.x.to_number(unit), self.y.to_number(unit)], dtype=np.float64)

    def magnitude(self) -> Quantity:
        y = self.y.to(self.x.unit)
        return Quantity(math.hypot(self.x.value, y.value), self.x.unit)


def cross(a: Vector2, b: Vector2) -> Quantity:
    """Scalar 2D cross product ``a.x * b.y - a.y * b.x``."""
    return a.x * b.y - a.y * b.x
