"""Fixed-point angle value type.

One full turn is mapped onto the 32-bit unsigned integer range, so an
:class:`Angle` stores a *raw* integer in ``[0, 2**32)`` and every arithmetic
operation wraps around modulo the turn.  Because ``2**32`` is divisible by 8,
the angles 0°, 45°, 90°, 180° and 270° (and π radians) are represented
exactly and survive round trips without floating error.

Multiplying by an integral scalar is exact.  Multiplying by a real scalar and
converting to degrees or radians go through floating point and therefore carry
rounding error; use the integral overload whenever the factor is a whole
number.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Any

import numpy as np


TURN = 1 << 32
MASK = TURN - 1

_TURN_LD = np.longdouble(TURN)


class AngleError(ValueError):
    """Base class for errors raised by angle operations."""


class InvalidModulusDivisor(AngleError):
    """The right-hand side of ``%`` does not evenly divide a full turn."""


class NonFiniteAngleError(AngleError):
    """NaN or infinity was passed where a finite real number is required."""


def _check_finite(value: float, what: str) -> None:
    if not math.isfinite(value):
        raise NonFiniteAngleError(f"{what} must be finite, got {value!r}")


def _scale_to_turn(value: float, period: float) -> int:
    """Map a real measurement with the given period onto the raw range."""
    value = math.fmod(value, period)
    value = value if value >= 0 else value + period
    # round half away from zero; a result of exactly one turn wraps to 0
    return math.floor((value / period) * float(TURN) + 0.5) & MASK


@dataclass(frozen=True, order=True)
class Angle:
    """A point on the circle stored as a 32-bit fraction of a full turn.

    ``Angle()`` is the zero angle.  ``Angle(raw)`` only accepts raw values that
    are already in range; use :meth:`from_raw` to wrap arbitrary integers and
    :meth:`from_degree` / :meth:`from_radian` for real measurements.
    Equality and ordering compare the raw values exactly.
    """

    raw: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.raw, numbers.Integral):
            raise TypeError(f"raw angle value must be an integer, got {type(self.raw).__name__}")
        if not 0 <= self.raw <= MASK:
            raise ValueError(f"raw angle value {self.raw} is outside [0, {MASK}]")
        # numpy integers are stored as plain ints
        object.__setattr__(self, "raw", int(self.raw))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_raw(cls, value: int) -> "Angle":
        """Create an angle from any integer, reduced modulo one turn."""
        return cls(int(value) & MASK)

    @classmethod
    def from_degree(cls, degrees: float) -> "Angle":
        """Create an angle from degrees.

        Any finite value is accepted; it is first reduced into ``[0, 360)`` so
        that e.g. ``-10`` behaves as ``350``.
        """
        degrees = float(degrees)
        _check_finite(degrees, "degrees")
        return cls(_scale_to_turn(degrees, 360.0))

    @classmethod
    def from_radian(cls, radians: float) -> "Angle":
        """Create an angle from radians, reduced into ``[0, 2π)`` first."""
        radians = float(radians)
        _check_finite(radians, "radians")
        return cls(_scale_to_turn(radians, math.tau))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle((self.raw + other.raw) & MASK)

    def __neg__(self) -> "Angle":
        return Angle(-self.raw & MASK)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self + (-other)

    def __mul__(self, factor: Any) -> "Angle":
        if isinstance(factor, Angle):
            return NotImplemented
        if isinstance(factor, numbers.Integral):
            # exact
            return Angle((self.raw * int(factor)) & MASK)
        if isinstance(factor, numbers.Real):
            return self._scale(factor)
        return NotImplemented

    __rmul__ = __mul__

    def _scale(self, factor: numbers.Real) -> "Angle":
        """Multiply by a real factor in extended precision.

        The product is reduced modulo the turn before rounding, so the result
        has floating-point error proportional to the magnitude of the product.
        """
        _check_finite(float(factor), "scale factor")
        if not isinstance(factor, np.floating):
            factor = float(factor)
        value = np.longdouble(self.raw) * np.longdouble(factor)
        value = np.fmod(value, _TURN_LD)
        value = value if value >= 0 else value + _TURN_LD
        return Angle.from_raw(int(np.floor(value + np.longdouble(0.5))))

    def __mod__(self, other: "Angle") -> "Angle":
        """Remainder of ``self`` by an angle that evenly divides the turn.

        Only divisors of the full turn (22.5°, 90°, 180°, ...) are supported;
        anything else raises :class:`InvalidModulusDivisor` instead of
        returning a wrapped result that would be meaningless.
        """
        if not isinstance(other, Angle):
            return NotImplemented
        if other.raw == 0:
            raise InvalidModulusDivisor("modulus by the zero angle")
        times = MASK // other.raw + 1
        if other * times != Angle():
            raise InvalidModulusDivisor(f"{other!r} does not evenly divide a full turn")
        return Angle(self.raw % other.raw)

    # ------------------------------------------------------------------
    # Conversions & comparison helpers
    # ------------------------------------------------------------------
    @property
    def degrees(self) -> float:
        """Return the angle in degrees as a float in ``[0, 360)``."""
        return convert_to_degree(self)

    @property
    def radians(self) -> float:
        """Return the angle in radians as a float in ``[0, 2π)``."""
        return convert_to_radian(self)

    def is_near(self, other: "Angle", tolerance: "Angle") -> bool:
        return is_near(self, other, tolerance)

    def __str__(self) -> str:
        return f"{self.degrees:g}°"

    def __repr__(self) -> str:
        return f"Angle(raw={self.raw:#010x}, {self.degrees:.6f}°)"


def from_degree(degrees: float) -> Angle:
    return Angle.from_degree(degrees)


def from_radian(radians: float) -> Angle:
    return Angle.from_radian(radians)


_DEGREE_UNIT = Angle.from_degree(1.0).raw
_RADIAN_UNIT = Angle.from_radian(1.0).raw


def _check_target(ret_type: Any) -> None:
    if not (isinstance(ret_type, type) and issubclass(ret_type, numbers.Real)):
        raise TypeError(f"conversion target must be a real or integral type, got {ret_type!r}")


def convert_to_degree(angle: Angle, ret_type: type = float) -> Any:
    """Return ``angle`` in degrees as an instance of ``ret_type``.

    Real targets divide the raw value by the raw value of one degree in
    ``ret_type`` arithmetic, so the result has floating error (180° reads as
    ``179.9999955...`` with ``float``).  Integral targets return the truncated
    whole number of degrees, computed exactly.
    """
    _check_target(ret_type)
    if issubclass(ret_type, numbers.Integral):
        return ret_type((angle.raw * 360) // TURN)
    return ret_type(ret_type(angle.raw) / ret_type(_DEGREE_UNIT))


def convert_to_radian(angle: Angle, ret_type: type = float) -> Any:
    """Return ``angle`` in radians as an instance of ``ret_type``.

    Integral targets truncate towards zero (π reads as ``3``).
    """
    _check_target(ret_type)
    if issubclass(ret_type, numbers.Integral):
        return ret_type(angle.raw // _RADIAN_UNIT)
    return ret_type(ret_type(angle.raw) / ret_type(_RADIAN_UNIT))


def is_near(a: Angle, b: Angle, tolerance: Angle) -> bool:
    """Return ``True`` if ``a`` and ``b`` are less than ``tolerance`` apart.

    Both wraparound differences are checked.  They add up to a full turn, so
    the smaller one is the shorter arc and angles either side of 0° compare as
    close.  The bound is strict: a zero tolerance never matches.
    """
    return (a - b).raw < tolerance.raw or (b - a).raw < tolerance.raw
