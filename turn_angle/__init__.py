"""Fixed-point angles that wrap around a full turn.

The package exposes :class:`Angle` together with the degree/radian factory
and conversion functions and the error types raised by angle arithmetic.
"""

from .angle import (
    MASK,
    TURN,
    Angle,
    AngleError,
    InvalidModulusDivisor,
    NonFiniteAngleError,
    convert_to_degree,
    convert_to_radian,
    from_degree,
    from_radian,
    is_near,
)

__all__ = [
    "Angle",
    "AngleError",
    "InvalidModulusDivisor",
    "NonFiniteAngleError",
    "MASK",
    "TURN",
    "convert_to_degree",
    "convert_to_radian",
    "from_degree",
    "from_radian",
    "is_near",
]
