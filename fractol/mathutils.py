"""Coordinate scaling and the quadratic iteration step used for escape-time fractals."""

from __future__ import annotations

__all__ = ["scale", "step"]


def scale(value: float, new_min: float, new_max: float, old_max: float) -> float:
    """Map ``value`` from the range [0, old_max] linearly onto [new_min, new_max]."""
    return (new_max - new_min) * value / old_max + new_min


def step(z: complex, c: complex) -> complex:
    """Return ``z * z + c``, the next point of the escape-time iteration."""
    z = complex(z)
    c = complex(c)
    squared_real = z.real * z.real - z.imag * z.imag
    squared_imag = 2 * z.real * z.imag
    return complex(squared_real + c.real, squared_imag + c.imag)