"""Escape-time Mandelbrot and Julia sets rendered into an image buffer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from .image import Image
from .mathutils import scale, step

__all__ = [
    "WIDTH",
    "HEIGHT",
    "COLOR_BLACK",
    "COLOR_WHITE",
    "FractalKind",
    "Fractal",
]

WIDTH = 800
HEIGHT = 800
COLOR_BLACK = 0x000000
COLOR_WHITE = 0xFFFFFF

_PLANE_MIN = -2.0
_PLANE_MAX = 2.0


class FractalKind(enum.Enum):
    """The two fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass
class Fractal:
    """View state of a fractal: the set drawn, the visible region and the detail.

    For a Julia set ``julia`` is the constant added at every step; for the
    Mandelbrot set each point is its own constant.
    """

    kind: FractalKind
    julia: complex = 0j
    name: str = ""
    escape_value: float = 4.0
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    iterations: int = 40

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.kind.value

    @property
    def is_julia(self) -> bool:
        return self.kind is FractalKind.JULIA

    def _start(self, x: int, y: int, width: int, height: int) -> complex:
        real = scale(x, _PLANE_MIN, _PLANE_MAX, width) * self.zoom + self.shift_x
        imag = scale(y, _PLANE_MAX, _PLANE_MIN, height) * self.zoom + self.shift_y
        return complex(real, imag)

    def _escape_color(self, iteration: int) -> int:
        return int(scale(iteration, COLOR_BLACK, COLOR_WHITE, self.iterations))

    def pixel_color(self, x: int, y: int, width: int = WIDTH, height: int = HEIGHT) -> int:
        """Colour of pixel (x, y) in a width by height view.

        Points that escape are shaded from black to white by the iteration at
        which they escaped; points that never escape are white.
        """
        z = self._start(x, y, width, height)
        c = self.julia if self.is_julia else z
        for iteration in range(self.iterations):
            z = step(z, c)
            if z.real * z.real + z.imag * z.imag > self.escape_value:
                return self._escape_color(iteration)
        return COLOR_WHITE

    def render(self, width: int = WIDTH, height: int = HEIGHT) -> Image:
        """Draw the whole view into a new 32-bit image."""
        xs = scale(np.arange(width, dtype=np.float64), _PLANE_MIN, _PLANE_MAX, width)
        ys = scale(np.arange(height, dtype=np.float64), _PLANE_MAX, _PLANE_MIN, height)
        zr = np.tile(xs * self.zoom + self.shift_x, height)
        zi = np.repeat(ys * self.zoom + self.shift_y, width)
        if self.is_julia:
            cr = np.full(zr.shape, complex(self.julia).real)
            ci = np.full(zi.shape, complex(self.julia).imag)
        else:
            cr = zr.copy()
            ci = zi.copy()

        colors = np.full(width * height, COLOR_WHITE, dtype=np.uint32)
        positions = np.arange(width * height)
        with np.errstate(all="ignore"):
            for iteration in range(self.iterations):
                if positions.size == 0:
                    break
                new_r = zr * zr - zi * zi + cr
                new_i = 2 * zr * zi + ci
                escaped = new_r * new_r + new_i * new_i > self.escape_value
                if escaped.any():
                    colors[positions[escaped]] = self._escape_color(iteration)
                    remaining = ~escaped
                    new_r, new_i = new_r[remaining], new_i[remaining]
                    cr, ci = cr[remaining], ci[remaining]
                    positions = positions[remaining]
                zr, zi = new_r, new_i

        image = Image(width, height, 32, big_endian=False)
        image.data[:] = colors.astype("<u4").tobytes()
        return image