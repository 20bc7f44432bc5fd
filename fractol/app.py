"""Command-line entry point: choose a fractal and explore it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import numpy as np

from .events import Key, handle_button, handle_key
from .fractal import HEIGHT, WIDTH, Fractal, FractalKind
from .image import Image
from .strutils import parse_double, strncmp

__all__ = ["MANDELBROT_USAGE", "JULIA_USAGE", "UsageError", "parse_args", "run", "main"]

MANDELBROT_USAGE = "\n\tUsage: ./fractol [mandelbrot]\n\n"
JULIA_USAGE = "\n\tUsage: ./fractol [julia] [real] [i]\n\n"


class UsageError(Exception):
    """Raised when the command-line arguments select no fractal."""


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build a fractal from the arguments that follow the program name.

    ``mandelbrot`` selects the Mandelbrot set; ``julia REAL IMAG`` selects
    the Julia set for that constant.
    """
    args = list(argv)
    if len(args) == 1 and strncmp(args[0], "mandelbrot", 10) == 0:
        return Fractal(FractalKind.MANDELBROT, name=args[0])
    if len(args) == 3 and strncmp(args[0], "julia", 5) == 0:
        constant = complex(parse_double(args[1]), parse_double(args[2]))
        return Fractal(FractalKind.JULIA, julia=constant, name=args[0])
    if len(args) == 1 and strncmp(args[0], "julia", 5) == 0:
        raise UsageError(JULIA_USAGE)
    raise UsageError(MANDELBROT_USAGE)


def _surface(image: Image):
    import pygame

    words = np.frombuffer(bytes(image.data), dtype="<u4")
    pixels = words.reshape(image.height, image.line_length // 4)[:, : image.width]
    rgb = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    ).astype(np.uint8)
    return pygame.image.frombuffer(rgb.tobytes(), (image.width, image.height), "RGB")


def _draw(screen, fractal: Fractal) -> None:
    import pygame

    screen.blit(_surface(fractal.render(WIDTH, HEIGHT)), (0, 0))
    pygame.display.flip()


def run(fractal: Fractal) -> int:
    """Show ``fractal`` in a window until it is closed or Escape is pressed."""
    import pygame

    key_map = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_EQUALS: Key.EQUAL,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_MINUS: Key.MINUS,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(fractal.name)
        _draw(screen, fractal)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                key = key_map.get(event.key)
                if key is not None and not handle_key(fractal, key):
                    return 0
                _draw(screen, fractal)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                handle_button(fractal, event.button)
                _draw(screen, fractal)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and run the viewer; print usage and fail on bad input."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError as error:
        sys.stderr.write(str(error))
        return 1
    return run(fractal)