"""Interactive Mandelbrot and Julia set explorer, with pixel buffers and an XPM reader."""

__version__ = "0.1.0"