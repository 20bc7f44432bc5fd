"""An in-memory pixel buffer laid out as a ZPixmap with 32-bit row padding."""

from __future__ import annotations

__all__ = ["Image"]

_ROW_PAD_BITS = 32
_SUPPORTED_DEPTHS = (8, 16, 24, 32)


class Image:
    """A width by height image whose pixels are packed into ``data``.

    Each row takes ``line_length`` bytes; each pixel takes
    ``bits_per_pixel // 8`` bytes in little- or big-endian order.
    """

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        big_endian: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel not in _SUPPORTED_DEPTHS:
            raise ValueError(
                f"bits_per_pixel must be one of {_SUPPORTED_DEPTHS}, got {bits_per_pixel}"
            )
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = bool(big_endian)
        self.data = bytearray(self.line_length * height)

    @property
    def line_length(self) -> int:
        """Bytes per row, padded to a multiple of 32 bits."""
        bits = self.width * self.bits_per_pixel
        return (bits + _ROW_PAD_BITS - 1) // _ROW_PAD_BITS * (_ROW_PAD_BITS // 8)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.line_length + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low ``bits_per_pixel`` bits of ``color`` at (x, y)."""
        offset = self._offset(x, y)
        size = self.bytes_per_pixel
        value = color & ((1 << self.bits_per_pixel) - 1)
        self.data[offset : offset + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + self.bytes_per_pixel], self._byteorder)

    def __repr__(self) -> str:
        endian = "big" if self.big_endian else "little"
        return (
            f"Image({self.width}x{self.height}, {self.bits_per_pixel} bpp, {endian}-endian)"
        )