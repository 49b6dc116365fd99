"""Pixel colour conversion and in-memory 32-bit images."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

__all__ = ["RgbLayout", "Image", "DataAddress", "new_image"]


def _mask_position(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in *mask*."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


@dataclass(frozen=True)
class RgbLayout:
    """Where each colour channel sits in a pixel value of a true-colour visual."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(cls, red_mask: int, green_mask: int, blue_mask: int) -> RgbLayout:
        """Build a layout from the visual's red, green and blue masks."""
        red = _mask_position(red_mask)
        green = _mask_position(green_mask)
        blue = _mask_position(blue_mask)
        return cls(*red, *green, *blue)

    def convert(self, color: int, depth: int) -> int:
        """Turn a 0xRRGGBB colour into a pixel value for a display of *depth* bits.

        Displays of 24 bits or more take the colour unchanged.
        """
        if depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


class DataAddress(NamedTuple):
    """The raw pixel buffer of an image and how to address it."""

    data: bytearray
    bits_per_pixel: int
    size_line: int
    endian: int


@dataclass
class Image:
    """A 32-bit-per-pixel image held in memory.

    *endian* is 0 for little-endian pixel storage and 1 for big-endian.
    """

    width: int
    height: int
    endian: int = 0
    bits_per_pixel: int = field(default=32, init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {self.endian}")
        # Room for 32 pixels of padding per row, as the display buffer has.
        self.data = bytearray((self.width + 32) * self.height * 4)

    @property
    def size_line(self) -> int:
        """Number of bytes from one row to the next."""
        return self.width * self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * (self.bits_per_pixel // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store *color* at (x, y)."""
        offset = self._offset(x, y)
        self.data[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + 4], self._byteorder)

    def data_addr(self) -> DataAddress:
        """Return the pixel buffer with its bits per pixel, row size and endian."""
        return DataAddress(self.data, self.bits_per_pixel, self.size_line, self.endian)


def new_image(width: int, height: int) -> Image:
    """Create a blank (all black) image of the given size."""
    return Image(width, height)