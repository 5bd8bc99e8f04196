"""In-memory pixel images with a configurable visual pixel format."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _mask_shift_and_bits(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = (~run & (run + 1)).bit_length() - 1
    return shift, bits


@dataclass(frozen=True)
class PixelFormat:
    """Depth and channel masks of a TrueColor visual."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF

    def shifts(self) -> tuple[int, int, int, int, int, int]:
        """Shift and bit count of red, green and blue, in that order."""
        rs, rb = _mask_shift_and_bits(self.red_mask)
        gs, gb = _mask_shift_and_bits(self.green_mask)
        bs, bb = _mask_shift_and_bits(self.blue_mask)
        return rs, rb, gs, gb, bs, bb

    def color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour into this format's pixel value."""
        if self.depth >= 24:
            return color
        rs, rb, gs, gb, bs, bb = self.shifts()
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - rb)) << rs)
            + ((green >> (16 - gb)) << gs)
            + ((blue >> (16 - bb)) << bs)
        )

    def _rgb(self, pixel: int) -> tuple[int, int, int]:
        rs, rb, gs, gb, bs, bb = self.shifts()

        def channel(shift: int, bits: int) -> int:
            top = (1 << bits) - 1
            return ((pixel >> shift) & top) * 255 // top

        return channel(rs, rb), channel(gs, gb), channel(bs, bb)

    @property
    def bits_per_pixel(self) -> int:
        if self.depth > 16:
            return 32
        if self.depth > 8:
            return 16
        return 8


class Image:
    """A ZPixmap-style image held in a byte buffer."""

    def __init__(
        self,
        width: int,
        height: int,
        pixel_format: PixelFormat | None = None,
        endian: int = 0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if endian not in (0, 1):
            raise ValueError("endian must be 0 (little) or 1 (big)")
        self.width = width
        self.height = height
        self.format = pixel_format or PixelFormat()
        self.endian = endian
        self.bits_per_pixel = self.format.bits_per_pixel
        self.size_line = width * self.bits_per_pixel // 8
        self.data = bytearray(self.size_line * height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * (self.bits_per_pixel // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel from a 0xRRGGBB colour; points outside are clipped."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        opp = self.bits_per_pixel // 8
        value = self.format.color_value(color) & ((1 << self.bits_per_pixel) - 1)
        start = self._offset(x, y)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """The raw pixel value stored at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        opp = self.bits_per_pixel // 8
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._byteorder)

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6)."""
        out = bytearray(f"P6\n{self.width} {self.height}\n255\n".encode("ascii"))
        for y in range(self.height):
            for x in range(self.width):
                out.extend(self.format._rgb(self.get_pixel(x, y)))
        return bytes(out)

    def save_ppm(self, path: str | os.PathLike[str]) -> None:
        with open(path, "wb") as fh:
            fh.write(self.to_ppm())