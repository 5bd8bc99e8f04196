"""Render the scene and write it to a PPM file."""

from __future__ import annotations

import argparse

from .camera import HEIGHT, WIDTH, Camera, ray_colour, vec_to_colour
from .image import Image


def render(camera: Camera) -> Image:
    """Trace one ray per pixel through ``camera`` and return the image."""
    width = int(camera.window_width)
    height = int(camera.window_height)
    image = Image(width, height)
    for row in range(height):
        for col in range(width):
            colour = ray_colour(camera.ray_for_pixel(row, col))
            image.put_pixel(col, row, vec_to_colour(colour))
    return image


def main(argv: list[str] | None = None) -> int:
    """Render the scene and save it as a binary PPM."""
    parser = argparse.ArgumentParser(prog="miniRT", description="Render the scene to a PPM image.")
    parser.add_argument("output", nargs="?", default="miniRT.ppm", help="output file")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    camera = Camera(window_width=args.width, window_height=args.height)
    render(camera).save_ppm(args.output)
    return 0