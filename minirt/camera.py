"""Pinhole camera and background/sphere shading."""

from __future__ import annotations

from dataclasses import dataclass, field

from .raytracing import sphere_hit
from .vector import Ray, Vec

WIDTH = 800
HEIGHT = 600

SPHERE_CENTER = Vec(0.0, 0.0, -1.0)
SPHERE_RADIUS = 0.5
SKY_TOP = Vec(0.5, 0.7, 1.0)
SKY_BOTTOM = Vec(1.0, 1.0, 1.0)


@dataclass
class Camera:
    """A camera at the origin looking down -z through a 2-unit-high viewport."""

    window_width: float = WIDTH
    window_height: float = HEIGHT
    viewport_height: float = 2.0
    focal_length: float = 1.0
    center: Vec = field(default_factory=Vec)

    aspect_ratio: float = field(init=False)
    viewport_width: float = field(init=False)
    viewport_u: Vec = field(init=False)
    viewport_v: Vec = field(init=False)
    delta_u: Vec = field(init=False)
    delta_v: Vec = field(init=False)
    viewport_upper_left: Vec = field(init=False)
    pixel_zero: Vec = field(init=False)

    def __post_init__(self) -> None:
        self.aspect_ratio = self.window_width / self.window_height
        self.viewport_width = self.viewport_height * self.aspect_ratio
        self.viewport_v = Vec(0.0, -self.viewport_height, 0.0)
        self.viewport_u = Vec(self.viewport_width, 0.0, 0.0)
        self.delta_v = self.viewport_v / self.window_height
        self.delta_u = self.viewport_u / self.window_width
        self.viewport_upper_left = (
            self.center
            - self.viewport_v / 2
            - self.viewport_u / 2
            - Vec(0.0, 0.0, self.focal_length)
        )
        self.pixel_zero = self.viewport_upper_left + (self.delta_v + self.delta_u) * 0.5

    def ray_for_pixel(self, row: int, col: int) -> Ray:
        """The ray from the camera centre through the centre of a pixel."""
        pixel_center = self.pixel_zero + (self.delta_v * row + self.delta_u * col)
        return Ray(self.center, pixel_center - self.center)


def ray_colour(ray: Ray) -> Vec:
    """Shade a ray: sphere normals where it hits, a vertical gradient otherwise."""
    t = sphere_hit(ray, SPHERE_CENTER, SPHERE_RADIUS)
    if t > 0.0:
        normal = (ray.at(t) - SPHERE_CENTER).unit()
        return (normal + 1) * 0.5
    a = ((ray.direction / ray.direction.length()).y + 1.0) * 0.5
    return SKY_BOTTOM * (1.0 - a) + SKY_TOP * a


def vec_to_colour(v: Vec) -> int:
    """Pack a colour with components in [0, 1] into 0xRRGGBB."""
    return int(v.x * 255.0) << 16 | int(v.y * 255.0) << 8 | int(v.z * 255.0)