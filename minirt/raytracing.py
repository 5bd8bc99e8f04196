"""Ray and object intersection."""

from __future__ import annotations

import math

from .vector import Ray, Vec

MISS = -1.0


def sphere_hit(ray: Ray, center: Vec, radius: float) -> float:
    """Return the nearer ray parameter at which ``ray`` meets the sphere.

    Returns ``-1.0`` when the ray's line misses the sphere.
    """
    oc = center - ray.origin
    a = ray.direction.length_squared()
    h = ray.direction.dot(oc)
    c = oc.length_squared() - radius * radius
    discriminant = h * h - a * c
    if discriminant < 0:
        return MISS
    return (h - math.sqrt(discriminant)) / a