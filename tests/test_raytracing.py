import math

from minirt.raytracing import sphere_hit
from minirt.vector import Ray, Vec


def test_miss_returns_minus_one():
    ray = Ray(Vec(0, 0, 0), Vec(0, 1, 0))
    assert sphere_hit(ray, Vec(0, 0, -5), 1.0) == -1


def test_hit_point_lies_on_sphere():
    center = Vec(0.3, -0.2, -4.0)
    radius = 1.25
    ray = Ray(Vec(0, 0, 0), Vec(0.1, 0.0, -1.0))
    t = sphere_hit(ray, center, radius)
    assert t > 0
    assert math.isclose((ray.at(t) - center).length(), radius)


def test_hit_is_nearer_intersection():
    center = Vec(0, 0, -3)
    radius = 1.0
    ray = Ray(Vec(0, 0, 0), Vec(0, 0, -1))
    t = sphere_hit(ray, center, radius)
    # the nearer point lies between the origin and the centre
    assert ray.at(t).z > center.z


def test_hit_independent_of_direction_scale_in_points():
    center = Vec(1, 1, -6)
    radius = 2.0
    short = Ray(Vec(0, 0, 0), Vec(0.1, 0.1, -1))
    long = Ray(Vec(0, 0, 0), Vec(0.1, 0.1, -1) * 3)
    p1 = short.at(sphere_hit(short, center, radius))
    p2 = long.at(sphere_hit(long, center, radius))
    assert math.isclose(p1.x, p2.x)
    assert math.isclose(p1.y, p2.y)
    assert math.isclose(p1.z, p2.z)


def test_sphere_behind_ray_gives_negative_parameter():
    ray = Ray(Vec(0, 0, 0), Vec(0, 0, 1))
    t = sphere_hit(ray, Vec(0, 0, -3), 1.0)
    assert t < 0
    assert t != -1