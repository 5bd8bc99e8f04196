import math

from minirt.camera import HEIGHT, WIDTH, Camera, ray_colour, vec_to_colour
from minirt.vector import Ray, Vec


def test_default_dimensions():
    cam = Camera()
    assert cam.window_width == WIDTH
    assert cam.window_height == HEIGHT
    assert cam.aspect_ratio == WIDTH / HEIGHT
    assert cam.viewport_height == 2.0
    assert cam.focal_length == 1.0


def test_viewport_width_follows_aspect_ratio():
    cam = Camera()
    assert math.isclose(cam.viewport_width, cam.viewport_height * cam.aspect_ratio)


def test_deltas_span_viewport():
    cam = Camera()
    full_u = cam.delta_u * cam.window_width
    full_v = cam.delta_v * cam.window_height
    assert math.isclose(full_u.x, cam.viewport_u.x)
    assert math.isclose(full_v.y, cam.viewport_v.y)


def test_rays_hit_image_plane_at_focal_length():
    cam = Camera()
    for row, col in [(0, 0), (HEIGHT - 1, WIDTH - 1), (123, 456)]:
        ray = cam.ray_for_pixel(row, col)
        assert ray.origin == cam.center
        assert math.isclose(ray.direction.z, -cam.focal_length)


def test_corner_rays_are_symmetric():
    cam = Camera()
    first = cam.ray_for_pixel(0, 0).direction
    last = cam.ray_for_pixel(HEIGHT - 1, WIDTH - 1).direction
    assert math.isclose(first.x, -last.x)
    assert math.isclose(first.y, -last.y)


def test_rows_go_down_and_columns_go_right():
    cam = Camera()
    base = cam.ray_for_pixel(10, 10).direction
    assert cam.ray_for_pixel(11, 10).direction.y < base.y
    assert cam.ray_for_pixel(10, 11).direction.x > base.x


def test_sky_straight_up_is_top_colour():
    colour = ray_colour(Ray(Vec(), Vec(0, 1, 0)))
    assert colour == Vec(0.5, 0.7, 1.0)


def test_sky_straight_down_is_white():
    colour = ray_colour(Ray(Vec(), Vec(0, -1, 0)))
    assert colour == Vec(1.0, 1.0, 1.0)


def test_sphere_front_facing_normal():
    colour = ray_colour(Ray(Vec(), Vec(0, 0, -1)))
    assert colour == Vec(0.5, 0.5, 1.0)


def test_colours_in_unit_range_across_image():
    cam = Camera(window_width=40, window_height=30)
    for row in range(0, 30, 3):
        for col in range(0, 40, 4):
            c = ray_colour(cam.ray_for_pixel(row, col))
            assert all(0.0 <= comp <= 1.0 for comp in c)


def test_vec_to_colour_white_and_black():
    assert vec_to_colour(Vec(1.0, 1.0, 1.0)) == 0xFFFFFF
    assert vec_to_colour(Vec(0.0, 0.0, 0.0)) == 0


def test_vec_to_colour_channels():
    assert vec_to_colour(Vec(0, 0, 1)) == 255
    assert vec_to_colour(Vec(0, 1, 0)) == 255 << 8
    assert vec_to_colour(Vec(1, 0, 0)) == 255 << 16


def test_vec_to_colour_truncates():
    assert vec_to_colour(Vec(0, 0, 0.999)) < vec_to_colour(Vec(0, 0, 1))