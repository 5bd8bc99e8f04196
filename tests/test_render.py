import pytest

from minirt.camera import Camera, ray_colour, vec_to_colour
from minirt.render import main, render


@pytest.fixture
def camera():
    return Camera(window_width=8, window_height=6)


def test_render_size(camera):
    image = render(camera)
    assert (image.width, image.height) == (8, 6)


def test_render_matches_shading(camera):
    image = render(camera)
    for row in range(6):
        for col in range(8):
            expected = vec_to_colour(ray_colour(camera.ray_for_pixel(row, col)))
            assert image.get_pixel(col, row) == expected


def test_render_corner_differs_from_centre(camera):
    image = render(camera)
    assert image.get_pixel(0, 0) != image.get_pixel(4, 3)
    assert image.get_pixel(0, 0) == vec_to_colour(ray_colour(camera.ray_for_pixel(0, 0)))


def test_main_writes_ppm(tmp_path):
    out = tmp_path / "scene.ppm"
    assert main([str(out), "--width", "4", "--height", "2"]) == 0
    data = out.read_bytes()
    header = b"P6\n4 2\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 4 * 2 * 3


def test_main_rejects_bad_size(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "x.ppm"), "--width", "0"])