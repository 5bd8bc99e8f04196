# minirt

A small ray tracer. It casts one ray through every pixel of the view
(800 × 600 by default), shades a sphere by its surface normal, fills the rest
with a white-to-blue sky gradient, and writes the result as a binary PPM (P6)
image.

The package also has an in-memory pixel buffer, a reader for XPM images and a
table of the named X11 colours that XPM files refer to. It needs nothing
beyond the Python standard library (3.10 or later).

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Rendering from the command line

```
minirt
```

renders the scene into `miniRT.ppm` in the current directory. The output
file and the image size can be chosen:

```
minirt scene.ppm --width 400 --height 300
```

Width and height must be positive.

## Using it as a library

Vectors and rays (`minirt.vector`). `Vec` is an immutable dataclass that is
also used for points and RGB colours; arithmetic works with another `Vec` or
with a plain number, component by component.

```python
from minirt.vector import Vec, Ray

v = Vec(1.0, 2.0, 2.0)
v.length()            # 3.0
v.unit()              # v scaled to length 1
v.dot(Vec(1, 0, 0))   # 1.0
(v + Vec(1, 1, 1)) * 0.5
-v

r = Ray(Vec(0, 0, 0), Vec(0, 0, -1))
r.at(2.0)             # Vec(0, 0, -2)
```

Hitting a sphere: `minirt.raytracing.sphere_hit` returns the nearer ray
parameter at which the ray's line meets the sphere, or `-1.0` when it misses.

```python
from minirt.raytracing import sphere_hit

t = sphere_hit(r, Vec(0, 0, -1), 0.5)   # 0.5
```

The camera and shading (`minirt.camera`): `Camera` sits at the origin and
looks down −z through a viewport two units high; `Camera.ray_for_pixel(row,
col)` gives the ray through the centre of a pixel. `ray_colour` gives the
colour seen along a ray as a `Vec` with components in 0..1, and
`vec_to_colour` packs such a vector into a `0xRRGGBB` integer.

Rendering a scene into an image and saving it:

```python
from minirt.camera import Camera
from minirt.render import render

image = render(Camera(window_width=400, window_height=300))
image.save_ppm("scene.ppm")
```

### Images

`minirt.image.Image(width, height, pixel_format=None, endian=0)` holds pixels
in a byte buffer (`data`, `size_line`, `bits_per_pixel`). The default
`PixelFormat` is 24-bit depth with 0xFF0000 / 0x00FF00 / 0x0000FF masks,
stored as 32 bits per pixel; `endian` 0 is little-endian, 1 big-endian.

- `put_pixel(x, y, color)` stores a `0xRRGGBB` colour, converted with
  `PixelFormat.color_value`; points outside the image are ignored.
- `get_pixel(x, y)` returns the raw stored value and raises `IndexError`
  outside the image.
- `to_ppm()` returns the image as PPM bytes; `save_ppm(path)` writes them.

For depths below 24, `PixelFormat.color_value` packs the colour into the
channel masks, and `PixelFormat.shifts()` gives the shift and bit count of
each channel.

### XPM images and named colours

```python
from minirt.xpm import xpm_file_to_image, xpm_to_image

image = xpm_file_to_image("open.xpm")
image.get_pixel(0, 0)

image = xpm_to_image([
    "2 1 2 1",
    "a c #ff0000",
    "b c None",
    "ab",
])
```

`xpm_file_to_image` blanks out comments outside quoted strings
(`strip_comments`), takes the quoted strings as data lines
(`extract_lines`) and builds the image. `parse_xpm` returns the parsed
palette and rows without building an image. Malformed data (a bad header, a
missing colour definition or pixel row, a colour line without a `c` key)
raises `minirt.xpm.XpmError`.

Colours may be given as `#rrggbb` or by X11 name, case-insensitively; an
unknown name gives black. Pixels of colour `None` are stored as `0xFF000000`.
`minirt.colors.lookup_color("dark orange")` returns the packed RGB value of a
name (`-1` for `none`) and raises `KeyError` for an unknown one; the whole
table is `minirt.colors.COLORS`.

`minirt.wordtab` holds the helpers the reader uses: `split_words` (split on
spaces and tabs), `find` and `find_unquoted` (substring search, the latter
ignoring matches inside double quotes).

## What it does not do

There is no window and no event handling: images are rendered to memory and
written as PPM files, and nothing is shown on screen. The scene is fixed — one
sphere under a sky gradient — and there is no scene-file reader.