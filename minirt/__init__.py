"""A small ray tracer rendering to PPM, with a pixel buffer, XPM loading and named colours."""

__version__ = "0.1.0"