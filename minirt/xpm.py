"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .colors import COLORS, NONE_COLOR
from .image import Image
from .wordtab import find, find_unquoted, split_words

TRANSPARENT_PIXEL = 0xFF000000
"""Raw pixel value stored for the colour ``None``."""

_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"[0-9a-fA-F]*")
_MAX_NAME = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass
class Xpm:
    """Parsed XPM contents: the palette and the rows of 0xRRGGBB values."""

    width: int
    height: int
    chars_per_pixel: int
    colors: dict[str, int] = field(default_factory=dict)
    rows: list[list[int]] = field(default_factory=list)


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that are not inside quotes.

    Comments are replaced by spaces, so the text keeps its length.
    """
    chars = text
    while (begin := find_unquoted(chars, "/*")) != -1:
        close = find(chars[begin + 2:], "*/")
        end = len(chars) if close == -1 else begin + 2 + close + 2
        chars = chars[:begin] + " " * (end - begin) + chars[end:]
    while (begin := find_unquoted(chars, "//")) != -1:
        newline = find(chars[begin + 2:], "\n")
        end = len(chars) if newline == -1 else begin + 2 + newline + 1
        chars = chars[:begin] + " " * (end - begin) + chars[end:]
    return chars


def extract_lines(text: str) -> list[str]:
    """The successive double-quoted strings of ``text``, without their quotes."""
    lines: list[str] = []
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return lines
        end = text.find('"', start + 1)
        if end == -1:
            return lines
        lines.append(text[start + 1:end])
        pos = end + 1


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    ``#rrggbb`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up among the named colours.
    ``None`` gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        digits = _HEX.match(name, 1).group(0)
        return int(digits, 16) if digits else 0
    if end is not None:
        name = f"{name} {end}"[:_MAX_NAME]
    return COLORS.get(name.lower(), 0)


def parse_xpm(lines: Iterable[str]) -> Xpm:
    """Parse XPM data lines: header, colour definitions, then pixel rows."""
    source = iter(lines)
    header = next(source, None)
    if header is None:
        raise XpmError("missing XPM header")
    values = [_atoi(word) for word in split_words(header)[:4]]
    if len(values) < 4 or any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {header!r}")
    width, height, ncolors, cpp = values

    keep_last = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next(source, None)
        if line is None:
            raise XpmError("missing colour definition")
        words = split_words(line[cpp:])
        try:
            spec = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if spec >= len(words):
            raise XpmError(f"colour definition without value: {line!r}")
        value = text_to_rgb(words[spec], words[spec + 1] if spec + 1 < len(words) else None)
        key = line[:cpp]
        if keep_last:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    rows: list[list[int]] = []
    for _ in range(height):
        line = next(source, None)
        if line is None:
            raise XpmError("missing pixel row")
        rows.append([colors.get(line[x * cpp:(x + 1) * cpp], 0) for x in range(width)])
    return Xpm(width, height, cpp, colors, rows)


def _store_raw(image: Image, x: int, y: int, value: int) -> None:
    opp = image.bits_per_pixel // 8
    start = y * image.size_line + x * opp
    value &= (1 << (8 * opp)) - 1
    image.data[start:start + opp] = value.to_bytes(opp, "big" if image.endian else "little")


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data lines; ``None`` pixels become 0xFF000000."""
    parsed = parse_xpm(lines)
    image = Image(parsed.width, parsed.height)
    for y, row in enumerate(parsed.rows):
        for x, color in enumerate(row):
            _store_raw(image, x, y, TRANSPARENT_PIXEL if color == NONE_COLOR else color)
    return image


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_bytes().decode("latin-1")
    return xpm_to_image(extract_lines(strip_comments(text)))