import pytest

from minirt.colors import COLORS, NONE_COLOR, lookup_color


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("green", 0xFF00),
        ("blue", 0xFF),
        ("ghost white", 0xF8F8FF),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_colours(name, value):
    assert lookup_color(name) == value


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_none_is_transparent_marker():
    assert lookup_color("none") == NONE_COLOR == -1
    assert lookup_color("None") == -1


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_colour_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")
    with pytest.raises(KeyError):
        lookup_color("")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_ramp_is_monotonic_and_neutral():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")
    for value in values:
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_table_values_fit_rgb_range():
    for name, value in COLORS.items():
        assert name == name.lower()
        if name != "none":
            assert 0 <= value <= 0xFFFFFF


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLORS["snow"] = 0  # type: ignore[index]
    assert lookup_color("snow") == 0xFFFAFA


def test_spaced_and_joined_names_match():
    assert lookup_color("alice blue") == lookup_color("aliceblue")
    assert lookup_color("dark red") == lookup_color("darkred")
    assert lookup_color("dark grey") == lookup_color("dark gray")