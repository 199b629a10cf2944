import pytest

from juliaset.errors import ConfigurationError
from juliaset.gradient import (
    ANCHOR_COLORS,
    ANCHOR_WAVELENGTHS,
    BLACK,
    _anchor_table,
    color_blend_norm,
    hex_to_rgb,
    wavelength_to_rgb,
)


def test_hex_to_rgb_decodes_channels():
    assert hex_to_rgb("#05F2DB") == (5, 242, 219)
    assert hex_to_rgb("#000000") == (0, 0, 0)
    assert hex_to_rgb("#f205cb") == (242, 5, 203)


@pytest.mark.parametrize("bad", ["#05F2D", "05F2DBA", "#05G2DB", "#+5F2DB", "", "#05F2DB0"])
def test_hex_to_rgb_rejects_malformed(bad):
    with pytest.raises(ConfigurationError):
        hex_to_rgb(bad)


def test_anchor_table_has_black_boundaries():
    assert len(ANCHOR_COLORS) == len(ANCHOR_WAVELENGTHS) == 7
    assert ANCHOR_COLORS[0] == BLACK
    assert ANCHOR_COLORS[-1] == BLACK
    assert ANCHOR_COLORS[1] == (5, 242, 219)


def test_short_anchor_table_is_padded_at_the_front():
    table = _anchor_table(("#05F2DB", "#05C7F2"))
    assert table == (BLACK,) * 5 + ((5, 242, 219), (5, 199, 242))


@pytest.mark.parametrize("wavelength", [-5, 0, 200, 379, 781, 1000])
def test_out_of_range_is_black(wavelength):
    assert wavelength_to_rgb(wavelength) == BLACK


def test_lower_bound_is_first_anchor():
    assert wavelength_to_rgb(380) == (0, 0, 0)
    assert wavelength_to_rgb(780) == (0, 0, 0)


@pytest.mark.parametrize("index", range(1, 6))
def test_anchor_boundaries_return_anchor_color(index):
    assert wavelength_to_rgb(ANCHOR_WAVELENGTHS[index]) == ANCHOR_COLORS[index]


def test_interpolation_truncates_each_channel():
    # 30/59 of the way from black to #05F2DB
    assert wavelength_to_rgb(410) == (2, 123, 111)
    # 1/50 of the way from #05F2DB to #05C7F2
    assert wavelength_to_rgb(440) == (5, 241, 219)


def test_color_blend_norm_endpoints():
    assert color_blend_norm(0.0, 10.0, 0.0, (10, 20, 30), (30, 20, 10)) == (10, 20, 30)
    assert color_blend_norm(0.0, 10.0, 10.0, (10, 20, 30), (30, 20, 10)) == (30, 20, 10)
    assert color_blend_norm(0.0, 10.0, 5.0, (10, 20, 30), (31, 20, 10)) == (20, 20, 20)


@pytest.mark.parametrize("band", range(6))
def test_channels_move_monotonically_within_a_band(band):
    start, end = ANCHOR_WAVELENGTHS[band], ANCHOR_WAVELENGTHS[band + 1]
    first, last = ANCHOR_COLORS[band], ANCHOR_COLORS[band + 1]
    colors = [wavelength_to_rgb(w) for w in range(start + 1, end + 1)]
    for channel in range(3):
        values = [color[channel] for color in colors]
        if last[channel] >= first[channel]:
            assert values == sorted(values)
        else:
            assert values == sorted(values, reverse=True)
