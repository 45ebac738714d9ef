from __future__ import annotations

"""色変換の性質ベーステスト（hypothesis）。"""

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from palette import RGB, hex_to_hsl, hex_to_rgb, hsl_to_hex, rgb_to_hex

channel = st.integers(0, 255)
percent = st.integers(0, 100)
hue = st.integers(0, 359)


def _hue_dist(a: int, b: int) -> int:
    d = abs(a - b) % 360
    return min(d, 360 - d)


@given(r=channel, g=channel, b=channel)
def test_rgb_round_trip_is_exact(r, g, b):
    assert hex_to_rgb(rgb_to_hex(r, g, b)) == RGB(r, g, b)


@given(v=channel)
def test_gray_has_zero_saturation(v):
    hsl = hex_to_hsl(rgb_to_hex(v, v, v))
    assert hsl.s == 0
    assert hsl.h == 0


@given(s=percent, l=percent)
def test_hue_360_and_negative_wrap(s, l):  # noqa: E741
    assert hsl_to_hex(360, s, l) == hsl_to_hex(0, s, l)
    assert hsl_to_hex(-30, s, l) == hsl_to_hex(330, s, l)


@given(h=st.integers(-1080, 1080), k=st.integers(-3, 3), s=percent, l=percent)
def test_hue_is_periodic(h, k, s, l):  # noqa: E741
    assert hsl_to_hex(h + 360 * k, s, l) == hsl_to_hex(h, s, l)


@given(h=hue, over=st.integers(101, 10_000), l=percent)
def test_saturation_above_range_clamps_to_100(h, over, l):  # noqa: E741
    assert hsl_to_hex(h, over, l) == hsl_to_hex(h, 100, l)


@given(h=hue, under=st.integers(-10_000, -1), l=percent)
def test_saturation_below_range_clamps_to_0(h, under, l):  # noqa: E741
    assert hsl_to_hex(h, under, l) == hsl_to_hex(h, 0, l)


@given(h=hue, s=percent, over=st.integers(101, 10_000))
def test_lightness_above_range_clamps_to_100(h, s, over):
    assert hsl_to_hex(h, s, over) == hsl_to_hex(h, s, 100)


@given(h=hue, s=percent, under=st.integers(-10_000, -1))
def test_lightness_below_range_clamps_to_0(h, s, under):
    assert hsl_to_hex(h, s, under) == hsl_to_hex(h, s, 0)


# 彩度/明度が低いと 8bit 量子化で色相が失われるため、有彩色の中間域に限定
@given(h=hue, s=st.integers(60, 100), l=st.integers(40, 60))
def test_hsl_round_trip_within_one_unit(h, s, l):  # noqa: E741
    got = hex_to_hsl(hsl_to_hex(h, s, l))
    assert _hue_dist(got.h, h) <= 1
    assert abs(got.s - s) <= 1
    assert abs(got.l - l) <= 1
