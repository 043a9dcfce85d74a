from __future__ import annotations

import pytest

from util.color import contrasting_line_color, normalize_color, parse_hex_color_str


def test_parse_hex_variants() -> None:
    assert parse_hex_color_str("#FF0000") == (1.0, 0.0, 0.0, 1.0)
    assert parse_hex_color_str("0x00FF0080") == pytest.approx((0.0, 1.0, 0.0, 128 / 255))
    assert parse_hex_color_str("0000ff") == (0.0, 0.0, 1.0, 1.0)


@pytest.mark.parametrize("bad", ["#FFF", "#GG0000", "12345"])
def test_parse_hex_invalid(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str(bad)


def test_normalize_color_ranges() -> None:
    assert normalize_color((0.5, 0.5, 0.5)) == (0.5, 0.5, 0.5, 1.0)
    assert normalize_color([255, 0, 0]) == (1.0, 0.0, 0.0, 1.0)
    assert normalize_color((255, 255, 255, 0)) == (1.0, 1.0, 1.0, 0.0)
    with pytest.raises(ValueError):
        normalize_color((1.0, 2.0))
    with pytest.raises(ValueError):
        normalize_color(42)


def test_contrasting_line_color() -> None:
    assert contrasting_line_color((1.0, 1.0, 1.0, 1.0)) == (0.0, 0.0, 0.0, 1.0)
    assert contrasting_line_color((0.0, 0.0, 0.0, 1.0)) == (1.0, 1.0, 1.0, 1.0)
