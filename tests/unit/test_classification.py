"""Unit tests for the size classification policy and tier styles."""

from __future__ import annotations

import math

import pytest

from parcel_kml.geometry.classification import (
    TIER_STYLES,
    SizeTier,
    TierStyle,
    style_for,
    tier,
)


class TestTierBoundaries:
    @pytest.mark.parametrize(
        ("area", "expected"),
        [
            (0.0, SizeTier.SMALL),
            (5.5, SizeTier.SMALL),
            (20.0, SizeTier.SMALL),
            (20.01, SizeTier.MEDIUM),
            (35.0, SizeTier.MEDIUM),
            (50.0, SizeTier.MEDIUM),
            (50.01, SizeTier.LARGE),
            (1_200.0, SizeTier.LARGE),
        ],
    )
    def test_thresholds(self, area: float, expected: SizeTier) -> None:
        assert tier(area) is expected

    def test_negative_area_is_small(self) -> None:
        assert tier(-3.0) is SizeTier.SMALL

    def test_nan_area_is_small(self) -> None:
        assert tier(math.nan) is SizeTier.SMALL


class TestTierStyles:
    def test_every_tier_has_a_style(self) -> None:
        assert set(TIER_STYLES) == set(SizeTier)

    @pytest.mark.parametrize(
        ("size_tier", "style_id", "line", "fill"),
        [
            (SizeTier.SMALL, "smallFarm", "ff34d399", "6634d399"),
            (SizeTier.MEDIUM, "mediumFarm", "ff10b981", "6610b981"),
            (SizeTier.LARGE, "largeFarm", "ff059669", "66059669"),
        ],
    )
    def test_style_values(self, size_tier: SizeTier, style_id: str, line: str, fill: str) -> None:
        style = style_for(size_tier)
        assert style == TierStyle(style_id, line, fill)

    def test_line_is_opaque_and_fill_translucent(self) -> None:
        for style in TIER_STYLES.values():
            assert style.line_color.startswith("ff")
            assert style.fill_color.startswith("66")
            assert style.line_color[2:] == style.fill_color[2:]

    def test_style_url(self) -> None:
        assert style_for(SizeTier.MEDIUM).style_url == "#mediumFarm"
