"""
Unit tests for the page fitting algorithm.

Covers aspect ratio preservation, margin containment, the no-upscale
clamp and centring.
"""

import math

import pytest

from pdf_converter import ConfigurationError, ConverterConfig, InvalidImageDimensionsError
from pdf_converter.layout import A4, LETTER, PageSize, fit, mm_to_pt

SIZES = [
    (1, 1),
    (1, 100000),
    (100000, 1),
    (200, 100),
    (100, 200),
    (1240, 1754),
    (4000, 3000),
    (3000, 4000),
    (100000, 100000),
    (7, 13),
]

CONFIGS = [
    ConverterConfig(),
    ConverterConfig(dpi=1.0),
    ConverterConfig(dpi=72.0, margin_mm=0.0),
    ConverterConfig(dpi=300.0, margin_mm=25.0),
    ConverterConfig(dpi=0.5, margin_mm=50.0, page_size=LETTER),
    ConverterConfig(dpi=600.0, margin_mm=5.0, page_size=A4.landscape()),
]

TOLERANCE = 1e-9


def _printable_box(config):
    margin = mm_to_pt(config.margin_mm)
    page = config.page_size
    return margin, margin, page.width_pt - margin, page.height_pt - margin


class TestFitProperties:
    """Invariants that must hold for every size and configuration."""

    @pytest.mark.parametrize("config", CONFIGS)
    @pytest.mark.parametrize("size", SIZES)
    def test_fit_when_any_size_then_aspect_ratio_preserved(self, size, config):
        """Placed width/height should equal pixel width/height."""
        # Arrange
        w, h = size

        # Act
        rect = fit(w, h, config)

        # Assert
        assert math.isclose(rect.width / rect.height, w / h, rel_tol=1e-9)

    @pytest.mark.parametrize("config", CONFIGS)
    @pytest.mark.parametrize("size", SIZES)
    def test_fit_when_any_size_then_inside_printable_area(self, size, config):
        """No part of the rectangle may enter the margin band."""
        # Arrange
        left, bottom, right, top = _printable_box(config)

        # Act
        rect = fit(*size, config)

        # Assert
        assert rect.x >= left - TOLERANCE
        assert rect.y >= bottom - TOLERANCE
        assert rect.right <= right + TOLERANCE
        assert rect.top <= top + TOLERANCE

    @pytest.mark.parametrize("config", CONFIGS)
    @pytest.mark.parametrize("size", SIZES)
    def test_fit_when_any_size_then_never_upscaled(self, size, config):
        """Placed size should never exceed the natural size at config.dpi."""
        # Act
        rect = fit(*size, config)

        # Assert
        assert rect.scale <= 1.0
        assert rect.width <= size[0] / config.dpi * 72.0 * (1 + TOLERANCE)

    @pytest.mark.parametrize("config", CONFIGS)
    @pytest.mark.parametrize("size", SIZES)
    def test_fit_when_any_size_then_centred(self, size, config):
        """Gaps on opposite sides of the printable area should match."""
        # Arrange
        left, bottom, right, top = _printable_box(config)

        # Act
        rect = fit(*size, config)

        # Assert
        assert math.isclose(rect.x - left, right - rect.right, abs_tol=1e-6)
        assert math.isclose(rect.y - bottom, top - rect.top, abs_tol=1e-6)


class TestFitValues:
    """Concrete expected placements."""

    def test_fit_when_small_image_then_natural_size(self):
        """150x150 px at 150 DPI is one inch square, well within A4."""
        # Act
        rect = fit(150, 150, ConverterConfig(dpi=150.0))

        # Assert
        assert rect.scale == 1.0
        assert rect.width == pytest.approx(72.0)
        assert rect.height == pytest.approx(72.0)
        assert rect.x == pytest.approx((A4.width_pt - 72.0) / 2)
        assert rect.y == pytest.approx((A4.height_pt - 72.0) / 2)

    def test_fit_when_wide_image_then_fills_printable_width(self):
        """An oversized landscape image is limited by the printable width."""
        # Arrange
        config = ConverterConfig(dpi=150.0, margin_mm=10.0)

        # Act
        rect = fit(6000, 3000, config)

        # Assert
        assert rect.width == pytest.approx(mm_to_pt(190.0))
        assert rect.height == pytest.approx(mm_to_pt(95.0))
        assert rect.x == pytest.approx(mm_to_pt(10.0))

    def test_fit_when_tall_image_then_fills_printable_height(self):
        """An oversized portrait image is limited by the printable height."""
        # Arrange
        config = ConverterConfig(dpi=150.0, margin_mm=10.0)

        # Act
        rect = fit(1000, 20000, config)

        # Assert
        assert rect.height == pytest.approx(mm_to_pt(277.0))
        assert rect.y == pytest.approx(mm_to_pt(10.0))
        assert rect.scale < 1.0

    def test_fit_when_page_given_then_overrides_config_page(self):
        """Explicit page argument wins over config.page_size."""
        # Arrange
        config = ConverterConfig(margin_mm=0.0)
        page = PageSize(100.0, 100.0)

        # Act
        rect = fit(100000, 100000, config, page)

        # Assert
        assert rect.width == pytest.approx(mm_to_pt(100.0))

    def test_fit_when_called_twice_then_identical(self):
        """fit() is pure."""
        config = ConverterConfig(dpi=96.0)
        assert fit(640, 480, config) == fit(640, 480, config)


class TestFitErrors:
    """Invalid dimensions."""

    @pytest.mark.parametrize("size", [(0, 100), (100, 0), (0, 0), (-5, 10)])
    def test_fit_when_zero_dimension_then_raises(self, size):
        """Zero-sized images cannot be placed."""
        with pytest.raises(InvalidImageDimensionsError):
            fit(*size, ConverterConfig())

    def test_fit_when_margins_exceed_given_page_width_then_raises(self):
        """A page passed directly is checked against the margins too."""
        # Arrange
        config = ConverterConfig(margin_mm=60.0)
        page = PageSize(100.0, 100.0)

        # Act / Assert
        with pytest.raises(ConfigurationError, match="Margins exceed page width"):
            fit(100, 100, config, page)

    def test_fit_when_margins_exceed_given_page_height_then_raises(self):
        config = ConverterConfig(margin_mm=30.0)
        with pytest.raises(ConfigurationError, match="Margins exceed page height"):
            fit(100, 100, config, PageSize(100.0, 50.0))
