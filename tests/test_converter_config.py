"""
Unit tests for ConverterConfig validation.
"""

import dataclasses
import math

import pytest

from pdf_converter import A4, LETTER, ConfigurationError, ConverterConfig


class TestConverterConfig:

    def test_init_when_defaults_then_documented_values(self):
        """Defaults: 150 DPI, 10 mm margin, no title, A4."""
        # Act
        config = ConverterConfig()

        # Assert
        assert config.dpi == 150.0
        assert config.margin_mm == 10.0
        assert config.title is None
        assert config.page_size == A4
        assert config.embed_timestamps is False

    @pytest.mark.parametrize("dpi", [0, 0.0, -1, -150.0, math.inf, math.nan])
    def test_init_when_dpi_invalid_then_raises(self, dpi):
        """Non-positive DPI fails at construction time."""
        with pytest.raises(ConfigurationError, match="dpi"):
            ConverterConfig(dpi=dpi)

    def test_init_when_dpi_not_number_then_raises(self):
        with pytest.raises(ConfigurationError):
            ConverterConfig(dpi="300")

    @pytest.mark.parametrize("margin", ["5", None, True])
    def test_init_when_margin_not_number_then_raises(self, margin):
        with pytest.raises(ConfigurationError, match="margin_mm must be a number"):
            ConverterConfig(margin_mm=margin)

    def test_init_when_negative_margin_then_raises(self):
        with pytest.raises(ConfigurationError, match="margin_mm"):
            ConverterConfig(margin_mm=-1.0)

    def test_init_when_margins_exceed_page_then_raises(self):
        """Margins that leave no printable area are rejected."""
        with pytest.raises(ConfigurationError, match="Margins exceed page width"):
            ConverterConfig(margin_mm=105.0)

    def test_configuration_error_when_raised_then_is_value_error(self):
        with pytest.raises(ValueError):
            ConverterConfig(dpi=0)

    def test_frozen_when_assigned_then_raises(self):
        config = ConverterConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.dpi = 300.0

    def test_with_overrides_when_valid_then_new_instance(self):
        # Arrange
        config = ConverterConfig()

        # Act
        updated = config.with_overrides(dpi=300.0, page_size=LETTER)

        # Assert
        assert updated.dpi == 300.0
        assert updated.page_size == LETTER
        assert config.dpi == 150.0

    def test_with_overrides_when_invalid_then_raises(self):
        with pytest.raises(ConfigurationError):
            ConverterConfig().with_overrides(dpi=-1)

    def test_printable_area_when_defaults_then_page_minus_margins(self):
        config = ConverterConfig()
        assert config.printable_width_mm == 190.0
        assert config.printable_height_mm == 277.0
