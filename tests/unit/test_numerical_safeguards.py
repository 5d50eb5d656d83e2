"""
Тесты для модуля Numerical Safeguards и Volumetrics

Проверяет:
1. Именованные толерантности (объём и вес не унифицированы)
2. NaN/Inf проверки и санитизацию
3. Безопасное деление
4. Сравнения с толерантностью и clamp
5. Валидацию параметров
6. Конверсию мм → м³ и производные величины
"""

import math

import pytest

from counterweight.core.math import (
    SINGLE_MATCH_TOLERANCE_KG,
    VOLUME_TOLERANCE_M3,
    all_valid_floats,
    box_volume_m3,
    clamp,
    footprint_m2,
    is_close_abs,
    is_valid_float,
    mm_to_m,
    piece_weight_kg,
    safe_divide,
    sanitize_float,
    segment_height_mm,
    validate_non_negative,
    validate_positive,
    volume_share_pct,
    weight_kg,
    within_range,
)

# =============================================================================
# ТОЛЕРАНТНОСТИ
# =============================================================================


class TestTolerances:
    """Тесты для констант толерантности"""

    def test_values(self) -> None:
        assert VOLUME_TOLERANCE_M3 == 1e-6
        assert SINGLE_MATCH_TOLERANCE_KG == 0.1

    def test_not_unified(self) -> None:
        """Две толерантности разного масштаба"""
        assert VOLUME_TOLERANCE_M3 != SINGLE_MATCH_TOLERANCE_KG


# =============================================================================
# NaN/Inf
# =============================================================================


class TestFloatValidity:
    """Тесты для is_valid_float / sanitize_float"""

    @pytest.mark.parametrize("value", [0.0, -1.0, 1e300])
    def test_finite_values_valid(self, value: float) -> None:
        assert is_valid_float(value) is True

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_values_invalid(self, value: float) -> None:
        assert is_valid_float(value) is False

    def test_all_valid_floats(self) -> None:
        assert all_valid_floats(1.0, 2.0, 3.0) is True
        assert all_valid_floats(1.0, math.nan) is False
        assert all_valid_floats() is True

    def test_sanitize(self) -> None:
        assert sanitize_float(10.0) == 10.0
        assert sanitize_float(math.nan) == 0.0
        assert sanitize_float(-math.inf, fallback=-1.0) == -1.0


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


class TestSafeDivide:
    """Тесты для safe_divide"""

    def test_normal_division(self) -> None:
        assert safe_divide(10.0, 2.0) == 5.0

    def test_zero_denominator_returns_fallback(self) -> None:
        assert safe_divide(10.0, 0.0) == 0.0
        assert safe_divide(10.0, 0.0, fallback=-1.0) == -1.0

    def test_nan_input_returns_fallback(self) -> None:
        assert safe_divide(math.nan, 2.0) == 0.0
        assert safe_divide(1.0, math.inf) == 0.0

    def test_overflow_returns_fallback(self) -> None:
        assert safe_divide(1e308, 1e-11, fallback=7.0) == 7.0


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


class TestComparisons:
    """Тесты для is_close_abs / within_range / clamp"""

    def test_is_close_abs_strict(self) -> None:
        """Разница ровно tol не считается совпадением"""
        assert is_close_abs(1000.05, 1000.0, 0.1) is True
        assert is_close_abs(1000.2, 1000.0, 0.1) is False
        assert is_close_abs(1.0, 1.0, 0.0) is False

    def test_within_range_with_tolerance(self) -> None:
        assert within_range(-5e-7, 0.0, 1.0, 1e-6) is True
        assert within_range(1.0 + 5e-7, 0.0, 1.0, 1e-6) is True
        assert within_range(-2e-6, 0.0, 1.0, 1e-6) is False
        assert within_range(0.5, 0.0, 1.0) is True

    def test_clamp(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0
        assert clamp(-1e-9, 0.0, 10.0) == 0.0
        assert clamp(15.0, 0.0, 10.0) == 10.0
        assert clamp(15.0) == 15.0


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidation:
    """Тесты для validate_positive / validate_non_negative"""

    def test_validate_positive(self) -> None:
        validate_positive(1.0, "x")
        with pytest.raises(ValueError, match="must be positive"):
            validate_positive(0.0, "x")
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_positive(math.nan, "x")

    def test_validate_non_negative(self) -> None:
        validate_non_negative(0.0, "x")
        with pytest.raises(ValueError, match="non-negative"):
            validate_non_negative(-1.0, "x")
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_non_negative(math.inf, "x")


# =============================================================================
# VOLUMETRICS
# =============================================================================


class TestVolumetrics:
    """Тесты для конверсии единиц"""

    def test_mm_to_m(self) -> None:
        assert mm_to_m(1800) == 1.8

    def test_box_volume(self) -> None:
        assert box_volume_m3(600, 100, 1800) == pytest.approx(0.108, abs=1e-12)
        assert box_volume_m3(1000, 1000, 1000) == 1.0

    def test_box_volume_not_guarded(self) -> None:
        """Положительность не проверяется: отрицательный размер даёт отрицательный объём"""
        assert box_volume_m3(-1000, 1000, 1000) == -1.0
        assert box_volume_m3(0, 1000, 1000) == 0.0

    def test_footprint(self) -> None:
        assert footprint_m2(600, 100) == pytest.approx(0.06)

    def test_weight(self) -> None:
        assert weight_kg(0.108, 2400) == pytest.approx(259.2)

    def test_volume_share(self) -> None:
        assert volume_share_pct(0.054, 0.108) == pytest.approx(50.0)
        assert volume_share_pct(1.0, 0.0) == 0.0

    def test_segment_height(self) -> None:
        """0.054 м³ на основании 0.06 м² → 900 мм"""
        assert segment_height_mm(0.054, 600, 100) == pytest.approx(900.0)

    def test_piece_weight(self) -> None:
        assert piece_weight_kg(600, 100, 10, 7850) == pytest.approx(4.71)
