"""
Tests for Domain Models

Комплексное тестирование Pydantic V2 моделей:
- Dimensions (объём, площадь основания, валидация)
- Material (валидация, immutability)
- CalculationRequest (уникальность приоритетов)
- MaterialAllocation / CalculationResult (согласованность исхода)
"""

import math

import pytest
from pydantic import ValidationError

from counterweight.core.domain import (
    CalculationRequest,
    CalculationResult,
    Dimensions,
    FeasibilityReason,
    Material,
    MaterialAllocation,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def concrete():
    return Material(id="1", name="Beton", density_kg_m3=2400, priority=1)


@pytest.fixture
def steel():
    return Material(id="2", name="Ocel", density_kg_m3=7850, priority=2, locked=True)


# =============================================================================
# DIMENSIONS
# =============================================================================


class TestDimensions:
    """Тесты для Dimensions"""

    def test_volume_converts_mm_before_multiplying(self) -> None:
        """600 × 100 × 1800 мм = 0.108 м³"""
        dims = Dimensions(width_mm=600, depth_mm=100, height_mm=1800)
        assert dims.volume_m3() == pytest.approx(0.108, abs=1e-12)

    def test_footprint(self) -> None:
        """600 × 100 мм = 0.06 м²"""
        dims = Dimensions(width_mm=600, depth_mm=100, height_mm=1800)
        assert dims.footprint_m2() == pytest.approx(0.06, abs=1e-12)

    @pytest.mark.parametrize("field", ["width_mm", "depth_mm", "height_mm"])
    @pytest.mark.parametrize("value", [0, -1.0])
    def test_non_positive_rejected(self, field: str, value: float) -> None:
        """Нулевые и отрицательные размеры отклоняются"""
        data = {"width_mm": 600, "depth_mm": 100, "height_mm": 1800, field: value}
        with pytest.raises(ValidationError):
            Dimensions(**data)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_rejected(self, value: float) -> None:
        """NaN/Inf отклоняются при создании модели"""
        with pytest.raises(ValidationError):
            Dimensions(width_mm=value, depth_mm=100, height_mm=1800)

    def test_frozen(self) -> None:
        """Модель immutable"""
        dims = Dimensions(width_mm=600, depth_mm=100, height_mm=1800)
        with pytest.raises(ValidationError):
            dims.width_mm = 700


# =============================================================================
# MATERIAL
# =============================================================================


class TestMaterial:
    """Тесты для Material"""

    def test_defaults(self, concrete: Material) -> None:
        assert concrete.locked is False
        assert concrete.priority == 1

    def test_weight_for_volume(self, steel: Material) -> None:
        assert steel.weight_for_volume(0.1) == pytest.approx(785.0)

    @pytest.mark.parametrize("density", [0, -2400, float("nan")])
    def test_invalid_density_rejected(self, density: float) -> None:
        with pytest.raises(ValidationError):
            Material(id="1", name="Beton", density_kg_m3=density, priority=1)

    def test_priority_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Material(id="1", name="Beton", density_kg_m3=2400, priority=0)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Material(id="1", name="", density_kg_m3=2400, priority=1)

    def test_frozen(self, concrete: Material) -> None:
        with pytest.raises(ValidationError):
            concrete.density_kg_m3 = 7850


# =============================================================================
# CALCULATION REQUEST
# =============================================================================


class TestCalculationRequest:
    """Тесты для CalculationRequest"""

    def test_valid_request(self, concrete: Material, steel: Material) -> None:
        request = CalculationRequest(
            dimensions=Dimensions(width_mm=600, depth_mm=100, height_mm=1800),
            target_total_weight_kg=780,
            frame_weight_kg=79,
            materials=[concrete, steel],
        )
        assert len(request.materials) == 2

    def test_duplicate_priorities_rejected(self, concrete: Material) -> None:
        """Приоритеты должны быть уникальны (предусловие solver)"""
        twin = Material(id="3", name="Beton 2", density_kg_m3=2300, priority=1)
        with pytest.raises(ValidationError, match="priorities must be unique"):
            CalculationRequest(
                dimensions=Dimensions(width_mm=600, depth_mm=100, height_mm=1800),
                target_total_weight_kg=780,
                frame_weight_kg=79,
                materials=[concrete, twin],
            )

    def test_duplicate_ids_rejected(self, concrete: Material) -> None:
        twin = Material(id="1", name="Beton 2", density_kg_m3=2300, priority=2)
        with pytest.raises(ValidationError, match="ids must be unique"):
            CalculationRequest(
                dimensions=Dimensions(width_mm=600, depth_mm=100, height_mm=1800),
                target_total_weight_kg=780,
                frame_weight_kg=79,
                materials=[concrete, twin],
            )

    def test_nan_target_rejected(self, concrete: Material) -> None:
        with pytest.raises(ValidationError):
            CalculationRequest(
                dimensions=Dimensions(width_mm=600, depth_mm=100, height_mm=1800),
                target_total_weight_kg=math.nan,
                frame_weight_kg=79,
                materials=[concrete],
            )


# =============================================================================
# CALCULATION RESULT
# =============================================================================


class TestCalculationResult:
    """Тесты для CalculationResult"""

    def _allocation(self, material: Material, volume: float) -> MaterialAllocation:
        return MaterialAllocation(
            material=material,
            volume_m3=volume,
            weight_kg=volume * material.density_kg_m3,
            percentage=100.0 * volume,
        )

    def test_infeasible_without_allocations(self) -> None:
        result = CalculationResult(
            total_volume_m3=1.0,
            net_target_weight_kg=-5.0,
            is_feasible=False,
            reason=FeasibilityReason.FRAME_EXCEEDS_TARGET,
            message="",
        )
        assert result.allocations == ()
        assert result.total_fill_weight_kg() == 0.0

    def test_feasible_requires_allocations(self) -> None:
        with pytest.raises(ValidationError, match="must carry allocations"):
            CalculationResult(
                total_volume_m3=1.0,
                net_target_weight_kg=1000.0,
                is_feasible=True,
                reason=FeasibilityReason.SUCCESS_SINGLE,
                message="",
                allocations=(),
            )

    def test_reason_must_match_feasibility(self, concrete: Material) -> None:
        with pytest.raises(ValidationError, match="contradicts"):
            CalculationResult(
                total_volume_m3=1.0,
                net_target_weight_kg=2400.0,
                is_feasible=False,
                reason=FeasibilityReason.SUCCESS_SINGLE,
                message="",
                allocations=(self._allocation(concrete, 1.0),),
            )

    def test_pair_requires_two_allocations(self, concrete: Material) -> None:
        with pytest.raises(ValidationError, match="exactly two"):
            CalculationResult(
                total_volume_m3=1.0,
                net_target_weight_kg=2400.0,
                is_feasible=True,
                reason=FeasibilityReason.SUCCESS_PAIR,
                message="",
                allocations=(self._allocation(concrete, 1.0),),
            )

    def test_at_most_two_allocations(self, concrete: Material, steel: Material) -> None:
        third = Material(id="3", name="Olovo", density_kg_m3=11340, priority=3)
        with pytest.raises(ValidationError, match="at most 2"):
            CalculationResult(
                total_volume_m3=1.0,
                net_target_weight_kg=1.0,
                is_feasible=True,
                reason=FeasibilityReason.SUCCESS_PAIR,
                message="",
                allocations=(
                    self._allocation(concrete, 0.3),
                    self._allocation(steel, 0.3),
                    self._allocation(third, 0.4),
                ),
            )

    def test_total_weights(self, concrete: Material, steel: Material) -> None:
        result = CalculationResult(
            total_volume_m3=1.0,
            net_target_weight_kg=5125.0,
            is_feasible=True,
            reason=FeasibilityReason.SUCCESS_PAIR,
            message="",
            allocations=(self._allocation(concrete, 0.5), self._allocation(steel, 0.5)),
        )
        assert result.total_fill_weight_kg() == pytest.approx(5125.0)
        assert result.total_weight_kg(79.0) == pytest.approx(5204.0)

    def test_allocation_percentage_bounds(self, concrete: Material) -> None:
        with pytest.raises(ValidationError):
            MaterialAllocation(material=concrete, volume_m3=1.0, weight_kg=2400.0, percentage=100.5)

    def test_reason_success_flags(self) -> None:
        assert FeasibilityReason.SUCCESS_PAIR.is_success is True
        assert FeasibilityReason.SUCCESS_SINGLE.is_success is True
        assert FeasibilityReason.TARGET_TOO_LOW.is_success is False
        assert FeasibilityReason.NO_MATERIALS.is_success is False
