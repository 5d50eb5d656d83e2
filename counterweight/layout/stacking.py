"""Stacking — Раскладка заполнения по слоям

Преобразует результат расчёта в слои полости (приоритет 1 внизу):
- высота слоя (мм) при полном сечении полости
- количество кусков заданной толщины (округление вверх)
- вес одного куска

Производные величины для вывода; solver их не вычисляет.
"""

import math
from dataclasses import dataclass
from typing import Final, Mapping

from counterweight.core.domain.dimensions import Dimensions
from counterweight.core.domain.material import Material
from counterweight.core.domain.result import CalculationResult
from counterweight.core.math.numerical_safeguards import safe_divide, validate_non_negative
from counterweight.core.math.volumetrics import piece_weight_kg, segment_height_mm

# Толщина куска по умолчанию, если для материала не задана (мм)
DEFAULT_UNIT_THICKNESS_MM: Final[float] = 1.0


@dataclass(frozen=True)
class StackSegment:
    """Слой одного материала в полости."""

    material: Material
    volume_m3: float
    weight_kg: float
    percentage: float

    # Геометрия слоя
    height_mm: float
    bottom_mm: float
    top_mm: float

    # Куски
    unit_thickness_mm: float
    exact_piece_count: float  # height / thickness, без округления
    piece_count: int  # ceil(exact_piece_count)
    unit_weight_kg: float


def build_stack(
    result: CalculationResult,
    dimensions: Dimensions,
    unit_thicknesses_mm: Mapping[str, float] | None = None,
    default_thickness_mm: float = DEFAULT_UNIT_THICKNESS_MM,
) -> tuple[StackSegment, ...]:
    """Раскладка решения по слоям снизу вверх.

    Args:
        result: результат расчёта
        dimensions: размеры полости, по которым считался result
        unit_thicknesses_mm: толщина куска по id материала (мм)
        default_thickness_mm: толщина, если id отсутствует в словаре

    Returns:
        Слои в порядке приоритета (пустой tuple для infeasible result)

    Raises:
        ValueError: если default_thickness_mm отрицательная или NaN/Inf
    """
    validate_non_negative(default_thickness_mm, "default_thickness_mm")

    if not result.is_feasible:
        return ()

    thicknesses = unit_thicknesses_mm or {}
    segments: list[StackSegment] = []
    bottom = 0.0

    for allocation in sorted(result.allocations, key=lambda a: a.material.priority):
        material = allocation.material
        height = segment_height_mm(allocation.volume_m3, dimensions.width_mm, dimensions.depth_mm)
        thickness = thicknesses.get(material.id, default_thickness_mm) or default_thickness_mm

        # Толщина <= 0 → кусков нет
        exact_count = safe_divide(height, thickness, fallback=0.0) if thickness > 0 else 0.0

        segments.append(
            StackSegment(
                material=material,
                volume_m3=allocation.volume_m3,
                weight_kg=allocation.weight_kg,
                percentage=allocation.percentage,
                height_mm=height,
                bottom_mm=bottom,
                top_mm=bottom + height,
                unit_thickness_mm=thickness,
                exact_piece_count=exact_count,
                piece_count=math.ceil(exact_count),
                unit_weight_kg=piece_weight_kg(
                    dimensions.width_mm, dimensions.depth_mm, thickness, material.density_kg_m3
                ),
            )
        )
        bottom += height

    return tuple(segments)
