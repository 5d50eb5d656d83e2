"""
Volumetrics — Централизованный модуль конверсии единиц

Единственный допустимый способ преобразований между:
- размерами полости (мм)
- объёмом (м³)
- весом (кг) через плотность (кг/м³)

ЗАПРЕЩЕНО перемножать миллиметры без явной конверсии через этот модуль:
мм → м выполняется ДО умножения.
"""

from typing import Final

from counterweight.core.math.numerical_safeguards import safe_divide

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MM_PER_M: Final[float] = 1000.0

# Полная доля объёма в процентах
FULL_SHARE_PCT: Final[float] = 100.0


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def mm_to_m(value_mm: float) -> float:
    """Конверсия: миллиметры → метры."""
    return value_mm / MM_PER_M


def box_volume_m3(width_mm: float, depth_mm: float, height_mm: float) -> float:
    """
    Объём прямоугольной полости в м³.

    V = (w/1000) × (d/1000) × (h/1000)

    Положительность размеров здесь НЕ проверяется: нулевые или
    отрицательные размеры детерминированно дают нулевой/отрицательный объём.
    Валидация выполняется моделью Dimensions.

    Examples:
        >>> round(box_volume_m3(600, 100, 1800), 12)
        0.108
    """
    return mm_to_m(width_mm) * mm_to_m(depth_mm) * mm_to_m(height_mm)


def footprint_m2(width_mm: float, depth_mm: float) -> float:
    """Площадь основания полости в м²."""
    return mm_to_m(width_mm) * mm_to_m(depth_mm)


def weight_kg(volume_m3: float, density_kg_m3: float) -> float:
    """Вес заполнения: volume × density."""
    return volume_m3 * density_kg_m3


def volume_share_pct(volume_m3: float, total_volume_m3: float) -> float:
    """
    Доля объёма в процентах (0–100).

    При вырожденном общем объёме возвращается 0.0.
    """
    return safe_divide(volume_m3, total_volume_m3, fallback=0.0) * FULL_SHARE_PCT


def segment_height_mm(volume_m3: float, width_mm: float, depth_mm: float) -> float:
    """
    Высота слоя материала в полости (мм).

    h = volume / footprint × 1000
    """
    return safe_divide(volume_m3, footprint_m2(width_mm, depth_mm), fallback=0.0) * MM_PER_M


def piece_weight_kg(
    width_mm: float,
    depth_mm: float,
    thickness_mm: float,
    density_kg_m3: float,
) -> float:
    """
    Вес одного куска (плиты) материала во всё сечение полости.

    w × d × t (мм³) × density / 1e9
    """
    return weight_kg(box_volume_m3(width_mm, depth_mm, thickness_mm), density_kg_m3)
