"""
Dimensions — Размеры полости рамы противовеса

Immutable Pydantic модель прямоугольной полости (мм).
Все размеры строго положительные и конечные: NaN/Inf отклоняются при
создании модели, а не пропагируют в расчёт.
"""

from pydantic import BaseModel, Field

from counterweight.core.math.volumetrics import box_volume_m3, footprint_m2


class Dimensions(BaseModel):
    """
    Внутренние размеры рамы противовеса.

    Immutable модель (frozen=True). Объём вычисляется в согласованных
    единицах: мм → м до перемножения.
    """

    width_mm: float = Field(..., gt=0, allow_inf_nan=False, description="Ширина (мм)")
    depth_mm: float = Field(..., gt=0, allow_inf_nan=False, description="Глубина (мм)")
    height_mm: float = Field(..., gt=0, allow_inf_nan=False, description="Высота (мм)")

    model_config = {"frozen": True}

    def volume_m3(self) -> float:
        """
        Объём полости в м³.

        Returns:
            (w/1000) × (d/1000) × (h/1000)
        """
        return box_volume_m3(self.width_mm, self.depth_mm, self.height_mm)

    def footprint_m2(self) -> float:
        """Площадь основания (w × d) в м²."""
        return footprint_m2(self.width_mm, self.depth_mm)
