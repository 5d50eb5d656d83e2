"""
CalculationResult — Результат расчёта заполнения противовеса

Immutable Pydantic модели запроса и результата расчёта.

Недостижимость целевого веса кодируется данными (is_feasible=False + reason),
а не исключением. Результат создаётся заново при каждом вызове и не
ссылается на изменяемые входные коллекции (allocations: tuple).
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from counterweight.core.domain.dimensions import Dimensions
from counterweight.core.domain.material import Material


# =============================================================================
# ENUMS
# =============================================================================


class FeasibilityReason(str, Enum):
    """Код исхода расчёта"""

    SUCCESS_PAIR = "SUCCESS_PAIR"
    SUCCESS_SINGLE = "SUCCESS_SINGLE"
    FRAME_EXCEEDS_TARGET = "FRAME_EXCEEDS_TARGET"
    TARGET_TOO_LOW = "TARGET_TOO_LOW"
    TARGET_TOO_HIGH = "TARGET_TOO_HIGH"
    NO_SOLUTION = "NO_SOLUTION"
    NO_MATERIALS = "NO_MATERIALS"
    INVALID_INPUT = "INVALID_INPUT"

    @property
    def is_success(self) -> bool:
        return self in (FeasibilityReason.SUCCESS_PAIR, FeasibilityReason.SUCCESS_SINGLE)


# Максимум материалов в одном решении (пара соседних приоритетов)
MAX_ALLOCATIONS = 2


# =============================================================================
# REQUEST
# =============================================================================


class CalculationRequest(BaseModel):
    """
    Входные данные расчёта.

    Предусловие solver: приоритеты материалов уникальны. Перенумерацию
    приоритетов выполняет вызывающая сторона (MaterialCatalog).
    """

    dimensions: Dimensions = Field(..., description="Размеры полости (мм)")
    target_total_weight_kg: float = Field(
        ..., allow_inf_nan=False, description="Целевой общий вес противовеса (кг)"
    )
    frame_weight_kg: float = Field(..., allow_inf_nan=False, description="Вес рамы (кг)")
    materials: list[Material] = Field(..., description="Материалы-кандидаты")

    model_config = {"frozen": True}

    @field_validator("materials")
    @classmethod
    def validate_unique_priorities(cls, v: list[Material]) -> list[Material]:
        """Проверка уникальности приоритетов и идентификаторов"""
        priorities = [m.priority for m in v]
        if len(set(priorities)) != len(priorities):
            raise ValueError(f"material priorities must be unique, got {sorted(priorities)}")

        ids = [m.id for m in v]
        if len(set(ids)) != len(ids):
            raise ValueError("material ids must be unique")
        return v


# =============================================================================
# RESULT
# =============================================================================


class MaterialAllocation(BaseModel):
    """
    Доля одного материала в решении.

    percentage: доля от общего объёма полости (0–100).
    """

    material: Material = Field(..., description="Материал")
    volume_m3: float = Field(..., ge=0, description="Объём материала (м³)")
    weight_kg: float = Field(..., ge=0, description="Вес материала (кг)")
    percentage: float = Field(..., ge=0, le=100, description="Доля объёма (%)")

    model_config = {"frozen": True}


class CalculationResult(BaseModel):
    """
    Результат расчёта.

    allocations содержит:
    - 0 элементов: решение не найдено
    - 1 элемент: один материал заполняет 100% объёма
    - 2 элемента: пара соседних приоритетов, в порядке приоритета

    min_fill_weight_kg / max_fill_weight_kg заполняются только при
    диагностике недостижимости (достижимые границы веса заполнения).
    """

    total_volume_m3: float = Field(..., description="Объём полости (м³)")
    net_target_weight_kg: float = Field(
        ..., description="Требуемый вес заполнения: целевой вес − вес рамы (кг)"
    )
    is_feasible: bool = Field(..., description="Решение найдено")
    reason: FeasibilityReason = Field(..., description="Код исхода")
    message: str = Field(..., description="Человекочитаемое сообщение")
    allocations: tuple[MaterialAllocation, ...] = Field(
        default=(), description="Распределение материалов"
    )
    min_fill_weight_kg: float | None = Field(
        None, description="Минимальный достижимый вес заполнения (кг)"
    )
    max_fill_weight_kg: float | None = Field(
        None, description="Максимальный достижимый вес заполнения (кг)"
    )

    model_config = {"frozen": True}

    @field_validator("allocations")
    @classmethod
    def validate_allocations_consistency(
        cls, v: tuple[MaterialAllocation, ...], info
    ) -> tuple[MaterialAllocation, ...]:
        """
        Согласованность allocations с is_feasible и reason.

        feasible ⇔ 1..2 allocations; SUCCESS_SINGLE ⇔ ровно 1.
        """
        if len(v) > MAX_ALLOCATIONS:
            raise ValueError(f"at most {MAX_ALLOCATIONS} allocations allowed, got {len(v)}")

        if "is_feasible" not in info.data or "reason" not in info.data:
            return v

        is_feasible = info.data["is_feasible"]
        reason = info.data["reason"]

        if is_feasible != reason.is_success:
            raise ValueError(f"reason {reason.value} contradicts is_feasible={is_feasible}")

        if is_feasible and not v:
            raise ValueError("feasible result must carry allocations")
        if not is_feasible and v:
            raise ValueError("infeasible result must not carry allocations")

        if reason == FeasibilityReason.SUCCESS_SINGLE and len(v) != 1:
            raise ValueError("SUCCESS_SINGLE requires exactly one allocation")
        if reason == FeasibilityReason.SUCCESS_PAIR and len(v) != MAX_ALLOCATIONS:
            raise ValueError("SUCCESS_PAIR requires exactly two allocations")

        return v

    def total_fill_weight_kg(self) -> float:
        """Суммарный вес заполнения по allocations (кг)."""
        return sum(a.weight_kg for a in self.allocations)

    def total_weight_kg(self, frame_weight_kg: float) -> float:
        """Общий вес противовеса: рама + заполнение (кг)."""
        return frame_weight_kg + self.total_fill_weight_kg()
