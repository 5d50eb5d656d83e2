"""
Material — Модель материала заполнения

Immutable Pydantic модель материала с плотностью и приоритетом укладки.
Приоритет 1 укладывается в самый низ полости.

Флаг locked задаёт явное доменное правило: у заблокированного материала
фиксирована плотность, его нельзя удалить или переименовать.
Solver флаг не читает: расчёт зависит только от плотности и приоритета.
"""

from pydantic import BaseModel, Field

from counterweight.core.math.volumetrics import weight_kg


class Material(BaseModel):
    """
    Материал заполнения противовеса.

    Immutable модель (frozen=True). Все изменения (переименование,
    перенумерация приоритетов) создают новый экземпляр через model_copy.
    """

    # Идентификация
    id: str = Field(..., min_length=1, description="Уникальный ключ материала")
    name: str = Field(..., min_length=1, description="Отображаемое имя (например, 'Beton')")

    # Физика
    density_kg_m3: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Плотность (кг/м³)"
    )

    # Порядок укладки
    priority: int = Field(..., ge=1, description="Приоритет (1 = низ полости)")

    locked: bool = Field(
        False, description="Плотность фиксирована, удаление и переименование запрещены"
    )

    model_config = {"frozen": True}

    def weight_for_volume(self, volume_m3: float) -> float:
        """Вес заданного объёма материала (кг)."""
        return weight_kg(volume_m3, self.density_kg_m3)
