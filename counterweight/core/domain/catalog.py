"""
MaterialCatalog — Упорядоченный набор материалов заполнения

Управление коллекцией материалов:
- Добавление в конец (наименьший приоритет)
- Удаление (не ниже MIN_MATERIALS, заблокированные удалить нельзя)
- Переименование и изменение плотности с учётом флага locked
- Перемещение вверх/вниз по приоритету
- Толщина куска для раскладки по слоям

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После любой мутации приоритеты непрерывны: 1..n в порядке списка
2. Идентификаторы уникальны
3. Заблокированный материал сохраняет плотность, имя и присутствие в наборе
"""

import logging
import uuid
from enum import Enum
from typing import Final, Iterator, Mapping

from counterweight.core.domain.material import Material
from counterweight.core.math.numerical_safeguards import validate_non_negative, validate_positive

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Минимальное количество материалов в наборе (пара для решения)
MIN_MATERIALS: Final[int] = 2

# Плотность конструкционной стали (кг/м³)
STEEL_DENSITY_KG_M3: Final[float] = 7850.0

# Плотность бетона (кг/м³)
CONCRETE_DENSITY_KG_M3: Final[float] = 2400.0

# Плотность нового материала по умолчанию (кг/м³)
DEFAULT_NEW_DENSITY_KG_M3: Final[float] = 1000.0

# Толщина одного куска (мм): бетонный блок, стальная плита, новый материал
CONCRETE_UNIT_THICKNESS_MM: Final[float] = 100.0
STEEL_UNIT_THICKNESS_MM: Final[float] = 10.0
DEFAULT_NEW_UNIT_THICKNESS_MM: Final[float] = 50.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CatalogError(Exception):
    """Мутация набора материалов нарушает правила каталога."""
    pass


class MaterialNotFoundError(CatalogError, KeyError):
    """Материал с указанным id отсутствует в каталоге."""
    pass


# =============================================================================
# ENUMS
# =============================================================================


class MoveDirection(str, Enum):
    """Направление перемещения (UP ведёт к приоритету 1, в низ полости)"""

    UP = "up"
    DOWN = "down"


# =============================================================================
# CATALOG
# =============================================================================


class MaterialCatalog:
    """
    Упорядоченный набор материалов.

    Порядок списка = порядок приоритетов. Материалы immutable, поэтому
    каждая мутация заменяет экземпляры через model_copy и перенумеровывает
    приоритеты.

    Толщина куска хранится рядом с материалом (по id) и передаётся в
    build_stack через unit_thicknesses_mm.
    """

    def __init__(
        self,
        materials: list[Material] | None = None,
        unit_thicknesses_mm: Mapping[str, float] | None = None,
    ):
        """
        Args:
            materials: начальные материалы (сортируются по приоритету)
            unit_thicknesses_mm: толщина куска по id материала (мм)

        Raises:
            CatalogError: при дублировании id или толщине для неизвестного id
            ValueError: если толщина отрицательная или NaN/Inf
        """
        ordered = sorted(materials or [], key=lambda m: m.priority)
        ids = [m.id for m in ordered]
        if len(set(ids)) != len(ids):
            raise CatalogError("material ids must be unique")
        self._materials: list[Material] = self._renumbered(ordered)

        self._unit_thicknesses: dict[str, float] = {}
        for material_id, thickness in (unit_thicknesses_mm or {}).items():
            if material_id not in ids:
                raise CatalogError(f"unit thickness given for unknown material {material_id!r}")
            validate_non_negative(thickness, "unit_thickness_mm")
            self._unit_thicknesses[material_id] = float(thickness)

    @classmethod
    def default(cls) -> "MaterialCatalog":
        """Набор по умолчанию: бетон (P1, блоки 100 мм) и заблокированная сталь (P2, плиты 10 мм)."""
        return cls(
            [
                Material(id="1", name="Beton", density_kg_m3=CONCRETE_DENSITY_KG_M3, priority=1),
                Material(
                    id="2",
                    name="Ocel",
                    density_kg_m3=STEEL_DENSITY_KG_M3,
                    priority=2,
                    locked=True,
                ),
            ],
            unit_thicknesses_mm={
                "1": CONCRETE_UNIT_THICKNESS_MM,
                "2": STEEL_UNIT_THICKNESS_MM,
            },
        )

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    @property
    def materials(self) -> tuple[Material, ...]:
        return tuple(self._materials)

    def __len__(self) -> int:
        return len(self._materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(self.materials)

    @property
    def unit_thicknesses_mm(self) -> dict[str, float]:
        """Снимок толщин кусков по id (для build_stack)."""
        return dict(self._unit_thicknesses)

    def get(self, material_id: str) -> Material:
        """
        Raises:
            MaterialNotFoundError: если id отсутствует
        """
        return self._materials[self._index_of(material_id)]

    # -------------------------------------------------------------------------
    # Мутации
    # -------------------------------------------------------------------------

    def add(
        self,
        name: str | None = None,
        density_kg_m3: float = DEFAULT_NEW_DENSITY_KG_M3,
        material_id: str | None = None,
        locked: bool = False,
        unit_thickness_mm: float = DEFAULT_NEW_UNIT_THICKNESS_MM,
    ) -> Material:
        """
        Добавление материала с наименьшим приоритетом (n + 1).

        Args:
            name: имя (None → "Materiál {n}"; пустая строка отклоняется)
            density_kg_m3: плотность
            material_id: ключ (по умолчанию генерируется uuid4)
            locked: заблокировать материал
            unit_thickness_mm: толщина куска (мм)

        Returns:
            Добавленный материал

        Raises:
            CatalogError: при дублировании id
            ValidationError: при пустом имени или неположительной плотности
            ValueError: если толщина отрицательная или NaN/Inf
        """
        new_id = material_id or uuid.uuid4().hex
        if any(m.id == new_id for m in self._materials):
            raise CatalogError(f"material id {new_id!r} already exists")

        validate_non_negative(unit_thickness_mm, "unit_thickness_mm")

        if name is None:
            name = f"Materiál {len(self._materials) + 1}"

        material = Material(
            id=new_id,
            name=name,
            density_kg_m3=density_kg_m3,
            priority=len(self._materials) + 1,
            locked=locked,
        )
        self._materials.append(material)
        self._unit_thicknesses[new_id] = float(unit_thickness_mm)
        return material

    def remove(self, material_id: str) -> Material:
        """
        Удаление материала с перенумерацией приоритетов.

        Raises:
            MaterialNotFoundError: если id отсутствует
            CatalogError: если материал заблокирован или останется < MIN_MATERIALS
        """
        index = self._index_of(material_id)
        material = self._materials[index]

        if material.locked:
            logger.info("Refused to remove locked material %s", material_id)
            raise CatalogError(f"material {material.name!r} is locked and cannot be removed")

        if len(self._materials) <= MIN_MATERIALS:
            logger.info("Refused to remove %s: catalog at minimum size", material_id)
            raise CatalogError(f"catalog must keep at least {MIN_MATERIALS} materials")

        del self._materials[index]
        self._unit_thicknesses.pop(material_id, None)
        self._materials = self._renumbered(self._materials)
        return material

    def rename(self, material_id: str, name: str) -> Material:
        """
        Raises:
            MaterialNotFoundError: если id отсутствует
            CatalogError: если материал заблокирован
        """
        index = self._index_of(material_id)
        material = self._materials[index]

        if material.locked:
            logger.info("Refused to rename locked material %s", material_id)
            raise CatalogError(f"material {material.name!r} is locked and cannot be renamed")

        updated = Material.model_validate({**material.model_dump(), "name": name})
        self._materials[index] = updated
        return updated

    def set_density(self, material_id: str, density_kg_m3: float) -> Material:
        """
        Изменение плотности.

        Заблокированный материал сохраняет свою плотность: возвращается
        неизменённый экземпляр.

        Raises:
            MaterialNotFoundError: если id отсутствует
            ValueError: если плотность не положительная
        """
        index = self._index_of(material_id)
        material = self._materials[index]

        if material.locked:
            logger.info(
                "Density of locked material %s stays at %s kg/m3",
                material_id,
                material.density_kg_m3,
            )
            return material

        validate_positive(density_kg_m3, "density_kg_m3")
        updated = material.model_copy(update={"density_kg_m3": float(density_kg_m3)})
        self._materials[index] = updated
        return updated

    def set_unit_thickness(self, material_id: str, unit_thickness_mm: float) -> float:
        """
        Изменение толщины куска. Допустимо и для заблокированных материалов.

        0 означает "не задано": build_stack подставит толщину по умолчанию.

        Raises:
            MaterialNotFoundError: если id отсутствует
            ValueError: если толщина отрицательная или NaN/Inf
        """
        self._index_of(material_id)
        validate_non_negative(unit_thickness_mm, "unit_thickness_mm")
        self._unit_thicknesses[material_id] = float(unit_thickness_mm)
        return self._unit_thicknesses[material_id]

    def move(self, material_id: str, direction: MoveDirection | str) -> bool:
        """
        Перемещение на одну позицию (обмен с соседом).

        Args:
            material_id: ключ материала
            direction: UP к приоритету 1, DOWN к наименьшему приоритету

        Returns:
            True если порядок изменился, False если движение за границу
        """
        direction = MoveDirection(direction)
        index = self._index_of(material_id)
        target = index - 1 if direction == MoveDirection.UP else index + 1

        if target < 0 or target >= len(self._materials):
            return False

        self._materials[index], self._materials[target] = (
            self._materials[target],
            self._materials[index],
        )
        self._materials = self._renumbered(self._materials)
        return True

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _index_of(self, material_id: str) -> int:
        for index, material in enumerate(self._materials):
            if material.id == material_id:
                return index
        raise MaterialNotFoundError(material_id)

    @staticmethod
    def _renumbered(materials: list[Material]) -> list[Material]:
        """Непрерывная перенумерация приоритетов 1..n в порядке списка."""
        return [
            m if m.priority == i else m.model_copy(update={"priority": i})
            for i, m in enumerate(materials, start=1)
        ]
