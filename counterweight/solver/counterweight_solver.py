"""Counterweight Solver — подбор заполнения полости рамы противовеса

Определяет, можно ли заполнить полость фиксированного объёма одним или
двумя материалами так, чтобы вес рамы + заполнения равнялся целевому.

Система уравнений для пары (m1, m2) соседних приоритетов:
    v1 + v2 = V
    v1·d1 + v2·d2 = W
    v1 = (W − V·d2) / (d1 − d2),  v2 = V − v1

Порядок:
1. Объём полости V (мм → м³)
2. Требуемый вес заполнения W = целевой вес − вес рамы (W ≤ 0 → FRAME_EXCEEDS_TARGET)
3. Сортировка материалов по приоритету (стабильная)
4. Пары соседних приоритетов; первая допустимая пара выигрывает
5. Fallback: один материал на 100% объёма (|V·d − W| < 0.1 кг)
6. Диагностика: W ниже минимума / выше максимума достижимого веса

Solver: чистая функция без состояния, без I/O, никогда не бросает
исключений для недостижимого веса.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from counterweight.core.domain.dimensions import Dimensions
from counterweight.core.domain.material import Material
from counterweight.core.domain.result import (
    CalculationRequest,
    CalculationResult,
    FeasibilityReason,
    MaterialAllocation,
)
from counterweight.core.math.numerical_safeguards import (
    SINGLE_MATCH_TOLERANCE_KG,
    VOLUME_TOLERANCE_M3,
    all_valid_floats,
    clamp,
    is_close_abs,
    sanitize_float,
    within_range,
)
from counterweight.core.math.volumetrics import (
    FULL_SHARE_PCT,
    volume_share_pct,
    weight_kg,
)
from counterweight.solver.messages import format_message

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация solver.

    Две толерантности масштабированы по-разному и НЕ унифицируются:
    объём (м³) для допуска пары и вес (кг) для одного материала.
    """

    volume_tolerance_m3: float = VOLUME_TOLERANCE_M3
    single_match_tolerance_kg: float = SINGLE_MATCH_TOLERANCE_KG


# =============================================================================
# SOLVER
# =============================================================================


class CounterweightSolver:
    """Подбор одно- или двухкомпонентного заполнения противовеса.

    Предусловия (не проверяются):
    - размеры положительны (гарантирует модель Dimensions)
    - приоритеты материалов уникальны (гарантирует CalculationRequest
      или MaterialCatalog)
    """

    def __init__(self, config: SolverConfig | None = None):
        """Инициализация solver.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or SolverConfig()

    def solve_request(self, request: CalculationRequest) -> CalculationResult:
        """Расчёт по валидированному запросу."""
        return self.solve(
            dimensions=request.dimensions,
            target_total_weight_kg=request.target_total_weight_kg,
            frame_weight_kg=request.frame_weight_kg,
            materials=request.materials,
        )

    def solve(
        self,
        dimensions: Dimensions,
        target_total_weight_kg: float,
        frame_weight_kg: float,
        materials: Sequence[Material],
    ) -> CalculationResult:
        """Расчёт заполнения.

        Args:
            dimensions: размеры полости (мм)
            target_total_weight_kg: целевой общий вес противовеса (кг)
            frame_weight_kg: вес рамы (кг)
            materials: материалы-кандидаты (любой порядок)

        Returns:
            CalculationResult; недостижимость кодируется в reason
        """
        # 1. Объём полости
        total_volume = dimensions.volume_m3()

        # 2. Требуемый вес заполнения
        net_weight = target_total_weight_kg - frame_weight_kg

        # Разность конечных весов может переполниться до inf
        if not all_valid_floats(total_volume, target_total_weight_kg, frame_weight_kg, net_weight):
            logger.warning(
                "Non-finite solver input: volume=%s target=%s frame=%s net=%s",
                total_volume,
                target_total_weight_kg,
                frame_weight_kg,
                net_weight,
            )
            return self._infeasible_result(
                total_volume=sanitize_float(total_volume),
                net_weight=sanitize_float(net_weight),
                reason=FeasibilityReason.INVALID_INPUT,
            )

        if net_weight <= 0:
            logger.debug("Frame %.1f kg meets target %.1f kg", frame_weight_kg, target_total_weight_kg)
            return self._infeasible_result(
                total_volume=total_volume,
                net_weight=net_weight,
                reason=FeasibilityReason.FRAME_EXCEEDS_TARGET,
            )

        if not materials:
            return self._infeasible_result(
                total_volume=total_volume,
                net_weight=net_weight,
                reason=FeasibilityReason.NO_MATERIALS,
            )

        # 3. Сортировка по приоритету (sorted стабилен)
        ordered = sorted(materials, key=lambda m: m.priority)

        # 4. Пары соседних приоритетов
        pair_result = self._solve_adjacent_pairs(ordered, total_volume, net_weight)
        if pair_result is not None:
            return pair_result

        # 5. Один материал на 100% объёма
        single_result = self._solve_single(ordered, total_volume, net_weight)
        if single_result is not None:
            return single_result

        # 6. Диагностика
        return self._diagnose(ordered, total_volume, net_weight)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _solve_adjacent_pairs(
        self,
        ordered: list[Material],
        total_volume: float,
        net_weight: float,
    ) -> CalculationResult | None:
        """Первая пара соседних приоритетов с допустимым разбиением объёма."""
        tol = self.config.volume_tolerance_m3

        for m1, m2 in zip(ordered, ordered[1:]):
            d1 = m1.density_kg_m3
            d2 = m2.density_kg_m3

            # Вырожденная система
            if d1 == d2:
                continue

            v1 = (net_weight - total_volume * d2) / (d1 - d2)
            v2 = total_volume - v1

            if not (
                within_range(v1, 0.0, total_volume, tol)
                and within_range(v2, 0.0, total_volume, tol)
            ):
                continue

            v1 = clamp(v1, 0.0, total_volume)
            v2 = clamp(v2, 0.0, total_volume)

            logger.debug(
                "Pair %s/%s accepted: v1=%.6f m3 v2=%.6f m3", m1.name, m2.name, v1, v2
            )
            return CalculationResult(
                total_volume_m3=total_volume,
                net_target_weight_kg=net_weight,
                is_feasible=True,
                reason=FeasibilityReason.SUCCESS_PAIR,
                message=format_message(
                    FeasibilityReason.SUCCESS_PAIR, first=m1.name, second=m2.name
                ),
                allocations=(
                    self._allocation(m1, v1, total_volume),
                    self._allocation(m2, v2, total_volume),
                ),
            )

        return None

    def _solve_single(
        self,
        ordered: list[Material],
        total_volume: float,
        net_weight: float,
    ) -> CalculationResult | None:
        """Первый материал, точно дающий требуемый вес на 100% объёма."""
        for material in ordered:
            theoretical_weight = weight_kg(total_volume, material.density_kg_m3)
            if not is_close_abs(
                theoretical_weight, net_weight, self.config.single_match_tolerance_kg
            ):
                continue

            logger.debug("Single material %s fills the cavity", material.name)
            return CalculationResult(
                total_volume_m3=total_volume,
                net_target_weight_kg=net_weight,
                is_feasible=True,
                reason=FeasibilityReason.SUCCESS_SINGLE,
                message=format_message(FeasibilityReason.SUCCESS_SINGLE, first=material.name),
                allocations=(
                    MaterialAllocation(
                        material=material,
                        volume_m3=total_volume,
                        weight_kg=theoretical_weight,
                        percentage=FULL_SHARE_PCT,
                    ),
                ),
            )

        return None

    def _diagnose(
        self,
        ordered: list[Material],
        total_volume: float,
        net_weight: float,
    ) -> CalculationResult:
        """Классификация недостижимости по границам достижимого веса."""
        densities = [m.density_kg_m3 for m in ordered]
        min_weight = weight_kg(total_volume, min(densities))
        max_weight = weight_kg(total_volume, max(densities))

        # Проверки независимы, фрагменты сообщения конкатенируются
        too_low = net_weight < min_weight
        too_high = net_weight > max_weight

        if too_low:
            reason = FeasibilityReason.TARGET_TOO_LOW
        elif too_high:
            reason = FeasibilityReason.TARGET_TOO_HIGH
        else:
            reason = FeasibilityReason.NO_SOLUTION

        logger.debug(
            "No fill found: net=%.3f kg, range=[%.3f, %.3f] kg -> %s",
            net_weight,
            min_weight,
            max_weight,
            reason.value,
        )
        return CalculationResult(
            total_volume_m3=total_volume,
            net_target_weight_kg=net_weight,
            is_feasible=False,
            reason=reason,
            message=format_message(
                reason,
                net_weight_kg=net_weight,
                min_weight_kg=min_weight,
                max_weight_kg=max_weight,
                too_low=too_low,
                too_high=too_high,
            ),
            min_fill_weight_kg=min_weight,
            max_fill_weight_kg=max_weight,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _allocation(material: Material, volume: float, total_volume: float) -> MaterialAllocation:
        return MaterialAllocation(
            material=material,
            volume_m3=volume,
            weight_kg=weight_kg(volume, material.density_kg_m3),
            percentage=volume_share_pct(volume, total_volume),
        )

    def _infeasible_result(
        self,
        total_volume: float,
        net_weight: float,
        reason: FeasibilityReason,
    ) -> CalculationResult:
        """Создание infeasible result без диагностических границ.

        Args:
            total_volume: объём полости
            net_weight: требуемый вес заполнения
            reason: код исхода

        Returns:
            CalculationResult с is_feasible=False
        """
        return CalculationResult(
            total_volume_m3=total_volume,
            net_target_weight_kg=net_weight,
            is_feasible=False,
            reason=reason,
            message=format_message(reason),
            allocations=(),
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def solve(
    dimensions: Dimensions,
    target_total_weight_kg: float,
    frame_weight_kg: float,
    materials: Sequence[Material],
    config: SolverConfig | None = None,
) -> CalculationResult:
    """Расчёт заполнения solver'ом с заданной (или default) конфигурацией."""
    return CounterweightSolver(config).solve(
        dimensions=dimensions,
        target_total_weight_kg=target_total_weight_kg,
        frame_weight_kg=frame_weight_kg,
        materials=materials,
    )
