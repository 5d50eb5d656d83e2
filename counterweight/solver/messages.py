"""Сообщения о результате расчёта (cs).

Вызывающая сторона принимает решения по FeasibilityReason; текст нужен
только для отображения.
"""

from counterweight.core.domain.result import FeasibilityReason


def _kg(value: float | None) -> str:
    return f"{value if value is not None else 0.0:.1f}"


def format_message(
    reason: FeasibilityReason,
    *,
    first: str | None = None,
    second: str | None = None,
    net_weight_kg: float | None = None,
    min_weight_kg: float | None = None,
    max_weight_kg: float | None = None,
    too_low: bool = False,
    too_high: bool = False,
) -> str:
    """Текст сообщения для кода исхода.

    Для недостижимого веса фрагменты too_low / too_high проверяются
    независимо и конкатенируются.

    Args:
        reason: код исхода
        first: имя первого (или единственного) материала
        second: имя второго материала пары
        net_weight_kg: требуемый вес заполнения
        min_weight_kg: минимальный достижимый вес заполнения
        max_weight_kg: максимальный достижимый вес заполнения
        too_low: добавить фрагмент "слишком низкий"
        too_high: добавить фрагмент "слишком высокий"

    Returns:
        Строка сообщения
    """
    if reason == FeasibilityReason.SUCCESS_PAIR:
        return f"Nalezeno řešení kombinací: {first} a {second}"

    if reason == FeasibilityReason.SUCCESS_SINGLE:
        return f"Nalezeno řešení: 100% {first}"

    if reason == FeasibilityReason.FRAME_EXCEEDS_TARGET:
        return "Cílová váha je nižší nebo rovna váze samotného rámu."

    if reason == FeasibilityReason.NO_MATERIALS:
        return "Nejsou zadány žádné materiály výplně."

    if reason == FeasibilityReason.INVALID_INPUT:
        return "Neplatné vstupní hodnoty (rozměry nebo váhy nejsou konečná čísla)."

    message = "Nelze dosáhnout cílové váhy se zadaným objemem a materiály."
    if too_low:
        message += (
            f" (Cílová váha výplně {_kg(net_weight_kg)} kg je příliš nízká. "
            f"Minimum je {_kg(min_weight_kg)} kg)"
        )
    if too_high:
        message += (
            f" (Cílová váha výplně {_kg(net_weight_kg)} kg je příliš vysoká. "
            f"Maximum je {_kg(max_weight_kg)} kg)"
        )
    return message
