"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость расчёта заполнения противовеса:
- Именованные толерантности (объём в м³ и вес в кг масштабированы по-разному)
- Безопасное деление с защитой от деления на ноль
- NaN/Inf проверки для предотвращения распространения невалидных значений
- Сравнения float с явной толерантностью
- Ограничение значений диапазоном (clamp)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют в результат расчёта
3. Толерантности объёма и веса НЕ унифицируются
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность объёма (м³) для допуска решения пары материалов.
# Объёмы v1, v2 принимаются, если лежат в [-tol, V + tol].
VOLUME_TOLERANCE_M3: Final[float] = 1e-6

# Абсолютная толерантность веса (кг) для точного совпадения одного материала.
# |V * density - net_weight| < tol → решение 100% одним материалом.
SINGLE_MATCH_TOLERANCE_KG: Final[float] = 0.1

# Epsilon для общих вычислений (защита знаменателей)
EPS_CALC: Final[float] = 1e-12

# Абсолютная толерантность для сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def all_valid_floats(*values: float) -> bool:
    """True, если все значения конечные."""
    return all(is_valid_float(v) for v in values)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    Используется для процентной доли объёма: при вырожденном (нулевом)
    объёме полости возвращается fallback вместо ZeroDivisionError.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при делении на ноль или невалидном результате

    Returns:
        Результат деления или fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
    """
    if not all_valid_floats(numerator, denominator):
        return fallback

    if abs(denominator) <= EPS_CALC:
        return fallback

    result = numerator / denominator

    if not is_valid_float(result):
        return fallback
    return result


# =============================================================================
# СРАВНЕНИЯ С ТОЛЕРАНТНОСТЬЮ
# =============================================================================


def is_close_abs(a: float, b: float, tol: float) -> bool:
    """
    Строгое сравнение по абсолютной толерантности: |a - b| < tol.

    Строгое неравенство: разница ровно tol НЕ считается совпадением.

    Examples:
        >>> is_close_abs(1000.05, 1000.0, 0.1)
        True
        >>> is_close_abs(1000.2, 1000.0, 0.1)
        False
    """
    return abs(a - b) < tol


def within_range(
    value: float,
    min_value: float,
    max_value: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Проверка попадания в [min_value - tol, max_value + tol].

    Args:
        value: Проверяемое значение
        min_value: Нижняя граница
        max_value: Верхняя граница
        tol: Допуск на границах

    Returns:
        True если значение в расширенном диапазоне
    """
    return (min_value - tol) <= value <= (max_value + tol)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1e-9, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное и конечное.

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
