"""Solver — подбор заполнения противовеса.

- Пары соседних приоритетов (первая допустимая пара выигрывает)
- Fallback: один материал на 100% объёма
- Диагностика недостижимого веса
"""

from .counterweight_solver import CounterweightSolver, SolverConfig, solve
from .messages import format_message

__all__ = [
    "CounterweightSolver",
    "SolverConfig",
    "solve",
    "format_message",
]
