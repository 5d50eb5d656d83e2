"""
Counterweight fill calculator.

Подбор заполнения полости рамы противовеса лифта одним или двумя
материалами так, чтобы общий вес совпадал с целевым.
"""

from counterweight.core.domain import (
    CalculationRequest,
    CalculationResult,
    Dimensions,
    FeasibilityReason,
    Material,
    MaterialAllocation,
    MaterialCatalog,
)
from counterweight.solver import CounterweightSolver, SolverConfig, solve

__all__ = [
    "CalculationRequest",
    "CalculationResult",
    "CounterweightSolver",
    "Dimensions",
    "FeasibilityReason",
    "Material",
    "MaterialAllocation",
    "MaterialCatalog",
    "SolverConfig",
    "solve",
]
