"""
Domain models and value objects.

Contains fundamental domain entities: Dimensions, Material, MaterialCatalog,
CalculationRequest, CalculationResult.
"""

from counterweight.core.domain.catalog import (
    CONCRETE_DENSITY_KG_M3,
    CONCRETE_UNIT_THICKNESS_MM,
    DEFAULT_NEW_DENSITY_KG_M3,
    DEFAULT_NEW_UNIT_THICKNESS_MM,
    MIN_MATERIALS,
    STEEL_DENSITY_KG_M3,
    STEEL_UNIT_THICKNESS_MM,
    CatalogError,
    MaterialCatalog,
    MaterialNotFoundError,
    MoveDirection,
)
from counterweight.core.domain.dimensions import Dimensions
from counterweight.core.domain.material import Material
from counterweight.core.domain.result import (
    MAX_ALLOCATIONS,
    CalculationRequest,
    CalculationResult,
    FeasibilityReason,
    MaterialAllocation,
)

__all__ = [
    # Dimensions
    "Dimensions",
    # Material
    "Material",
    # Catalog
    "MaterialCatalog",
    "MoveDirection",
    "CatalogError",
    "MaterialNotFoundError",
    "MIN_MATERIALS",
    "STEEL_DENSITY_KG_M3",
    "CONCRETE_DENSITY_KG_M3",
    "DEFAULT_NEW_DENSITY_KG_M3",
    "CONCRETE_UNIT_THICKNESS_MM",
    "STEEL_UNIT_THICKNESS_MM",
    "DEFAULT_NEW_UNIT_THICKNESS_MM",
    # Request / Result
    "CalculationRequest",
    "CalculationResult",
    "MaterialAllocation",
    "FeasibilityReason",
    "MAX_ALLOCATIONS",
]
