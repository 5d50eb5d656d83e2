"""Layout — раскладка решения по слоям полости."""

from .stacking import DEFAULT_UNIT_THICKNESS_MM, StackSegment, build_stack

__all__ = [
    "DEFAULT_UNIT_THICKNESS_MM",
    "StackSegment",
    "build_stack",
]
