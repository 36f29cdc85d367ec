"""
Models package - data model of the path-algebra engine

Submodules are imported directly (models.path, models.style, models.mobject)
to keep this package free of import cycles with geometry.
"""

from .enums import VertexCommand, AnimationKind, AnimationState, StepScope, LogLevel, LogCategory
from .errors import (
    DomainError,
    GeometryPreconditionError,
    AlignmentError,
    UnimplementedVariantError,
    AnimationStateError,
    UnknownRateFunctionError,
)

__all__ = [
    'VertexCommand',
    'AnimationKind',
    'AnimationState',
    'StepScope',
    'LogLevel',
    'LogCategory',
    'DomainError',
    'GeometryPreconditionError',
    'AlignmentError',
    'UnimplementedVariantError',
    'AnimationStateError',
    'UnknownRateFunctionError',
]
