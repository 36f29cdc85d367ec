"""
Domain error hierarchy

Every fatal condition in the engine is reported as a DomainError subclass
carrying a machine-readable code plus structured details.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class GeometryPreconditionError(DomainError):
    """Subdivision or interpolation called with arguments outside its domain"""
    def __init__(self, message: str, **details):
        super().__init__(
            code="GEOMETRY_PRECONDITION",
            message=message,
            details=details
        )


class AlignmentError(DomainError):
    """Two trees that should be congruent are not"""
    def __init__(self, message: str, **details):
        super().__init__(
            code="ALIGNMENT_INVARIANT",
            message=message,
            details=details
        )


class UnimplementedVariantError(DomainError):
    """An AnimationKind has no registered variant"""
    def __init__(self, kind_name: str, missing: str = "VariantSpec"):
        super().__init__(
            code="VARIANT_NOT_IMPLEMENTED",
            message=f"{kind_name} does not provide {missing}",
            details={"kind": kind_name, "missing": missing}
        )


class AnimationStateError(DomainError):
    """Animation method called in the wrong lifecycle state"""
    def __init__(self, operation: str, state_name: str):
        super().__init__(
            code="ANIMATION_STATE",
            message=f"Cannot {operation} an animation in state {state_name}",
            details={"operation": operation, "state": state_name}
        )


class UnknownRateFunctionError(DomainError):
    """Rate function name is not registered"""
    def __init__(self, name: str, valid_names: list):
        super().__init__(
            code="UNKNOWN_RATE_FUNCTION",
            message=f"Rate function '{name}' is not registered",
            details={
                "name": name,
                "valid_names": valid_names
            }
        )
