"""
Enums shared across the path-algebra and animation engine
"""

from enum import Enum, auto


class VertexCommand(Enum):
    """Per-anchor path command tag (mirrors SVG path commands)"""
    MOVE = "M"
    LINE = "L"
    CURVE = "C"


class AnimationKind(Enum):
    """
    Closed set of animation variants

    Every member must have a VariantSpec registered in animations.engine.
    """
    SHOW_CREATION = auto()          # Creation-reveal
    REPLACEMENT_TRANSFORM = auto()  # Cross-fade replace
    WRITE = auto()                  # Write-on
    FADE_IN = auto()
    FADE_OUT = auto()
    WAIT = auto()


class AnimationState(Enum):
    """Animation lifecycle states"""
    UNBEGUN = auto()
    RUNNING = auto()
    FINISHED = auto()


class StepScope(Enum):
    """What a variant's step function receives"""
    PER_NODE = auto()    # Called once per point-bearing node with a staggered sub-alpha
    WHOLE_TREE = auto()  # Called once with the eased alpha and the live target


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    GEOMETRY = auto()    # Subdivision, partial paths, shape construction
    ALIGNMENT = auto()   # Tree reconciliation between two mobjects
    STYLE = auto()       # Style application and interpolation
    ANIMATION = auto()   # Animation begin/finish
    SCENE = auto()       # Scene diff bookkeeping
    SYSTEM = auto()      # Startup, errors
