"""
Animation system for mobject trees

- base: Animation lifecycle and lag-ratio timing
- engine: Variant registry (one VariantSpec per AnimationKind)
- steps: Per-kind steps, diffs and begin() hooks
- factory: show_creation, replacement_transform, write, fade_in, fade_out, wait
- rate_functions: Easing functions
"""

__all__ = [
    "base",
    "engine",
    "steps",
    "factory",
    "rate_functions",
]
