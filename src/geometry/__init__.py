"""
Geometry - path algebra on cubic-Bezier outlines

- bezier: de Casteljau subdivision and point distribution
- partial: partial-path extraction
- alignment: making two mobject trees congruent
- shapes: shape constructors
- tex: typeset-formula mobjects built from an external importer
"""

__all__ = [
    "bezier",
    "partial",
    "alignment",
    "shapes",
    "tex",
]
