"""
Scene diff

Describes how playing an animation changes the set of objects a scene
tracks. Produced by Animation.get_diff(), interpreted by the scene layer.
"""

from dataclasses import dataclass, field
from typing import List

from models.mobject import Mobject


@dataclass(frozen=True)
class ModifyEntry:
    """
    Change to a tracked object that contains the animated mobject

    Attributes:
        name: Scene name of the containing object
        remove: Child removed from it
        add: Child added back to it
    """
    name: str
    remove: Mobject
    add: Mobject


@dataclass
class SceneDiff:
    add: List[Mobject] = field(default_factory=list)
    remove: List[Mobject] = field(default_factory=list)
    modify: List[ModifyEntry] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.add or self.remove or self.modify)
