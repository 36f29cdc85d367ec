"""Enum conversion utilities"""

from enum import Enum
from typing import List, Optional, Type, TypeVar

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)


class EnumHelper:
    """
    Parse config keys into enum members and list valid names

    Example:
        kind = EnumHelper.from_string(AnimationKind, "fade_in")   # AnimationKind.FADE_IN
    """

    @staticmethod
    def from_string(enum_class: Type[E], name: str, case_insensitive: bool = True,
                    default: Optional[E] = None) -> E:
        """
        Parse string to Enum member.

        Args:
            enum_class: Enum class to parse into
            name: Member name (case-insensitive by default)
            case_insensitive: If True, matches ignoring case
            default: Return value if not found (None = raise)

        Raises:
            ValueError: No member with that name and no default
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        wanted = name.upper() if case_insensitive else name
        for member in enum_class:
            if (member.name.upper() if case_insensitive else member.name) == wanted:
                return member

        if default is not None:
            return default
        raise ValueError(f"Invalid {enum_class.__name__} name: {name}")

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        """All member names, optionally lowercased for config files"""
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if lowercase:
            return [member.name.lower() for member in enum_class]
        return [member.name for member in enum_class]
