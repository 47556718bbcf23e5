from dataclasses import dataclass

MAX_NAME_LENGTH = 29
MAX_TYPE_LENGTH = 19
MIN_PRIORITY = 1
MAX_PRIORITY = 10

DEFAULT_NAME = "SEM_NOME"
DEFAULT_TYPE = "GENERIC"


@dataclass(eq=False)
class Component:
    """
    A piece of tower equipment.

    Components have no identity beyond their position in a collection, so
    equality falls back to object identity.

    Attributes:
        name: Component name, at most MAX_NAME_LENGTH characters
        type: Component type (e.g. control, support, propulsion)
        priority: Assembly priority from MIN_PRIORITY (lowest) to MAX_PRIORITY
    """

    name: str
    type: str
    priority: int

    @classmethod
    def create(cls, name: str, type: str, priority: int) -> "Component":
        """
        Build a component from raw registration input.

        Empty name and type fall back to sentinel placeholders and overlong
        text is truncated.

        Raises:
            ValueError: If priority is not an integer between 1 and 10
        """
        name = name.rstrip("\r\n")[:MAX_NAME_LENGTH] or DEFAULT_NAME
        type = type.rstrip("\r\n")[:MAX_TYPE_LENGTH] or DEFAULT_TYPE
        return cls(name=name, type=type, priority=validate_priority(priority))


def validate_priority(priority: int) -> int:
    """Return priority unchanged if it lies in the valid range, else raise ValueError."""
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ValueError(f"Priority must be an integer, got {priority!r}")
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise ValueError(
            f"Priority {priority} out of range [{MIN_PRIORITY}, {MAX_PRIORITY}]"
        )
    return priority
