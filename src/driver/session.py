from dataclasses import dataclass, field

from ..data_structures.component_collection import ComponentCollection


@dataclass
class Session:
    """
    Driver context passed into and returned from every action.

    Attributes:
        collection: The components being assembled
        sorted_by_name: True only right after a successful name sort; binary
            search relies on it
    """

    collection: ComponentCollection = field(default_factory=ComponentCollection)
    sorted_by_name: bool = False

    @property
    def is_empty(self) -> bool:
        return len(self.collection) == 0
