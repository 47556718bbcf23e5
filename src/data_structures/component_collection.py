from typing import Iterable, Iterator, List, Optional

from .component import Component

MAX_COMPONENTS = 20


class ComponentCollection:
    """Ordered, growable sequence of components bounded by a fixed capacity."""

    def __init__(
        self,
        components: Optional[Iterable[Component]] = None,
        capacity: int = MAX_COMPONENTS,
    ):
        if capacity < 0:
            raise ValueError("Capacity must be non-negative")
        self.capacity = capacity
        self._items: List[Component] = []
        if components is not None:
            for component in components:
                self.append(component)

    def append(self, component: Component) -> None:
        """Add a component at the end; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError(f"Collection is full ({self.capacity} components)")
        self._items.append(component)

    def extend_clamped(self, components: Iterable[Component]) -> int:
        """
        Append components until the collection is full.

        Returns:
            Number of components actually added
        """
        added = 0
        for component in components:
            if self.is_full():
                break
            self._items.append(component)
            added += 1
        return added

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> "ComponentCollection":
        """Shallow copy: a new ordering over the same component objects."""
        return ComponentCollection(self._items, capacity=self.capacity)

    def __getitem__(self, index: int) -> Component:
        return self._items[index]

    def __setitem__(self, index: int, component: Component) -> None:
        self._items[index] = component

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ComponentCollection({len(self)}/{self.capacity})"
