import argparse
from typing import Iterator, Optional

from mimesis import Text
from mimesis.locales import Locale

from src.data_structures.component import (
    MAX_NAME_LENGTH,
    MAX_PRIORITY,
    MAX_TYPE_LENGTH,
    MIN_PRIORITY,
    Component,
)
from src.data_structures.component_collection import MAX_COMPONENTS, ComponentCollection

COMPONENT_TYPES = [
    "control",
    "support",
    "propulsion",
    "hull",
    "power",
    "sensor",
    "comms",
]


class ComponentGenerator:
    """Generates random tower components using mimesis."""

    def __init__(self, locale: Locale = Locale.EN, seed: Optional[int] = None):
        self.text = Text(locale=locale, seed=seed)
        # Reuse the provider's seeded random so one seed drives everything.
        self.random = self.text.random
        self.types = list(COMPONENT_TYPES)

    def generate_name(self) -> str:
        return self.text.word().capitalize()[:MAX_NAME_LENGTH]

    def generate_component(self) -> Component:
        """Generate a single component within the registration bounds."""
        return Component(
            name=self.generate_name(),
            type=self.random.choice(self.types)[:MAX_TYPE_LENGTH],
            priority=self.random.randint(MIN_PRIORITY, MAX_PRIORITY),
        )

    def generate_batch(self, count: int) -> Iterator[Component]:
        """Generate a batch of components."""
        for _ in range(count):
            yield self.generate_component()

    def generate_collection(self, count: int) -> ComponentCollection:
        """Generate a collection of count components, clamped to capacity."""
        collection = ComponentCollection()
        collection.extend_clamped(self.generate_batch(min(count, MAX_COMPONENTS)))
        return collection


def main():
    """Print a batch of random components."""
    parser = argparse.ArgumentParser(description="Generate random tower components")
    parser.add_argument("--count", type=int, default=MAX_COMPONENTS)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    generator = ComponentGenerator(seed=args.seed)
    for component in generator.generate_batch(args.count):
        print(f"{component.name},{component.type},{component.priority}")


if __name__ == "__main__":
    main()
