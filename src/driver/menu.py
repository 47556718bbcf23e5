from typing import Callable, List, Optional

from ..algorithms.instrumentation import Clock
from ..data_structures.component import Component, validate_priority
from ..data_structures.component_collection import MAX_COMPONENTS
from . import actions
from .display import format_component, format_components, format_metrics
from .session import Session

MENU_TEXT = """
========== ESCAPE TOWER ASSEMBLY ==========
1 - Register components
2 - Sort by NAME (Bubble Sort) and measure (recommended before searching)
3 - Sort by TYPE (Insertion Sort) and measure
4 - Sort by PRIORITY (Selection Sort) and measure
5 - Find key component by NAME (Binary Search) [requires NAME order]
6 - Show current components
0 - Exit"""

NO_COMPONENTS = "No components registered."


class Menu:
    """
    Interactive console loop driving the sorts and the search.

    Input and output are injectable so the loop can be scripted; end of
    input (EOFError) ends the loop.
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clock: Optional[Clock] = None,
    ):
        self.session = session if session is not None else Session()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.clock = clock

    def run(self) -> Session:
        """Run until the user exits or input ends; return the final session."""
        while True:
            self.output_fn(MENU_TEXT)
            choice = self._read("Choice: ")
            if choice is None:
                break

            try:
                option = int(choice.strip())
            except ValueError:
                self.output_fn("Invalid input.")
                continue

            if option == 0:
                self.output_fn("Closing the assembly module. Good luck escaping!")
                break
            elif option == 1:
                self.register_components()
            elif option == 2:
                self._sort(actions.sort_name, "Bubble Sort by NAME")
            elif option == 3:
                self._sort(actions.sort_type, "Insertion Sort by TYPE")
            elif option == 4:
                self._sort(actions.sort_priority, "Selection Sort by PRIORITY")
            elif option == 5:
                self.search_component()
            elif option == 6:
                self.output_fn(format_components(self.session.collection))
            else:
                self.output_fn("Invalid option.")

        return self.session

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def register_components(self) -> None:
        """Ask for a quantity, then name, type and priority of each component."""
        entries = self._read_entries()
        self.session, added = actions.register(self.session, entries or [])
        if entries is not None:
            self.output_fn(f"\nRegistration complete: {added} components.")
        self.output_fn(format_components(self.session.collection))

    def _read_entries(self) -> Optional[List[Component]]:
        raw = self._read(f"\nHow many components to register? (1-{MAX_COMPONENTS}): ")
        if raw is None:
            return None
        try:
            quantity = int(raw.strip())
            if quantity < 1:
                raise ValueError(quantity)
        except ValueError:
            self.output_fn("Invalid input. Registration aborted.")
            return None
        quantity = min(quantity, MAX_COMPONENTS)

        entries = []
        for i in range(quantity):
            self.output_fn(f"\n--- Component {i + 1} ---")
            name = self._read("Name: ") or ""
            type_ = self._read("Type (e.g. control, support, propulsion): ") or ""
            priority = self._read_priority()
            if priority is None:
                self.output_fn("Input ended. Registration aborted.")
                return None
            entries.append(Component.create(name, type_, priority))
        return entries

    def _read_priority(self) -> Optional[int]:
        while True:
            raw = self._read("Priority (1-10): ")
            if raw is None:
                return None
            try:
                return validate_priority(int(raw.strip()))
            except ValueError:
                self.output_fn("Invalid value. Try again.")

    def _sort(self, action, label: str) -> None:
        self.session, metrics = action(self.session, clock=self.clock)
        if metrics is None:
            self.output_fn(NO_COMPONENTS)
            return
        self.output_fn("\n" + format_metrics(f"{label} done", metrics))
        self.output_fn(format_components(self.session.collection))

    def search_component(self) -> None:
        if self.session.is_empty:
            self.output_fn(NO_COMPONENTS)
            return

        auto_sort = False
        if not self.session.sorted_by_name:
            self.output_fn("Warning: binary search requires the components sorted by NAME.")
            answer = self._read("Run Bubble Sort by NAME now? (y/n): ")
            if not answer or answer.strip()[:1].lower() != "y":
                self.output_fn("Search cancelled. Sort by NAME before using binary search.")
                return
            auto_sort = True

        key = self._read("Name of the key component to find: ")
        if key is None:
            return
        key = key.rstrip("\r\n")

        self.session, outcome = actions.search(
            self.session, key, auto_sort=auto_sort, clock=self.clock
        )
        if outcome is None:
            return

        if outcome.corrective_sort is not None:
            self.output_fn(
                "\n" + format_metrics("Bubble Sort by NAME done", outcome.corrective_sort)
            )
        if outcome.component is not None:
            self.output_fn(
                f"\nComponent found at position {outcome.index} (ID {outcome.index + 1}):"
            )
            self.output_fn(format_component(outcome.component))
        else:
            self.output_fn(f"\nComponent '{key}' not found.")
        self.output_fn(format_metrics("Binary search", outcome.metrics))
