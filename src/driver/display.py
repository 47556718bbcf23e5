from typing import Iterable

from ..algorithms.instrumentation import Metrics
from ..data_structures.component import Component


def format_components(components: Iterable[Component]) -> str:
    """Render components as a table with 1-based IDs."""
    components = list(components)
    lines = [f"\n--- Components (total: {len(components)}) ---"]
    if not components:
        lines.append("[empty]")
        return "\n".join(lines)

    header = f"{'ID':<3} | {'NAME':<29} | {'TYPE':<19} | PRIORITY"
    lines.append(header)
    lines.append("-" * len(header))
    for i, component in enumerate(components, start=1):
        lines.append(
            f"{i:<3} | {component.name:<29} | {component.type:<19} | {component.priority:<8}"
        )
    return "\n".join(lines)


def format_component(component: Component) -> str:
    return (
        f"Name: {component.name} | Type: {component.type} | "
        f"Priority: {component.priority}"
    )


def format_metrics(label: str, metrics: Metrics) -> str:
    return (
        f"{label}: comparisons = {metrics.comparisons}, "
        f"time = {metrics.elapsed:.6f} s"
    )
