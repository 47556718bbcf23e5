import os
import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import matplotlib.pyplot as plt
import psutil

from ..algorithms.binary_search import BinarySearchByName
from ..algorithms.bubble_sort import BubbleSortByName
from ..algorithms.insertion_sort import InsertionSortByType
from ..algorithms.selection_sort import SelectionSortByPriority
from ..data_structures.component_collection import ComponentCollection

SORT_PROVIDERS = {
    "bubble_sort": BubbleSortByName,
    "insertion_sort": InsertionSortByType,
    "selection_sort": SelectionSortByPriority,
}


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run, similar to triton.testing.Benchmark"""

    x_names: List[str]
    x_vals: List[int]
    line_arg: str
    line_vals: List[str]
    line_names: List[str]
    styles: List[Tuple[str, str]]
    ylabel: str
    plot_name: str
    args: Dict[str, Any] = field(default_factory=dict)
    warmup_runs: int = 3
    measure_runs: int = 10
    min_runtime_ms: float = 0.0
    max_runs: int = 10_000
    measure_memory: bool = True
    measure_comparisons: bool = True
    output_dir: Union[str, Path] = "."


@dataclass
class BenchmarkResult:
    """Result of a single benchmark measurement"""

    value: float
    std_dev: float
    measurements: List[float]
    config_name: str
    x_value: int
    comparisons: Optional[float] = None
    memory_usage: Optional[float] = None


def current_memory_mb() -> float:
    """Resident set size of this process in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


class BenchmarkRunner:
    """Core benchmarking runner that handles timing and statistics"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.results: Dict[str, List[BenchmarkResult]] = {}
        self.total_steps: int = 0
        self.current_step: int = 0

    def do_bench(self, fn: Callable[[], Any]) -> Tuple[float, float, List[float], float]:
        """
        Run fn repeatedly and return timing statistics.

        fn returns a SortResult or SearchResult; its own time_taken is used,
        so copying the input collection outside the algorithm is not timed.

        Returns:
            (mean ms, std dev ms, per-run ms, mean comparisons)
        """
        for _ in range(self.config.warmup_runs):
            fn()

        times: List[float] = []
        comparisons: List[int] = []
        total_runtime = 0.0

        while len(times) < self.config.max_runs:
            result = fn()
            runtime_ms = result.time_taken * 1000
            times.append(runtime_ms)
            comparisons.append(result.comparisons)
            total_runtime += runtime_ms

            if (
                len(times) >= self.config.measure_runs
                and total_runtime >= self.config.min_runtime_ms
            ):
                break

        mean_time = statistics.mean(times)
        std_dev = statistics.stdev(times) if len(times) > 1 else 0.0

        return mean_time, std_dev, times, statistics.mean(comparisons)

    def run_benchmark(
        self,
        benchmark_fn: Callable[..., Any],
        setup_fns: Dict[str, Callable[..., Dict[str, Any]]],
    ) -> None:
        """Run the complete benchmark suite with progress indication"""
        self.total_steps = len(self.config.line_vals) * len(self.config.x_vals)
        self.current_step = 0

        print(f"\nStarting benchmark: {self.config.plot_name}")
        print(
            f"Testing {len(self.config.line_vals)} algorithms on {len(self.config.x_vals)} sizes"
        )
        print(f"Started at {datetime.now().strftime('%H:%M:%S')}")
        print("=" * 80)

        for i, line_val in enumerate(self.config.line_vals):
            line_results = []
            algo_name = (
                self.config.line_names[i]
                if i < len(self.config.line_names)
                else line_val.replace("_", " ").title()
            )

            print(f"\n🔍 [{i + 1}/{len(self.config.line_vals)}] Testing {algo_name}")
            print("-" * 60)

            for x_val in self.config.x_vals:
                self.current_step += 1
                progress = (self.current_step / self.total_steps) * 100
                print(
                    f"[{self.current_step:2d}/{self.total_steps}] "
                    f"N={x_val:>4} ({progress:5.1f}%) ",
                    end="",
                    flush=True,
                )

                start_time = time.time()

                try:
                    args = self.config.args.copy()
                    args[self.config.x_names[0]] = x_val
                    args[self.config.line_arg] = line_val

                    memory_usage = None
                    if line_val in setup_fns:
                        setup_data = setup_fns[line_val](**args)
                        args.update(setup_data)
                        if self.config.measure_memory:
                            memory_usage = setup_data.get("memory_usage")

                    mean_time, std_dev, measurements, comparisons = self.do_bench(
                        lambda: benchmark_fn(**args)
                    )

                    line_results.append(
                        BenchmarkResult(
                            value=mean_time,
                            std_dev=std_dev,
                            measurements=measurements,
                            config_name=line_val,
                            x_value=x_val,
                            comparisons=comparisons,
                            memory_usage=memory_usage,
                        )
                    )

                    elapsed = time.time() - start_time
                    print(
                        f"→ {mean_time:8.4f}ms (±{std_dev:6.4f}) "
                        f"cmp={comparisons:7.1f} [{elapsed:4.1f}s]"
                    )

                except (KeyError, ValueError) as e:
                    elapsed = time.time() - start_time
                    print(f"→ FAILED: {str(e)[:50]}... [{elapsed:4.1f}s]")
                    # Keep one result per size so plots stay aligned
                    line_results.append(
                        BenchmarkResult(
                            value=float("inf"),
                            std_dev=0.0,
                            measurements=[],
                            config_name=line_val,
                            x_value=x_val,
                        )
                    )

            self.results[line_val] = line_results

        print("\n" + "=" * 80)
        print(f"Benchmark completed at {datetime.now().strftime('%H:%M:%S')}")

    def generate_plot(self, show_plots: bool = True, save_plot: bool = True) -> List[Path]:
        """Generate performance plots; returns the paths of saved files"""
        saved = [
            self._generate_single_plot(
                "Sort/Search Time",
                self.config.ylabel,
                lambda r: r.value,
                lambda r: r.std_dev,
                show_plots,
                save_plot,
            )
        ]

        if self.config.measure_comparisons:
            saved.append(
                self._generate_single_plot(
                    "Comparisons",
                    "Comparisons",
                    lambda r: r.comparisons,
                    lambda r: 0,
                    show_plots,
                    save_plot,
                    suffix="-comparisons",
                )
            )

        if self.config.measure_memory:
            saved.append(
                self._generate_single_plot(
                    "Memory Usage",
                    "Memory (MB)",
                    lambda r: r.memory_usage,
                    lambda r: 0,
                    show_plots,
                    save_plot,
                    suffix="-memory",
                )
            )

        return [path for path in saved if path is not None]

    def _generate_single_plot(
        self,
        title_suffix: str,
        ylabel: str,
        value_fn: Callable,
        error_fn: Callable,
        show_plots: bool,
        save_plot: bool,
        suffix: str = "",
    ) -> Optional[Path]:
        """Generate a single plot"""
        plt.figure(figsize=(12, 8))

        for i, line_val in enumerate(self.config.line_vals):
            if line_val not in self.results:
                continue

            results = [r for r in self.results[line_val] if value_fn(r) is not None]
            if not results:
                continue

            color, style = (
                self.config.styles[i] if i < len(self.config.styles) else ("blue", "-")
            )
            label = (
                self.config.line_names[i]
                if i < len(self.config.line_names)
                else line_val
            )

            plt.errorbar(
                [r.x_value for r in results],
                [value_fn(r) for r in results],
                yerr=[error_fn(r) for r in results],
                color=color,
                linestyle=style,
                marker="o",
                label=label,
                capsize=5,
                capthick=2,
            )

        plt.xlabel(self.config.x_names[0])
        plt.ylabel(ylabel)
        plt.title(f"{self.config.plot_name} - {title_suffix}")
        plt.legend()
        plt.grid(True, alpha=0.3)
        plt.tight_layout()

        filename = None
        if save_plot:
            filename = Path(self.config.output_dir) / f"{self.config.plot_name}{suffix}.png"
            plt.savefig(filename, dpi=150, bbox_inches="tight")

        if show_plots:
            plt.show()
        else:
            plt.close()

        return filename

    def print_data(self) -> None:
        """Print detailed benchmark results"""
        print(f"\n{self.config.plot_name} Benchmark Results")
        print("=" * 80)

        for line_val in self.config.line_vals:
            if line_val not in self.results:
                continue

            results = self.results[line_val]
            line_name = self.config.line_names[self.config.line_vals.index(line_val)]

            print(f"\n{line_name} ({line_val}):")

            header = f"{'N':<6} {'Time (ms)':<12} {'Std Dev':<10}"
            if self.config.measure_comparisons:
                header += f" {'Comparisons':<12}"
            if self.config.measure_memory:
                header += f" {'Memory (MB)':<12}"
            print(header)
            print("-" * len(header))

            for result in results:
                row = f"{result.x_value:<6} {result.value:<12.4f} {result.std_dev:<10.4f}"
                if self.config.measure_comparisons and result.comparisons is not None:
                    row += f" {result.comparisons:<12.1f}"
                elif self.config.measure_comparisons:
                    row += f" {'N/A':<12}"
                if self.config.measure_memory and result.memory_usage is not None:
                    row += f" {result.memory_usage:<12.2f}"
                elif self.config.measure_memory:
                    row += f" {'N/A':<12}"

                print(row)


def perf_report(config: BenchmarkConfig):
    """Decorator for performance reporting, similar to triton.testing.perf_report"""

    def decorator(func):
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        def run(
            show_plots: bool = True,
            print_data: bool = True,
            save_plots: bool = True,
            setup_fns: Optional[Dict[str, Callable]] = None,
        ):
            runner = BenchmarkRunner(config)
            runner.run_benchmark(func, setup_fns or {})

            if print_data:
                runner.print_data()
            if show_plots or save_plots:
                runner.generate_plot(show_plots=show_plots, save_plot=save_plots)

            return runner

        wrapper.run = run
        wrapper.config = config
        return wrapper

    return decorator


class SortBenchmarkHelper:
    """Builds the inputs each provider needs for a given collection size"""

    def __init__(self, generator):
        self.generator = generator
        self._collections: Dict[int, ComponentCollection] = {}

    def collection_for(self, N: int) -> ComponentCollection:
        """Same random collection for every provider at a given size"""
        if N not in self._collections:
            self._collections[N] = self.generator.generate_collection(N)
        return self._collections[N]

    def setup_sort(self, N: int, **kwargs) -> Dict[str, Any]:
        return {
            "collection": self.collection_for(N),
            "memory_usage": current_memory_mb(),
        }

    def setup_binary_search(self, N: int, **kwargs) -> Dict[str, Any]:
        """Binary search needs a name-sorted copy; the sort is not measured"""
        collection = self.collection_for(N).copy()
        BubbleSortByName(collection, track_performance=False).sort()
        return {
            "collection": collection,
            "memory_usage": current_memory_mb(),
        }

    def pick_target(self, collection: ComponentCollection, test_existing: bool) -> str:
        if test_existing and len(collection) > 0:
            return collection[self.generator.random.randrange(len(collection))].name
        return "@not@exists@"


def create_sort_benchmark(
    generator, config: BenchmarkConfig, test_existing: bool = True
) -> Callable:
    """Create a benchmark function over the sort and search providers"""
    helper = SortBenchmarkHelper(generator)

    setup_functions = {
        "bubble_sort": helper.setup_sort,
        "insertion_sort": helper.setup_sort,
        "selection_sort": helper.setup_sort,
        "binary_search": helper.setup_binary_search,
    }

    @perf_report(config)
    def benchmark(N: int, provider: str, **kwargs):
        """Run one provider once on a fresh copy of the size-N collection"""
        collection = kwargs["collection"]

        if provider in SORT_PROVIDERS:
            algorithm = SORT_PROVIDERS[provider](
                collection.copy(), track_performance=False
            )
            return algorithm.sort()

        elif provider == "binary_search":
            target = helper.pick_target(collection, test_existing)
            return BinarySearchByName(collection, track_performance=False).search(target)

        else:
            raise ValueError(f"Unknown provider: {provider}")

    benchmark_setup_fns = {
        provider: setup_functions[provider]
        for provider in config.line_vals
        if provider in setup_functions
    }

    original_run = benchmark.run

    def enhanced_run(
        show_plots: bool = True, print_data: bool = True, save_plots: bool = True
    ):
        return original_run(
            show_plots=show_plots,
            print_data=print_data,
            save_plots=save_plots,
            setup_fns=benchmark_setup_fns,
        )

    benchmark.run = enhanced_run
    return benchmark
