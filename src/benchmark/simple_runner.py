"""
Simple benchmark runner for the component sorts and the name search.

Usage examples:
    python -m src.benchmark.simple_runner
    python simple_runner.py --algorithms bubble_sort,insertion_sort --sizes 5,10,20
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.append(str(project_root))

# Import after path setup
from data.generate import ComponentGenerator  # noqa: E402
from src.benchmark import BenchmarkConfig, create_sort_benchmark  # noqa: E402
from src.data_structures.component_collection import MAX_COMPONENTS  # noqa: E402

ALGORITHM_NAMES = {
    "bubble_sort": "Bubble Sort (name)",
    "insertion_sort": "Insertion Sort (type)",
    "selection_sort": "Selection Sort (priority)",
    "binary_search": "Binary Search (name)",
}

COLORS = ["blue", "green", "red", "orange", "purple", "brown"]


def build_config(args, algorithms, sizes, suffix: str, style: str) -> BenchmarkConfig:
    return BenchmarkConfig(
        x_names=["N"],
        x_vals=sizes,
        line_arg="provider",
        line_vals=algorithms,
        line_names=[ALGORITHM_NAMES.get(alg, alg) for alg in algorithms],
        styles=[(COLORS[i % len(COLORS)], style) for i in range(len(algorithms))],
        ylabel="Time (ms)",
        plot_name=f"{args.output_prefix}-{suffix}",
        warmup_runs=args.warmup,
        measure_runs=args.runs,
        output_dir=args.output_dir,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark component sorts")
    parser.add_argument(
        "--algorithms",
        default="bubble_sort,insertion_sort,selection_sort,binary_search",
        help="Comma-separated list of algorithms to test",
    )
    parser.add_argument(
        "--sizes",
        default=",".join(str(n) for n in range(1, MAX_COMPONENTS + 1)),
        help=f"Comma-separated list of collection sizes (at most {MAX_COMPONENTS})",
    )
    parser.add_argument("--seed", type=int, default=42, help="Generator seed")
    parser.add_argument("--warmup", type=int, default=3)
    parser.add_argument("--runs", type=int, default=50)
    parser.add_argument(
        "--test-non-existing",
        action="store_true",
        help="Search for names that are not in the collection",
    )
    parser.add_argument(
        "--output-prefix", default="benchmark", help="Prefix for output plot files"
    )
    parser.add_argument("--output-dir", default=".", help="Directory for plot files")
    parser.add_argument("--no-plots", action="store_true", help="Skip generating plots")

    args = parser.parse_args(argv)

    algorithms = [alg.strip() for alg in args.algorithms.split(",")]
    try:
        sizes = [int(size.strip()) for size in args.sizes.split(",")]
    except ValueError as e:
        print(f"Error: invalid size list: {e}")
        sys.exit(1)

    oversized = [size for size in sizes if not 1 <= size <= MAX_COMPONENTS]
    if oversized:
        print(f"Error: sizes must be between 1 and {MAX_COMPONENTS}, got {oversized}")
        sys.exit(1)

    generator = ComponentGenerator(seed=args.seed)
    test_existing = not args.test_non_existing
    suffix = "existing" if test_existing else "non-existing"

    config = build_config(args, algorithms, sizes, suffix, "-" if test_existing else "--")
    benchmark = create_sort_benchmark(generator, config, test_existing=test_existing)
    benchmark.run(show_plots=False, print_data=True, save_plots=not args.no_plots)

    if not args.no_plots:
        print(f"\nBenchmark completed! Plots saved as {args.output_prefix}-{suffix}*.png")


if __name__ == "__main__":
    main()
