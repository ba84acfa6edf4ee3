import sys
import time
from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np

from sorters import SortingType, get_sorter

SIZES = [10, 1000, 10000]  # 1,000,000 is out of reach for bubble sort in pure Python
PREVIEW_LENGTH = 50
SEED = None
PLOT_RESULTS = False


@dataclass
class BenchmarkResult:
    sorting_type: SortingType
    size: int
    elapsed_ms: float
    comparisons: int
    preview: list


def make_rng(seed=None):
    return np.random.default_rng(seed)


def generate_array(n, rng):
    """
    Generates a list of n integers drawn uniformly from [0, n).
    """
    if n < 0:
        raise ValueError(f"Array size must be non-negative, got {n}")
    if n == 0:
        return []
    return rng.integers(0, n, size=n).tolist()


def format_preview(values):
    return ", ".join(str(v) for v in values)


def measure_time(arr, sorter, sorting_type=None):
    """
    Sorts a copy of arr with the given sorter and measures the wall-clock time taken.
    The caller's list is never modified.
    """
    arr_copy = arr.copy()
    start_time = time.perf_counter()
    sorter.sort(arr_copy)
    end_time = time.perf_counter()
    return BenchmarkResult(
        sorting_type=sorting_type,
        size=len(arr_copy),
        elapsed_ms=(end_time - start_time) * 1000,
        comparisons=sorter.comparisons,
        preview=arr_copy[:PREVIEW_LENGTH],
    )


def run_benchmark(sizes, rng, out=None):
    """
    Runs every sorting type against one random array per size and prints a report.
    Returns the BenchmarkResult of each measurement in run order.
    """
    if out is None:
        out = sys.stdout
    results = []

    for n in sizes:
        print(f"-----------| Number of elements: {n} |-----------\n", file=out)
        arr = generate_array(n, rng)

        for sorting_type in SortingType:
            print(f"Sorting type: {sorting_type.name}", file=out)
            result = measure_time(arr, get_sorter(sorting_type), sorting_type)
            print(f"Execution time: {result.elapsed_ms:.4f} ms", file=out)
            print(f"Comparisons: {result.comparisons}", file=out)
            print(f"Sorted array: {format_preview(result.preview)}\n", file=out)
            results.append(result)

    return results


def collect_times(results):
    """Group results per sorting type into (sizes, elapsed_ms) numpy arrays."""
    times = {}
    for sorting_type in SortingType:
        picked = [r for r in results if r.sorting_type is sorting_type]
        if picked:
            times[sorting_type] = (
                np.array([r.size for r in picked]),
                np.array([r.elapsed_ms for r in picked]),
            )
    return times


def find_crossover(sizes, slow_times, fast_times):
    """
    Returns the first size at which fast_times beats slow_times, or None.
    """
    sizes = np.asarray(sizes)
    slow_times = np.asarray(slow_times)
    fast_times = np.asarray(fast_times)
    if not (len(sizes) == len(slow_times) == len(fast_times)):
        raise ValueError("sizes and timings must have the same length")

    crossover_index = np.where(fast_times < slow_times)[0]
    if len(crossover_index) > 0:
        return int(sizes[crossover_index[0]])
    return None


def bubble_merge_crossover(results):
    times = collect_times(results)
    if SortingType.BUBBLE not in times or SortingType.MERGE not in times:
        return None
    sizes, bubble_times = times[SortingType.BUBBLE]
    _, merge_times = times[SortingType.MERGE]
    return find_crossover(sizes, bubble_times, merge_times)


def plot_results(results, show=True):
    times = collect_times(results)

    fig = plt.figure(figsize=(12, 6))
    for sorting_type, (sizes, elapsed) in times.items():
        plt.plot(sizes, elapsed, marker='o', label=sorting_type.name.title() + ' Sort')

    crossover_n = bubble_merge_crossover(results)
    if crossover_n is not None:
        plt.axvline(x=crossover_n, color='gray', linestyle='--', label=f'Crossover at n = {crossover_n}')

    plt.xscale('log')
    plt.yscale('log')
    plt.xlabel('Input Size (n)')
    plt.ylabel('Time (ms)')
    plt.legend()
    plt.grid(True)
    if show:
        plt.show()
    return fig


def main(sizes=SIZES, seed=SEED, plot=PLOT_RESULTS):
    rng = make_rng(seed)
    results = run_benchmark(sizes, rng)

    crossover_n = bubble_merge_crossover(results)
    if crossover_n is not None:
        print(f"Merge sort overtakes bubble sort at n = {crossover_n}")
    else:
        print("No crossover point found in the tested range.")

    if plot:
        plot_results(results)


if __name__ == "__main__":
    main()
