"""
Binary Min-Heap Demo -- Smoke test, randomized verification against a sorted
reference, error handling walkthrough, and insert/extract timing versus log2(n).

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from min_heap import BinaryMinHeap, HeapCapacityError, HeapUnderflowError

SEED = 42
DEMO_CAPACITY = 8
DEMO_VALUES = [8, 5, 4, 3, 6]

VIZ_DIR = Path(__file__).parent / "viz"
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "insert": "#3498db",
    "extract": "#e74c3c",
    "log": "#2c3e50",
}


# ---------------------------------------------------------------------------
# Example 1: Smoke Test
# ---------------------------------------------------------------------------
def example_1_smoke_test():
    """Insert a fixed sequence, then extract and print until empty."""
    print("=" * 60)
    print("Example 1: Insert 8, 5, 4, 3, 6 then Drain")
    print("=" * 60)

    heap = BinaryMinHeap(DEMO_CAPACITY)
    for value in DEMO_VALUES:
        heap.insert(value)
    print(f"  Slots: [{heap.render()}]")

    drained = []
    while not heap.is_empty():
        value = heap.extract_min()
        drained.append(value)
        print(f"  {value}")

    print(f"  Slots after drain: [{heap.render()}]")
    print()
    return drained


# ---------------------------------------------------------------------------
# Example 2: Randomized Session vs Sorted Reference
# ---------------------------------------------------------------------------
def example_2_random_session(capacity=64, steps=2000, seed=SEED):
    """Interleave inserts and extracts, checking each result against a reference list."""
    print("=" * 60)
    print("Example 2: Randomized Session vs Sorted Reference")
    print("=" * 60)

    rng = np.random.default_rng(seed)
    heap = BinaryMinHeap(capacity)
    reference = []
    inserted = extracted = mismatches = 0

    for _ in range(steps):
        do_insert = not heap.is_full() and (heap.is_empty() or rng.random() < 0.55)
        if do_insert:
            value = int(rng.integers(0, 1000))
            heap.insert(value)
            reference.append(value)
            reference.sort()
            inserted += 1
        else:
            value = heap.extract_min()
            if value != reference.pop(0):
                mismatches += 1
            extracted += 1

    print(f"  Steps: {steps}, inserts: {inserted}, extracts: {extracted}")
    print(f"  Remaining: {heap.size()}/{heap.capacity}")
    print(f"  Mismatches against reference: {mismatches}")
    print()
    return mismatches


# ---------------------------------------------------------------------------
# Example 3: Capacity and Underflow Errors
# ---------------------------------------------------------------------------
def example_3_error_handling():
    """Show that failed operations raise and leave the heap untouched."""
    print("=" * 60)
    print("Example 3: Capacity and Underflow Errors")
    print("=" * 60)

    zero = BinaryMinHeap(0)
    print(f"  Capacity 0: empty={zero.is_empty()}, full={zero.is_full()}")
    try:
        zero.insert(1)
    except HeapCapacityError as exc:
        print(f"  insert -> {type(exc).__name__}: {exc}")

    one = BinaryMinHeap(1)
    one.insert(7)
    try:
        one.insert(3)
    except HeapCapacityError as exc:
        print(f"  insert into [{one.render()}] -> {type(exc).__name__}: {exc}")
    print(f"  extract_min -> {one.extract_min()}")
    for op in (one.extract_min, one.peek_min):
        try:
            op()
        except HeapUnderflowError as exc:
            print(f"  {op.__name__} -> {type(exc).__name__}: {exc}")
    print(f"  Size after failures: {one.size()}")
    print()


# ---------------------------------------------------------------------------
# Example 4: Timing vs log2(n)
# ---------------------------------------------------------------------------
def example_4_timing(sizes=(2 ** 8, 2 ** 10, 2 ** 12, 2 ** 14, 2 ** 16), seed=SEED):
    """Measure per-operation insert and extract cost and plot it against log2(n)."""
    print("=" * 60)
    print("Example 4: Per-Operation Cost vs Heap Size")
    print("=" * 60)

    rng = np.random.default_rng(seed)
    insert_us = []
    extract_us = []
    for n in sizes:
        values = rng.integers(0, 10 * n, size=n).tolist()
        heap = BinaryMinHeap(n)

        start = time.perf_counter()
        for value in values:
            heap.insert(value)
        insert_us.append((time.perf_counter() - start) / n * 1e6)

        start = time.perf_counter()
        while heap:
            heap.extract_min()
        extract_us.append((time.perf_counter() - start) / n * 1e6)

        print(f"  n={n:>6}: insert {insert_us[-1]:.3f} us/op, extract {extract_us[-1]:.3f} us/op")

    sizes = np.array(sizes)
    log_n = np.log2(sizes)
    scale = np.mean(np.array(extract_us) / log_n)

    fig, ax = plt.subplots(figsize=(9, 6))
    ax.plot(sizes, insert_us, "o-", color=COLORS["insert"], linewidth=2, label="insert")
    ax.plot(sizes, extract_us, "s-", color=COLORS["extract"], linewidth=2, label="extract_min")
    ax.plot(sizes, scale * log_n, "--", color=COLORS["log"], alpha=0.7, label="c * log2(n)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Microseconds per operation")
    ax.set_title("BinaryMinHeap Operation Cost")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    VIZ_DIR.mkdir(exist_ok=True)
    fig.savefig(VIZ_DIR / "04_operation_cost.png", dpi=150)
    print()
    return fig


def generate_report(figures):
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        for fig in figures:
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    print()
    print("*" * 60)
    print("  BINARY MIN-HEAP DEMO")
    print("*" * 60)
    print()

    example_1_smoke_test()
    example_2_random_session()
    example_3_error_handling()
    fig = example_4_timing()
    generate_report([fig])

    print("=" * 60)
    print(f"All visualizations saved to: {VIZ_DIR}")
    print("=" * 60)


if __name__ == "__main__":
    main()
