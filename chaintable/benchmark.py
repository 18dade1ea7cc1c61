"""
Timing harness for ChainedHashTable.

Times set / get / delete / items over exponentially growing input sizes
against one fixed capacity and writes the results as CSV. Because the
table never resizes, larger inputs show the cost of longer chains.

Usage examples:
    python -m chaintable.benchmark --output results.csv
    python -m chaintable.benchmark --capacity 100 --base-input 50 --steps 6
"""

import argparse
import csv
import logging
import random
import statistics
import string
import time

from .config import DEFAULT_CAPACITY, configure_logging
from .datastructures.hash_map import ChainedHashTable

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Load Factor",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int, key_length: int = 8):
    """Generate a list of random (key, value) string pairs."""
    alphabet = string.ascii_letters + string.digits
    return [
        ("".join(random.choices(alphabet, k=key_length)), str(random.randint(0, 1000000)))
        for _ in range(size)
    ]


def measure_operation_time(operation, capacity: int, input_size: int, iterations: int = 5):
    """Run the operation several times; return (mean ms, stdev ms, final load factor)."""
    times = []
    load = 0.0
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        table = operation(capacity, data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        load = table.load()

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev, load


# ----------------------------
# Operations to Benchmark
# ----------------------------

def _filled(capacity, data):
    table = ChainedHashTable(capacity)
    for k, v in data:
        table.set(k, v)
    return table


def bench_set(capacity, data):
    return _filled(capacity, data)


def bench_get(capacity, data):
    table = _filled(capacity, data)
    for k, _ in data:
        table.get(k)
    return table


def bench_delete(capacity, data):
    table = _filled(capacity, data)
    for k, _ in data[: len(data) // 2]:
        table.delete(k)
    return table


def bench_items(capacity, data):
    table = _filled(capacity, data)
    for _ in table.items():
        pass
    return table


OPERATIONS = {
    "set": bench_set,
    "get": bench_get,
    "delete": bench_delete,
    "items": bench_items,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    capacity: int = DEFAULT_CAPACITY,
    base_input: int = 100,
    steps: int = 8,
    iterations: int = 5,
):
    """Write one CSV row per (operation, input size) and return the rows."""
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, load = measure_operation_time(
                    op_func, capacity, size, iterations
                )
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{load:.3f}"]
                writer.writerow(row)
                rows.append(row)
                logger.info(
                    "%-7s size=%-8d avg=%.3f ms std=%.3f ms load=%.3f",
                    op_name, size, avg_time, std_time, load,
                )

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return rows


# ----------------------------
# Main Entry Point
# ----------------------------

def build_parser():
    parser = argparse.ArgumentParser(
        description="Benchmark a fixed-capacity chained hash table."
    )
    parser.add_argument("-o", "--output", default="chained_hash_table_benchmark.csv",
                        help="CSV file to write results to")
    parser.add_argument("-c", "--capacity", type=int, default=DEFAULT_CAPACITY,
                        help="Bucket count of every table under test")
    parser.add_argument("-b", "--base-input", type=int, default=100,
                        help="Smallest input size; each step doubles it")
    parser.add_argument("-s", "--steps", type=int, default=8,
                        help="Number of input sizes to run")
    parser.add_argument("-n", "--iterations", type=int, default=5,
                        help="Repetitions per measurement")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    run_benchmarks(
        args.output,
        capacity=args.capacity,
        base_input=args.base_input,
        steps=args.steps,
        iterations=args.iterations,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
