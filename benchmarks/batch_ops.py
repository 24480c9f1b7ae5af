from __future__ import annotations

import argparse
import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, Tuple

import numpy as np

from pbst import config as pbst_config
from pbst.algo import collect, delete_many, describe_tree, insert_many, size
from pbst.core.node import Node


@dataclass(frozen=True)
class BenchmarkResult:
    mode: Literal["insert", "delete"]
    elapsed_seconds: float
    batches: int
    batch_size: int
    values_processed: int
    throughput_values_per_sec: float
    final_size: int
    final_height: int


def _write_result_artifact(
    path: Path,
    *,
    runtime_snapshot: dict[str, Any],
    args: argparse.Namespace,
    result: BenchmarkResult,
) -> None:
    payload = {
        "timestamp": time.time(),
        "mode": result.mode,
        "batches": result.batches,
        "batch_size": result.batch_size,
        "values_processed": result.values_processed,
        "elapsed_seconds": result.elapsed_seconds,
        "throughput_values_per_sec": result.throughput_values_per_sec,
        "final_size": result.final_size,
        "final_height": result.final_height,
        "parameters": {
            "seed": args.seed,
            "bootstrap_batches": args.bootstrap_batches,
        },
        "runtime": runtime_snapshot,
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def _generate_keys(rng: np.random.Generator, count: int) -> list[int]:
    # Distinct keys drawn from a range wide enough to keep the tree shallow on average.
    keys = rng.choice(max(count * 16, 1), size=count, replace=False)
    return [int(key) for key in keys]


def benchmark_insert(
    *,
    batch_size: int,
    batches: int,
    seed: int,
) -> Tuple[Optional[Node], BenchmarkResult]:
    rng = np.random.default_rng(seed)
    keys = _generate_keys(rng, batch_size * batches)
    tree: Optional[Node] = None
    start = time.perf_counter()
    for idx in range(batches):
        batch = keys[idx * batch_size : (idx + 1) * batch_size]
        tree = insert_many(tree, batch)
    elapsed = time.perf_counter() - start
    processed = batch_size * batches
    throughput = processed / elapsed if elapsed > 0 else float("inf")
    stats = describe_tree(tree)
    return tree, BenchmarkResult(
        mode="insert",
        elapsed_seconds=elapsed,
        batches=batches,
        batch_size=batch_size,
        values_processed=processed,
        throughput_values_per_sec=throughput,
        final_size=stats.size,
        final_height=stats.height,
    )


def benchmark_delete(
    base_tree: Optional[Node],
    *,
    batch_size: int,
    batches: int,
    seed: int,
) -> Tuple[Optional[Node], BenchmarkResult]:
    rng = np.random.default_rng(seed)
    tree = base_tree
    start = time.perf_counter()
    completed_batches = 0
    for _ in range(batches):
        if size(tree) < batch_size:
            break
        present = np.asarray(collect(tree), dtype=np.int64)
        victims = rng.choice(present, size=batch_size, replace=False)
        tree = delete_many(tree, [int(value) for value in victims])
        completed_batches += 1
    elapsed = time.perf_counter() - start
    processed = batch_size * completed_batches
    throughput = processed / elapsed if elapsed > 0 else float("inf")
    stats = describe_tree(tree)
    return tree, BenchmarkResult(
        mode="delete",
        elapsed_seconds=elapsed,
        batches=completed_batches,
        batch_size=batch_size,
        values_processed=processed,
        throughput_values_per_sec=throughput,
        final_size=stats.size,
        final_height=stats.height,
    )


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark batch insert/delete throughput for the persistent tree."
    )
    parser.add_argument(
        "mode",
        choices=("insert", "delete"),
        help="Operation to benchmark.",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=512,
        help="Number of values per batch.",
    )
    parser.add_argument(
        "--batches",
        type=int,
        default=20,
        help="Number of batches to execute.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for key generation.",
    )
    parser.add_argument(
        "--bootstrap-batches",
        type=int,
        default=20,
        help="Initial insert batches used to populate the tree before delete benchmarks.",
    )
    parser.add_argument(
        "--log-json",
        type=str,
        default="",
        help="Optional path to write a JSON summary for the run.",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    runtime = pbst_config.runtime_config()
    runtime_snapshot = {
        "log_level": runtime.log_level,
        "recursion_limit": runtime.recursion_limit,
        "default_mode": runtime.default_mode,
    }
    mode: Literal["insert", "delete"] = args.mode  # type: ignore[assignment]

    if mode == "insert":
        _, result = benchmark_insert(
            batch_size=args.batch_size,
            batches=args.batches,
            seed=args.seed,
        )
    else:
        tree, _ = benchmark_insert(
            batch_size=args.batch_size,
            batches=args.bootstrap_batches,
            seed=args.seed,
        )
        _, result = benchmark_delete(
            tree,
            batch_size=args.batch_size,
            batches=args.batches,
            seed=args.seed + 1,
        )

    print(
        f"{result.mode} | batches={result.batches} "
        f"batch_size={result.batch_size} "
        f"values={result.values_processed} "
        f"time={result.elapsed_seconds:.4f}s "
        f"throughput={result.throughput_values_per_sec:,.1f} values/s "
        f"size={result.final_size} height={result.final_height}"
    )
    if args.log_json:
        log_path = Path(args.log_json)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _write_result_artifact(
            log_path,
            runtime_snapshot=runtime_snapshot,
            args=args,
            result=result,
        )
        print(f"[batch_ops] wrote summary to {log_path}")


if __name__ == "__main__":
    main()
