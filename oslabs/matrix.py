"""Threaded matrix multiplication with per-matrix, per-row and per-element threads."""

from __future__ import annotations

import os
import re
import sys
import threading
import time
from collections.abc import Callable, Sequence

Matrix = list[list[int]]

_HEADER = re.compile(r"\s*row=\s*([-+]?\d+)\s*col=\s*([-+]?\d+)")


def read_matrix(path: str | os.PathLike[str]) -> Matrix:
    """Read a matrix stored as a ``row=R col=C`` header followed by integers."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    match = _HEADER.match(text)
    if match is None:
        raise ValueError(f"{path}: missing 'row=R col=C' header")
    rows, cols = int(match.group(1)), int(match.group(2))
    if rows < 0 or cols < 0:
        raise ValueError(f"{path}: negative dimensions")
    try:
        values = [int(word) for word in text[match.end():].split()]
    except ValueError as exc:
        raise ValueError(f"{path}: {exc}") from exc
    if len(values) < rows * cols:
        raise ValueError(f"{path}: expected {rows * cols} values, got {len(values)}")
    return [values[r * cols:(r + 1) * cols] for r in range(rows)]


def write_matrix(path: str | os.PathLike[str], matrix: Sequence[Sequence[int]]) -> None:
    """Write a matrix in the format read by :func:`read_matrix`."""
    cols = len(matrix[0]) if matrix else 0
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(f"row={len(matrix)} col={cols}\n")
        for row in matrix:
            handle.write("".join(f"{value} " for value in row) + "\n")


def _dimensions(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> tuple[int, int]:
    if a and len(a[0]) != len(b):
        raise ValueError(
            f"cannot multiply: left has {len(a[0])} columns, right has {len(b)} rows"
        )
    return len(a), (len(b[0]) if b else 0)


def _element(a_row: Sequence[int], b: Sequence[Sequence[int]], col: int) -> int:
    return sum(x * b_row[col] for x, b_row in zip(a_row, b))


def _row(a_row: Sequence[int], b: Sequence[Sequence[int]], cols: int) -> list[int]:
    return [_element(a_row, b, col) for col in range(cols)]


def _run_threads(threads: Sequence[threading.Thread]) -> None:
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def multiply_per_matrix(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply ``a`` by ``b`` in a single worker thread."""
    rows, cols = _dimensions(a, b)
    result: Matrix = [[0] * cols for _ in range(rows)]

    def work() -> None:
        for i, a_row in enumerate(a):
            result[i] = _row(a_row, b, cols)

    _run_threads([threading.Thread(target=work)])
    return result


def multiply_per_row(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply ``a`` by ``b`` with one thread per result row."""
    rows, cols = _dimensions(a, b)
    result: Matrix = [[0] * cols for _ in range(rows)]

    def work(i: int, a_row: Sequence[int]) -> None:
        result[i] = _row(a_row, b, cols)

    _run_threads(
        [threading.Thread(target=work, args=(i, a_row)) for i, a_row in enumerate(a)]
    )
    return result


def multiply_per_element(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply ``a`` by ``b`` with one thread per result element."""
    rows, cols = _dimensions(a, b)
    result: Matrix = [[0] * cols for _ in range(rows)]

    def work(i: int, j: int, a_row: Sequence[int]) -> None:
        result[i][j] = _element(a_row, b, j)

    _run_threads(
        [
            threading.Thread(target=work, args=(i, j, a_row))
            for i, a_row in enumerate(a)
            for j in range(cols)
        ]
    )
    return result


def measure_time(func: Callable[[], object], label: str) -> float:
    """Call ``func``, print how long it took under ``label`` and return the seconds."""
    start = time.perf_counter()
    func()
    seconds = time.perf_counter() - start
    print(f"{label} - Execution Time: {seconds:.6f} seconds")
    return seconds


_METHODS = (
    ("per_matrix", "Method 1 (A thread per matrix)", multiply_per_matrix),
    ("per_row", "Method 2 (A thread per row)", multiply_per_row),
    ("per_element", "Method 3 (A thread per element)", multiply_per_element),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Multiply two matrix files with each method and write the three results."""
    args = list(sys.argv[1:] if argv is None else argv)
    a_path = args[0] if len(args) > 0 else "a.txt"
    b_path = args[1] if len(args) > 1 else "b.txt"
    prefix = args[2] if len(args) > 2 else "c"

    try:
        a = read_matrix(a_path)
        b = read_matrix(b_path)
        for suffix, label, method in _METHODS:
            out_path = f"{prefix}_{suffix}.txt"
            measure_time(
                lambda method=method, out_path=out_path: write_matrix(
                    out_path, method(a, b)
                ),
                label,
            )
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0