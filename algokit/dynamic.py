"""Dynamic programming: longest common subsequence, matrix-chain order, 0/1 knapsack."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Direction",
    "LcsResult",
    "MatrixChainResult",
    "KnapsackResult",
    "lcs",
    "matrix_chain_order",
    "knapsack_01",
]


class Direction(Enum):
    """Where an LCS table cell took its value from."""

    DIAGONAL = "D"
    UP = "U"
    LEFT = "L"


@dataclass(frozen=True)
class LcsResult:
    """LCS length table and direction table for two sequences.

    ``lengths[i][j]`` is the LCS length of ``x[:i]`` and ``y[:j]``;
    ``directions`` has the same shape, with ``None`` on row 0 and column 0.
    """

    x: Sequence
    y: Sequence
    lengths: tuple[tuple[int, ...], ...]
    directions: tuple[tuple[Direction | None, ...], ...]

    @property
    def length(self) -> int:
        """Length of the longest common subsequence."""
        return self.lengths[-1][-1]

    def subsequence(self) -> list:
        """Return one longest common subsequence, following the direction table."""
        i, j = len(self.x), len(self.y)
        found = []
        while i > 0 and j > 0:
            step = self.directions[i][j]
            if step is Direction.DIAGONAL:
                found.append(self.x[i - 1])
                i -= 1
                j -= 1
            elif step is Direction.UP:
                i -= 1
            else:
                j -= 1
        found.reverse()
        return found


def lcs(x: Sequence, y: Sequence) -> LcsResult:
    """Fill the LCS tables for ``x`` and ``y``; ties prefer moving up."""
    m, n = len(x), len(y)
    lengths = [[0] * (n + 1) for _ in range(m + 1)]
    directions: list[list[Direction | None]] = [[None] * (n + 1) for _ in range(m + 1)]
    for i, xi in enumerate(x, start=1):
        row, above = lengths[i], lengths[i - 1]
        for j, yj in enumerate(y, start=1):
            if xi == yj:
                row[j] = above[j - 1] + 1
                directions[i][j] = Direction.DIAGONAL
            elif above[j] >= row[j - 1]:
                row[j] = above[j]
                directions[i][j] = Direction.UP
            else:
                row[j] = row[j - 1]
                directions[i][j] = Direction.LEFT
    return LcsResult(
        x=x,
        y=y,
        lengths=tuple(map(tuple, lengths)),
        directions=tuple(map(tuple, directions)),
    )


@dataclass(frozen=True)
class MatrixChainResult:
    """Cost and split tables for multiplying matrices ``A1..An``.

    Matrix ``Ai`` has shape ``dimensions[i-1] x dimensions[i]``. Tables are
    indexed from 1, as ``costs[i][j]`` and ``splits[i][j]``.
    """

    dimensions: tuple[int, ...]
    costs: tuple[tuple[int, ...], ...]
    splits: tuple[tuple[int, ...], ...]

    @property
    def count(self) -> int:
        """Number of matrices in the chain."""
        return len(self.dimensions) - 1

    @property
    def cost(self) -> int:
        """Fewest scalar multiplications for the whole chain."""
        return self.costs[1][self.count]

    def _render(self, i: int, j: int) -> str:
        if i == j:
            return f"A{i}"
        k = self.splits[i][j]
        return f"({self._render(i, k)}{self._render(k + 1, j)})"

    def parenthesization(self) -> str:
        """Return the optimal order, written like ``((A1A2)A3)``."""
        return self._render(1, self.count)


def matrix_chain_order(dimensions: Sequence[int]) -> MatrixChainResult:
    """Find the cheapest way to bracket a chain of matrices with these dimensions."""
    dims = tuple(dimensions)
    if len(dims) < 2:
        raise ValueError("at least one matrix (two dimensions) is needed")
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")
    n = len(dims) - 1
    costs = [[0] * (n + 1) for _ in range(n + 1)]
    splits = [[0] * (n + 1) for _ in range(n + 1)]
    for span in range(2, n + 1):
        for i in range(1, n - span + 2):
            j = i + span - 1
            best = math.inf
            for k in range(i, j):
                q = costs[i][k] + costs[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                if q < best:
                    best = q
                    splits[i][j] = k
            costs[i][j] = int(best)
    return MatrixChainResult(
        dimensions=dims,
        costs=tuple(map(tuple, costs)),
        splits=tuple(map(tuple, splits)),
    )


@dataclass(frozen=True)
class KnapsackResult:
    """The 0/1 knapsack table: ``table[i][w]`` is the best value from the
    first ``i`` items within weight ``w``."""

    capacity: int
    weights: tuple[int, ...]
    values: tuple[int, ...]
    table: tuple[tuple[int, ...], ...]

    @property
    def best_value(self) -> int:
        """Greatest total value that fits in the capacity."""
        return self.table[-1][-1]

    def selected(self) -> list[int]:
        """Return the indices (from 0, ascending) of the items in an optimal load."""
        chosen = []
        i, w = len(self.weights), self.capacity
        while i > 0 and w > 0:
            if self.table[i][w] != self.table[i - 1][w]:
                chosen.append(i - 1)
                w -= self.weights[i - 1]
            i -= 1
        chosen.reverse()
        return chosen


def knapsack_01(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> KnapsackResult:
    """Solve the 0/1 knapsack problem for items given by weight and value."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(wt < 0 for wt in weights):
        raise ValueError("weights must not be negative")
    table = [[0] * (capacity + 1)]
    for wt, val in zip(weights, values):
        above = table[-1]
        row = [0] * (capacity + 1)
        for w in range(1, capacity + 1):
            row[w] = above[w]
            if wt <= w:
                row[w] = max(row[w], val + above[w - wt])
        table.append(row)
    return KnapsackResult(
        capacity=capacity,
        weights=tuple(weights),
        values=tuple(values),
        table=tuple(map(tuple, table)),
    )