"""Graph algorithms: breadth-first search, minimum spanning trees, topological order."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

__all__ = [
    "BfsResult",
    "WeightedEdge",
    "TreeEdge",
    "bfs",
    "prim_mst",
    "kruskal_mst",
    "topological_sort",
]


@dataclass
class BfsResult:
    """Visit order, hop distances and BFS-tree parents of the reached nodes."""

    order: list[int] = field(default_factory=list)
    distance: dict[int, int] = field(default_factory=dict)
    parent: dict[int, int | None] = field(default_factory=dict)


class WeightedEdge(NamedTuple):
    """An undirected edge between ``u`` and ``v`` with a weight."""

    u: int
    v: int
    weight: float


class TreeEdge(NamedTuple):
    """An edge of a spanning tree, from the node's parent to the node."""

    parent: int
    node: int
    weight: float


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise ValueError(f"node {node} is outside {low}..{high}")


def bfs(node_count: int, edges: Iterable[tuple[int, int]], source: int = 1) -> BfsResult:
    """Breadth-first search over an undirected graph with nodes ``1..node_count``.

    Neighbours are explored in increasing numeric order.
    """
    adjacency: dict[int, set[int]] = {n: set() for n in range(1, node_count + 1)}
    for x, y in edges:
        _check_node(x, 1, node_count)
        _check_node(y, 1, node_count)
        adjacency[x].add(y)
        adjacency[y].add(x)
    _check_node(source, 1, node_count)

    result = BfsResult(distance={source: 0}, parent={source: None})
    queue = deque([source])
    while queue:
        u = queue.popleft()
        result.order.append(u)
        for v in sorted(adjacency[u]):
            if v not in result.distance:
                result.distance[v] = result.distance[u] + 1
                result.parent[v] = u
                queue.append(v)
    return result


def prim_mst(
    node_count: int, edges: Iterable[tuple[int, int, float]], source: int = 1
) -> list[TreeEdge]:
    """Prim's minimum spanning tree over nodes ``1..node_count``.

    Edges are returned in the order their nodes join the tree. A repeated
    edge keeps the weight given last.
    """
    adjacency: dict[int, dict[int, float]] = {n: {} for n in range(1, node_count + 1)}
    for x, y, weight in edges:
        _check_node(x, 1, node_count)
        _check_node(y, 1, node_count)
        adjacency[x][y] = weight
        adjacency[y][x] = weight
    _check_node(source, 1, node_count)

    key: dict[int, float] = {n: math.inf for n in adjacency}
    key[source] = 0
    pred: dict[int, int] = {}
    in_tree: set[int] = set()
    heap: list[tuple[float, int]] = [(0, source)]
    tree: list[TreeEdge] = []

    while heap:
        cost, u = heapq.heappop(heap)
        if u in in_tree or cost != key[u]:
            continue
        in_tree.add(u)
        if u != source:
            tree.append(TreeEdge(pred[u], u, cost))
        for v, weight in sorted(adjacency[u].items()):
            if v not in in_tree and weight < key[v]:
                key[v] = weight
                pred[v] = u
                heapq.heappush(heap, (weight, v))

    if len(in_tree) < node_count:
        raise ValueError("graph is not connected")
    return tree


def kruskal_mst(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> list[WeightedEdge]:
    """Kruskal's minimum spanning forest over vertices ``0..vertex_count-1``.

    Edges are considered by weight, then by endpoints, and returned in the
    order they were accepted.
    """
    candidates = []
    for u, v, weight in edges:
        _check_node(u, 0, vertex_count - 1)
        _check_node(v, 0, vertex_count - 1)
        candidates.append(WeightedEdge(u, v, weight))
    candidates.sort(key=lambda e: (e.weight, e.u, e.v))

    parent = list(range(vertex_count))

    def find(node: int) -> int:
        while parent[node] != node:
            node = parent[node]
        return node

    tree: list[WeightedEdge] = []
    for edge in candidates:
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            tree.append(edge)
            parent[root_u] = root_v
    return tree


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices ``1..vertex_count`` by decreasing depth-first finish time.

    For a directed acyclic graph every edge points forward in the result.
    Cycles are not reported.
    """
    adjacency: dict[int, list[int]] = {n: [] for n in range(1, vertex_count + 1)}
    for u, v in edges:
        _check_node(u, 1, vertex_count)
        _check_node(v, 1, vertex_count)
        adjacency[u].append(v)

    seen: set[int] = set()
    finished: list[int] = []
    for root in adjacency:
        if root in seen:
            continue
        seen.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished