"""Graph traversal and single-source shortest paths."""

from __future__ import annotations

import heapq
from bisect import bisect_left, insort
from collections import deque
from collections.abc import Sequence

INF = 987654321
"""Distance reported for nodes that cannot be reached."""


class Graph:
    """An undirected graph with non-negative integer edge weights."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("graph size must not be negative")
        self.size = size
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(size)]

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise ValueError(f"node {node} is not in the graph")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Join ``u`` and ``v`` by an edge of the given weight."""
        self._check_node(u)
        self._check_node(v)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def shortest_paths(self, source: int) -> list[int]:
        """Return distances from ``source`` using a binary heap; INF if unreachable."""
        self._check_node(source)
        dist = [INF] * self.size
        dist[source] = 0
        heap = [(0, source)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, weight in self._adjacency[u]:
                candidate = d + weight
                if candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(heap, (candidate, v))
        return dist

    def shortest_paths_ordered(self, source: int) -> list[int]:
        """Return distances from ``source`` using an ordered frontier; INF if unreachable."""
        self._check_node(source)
        dist = [INF] * self.size
        dist[source] = 0
        frontier = [(0, source)]
        while frontier:
            d, u = frontier.pop(0)
            for v, weight in self._adjacency[u]:
                candidate = d + weight
                if candidate < dist[v]:
                    stale = (dist[v], v)
                    index = bisect_left(frontier, stale)
                    if index < len(frontier) and frontier[index] == stale:
                        del frontier[index]
                    dist[v] = candidate
                    insort(frontier, (candidate, v))
        return dist


def _check_adjacency(graph: Sequence[Sequence[int]]) -> None:
    size = len(graph)
    for neighbours in graph:
        for node in neighbours:
            if not 0 <= node < size:
                raise ValueError(f"node {node} is not in the graph")


def is_connected_bfs(graph: Sequence[Sequence[int]]) -> bool:
    """Tell whether every node is reachable from node 0, searching breadth first."""
    _check_adjacency(graph)
    if not graph:
        return True
    visited = [False] * len(graph)
    visited[0] = True
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return all(visited)


def is_connected_dfs(graph: Sequence[Sequence[int]]) -> bool:
    """Tell whether every node is reachable from node 0, searching depth first."""
    _check_adjacency(graph)
    if not graph:
        return True
    visited = [False] * len(graph)
    stack = [0]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        stack.extend(n for n in graph[node] if not visited[n])
    return all(visited)