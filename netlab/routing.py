"""Routing tables by distance-vector updates and shortest paths by Dijkstra's algorithm."""

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

INF = 9999
"""Cost that marks a missing link in a distance-vector cost matrix."""


@dataclass(frozen=True)
class Route:
    """One entry of a router's table: next hop and cost, or None when unreachable."""

    dest: int
    next_hop: Optional[int]
    cost: Optional[int]


def _square(matrix: Sequence[Sequence[int]]) -> List[List[Optional[int]]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


@dataclass(frozen=True)
class RoutingTable:
    """Routing tables for every router; ``routes[i][j]`` is router i's route to j."""

    routes: Tuple[Tuple[Route, ...], ...]

    def _check(self, router: int) -> None:
        if not 0 <= router < len(self.routes):
            raise ValueError(f"router {router} is out of range")

    def _walk(self, source: int, dest: int) -> Tuple[List[int], bool]:
        nodes = [source]
        hop = self.routes[source][dest].next_hop
        while hop is not None and hop != dest:
            if hop in nodes:
                return nodes, False
            nodes.append(hop)
            hop = self.routes[hop][dest].next_hop
        if hop is None:
            return nodes, False
        nodes.append(dest)
        return nodes, True

    def path(self, source: int, dest: int) -> Optional[List[int]]:
        """Return the routers from ``source`` to ``dest``, or None if there is no path."""
        self._check(source)
        self._check(dest)
        if source == dest:
            return [source]
        nodes, reached = self._walk(source, dest)
        return nodes if reached else None

    def _path_text(self, source: int, dest: int) -> str:
        if source == dest:
            return str(source)
        nodes, reached = self._walk(source, dest)
        if len(nodes) == 1 and not reached:
            return "No path"
        text = " -> ".join(map(str, nodes))
        return text if reached else text + " -> No path"

    def render(self) -> str:
        """Return every router's table as tab-separated text."""
        parts: List[str] = []
        for source, row in enumerate(self.routes):
            parts.append(f"\nRouting table for Router {source}:\n")
            parts.append("Dest\tNextHop\tCost\tPath\n")
            for route in row:
                hop = "-" if route.next_hop is None else str(route.next_hop)
                cost = "-" if route.cost is None else str(route.cost)
                parts.append(f"{route.dest}\t{hop}\t{cost}\t{self._path_text(source, route.dest)}\n")
        return "".join(parts)


def distance_vector(cost: Sequence[Sequence[Optional[int]]]) -> RoutingTable:
    """Build routing tables from a link-cost matrix; INF or None marks no link."""
    matrix = _square(cost)
    n = len(matrix)
    dist = [[None if c is None or c == INF else c for c in row] for row in matrix]
    via: List[List[Optional[int]]] = [
        [None if i == j or dist[i][j] is None else j for j in range(n)] for i in range(n)
    ]
    for i in range(n):
        for j in range(n):
            for k in range(n):
                first, second = dist[i][k], dist[k][j]
                if first is None or second is None:
                    continue
                if dist[i][j] is None or first + second < dist[i][j]:
                    dist[i][j] = first + second
                    via[i][j] = via[i][k]
    return RoutingTable(
        tuple(tuple(Route(j, via[i][j], dist[i][j]) for j in range(n)) for i in range(n))
    )


class ShortestPaths(NamedTuple):
    """Distances (None when unreachable) and predecessor links from one source."""

    distances: List[Optional[int]]
    parents: List[Optional[int]]


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> ShortestPaths:
    """Shortest paths over an adjacency matrix where 0 means no edge."""
    matrix = _square(graph)
    n = len(matrix)
    if not 0 <= source < n:
        raise ValueError(f"source {source} is out of range")
    dist: List[float] = [math.inf] * n
    parents: List[Optional[int]] = [None] * n
    visited = [False] * n
    dist[source] = 0
    for _ in range(n - 1):
        u = min((i for i in range(n) if not visited[i]), key=dist.__getitem__)
        visited[u] = True
        for w, weight in enumerate(matrix[u]):
            if weight and not visited[w] and dist[u] + weight < dist[w]:
                dist[w] = dist[u] + weight
                parents[w] = u
    return ShortestPaths([None if d == math.inf else int(d) for d in dist], parents)


def path_to(parent: Sequence[Optional[int]], dest: int) -> List[int]:
    """Follow predecessor links back from ``dest`` and return the path from the source."""
    nodes: List[int] = []
    node: Optional[int] = dest
    while node is not None:
        if node in nodes:
            raise ValueError("parent links form a cycle")
        nodes.append(node)
        node = parent[node]
    return nodes[::-1]