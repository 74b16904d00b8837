"""Graph algorithms: word ladders, itineraries, distances, orderings and trees."""

from __future__ import annotations

import heapq
import math
from collections import Counter, defaultdict, deque
from itertools import chain, combinations
from typing import Iterator, Optional, Sequence

_ITINERARY_START = "JFK"


def _one_apart(a: str, b: str) -> bool:
    return len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1


def find_ladders(
    begin_word: str, end_word: str, word_list: Sequence[str]
) -> list[list[str]]:
    """Return every shortest chain from ``begin_word`` to ``end_word`` in which
    neighbours differ in exactly one letter and every later word is listed.

    Returns an empty list when ``end_word`` is not listed or cannot be reached.
    """
    words = list(word_list)
    try:
        target = words.index(end_word) + 1
    except ValueError:
        return []

    nodes = [begin_word, *words]
    adjacency: list[list[int]] = [[] for _ in nodes]
    for a, b in combinations(range(len(nodes)), 2):
        if _one_apart(nodes[a], nodes[b]):
            adjacency[a].append(b)
            adjacency[b].append(a)

    distance = {0: 0}
    parents: defaultdict[int, list[int]] = defaultdict(list)
    queue = deque([0])
    while queue:
        node = queue.popleft()
        step = distance[node] + 1
        for neighbour in adjacency[node]:
            known = distance.get(neighbour)
            if known is None:
                distance[neighbour] = step
                parents[neighbour] = [node]
                queue.append(neighbour)
            elif known == step:
                parents[neighbour].append(node)

    if target not in distance:
        return []

    def walk(node: int) -> Iterator[list[str]]:
        if node == 0:
            yield [begin_word]
            return
        for parent in parents[node]:
            for path in walk(parent):
                yield [*path, nodes[node]]

    return list(walk(target))


def find_itinerary(tickets: Sequence[Sequence[str]]) -> list[str]:
    """Return the lexically smallest route from JFK that uses every ticket once."""
    flights: defaultdict[str, list[str]] = defaultdict(list)
    for origin, destination in tickets:
        flights[origin].append(destination)
    for destinations in flights.values():
        heapq.heapify(destinations)

    route: list[str] = []
    stack = [_ITINERARY_START]
    while stack:
        destinations = flights.get(stack[-1])
        if destinations:
            stack.append(heapq.heappop(destinations))
        else:
            route.append(stack.pop())
    return route[::-1]


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return, for each cell, the step distance to the nearest zero cell.

    Cells that no zero can reach are reported as 0. The input is not changed.
    """
    if not mat:
        return []
    rows, cols = len(mat), len(mat[0])
    result = [[0] * cols for _ in range(rows)]
    pending = {(r, c) for r, row in enumerate(mat) for c, cell in enumerate(row) if cell}
    queue = deque(
        (r, c) for r, row in enumerate(mat) for c, cell in enumerate(row) if not cell
    )
    while queue:
        r, c = queue.popleft()
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            neighbour = (r + dr, c + dc)
            if neighbour in pending:
                pending.discard(neighbour)
                result[neighbour[0]][neighbour[1]] = result[r][c] + 1
                queue.append(neighbour)
    return result


def _topological_order(
    graph: Sequence[Sequence[int]], indegree: Sequence[int]
) -> Optional[list[int]]:
    remaining = list(indegree)
    stack = [node for node, degree in enumerate(remaining) if degree == 0]
    order: list[int] = []
    while stack:
        node = stack.pop()
        order.append(node)
        for successor in graph[node]:
            remaining[successor] -= 1
            if remaining[successor] == 0:
                stack.append(successor)
    return order if len(order) == len(graph) else None


def sort_items(
    n: int, m: int, group: Sequence[int], before_items: Sequence[Sequence[int]]
) -> list[int]:
    """Order ``n`` items so each follows its prerequisites and items of one
    group stand together; an empty list means no such order exists.

    Items in group -1 belong to no group and each stands alone.
    """
    if len(group) != n or len(before_items) != n:
        raise ValueError("group and before_items must each have n entries")
    group_of = list(group)
    group_count = m
    for item, owner in enumerate(group_of):
        if owner == -1:
            group_of[item] = group_count
            group_count += 1

    item_graph: list[list[int]] = [[] for _ in range(n)]
    item_indegree = [0] * n
    group_graph: list[list[int]] = [[] for _ in range(group_count)]
    group_indegree = [0] * group_count
    for item, prerequisites in enumerate(before_items):
        for prev in prerequisites:
            item_graph[prev].append(item)
            item_indegree[item] += 1
            if group_of[item] != group_of[prev]:
                group_graph[group_of[prev]].append(group_of[item])
                group_indegree[group_of[item]] += 1

    item_order = _topological_order(item_graph, item_indegree)
    group_order = _topological_order(group_graph, group_indegree)
    if not item_order or not group_order:
        return []

    members: defaultdict[int, list[int]] = defaultdict(list)
    for item in item_order:
        members[group_of[item]].append(item)
    return list(chain.from_iterable(members[owner] for owner in group_order))


class _DisjointSet:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, node: int) -> int:
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: int, b: int) -> bool:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True


def _sorted_without(edges: Sequence[Sequence[int]], index: int) -> list[tuple[int, int, int]]:
    return sorted((w, u, v) for i, (u, v, w) in enumerate(edges) if i != index)


def _weight_without(n: int, edges: Sequence[Sequence[int]], index: int) -> float:
    sets = _DisjointSet(n)
    total = 0
    joined = 0
    for weight, u, v in _sorted_without(edges, index):
        if sets.union(u, v):
            total += weight
            joined += 1
    return total if joined == n - 1 else math.inf


def _weight_forcing(n: int, edges: Sequence[Sequence[int]], index: int) -> int:
    sets = _DisjointSet(n)
    u, v, total = edges[index]
    sets.union(u, v)
    for weight, a, b in _sorted_without(edges, index):
        if sets.union(a, b):
            total += weight
    return total


def find_critical_and_pseudo_critical_edges(
    n: int, edges: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return ``[critical, pseudo_critical]`` edge indices of the minimum
    spanning trees of a weighted graph given as ``[u, v, weight]`` triples.

    A critical edge is in every minimum spanning tree; a pseudo-critical one
    is in some but not all.
    """
    best = _weight_without(n, edges, -1)
    critical: list[int] = []
    pseudo: list[int] = []
    for index in range(len(edges)):
        if _weight_without(n, edges, index) > best:
            critical.append(index)
        elif _weight_forcing(n, edges, index) == best:
            pseudo.append(index)
    return [critical, pseudo]


def maximal_network_rank(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Return the largest number of roads touching either city of a pair,
    a road joining the two counting once."""
    if n < 2:
        raise ValueError("need at least two cities")
    degree: Counter[int] = Counter()
    linked: set[frozenset[int]] = set()
    for a, b in roads:
        degree[a] += 1
        degree[b] += 1
        linked.add(frozenset((a, b)))
    return max(
        degree[i] + degree[j] - (frozenset((i, j)) in linked)
        for i, j in combinations(range(n), 2)
    )


def maximum_importance(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Give cities the values 1..n to maximise the sum over roads of the two
    end values, and return that sum."""
    degree = [0] * n
    for a, b in roads:
        degree[a] += 1
        degree[b] += 1
    return sum(value * count for value, count in enumerate(sorted(degree), start=1))