"""Connected components of an undirected graph by depth-first search."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class Graph:
    """An undirected graph on vertices 0..vertices-1 with adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacent)

    def add_edge(self, v: int, w: int) -> None:
        """Connect ``v`` and ``w`` in both directions."""
        for vertex in (v, w):
            if not 0 <= vertex < len(self._adjacent):
                raise ValueError(f"no vertex {vertex}")
        self._adjacent[v].append(w)
        self._adjacent[w].append(v)

    def connected_components(self) -> list[list[int]]:
        """Each component's vertices in depth-first visiting order."""
        visited = [False] * len(self._adjacent)
        components: list[list[int]] = []
        for root in range(len(self._adjacent)):
            if visited[root]:
                continue
            visited[root] = True
            order = [root]
            stack = [iter(self._adjacent[root])]
            while stack:
                for nxt in stack[-1]:
                    if not visited[nxt]:
                        visited[nxt] = True
                        order.append(nxt)
                        stack.append(iter(self._adjacent[nxt]))
                        break
                else:
                    stack.pop()
            components.append(order)
        return components


def main(argv: Sequence[str] | None = None) -> int:
    graph = Graph(11)
    for v, w in [(1, 0), (2, 1), (2, 3), (4, 3), (4, 5), (6, 1), (7, 0), (9, 10), (9, 2)]:
        graph.add_edge(v, w)
    sys.stdout.write("Following are connected components \n")
    for component in graph.connected_components():
        sys.stdout.write("".join(f"{v} " for v in component))
        sys.stdout.write(f"\nsize:{len(component)}\n\n")
    return 0