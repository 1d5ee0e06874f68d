"""Graph colouring by backtracking."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence


def graph_coloring(edges: Iterable[Sequence[int]], m: int, n: int) -> bool:
    """Tell whether the n-node graph given by edges can be coloured with m colours.

    Nodes are numbered 0..n-1. A node is only compared against neighbours
    coloured before it, so a self-loop places no restriction on its node.
    """
    neighbours: dict[int, list[int]] = defaultdict(list)
    for start, end in edges:
        if not (0 <= start < n and 0 <= end < n):
            raise ValueError(f"edge ({start}, {end}) names a node outside 0..{n - 1}")
        neighbours[start].append(end)
        neighbours[end].append(start)

    colours: list[int | None] = [None] * n

    def assign(node: int) -> bool:
        if node == n:
            return True
        for colour in range(m):
            if all(colours[adjacent] != colour for adjacent in neighbours[node]):
                colours[node] = colour
                if assign(node + 1):
                    return True
                colours[node] = None
        return False

    return assign(0)