"""
bipartite.py — Bipartite (Two-Colouring) Check
================================================
BFS colouring, one component at a time, seeding each uncoloured vertex
(in insertion order) with colour 0.

Yields a Step at:
  1. Dequeue a vertex              →  node-current (colouring so far)
  2. Colour a new neighbour        →  edge-visit  (colouring so far)
  3. Same-coloured neighbour found →  partition conflict, and the whole check stops
  4. Every component coloured      →  partition with both colour classes
"""

from collections import deque
from typing import Dict, Generator, List

from graph import Graph
from algorithms.step import Step, StepType


def bipartite(graph: Graph) -> Generator[Step, None, None]:
    color: Dict[str, int] = {}

    for seed in graph.vertex_ids():
        if seed in color:
            continue

        color[seed] = 0
        queue = deque([seed])

        while queue:
            current = queue.popleft()
            current_color = color[current]

            yield Step(
                StepType.NODE_CURRENT,
                node_id=current,
                partition=dict(color),
                message=f"Visiting {current} with colour {current_color}",
            )

            for nbr, _ in graph.neighbours(current):
                if nbr not in color:
                    color[nbr] = 1 - current_color
                    queue.append(nbr)
                    yield Step(
                        StepType.EDGE_VISIT,
                        edge_from=current,
                        edge_to=nbr,
                        partition=dict(color),
                        message=f"Colouring {nbr} with colour {1 - current_color}",
                    )
                elif color[nbr] == current_color:
                    yield Step(
                        StepType.PARTITION,
                        edge_from=current,
                        edge_to=nbr,
                        partition=dict(color),
                        message=(
                            f"Not bipartite: edge {current}-{nbr} joins two vertices "
                            f"of colour {current_color}"
                        ),
                    )
                    return

    left, right = _classes(color)
    yield Step(
        StepType.PARTITION,
        partition=dict(color),
        message=f"Bipartite! Partition: [{', '.join(left)}] and [{', '.join(right)}]",
    )


def _classes(color: Dict[str, int]):
    left: List[str] = [v for v, c in color.items() if c == 0]
    right: List[str] = [v for v, c in color.items() if c == 1]
    return left, right
