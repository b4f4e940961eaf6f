"""Uniform cost search over a small graph given as a cost matrix."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence

NOTHING = -1
START = 0

COST_MATRIX: tuple[tuple[int, ...], ...] = (
    (-1, 5, 5, 6, -1, 7, -1, -1, -1, -1),
    (5, -1, -1, -1, -1, -1, -1, 4, -1, -1),
    (5, -1, -1, -1, 6, -1, -1, -1, -1, -1),
    (6, -1, -1, -1, 5, -1, -1, -1, 2, -1),
    (-1, -1, 6, 5, -1, -1, 4, -1, -1, 5),
    (7, -1, -1, -1, -1, -1, 3, -1, -1, -1),
    (-1, -1, -1, -1, 4, 3, -1, -1, -1, -1),
    (-1, 4, -1, -1, -1, -1, -1, -1, -1, 2),
    (-1, -1, -1, 2, -1, -1, -1, -1, -1, 1),
    (-1, -1, -1, -1, 5, -1, -1, 2, 1, -1),
)


class NoSolutionError(Exception):
    """Raised when the goal node cannot be reached."""


@dataclass(eq=False)
class Node:
    """A state reached by the search, with its total cost and parent."""

    number: int
    cost: int
    parent: Optional["Node"] = None

    def path(self) -> list["Node"]:
        """Return the nodes from the start node to this one."""
        nodes: list[Node] = []
        node: Optional[Node] = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes

    def __str__(self) -> str:
        return f"Node number={self.number} cost={self.cost}"


def _reachable(cost_matrix: Sequence[Sequence[int]]) -> set[int]:
    seen = {START}
    queue = deque([START])
    while queue:
        number = queue.popleft()
        for neighbour, cost in enumerate(cost_matrix[number]):
            if cost != NOTHING and neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen


def uniform_cost_search(
    goal: int, cost_matrix: Sequence[Sequence[int]] = COST_MATRIX
) -> Node:
    """Search from node 0 to ``goal`` and return the goal node that was reached.

    The cheapest open node is expanded next, except that as soon as any goal
    node is open the cheapest goal node is taken. A node is never expanded
    back into its own parent. Ties go to the node opened first.
    """
    if not 0 <= goal < len(cost_matrix):
        raise ValueError(f"goal must lie between 0 and {len(cost_matrix) - 1}, not {goal}")
    if goal not in _reachable(cost_matrix):
        raise NoSolutionError(f"node {goal} cannot be reached from node {START}")

    open_nodes = [Node(START, 0)]
    while open_nodes:
        goals = [node for node in open_nodes if node.number == goal]
        best = min(goals or open_nodes, key=lambda node: node.cost)
        open_nodes.remove(best)
        if best.number == goal:
            return best
        for number, cost in enumerate(cost_matrix[best.number]):
            if cost == NOTHING:
                continue
            if best.parent is not None and best.parent.number == number:
                continue
            open_nodes.append(Node(number, best.cost + cost, best))
    raise NoSolutionError("the open list is empty, no solution exists")


def main(argv: Sequence[str] | None = None) -> int:
    """Find the way from node 0 to a goal node: goal-node."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: uc goal-node")
        return 0
    try:
        goal = int(args[0])
        end = uniform_cost_search(goal)
    except ValueError as error:
        print(f"ERROR {error}")
        return 1
    except NoSolutionError:
        print("The OPEN list is empty, no solution exists")
        return 1
    print("Here is the solution")
    for node in reversed(end.path()):
        print(node)
    return 0