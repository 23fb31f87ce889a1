"""Graph traversals over adjacency mappings, plus the friend-group report."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence

Adjacency = Mapping[Hashable, Sequence[Hashable]]


def _all_nodes(adjacency: Adjacency) -> list[Hashable]:
    """Every node named in the mapping, keys first, in first-seen order."""
    nodes = dict.fromkeys(adjacency)
    for children in adjacency.values():
        nodes.update(dict.fromkeys(children))
    return list(nodes)


def _preorder(adjacency: Adjacency, start: Hashable, visited: set) -> Iterator[Hashable]:
    """Yield nodes in the order a recursive depth-first search visits them."""
    visited.add(start)
    yield start
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for child in stack[-1]:
            if child not in visited:
                visited.add(child)
                yield child
                stack.append(iter(adjacency.get(child, ())))
                break
        else:
            stack.pop()


def _postorder(adjacency: Adjacency, start: Hashable, visited: set) -> Iterator[Hashable]:
    """Yield nodes as a recursive depth-first search finishes them."""
    visited.add(start)
    stack = [(start, iter(adjacency.get(start, ())))]
    while stack:
        node, children = stack[-1]
        for child in children:
            if child not in visited:
                visited.add(child)
                stack.append((child, iter(adjacency.get(child, ()))))
                break
        else:
            stack.pop()
            yield node


def adjacency_lines(adjacency: Adjacency, n: int) -> list[str]:
    """Render the neighbour lists of nodes 1..n, one line per node."""
    return [
        f"{node}: " + "".join(f"{child} " for child in adjacency.get(node, ()))
        for node in range(1, n + 1)
    ]


def bfs(adjacency: Adjacency, start: Hashable) -> list[Hashable]:
    """Return the nodes reachable from start in breadth-first order."""
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for child in adjacency.get(node, ()):
            if child not in visited:
                visited.add(child)
                queue.append(child)
    return order


def dfs(adjacency: Adjacency, start: Hashable) -> list[Hashable]:
    """Return the nodes reachable from start in depth-first order."""
    return list(_preorder(adjacency, start, set()))


def count_components(adjacency: Adjacency, nodes: Iterable[Hashable]) -> int:
    """Count the connected components among the given nodes."""
    visited: set = set()
    count = 0
    for node in nodes:
        if node not in visited:
            for _ in _preorder(adjacency, node, visited):
                pass
            count += 1
    return count


def has_cycle(adjacency: Adjacency) -> bool:
    """Tell whether an undirected graph contains a cycle."""
    visited: set = set()
    for root in _all_nodes(adjacency):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, None, iter(adjacency.get(root, ())))]
        while stack:
            node, parent, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, node, iter(adjacency.get(child, ()))))
                    break
                if child != parent:
                    return True
            else:
                stack.pop()
    return False


def topological_sort(adjacency: Adjacency, nodes: Iterable[Hashable]) -> list[Hashable]:
    """Order the nodes of a directed acyclic graph so every edge points forward."""
    visited: set = set()
    finished: list[Hashable] = []
    for node in nodes:
        if node not in visited:
            finished.extend(_postorder(adjacency, node, visited))
    finished.reverse()
    return finished


def friend_groups(
    count: int, pairs: Iterable[tuple[int, int]]
) -> list[tuple[list[int], list[tuple[int, int]]]]:
    """Split people 0..count-1 into groups and list the non-friend pairs in each.

    Each group is returned in the order the search reaches its members, along
    with every pair of members that are not directly connected.
    """
    neighbours: dict[int, set[int]] = {person: set() for person in range(count)}
    for a, b in pairs:
        if not (0 <= a < count and 0 <= b < count):
            raise ValueError(f"pair ({a}, {b}) is outside 0..{count - 1}")
        neighbours[a].add(b)
        neighbours[b].add(a)
    adjacency = {person: sorted(friends) for person, friends in neighbours.items()}

    visited: set = set()
    result = []
    for person in range(count):
        if person in visited:
            continue
        group = list(_preorder(adjacency, person, visited))
        missing = [
            (a, b)
            for pos, a in enumerate(group)
            for b in group[pos + 1:]
            if b not in neighbours[a]
        ]
        result.append((group, missing))
    return result


def format_friend_groups(count: int, pairs: Iterable[tuple[int, int]]) -> str:
    """Render the friend-group report, ending with the number of groups."""
    groups = friend_groups(count, pairs)
    lines = []
    for number, (group, missing) in enumerate(groups, start=1):
        members = ",".join(str(person) for person in group)
        gaps = ", ".join(f"[{a},{b}]" for a, b in missing) or "none"
        lines.append(f"Group {number}: {{{members}}} | {gaps}")
    lines.append(str(len(groups)))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read a friendship file and print its group report."""
    if argv is None:
        argv = sys.argv[1:]
    path = argv[0] if argv else "in.txt"
    try:
        with open(path, encoding="utf-8") as handle:
            tokens = iter(handle.read().split())
    except OSError:
        print("File not found")
        return 0
    count = int(next(tokens))
    matches = int(next(tokens))
    pairs = [(int(next(tokens)), int(next(tokens))) for _ in range(matches)]
    sys.stdout.write(format_friend_groups(count, pairs))
    return 0


if __name__ == "__main__":
    sys.exit(main())