"""A ranked DAG: the edges between nodes plus an assignment of nodes to levels.

A rank is the ordering of some nodes along one axis. Users may move nodes
between levels freely; the only guarantee is that every node sits in exactly
one level.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

NodeHandle = int
RankType = list[list[NodeHandle]]


class DAG:
    """Directed acyclic graph whose nodes are also placed in ranks."""

    def __init__(self, validate: bool = True) -> None:
        self._successors: list[list[NodeHandle]] = []
        self._predecessors: list[list[NodeHandle]] = []
        self._ranks: RankType = []
        self.validate = validate

    def _check(self, node: NodeHandle) -> None:
        if not 0 <= node < len(self._successors):
            raise IndexError(f"node {node} is not in the dag")

    def clear(self) -> None:
        self._successors.clear()
        self._predecessors.clear()
        self._ranks.clear()

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(range(len(self._successors)))

    def __len__(self) -> int:
        return len(self._successors)

    def is_empty(self) -> bool:
        return not self._successors

    def add_edge(self, from_: NodeHandle, to: NodeHandle) -> None:
        self._check(from_)
        self._check(to)
        self._successors[from_].append(to)
        self._predecessors[to].append(from_)

    def remove_edge(self, from_: NodeHandle, to: NodeHandle) -> bool:
        """Remove one edge from ``from_`` to ``to``; True if one was removed."""
        self._check(from_)
        self._check(to)
        succ = self._successors[from_]
        pred = self._predecessors[to]
        removed_succ = to in succ
        removed_pred = from_ in pred
        if removed_succ != removed_pred:
            raise RuntimeError("successor and predecessor lists are out of sync")
        if removed_succ:
            succ.remove(to)
            pred.remove(from_)
        return removed_succ

    def new_node(self) -> NodeHandle:
        """Create a node and place it in level zero."""
        self._successors.append([])
        self._predecessors.append([])
        node = len(self._successors) - 1
        self._add_element_to_rank(node, 0, prepend=False)
        return node

    def new_nodes(self, n: int) -> None:
        """Create ``n`` nodes, all in level zero."""
        for _ in range(n):
            self.new_node()
        self.verify()

    def successors(self, node: NodeHandle) -> list[NodeHandle]:
        self._check(node)
        return list(self._successors[node])

    def predecessors(self, node: NodeHandle) -> list[NodeHandle]:
        self._check(node)
        return list(self._predecessors[node])

    def single_pred(self, node: NodeHandle) -> NodeHandle | None:
        """The only predecessor of ``node``, or None if it has zero or several."""
        self._check(node)
        preds = self._predecessors[node]
        return preds[0] if len(preds) == 1 else None

    def single_succ(self, node: NodeHandle) -> NodeHandle | None:
        """The only successor of ``node``, or None if it has zero or several."""
        self._check(node)
        succs = self._successors[node]
        return succs[0] if len(succs) == 1 else None

    def verify(self) -> None:
        """Check the structural invariants when validation is enabled."""
        if not self.validate:
            return
        count = len(self._successors)
        for succs in self._successors:
            for dest in succs:
                if not 0 <= dest < count:
                    raise ValueError(f"edge to unknown node {dest}")
        for src, succs in enumerate(self._successors):
            for dest in succs:
                if dest != src and self.is_reachable(dest, src):
                    raise ValueError("We found a cycle!")
        if sum(len(row) for row in self._ranks) != count:
            raise ValueError("not every node is placed in exactly one rank")

    def is_reachable(self, from_: NodeHandle, to: NodeHandle) -> bool:
        """True if there is a path from ``from_`` to ``to``."""
        if from_ == to:
            return True
        self._check(from_)
        visited = [False] * len(self._successors)
        stack = [from_]
        while stack:
            current = stack.pop()
            if current == to:
                return True
            if visited[current]:
                continue
            visited[current] = True
            stack.extend(self._successors[current])
        return False

    def topological_sort(self) -> list[NodeHandle]:
        """Nodes in reverse post order."""
        order: list[NodeHandle] = []
        visited = [False] * len(self._successors)
        # Each entry is (node, emit): emit means all children were handled.
        worklist: list[tuple[NodeHandle, bool]] = [(n, False) for n in self]
        while worklist:
            current, emit = worklist.pop()
            if emit:
                order.append(current)
                continue
            if visited[current]:
                continue
            visited[current] = True
            worklist.append((current, True))
            worklist.extend((dest, False) for dest in self._successors[current])
        order.reverse()
        return order

    def num_levels(self) -> int:
        return len(self._ranks)

    def row(self, level: int) -> list[NodeHandle]:
        """The live list of nodes at ``level``."""
        if not 0 <= level < len(self._ranks):
            raise IndexError("Invalid rank")
        return self._ranks[level]

    def ranks(self) -> RankType:
        """The live rank structure: one list of nodes per level."""
        return self._ranks

    def is_first_in_row(self, elem: NodeHandle, level: int) -> bool:
        if level >= len(self._ranks) or not self._ranks[level]:
            return False
        return self._ranks[level][0] == elem

    def is_last_in_row(self, elem: NodeHandle, level: int) -> bool:
        if level >= len(self._ranks) or not self._ranks[level]:
            return False
        return self._ranks[level][-1] == elem

    def _add_element_to_rank(
        self, elem: NodeHandle, level: int, prepend: bool
    ) -> None:
        while len(self._ranks) < level + 1:
            self._ranks.append([])
        if prepend:
            self._ranks[level].insert(0, elem)
        else:
            self._ranks[level].append(elem)

    def recompute_node_ranks(self) -> None:
        """Place every node in the level given by its longest incoming path."""
        if self.is_empty():
            raise ValueError("Sorting an empty graph")
        levels = self.compute_levels(self.topological_sort())
        self._ranks.clear()
        for node, level in enumerate(levels):
            self._add_element_to_rank(node, level, prepend=False)

    def update_node_rank_level(
        self,
        node: NodeHandle,
        new_level: int,
        insert_before: NodeHandle | None,
    ) -> None:
        """Move ``node`` to ``new_level``, before ``insert_before`` or at the end."""
        curr_level = self.level(node)
        old_row = self._ranks[curr_level]
        old_idx = old_row.index(node)
        del old_row[old_idx]

        while len(self._ranks) < new_level + 1:
            self._ranks.append([])

        row = self._ranks[new_level]
        if insert_before is not None:
            if insert_before not in row:
                old_row.insert(old_idx, node)
                raise ValueError("Can't find the marker node in the array")
            row.insert(row.index(insert_before), node)
            return
        row.append(node)

    def level(self, node: NodeHandle) -> int:
        """The level that holds ``node``."""
        if not 0 <= node < len(self._successors):
            raise IndexError("Node not in the dag")
        for i, row in enumerate(self._ranks):
            if node in row:
                return i
        raise ValueError("Unexpected node. Is the graph ranked?")

    def compute_levels(self, order: Sequence[NodeHandle]) -> list[int]:
        """Level of each node, indexed by node, from the traversal ``order``."""
        if len(order) != len(self._successors):
            raise ValueError("order must list every node exactly once")
        levels = [0] * len(self._successors)
        for src in order:
            for dest in self._successors[src]:
                if dest == src:
                    continue
                levels[dest] = max(levels[dest], levels[src] + 1)
        for src in order:
            for dest in self._successors[src]:
                if levels[dest] < levels[src]:
                    raise ValueError("order is not a topological order")
        return levels