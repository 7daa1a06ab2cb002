"""Syntax tree for the DOT graph description language."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass
class NodeId:
    """A node name with an optional port, as in ``first:f0``."""

    name: str
    port: str | None = None


@dataclass
class AttributeList:
    """An ordered list of ``key=value`` pairs."""

    items: list[tuple[str, str]] = field(default_factory=list)

    def add_attr(self, key: str, value: str) -> None:
        self.items.append((key, value))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class AttrStmtTarget(Enum):
    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"


@dataclass
class AttrStmt:
    """``(graph | node | edge) [ ... ]``"""

    target: AttrStmtTarget
    attributes: AttributeList = field(default_factory=AttributeList)


@dataclass
class NodeStmt:
    """``node-name [ ... ]``"""

    node: NodeId
    attributes: AttributeList = field(default_factory=AttributeList)


class ArrowKind(Enum):
    ARROW = "->"
    LINE = "--"


@dataclass
class EdgeStmt:
    """``a -> b -- c [ ... ]``"""

    source: NodeId
    targets: list[tuple[NodeId, ArrowKind]] = field(default_factory=list)
    attributes: AttributeList = field(default_factory=AttributeList)

    def insert(self, node: NodeId, kind: ArrowKind) -> None:
        """Append the next node of the chain and the edge that leads to it."""
        self.targets.append((node, kind))


@dataclass
class Graph:
    """A graph or subgraph: a name and its statements."""

    name: str = ""
    stmts: list[Stmt] = field(default_factory=list)


Stmt = Union[EdgeStmt, NodeStmt, AttrStmt, Graph]