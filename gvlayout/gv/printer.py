"""Readable dumps of the DOT syntax tree."""

from __future__ import annotations

import sys
from typing import TextIO

from gvlayout.gv.ast import (
    ArrowKind,
    AttributeList,
    AttrStmt,
    AttrStmtTarget,
    EdgeStmt,
    Graph,
    NodeId,
    NodeStmt,
    Stmt,
)

_TARGET_NAMES = {
    AttrStmtTarget.GRAPH: "Graph",
    AttrStmtTarget.NODE: "Node",
    AttrStmtTarget.EDGE: "Edge",
}


def _node_id(node: NodeId, indent: int) -> str:
    name = node.name if node.port is None else f"{node.name}:{node.port}"
    return f"{' ' * indent}{name}\n"


def _arrow(kind: ArrowKind, indent: int) -> str:
    return f"{' ' * indent}{kind.value}\n"


def _attributes(attrs: AttributeList, indent: int) -> str:
    pad = " " * indent
    return "".join(
        f'{pad}{i})"{key}" = "{value}"\n' for i, (key, value) in enumerate(attrs)
    )


def _edge(edge: EdgeStmt, indent: int) -> str:
    parts = [_node_id(edge.source, indent + 1)]
    for node, kind in edge.targets:
        parts.append(_arrow(kind, indent + 1))
        parts.append(_node_id(node, indent + 1))
    parts.append(_attributes(edge.attributes, indent + 1))
    return "".join(parts)


def _node(stmt: NodeStmt, indent: int) -> str:
    return (
        f"Node {' ' * indent}"
        + _node_id(stmt.node, indent + 1)
        + _attributes(stmt.attributes, indent + 1)
    )


def _attr_stmt(stmt: AttrStmt, indent: int) -> str:
    return (
        f"{' ' * indent}Attribute {_TARGET_NAMES[stmt.target]}:\n"
        + _attributes(stmt.attributes, indent + 1)
    )


def _stmt(stmt: Stmt, indent: int) -> str:
    if isinstance(stmt, EdgeStmt):
        return _edge(stmt, indent)
    if isinstance(stmt, NodeStmt):
        return _node(stmt, indent)
    if isinstance(stmt, AttrStmt):
        return _attr_stmt(stmt, indent)
    if isinstance(stmt, Graph):
        return _graph(stmt, indent)
    raise TypeError(f"unknown statement {stmt!r}")


def _graph(graph: Graph, indent: int) -> str:
    header = f"{' ' * indent}Graph: {graph.name}\n"
    return header + "".join(_stmt(stmt, indent + 1) for stmt in graph.stmts)


def format_ast(graph: Graph) -> str:
    """Render the syntax tree as indented text."""
    return _graph(graph, 0)


def dump_ast(graph: Graph, file: TextIO | None = None) -> None:
    """Print the syntax tree to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(format_ast(graph))