"""Recursive-descent parser for DOT files."""

from __future__ import annotations

from typing import TextIO

from gvlayout.gv import ast
from gvlayout.gv.lexer import Lexer, Token, TokenKind


class DotParseError(ValueError):
    """Raised when the input is not a valid DOT graph."""


class DotParser:
    """Parses DOT source text into an ``ast.Graph``."""

    def __init__(self, text: str) -> None:
        self._lexer = Lexer(text)
        # Placeholder until the first call to ``lex``.
        self.tok = Token(TokenKind.COLON)

    def _is(self, kind: TokenKind) -> bool:
        return self.tok.kind is kind

    def print_error(self, file: TextIO | None = None) -> None:
        """Show the input up to the point where parsing stopped."""
        self._lexer.print_error(file)

    def lex(self) -> None:
        """Advance to the next token."""
        if self._is(TokenKind.ERROR):
            raise RuntimeError("can't parse after error")
        if self._is(TokenKind.EOF):
            raise RuntimeError("can't parse after EOF")
        self.tok = self._lexer.next_token()

    def _expect(self, kind: TokenKind, message: str) -> None:
        if not self._is(kind):
            raise DotParseError(message)
        self.lex()

    def _optional_name(self, graph: ast.Graph) -> None:
        if self._is(TokenKind.IDENTIFIER):
            graph.name = self.tok.text
            self.lex()

    def parse_graph(self, is_subgraph: bool) -> ast.Graph:
        """``[strict] (graph|digraph) [ID] '{' stmts '}'`` or a subgraph."""
        graph = ast.Graph("")

        if is_subgraph:
            self._expect(TokenKind.SUBGRAPH_KW, "Expected 'subgraph'")
            self._optional_name(graph)
            self._expect(TokenKind.OPEN_BRACE, "Expected '{'")
            graph.stmts = self.parse_stmt_list()
            return graph

        if self._is(TokenKind.STRICT_KW):
            self.lex()

        if self.tok.kind not in (
            TokenKind.GRAPH_KW,
            TokenKind.DIGRAPH_KW,
            TokenKind.SUBGRAPH_KW,
        ):
            raise DotParseError("Expected (graph|digraph)")
        self.lex()

        self._optional_name(graph)
        self._expect(TokenKind.OPEN_BRACE, "Expected '{'")
        graph.stmts = self.parse_stmt_list()
        return graph

    def parse_stmt_list(self) -> list[ast.Stmt]:
        """Statements up to and including the closing ``}``."""
        stmts: list[ast.Stmt] = []
        while True:
            if self._is(TokenKind.SEMICOLON):
                self.lex()
            if self._is(TokenKind.CLOSE_BRACE):
                self.lex()
                return stmts
            stmts.append(self.parse_stmt())

    def parse_stmt(self) -> ast.Stmt:
        kind = self.tok.kind
        if kind is TokenKind.IDENTIFIER:
            node_id = self.parse_node_id()
            follow = self.tok.kind
            if follow in (TokenKind.ARROW_LINE, TokenKind.ARROW_RIGHT):
                return self.parse_edge_stmt(node_id)
            if follow is TokenKind.EQUAL:
                return self.parse_attribute_stmt(node_id)
            if follow in (TokenKind.IDENTIFIER, TokenKind.CLOSE_BRACE):
                return ast.NodeStmt(node_id)
            if follow is TokenKind.SEMICOLON:
                self.lex()
                return ast.NodeStmt(node_id)
            if follow is TokenKind.OPEN_BRACKET:
                return ast.NodeStmt(node_id, self.parse_attr_list())
            raise DotParseError("Unsupported token")

        if kind is TokenKind.SUBGRAPH_KW:
            return self.parse_graph(True)

        targets = {
            TokenKind.GRAPH_KW: ast.AttrStmtTarget.GRAPH,
            TokenKind.NODE_KW: ast.AttrStmtTarget.NODE,
            TokenKind.EDGE_KW: ast.AttrStmtTarget.EDGE,
        }
        if kind in targets:
            self.lex()
            return ast.AttrStmt(targets[kind], self.parse_attr_list())

        if kind is TokenKind.OPEN_BRACE:
            self.lex()
            return ast.Graph("anonymous", self.parse_stmt_list())

        raise DotParseError("Unknown token")

    def parse_attr_list(self) -> ast.AttributeList:
        """``'[' key=value (; | ,)? ... ']'``"""
        attrs = ast.AttributeList()
        self._expect(TokenKind.OPEN_BRACKET, "Expected '['")

        while not self._is(TokenKind.CLOSE_BRACKET):
            if not self._is(TokenKind.IDENTIFIER):
                raise DotParseError("Expected property name")
            key = self.tok.text
            self.lex()

            self._expect(TokenKind.EQUAL, "Expected '='")

            if not self._is(TokenKind.IDENTIFIER):
                raise DotParseError("Expected value after assignment")
            attrs.add_attr(key, self.tok.text)
            self.lex()

            if self._is(TokenKind.SEMICOLON):
                self.lex()
            if self._is(TokenKind.COMMA):
                self.lex()

        self._expect(TokenKind.CLOSE_BRACKET, "Expected ']'")
        return attrs

    def parse_attribute_stmt(self, node_id: ast.NodeId) -> ast.AttrStmt:
        """``ID '=' ID``, a graph attribute."""
        if node_id.port is not None:
            raise DotParseError("Can't assign into a port")
        self._expect(TokenKind.EQUAL, "Expected '='")
        if not self._is(TokenKind.IDENTIFIER):
            raise DotParseError("Expected identifier.")
        attrs = ast.AttributeList()
        attrs.add_attr(node_id.name, self.tok.text)
        self.lex()
        return ast.AttrStmt(ast.AttrStmtTarget.GRAPH, attrs)

    def parse_edge_stmt(self, node_id: ast.NodeId) -> ast.EdgeStmt:
        """A chain of edges starting at ``node_id``, with optional attributes."""
        edge = ast.EdgeStmt(node_id)
        while self.tok.kind in (TokenKind.ARROW_LINE, TokenKind.ARROW_RIGHT):
            arrow = (
                ast.ArrowKind.LINE
                if self._is(TokenKind.ARROW_LINE)
                else ast.ArrowKind.ARROW
            )
            self.lex()
            edge.insert(self.parse_node_id(), arrow)
        if self._is(TokenKind.OPEN_BRACKET):
            edge.attributes = self.parse_attr_list()
        return edge

    def parse_node_id(self) -> ast.NodeId:
        """``ID [':' port]``"""
        if not self._is(TokenKind.IDENTIFIER):
            raise DotParseError("port")
        name = self.tok.text
        self.lex()

        if self._is(TokenKind.COLON):
            self.lex()
            if not self._is(TokenKind.IDENTIFIER):
                raise DotParseError("Expected a port name")
            port = self.tok.text
            self.lex()
            return ast.NodeId(name, port)
        return ast.NodeId(name)

    def process(self) -> ast.Graph:
        """Parse the whole input as one graph."""
        self.lex()
        graph = self.parse_graph(False)
        if not self._is(TokenKind.EOF):
            raise DotParseError("Unexpected content at the end of the file.")
        return graph