"""Tokenizer for the DOT graph description language."""

from __future__ import annotations

import string
import sys
import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO

_EOF_CHAR = "\0"
_ASCII_WHITESPACE = frozenset(" \t\n\x0c\r")
_ASCII_ALPHA = frozenset(string.ascii_letters)
_ASCII_DIGITS = frozenset(string.digits)
_ASCII_ALNUM = _ASCII_ALPHA | _ASCII_DIGITS


class TokenKind(Enum):
    EOF = auto()
    IDENTIFIER = auto()
    GRAPH_KW = auto()
    NODE_KW = auto()
    EDGE_KW = auto()
    DIGRAPH_KW = auto()
    STRICT_KW = auto()
    SUBGRAPH_KW = auto()
    EQUAL = auto()
    COLON = auto()
    COMMA = auto()
    SEMICOLON = auto()
    ARROW_RIGHT = auto()
    ARROW_LINE = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    OPEN_BRACE = auto()
    CLOSE_BRACE = auto()
    ERROR = auto()


_PUNCTUATION = {
    "=": TokenKind.EQUAL,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    ",": TokenKind.COMMA,
}

_KEYWORDS = {
    "graph": TokenKind.GRAPH_KW,
    "node": TokenKind.NODE_KW,
    "edge": TokenKind.EDGE_KW,
    "digraph": TokenKind.DIGRAPH_KW,
    "strict": TokenKind.STRICT_KW,
    "subgraph": TokenKind.SUBGRAPH_KW,
}


@dataclass(frozen=True)
class Token:
    """A lexical token; ``text`` holds identifier text, ``pos`` an error offset."""

    kind: TokenKind
    text: str = ""
    pos: int = 0


def _is_ascii_control(ch: str) -> bool:
    return ord(ch) < 0x20 or ord(ch) == 0x7F


def _is_numeric(ch: str) -> bool:
    return unicodedata.category(ch) in ("Nd", "Nl", "No")


class Lexer:
    """Turns DOT source text into tokens, one call to ``next_token`` at a time.

    ``pos`` is the offset just past the current character ``ch``.
    """

    def __init__(self, text: str) -> None:
        self._input = text
        self.pos = 0
        self.ch = _EOF_CHAR
        self.read_char()

    def error_context(self) -> str:
        """The input up to the end of the current line, with a ``^`` marker."""
        out: list[str] = []
        found_loc = False
        since_last_line = 0
        for idx, ch in enumerate(self._input, start=1):
            out.append(ch)
            if idx == self.pos:
                found_loc = True
            if ch == "\n":
                if found_loc:
                    out.append("\n")
                    out.append(" " * max(0, since_last_line - 2))
                    out.append("^\n")
                    break
                since_last_line = 0
            since_last_line += 1
        return "".join(out)

    def print_error(self, file: TextIO | None = None) -> None:
        """Write ``error_context()`` to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.error_context())

    def has_next(self) -> bool:
        return self.pos < len(self._input)

    def read_char(self) -> None:
        """Advance to the next character; ``ch`` becomes NUL at the end."""
        if not self.has_next():
            self.ch = _EOF_CHAR
        else:
            self.ch = self._input[self.pos]
            self.pos += 1

    def skip_whitespace(self) -> bool:
        changed = False
        while self.ch in _ASCII_WHITESPACE:
            self.read_char()
            changed = True
        return changed

    def skip_comment(self) -> bool:
        """Skip a ``/* */`` or ``//`` comment; True if anything was consumed."""
        if self.ch != "/":
            return False
        self.read_char()

        if self.ch == "*":
            prev = _EOF_CHAR
            while self.has_next():
                self.read_char()
                if prev == "*" and self.ch == "/":
                    self.read_char()
                    return True
                prev = self.ch
            return True

        if self.ch == "/":
            while self.has_next():
                self.read_char()
                if _is_ascii_control(self.ch):
                    self.read_char()
                    return True
        return True

    def read_identifier(self) -> str:
        chars: list[str] = []
        while self.ch in _ASCII_ALNUM or self.ch == "_":
            chars.append(self.ch)
            self.read_char()
        return "".join(chars)

    def read_number(self) -> str:
        """Read digits with at most one decimal point."""
        chars: list[str] = []
        seen_period = False
        while _is_numeric(self.ch) or self.ch == ".":
            if self.ch == ".":
                if seen_period:
                    break
                seen_period = True
            chars.append(self.ch)
            self.read_char()
        return "".join(chars)

    def read_string(self) -> Token:
        """Read a quoted string, stopping on the closing quote."""
        chars: list[str] = []
        self.read_char()
        while self.ch != '"':
            if self.ch == "\\":
                self.read_char()
                if self.ch in ("n", "l"):
                    self.ch = "\n"
            elif self.ch == _EOF_CHAR:
                return Token(TokenKind.ERROR, pos=self.pos)
            chars.append(self.ch)
            self.read_char()
        return Token(TokenKind.IDENTIFIER, "".join(chars))

    def next_token(self) -> Token:
        while self.skip_comment() or self.skip_whitespace():
            pass

        ch = self.ch
        if ch in _PUNCTUATION:
            tok = Token(_PUNCTUATION[ch])
        elif ch == '"':
            tok = self.read_string()
        elif ch == "-":
            self.read_char()
            if self.ch == ">":
                tok = Token(TokenKind.ARROW_RIGHT)
            elif self.ch == "-":
                tok = Token(TokenKind.ARROW_LINE)
            elif self.ch in _ASCII_DIGITS:
                tok = Token(TokenKind.IDENTIFIER, "-" + self.read_number())
            else:
                tok = Token(TokenKind.ERROR, pos=self.pos)
        elif ch == _EOF_CHAR:
            tok = Token(TokenKind.EOF)
        else:
            if ch in _ASCII_ALPHA:
                name = self.read_identifier()
                return Token(_KEYWORDS.get(name, TokenKind.IDENTIFIER), name)
            if ch in _ASCII_DIGITS:
                return Token(TokenKind.IDENTIFIER, self.read_number())
            return Token(TokenKind.ERROR, pos=self.pos)

        self.read_char()
        return tok