"""Lexical tokens and their positions in the source text."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass
class SourcePosition:
    """A 1-based line and column in the source."""

    line: int = 1
    column: int = 1

    def increment_column(self) -> None:
        self.column += 1

    def increment_line(self) -> None:
        self.line += 1
        self.column = 1

    def __str__(self) -> str:
        return f"[{self.line}, {self.column}]"


@dataclass
class SourcePositionSpan:
    """A span of source; start is inclusive, end exclusive."""

    start: SourcePosition = field(default_factory=SourcePosition)
    end: SourcePosition = field(default_factory=SourcePosition)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass
class TextSpan:
    """A piece of source text and where it was found."""

    text: str
    span: SourcePositionSpan


class TokenType(enum.Enum):
    """The kinds of tokens found in source code."""

    DOT = "Dot"
    COLON = "Colon"
    COMMA = "Comma"
    PAREN_LEFT = "ParenLeft"
    PAREN_RIGHT = "ParenRight"
    POUND = "Pound"
    HEX_NUMBER = "HexNumber"
    BINARY_NUMBER = "BinaryNumber"
    DECIMAL_NUMBER = "DecimalNumber"
    IDENTIFIER = "Identifier"
    DEFINE = "Define"
    ORG_DIRECTIVE = "OrgDirective"
    EOF = "Eof"


_FIXED_LITERALS = {
    TokenType.DOT: ".",
    TokenType.COLON: ":",
    TokenType.COMMA: ",",
    TokenType.PAREN_LEFT: "(",
    TokenType.PAREN_RIGHT: ")",
    TokenType.POUND: "#",
    TokenType.DEFINE: "define",
    TokenType.ORG_DIRECTIVE: "org",
    TokenType.EOF: "<eof>",
}


@dataclass
class Token:
    """A lexical unit of source code."""

    token: TokenType = TokenType.EOF
    lexeme: str = ""
    span: SourcePositionSpan = field(default_factory=SourcePositionSpan)

    def literal_str(self) -> str:
        """The token as it would appear in source."""
        if self.token in _FIXED_LITERALS:
            return _FIXED_LITERALS[self.token]
        if self.token is TokenType.HEX_NUMBER:
            return "$" + self.lexeme
        if self.token is TokenType.BINARY_NUMBER:
            return "%" + self.lexeme
        return self.lexeme

    def __str__(self) -> str:
        return f"{self.span}: {self.token.value} '{self.literal_str()}'"