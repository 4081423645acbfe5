"""
Token definitions for the Monkey lexer.

This module defines the closed set of token types Monkey supports:
- Keywords (fn, let, if, else, return) and boolean literals (true, false)
- Single and two-character operators
- Integer literals and identifiers
- Punctuation and delimiters

Keyword recognition is a plain table lookup done once the lexer has read a
whole identifier, see classify_identifier().
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Organized by category the same way the lookup tables below are.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Character no rule matches
    EOF = auto()                    # End of input (repeats once reached)

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # five, add, x_1
    INT = auto()                    # 5, 10, 1234
    BOOLEAN = auto()                # true, false

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    SLASH = auto()                  # /
    ASTERISK = auto()               # *
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    BANG = auto()                   # !
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    `lexeme` is the exact text consumed from the source ("" for EOF).
    `value` is the payload: the character for ILLEGAL, the name for
    IDENTIFIER, an int for INT, a bool for BOOLEAN and None otherwise.
    """
    type: TokenType
    lexeme: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        if self.lexeme:
            return f"{self.type.name}({self.lexeme!r})"
        return self.type.name

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.value!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.INT, TokenType.BOOLEAN)

    @property
    def is_keyword(self) -> bool:
        """Check if this token was produced from a reserved word."""
        return self.lexeme in KEYWORDS and self.type != TokenType.IDENTIFIER

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or delimiter."""
        return self.type in _OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def is_illegal(self) -> bool:
        return self.type == TokenType.ILLEGAL

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Shared sentinel, tokens are immutable so every EOF can be the same object
EOF_TOKEN = Token(TokenType.EOF, "")

# Reserved words. true/false are looked up here as well but produce BOOLEAN
KEYWORDS: Dict[str, Token] = {
    "fn": Token(TokenType.FUNCTION, "fn"),
    "let": Token(TokenType.LET, "let"),
    "if": Token(TokenType.IF, "if"),
    "else": Token(TokenType.ELSE, "else"),
    "return": Token(TokenType.RETURN, "return"),
    "true": Token(TokenType.BOOLEAN, "true", True),
    "false": Token(TokenType.BOOLEAN, "false", False),
}

# Operators and delimiters, keyed by spelling
OPERATORS: Dict[str, TokenType] = {
    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,

    # Assignment / comparison
    "=": TokenType.ASSIGN,
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,

    # Logical
    "!": TokenType.BANG,

    # Punctuation
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: Dict[str, Token] = {
    spelling: Token(token_type, spelling)
    for spelling, token_type in OPERATORS.items()
    if len(spelling) == 1 and spelling not in ("=", "!")
}

# `=` and `!` need one character of lookahead: {first: (alone, followed by '=')}
TWO_CHAR_TOKENS: Dict[str, tuple] = {
    "=": (Token(TokenType.ASSIGN, "="), Token(TokenType.EQUAL, "==")),
    "!": (Token(TokenType.BANG, "!"), Token(TokenType.NOT_EQUAL, "!=")),
}

_OPERATOR_TYPES = frozenset(OPERATORS.values())


def classify_identifier(text: str) -> Token:
    """
    Map a complete identifier run to its token.

    Reserved spellings give their keyword token (true/false give BOOLEAN),
    anything else is an IDENTIFIER carrying the text unchanged.
    """
    keyword = KEYWORDS.get(text)
    if keyword is not None:
        return keyword
    return Token(TokenType.IDENTIFIER, text, text)
