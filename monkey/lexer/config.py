"""
Lexer configuration.

The defaults reproduce the reference behaviour: any Unicode whitespace is
skipped and integer literals keep their exact value however long they are.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable


class WhitespaceMode(Enum):
    """Which characters the lexer skips between tokens"""
    UNICODE = auto()        # str.isspace()
    ASCII = auto()          # space, \t, \n, \r, \f, \v only


class OverflowPolicy(Enum):
    """What to do with integer literals larger than max_integer"""
    WIDEN = auto()          # Keep the exact value (Python ints are unbounded)
    SATURATE = auto()       # Clamp to max_integer
    ILLEGAL = auto()        # Report the whole digit run as one ILLEGAL token


ASCII_WHITESPACE = frozenset(" \t\n\r\f\v")

# Unsigned 64-bit machine word
DEFAULT_MAX_INTEGER = 2 ** 64 - 1


@dataclass(frozen=True)
class LexerConfig:
    """Configuration parameters for the lexer"""

    whitespace: WhitespaceMode = WhitespaceMode.UNICODE
    integer_overflow: OverflowPolicy = OverflowPolicy.WIDEN
    max_integer: int = DEFAULT_MAX_INTEGER

    def __post_init__(self):
        if self.max_integer < 0:
            raise ValueError(f"max_integer must be non-negative, got {self.max_integer}")

    def whitespace_predicate(self) -> Callable[[str], bool]:
        """Return the character test used to skip whitespace."""
        if self.whitespace is WhitespaceMode.ASCII:
            return ASCII_WHITESPACE.__contains__
        return str.isspace


DEFAULT_CONFIG = LexerConfig()
