"""
Monkey Language Package

Front end for the Monkey scripting language. Only the lexer lives here;
parsers and evaluators consume its token stream.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    ├── log.py           # Logger setup shared by the command line tools
    └── cli.py           # monkey-lex token dumper

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerConfig

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerConfig",

    # Version info
    "__version__",
    "__license__",
]
