"""
monkey-lex: print the token stream of a Monkey source file.

    monkey-lex program.mk
    echo 'let x = 5;' | monkey-lex -
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .log import get_logger
from .lexer import Lexer, LexerConfig, WhitespaceMode, OverflowPolicy
from .lexer.errors import create_keyword_typo_warning

EXIT_OK = 0
EXIT_ILLEGAL = 1
EXIT_UNREADABLE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkey-lex",
        description="Tokenize Monkey source and print one token per line.",
    )
    parser.add_argument("path", help="source file to tokenize, '-' for stdin")
    parser.add_argument("--strict", action="store_true",
                        help="stop with exit status 1 at the first illegal character")
    parser.add_argument("--ascii-whitespace", action="store_true",
                        help="only skip ASCII whitespace between tokens")
    parser.add_argument("--overflow", choices=[p.name.lower() for p in OverflowPolicy],
                        default=OverflowPolicy.WIDEN.name.lower(),
                        help="what to do with integer literals above 2**64-1 (default: widen)")
    parser.add_argument("--lint", action="store_true",
                        help="warn about identifiers that look like misspelled keywords")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log errors")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> LexerConfig:
    return LexerConfig(
        whitespace=WhitespaceMode.ASCII if args.ascii_whitespace else WhitespaceMode.UNICODE,
        integer_overflow=OverflowPolicy[args.overflow.upper()],
    )


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    logger = get_logger("monkey", level)

    try:
        source = _read_source(args.path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.path, e)
        return EXIT_UNREADABLE

    lexer = Lexer(source, config_from_args(args))
    logger.debug("Tokenizing %s (%d characters)", args.path, len(source))

    index = 0
    for token in lexer:
        if token.is_illegal and args.strict:
            logger.error("%s", str(lexer.first_error()).rstrip())
            return EXIT_ILLEGAL

        print(token)

        if args.lint:
            warning = create_keyword_typo_warning(token, index)
            if warning is not None:
                logger.warning("%s", str(warning).rstrip())
        index += 1

    print(lexer.next_token())

    for diagnostic in lexer.get_diagnostics():
        logger.warning("%s", str(diagnostic).rstrip())
    logger.debug("Produced %d tokens, %d illegal", index + 1, len(lexer.illegal_tokens))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
