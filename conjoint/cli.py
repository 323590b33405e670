"""
Command line front end for Conjoint.

Reads a source file and dumps either its token stream or its syntax tree.

Author: xwest
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .source import SourceFileError, read_source_file
from .lexer import Lexer, LexerError
from .parser import Parser, ParseError
from .printer import format_token, format_ast, token_to_dict, ast_to_dict

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = "---------"

EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1
EXIT_UNREADABLE_SOURCE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conjoint",
        description="Tokenize and parse Conjoint source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    conjoint main.cj                  # Print the syntax tree
    conjoint main.cj --tokens         # Print every token
    conjoint main.cj --json           # Syntax tree as JSON
        """
    )

    parser.add_argument('source_file', metavar='SOURCE_FILE',
                        help='Path of the file to read')
    parser.add_argument('--tokens', action='store_true',
                        help='Dump the token stream instead of the syntax tree')
    parser.add_argument('--json', action='store_true',
                        help='Output in JSON format')
    parser.add_argument('--encoding', default='utf-8',
                        help='Text encoding of the source file (default: utf-8)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    return parser


def dump_tokens(lexer: Lexer, as_json: bool) -> str:
    if as_json:
        return json.dumps([token_to_dict(token) for token in lexer], indent=2, ensure_ascii=False)

    blocks = []
    for token in lexer:
        blocks.append(format_token(token))
        blocks.append(TOKEN_SEPARATOR)
    return "\n".join(blocks)


def dump_ast(lexer: Lexer, as_json: bool) -> str:
    program = Parser(lexer).parse()
    if as_json:
        return json.dumps(ast_to_dict(program), indent=2, ensure_ascii=False)
    return format_ast(program)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        source_file = read_source_file(args.source_file, args.encoding)
    except SourceFileError as e:
        print(str(e), file=sys.stderr)
        return EXIT_UNREADABLE_SOURCE

    logger.debug("Read %d characters from %s", source_file.length, source_file.path)
    lexer = Lexer(source_file)

    try:
        if args.tokens:
            output = dump_tokens(lexer, args.json)
        else:
            output = dump_ast(lexer, args.json)
    except (LexerError, ParseError) as e:
        logger.debug("Stopped at %s", e.location)
        print(str(e), file=sys.stderr, end="")
        return EXIT_SYNTAX_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
