"""
Simple program to interface with the interpreter.
Reads a Leona program from the file given as the only argument, or from standard input, runs it
and prints one line per segment drawn.
"""

from typing import List, Optional, TextIO

import logging
import sys

import leona.errors as er
import leona.interpreter as it
import leona.lexer as lx
import leona.parser as ps
import leona.printer as pr
from leona.util import logger
from leona.values import DEBUG


def _read_source(argv: List[str], stdin: TextIO) -> str:
    if len(argv) < 2:
        return stdin.read()

    filename = argv[1]
    try:
        source_file = open(filename, "r", encoding="utf-8")
    except OSError:
        print(f"Could not read {filename}")
        sys.exit(1)

    with source_file:
        return source_file.read()


def _check_error(result: object) -> None:
    if isinstance(result, er.CompileError):
        logger.debug(result.describe())
        print(result)
        sys.exit(1)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> None:
    """
    The main entry point function.
    """
    if DEBUG:
        logger.setLevel(logging.DEBUG)

    source = _read_source(sys.argv if argv is None else argv, sys.stdin if stdin is None else stdin)

    # Lexical analysis
    tokens = lx.tokenize_source(source)
    if not tokens:
        return

    if DEBUG:
        print("Tokens:")
        print("--------")
        for token in tokens:
            print(lx.token_info(token))
        print("--------")

    # Syntax analysis
    tree = ps.parse_tokens(tokens)
    _check_error(tree)

    if DEBUG:
        print("Ast:")
        print("--------")
        tree.accept(pr.AstPrinter())
        print("--------")

    # Execution
    it.run_ast(tree, print)


if __name__ == "__main__":

    main()
