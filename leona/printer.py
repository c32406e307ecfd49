"""
Module defining an ast visitor to pretty print the ast, and a function to render tokens back into
canonical source.
"""

from typing import Callable, Sequence

import leona.ast as ast
import leona.lexer as lx
from leona.util import group_lines

# Always lexes as a single error token
ERROR_TEXT = "?"


def render_token(token: lx.Token) -> str:
    """
    Returns the canonical source text of a token.
    """
    if token.kind in (lx.TokenType.DECIMAL, lx.TokenType.HEX_COLOR):
        return str(token.value)
    if token.kind == lx.TokenType.ERROR:
        return ERROR_TEXT
    if token.kind == lx.TokenType.END_OF_INPUT:
        return ""
    return token.kind.value


def render_tokens(tokens: Sequence[lx.Token]) -> str:
    """
    Renders a list of tokens as canonical source, keeping every token on its original line so
    that lexing the result gives back the same tokens.
    """
    if not tokens:
        return ""
    lines = group_lines(
        (token for token in tokens if token.kind != lx.TokenType.END_OF_INPUT),
        lambda token: token.line,
        tokens[-1].line,
    )
    return "\n".join(" ".join(render_token(token) for token in line) for line in lines)


class AstPrinter(ast.AstVisitor):
    """
    Ast visitor that pretty prints the nodes it visits.
    """

    def __init__(self, printer: Callable[[str], None] = print) -> None:
        super().__init__()
        self._indent = 0
        self._printer = printer
        self._buffer = ""

    def _flush(self) -> None:
        if self._buffer:
            self._printer(self._buffer)
            self._buffer = ""

    def _append(self, string: str) -> None:
        self._buffer += string

    def _startline(self) -> None:
        self._flush()
        self._append("    " * self._indent)

    def start(self, node: ast.Ast) -> None:
        for instr in node.instrs:
            instr.accept(self)
            self._append(".")
        if not node.instrs:
            self._append(".")
        self._flush()

    def pen_instr(self, node: ast.AstPenInstr) -> None:
        self._startline()
        self._append(node.kind.value)

    def move_instr(self, node: ast.AstMoveInstr) -> None:
        self._startline()
        self._append(f"{node.kind.value} {node.amount}")

    def color_instr(self, node: ast.AstColorInstr) -> None:
        self._startline()
        self._append(f"COLOR {node.color}")

    def rep_instr(self, node: ast.AstRepInstr) -> None:
        self._startline()
        self._append(f'REP {node.count} "')
        self._indent += 1

        for instr in node.instrs:
            instr.accept(self)

        self._indent -= 1
        self._startline()
        self._append('"')
