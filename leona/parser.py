"""
Contains functions and definitions for parsing a list of tokens into an ast.
"""

from typing import Iterable, Optional, Sequence, TypeVar, Union

import leona.ast as ast
import leona.errors as er
import leona.lexer as lx


T = TypeVar("T")  # pylint: disable=invalid-name
Result = Union[T, er.CompileError]

PEN_KINDS = {
    lx.TokenType.PEN_UP: ast.PenKind.UP,
    lx.TokenType.PEN_DOWN: ast.PenKind.DOWN,
}

MOVE_KINDS = {
    lx.TokenType.FORWARD: ast.MoveKind.FORWARD,
    lx.TokenType.BACKWARD: ast.MoveKind.BACKWARD,
    lx.TokenType.TURN_LEFT: ast.MoveKind.TURN_LEFT,
    lx.TokenType.TURN_RIGHT: ast.MoveKind.TURN_RIGHT,
}


def parse_tokens(tokens: Sequence[lx.Token]) -> Result[ast.Ast]:
    """
    Parses an ast from a list of tokens.
    """
    return parse_ast(Parser(tokens))


class Parser:
    """
    A wrapper class for parsing a list of tokens.
    """

    def __init__(self, tokens: Sequence[lx.Token]) -> None:
        self.tokens = tokens
        self.current = 0

    def done(self) -> bool:
        """
        Returns whether the whole token list has been consumed.
        """
        return self.current == len(self.tokens)

    def prev(self) -> lx.Token:
        """
        Returns the previous token.
        """
        return self.tokens[self.current - 1]

    def curr(self) -> Optional[lx.Token]:
        """
        Returns the current token, or None if there are no more tokens to parse.
        """
        return None if self.done() else self.tokens[self.current]

    def check(self, kind: lx.TokenType) -> bool:
        """
        Checks if the current token is of a given type.
        """
        curr = self.curr()
        if curr:
            return curr.kind == kind
        return False

    def match(self, kind: lx.TokenType) -> bool:
        """
        Checks if the current token is of a given type, and advances past it if it is.
        """
        result = self.check(kind)
        if result:
            self.current += 1
        return result

    def curr_line(self) -> int:
        """
        Returns the line of the current token (or the previous if the parser is done).
        """
        curr = self.curr()
        if curr:
            return curr.line
        return self.prev().line


def parse_token(parser: Parser, kinds: Iterable[lx.TokenType]) -> Optional[lx.Token]:
    """
    Parses a token from a given iterable of token types to check, and if none of the types match
    returns None.
    """
    for kind in kinds:
        if parser.match(kind):
            return parser.prev()
    return None


def parse_ast(parser: Parser) -> Result[ast.Ast]:
    """
    Parse the ast from a parser or return an error. Periods may also end earlier instructions.

    Ast : "." EOF | ( AstInstr+ "." )+ EOF ;
    """
    if parser.match(lx.TokenType.PERIOD):
        if parser.match(lx.TokenType.END_OF_INPUT):
            return ast.Ast([])
        return er.CompileError(line=parser.curr_line(), detail="expected end of program")

    instrs = []
    while True:
        instr = parse_instr(parser)
        if isinstance(instr, er.CompileError):
            return instr
        instrs.append(instr)
        if parser.match(lx.TokenType.PERIOD) and parser.match(lx.TokenType.END_OF_INPUT):
            return ast.Ast(instrs)


def parse_instr(parser: Parser) -> Result[ast.AstInstr]:
    """
    Parse an instruction from the parser or return an error.

    AstInstr : AstPenInstr | AstMoveInstr | AstColorInstr | AstRepInstr ;
    AstPenInstr : "UP" | "DOWN" ;
    """
    token = parse_token(parser, PEN_KINDS)
    if token is not None:
        return ast.AstPenInstr(PEN_KINDS[token.kind], token.line)

    token = parse_token(parser, MOVE_KINDS)
    if token is not None:
        return finish_move_instr(parser, MOVE_KINDS[token.kind])

    if parser.match(lx.TokenType.COLOR):
        return finish_color_instr(parser)
    if parser.match(lx.TokenType.REPEAT):
        return finish_rep_instr(parser)

    return er.CompileError(line=parser.curr_line(), detail="expected instruction")


def finish_move_instr(parser: Parser, kind: ast.MoveKind) -> Result[ast.AstMoveInstr]:
    """
    Parse a movement instruction from the parser or return an error. Assumes that the keyword
    token has already been consumed.

    AstMoveInstr : ( "FORW" | "BACK" | "LEFT" | "RIGHT" ) DECIMAL ;
    """
    start = parser.prev().line
    amount = parse_token(parser, [lx.TokenType.DECIMAL])
    if amount is None:
        return er.CompileError(
            line=parser.curr_line(), detail=f"expected distance after {kind.value}"
        )
    return ast.AstMoveInstr(kind, amount.value, start)


def finish_color_instr(parser: Parser) -> Result[ast.AstColorInstr]:
    """
    Parse a color instruction from the parser or return an error. Assumes that the "COLOR" token
    has already been consumed.

    AstColorInstr : "COLOR" HEX_COLOR ;
    """
    start = parser.prev().line
    color = parse_token(parser, [lx.TokenType.HEX_COLOR])
    if color is None:
        return er.CompileError(line=parser.curr_line(), detail="expected hex color")
    return ast.AstColorInstr(color.value, start)


def finish_rep_instr(parser: Parser) -> Result[ast.AstRepInstr]:
    """
    Parse a repeat instruction from the parser or return an error. Assumes that the "REP" token
    has already been consumed. Each repeated instruction may be followed by a period.

    AstRepInstr : "REP" DECIMAL '"' ( AstInstr "."? )* '"' ;
    """
    start = parser.prev().line
    count = parse_token(parser, [lx.TokenType.DECIMAL])
    if count is None:
        return er.CompileError(line=parser.curr_line(), detail="expected repeat count")

    if not parser.match(lx.TokenType.QUOTE):
        return er.CompileError(line=parser.curr_line(), detail="expected '\"' to begin block")

    instrs = []
    while not parser.match(lx.TokenType.QUOTE):
        instr = parse_instr(parser)
        if isinstance(instr, er.CompileError):
            return instr
        instrs.append(instr)
        parser.match(lx.TokenType.PERIOD)

    return ast.AstRepInstr(count.value, instrs, start)
