"""
Module defining an ast visitor that executes a Leona program by moving a turtle and emitting the
line segments it draws.
"""

from typing import Callable, List

import dataclasses as dc
import math

import leona.ast as ast
from leona.util import logger
from leona.values import COORD_FORMAT, START_COLOR, START_DIRECTION, START_X, START_Y


@dc.dataclass
class Turtle:
    """
    The mutable state of the turtle: position, heading in degrees, pen position and pen color.
    The heading accumulates and is never normalized.
    """

    x: float = START_X
    y: float = START_Y
    direction: float = START_DIRECTION
    pen_down: bool = False
    color: str = START_COLOR


@dc.dataclass(frozen=True)
class DrawRecord:
    """
    A single line segment drawn by the turtle.
    """

    color: str
    x1: float
    y1: float
    x2: float
    y2: float

    def __str__(self) -> str:
        coords = " ".join(COORD_FORMAT % coord for coord in (self.x1, self.y1, self.x2, self.y2))
        return f"{self.color} {coords}"


class TurtleInterpreter(ast.AstVisitor):
    """
    Ast visitor that executes the instructions it visits, passing every segment drawn with the
    pen down to `emit` as soon as it is drawn.
    """

    def __init__(self, emit: Callable[[DrawRecord], None] = print) -> None:
        self.turtle = Turtle()
        self._emit = emit

    def start(self, node: ast.Ast) -> None:
        for instr in node.instrs:
            instr.accept(self)

    def pen_instr(self, node: ast.AstPenInstr) -> None:
        self.turtle.pen_down = node.kind == ast.PenKind.DOWN

    def move_instr(self, node: ast.AstMoveInstr) -> None:
        amount = node.kind.sign() * node.amount
        if node.kind.is_turn():
            self.turtle.direction += amount
        else:
            self._move(amount)

    def color_instr(self, node: ast.AstColorInstr) -> None:
        self.turtle.color = node.color

    def rep_instr(self, node: ast.AstRepInstr) -> None:
        for _ in range(node.count):
            for instr in node.instrs:
                instr.accept(self)

    def _move(self, distance: int) -> None:
        turtle = self.turtle
        prev_x, prev_y = turtle.x, turtle.y
        turtle.x += distance * math.cos(math.pi * turtle.direction / 180)
        turtle.y += distance * math.sin(math.pi * turtle.direction / 180)
        if turtle.pen_down:
            self._emit(DrawRecord(turtle.color, prev_x, prev_y, turtle.x, turtle.y))


def run_ast(tree: ast.Ast, emit: Callable[[DrawRecord], None] = print) -> Turtle:
    """
    Executes a program, passing each drawn segment to `emit` in execution order. Returns the
    final turtle state.
    """
    interpreter = TurtleInterpreter(emit)
    tree.accept(interpreter)
    logger.debug("finished at %s", interpreter.turtle)
    return interpreter.turtle


def draw(tree: ast.Ast) -> List[DrawRecord]:
    """
    Executes a program and returns the segments it draws.
    """
    records: List[DrawRecord] = []
    run_ast(tree, records.append)
    return records
