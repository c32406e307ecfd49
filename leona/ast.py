"""
Module containing definitions for a Leona ast and a base class for ast visitors.
"""

from typing import List, Union

import dataclasses as dc
import enum

# Visitor definitions:


class AstVisitor:
    """
    Base class for an ast visitor.
    """

    def start(self, node: "Ast") -> None:
        """
        Start visiting a tree.
        """

    def pen_instr(self, node: "AstPenInstr") -> None:
        """
        Visit a pen up/down instruction node.
        """

    def move_instr(self, node: "AstMoveInstr") -> None:
        """
        Visit a movement or turn instruction node.
        """

    def color_instr(self, node: "AstColorInstr") -> None:
        """
        Visit a color instruction node.
        """

    def rep_instr(self, node: "AstRepInstr") -> None:
        """
        Visit a repeat instruction node.
        """


# Instruction kinds:


@enum.unique
class PenKind(enum.Enum):
    """
    Enumerates the pen positions.
    """

    UP = "UP"
    DOWN = "DOWN"


@enum.unique
class MoveKind(enum.Enum):
    """
    Enumerates the instructions that take a distance or an angle. Values are their canonical
    spelling.
    """

    FORWARD = "FORW"
    BACKWARD = "BACK"
    TURN_LEFT = "LEFT"
    TURN_RIGHT = "RIGHT"

    def is_turn(self) -> bool:
        """
        Returns whether this kind changes the heading rather than the position.
        """
        return self in (MoveKind.TURN_LEFT, MoveKind.TURN_RIGHT)

    def sign(self) -> int:
        """
        Returns -1 for the kinds that are negated forward moves or left turns, 1 otherwise.
        """
        return -1 if self in (MoveKind.BACKWARD, MoveKind.TURN_RIGHT) else 1


# Node definitions:


@dc.dataclass
class AstNode:
    """
    Base class for an ast node. All nodes must be able to accept an ast visitor.
    """

    def accept(self, visitor: AstVisitor) -> None:
        """
        Accept a visitor to this node, calling the relevant method of the visitor.
        """


@dc.dataclass
class AstPenInstr(AstNode):
    """
    Ast node for raising or lowering the pen.
    """

    kind: PenKind = PenKind.UP
    line: int = 0

    def accept(self, visitor: AstVisitor) -> None:
        visitor.pen_instr(self)


@dc.dataclass
class AstMoveInstr(AstNode):
    """
    Ast node for moving or turning by an amount.
    """

    kind: MoveKind = MoveKind.FORWARD
    amount: int = 0
    line: int = 0

    def accept(self, visitor: AstVisitor) -> None:
        visitor.move_instr(self)


@dc.dataclass
class AstColorInstr(AstNode):
    """
    Ast node for changing the pen color.
    """

    color: str = ""
    line: int = 0

    def accept(self, visitor: AstVisitor) -> None:
        visitor.color_instr(self)


@dc.dataclass
class AstRepInstr(AstNode):
    """
    Ast node for a repeated block of instructions.
    """

    count: int = 0
    instrs: List["AstInstr"] = dc.field(default_factory=list)
    line: int = 0

    def accept(self, visitor: AstVisitor) -> None:
        visitor.rep_instr(self)


AstInstr = Union[AstPenInstr, AstMoveInstr, AstColorInstr, AstRepInstr]


@dc.dataclass
class Ast(AstNode):
    """
    The root ast node.
    """

    instrs: List[AstInstr] = dc.field(default_factory=list)

    def accept(self, visitor: AstVisitor) -> None:
        visitor.start(self)
