"""
Definitions for compile errors.
"""

import dataclasses as dc

from leona.values import SYNTAX_ERROR_FORMAT


@dc.dataclass(frozen=True)
class CompileError:
    """
    Class representing a syntax error in a Leona program, has the offending line and a short
    description of what the parser expected there.
    """

    line: int
    detail: str = ""

    def __str__(self) -> str:
        return SYNTAX_ERROR_FORMAT.format(line=self.line)

    def describe(self) -> str:
        """
        Returns the error message along with the parser's description, for debug output.
        """
        if self.detail:
            return f"{self} ({self.detail})"
        return str(self)
