"""
Contains functions and definitions for lexing Leona code into a list of tokens.
"""

from typing import Callable, List, Iterable, Optional, Tuple, Union

import dataclasses as dc
import enum
import re

from leona.util import logger
from leona.values import MAX_DECIMAL

Converter = Callable[[str], Optional[Union[int, str]]]


def _positive_int(literal: str) -> Optional[int]:
    digits = literal.lstrip("0")
    if not digits or len(digits) > len(str(MAX_DECIMAL)):
        return None
    value = int(digits)
    return value if value <= MAX_DECIMAL else None


def tokenize_source(source: str) -> List["Token"]:
    """
    Given a string of Leona source code, lexes it into a list of tokens terminated by an
    END_OF_INPUT token. If the source contains no tokens at all, returns an empty list.
    """
    skip_rules = [r"%.*", r"\s+"]
    consume_rules: List[Tuple[str, TokenType, Optional[Converter]]] = [
        (r"\.", TokenType.PERIOD, None),
        (r'"', TokenType.QUOTE, None),
        (r"#[0-9a-fA-F]{6}", TokenType.HEX_COLOR, str),
        (r"[0-9]+(?=[\s.%]|$)", TokenType.DECIMAL, _positive_int),
    ]
    # UP and DOWN may butt against the next token, other keywords need a separator
    for keyword in KEYWORD_TYPES:
        separator = "" if keyword in (TokenType.PEN_UP, TokenType.PEN_DOWN) else r"(?=[\s%]|$)"
        consume_rules.append((f"(?i:{keyword.value}){separator}", keyword, None))
    fallback_rule = (r".", TokenType.ERROR)

    lines = re.split(r"\r\n|\r|\n", source)
    if lines[-1] == "":
        del lines[-1]

    tokens: List[Token] = []
    for line_number, line in enumerate(lines, start=1):
        lexer = Lexer(line, line_number)
        lexer.run(consume_rules, skip_rules, fallback_rule)
        if lexer.tokens:
            logger.debug("line %d: %d tokens", line_number, len(lexer.tokens))
        tokens.extend(lexer.tokens)

    if not tokens:
        return []
    tokens.append(Token(kind=TokenType.END_OF_INPUT, line=tokens[-1].line))
    return tokens


@enum.unique
class TokenType(enum.Enum):
    """
    Enumerates the different types of tokens that can be in Leona source code. Keyword and
    symbol values are their canonical spelling.
    """

    # Keywords
    FORWARD = "FORW"
    BACKWARD = "BACK"
    TURN_LEFT = "LEFT"
    TURN_RIGHT = "RIGHT"
    PEN_DOWN = "DOWN"
    PEN_UP = "UP"
    COLOR = "COLOR"
    REPEAT = "REP"
    # Symbols
    PERIOD = "."
    QUOTE = '"'
    # Literals
    DECIMAL = "<decimal>"
    HEX_COLOR = "<hex>"
    # Special
    ERROR = "<error>"
    END_OF_INPUT = "<eof>"

    def __str__(self) -> str:
        return str(self.value)


KEYWORD_TYPES = [
    TokenType.FORWARD,
    TokenType.BACKWARD,
    TokenType.TURN_LEFT,
    TokenType.TURN_RIGHT,
    TokenType.PEN_DOWN,
    TokenType.PEN_UP,
    TokenType.COLOR,
    TokenType.REPEAT,
]


@dc.dataclass(frozen=True)
class Token:
    """
    Represents a single token within a string of Leona source code. Only DECIMAL and HEX_COLOR
    tokens carry a value.
    """

    kind: TokenType
    line: int
    value: Optional[Union[int, str]] = None
    lexeme: str = dc.field(default="", compare=False)

    def __str__(self) -> str:
        return self.lexeme


def token_info(token: Token) -> str:
    """
    Returns information about a token as a string, for debug output.
    """
    return f'<line {token.line}> {token.kind.name} "{token.lexeme}"'


class Lexer:
    """
    Class for walking over a single source line and emitting tokens or skipping based on regex
    patterns.
    """

    tokens: List[Token]

    def __init__(self, source: str, line: int) -> None:
        self.source = source
        self.line = line
        self.cursor = 0
        self.tokens = []

    def done(self) -> bool:
        """
        Returns whether the line has been fully used up or not.
        """
        return self.cursor == len(self.source)

    def emit(self, kind: TokenType, literal: str, value: Optional[Union[int, str]] = None) -> None:
        """
        Emit a token for the given literal and move after it.
        """
        self.tokens.append(Token(kind=kind, line=self.line, value=value, lexeme=literal))
        self.cursor += len(literal)

    def consume(self, pattern: str, kind: TokenType, convert: Optional[Converter] = None) -> bool:
        """
        Check if the pattern is matched, and if it is emit it as a token and move after it.
        If a converter is given and rejects the literal, a single character error token is emitted
        instead. Returns whether the match was found.
        """
        match = re.match(pattern, self.source[self.cursor :])
        if not match:
            return False
        literal = match.group(0)
        if convert is None:
            self.emit(kind, literal)
            return True
        value = convert(literal)
        if value is None:
            self.emit(TokenType.ERROR, literal[0])
        else:
            self.emit(kind, literal, value)
        return True

    def skip(self, pattern: str) -> bool:
        """
        Check if the pattern is matched, and if it is move after it without emitting anything.
        Returns whether the match was found.
        """
        match = re.match(pattern, self.source[self.cursor :])
        if match:
            self.cursor += len(match.group(0))
            return True
        return False

    def run(
        self,
        consume_rules: Iterable[Tuple[str, TokenType, Optional[Converter]]] = (),
        skip_rules: Iterable[str] = (),
        fallback: Optional[Tuple[str, TokenType]] = None,
    ) -> None:
        """
        Given an optional iterable of patterns to consume to token types (with optional value
        converters), an optional iterable of patterns to skip, and an optional fallback pattern to
        consume to a fallback token type, loops over the line with these rules until reaching the
        end, or until reaching something it can't consume.
        """
        while not self.done():
            if (
                not any(self.skip(pattern) for pattern in skip_rules)
                and not any(
                    self.consume(pattern, kind, convert)
                    for pattern, kind, convert in consume_rules
                )
                and (fallback is None or not self.consume(*fallback))
            ):
                break
