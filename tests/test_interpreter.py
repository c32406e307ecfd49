"""
Tests for executing programs with the turtle interpreter.
"""

import math

import pytest

import leona.ast as ast
from leona.interpreter import DrawRecord, Turtle, draw, run_ast
from leona.lexer import tokenize_source
from leona.parser import parse_tokens


def _records(source: str):
    return draw(parse_tokens(tokenize_source(source)))


def _lines(source: str):
    return [str(record) for record in _records(source)]


def test_forward_with_pen_down():
    assert _lines("down. forw 10.") == ["#0000FF 0.0000 0.0000 10.0000 0.0000"]


def test_pen_starts_up():
    assert _lines("forw 10.") == []


def test_moves_with_pen_up_still_move():
    assert _lines("forw 3 down forw 2 .") == ["#0000FF 3.0000 0.0000 5.0000 0.0000"]


def test_pen_up_stops_drawing():
    assert _lines("down forw 1 up forw 1 .") == ["#0000FF 0.0000 0.0000 1.0000 0.0000"]


def test_backward_is_negated_forward():
    assert _lines("down back 4 .") == ["#0000FF 0.0000 0.0000 -4.0000 0.0000"]


def test_turns():
    assert _lines("down left 90 forw 2 right 90 forw 1 .") == [
        "#0000FF 0.0000 0.0000 0.0000 2.0000",
        "#0000FF 0.0000 2.0000 1.0000 2.0000",
    ]


def test_color_affects_later_segments_only():
    assert _lines("down forw 1 color #FF0000 forw 1 .") == [
        "#0000FF 0.0000 0.0000 1.0000 0.0000",
        "#FF0000 1.0000 0.0000 2.0000 0.0000",
    ]


def test_nested_repeats_compound():
    records = _records('down REP 2 " REP 3 " FORW 1 " " .')
    assert len(records) == 6
    assert [record.x2 for record in records] == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_repeat_state_persists_across_iterations():
    lines = _lines('down rep 4 " forw 10 left 90 " .')
    assert lines[0] == "#0000FF 0.0000 0.0000 10.0000 0.0000"
    assert lines[1] == "#0000FF 10.0000 0.0000 10.0000 10.0000"
    assert len(lines) == 4


def test_zero_repeat_executes_nothing():
    tree = ast.Ast(
        [
            ast.AstPenInstr(ast.PenKind.DOWN),
            ast.AstRepInstr(
                0,
                [
                    ast.AstMoveInstr(ast.MoveKind.FORWARD, 10),
                    ast.AstMoveInstr(ast.MoveKind.TURN_LEFT, 10),
                    ast.AstColorInstr("#123456"),
                    ast.AstPenInstr(ast.PenKind.UP),
                ],
            ),
        ]
    )
    records = []
    turtle = run_ast(tree, records.append)
    assert records == []
    assert turtle == Turtle(pen_down=True)


def test_heading_is_not_normalized():
    tree = parse_tokens(tokenize_source("left 200 left 200 down forw 10 ."))
    records = []
    turtle = run_ast(tree, records.append)
    assert turtle.direction == 400
    (record,) = records
    assert record.x2 == pytest.approx(10 * math.cos(math.radians(40)))
    assert record.y2 == pytest.approx(10 * math.sin(math.radians(40)))
    assert record.x2 == 10 * math.cos(math.pi * 400 / 180)


def test_output_count_matches_pen_down_moves():
    source = 'down rep 3 " forw 1 up back 1 down left 5 " rep 2 " down rep 2 " back 2 " up forw 1 " .'
    # 3 * 1 + 2 * 2 pen-down moves
    assert len(_records(source)) == 7


def test_initial_state():
    assert run_ast(ast.Ast([]), lambda record: None) == Turtle(0.0, 0.0, 0.0, False, "#0000FF")


def test_record_format():
    record = DrawRecord("#ABCDEF", 0.0, -0.00004, 2.71828, 100.0)
    assert str(record) == "#ABCDEF 0.0000 -0.0000 2.7183 100.0000"
