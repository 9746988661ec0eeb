from go_endgame.core.board import Board, find_groups
from go_endgame.core.scoring import score_board
from go_endgame.utils.render import render_ascii


def test_render_board_only():
    lines = render_ascii(Board.from_rows(["1.2"])).splitlines()
    assert lines[0] == "    0  1  2"
    assert lines[1] == " 0  1  .  2"


def test_render_marks_territory_with_letters():
    board = Board.from_rows(["1.2", "..."])
    groups = find_groups(board)
    groups[1].alive = False
    lines = render_ascii(board, score_board(board, groups)).splitlines()
    # the dead stone is still drawn, empty points show team 1's territory
    assert lines[1] == " 0  1  a  2"
    assert lines[2] == " 1  a  a  a"
