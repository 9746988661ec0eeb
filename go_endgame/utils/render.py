from __future__ import annotations
from typing import Optional
from ..core.board import Board, EMPTY


def render_ascii(board: Board, territory: Optional[Board] = None) -> str:
    """简单 ASCII 渲染。棋子显示为队伍数字；给出 territory 时，空点上的归属以小写字母标注（a=队伍1）。"""
    rows = []
    header = "   " + " ".join(f"{x:2d}" for x in range(board.width))
    rows.append(header)
    for y in range(board.height):
        line = [f"{y:2d} "]
        for x in range(board.width):
            v = board.get((x, y))
            if v != EMPTY:
                ch = str(v)
            elif territory is not None and territory.get((x, y)) != EMPTY:
                ch = chr(ord("a") + territory.get((x, y)) - 1)
            else:
                ch = "."
            line.append(f" {ch} ")
        rows.append("".join(line).rstrip())
    return "\n".join(rows)
