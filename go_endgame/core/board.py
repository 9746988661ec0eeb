# go_endgame/core/board.py
from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from typing import Iterable, Iterator, List, Sequence, Set, Tuple

Color = int
EMPTY: Color = 0
Point = Tuple[int, int]  # (x, y)


@dataclass
class Group:
    """同色连通块：points 为块内全部棋子坐标，team 为所属队伍，alive 为当前死活标记。"""
    points: List[Point]
    team: Color
    alive: bool = True
    _lookup: Set[Point] = field(default_factory=set, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.team == EMPTY:
            raise ValueError("group team cannot be EMPTY")
        self._lookup = set(self.points)

    def __contains__(self, p: Point) -> bool:
        return tuple(p) in self._lookup


class Board:
    """任意尺寸棋盘（可选环面/toroidal 绕边）。

    网格：int16，形状 (height, width)，0=空，1..N=队伍颜色。
    坐标 Point 为 (x, y)，x 为列，y 为行。
    """

    def __init__(self, width: int, height: int, toroidal: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"board dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.toroidal = bool(toroidal)
        self.grid = np.zeros((self.height, self.width), dtype=np.int16)

    @classmethod
    def empty(cls, width: int, height: int, toroidal: bool = False) -> "Board":
        return cls(width, height, toroidal)

    @classmethod
    def from_rows(cls, rows: Sequence[str], toroidal: bool = False) -> "Board":
        """由文本行构造：'.' 为空点，数字为队伍颜色。所有行必须等长。"""
        if not rows:
            raise ValueError("board needs at least one row")
        width = len(rows[0])
        b = cls(width, len(rows), toroidal)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has length {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                if ch == ".":
                    continue
                if not ch.isdigit():
                    raise ValueError(f"unexpected character {ch!r} at ({x}, {y})")
                b.set((x, y), int(ch))
        return b

    # ---------- 基础 ----------
    def in_bounds(self, p: Point) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, p: Point) -> Iterable[Point]:
        """四邻点。环面棋盘按宽高取模绕边；同一邻点只给出一次，且不会是 p 自身。"""
        x, y = p
        seen: Set[Point] = set()
        for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
            if self.toroidal:
                nx %= self.width
                ny %= self.height
            elif not (0 <= nx < self.width and 0 <= ny < self.height):
                continue
            q = (nx, ny)
            if q == (x, y) or q in seen:
                continue
            seen.add(q)
            yield q

    def get(self, p: Point) -> Color:
        return int(self.grid[p[1], p[0]])

    def set(self, p: Point, color: Color) -> None:
        self.grid[p[1], p[0]] = color

    def copy(self) -> "Board":
        b = Board(self.width, self.height, toroidal=self.toroidal)
        b.grid = self.grid.copy()
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width == other.width and self.height == other.height
                and self.toroidal == other.toroidal
                and bool(np.array_equal(self.grid, other.grid)))

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, toroidal={self.toroidal})"

    # ---------- 扁平索引 ----------
    def point_to_idx(self, p: Point) -> int:
        x, y = p
        return y * self.width + x

    def idx_to_point(self, idx: int) -> Point:
        return (idx % self.width, idx // self.width)

    # ---------- 统计与枚举 ----------
    def points(self) -> Iterator[Point]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def empty_points(self) -> Iterator[Point]:
        for y in range(self.height):
            for x in range(self.width):
                if int(self.grid[y, x]) == EMPTY:
                    yield (x, y)

    def stones_count(self, color: Color) -> int:
        return int((self.grid == color).sum())


def find_groups(board: Board) -> List[Group]:
    """按行优先顺序找出所有同色连通块（尊重环面绕边），初始均为活棋。"""
    visited = np.zeros_like(board.grid, dtype=bool)
    groups: List[Group] = []
    for start in board.points():
        color = board.get(start)
        if color == EMPTY or visited[start[1], start[0]]:
            continue
        visited[start[1], start[0]] = True
        members: List[Point] = []
        stack = [start]
        while stack:
            p = stack.pop()
            members.append(p)
            for q in board.neighbors(p):
                if not visited[q[1], q[0]] and board.get(q) == color:
                    visited[q[1], q[0]] = True
                    stack.append(q)
        members.sort(key=lambda q: (q[1], q[0]))
        groups.append(Group(points=members, team=color))
    return groups
