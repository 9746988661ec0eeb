from __future__ import annotations
import numpy as np
from typing import Dict, List, Sequence, Set
from .board import Board, Color, EMPTY, Group, Point

# 每个归属点记 2 个单位（双倍计分），便于调用方以整数形式加半目贴目
POINT_VALUE = 2


def score_board(board: Board, groups: Sequence[Group]) -> Board:
    """数地：返回新棋盘，每个点标记为归属队伍（0=中立）。

    只有活棋会落回盘面；死棋视为已提走，其点位与空点一起参与归属判定。
    对每个空连通域做 flood-fill（环面棋盘跨边连通），
    若其邻接的活棋恰好只有一种颜色，则整块归该色；邻接 0 种或 ≥2 种颜色则保持中立。
    纯函数，不修改输入。
    """
    out = Board.empty(board.width, board.height, board.toroidal)

    # 活棋落盘
    for group in groups:
        if not group.alive:
            continue
        for p in group.points:
            out.set(p, group.team)

    g = out.grid
    visited = g != EMPTY
    for start in out.points():
        if visited[start[1], start[0]]:
            continue
        # flood 空域
        stack = [start]
        region: List[Point] = []
        adj_colors: Set[Color] = set()
        visited[start[1], start[0]] = True
        while stack:
            p = stack.pop()
            region.append(p)
            for q in out.neighbors(p):
                v = int(g[q[1], q[0]])
                if v != EMPTY:
                    adj_colors.add(v)
                elif not visited[q[1], q[0]]:
                    visited[q[1], q[0]] = True
                    stack.append(q)
        # 归属：只邻接单一颜色才算地，否则是中立点
        if len(adj_colors) == 1:
            (color,) = adj_colors
            for p in region:
                g[p[1], p[0]] = color

    return out


def area_score(points: Board) -> Dict[Color, int]:
    """已归属棋盘上各队伍的点数（不含双倍）。"""
    colors, counts = np.unique(points.grid, return_counts=True)
    return {int(c): int(n) for c, n in zip(colors, counts) if int(c) != EMPTY}


def tally_scores(points: Board, baseline: Sequence[int]) -> List[int]:
    """分数向量：baseline[i] + POINT_VALUE × 归属于队伍 i+1 的点数。

    向量长度至少为 len(baseline)，盘上出现更大的队伍颜色时补 0 扩展。
    """
    scores = [int(s) for s in baseline]
    for color, n in area_score(points).items():
        while len(scores) < color:
            scores.append(0)
        scores[color - 1] += POINT_VALUE * n
    return scores
