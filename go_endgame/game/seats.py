from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.board import Board


@dataclass
class Seat:
    """座位：player 为控制该座位的玩家 id（可为空）；resigned 一旦置位整局不再清除。"""
    player: Optional[int] = None
    resigned: bool = False


@dataclass
class SharedState:
    """跨阶段共享上下文：当前棋盘、座位列表、基准分数向量。

    由外层对局对象持有，以引用方式传入各阶段；阶段代码只读取它或修改座位认输标记，不复制。
    """
    board: Board
    seats: List[Seat] = field(default_factory=list)
    points: List[int] = field(default_factory=list)

    def seats_of(self, player_id: int) -> List[int]:
        # 一名玩家可同时控制多个座位
        return [idx for idx, seat in enumerate(self.seats) if seat.player == player_id]
