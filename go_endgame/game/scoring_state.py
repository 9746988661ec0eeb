from __future__ import annotations
import copy
from dataclasses import dataclass
from typing import List, Optional, Sequence
from loguru import logger

from ..core.board import Board, Group, Point, find_groups
from ..core.scoring import score_board, tally_scores
from ..errors import PointOutOfRangeError
from .actions import (
    Action, ActionChange, Cancel, DoneState, NoChange, Pass, Place, PopState, Resign, SwapState,
)
from .seats import Seat, SharedState


@dataclass
class ScoringState:
    """数子阶段状态。

    groups：本阶段的棋块快照（含死活标记）；
    points：按当前死活计算出的归属棋盘，每次有效落点后全量重算；
    scores：各队伍分数（双倍单位），= 基准分 + 2 × 归属点数；
    players_accepted：与 SharedState.seats 平行的接受标记。

    每个动作要么完整生效，要么完全不改动状态；调用方负责串行投递动作。
    """
    groups: List[Group]
    points: Board
    scores: List[int]
    players_accepted: List[bool]

    @classmethod
    def new(cls, board: Board, seats: Sequence[Seat], scores: Sequence[int]) -> "ScoringState":
        groups = find_groups(board)
        points = score_board(board, groups)
        return cls(
            groups=groups,
            points=points,
            scores=tally_scores(points, scores),
            # 已认输的座位视为已接受
            players_accepted=[s.resigned for s in seats],
        )

    @classmethod
    def from_shared(cls, shared: SharedState) -> "ScoringState":
        return cls.new(shared.board, shared.seats, shared.points)

    def is_accepted(self) -> bool:
        return all(self.players_accepted)

    def snapshot(self) -> "ScoringState":
        return copy.deepcopy(self)

    def group_at(self, point: Point) -> Optional[Group]:
        for group in self.groups:
            if point in group:
                return group
        return None

    # ---------- 动作 ----------
    def make_action_place(self, shared: SharedState, point: Point) -> ActionChange:
        x, y = point
        if not shared.board.in_bounds(point):
            # 越界点与“该点无棋块”区分开，但同样不向阶段外抛出
            err = PointOutOfRangeError(x, y, shared.board.width, shared.board.height)
            logger.warning(f"Place rejected: {err}")
            return NoChange(reason=err.code)

        group = self.group_at(point)
        if group is None:
            return NoChange()

        group.alive = not group.alive
        logger.debug(f"Group of team {group.team} at ({x}, {y}) marked {'alive' if group.alive else 'dead'}")

        self.points = score_board(shared.board, self.groups)
        self.scores = tally_scores(self.points, shared.points)

        # 死活有争议：之前的接受全部作废，只保留认输座位
        self.players_accepted = [seat.resigned for seat in shared.seats]
        logger.debug(f"Rescored after dispute: scores={self.scores}")
        return NoChange()

    def make_action_pass(self, shared: SharedState, player_id: int) -> ActionChange:
        for seat_idx in shared.seats_of(player_id):
            self.players_accepted[seat_idx] = True
        return self._check_consensus()

    def make_action_resign(self, shared: SharedState, player_id: int) -> ActionChange:
        for seat_idx in shared.seats_of(player_id):
            shared.seats[seat_idx].resigned = True
            self.players_accepted[seat_idx] = True
        return self._check_consensus()

    def make_action(self, shared: SharedState, player_id: int, action: Action) -> ActionChange:
        if isinstance(action, Place):
            return self.make_action_place(shared, (action.x, action.y))
        if isinstance(action, Pass):
            return self.make_action_pass(shared, player_id)
        if isinstance(action, Cancel):
            logger.info(f"Scoring cancelled by player {player_id}")
            return PopState()
        if isinstance(action, Resign):
            return self.make_action_resign(shared, player_id)
        raise TypeError(f"unsupported action: {action!r}")

    def _check_consensus(self) -> ActionChange:
        if self.is_accepted():
            logger.info(f"All seats accepted, scoring finished: scores={self.scores}")
            return SwapState(DoneState(self.snapshot()))
        return NoChange()
