"""
Versioned JSON snapshots of the scoring phase.

The pydantic models mirror the in-memory dataclasses field for field so a
ScoringState (or the shared cross-phase context) can be synced over the
network or saved and resumed, and read back into an equal object.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.board import Board, Group
from ..errors import SnapshotVersionError
from ..game.scoring_state import ScoringState
from ..game.seats import Seat, SharedState

SNAPSHOT_VERSION = 1


class BoardModel(BaseModel):
    """Flattened row-major board"""
    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    toroidal: bool = False
    points: List[int]

    @field_validator("points")
    @classmethod
    def _non_negative(cls, v: List[int]) -> List[int]:
        if any(c < 0 for c in v):
            raise ValueError("colors must be non-negative")
        return v

    @classmethod
    def from_board(cls, board: Board) -> "BoardModel":
        return cls(
            width=board.width,
            height=board.height,
            toroidal=board.toroidal,
            points=[int(c) for c in board.grid.reshape(-1)],
        )

    def to_board(self) -> Board:
        if len(self.points) != self.width * self.height:
            raise ValueError(
                f"board has {len(self.points)} points, expected {self.width * self.height}"
            )
        board = Board(self.width, self.height, self.toroidal)
        board.grid = np.array(self.points, dtype=board.grid.dtype).reshape(self.height, self.width)
        return board


class GroupModel(BaseModel):
    points: List[Tuple[int, int]]
    team: int = Field(gt=0)
    alive: bool = True

    @classmethod
    def from_group(cls, group: Group) -> "GroupModel":
        return cls(points=list(group.points), team=group.team, alive=group.alive)

    def to_group(self) -> Group:
        return Group(points=[tuple(p) for p in self.points], team=self.team, alive=self.alive)


class SeatModel(BaseModel):
    player: Optional[int] = None
    resigned: bool = False


class ScoringStateModel(BaseModel):
    """Complete scoring phase state"""
    version: int = SNAPSHOT_VERSION
    groups: List[GroupModel]
    points: BoardModel
    scores: List[int]
    players_accepted: List[bool]


class SharedStateModel(BaseModel):
    version: int = SNAPSHOT_VERSION
    board: BoardModel
    seats: List[SeatModel]
    points: List[int]


def _check_version(version: int) -> None:
    if version != SNAPSHOT_VERSION:
        raise SnapshotVersionError(
            f"unsupported snapshot version {version}",
            context={"supported": SNAPSHOT_VERSION},
        )


def scoring_state_to_model(state: ScoringState) -> ScoringStateModel:
    return ScoringStateModel(
        groups=[GroupModel.from_group(g) for g in state.groups],
        points=BoardModel.from_board(state.points),
        scores=list(state.scores),
        players_accepted=list(state.players_accepted),
    )


def _check_groups(groups: List[Group], board: Board) -> None:
    # 棋块点必须在盘内且互不重叠
    owner: Dict[Tuple[int, int], int] = {}
    for idx, group in enumerate(groups):
        for p in group.points:
            if not board.in_bounds(p):
                raise ValueError(f"group {idx} point {p} is outside the {board.width}x{board.height} board")
            if p in owner:
                raise ValueError(f"point {p} belongs to both group {owner[p]} and group {idx}")
            owner[p] = idx


def scoring_state_from_model(model: ScoringStateModel) -> ScoringState:
    _check_version(model.version)
    board = model.points.to_board()
    groups = [g.to_group() for g in model.groups]
    _check_groups(groups, board)
    return ScoringState(
        groups=groups,
        points=board,
        scores=list(model.scores),
        players_accepted=list(model.players_accepted),
    )


def dump_scoring_state(state: ScoringState) -> str:
    return scoring_state_to_model(state).model_dump_json()


def load_scoring_state(text: str) -> ScoringState:
    return scoring_state_from_model(ScoringStateModel.model_validate_json(text))


def dump_shared_state(shared: SharedState) -> str:
    model = SharedStateModel(
        board=BoardModel.from_board(shared.board),
        seats=[SeatModel(player=s.player, resigned=s.resigned) for s in shared.seats],
        points=list(shared.points),
    )
    return model.model_dump_json()


def load_shared_state(text: str) -> SharedState:
    model = SharedStateModel.model_validate_json(text)
    _check_version(model.version)
    return SharedState(
        board=model.board.to_board(),
        seats=[Seat(player=s.player, resigned=s.resigned) for s in model.seats],
        points=list(model.points),
    )
