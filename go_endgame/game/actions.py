from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

from ..errors import ActionAfterTerminationError

if TYPE_CHECKING:
    from .scoring_state import ScoringState
    from .seats import SharedState


# ---------- 玩家动作 ----------
@dataclass(frozen=True)
class Place:
    """数子阶段的落点：切换该点所在棋块的死活。"""
    x: int
    y: int


@dataclass(frozen=True)
class Pass:
    """接受当前数子结果。"""


@dataclass(frozen=True)
class Cancel:
    """放弃数子阶段，回到上一阶段（继续对局）。"""


@dataclass(frozen=True)
class Resign:
    """认输：永久标记所控座位，同时视为接受结果。"""


Action = Union[Place, Pass, Cancel, Resign]


# ---------- 阶段切换指令 ----------
@dataclass(frozen=True)
class NoChange:
    """不切换阶段。动作被拒绝时 reason 给出错误码（如 POINT_OUT_OF_RANGE）。"""
    reason: Optional[str] = None


@dataclass(frozen=True)
class SwapState:
    """用 state 替换当前阶段。"""
    state: Any


@dataclass(frozen=True)
class PopState:
    """弹出当前阶段，回到之前的阶段。"""


ActionChange = Union[NoChange, SwapState, PopState]


@dataclass
class DoneState:
    """终局阶段：保存最终的数子快照，不再接受任何动作。"""
    scoring: "ScoringState"

    @property
    def scores(self):
        return self.scoring.scores

    def make_action(self, shared: "SharedState", player_id: int, action: Action) -> ActionChange:
        raise ActionAfterTerminationError(
            "game is already finished",
            context={"player": player_id, "action": type(action).__name__},
        )
