from __future__ import annotations
from typing import Any, List, Optional
from loguru import logger

from ..errors import InvalidStateError
from .actions import Action, ActionChange, DoneState, NoChange, PopState, SwapState
from .scoring_state import ScoringState
from .seats import SharedState


class GameController:
    """阶段栈：持有共享上下文，把动作投递给栈顶阶段并执行其返回的切换指令。

    栈底通常是对局阶段（任何带 make_action(shared, player_id, action) 的对象），
    数子阶段压在其上；所有动作由调用方串行投递。
    """

    def __init__(self, shared: SharedState, phases: Optional[List[Any]] = None) -> None:
        self.shared = shared
        self.phases: List[Any] = list(phases or [])

    @property
    def current(self) -> Any:
        if not self.phases:
            raise InvalidStateError("phase stack is empty")
        return self.phases[-1]

    @property
    def is_done(self) -> bool:
        return bool(self.phases) and isinstance(self.phases[-1], DoneState)

    def begin_scoring(self) -> ScoringState:
        state = ScoringState.from_shared(self.shared)
        self.phases.append(state)
        logger.info(f"Scoring started: {len(state.groups)} groups, scores={state.scores}")
        return state

    def make_action(self, player_id: int, action: Action) -> ActionChange:
        change = self.current.make_action(self.shared, player_id, action)
        self.apply(change)
        return change

    def apply(self, change: ActionChange) -> None:
        if isinstance(change, NoChange):
            return
        if isinstance(change, SwapState):
            self.phases[-1] = change.state
            logger.info(f"Phase replaced with {type(change.state).__name__}")
            return
        if isinstance(change, PopState):
            if len(self.phases) < 2:
                raise InvalidStateError("cannot pop the only phase", context={"phases": len(self.phases)})
            popped = self.phases.pop()
            logger.info(f"Phase {type(popped).__name__} popped, back to {type(self.phases[-1]).__name__}")
            return
        raise TypeError(f"unsupported transition: {change!r}")
