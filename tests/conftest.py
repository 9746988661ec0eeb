"""
Shared pytest fixtures for go_endgame tests.

Board and shared-state fixtures are function-scoped so every test gets its
own mutable copy.
"""

from pathlib import Path
import sys
from typing import Callable, List, Optional, Sequence

import pytest

# Ensure the repository root is on sys.path so `import go_endgame` works
# without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from go_endgame.core.board import Board
from go_endgame.game.scoring_state import ScoringState
from go_endgame.game.seats import Seat, SharedState


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Factory for boards written as text rows ('.' empty, digits = teams)."""

    def _create_board(rows: Sequence[str], toroidal: bool = False) -> Board:
        return Board.from_rows(list(rows), toroidal=toroidal)

    return _create_board


@pytest.fixture
def shared_factory(board_factory) -> Callable[..., SharedState]:
    """Factory for SharedState with one seat per player id."""

    def _create_shared(
        rows: Sequence[str],
        players: Sequence[Optional[int]] = (1, 2),
        points: Optional[List[int]] = None,
        toroidal: bool = False,
        resigned: Sequence[int] = (),
    ) -> SharedState:
        board = board_factory(rows, toroidal=toroidal)
        seats = [Seat(player=p, resigned=idx in resigned) for idx, p in enumerate(players)]
        if points is None:
            points = [0] * int(board.grid.max())
        return SharedState(board=board, seats=seats, points=list(points))

    return _create_shared


# =============================================================================
# SCENARIO FIXTURES
# =============================================================================


@pytest.fixture
def duel_shared(shared_factory) -> SharedState:
    """3x1 board: team 1 at x=0, team 2 at x=2, one dame point between."""
    return shared_factory(["1.2"])


@pytest.fixture
def duel_state(duel_shared) -> ScoringState:
    return ScoringState.from_shared(duel_shared)
