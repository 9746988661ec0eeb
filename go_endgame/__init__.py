from .core.board import Board, Group, Color, Point, EMPTY, find_groups
from .core.scoring import score_board, tally_scores, area_score, POINT_VALUE
from .game.actions import (
    Place, Pass, Cancel, Resign, Action,
    NoChange, SwapState, PopState, ActionChange, DoneState,
)
from .game.seats import Seat, SharedState
from .game.scoring_state import ScoringState
from .game.controller import GameController

__version__ = "0.1.0"
