from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import yaml

from .core.board import Board
from .errors import ConfigError
from .game.actions import Action, Cancel, Pass, Place, Resign
from .game.seats import Seat, SharedState


@dataclass
class ScoringConfig:
    BOARD: Dict[str, Any]
    SEATS: List[Any]
    SCORES: Optional[List[int]] = None
    ACTIONS: List[Dict[str, Any]] = field(default_factory=list)
    LOG: Dict[str, Any] = field(default_factory=dict)


def load_config(path: str) -> ScoringConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    for key in ("BOARD", "SEATS"):
        if key not in cfg:
            raise ConfigError(f"{path}: missing section {key}")
    if "LOG" not in cfg:  # default for older position files
        cfg["LOG"] = {"level": "INFO"}
    unknown = set(cfg) - {"BOARD", "SEATS", "SCORES", "ACTIONS", "LOG"}
    if unknown:
        raise ConfigError(f"{path}: unknown sections {sorted(unknown)}")
    return ScoringConfig(**cfg)


def _parse_seat(raw: Any) -> Seat:
    # 允许直接写玩家 id / null，或 {player, resigned}
    if raw is None or isinstance(raw, int):
        return Seat(player=raw)
    if isinstance(raw, dict):
        return Seat(player=raw.get("player"), resigned=bool(raw.get("resigned", False)))
    raise ConfigError(f"invalid seat entry: {raw!r}")


def _parse_action(raw: Dict[str, Any]) -> Action:
    kind = str(raw.get("type", "")).lower()
    if kind == "place":
        return Place(int(raw["x"]), int(raw["y"]))
    if kind == "pass":
        return Pass()
    if kind == "cancel":
        return Cancel()
    if kind == "resign":
        return Resign()
    raise ConfigError(f"unknown action type: {raw.get('type')!r}")


def build_shared_state(cfg: ScoringConfig) -> SharedState:
    rows = cfg.BOARD.get("rows")
    if not rows:
        raise ConfigError("BOARD.rows is required")
    try:
        board = Board.from_rows([str(r) for r in rows], toroidal=bool(cfg.BOARD.get("toroidal", False)))
    except ValueError as e:
        raise ConfigError(f"invalid board: {e}") from e

    seats = [_parse_seat(s) for s in cfg.SEATS]
    if cfg.SCORES is not None:
        points = [int(s) for s in cfg.SCORES]
    else:
        # 未给出基准分时每支队伍从 0 开始
        teams = int(board.grid.max())
        points = [0] * teams
    return SharedState(board=board, seats=seats, points=points)


def build_actions(cfg: ScoringConfig) -> List[Dict[str, Any]]:
    """脚本化动作：[{player, action}]，供命令行回放。"""
    out = []
    for raw in cfg.ACTIONS:
        if "player" not in raw:
            raise ConfigError(f"action without player: {raw!r}")
        out.append({"player": int(raw["player"]), "action": _parse_action(raw)})
    return out
