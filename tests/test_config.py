from pathlib import Path

import pytest

from go_endgame.config import build_actions, build_shared_state, load_config
from go_endgame.errors import ConfigError
from go_endgame.game.actions import Pass, Place
from go_endgame.game.controller import GameController

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"


def _write(tmp_path, text):
    path = tmp_path / "position.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_minimal_config_fills_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, "BOARD:\n  rows: ['1.2']\nSEATS: [1, 2]\n"))
    assert cfg.LOG == {"level": "INFO"}
    assert cfg.ACTIONS == []

    shared = build_shared_state(cfg)
    assert shared.board.width == 3
    assert shared.board.toroidal is False
    assert [s.player for s in shared.seats] == [1, 2]
    assert shared.points == [0, 0]


def test_seat_entries_may_carry_resignation(tmp_path):
    text = (
        "BOARD:\n  rows: ['1..3']\n  toroidal: true\n"
        "SEATS:\n  - {player: 1, resigned: true}\n  - null\n"
        "SCORES: [1, 2, 3]\n"
    )
    shared = build_shared_state(load_config(_write(tmp_path, text)))
    assert shared.board.toroidal is True
    assert shared.seats[0].resigned is True
    assert shared.seats[1].player is None
    assert shared.points == [1, 2, 3]


def test_missing_board_section(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "SEATS: [1]\n"))


def test_unknown_section(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "BOARD:\n  rows: ['1']\nSEATS: [1]\nKOMI: 7.5\n"))


def test_malformed_board(tmp_path):
    cfg = load_config(_write(tmp_path, "BOARD:\n  rows: ['1.2', '1']\nSEATS: [1]\n"))
    with pytest.raises(ConfigError):
        build_shared_state(cfg)


def test_actions_are_parsed(tmp_path):
    text = (
        "BOARD:\n  rows: ['1.2']\nSEATS: [1, 2]\n"
        "ACTIONS:\n  - {player: 1, type: place, x: 2, y: 0}\n  - {player: 2, type: Pass}\n"
    )
    actions = build_actions(load_config(_write(tmp_path, text)))
    assert actions == [
        {"player": 1, "action": Place(2, 0)},
        {"player": 2, "action": Pass()},
    ]


def test_unknown_action_type(tmp_path):
    text = "BOARD:\n  rows: ['1']\nSEATS: [1]\nACTIONS:\n  - {player: 1, type: undo}\n"
    with pytest.raises(ConfigError):
        build_actions(load_config(_write(tmp_path, text)))


def test_bundled_position_replays_to_done():
    cfg = load_config(str(CONFIG_DIR / "position_5x5.yaml"))
    shared = build_shared_state(cfg)
    controller = GameController(shared)
    controller.begin_scoring()
    for step in build_actions(cfg):
        controller.make_action(step["player"], step["action"])

    assert controller.is_done
    assert controller.current.scores == [20, 23]
