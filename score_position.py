# score_position.py
from __future__ import annotations
import argparse
from loguru import logger

from go_endgame.config import load_config, build_shared_state, build_actions
from go_endgame.core.scoring import area_score
from go_endgame.game.actions import Cancel
from go_endgame.game.controller import GameController
from go_endgame.io.snapshot import dump_scoring_state
from go_endgame.utils.log import setup_logging
from go_endgame.utils.render import render_ascii


def main():
    parser = argparse.ArgumentParser("Territory scoring for a finished position")
    parser.add_argument("--cfg", type=str, required=True, help="position yaml (BOARD/SEATS/SCORES/ACTIONS)")
    parser.add_argument("--log_level", type=str, default=None, help="overrides LOG.level")
    parser.add_argument("--json_out", type=str, default=None, help="write final scoring snapshot here")
    args = parser.parse_args()

    cfg = load_config(args.cfg)
    setup_logging(args.log_level or cfg.LOG.get("level", "INFO"))

    shared = build_shared_state(cfg)
    controller = GameController(shared)
    controller.begin_scoring()

    for step in build_actions(cfg):
        if isinstance(step["action"], Cancel):
            # 命令行没有对局阶段可回退，直接停止回放
            logger.info(f"Scoring cancelled by player {step['player']}, stopping replay")
            break
        controller.make_action(step["player"], step["action"])
        if controller.is_done:
            break

    phase = controller.current
    scoring = phase.scoring if controller.is_done else phase
    print(render_ascii(shared.board, scoring.points))
    counts = area_score(scoring.points)
    for team, score in enumerate(scoring.scores, start=1):
        print(f"Team {team}: {score / 2:.1f} ({counts.get(team, 0)} points)")
    print(f"Accepted: {scoring.players_accepted}; finished: {controller.is_done}")

    if args.json_out:
        with open(args.json_out, "w", encoding="utf-8") as f:
            f.write(dump_scoring_state(scoring))
        logger.info(f"Snapshot saved to: {args.json_out}")


if __name__ == "__main__":
    main()
