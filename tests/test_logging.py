import sys

import pytest
from loguru import logger

from go_endgame.game.actions import Cancel, Pass
from go_endgame.game.controller import GameController
from go_endgame.utils.log import setup_logging


@pytest.fixture
def captured():
    messages = []
    handler = setup_logging("DEBUG", sink=messages.append)
    yield messages
    logger.remove(handler)
    logger.add(sys.stderr)


def test_transitions_are_logged(duel_shared, captured):
    controller = GameController(duel_shared, [object()])
    controller.begin_scoring()
    controller.make_action(1, Pass())
    controller.make_action(2, Cancel())
    text = "".join(captured)
    assert "Scoring started" in text
    assert "Scoring cancelled by player 2" in text
    assert "popped" in text


def test_level_filters_debug(duel_shared):
    messages = []
    handler = setup_logging("warning", sink=messages.append)
    try:
        logger.info("hidden")
        logger.warning("shown")
    finally:
        logger.remove(handler)
        logger.add(sys.stderr)
    assert len(messages) == 1
    assert "shown" in messages[0]
