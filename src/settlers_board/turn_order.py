"""Turn order randomization for the four players."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from settlers_board.board.config import PLAYER_COUNT
from settlers_board.errors import InvalidPlayerCountError

logger = logging.getLogger(__name__)


class TurnOrderRandomizer:
    """Produces a uniformly random permutation of the players."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def randomize(self, players: Sequence[str]) -> tuple[str, ...]:
        if len(players) != PLAYER_COUNT or len(set(players)) != PLAYER_COUNT:
            raise InvalidPlayerCountError(
                f"expected {PLAYER_COUNT} distinct players, got {list(players)}"
            )
        order = list(players)
        self.rng.shuffle(order)
        logger.debug("Turn order: %s", order)
        return tuple(order)
