"""Number token placement along the canonical spiral.

Tokens are laid counter-clockwise starting from the top-left tile and
spiralling in to the centre. The desert takes no token, so every tile after
it in the spiral receives the token one slot earlier.
"""

from __future__ import annotations

import logging
from typing import Sequence

from settlers_board.board.config import BOARD_SIZE, Terrain
from settlers_board.errors import InvalidParamsError, SupplyExhaustedError

logger = logging.getLogger(__name__)

# Spiral slot -> token value (the standard beginner layout)
SPIRAL_TOKENS: dict[int, int] = {
    0: 5, 1: 2, 2: 6, 3: 3, 4: 8, 5: 10, 6: 9, 7: 12, 8: 11, 9: 4,
    10: 8, 11: 10, 12: 9, 13: 4, 14: 5, 15: 6, 16: 3, 17: 11,
}

# Grid index (row by row) -> position along the counter-clockwise spiral
SPIRAL_ORDER: tuple[int, ...] = (
    0, 11, 10, 1, 12, 17, 9, 2, 13, 18, 16, 8, 3, 14, 15, 7, 4, 5, 6,
)


def spiral_walk() -> list[int]:
    """Grid indices in the order the spiral visits them."""
    return sorted(range(BOARD_SIZE), key=SPIRAL_ORDER.__getitem__)


class NumberTokenPlacer:
    """Assigns production tokens to a terrain sequence by grid position."""

    def place(self, terrains: Sequence[Terrain]) -> tuple[int, ...]:
        """Return one token per tile: 0 on the desert, the spiral token elsewhere."""
        if len(terrains) != BOARD_SIZE:
            raise InvalidParamsError(
                f"expected {BOARD_SIZE} terrain tiles, received {len(terrains)}"
            )

        tokens = [0] * BOARD_SIZE
        skipped = 0
        for position, grid_index in enumerate(spiral_walk()):
            if terrains[grid_index] is Terrain.DESERT:
                skipped += 1
                continue
            slot = position - skipped
            if slot not in SPIRAL_TOKENS:
                raise SupplyExhaustedError(
                    f"no number token left for tile {grid_index} (spiral slot {slot})"
                )
            tokens[grid_index] = SPIRAL_TOKENS[slot]

        logger.debug("Placed tokens: %s", tokens)
        return tuple(tokens)
