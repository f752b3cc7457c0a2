"""Terrain allocation: a random arrangement of the fixed terrain supply."""

from __future__ import annotations

import logging
import random
from typing import Mapping

from settlers_board.board.config import BOARD_SIZE, TERRAIN_COUNTS, Terrain
from settlers_board.errors import SupplyExhaustedError

logger = logging.getLogger(__name__)


class TerrainAllocator:
    """Deals terrain tiles onto the board positions 0..tile_count-1.

    The supply is the multiset given by ``counts``; it is shuffled once and
    the first ``tile_count`` entries are dealt in grid order.
    """

    def __init__(
        self,
        rng: random.Random,
        counts: Mapping[Terrain, int] = TERRAIN_COUNTS,
        tile_count: int = BOARD_SIZE,
    ) -> None:
        self.rng = rng
        self.counts = dict(counts)
        self.tile_count = tile_count

    def supply(self) -> list[Terrain]:
        pool: list[Terrain] = []
        for terrain, count in self.counts.items():
            pool.extend([terrain] * count)
        return pool

    def allocate(self) -> tuple[Terrain, ...]:
        pool = self.supply()
        if len(pool) < self.tile_count:
            raise SupplyExhaustedError(
                f"terrain supply has {len(pool)} tiles, board needs {self.tile_count}"
            )
        self.rng.shuffle(pool)
        terrains = tuple(pool[:self.tile_count])
        logger.debug("Allocated terrain: %s", [t.value for t in terrains])
        return terrains
