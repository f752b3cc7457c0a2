"""Fixed neighbor topology of the 19-hex board.

Tiles are numbered row by row in bands of 3, 4, 5, 4 and 3. Each tile has
six neighbor slots, one per direction:

        5 NW   0 NE
    4 W    [tile]    1 E
        3 SW   2 SE

A link written in direction ``d`` is mirrored in ``opposite(d)`` on the
other tile, so the graph is symmetric by construction.
"""

from __future__ import annotations

import logging

from settlers_board.board.config import BOARD_SIZE
from settlers_board.errors import ValidationError

logger = logging.getLogger(__name__)

NORTH_EAST = 0
EAST = 1
SOUTH_EAST = 2
SOUTH_WEST = 3
WEST = 4
NORTH_WEST = 5

DIRECTIONS = (NORTH_EAST, EAST, SOUTH_EAST, SOUTH_WEST, WEST, NORTH_WEST)

# (first, last) index of each row band, with the (direction, index offset)
# links every tile in the band makes to the band above or below it
ROW_BANDS: tuple[tuple[tuple[int, int], tuple[tuple[int, int], ...]], ...] = (
    ((0, 2), ((SOUTH_WEST, 3), (SOUTH_EAST, 4))),
    ((3, 6), ((SOUTH_WEST, 4), (SOUTH_EAST, 5))),
    ((7, 11), ()),
    ((12, 15), ((NORTH_WEST, -5), (NORTH_EAST, -4))),
    ((16, 18), ((NORTH_WEST, -4), (NORTH_EAST, -3))),
)


def opposite(direction: int) -> int:
    return (direction + 3) % 6


class AdjacencyGraphBuilder:
    """Builds the per-tile neighbor table, independent of tile content."""

    def __init__(self) -> None:
        self._slots: list[list[int | None]] = []

    def connect(self, tile: int, direction: int, other: int) -> None:
        """Link ``tile`` to ``other`` in ``direction`` and back again."""
        back = opposite(direction)
        for source, slot, target in ((tile, direction, other), (other, back, tile)):
            current = self._slots[source][slot]
            if current is not None and current != target:
                raise ValidationError(
                    f"tile {source} direction {slot} already linked to {current}, "
                    f"cannot link to {target}"
                )
            self._slots[source][slot] = target

    def build(self) -> tuple[tuple[int | None, ...], ...]:
        self._slots = [[None] * 6 for _ in range(BOARD_SIZE)]

        for (first, last), links in ROW_BANDS:
            for index in range(first, last + 1):
                for direction, offset in links:
                    self.connect(index, direction, index + offset)
                if index != last:
                    self.connect(index, EAST, index + 1)

        table = tuple(tuple(row) for row in self._slots)
        logger.debug(
            "Built adjacency for %d tiles (%d links)",
            len(table), sum(n is not None for row in table for n in row) // 2,
        )
        return table
