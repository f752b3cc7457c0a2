"""Port allocation: the nine harbour tiles dealt onto fixed coastal spots.

A port can only be used from a settlement on one of the access points of
its group: the listed vertex/edge identifiers on the listed tiles.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from settlers_board.board.config import (
    GENERIC_PORT_RATE,
    SPECIFIC_PORT_RATE,
    AccessPoint,
    Port,
    PortTile,
    Resource,
)
from settlers_board.errors import SupplyExhaustedError

logger = logging.getLogger(__name__)

PORT_TILES: tuple[PortTile, ...] = (
    PortTile(resource=Resource.WOOD, rate=SPECIFIC_PORT_RATE),
    PortTile(resource=Resource.ORE, rate=SPECIFIC_PORT_RATE),
    PortTile(resource=Resource.WHEAT, rate=SPECIFIC_PORT_RATE),
    PortTile(rate=GENERIC_PORT_RATE),
    PortTile(resource=Resource.SHEEP, rate=SPECIFIC_PORT_RATE),
    PortTile(resource=Resource.BRICK, rate=SPECIFIC_PORT_RATE),
    PortTile(rate=GENERIC_PORT_RATE),
    PortTile(rate=GENERIC_PORT_RATE),
    PortTile(rate=GENERIC_PORT_RATE),
)


def _group(*points: tuple[int, tuple[int, ...]]) -> tuple[AccessPoint, ...]:
    return tuple(AccessPoint(tile_index=tile, points=ids) for tile, ids in points)


# Clockwise around the coast, starting at the top-left tile
ACCESS_POINT_GROUPS: tuple[tuple[AccessPoint, ...], ...] = (
    _group((0, (5, 1))),
    _group((1, (0, 2)), (2, (5,))),
    _group((2, (2,)), (6, (0, 1))),
    _group((11, (1, 2))),
    _group((15, (2, 3)), (18, (1,))),
    _group((18, (4,)), (17, (2, 3))),
    _group((16, (3, 4))),
    _group((12, (4, 5)), (7, (3,))),
    _group((3, (4, 5)), (7, (0,))),
)


class PortAllocator:
    """Binds each access point group to one port tile, none used twice."""

    def __init__(
        self,
        rng: random.Random,
        port_tiles: Sequence[PortTile] = PORT_TILES,
        groups: Sequence[tuple[AccessPoint, ...]] = ACCESS_POINT_GROUPS,
    ) -> None:
        self.rng = rng
        self.port_tiles = list(port_tiles)
        self.groups = list(groups)

    def allocate(self) -> tuple[Port, ...]:
        if len(self.port_tiles) < len(self.groups):
            raise SupplyExhaustedError(
                f"{len(self.port_tiles)} port tiles for {len(self.groups)} access point groups"
            )
        pool = self.port_tiles[:]
        self.rng.shuffle(pool)

        ports = tuple(
            Port(port_tile=port_tile, access_points=group)
            for port_tile, group in zip(pool, self.groups)
        )
        logger.debug(
            "Allocated ports: %s",
            [p.port_tile.resource.value if p.port_tile.resource else "any" for p in ports],
        )
        return ports
