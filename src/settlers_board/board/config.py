"""Enums, constants and frozen state models for the generated game board."""

from __future__ import annotations

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, model_validator


# ---------------------------------------------------------------------------
# Terrain and resources
# ---------------------------------------------------------------------------

class Resource(str, Enum):
    WOOD = "wood"
    BRICK = "brick"
    SHEEP = "sheep"
    WHEAT = "wheat"
    ORE = "ore"


class Terrain(str, Enum):
    FOREST = "forest"
    PASTURE = "pasture"
    FIELD = "field"
    HILL = "hill"
    MOUNTAIN = "mountain"
    DESERT = "desert"

    @property
    def resource(self) -> Resource | None:
        """Resource produced by this terrain; the desert produces nothing."""
        return _TERRAIN_RESOURCES.get(self)


_TERRAIN_RESOURCES = {
    Terrain.FOREST: Resource.WOOD,
    Terrain.PASTURE: Resource.SHEEP,
    Terrain.FIELD: Resource.WHEAT,
    Terrain.HILL: Resource.BRICK,
    Terrain.MOUNTAIN: Resource.ORE,
}

BOARD_SIZE = 19
PLAYER_COUNT = 4

# Maximum number of tiles of each terrain on a standard board (sums to 19)
TERRAIN_COUNTS: dict[Terrain, int] = {
    Terrain.FOREST: 4,
    Terrain.PASTURE: 4,
    Terrain.FIELD: 4,
    Terrain.HILL: 3,
    Terrain.MOUNTAIN: 3,
    Terrain.DESERT: 1,
}

NUMBER_TOKENS = (2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12)

SPECIFIC_PORT_RATE = 2
GENERIC_PORT_RATE = 3


# ---------------------------------------------------------------------------
# Tiles
# ---------------------------------------------------------------------------

class HexTile(BaseModel):
    """One hex of the board.

    ``neighbors`` is indexed by direction (0-5) and holds the index of the
    adjacent tile in ``GameBoardState.hex_tiles``, or None on the coast.
    """

    model_config = {"frozen": True}

    index: int
    terrain: Terrain
    token: int
    is_desert: bool
    neighbors: tuple[int | None, ...] = (None,) * 6

    @model_validator(mode="after")
    def check_token(self):
        from settlers_board.errors import InvalidParamsError
        if self.is_desert != (self.terrain is Terrain.DESERT):
            raise InvalidParamsError(
                f"tile {self.index}: desert flag disagrees with terrain {self.terrain.value}"
            )
        if self.is_desert and self.token != 0:
            raise InvalidParamsError(f"desert tile {self.index} carries token {self.token}")
        if not self.is_desert and (self.token < 2 or self.token > 12 or self.token == 7):
            raise InvalidParamsError(f"tile {self.index}: invalid token {self.token}")
        if len(self.neighbors) != 6:
            raise InvalidParamsError(
                f"tile {self.index}: expected 6 neighbor slots, got {len(self.neighbors)}"
            )
        return self

    def neighbor(self, direction: int) -> int | None:
        return self.neighbors[direction % 6]


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------

class AccessPoint(BaseModel):
    """Vertex/edge identifiers on one tile from which a port may be used."""

    model_config = {"frozen": True}

    tile_index: int
    points: tuple[int, ...]


class PortTile(BaseModel):
    """A trade rate: 2:1 for one resource, or 3:1 for any (resource is None)."""

    model_config = {"frozen": True}

    resource: Resource | None = None
    rate: int = GENERIC_PORT_RATE

    @model_validator(mode="after")
    def check_rate(self):
        expected = GENERIC_PORT_RATE if self.resource is None else SPECIFIC_PORT_RATE
        if self.rate != expected:
            from settlers_board.errors import InvalidParamsError
            raise InvalidParamsError(
                f"port for {self.resource.value if self.resource else 'any'} "
                f"must trade at {expected}:1, got {self.rate}:1"
            )
        return self

    @property
    def is_generic(self) -> bool:
        return self.resource is None


class Port(BaseModel):
    model_config = {"frozen": True}

    port_tile: PortTile
    access_points: tuple[AccessPoint, ...]


# ---------------------------------------------------------------------------
# Board and turn tracker
# ---------------------------------------------------------------------------

class GameBoardState(BaseModel):
    """Immutable description of a freshly set up game."""

    model_config = {"frozen": True}

    game_id: UUID
    robber_placed: bool = False
    hex_tiles: tuple[HexTile, ...]
    ports: tuple[Port, ...]
    players: tuple[str, ...]

    @property
    def participants(self) -> tuple[str, ...]:
        """Players who must sign off on this board."""
        return self.players

    def get_tile(self, index: int) -> HexTile:
        return self.hex_tiles[index]

    def neighbors_of(self, index: int) -> list[HexTile]:
        """Tiles adjacent to ``index``, in direction order."""
        return [
            self.hex_tiles[neighbor]
            for neighbor in self.hex_tiles[index].neighbors
            if neighbor is not None
        ]

    def desert_tile(self) -> HexTile:
        return next(tile for tile in self.hex_tiles if tile.is_desert)


class TurnTrackerState(BaseModel):
    """Whose turn it is; starts with the first player in board order."""

    model_config = {"frozen": True}

    game_id: UUID
    players: tuple[str, ...]
    current_turn_index: int = 0

    @property
    def current_player(self) -> str:
        return self.players[self.current_turn_index]
