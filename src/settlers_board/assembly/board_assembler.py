"""BoardAssembler orchestrator and SetupResult dataclass."""

from __future__ import annotations

import logging
import random
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Sequence

from settlers_board.board.adjacency import AdjacencyGraphBuilder
from settlers_board.board.config import (
    GameBoardState,
    HexTile,
    Terrain,
    TurnTrackerState,
)
from settlers_board.board.ports import PortAllocator
from settlers_board.board.terrain import TerrainAllocator
from settlers_board.board.tokens import NumberTokenPlacer
from settlers_board.config import SetupParams
from settlers_board.errors import ValidationError
from settlers_board.settings import Settings
from settlers_board.turn_order import TurnOrderRandomizer
from settlers_board.validation.checks import validate_board, validate_turn_tracker

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Result of setting up a game: the board, its turn tracker and metadata."""

    board: GameBoardState
    turn_tracker: TurnTrackerState
    metadata: dict[str, Any] = field(default_factory=dict)


class BoardAssembler:
    """Orchestrator that sets up a game board from parameters.

    Responsibility: seed the random source, run each allocator with it,
    compose the immutable states, validate. Does NOT decide any placement
    itself.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def build(self, params: SetupParams) -> SetupResult:
        """Set up one game.

        1. Seed a single random source
        2. Allocate terrain and place number tokens
        3. Link tiles into the hex grid
        4. Allocate ports
        5. Randomize turn order
        6. Compose and validate the board and turn tracker
        """
        start_time = time.time()
        seed = params.seed if params.seed is not None else self.settings.default_seed
        rng = random.Random(seed)

        # 1-3. Tiles
        terrains = TerrainAllocator(rng).allocate()
        tokens = NumberTokenPlacer().place(terrains)
        neighbors = AdjacencyGraphBuilder().build()
        hex_tiles = tuple(
            HexTile(
                index=index,
                terrain=terrain,
                token=token,
                is_desert=terrain is Terrain.DESERT,
                neighbors=neighbors[index],
            )
            for index, (terrain, token) in enumerate(zip(terrains, tokens))
        )

        # 4. Ports
        ports = PortAllocator(rng).allocate()

        # 5. Turn order
        players = TurnOrderRandomizer(rng).randomize(params.players)

        # 6. States
        game_id = uuid.UUID(int=rng.getrandbits(128), version=4)
        board = GameBoardState(
            game_id=game_id,
            robber_placed=False,
            hex_tiles=hex_tiles,
            ports=ports,
            players=players,
        )
        turn_tracker = TurnTrackerState(game_id=game_id, players=board.players)

        if self.settings.validate_output:
            self._validate(board, turn_tracker)

        elapsed = time.time() - start_time
        logger.info(
            "Set up game %s for %s (desert at tile %d)",
            game_id, ", ".join(players), board.desert_tile().index,
        )

        return SetupResult(
            board=board,
            turn_tracker=turn_tracker,
            metadata={
                "game_id": str(game_id),
                "seed": seed,
                "generation_time_ms": round(elapsed * 1000),
            },
        )

    def _validate(self, board: GameBoardState, turn_tracker: TurnTrackerState) -> None:
        results = validate_board(board)
        failed = sorted(name for name, ok in results.items() if name != "pass" and not ok)
        if not validate_turn_tracker(board, turn_tracker):
            failed.append("turn_tracker")
        if failed:
            logger.error("Board %s failed validation: %s", board.game_id, failed)
            raise ValidationError(f"Generated board failed checks: {', '.join(failed)}")


def setup_game(
    players: Sequence[str],
    seed: int | None = None,
    settings: Settings | None = None,
) -> SetupResult:
    """Set up a game for exactly four players."""
    params = SetupParams(players=list(players), seed=seed)
    return BoardAssembler(settings or Settings()).build(params)
