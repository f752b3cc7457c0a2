"""Validation checks for generated game boards."""

from collections import Counter

from settlers_board.board.adjacency import opposite
from settlers_board.board.config import (
    BOARD_SIZE,
    NUMBER_TOKENS,
    PLAYER_COUNT,
    TERRAIN_COUNTS,
    GameBoardState,
    TurnTrackerState,
)
from settlers_board.board.ports import ACCESS_POINT_GROUPS, PORT_TILES


def adjacency_edges(board: GameBoardState) -> set[tuple[int, int]]:
    """Undirected tile-to-tile links, each as a sorted index pair."""
    edges = set()
    for tile in board.hex_tiles:
        for neighbor in tile.neighbors:
            if neighbor is not None:
                edges.add(tuple(sorted((tile.index, neighbor))))
    return edges


def _adjacency_symmetric(board: GameBoardState) -> bool:
    for tile in board.hex_tiles:
        for direction, neighbor in enumerate(tile.neighbors):
            if neighbor is None:
                continue
            if not 0 <= neighbor < len(board.hex_tiles):
                return False
            if board.hex_tiles[neighbor].neighbors[opposite(direction)] != tile.index:
                return False
    return True


def validate_board(board: GameBoardState) -> dict:
    """Run the validation checklist on a generated board.

    Returns a dict with check results and overall pass/fail.
    """
    results = {}
    tiles = board.hex_tiles

    # 1. Tile count and positions
    results["tile_count"] = (
        len(tiles) == BOARD_SIZE
        and [tile.index for tile in tiles] == list(range(BOARD_SIZE))
    )

    # 2. Terrain distribution
    terrain_counts = Counter(tile.terrain for tile in tiles)
    results["terrain_counts"] = dict(terrain_counts) == TERRAIN_COUNTS

    # 3. Desert and tokens
    deserts = [tile for tile in tiles if tile.is_desert]
    results["single_desert"] = len(deserts) == 1 and deserts[0].token == 0
    tokens = sorted(tile.token for tile in tiles if not tile.is_desert)
    results["token_multiset"] = tokens == sorted(NUMBER_TOKENS)

    # 4. Adjacency
    results["adjacency_symmetric"] = _adjacency_symmetric(board)

    # 5. Ports
    results["port_count"] = len(board.ports) == len(ACCESS_POINT_GROUPS)
    results["port_tiles"] = Counter(p.port_tile for p in board.ports) == Counter(PORT_TILES)
    groups = [p.access_points for p in board.ports]
    results["access_groups_unique"] = (
        len(set(groups)) == len(groups) and set(groups) == set(ACCESS_POINT_GROUPS)
    )

    # 6. Players
    results["player_count"] = len(board.players) == PLAYER_COUNT
    results["players_distinct"] = len(set(board.players)) == len(board.players)

    # 7. Initial robber state
    results["robber_not_placed"] = board.robber_placed is False

    results["pass"] = all(results.values())
    return results


def validate_turn_tracker(board: GameBoardState, tracker: TurnTrackerState) -> bool:
    """The tracker belongs to this board and follows its player order."""
    return (
        tracker.game_id == board.game_id
        and tracker.players == board.players
        and 0 <= tracker.current_turn_index < len(tracker.players)
    )
