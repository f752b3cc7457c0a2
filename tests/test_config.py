"""Tests for settings, setup params and the frozen state models."""

import uuid

import pytest
from pydantic import ValidationError

from settlers_board.board.config import (
    GameBoardState,
    HexTile,
    PortTile,
    Resource,
    Terrain,
    TurnTrackerState,
)
from settlers_board.config import SetupParams
from settlers_board.errors import (
    BoardSetupError,
    InvalidParamsError,
    InvalidPlayerCountError,
    SupplyExhaustedError,
)
from settlers_board.settings import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.log_level == "INFO"
        assert s.default_seed is None
        assert s.validate_output is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SETTLERS_DEFAULT_SEED", "7")
        monkeypatch.setenv("SETTLERS_VALIDATE_OUTPUT", "false")
        s = Settings()
        assert s.default_seed == 7
        assert s.validate_output is False


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(InvalidPlayerCountError, InvalidParamsError)
        assert issubclass(InvalidParamsError, BoardSetupError)
        assert issubclass(SupplyExhaustedError, BoardSetupError)


class TestSetupParams:
    def test_valid_params(self, players):
        p = SetupParams(players=players)
        assert p.players == players
        assert p.seed is None

    def test_seed(self, players):
        assert SetupParams(players=players, seed=3).seed == 3

    @pytest.mark.parametrize("count", [0, 3, 5])
    def test_wrong_player_count(self, count):
        with pytest.raises((ValidationError, InvalidPlayerCountError)):
            SetupParams(players=[f"p{i}" for i in range(count)])

    def test_duplicate_players(self):
        with pytest.raises((ValidationError, InvalidPlayerCountError)):
            SetupParams(players=["Alice", "Bob", "Carol", "Alice"])

    def test_empty_player_id(self):
        with pytest.raises((ValidationError, InvalidPlayerCountError)):
            SetupParams(players=["Alice", "Bob", "Carol", ""])


class TestTerrain:
    def test_resources(self):
        assert Terrain.FOREST.resource is Resource.WOOD
        assert Terrain.PASTURE.resource is Resource.SHEEP
        assert Terrain.FIELD.resource is Resource.WHEAT
        assert Terrain.HILL.resource is Resource.BRICK
        assert Terrain.MOUNTAIN.resource is Resource.ORE
        assert Terrain.DESERT.resource is None


class TestHexTile:
    def test_valid_tile(self):
        t = HexTile(index=4, terrain=Terrain.HILL, token=8, is_desert=False)
        assert t.neighbors == (None,) * 6
        assert t.neighbor(7) is None

    def test_desert_with_token_rejected(self):
        with pytest.raises((ValidationError, InvalidParamsError)):
            HexTile(index=0, terrain=Terrain.DESERT, token=6, is_desert=True)

    def test_seven_rejected(self):
        with pytest.raises((ValidationError, InvalidParamsError)):
            HexTile(index=0, terrain=Terrain.FOREST, token=7, is_desert=False)

    def test_zero_on_producing_tile_rejected(self):
        with pytest.raises((ValidationError, InvalidParamsError)):
            HexTile(index=0, terrain=Terrain.FOREST, token=0, is_desert=False)

    def test_desert_flag_must_match_terrain(self):
        with pytest.raises((ValidationError, InvalidParamsError)):
            HexTile(index=0, terrain=Terrain.FIELD, token=0, is_desert=True)

    def test_frozen(self):
        t = HexTile(index=0, terrain=Terrain.DESERT, token=0, is_desert=True)
        with pytest.raises(ValidationError):
            t.token = 5


class TestPortTile:
    def test_generic(self):
        p = PortTile()
        assert p.is_generic
        assert p.rate == 3

    def test_specific(self):
        p = PortTile(resource=Resource.ORE, rate=2)
        assert not p.is_generic

    def test_wrong_rate(self):
        with pytest.raises((ValidationError, InvalidParamsError)):
            PortTile(resource=Resource.ORE, rate=3)
        with pytest.raises((ValidationError, InvalidParamsError)):
            PortTile(rate=2)


class TestStates:
    def test_turn_tracker_defaults(self):
        tracker = TurnTrackerState(game_id=uuid.uuid4(), players=("a", "b", "c", "d"))
        assert tracker.current_turn_index == 0
        assert tracker.current_player == "a"

    def test_board_is_frozen(self, board):
        assert isinstance(board, GameBoardState)
        with pytest.raises(ValidationError):
            board.robber_placed = True
        with pytest.raises(TypeError):
            board.hex_tiles[0] = board.hex_tiles[1]

    def test_json_dump(self, board):
        data = board.model_dump(mode="json")
        assert data["game_id"] == str(board.game_id)
        assert data["robber_placed"] is False
        assert len(data["hex_tiles"]) == 19
        assert GameBoardState.model_validate(data) == board
