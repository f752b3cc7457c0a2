"""Pydantic models for game setup requests."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from settlers_board.board.config import PLAYER_COUNT


class SetupParams(BaseModel):
    """Parameters for setting up one game: the players and an optional seed."""

    players: list[str]
    seed: int | None = None

    @model_validator(mode="after")
    def check_players(self):
        """Require exactly four distinct, non-empty player ids."""
        from settlers_board.errors import InvalidPlayerCountError
        if any(not player for player in self.players):
            raise InvalidPlayerCountError("player ids must be non-empty")
        if len(self.players) != PLAYER_COUNT or len(set(self.players)) != PLAYER_COUNT:
            raise InvalidPlayerCountError(
                f"expected {PLAYER_COUNT} distinct players, got {self.players}"
            )
        return self
