"""Shared pytest fixtures for board setup tests."""

import random

import pytest

from settlers_board.settings import Settings


@pytest.fixture
def settings():
    """Default settings instance."""
    return Settings()


@pytest.fixture
def players():
    return ["Alice", "Bob", "Carol", "Dave"]


@pytest.fixture
def rng():
    """Seeded random source for deterministic allocations."""
    return random.Random(42)


@pytest.fixture
def assembler(settings):
    from settlers_board.assembly.board_assembler import BoardAssembler

    return BoardAssembler(settings)


@pytest.fixture
def setup_result(assembler, players):
    from settlers_board.config import SetupParams

    return assembler.build(SetupParams(players=players, seed=42))


@pytest.fixture
def board(setup_result):
    return setup_result.board
