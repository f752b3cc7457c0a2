"""Procedural board setup for a four-player hex resource-trading game."""

import logging

from settlers_board.settings import Settings

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=Settings().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
