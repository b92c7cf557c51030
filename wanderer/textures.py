"""Loading of the game's image assets."""

from __future__ import annotations

import os
import sys

import pygame

PLAYER_TEXTURE_PATH = "res/assets/player/player.png"


def player_texture(path: str | os.PathLike[str] = PLAYER_TEXTURE_PATH) -> pygame.Surface:
    """Load the player's sprite sheet; on failure report it and return an empty surface."""
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        print("Failed to load Player`s texture.", file=sys.stderr)
        return pygame.Surface((0, 0))