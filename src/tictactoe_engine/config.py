"""Environment-driven defaults.

Environment-first: ``TTT_FIRST_PLAYER`` selects who opens a new game
(``X`` or ``O``, case-insensitive). Unset or blank falls back to ``X``.
"""
from __future__ import annotations

import os

from .model import Player

DEFAULT_FIRST_PLAYER = Player.X


def first_player() -> Player:
    raw = (os.getenv("TTT_FIRST_PLAYER") or "").strip().upper()
    if not raw:
        return DEFAULT_FIRST_PLAYER
    try:
        return Player(raw)
    except ValueError:
        raise ValueError(f"TTT_FIRST_PLAYER must be X or O, got {raw!r}") from None
