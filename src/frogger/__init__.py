"""Frogger-style crossing game built on pygame."""

from .clock import FrameClock
from .data_models import Command, Enemy, GameEvent, GameState, Gem, Mode, Player
from .engine import GameEngine
from .game_loop import GameLoop

__all__ = [
    'Command', 'Enemy', 'FrameClock', 'GameEngine', 'GameEvent', 'GameLoop',
    'GameState', 'Gem', 'Mode', 'Player',
]
