# src/montyhall/__init__.py
"""
Monty Hall simulation package

Public API: game stages, round/batch runners and the configured simulator.
"""

from .errors import InvalidInputError, ConfigurationError
from .game import (
    DoorAssignment, DoorContent, Outcome, RoundResult, Strategy,
    create_game, select_door, open_goat_door, change_door, determine_winner,
)
from .simulation import BatchResult, MontyHallSimulator, play_game, play_n_games

__all__ = [
    'InvalidInputError',
    'ConfigurationError',
    'DoorAssignment',
    'DoorContent',
    'Outcome',
    'RoundResult',
    'Strategy',
    'create_game',
    'select_door',
    'open_goat_door',
    'change_door',
    'determine_winner',
    'BatchResult',
    'MontyHallSimulator',
    'play_game',
    'play_n_games',
]
