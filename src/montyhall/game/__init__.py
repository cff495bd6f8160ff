# game/__init__.py
from .types import DOORS, DoorAssignment, DoorContent, Outcome, RoundResult, Strategy
from .random_source import RandomSource, NumpyRandomSource, create_random_source
from .doors import create_game, select_door, open_goat_door, change_door, determine_winner

__all__ = [
    'DOORS',
    'DoorAssignment',
    'DoorContent',
    'Outcome',
    'RoundResult',
    'Strategy',
    'RandomSource',
    'NumpyRandomSource',
    'create_random_source',
    'create_game',
    'select_door',
    'open_goat_door',
    'change_door',
    'determine_winner',
]
