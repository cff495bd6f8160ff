# simulation/__init__.py
from .round_runner import play_game
from .batch_runner import BatchResult, play_n_games
from .simulator import MontyHallSimulator

__all__ = [
    'play_game',
    'BatchResult',
    'play_n_games',
    'MontyHallSimulator',
]
