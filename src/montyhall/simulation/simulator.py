# src/montyhall/simulation/simulator.py
import logging
from typing import Optional, Tuple

from src.montyhall.config.unified_config import UnifiedConfig
from src.montyhall.errors import ConfigurationError
from src.montyhall.game import doors
from src.montyhall.game.random_source import RandomSource, create_random_source
from src.montyhall.game.types import DoorAssignment, Outcome, RoundResult
from src.montyhall.simulation.batch_runner import BatchResult, play_n_games
from src.montyhall.simulation.round_runner import play_game

logger = logging.getLogger(__name__)


class MontyHallSimulator:
    """
    Configured entry point to the game

    Resolves the defaults (round count, stay flag, summary rounding, seed)
    from configuration and routes every call through one random source.
    """

    def __init__(self, config: UnifiedConfig, rng: Optional[RandomSource] = None):
        """
        Initialize simulator

        Args:
            config: Loaded configuration
            rng: Optional random source; built from general.random_seed if omitted
        """
        self.config = config
        self._cache_config_values()
        self.rng = rng if rng is not None else create_random_source(config)

        logger.info(f"MontyHallSimulator initialized: default_rounds={self.default_rounds}, "
                    f"default_stay={self.default_stay}, decimals={self.summary_decimals}")

    def _cache_config_values(self):
        """Cache simulator configuration values with validation"""
        game_config = self.config.get_section('game')
        if not game_config:
            raise ConfigurationError("Missing required section: 'game'", 'game')

        simulation_config = self.config.get_section('simulation')
        if not simulation_config:
            raise ConfigurationError("Missing required section: 'simulation'", 'simulation')

        if 'default_stay' not in game_config:
            raise ConfigurationError("Missing required key: 'game.default_stay'", 'game')
        self.default_stay = game_config['default_stay']
        if not isinstance(self.default_stay, bool):
            raise ConfigurationError(f"Invalid game.default_stay: {self.default_stay}", 'game')

        for key in ('default_rounds', 'summary_decimals'):
            if key not in simulation_config:
                raise ConfigurationError(f"Missing required key: 'simulation.{key}'", 'simulation')

        self.default_rounds = simulation_config['default_rounds']
        if isinstance(self.default_rounds, bool) or not isinstance(self.default_rounds, int) \
                or self.default_rounds <= 0:
            raise ConfigurationError(f"Invalid simulation.default_rounds: {self.default_rounds}",
                                     'simulation')

        self.summary_decimals = simulation_config['summary_decimals']
        if isinstance(self.summary_decimals, bool) or not isinstance(self.summary_decimals, int) \
                or self.summary_decimals < 0:
            raise ConfigurationError(f"Invalid simulation.summary_decimals: {self.summary_decimals}",
                                     'simulation')

        self.log_every = simulation_config.get('log_every_n_rounds', 0)
        if isinstance(self.log_every, bool) or not isinstance(self.log_every, int) or self.log_every < 0:
            raise ConfigurationError(f"Invalid simulation.log_every_n_rounds: {self.log_every}",
                                     'simulation')

    def create_game(self) -> DoorAssignment:
        return doors.create_game(self.rng)

    def select_door(self) -> int:
        return doors.select_door(self.rng)

    def open_goat_door(self, game: DoorAssignment, pick: int) -> int:
        return doors.open_goat_door(game, pick, self.rng)

    def change_door(self, opened_door: int, pick: int, stay: Optional[bool] = None) -> int:
        """Final pick; stay falls back to game.default_stay"""
        if stay is None:
            stay = self.default_stay
        return doors.change_door(stay, opened_door, pick)

    def determine_winner(self, final_pick: int, game: DoorAssignment) -> Outcome:
        return doors.determine_winner(final_pick, game)

    def play_game(self) -> Tuple[RoundResult, RoundResult]:
        return play_game(self.rng)

    def play_n_games(self, n: Optional[int] = None) -> BatchResult:
        """Play a batch; n falls back to simulation.default_rounds"""
        if n is None:
            n = self.default_rounds
        return play_n_games(n, self.rng, decimals=self.summary_decimals, log_every=self.log_every)
