# round_runner.py
import logging
from typing import Tuple

from src.montyhall.game.doors import (
    create_game,
    select_door,
    open_goat_door,
    change_door,
    determine_winner,
)
from src.montyhall.game.random_source import RandomSource
from src.montyhall.game.types import RoundResult, Strategy

logger = logging.getLogger(__name__)


def play_game(rng: RandomSource) -> Tuple[RoundResult, RoundResult]:
    """
    Play one full round and score both strategies

    The stay and switch outcomes share the same door assignment, initial pick
    and opened door, so they are two readings of one random draw rather than
    two independent trials.

    Args:
        rng: Random source for the round

    Returns:
        (stay result, switch result)
    """
    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    final_pick_stay = change_door(True, opened_door, first_pick)
    final_pick_switch = change_door(False, opened_door, first_pick)

    outcome_stay = determine_winner(final_pick_stay, game)
    outcome_switch = determine_winner(final_pick_switch, game)

    logger.debug(f"Round: car={game.car_door} pick={first_pick} opened={opened_door} "
                 f"stay={outcome_stay.value} switch={outcome_switch.value}")

    return (RoundResult(Strategy.STAY, outcome_stay),
            RoundResult(Strategy.SWITCH, outcome_switch))
