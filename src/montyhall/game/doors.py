# doors.py
"""
Single-round building blocks of the Monty Hall game

Each stage of a round is a plain function: the setup and the contestant's
first pick draw from an injected RandomSource, the host reveal draws only when
the contestant already holds the car, and the final pick and judging are
deterministic.
"""

import logging
from numbers import Integral
from typing import Sequence, Union

from src.montyhall.errors import InvalidInputError
from src.montyhall.game.random_source import RandomSource
from src.montyhall.game.types import DOORS, DoorAssignment, DoorContent, Outcome

logger = logging.getLogger(__name__)

# Two goats and a car, shuffled into the three positions
DOOR_CONTENTS = (DoorContent.GOAT, DoorContent.GOAT, DoorContent.CAR)


def validate_door(door, name: str = "door") -> int:
    """Return door as an int, raising InvalidInputError unless it is one of 1..3"""
    if isinstance(door, bool) or not isinstance(door, Integral):
        raise InvalidInputError(f"{name} must be an integer door index, got {door!r}", door)
    door = int(door)
    if door not in DOORS:
        raise InvalidInputError(f"{name} must be one of {DOORS}, got {door}", door)
    return door


def as_assignment(game: Union[DoorAssignment, Sequence[DoorContent]]) -> DoorAssignment:
    """Accept a DoorAssignment or a plain sequence of contents and validate it"""
    if isinstance(game, DoorAssignment):
        return game
    try:
        return DoorAssignment(tuple(game))
    except TypeError as e:
        raise InvalidInputError(f"Malformed door assignment: {game!r}", game) from e


def create_game(rng: RandomSource) -> DoorAssignment:
    """
    Set up a new game: two goats and one car behind three doors

    Every arrangement is equally likely.

    Args:
        rng: Random source to shuffle the doors with

    Returns:
        DoorAssignment for the round
    """
    game = DoorAssignment(tuple(rng.permutation(DOOR_CONTENTS)))
    logger.debug(f"New game created, car behind door {game.car_door}")
    return game


def select_door(rng: RandomSource) -> int:
    """Contestant's initial pick, uniform over doors 1..3"""
    return validate_door(rng.choice(DOORS), "pick")


def open_goat_door(game: DoorAssignment, pick: int, rng: RandomSource) -> int:
    """
    Host opens a door that hides a goat and is not the contestant's pick

    If the contestant picked the car, both other doors hide goats and the host
    opens one of them at random. Otherwise exactly one door is neither the car
    nor the pick, and the host must open it.

    Args:
        game: Door contents for the round
        pick: Contestant's initial door (1..3)
        rng: Random source, only drawn from when the pick holds the car

    Returns:
        Door opened by the host (1..3)

    Raises:
        InvalidInputError: If the pick is out of range or the assignment is malformed
    """
    game = as_assignment(game)
    pick = validate_door(pick, "pick")

    if game.content_at(pick) is DoorContent.CAR:
        opened_door = rng.choice(game.goat_doors)
    else:
        # The one door that is neither the car nor the contestant's pick
        opened_door = next(door for door in DOORS
                           if door != pick and door != game.car_door)

    return validate_door(opened_door, "opened_door")


def change_door(stay: bool, opened_door: int, pick: int) -> int:
    """
    Final pick after the host reveal

    Args:
        stay: True to keep the initial pick, False to switch
        opened_door: Door the host opened
        pick: Contestant's initial door

    Returns:
        The initial pick when staying, otherwise the only door that is
        neither opened nor picked

    Raises:
        InvalidInputError: For out-of-range doors, or when switching away from
            a pick the host has opened
    """
    pick = validate_door(pick, "pick")
    opened_door = validate_door(opened_door, "opened_door")

    if stay:
        return pick

    if opened_door == pick:
        raise InvalidInputError(
            f"Host cannot open the contestant's door ({pick}) before a switch", opened_door)

    remaining = [door for door in DOORS if door != opened_door and door != pick]
    return remaining[0]


def determine_winner(final_pick: int, game: DoorAssignment) -> Outcome:
    """WIN if the car is behind final_pick, LOSE otherwise"""
    game = as_assignment(game)
    final_pick = validate_door(final_pick, "final_pick")

    if game.content_at(final_pick) is DoorContent.CAR:
        return Outcome.WIN
    return Outcome.LOSE
