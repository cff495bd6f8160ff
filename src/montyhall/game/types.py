# types.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from src.montyhall.errors import InvalidInputError

# Door positions, 1-based as on the show
DOORS: Tuple[int, ...] = (1, 2, 3)


class DoorContent(Enum):
    """What sits behind a door"""
    GOAT = "goat"
    CAR = "car"


class Strategy(Enum):
    """Contestant intent once the host has opened a goat door"""
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    """Result of a single strategy within a round"""
    WIN = "WIN"
    LOSE = "LOSE"


@dataclass(frozen=True)
class DoorAssignment:
    """
    Contents of the three doors for one round

    Exactly one CAR and two GOATs. Positions are addressed 1..3 and never
    change for the lifetime of the round.
    """
    contents: Tuple[DoorContent, ...]

    def __post_init__(self):
        contents = tuple(self.contents)
        if len(contents) != len(DOORS):
            raise InvalidInputError(
                f"Door assignment must have {len(DOORS)} doors, got {len(contents)}", contents)
        if not all(isinstance(item, DoorContent) for item in contents):
            raise InvalidInputError(f"Door assignment holds unknown contents: {contents}", contents)

        car_count = contents.count(DoorContent.CAR)
        if car_count != 1:
            raise InvalidInputError(
                f"Door assignment must hold exactly one car, got {car_count}", contents)

        object.__setattr__(self, 'contents', contents)

    def content_at(self, door: int) -> DoorContent:
        """Contents behind a 1-based door"""
        return self.contents[door - 1]

    @property
    def car_door(self) -> int:
        return self.contents.index(DoorContent.CAR) + 1

    @property
    def goat_doors(self) -> Tuple[int, ...]:
        return tuple(door for door in DOORS if self.content_at(door) is DoorContent.GOAT)


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one strategy in one round"""
    strategy: Strategy
    outcome: Outcome
