# src/montyhall/simulation/batch_runner.py
"""
BatchRunner - Repeat rounds and tabulate win/lose rates per strategy

Rounds are independent of each other; only the two strategies inside a round
share their random draw. The summary is a plain Strategy x Outcome counting
table normalised per strategy row.
"""

import logging
from dataclasses import dataclass, field
from numbers import Integral
from typing import Dict, List

import pandas as pd

from src.montyhall.errors import InvalidInputError
from src.montyhall.game.random_source import RandomSource
from src.montyhall.game.types import Outcome, RoundResult, Strategy
from src.montyhall.simulation.round_runner import play_game

logger = logging.getLogger(__name__)

SUMMARY_DECIMALS = 2


def _empty_counts() -> Dict[Strategy, Dict[Outcome, int]]:
    return {strategy: {outcome: 0 for outcome in Outcome} for strategy in Strategy}


@dataclass
class BatchResult:
    """Raw per-round results of a batch plus the derived counts and proportions"""
    n_games: int
    results: List[RoundResult] = field(default_factory=list)
    counts: Dict[Strategy, Dict[Outcome, int]] = field(default_factory=_empty_counts)
    summary: Dict[Strategy, Dict[Outcome, float]] = field(default_factory=dict)

    def win_rate(self, strategy: Strategy) -> float:
        if strategy not in self.summary:
            raise InvalidInputError(f"Batch of {self.n_games} rounds has no summary", strategy)
        return self.summary[strategy][Outcome.WIN]

    def results_for(self, strategy: Strategy) -> List[RoundResult]:
        return [result for result in self.results if result.strategy is strategy]

    def to_frame(self) -> pd.DataFrame:
        """One row per RoundResult with strategy and outcome columns, in play order"""
        return pd.DataFrame(
            {
                'strategy': [result.strategy.value for result in self.results],
                'outcome': [result.outcome.value for result in self.results],
            },
            columns=['strategy', 'outcome'],
        )

    def summary_frame(self) -> pd.DataFrame:
        """Proportions table: rows are strategies, columns are outcomes"""
        frame = pd.DataFrame(
            [[self.summary[strategy][outcome] for outcome in Outcome] for strategy in Strategy],
            index=pd.Index([strategy.value for strategy in Strategy], name='strategy'),
            columns=pd.Index([outcome.value for outcome in Outcome], name='outcome'),
        )
        return frame


def validate_round_count(n) -> int:
    """Return n as an int, raising InvalidInputError unless it is a positive integer"""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidInputError(f"Round count must be an integer, got {n!r}", n)
    if n <= 0:
        raise InvalidInputError(f"Round count must be positive, got {n}", n)
    return int(n)


def summarize(counts: Dict[Strategy, Dict[Outcome, int]], n_games: int,
              decimals: int = SUMMARY_DECIMALS) -> Dict[Strategy, Dict[Outcome, float]]:
    """
    Normalise the counting table per strategy row

    LOSE is taken as the complement of the rounded WIN share so every row
    sums to exactly 1.0 after rounding.
    """
    n_games = validate_round_count(n_games)
    summary = {}
    for strategy in Strategy:
        win_share = round(counts[strategy][Outcome.WIN] / n_games, decimals)
        summary[strategy] = {
            Outcome.WIN: win_share,
            Outcome.LOSE: round(1.0 - win_share, decimals),
        }
    return summary


def play_n_games(n: int, rng: RandomSource, decimals: int = SUMMARY_DECIMALS,
                 log_every: int = 0) -> BatchResult:
    """
    Play n independent rounds and tabulate both strategies

    Args:
        n: Number of rounds, must be positive
        rng: Random source shared by the whole batch
        decimals: Rounding applied to the summary proportions
        log_every: Log progress every this many rounds, 0 disables

    Returns:
        BatchResult with 2n results (stay then switch for each round)

    Raises:
        InvalidInputError: If n is not a positive integer
    """
    n = validate_round_count(n)
    logger.info(f"Playing {n} Monty Hall rounds")

    batch = BatchResult(n_games=n)
    for round_number in range(1, n + 1):
        for result in play_game(rng):
            batch.results.append(result)
            batch.counts[result.strategy][result.outcome] += 1

        if log_every and round_number % log_every == 0:
            logger.info(f"Completed {round_number}/{n} rounds")

    batch.summary = summarize(batch.counts, n, decimals)

    logger.info(f"Batch complete: stay wins {batch.win_rate(Strategy.STAY):.{decimals}f}, "
                f"switch wins {batch.win_rate(Strategy.SWITCH):.{decimals}f} over {n} rounds")
    return batch
