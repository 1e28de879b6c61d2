"""Competition aggregation: medal tallies and win rates."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from ..common.numbers import coerce_count, optional_ratio
from ..competitions.model import CompetitionResult
from ..core.enums import Medal
from ..records.repository import RecordSupplier
from .model import CompetitionStat

logger = logging.getLogger(__name__)


def _totals(results: Iterable[CompetitionResult]) -> tuple[int, int]:
    wins = 0
    matches = 0
    for r in results:
        wins += coerce_count(r.wins)
        matches += coerce_count(r.matches)
    return wins, matches


def summarize_results(results: Iterable[CompetitionResult]) -> CompetitionStat:
    results = list(results)
    medals = Counter(Medal.normalize(r.medal) for r in results)
    total_wins, total_matches = _totals(results)

    return CompetitionStat(
        gold=medals[Medal.GOLD],
        silver=medals[Medal.SILVER],
        bronze=medals[Medal.BRONZE],
        none=medals[Medal.NONE],
        total_wins=total_wins,
        total_matches=total_matches,
        win_rate=optional_ratio(total_wins, total_matches),
    )


def win_rate(results: Iterable[CompetitionResult]) -> Optional[float]:
    total_wins, total_matches = _totals(results)
    return optional_ratio(total_wins, total_matches)


class CompetitionStatsService:
    def __init__(self, records: RecordSupplier):
        self._records = records

    def player_stats(self, player_id: int, window_id: int) -> CompetitionStat:
        """Medals and match totals for one player inside a window."""

        competitions = self._records.list_competitions_in_window(window_id)
        if not competitions:
            return CompetitionStat.empty()

        results = self._records.list_competition_results(
            player_id=player_id,
            competition_ids=[c.competition_id for c in competitions],
        )
        return summarize_results(results)

    def window_player_stats(self, window_id: int) -> dict[int, CompetitionStat]:
        """Stats for every player with at least one result in the window."""

        by_player: dict[int, list[CompetitionResult]] = {}
        for competition in self._records.list_competitions_in_window(window_id):
            for r in competition.results:
                by_player.setdefault(r.player_id, []).append(r)

        logger.debug("Window %s: competition results for %d players", window_id, len(by_player))
        return {player_id: summarize_results(results) for player_id, results in by_player.items()}

    def all_time_win_rate(self, player_id: int) -> Optional[float]:
        """wins / matches across every result of the player, ignoring windows."""

        return win_rate(self._records.list_competition_results(player_id=player_id))
