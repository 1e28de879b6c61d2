from __future__ import annotations

import pytest

from src.squad_tracker.squad_tracker.stats.competition import CompetitionStatsService, summarize_results, win_rate
from src.squad_tracker.squad_tracker.stats.model import CompetitionStat
from tests.fakes import result


def test_player_stats_in_window(two_session_records):
    svc = CompetitionStatsService(two_session_records)

    stat = svc.player_stats(1, 1)

    assert stat == CompetitionStat(gold=1, total_wins=3, total_matches=3, win_rate=1.0)


def test_player_with_lost_matches_has_zero_win_rate(two_session_records):
    stat = CompetitionStatsService(two_session_records).player_stats(2, 1)

    assert stat.bronze == 1
    assert stat.win_rate == 0.0


def test_player_without_matches_has_no_win_rate(two_session_records):
    stat = CompetitionStatsService(two_session_records).player_stats(3, 1)

    assert stat.win_rate is None
    assert stat.total_matches == 0


def test_window_without_competitions_returns_zeroed_stat(two_session_records):
    svc = CompetitionStatsService(two_session_records)

    assert svc.player_stats(1, 2) == CompetitionStat.empty()
    assert svc.player_stats(3, 2).win_rate is None
    assert "results" not in two_session_records.calls


def test_window_player_stats_omits_players_without_results(two_session_records):
    by_player = CompetitionStatsService(two_session_records).window_player_stats(1)

    assert set(by_player) == {1, 2}
    assert by_player[1].win_rate == 1.0
    assert by_player[2].win_rate == 0.0


def test_all_time_win_rate_ignores_windows(two_session_records):
    svc = CompetitionStatsService(two_session_records)

    assert svc.all_time_win_rate(1) == pytest.approx(4 / 6)
    assert svc.all_time_win_rate(3) is None


def test_unknown_medals_become_none():
    stat = summarize_results(
        [
            result(1, 1, 1, medal="PLATINUM"),
            result(2, 2, 1, medal=None),
            result(3, 3, 1, medal="gold"),
            result(4, 4, 1, medal="SILVER"),
        ]
    )

    assert stat.none == 3
    assert stat.silver == 1
    assert stat.gold == 0


def test_bad_numbers_clamp_to_zero():
    stat = summarize_results(
        [
            result(1, 1, 1, wins="abc", matches="4"),
            result(2, 2, 1, wins=-2, matches=None),
            result(3, 3, 1, wins=2, matches=float("nan")),
        ]
    )

    assert stat.total_wins == 2
    assert stat.total_matches == 4
    assert stat.win_rate == 0.5


def test_wins_above_matches_is_not_corrected():
    assert win_rate([result(1, 1, 1, wins=5, matches=4)]) == 1.25


def test_repeated_calls_are_identical(two_session_records):
    svc = CompetitionStatsService(two_session_records)

    assert svc.player_stats(1, 1) == svc.player_stats(1, 1)
    assert svc.all_time_win_rate(1) == svc.all_time_win_rate(1)
