from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Optional

from ..coaches.repository import CoachRepository
from ..common.datetime_utils import iso_or_none
from ..common.numbers import round_half_up
from ..core.constants import DEFAULT_LEADERBOARD_SIZE
from ..core.exceptions import NotFoundError, ValidationError
from ..players.repository import PlayerRepository
from ..semesters.model import Semester
from ..semesters.service import SemesterService
from ..stats.attendance import AttendanceStatsService, total_breakdown
from ..stats.coach import CoachStatsService
from ..stats.competition import CompetitionStatsService
from ..stats.formatting import format_rate, format_win_rate
from ..stats.leaderboard import rank
from ..stats.model import AttendanceStat, CompetitionStat, Leaderboard, StatusBreakdown, TeamStat

logger = logging.getLogger(__name__)


def _semester_dict(semester: Optional[Semester]) -> Optional[dict]:
    if semester is None:
        return None
    return {
        "semester_id": semester.semester_id,
        "name": semester.name,
        "start_date": iso_or_none(semester.start_date),
        "end_date": iso_or_none(semester.end_date),
        "is_active": semester.is_active,
    }


def _team_dict(team: TeamStat) -> dict:
    out = asdict(team)
    out["attendance_rate_label"] = format_rate(team.attendance_rate)
    out["avg_attendance_per_session"] = round_half_up(team.avg_attendance_per_session, 1)
    return out


def _attendance_dict(stat: Optional[AttendanceStat]) -> Optional[dict]:
    if stat is None:
        return None
    out = asdict(stat)
    out["rate_label"] = format_rate(stat.rate)
    return out


def _competition_dict(stat: CompetitionStat) -> dict:
    out = asdict(stat)
    out["win_rate_label"] = format_win_rate(stat.win_rate)
    return out


def _leaderboard_dict(board: Leaderboard) -> dict:
    return {
        "top": [_attendance_dict(s) for s in board.top],
        "bottom": [_attendance_dict(s) for s in board.bottom],
    }


def _breakdown_dict(b: StatusBreakdown) -> dict:
    out = asdict(b)
    out["session_date"] = iso_or_none(b.session_date)
    return out


class ReportService:
    """Composes the stats engine into the payloads the UI renders."""

    def __init__(
        self,
        semesters: SemesterService,
        players: PlayerRepository,
        coaches: CoachRepository,
        attendance: AttendanceStatsService,
        competitions: CompetitionStatsService,
        coach_stats: CoachStatsService,
        *,
        leaderboard_size: int = DEFAULT_LEADERBOARD_SIZE,
    ):
        if int(leaderboard_size) < 1:
            raise ValidationError("leaderboard_size must be at least 1")

        self._semesters = semesters
        self._players = players
        self._coaches = coaches
        self._attendance = attendance
        self._competitions = competitions
        self._coach_stats = coach_stats
        self._leaderboard_size = int(leaderboard_size)

    def list_semesters(self) -> list[dict]:
        return [_semester_dict(s) for s in self._semesters.list_all()]

    def dashboard(self, semester_id: Optional[int] = None) -> dict:
        semester = self._semesters.resolve(semester_id)
        if semester is None:
            return {
                "semester": None,
                "team": _team_dict(TeamStat.empty()),
                "trend": [],
                "leaderboard": _leaderboard_dict(Leaderboard()),
                "breakdown": _breakdown_dict(StatusBreakdown()),
                "latest_session": _breakdown_dict(StatusBreakdown()),
            }

        window_id = semester.semester_id
        player_stats = self._attendance.player_stats(window_id)
        logger.info("Building dashboard for semester %s (%d players)", window_id, len(player_stats))

        return {
            "semester": _semester_dict(semester),
            "team": _team_dict(self._attendance.team_stats(window_id)),
            "trend": [asdict(p) for p in self._attendance.trend(window_id)],
            "leaderboard": _leaderboard_dict(rank(player_stats, size=self._leaderboard_size)),
            "breakdown": _breakdown_dict(total_breakdown(player_stats)),
            "latest_session": _breakdown_dict(self._attendance.latest_session_breakdown(window_id)),
        }

    def reports(self, semester_id: Optional[int] = None) -> dict:
        semester = self._semesters.resolve(semester_id)
        if semester is None:
            return {
                "semester": None,
                "team": _team_dict(TeamStat.empty()),
                "leaderboard": _leaderboard_dict(Leaderboard()),
                "players": [],
            }

        window_id = semester.semester_id
        attendance_by_player = {s.player_id: s for s in self._attendance.player_stats(window_id)}
        competition_by_player = self._competitions.window_player_stats(window_id)

        rows: list[dict] = []
        ranked: list[AttendanceStat] = []
        for player in self._players.list_players(active_only=True):
            attendance = attendance_by_player.get(player.player_id)
            if attendance is not None:
                ranked.append(attendance)
            rows.append(
                {
                    "player_id": player.player_id,
                    "full_name": player.full_name,
                    "attendance": _attendance_dict(attendance),
                    "competition": _competition_dict(
                        competition_by_player.get(player.player_id, CompetitionStat.empty())
                    ),
                }
            )

        return {
            "semester": _semester_dict(semester),
            "team": _team_dict(self._attendance.team_stats(window_id)),
            "leaderboard": _leaderboard_dict(rank(ranked, size=self._leaderboard_size)),
            "players": rows,
        }

    def player_profile(self, player_id: int, semester_id: Optional[int] = None) -> dict:
        player = self._players.get_by_id(player_id)
        if not player:
            raise NotFoundError(f"Player {player_id} not found")

        all_time = self._competitions.all_time_win_rate(player.player_id)
        semester = self._semesters.resolve(semester_id)

        attendance = None
        competition = None
        if semester is not None:
            attendance = _attendance_dict(self._attendance.player_stat(player.player_id, semester.semester_id))
            competition = _competition_dict(self._competitions.player_stats(player.player_id, semester.semester_id))

        return {
            "player_id": player.player_id,
            "full_name": player.full_name,
            "is_active": player.is_active,
            "semester": _semester_dict(semester),
            "attendance": attendance,
            "competition": competition,
            "all_time_win_rate": all_time,
            "all_time_win_rate_label": format_win_rate(all_time),
        }

    def coach_profile(self, coach_id: int, semester_id: Optional[int] = None) -> dict:
        coach = self._coaches.get_by_id(coach_id)
        if not coach:
            raise NotFoundError(f"Coach {coach_id} not found")

        semester = self._semesters.resolve(semester_id)
        stat = self._coach_stats.coach_stat(coach.coach_id, semester.semester_id) if semester else None

        return {
            "coach_id": coach.coach_id,
            "full_name": coach.full_name,
            "role_title": coach.role_title,
            "is_active": coach.is_active,
            "semester": _semester_dict(semester),
            "total_sessions": stat.total_sessions if stat else 0,
            "attendance_rate": stat.attendance_rate if stat else 0.0,
            "attendance_rate_label": format_rate(stat.attendance_rate if stat else 0.0),
        }
