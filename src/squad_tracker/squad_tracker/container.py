from __future__ import annotations

from dataclasses import dataclass

from .coaches.mysql_coach_repository import MySQLCoachRepository
from .coaches.repository import CoachRepository
from .core.constants import DEFAULT_LEADERBOARD_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .players.mysql_player_repository import MySQLPlayerRepository
from .players.repository import PlayerRepository
from .records.mysql_record_supplier import MySQLRecordSupplier
from .records.repository import RecordSupplier
from .reports.service import ReportService
from .semesters.mysql_semester_repository import MySQLSemesterRepository
from .semesters.repository import SemesterRepository
from .semesters.service import SemesterService
from .stats.attendance import AttendanceStatsService
from .stats.coach import CoachStatsService
from .stats.competition import CompetitionStatsService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    records: RecordSupplier
    semesters_repo: SemesterRepository
    players_repo: PlayerRepository
    coaches_repo: CoachRepository

    semester_service: SemesterService
    attendance_stats: AttendanceStatsService
    competition_stats: CompetitionStatsService
    coach_stats: CoachStatsService
    report_service: ReportService


def wire_container(
    *,
    records: RecordSupplier,
    semesters_repo: SemesterRepository,
    players_repo: PlayerRepository,
    coaches_repo: CoachRepository,
    conn: DatabaseConnection | None = None,
    leaderboard_size: int = DEFAULT_LEADERBOARD_SIZE,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""

    semester_service = SemesterService(semesters_repo)
    attendance_stats = AttendanceStatsService(records)
    competition_stats = CompetitionStatsService(records)
    coach_stats = CoachStatsService(records, coaches_repo)
    report_service = ReportService(
        semester_service,
        players_repo,
        coaches_repo,
        attendance_stats,
        competition_stats,
        coach_stats,
        leaderboard_size=leaderboard_size,
    )

    return Container(
        conn=conn,
        records=records,
        semesters_repo=semesters_repo,
        players_repo=players_repo,
        coaches_repo=coaches_repo,
        semester_service=semester_service,
        attendance_stats=attendance_stats,
        competition_stats=competition_stats,
        coach_stats=coach_stats,
        report_service=report_service,
    )


def build_container(*, db_config: dict, leaderboard_size: int = DEFAULT_LEADERBOARD_SIZE) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_container(
        records=MySQLRecordSupplier(conn),
        semesters_repo=MySQLSemesterRepository(conn),
        players_repo=MySQLPlayerRepository(conn),
        coaches_repo=MySQLCoachRepository(conn),
        conn=conn,
        leaderboard_size=leaderboard_size,
    )
