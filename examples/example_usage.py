"""Example: use the stats services directly (no Flask).

Controllers are a thin layer; all aggregation lives in the stats services.
"""

import importlib

from config import get_settings_module

from src.squad_tracker.squad_tracker.container import build_container
from src.squad_tracker.squad_tracker.stats.formatting import format_rate


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    semester = container.semester_service.resolve()
    if semester is None:
        print("No semesters configured.")
        return

    team = container.attendance_stats.team_stats(semester.semester_id)
    print(f"{semester.name}: {format_rate(team.attendance_rate)} over {team.total_sessions} sessions")
    for point in container.attendance_stats.trend(semester.semester_id):
        print(f"  {point.label}: {point.rate}%")


if __name__ == "__main__":
    main()
