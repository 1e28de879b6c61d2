import pytest

from src.squad_tracker.squad_tracker.coaches.model import Coach
from src.squad_tracker.squad_tracker.container import wire_container
from src.squad_tracker.squad_tracker.players.model import Player
from tests.fakes import InMemoryCoaches, InMemoryPlayers, InMemorySemesters


@pytest.fixture
def container(two_session_records, fall_semester, spring_semester):
    players = InMemoryPlayers(
        [
            Player(player_id=1, full_name="Player 1"),
            Player(player_id=2, full_name="Player 2"),
            Player(player_id=3, full_name="Player 3"),
            Player(player_id=4, full_name="Player 4"),
            Player(player_id=5, full_name="Player 5", is_active=False),
        ]
    )
    coaches = InMemoryCoaches([Coach(coach_id=7, full_name="Coach Lee", role_title="Head Coach")], {7: [1]})

    return wire_container(
        records=two_session_records,
        semesters_repo=InMemorySemesters([fall_semester, spring_semester]),
        players_repo=players,
        coaches_repo=coaches,
        leaderboard_size=1,
    )
