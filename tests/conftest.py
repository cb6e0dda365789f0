import random

import pytest
from fastapi.testclient import TestClient

from badminton.models import Match, Round, Team, TournamentSchedule


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def teams():
    return [
        Team(id=1, players=("M1", "F1")),
        Team(id=2, players=("M2", "F2")),
        Team(id=3, players=("M3", "F3")),
        Team(id=4, players=("M4", "F4")),
    ]


@pytest.fixture
def make_round():
    """Build a Round from (team1, team2) pairs, courts numbered in order."""
    def _make(number, *pairs):
        return Round(
            round_number=number,
            matches=[Match(court=i, team1=a, team2=b) for i, (a, b) in enumerate(pairs, start=1)],
        )
    return _make


@pytest.fixture
def make_schedule(teams):
    def _make(rounds, court_count=2, targets=None):
        return TournamentSchedule(
            id="test",
            court_count=court_count,
            teams=tuple(teams),
            rounds=tuple(rounds),
            targets=targets if targets is not None else {t: 5 for t in teams},
        )
    return _make


@pytest.fixture
def client():
    from main import app
    from badminton.router import tournaments_db

    tournaments_db.clear()
    with TestClient(app) as c:
        yield c
    tournaments_db.clear()
