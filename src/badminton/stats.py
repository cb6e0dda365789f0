from itertools import combinations
from typing import List, Sequence

from config import ROUND_COUNT
from badminton.models import Match, MatchupSummary, Round, Team, TeamStat, TournamentSchedule


# History queries over the rounds recorded so far

def play_count(rounds: Sequence[Round], team: Team) -> int:
    return sum(
        1
        for rnd in rounds
        for m in rnd.matches
        if m.team1 == team or m.team2 == team
    )


def match_count(rounds: Sequence[Round], team_a: Team, team_b: Team) -> int:
    """How many times two teams have met, whichever side each was on."""
    return sum(
        1
        for rnd in rounds
        for m in rnd.matches
        if (m.team1 == team_a and m.team2 == team_b)
        or (m.team1 == team_b and m.team2 == team_a)
    )


def round_has_conflict(rnd: Round, match: Match) -> bool:
    booked = {p for m in rnd.matches for p in m.players}
    return any(p in booked for p in match.players)


# Statistics shown on the schedule page and in the text report

def team_status(difference: int) -> str:
    if difference == 0:
        return "balanced"
    if abs(difference) <= 1:
        return "minor"
    return "adjust"


def calculate_team_stats(schedule: TournamentSchedule) -> List[TeamStat]:
    stats = []
    for team in schedule.teams:
        count = play_count(schedule.rounds, team)
        target = schedule.targets.get(team, 0)
        difference = count - target
        stats.append(TeamStat(
            team=team,
            play_count=count,
            target=target,
            difference=difference,
            status=team_status(difference),
        ))
    stats.sort(key=lambda s: s.play_count)
    return stats


def matchup_summary(schedule: TournamentSchedule) -> MatchupSummary:
    summary = MatchupSummary()
    for team_a, team_b in combinations(schedule.teams, 2):
        count = match_count(schedule.rounds, team_a, team_b)
        if count == 0:
            summary.never += 1
        elif count == 1:
            summary.unique += 1
        else:
            summary.repeated += 1
    return summary


def total_matches(schedule: TournamentSchedule) -> int:
    """Match capacity of the tournament: every court in every round."""
    return ROUND_COUNT * schedule.court_count


def scheduled_matches(schedule: TournamentSchedule) -> int:
    return sum(len(rnd.matches) for rnd in schedule.rounds)


def ideal_matches_per_team(schedule: TournamentSchedule) -> int:
    if not schedule.teams:
        return 0
    return total_matches(schedule) // len(schedule.teams)
