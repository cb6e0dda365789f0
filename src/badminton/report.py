from typing import List

from badminton.models import Match, Team, TournamentSchedule
from badminton.stats import (
    calculate_team_stats, ideal_matches_per_team, matchup_summary, total_matches,
)

TITLE = "Badminton Doubles Schedule"

STATUS_LABELS = {
    "balanced": "balanced",
    "minor": "minor deviation",
    "adjust": "needs adjustment",
}


def team_label(team: Team) -> str:
    return f"Team {team.id} ({team.label})"


def match_line(match: Match) -> str:
    return f"Court {match.court}: {team_label(match.team1)} VS {team_label(match.team2)}"


def render_report(schedule: TournamentSchedule) -> str:
    """Plain-text version of the schedule page, used for the download."""
    lines: List[str] = [TITLE, "=" * 50, ""]

    for rnd in schedule.rounds:
        lines.append(f"Round {rnd.round_number}")
        lines.append("-" * 20)
        lines.extend(match_line(m) for m in rnd.matches)
        lines.append("")

    summary = matchup_summary(schedule)
    lines.append("Matches per team")
    lines.append("-" * 20)
    lines.append(
        f"Total matches: {total_matches(schedule)} | Teams: {len(schedule.teams)} "
        f"| Ideal per team: {ideal_matches_per_team(schedule)}"
    )
    lines.append(
        f"Head-to-head: unique {summary.unique} | repeated {summary.repeated} | never {summary.never}"
    )
    lines.append("")

    for stat in calculate_team_stats(schedule):
        lines.append(
            f"{team_label(stat.team)}: played {stat.play_count} "
            f"(target {stat.target}) {STATUS_LABELS[stat.status]}"
        )

    return "\n".join(lines) + "\n"


def report_filename(schedule: TournamentSchedule) -> str:
    return f"badminton-schedule-{schedule.id}.txt"
