import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

from config import MAX_COURTS, MIN_COURTS, ROUND_COUNT
from badminton.exceptions import InsufficientPlayersError, ValidationError
from badminton.models import (
    Match, Round, Team, TournamentConfig, TournamentData, TournamentSchedule, generate_id,
)
from badminton.stats import match_count, play_count, round_has_conflict

logger = logging.getLogger(__name__)

STRATEGIES = ("targets", "simple")


def shuffle(items: Sequence, rng=None) -> list:
    """Fisher-Yates shuffle into a new list; the input is left untouched."""
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def shuffle_ties(items: Sequence, key: Callable, threshold: int = 1, rng=None) -> list:
    """
    Sort by key descending, then shuffle each contiguous run of items whose
    key is within `threshold` of the first key in the run.
    """
    ordered = sorted(items, key=key, reverse=True)
    result: list = []
    run: list = []
    for item in ordered:
        if run and key(run[0]) - key(item) > threshold:
            result.extend(shuffle(run, rng))
            run = []
        run.append(item)
    result.extend(shuffle(run, rng))
    return result


def create_teams(
    male_players: Sequence[str],
    female_players: Sequence[str],
    fixed_groups: Sequence[Sequence[str]],
    rng=None,
) -> List[Team]:
    """
    Fixed groups first, then random mixed pairs, then same-sex pairs from
    whatever is left. A single leftover player may complete a one-player
    fixed group; otherwise they sit out.
    """
    groups: List[List[str]] = []
    claimed = set()
    for group in fixed_groups:
        members = list(dict.fromkeys(group))
        if not members:
            continue
        if claimed.intersection(members):
            logger.warning("Fixed group (%s) shares a player with an earlier group, skipped", ", ".join(members))
            continue
        claimed.update(members)
        groups.append(members)

    grouped = set(claimed)
    pools: List[List[str]] = [[], []]
    for pool, names in zip(pools, (male_players, female_players)):
        for name in names:
            if name in claimed:
                if name not in grouped:
                    logger.warning("Player %s is listed more than once, extra entries ignored", name)
                continue
            claimed.add(name)
            pool.append(name)

    males = shuffle(pools[0], rng)
    females = shuffle(pools[1], rng)

    while males and females:
        groups.append([males.pop(0), females.pop(0)])
    while len(males) >= 2:
        groups.append([males.pop(0), males.pop(0)])
    while len(females) >= 2:
        groups.append([females.pop(0), females.pop(0)])

    leftover = males + females
    if len(leftover) == 1:
        for members in groups:
            if len(members) == 1:
                members.append(leftover[0])
                break
        else:
            logger.info("Player %s has no partner and sits out", leftover[0])

    complete = shuffle([members for members in groups if len(members) == 2], rng)
    return [Team(id=index, players=tuple(members)) for index, members in enumerate(complete, start=1)]


def compute_targets(teams: Sequence[Team], court_count: int, round_count: int = ROUND_COUNT) -> Dict[Team, int]:
    total = round_count * court_count
    ideal, extra = divmod(total, len(teams))
    ordered = sorted(teams, key=lambda t: t.id)
    return {team: ideal + (1 if index < extra else 0) for index, team in enumerate(ordered)}


def schedule_round_simple(
    round_number: int,
    teams: Sequence[Team],
    rounds: Sequence[Round],
    court_count: int,
) -> Round:
    """Least-played team first, against the closest play count it can meet."""
    rnd = Round(round_number=round_number)
    counts = {team: play_count(rounds, team) for team in teams}
    available = sorted(teams, key=lambda t: counts[t])

    for court in range(1, court_count + 1):
        if len(available) < 2:
            logger.debug("Round %d: courts %d-%d left empty", round_number, court, court_count)
            break

        team1 = available.pop(0)
        team2 = None
        min_difference = None
        for candidate in available:
            if round_has_conflict(rnd, Match(court, team1, candidate)):
                continue
            difference = abs(counts[team1] - counts[candidate])
            if min_difference is None or difference < min_difference:
                min_difference = difference
                team2 = candidate
        if team2 is None:
            team2 = available[0]
        available.remove(team2)

        rnd.matches.append(Match(court=court, team1=team1, team2=team2))
        counts[team1] += 1
        counts[team2] += 1
        available.sort(key=lambda t: counts[t])

    return rnd


def schedule_single_court_round(round_number: int, teams: Sequence[Team], rounds: Sequence[Round]) -> Round:
    """
    One match: the least-played team against the opponent it has met the
    fewest times, closest play count breaking ties.
    """
    rnd = Round(round_number=round_number)
    if len(teams) < 2:
        return rnd

    counts = {team: play_count(rounds, team) for team in teams}
    team1 = min(teams, key=lambda t: counts[t])
    team2 = min(
        (t for t in teams if t.id != team1.id),
        key=lambda t: (match_count(rounds, team1, t), abs(counts[team1] - counts[t])),
    )
    rnd.matches.append(Match(court=1, team1=team1, team2=team2))
    return rnd


def schedule_round_with_targets(
    round_number: int,
    teams: Sequence[Team],
    rounds: Sequence[Round],
    court_count: int,
    targets: Dict[Team, int],
    rng=None,
) -> Round:
    """
    Teams furthest behind their target go first. Each picks the conflict-free
    opponent it has met least, preferring the largest combined deficit, with a
    random pick among equally good opponents.
    """
    if court_count == 1:
        return schedule_single_court_round(round_number, teams, rounds)

    rng = rng or random
    rnd = Round(round_number=round_number)
    counts = {team: play_count(rounds, team) for team in teams}
    scores = {team: targets[team] - counts[team] for team in teams}
    available = shuffle_ties(teams, key=lambda t: scores[t], rng=rng)

    for court in range(1, court_count + 1):
        if len(available) < 2:
            logger.debug("Round %d: courts %d-%d left empty", round_number, court, court_count)
            break

        team1 = available.pop(0)
        ranked = [
            (candidate, (match_count(rounds, team1, candidate), -(scores[team1] + scores[candidate])))
            for candidate in available
            if not round_has_conflict(rnd, Match(court, team1, candidate))
        ]
        if ranked:
            best = min(rank for _, rank in ranked)
            team2 = rng.choice([candidate for candidate, rank in ranked if rank == best])
        else:
            team2 = rng.choice(available)
        available.remove(team2)

        rnd.matches.append(Match(court=court, team1=team1, team2=team2))
        for team in (team1, team2):
            counts[team] += 1
            scores[team] = targets[team] - counts[team]
        available = shuffle_ties(available, key=lambda t: scores[t], rng=rng)

    return rnd


def validate_config(config: TournamentConfig) -> None:
    if not config.male_players and not config.female_players:
        raise ValidationError("Enter at least one male or female player name.")
    if not MIN_COURTS <= config.court_count <= MAX_COURTS:
        raise ValidationError(f"Court count must be between {MIN_COURTS} and {MAX_COURTS}.")
    if config.strategy not in STRATEGIES:
        raise ValidationError(f"Unknown scheduling strategy: {config.strategy}")


def generate_tournament(config: TournamentConfig, rng=None, tid: Optional[str] = None) -> TournamentSchedule:
    """Build the teams and schedule ROUND_COUNT rounds for them."""
    validate_config(config)

    data = TournamentData(config=config)
    data.teams = create_teams(config.male_players, config.female_players, config.fixed_groups, rng)
    if len(data.teams) < 2:
        raise InsufficientPlayersError(len(data.teams))

    data.targets = compute_targets(data.teams, config.court_count)
    logger.info(
        "Scheduling %d teams on %d court(s), %s strategy",
        len(data.teams), config.court_count, config.strategy,
    )

    for round_number in range(1, ROUND_COUNT + 1):
        if config.strategy == "simple":
            rnd = schedule_round_simple(round_number, data.teams, data.rounds, config.court_count)
        else:
            rnd = schedule_round_with_targets(
                round_number, data.teams, data.rounds, config.court_count, data.targets, rng,
            )
        data.rounds.append(rnd)
        logger.debug("Round %d: %d match(es)", round_number, len(rnd.matches))

    return TournamentSchedule(
        id=tid or generate_id(),
        court_count=config.court_count,
        teams=tuple(data.teams),
        rounds=tuple(data.rounds),
        targets=dict(data.targets),
        male_players=tuple(config.male_players),
        female_players=tuple(config.female_players),
        fixed_groups=tuple(tuple(g) for g in config.fixed_groups),
        strategy=config.strategy,
    )
