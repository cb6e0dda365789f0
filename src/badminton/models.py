from dataclasses import dataclass, field
from typing import Dict, List, Tuple


def generate_id():
    import uuid
    return str(uuid.uuid4())[:8]


@dataclass(frozen=True)
class Team:
    """Two players that always play together.

    Equality and hashing use the player tuple in slot order, so ("A", "B")
    and ("B", "A") are different teams. The id only labels the team.
    """
    id: int = field(compare=False)
    players: Tuple[str, str]

    @property
    def label(self) -> str:
        return " + ".join(self.players)


@dataclass
class Match:
    court: int
    team1: Team
    team2: Team

    @property
    def players(self) -> Tuple[str, ...]:
        return self.team1.players + self.team2.players


@dataclass
class Round:
    round_number: int
    matches: List[Match] = field(default_factory=list)


@dataclass
class TournamentConfig:
    male_players: List[str]
    female_players: List[str]
    fixed_groups: List[Tuple[str, ...]] = field(default_factory=list)
    court_count: int = 1
    strategy: str = "targets"  # targets | simple


@dataclass
class TournamentData:
    """Working state of a single generation run."""
    config: TournamentConfig
    teams: List[Team] = field(default_factory=list)
    targets: Dict[Team, int] = field(default_factory=dict)
    rounds: List[Round] = field(default_factory=list)


@dataclass(frozen=True)
class TournamentSchedule:
    id: str
    court_count: int
    teams: Tuple[Team, ...]
    rounds: Tuple[Round, ...]
    targets: Dict[Team, int]
    male_players: Tuple[str, ...] = ()
    female_players: Tuple[str, ...] = ()
    fixed_groups: Tuple[Tuple[str, ...], ...] = ()
    strategy: str = "targets"

    def to_config(self) -> TournamentConfig:
        return TournamentConfig(
            male_players=list(self.male_players),
            female_players=list(self.female_players),
            fixed_groups=list(self.fixed_groups),
            court_count=self.court_count,
            strategy=self.strategy,
        )


@dataclass
class TeamStat:
    team: Team
    play_count: int
    target: int
    difference: int
    status: str  # balanced | minor | adjust


@dataclass
class MatchupSummary:
    unique: int = 0
    repeated: int = 0
    never: int = 0
