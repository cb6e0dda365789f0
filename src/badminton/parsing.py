import re
from typing import List, Tuple

from badminton.models import TournamentConfig

# ASCII comma or the full-width one
GROUP_SEPARATOR = re.compile(r"[,，]")


def parse_names(text: str) -> List[str]:
    """One name per line."""
    return [n.strip() for n in (text or "").splitlines() if n.strip()]


def parse_fixed_groups(text: str) -> List[Tuple[str, ...]]:
    """One group per line, names separated by commas."""
    groups = []
    for line in parse_names(text):
        names = tuple(n.strip() for n in GROUP_SEPARATOR.split(line) if n.strip())
        if names:
            groups.append(names)
    return groups


def parse_court_count(value) -> int:
    """Court field as an int; anything unreadable becomes 0 and fails validation."""
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def build_config(
    male_text: str,
    female_text: str,
    fixed_text: str,
    court_count,
    strategy: str = "targets",
) -> TournamentConfig:
    return TournamentConfig(
        male_players=parse_names(male_text),
        female_players=parse_names(female_text),
        fixed_groups=parse_fixed_groups(fixed_text),
        court_count=parse_court_count(court_count),
        strategy=strategy,
    )
