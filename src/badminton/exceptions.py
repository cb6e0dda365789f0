class SchedulingError(Exception):
    """Base class for errors that abort schedule generation."""


class ValidationError(SchedulingError):
    pass


class InsufficientPlayersError(SchedulingError):
    def __init__(self, team_count: int):
        self.team_count = team_count
        super().__init__(
            f"Not enough players for doubles: {team_count} team(s) formed, at least 2 are needed (4 players)."
        )
