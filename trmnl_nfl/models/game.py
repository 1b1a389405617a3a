from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .team import TeamSummary


class GameSummary(BaseModel):
    """Display-ready view of a single ESPN event and its competition."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    date: str  # Raw ESPN timestamp, e.g. "2024-09-08T17:00Z"
    formatted_date: str
    status: str = "Scheduled"
    venue: str = "TBD"
    teams: List[TeamSummary] = []

    @property
    def description(self) -> str:
        """A short human-readable line for logs and console output."""
        scores = " - ".join(
            f"{team.abbreviation or team.name} {team.score}" for team in self.teams
        )
        return f"{self.name or 'Unknown game'} ({self.status}) {scores}".strip()

    def team(self, abbreviation: str) -> Optional[TeamSummary]:
        """Returns the competitor with the given abbreviation, if present."""
        for team in self.teams:
            if team.abbreviation and team.abbreviation.upper() == abbreviation.upper():
                return team
        return None
