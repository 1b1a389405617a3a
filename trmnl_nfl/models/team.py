# trmnl_nfl/models/team.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TeamSummary(BaseModel):
    """One competitor of a game, flattened for display."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None  # ESPN displayName, e.g. "Chicago Bears"
    abbreviation: Optional[str] = None
    home_away: Optional[str] = None  # "home" / "away"
    score: str = "0"
    winner: bool = False
    record: str = "N/A"  # Season record of type "total", e.g. "10-7"
    logo: Optional[str] = None
