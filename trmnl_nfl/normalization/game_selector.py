from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from trmnl_nfl.models.game import GameSummary
from trmnl_nfl.models.team import TeamSummary
from trmnl_nfl.utils.time_utils import format_eastern, parse_timestamp

# ESPN marks a finished game with either the status name or its description
FINAL_STATUS_NAMES = frozenset({"STATUS_FINAL", "Final"})

# ESPN lists logo variants per team; index 1 is the one shown on the display
LOGO_INDEX = 1

ScheduleDocument = Dict[str, Any]
# (event timestamp, event, competition)
_Candidate = Tuple[datetime, Dict[str, Any], Dict[str, Any]]


class ScheduleParseError(Exception):
    """Raised when an event in the schedule has a missing or malformed timestamp."""

    pass


class GameSelector:
    """Picks the most recent completed game and the next upcoming game for one team."""

    def __init__(self, team_abbr: str):
        self.team_abbr = team_abbr

    def select_last_and_next(
        self, document: ScheduleDocument, reference_time: datetime
    ) -> Tuple[Optional[GameSummary], Optional[GameSummary]]:
        """Returns (last_game, next_game) relative to reference_time.

        Only games strictly before reference_time that ESPN marks final count as
        completed, and only games strictly after it count as upcoming. In-progress
        games and past games without a final status are reported as neither.
        On equal timestamps the event listed first in the document wins.
        """
        completed: List[_Candidate] = []
        upcoming: List[_Candidate] = []

        for event, competition in self._team_events(document):
            game_date = self._parse_event_date(event)
            if game_date < reference_time and self._is_completed(competition):
                completed.append((game_date, event, competition))
            elif game_date > reference_time:
                upcoming.append((game_date, event, competition))
            else:
                logger.debug(
                    f"Skipping event '{event.get('name')}' ({event.get('date')}): neither final nor upcoming"
                )

        logger.debug(
            f"{self.team_abbr}: {len(completed)} completed, {len(upcoming)} upcoming events"
        )

        # max()/min() keep the first of equal keys, so ties resolve in document order
        last = max(completed, key=lambda c: c[0], default=None)
        nxt = min(upcoming, key=lambda c: c[0], default=None)

        return (
            self._build_game_info(last[1], last[2], last[0]) if last else None,
            self._build_game_info(nxt[1], nxt[2], nxt[0]) if nxt else None,
        )

    def _team_events(self, document: ScheduleDocument):
        """Yields (event, competition) for every event this team plays in."""
        for event in document.get("events") or []:
            competition = self._extract_competition(event)
            if competition is None or not self._team_in_game(competition):
                continue
            yield event, competition

    def _extract_competition(self, event: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        competitions = event.get("competitions") if isinstance(event, dict) else None
        if not competitions:
            return None
        return competitions[0]

    def _team_in_game(self, competition: Dict[str, Any]) -> bool:
        for competitor in competition.get("competitors") or []:
            abbr = (competitor.get("team") or {}).get("abbreviation")
            if isinstance(abbr, str) and abbr.upper() == self.team_abbr.upper():
                return True
        return False

    def _parse_event_date(self, event: Dict[str, Any]) -> datetime:
        try:
            return parse_timestamp(event.get("date"))
        except ValueError as e:
            logger.error(f"Bad timestamp on event '{event.get('name')}': {e}")
            raise ScheduleParseError(
                f"Invalid date for event '{event.get('name')}': {event.get('date')!r}"
            ) from e

    def _is_completed(self, competition: Dict[str, Any]) -> bool:
        status_type = (competition.get("status") or {}).get("type") or {}
        return (
            status_type.get("name") in FINAL_STATUS_NAMES
            or status_type.get("description") in FINAL_STATUS_NAMES
        )

    def _build_game_info(
        self, event: Dict[str, Any], competition: Dict[str, Any], game_date: datetime
    ) -> GameSummary:
        status_type = (competition.get("status") or {}).get("type") or {}
        return GameSummary(
            name=event.get("name"),
            date=event["date"],
            formatted_date=format_eastern(game_date),
            status=status_type.get("description") or "Scheduled",
            venue=(competition.get("venue") or {}).get("fullName") or "TBD",
            teams=self._extract_teams_info(competition),
        )

    def _extract_teams_info(self, competition: Dict[str, Any]) -> List[TeamSummary]:
        teams = []
        for comp in competition.get("competitors") or []:
            team = comp.get("team") or {}
            teams.append(
                TeamSummary(
                    name=team.get("displayName"),
                    abbreviation=team.get("abbreviation"),
                    home_away=comp.get("homeAway"),
                    score=_extract_score(comp.get("score")),
                    winner=bool(comp.get("winner") or False),
                    record=_extract_record(comp),
                    logo=_extract_logo(team),
                )
            )
        return teams


def select_last_and_next(
    document: ScheduleDocument, team_abbr: str, reference_time: datetime
) -> Tuple[Optional[GameSummary], Optional[GameSummary]]:
    """Functional shorthand for GameSelector(team_abbr).select_last_and_next(...)."""
    return GameSelector(team_abbr).select_last_and_next(document, reference_time)


def _extract_score(score: Any) -> str:
    # The team schedule endpoint returns {"value": 24.0, "displayValue": "24"}
    if score is None:
        return "0"
    if isinstance(score, dict):
        display = score.get("displayValue")
        if display is not None:
            return str(display)
        value = score.get("value")
        if value is None:
            return "0"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    return str(score)


def _extract_record(competitor: Dict[str, Any]) -> str:
    for record in competitor.get("record") or []:
        if record.get("type") == "total":
            return record.get("displayValue") or "N/A"
    return "N/A"


def _extract_logo(team: Dict[str, Any]) -> Optional[str]:
    logos = team.get("logos") or []
    if len(logos) > LOGO_INDEX:
        return (logos[LOGO_INDEX] or {}).get("href")
    return None
