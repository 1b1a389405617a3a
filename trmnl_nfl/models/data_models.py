from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from .game import GameSummary


class ResultPayload(BaseModel):
    """The last completed and next upcoming game for one team.

    Either side may be None when the schedule has no qualifying game.
    """

    model_config = ConfigDict(frozen=True)

    last_game: Optional[GameSummary] = None
    next_game: Optional[GameSummary] = None

    def to_webhook_body(self) -> Dict[str, Any]:
        """Wraps the payload in the TRMNL custom plugin envelope."""
        return {"merge_variables": self.model_dump(mode="json")}
