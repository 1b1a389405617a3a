import sys
import argparse
import json
from datetime import datetime, timezone
from typing import Callable, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict

# --- Settings/Logging ---
from trmnl_nfl.logging.setup import setup_logging

setup_logging()

from loguru import logger

from rich.console import Console

from trmnl_nfl.clients.espn_client import ESPNClient
from trmnl_nfl.models.data_models import ResultPayload
from trmnl_nfl.normalization.game_selector import GameSelector
from trmnl_nfl.normalization.team_resolver import TeamNotResolvedError, resolve_or_raise
from trmnl_nfl.publishing.trmnl_publisher import TRMNLPublisher

# User-facing output goes to stdout; logs go to stderr
console = Console(highlight=False, emoji=False)

Clock = Callable[[], datetime]


class OptionsError(Exception):
    """Raised for a malformed command line (unknown flag, missing flag value)."""

    pass


class _OptionParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise OptionsError(message)


class RunOutcome(BaseModel):
    """Result of one invocation; exactly one place turns it into output + exit code."""

    model_config = ConfigDict(frozen=True)

    payload: Optional[ResultPayload] = None
    error: Optional[str] = None

    @property
    def exit_code(self) -> int:
        return 1 if self.error is not None else 0


def say(message: str) -> None:
    console.print(message, markup=False, soft_wrap=True)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_options(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = _OptionParser(
        prog="trmnl-nfl-team",
        usage="%(prog)s [options]",
        description="Publish an NFL team's last and next game to a TRMNL plugin.",
    )
    parser.add_argument(
        "-t",
        "--team",
        help="Team name or abbreviation (e.g., 'Bears' or 'CHI')",
    )
    parser.add_argument(
        "-p",
        "--plugin-id",
        dest="plugin_id",
        help="Plugin ID for the TRMNL Plugin",
    )
    return parser.parse_args(argv)


def run_pipeline(
    team: str,
    plugin_id: Optional[str] = None,
    now: Clock = utc_now,
    http_client: Optional[httpx.Client] = None,
) -> RunOutcome:
    """Resolve → fetch → select → publish. Any failure becomes an error outcome.

    Raises TeamNotResolvedError before any network traffic when the team is unknown.
    """
    team_abbr = resolve_or_raise(team)
    say(f"Getting data for Team: {team} (resolved: {team_abbr.value})")

    try:
        with ESPNClient(client=http_client) as espn:
            schedule = espn.fetch_schedule(team_abbr.value)

        reference_time = now()
        selector = GameSelector(team_abbr.value)
        last_game, next_game = selector.select_last_and_next(schedule, reference_time)
        payload = ResultPayload(last_game=last_game, next_game=next_game)

        logger.info(
            f"Last game: {last_game.description if last_game else 'none'}; "
            f"next game: {next_game.description if next_game else 'none'}"
        )
        if last_game and (ours := last_game.team(team_abbr.value)):
            logger.info(
                f"{team_abbr.value} {'won' if ours.winner else 'did not win'} its last game "
                f"({ours.score} points, record {ours.record})"
            )

        if plugin_id:
            with TRMNLPublisher(plugin_id, client=http_client) as publisher:
                status_code = publisher.publish(payload)
            say(f"Response Code: {status_code}")
        else:
            say("No plugin ID provided. Skipping webhook publication.")

        return RunOutcome(payload=payload)

    except Exception as e:
        logger.exception(f"Run for {team_abbr.value} failed: {e}")
        return RunOutcome(error=str(e))


def finish(outcome: RunOutcome) -> int:
    """Renders an error outcome as {"error": ...} and returns the process exit code."""
    if outcome.error is not None:
        say(json.dumps({"error": outcome.error}, indent=2))
    return outcome.exit_code


def main(
    argv: Optional[List[str]] = None,
    now: Clock = utc_now,
    http_client: Optional[httpx.Client] = None,
) -> int:
    """Entry point for the command line; returns the process exit code."""
    try:
        options = parse_options(argv)
    except OptionsError as e:
        logger.error(f"Invalid command line: {e}")
        return finish(RunOutcome(error=str(e)))

    if options.team is None:
        say("Please specify a team with --team")
        return 1

    try:
        outcome = run_pipeline(
            options.team, options.plugin_id, now=now, http_client=http_client
        )
    except TeamNotResolvedError as e:
        logger.warning(f"Unresolvable team name: {options.team!r}")
        say(str(e))
        return 1

    return finish(outcome)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    try:
        cli()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(1)
