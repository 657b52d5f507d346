"""Sequential batch creation with rate-limit spacing."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable

from teamfight import SubmitResult, Tournament, TournamentConfig, TournamentState
from teamfight.lichess import create_team_battle
from teamfight.schedule import generate_schedule
from teamfight.state import STATE_PATH, save_state

REQUEST_DELAY = 10  # seconds between creation requests

Submitter = Callable[[Tournament, TournamentConfig, str], SubmitResult]


@dataclass
class RunSummary:
    attempted: int
    succeeded: int
    failed: int
    last_tournament_day_num: int

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


def run_batch(
    config: TournamentConfig,
    state: TournamentState,
    token: str,
    state_path: str | Path = STATE_PATH,
    today: date | None = None,
    submit: Submitter = create_team_battle,
    sleep: Callable[[float], None] | None = None,
) -> RunSummary:
    """Create the next batch of tournaments and advance the state counter.

    Every tournament is attempted even if an earlier one fails. When at least
    one succeeds, the counter moves to the highest day number in the batch
    and is written to ``state_path``; a failed write propagates.
    """
    if today is None:
        today = datetime.now(timezone.utc).date()
    if sleep is None:
        sleep = time.sleep

    next_day_num = state.next_day_num
    tournaments = generate_schedule(today, next_day_num, config.name_templates)

    print(f"Creating {len(tournaments)} tournaments (Days {next_day_num}-{next_day_num + 1})")
    print(f"Teams: {', '.join(config.teams)}")

    succeeded = 0
    failed = 0

    for i, tournament in enumerate(tournaments):
        print(f"\n--- Creating {tournament.slot} Battle {tournament.day_num} ---")
        print(f"  Name: {tournament.name}")
        print(f"  Start: {tournament.start_date}")

        if i > 0:
            print(f"  Waiting {REQUEST_DELAY} seconds to avoid rate limits...")
            sleep(REQUEST_DELAY)

        result = submit(tournament, config, token)
        if result.ok:
            succeeded += 1
            print(f"  {tournament.slot} battle created successfully")
        else:
            failed += 1
            print(f"  ERROR: Failed to create {tournament.slot} battle: {result.error}", file=sys.stderr)

    if succeeded:
        state.last_tournament_day_num = max(t.day_num for t in tournaments)
        save_state(state, state_path)
        print(f"\nUpdated state: lastTournamentDayNum = {state.last_tournament_day_num}")

    print("\n=== SUMMARY ===")
    print(f"Successful: {succeeded}")
    print(f"Failed: {failed}")
    print(f"Next tournaments will start from Day: {state.next_day_num}")

    return RunSummary(
        attempted=len(tournaments),
        succeeded=succeeded,
        failed=failed,
        last_tournament_day_num=state.last_tournament_day_num,
    )
