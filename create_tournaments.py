#!/usr/bin/env python3
"""
LMAO Teamfights — Tournament Creator

Creates the next two days of Lichess team battles (a Day and a Night arena
per day) for the LMAO host team, then advances the day counter stored in
config/auto-teamfight.state.json.

Usage:
    OAUTH_TOKEN=... python create_tournaments.py             # Create tournaments
    OAUTH_TOKEN=... python create_tournaments.py --dry-run   # Simulate, no API calls

DRY_RUN=1 (or DRY_RUN=true) in the environment also enables simulation.
"""

from __future__ import annotations

import sys

from teamfight.config import CONFIG_PATH, TEAMS_PATH, dry_run_requested, load_config, read_token
from teamfight.runner import run_batch
from teamfight.state import STATE_PATH, load_state


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    try:
        token = read_token()
        if not token:
            raise RuntimeError("OAUTH_TOKEN environment variable is required")

        config = load_config(CONFIG_PATH, TEAMS_PATH, dry_run=dry_run_requested(args))
        if config.dry_run:
            print("[DRY RUN] No tournaments will be created")

        state = load_state(STATE_PATH)
        summary = run_batch(config, state, token, state_path=STATE_PATH)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
