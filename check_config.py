#!/usr/bin/env python3
"""
LMAO Teamfights — Safety Check

Loads the config, teams and state files and prints what the next run of
create_tournaments.py would do. Never contacts Lichess and never writes state.
Run this first after editing anything under config/.
"""

from __future__ import annotations

import json
import os
import sys
from datetime import datetime, timezone

from teamfight.config import CONFIG_PATH, TEAMS_PATH, load_config
from teamfight.schedule import generate_schedule
from teamfight.state import STATE_PATH


def read_day_num(path: str = STATE_PATH) -> int:
    """Read lastTournamentDayNum strictly; a missing or broken file is an error here."""
    with open(path) as f:
        return int(json.load(f)["lastTournamentDayNum"])


def main() -> int:
    print("SAFETY CHECK - Testing configuration...\n")

    try:
        config = load_config(CONFIG_PATH, TEAMS_PATH)
        last_day_num = read_day_num(STATE_PATH)
    except Exception as e:
        print(f"SAFETY CHECK FAILED: {e}", file=sys.stderr)
        print("\nPlease fix the configuration before proceeding!")
        return 1

    print("Configuration files loaded successfully")

    print("\nCurrent Settings:")
    print(f"  Host Team: {config.host_team_id}")
    print(f"  Server: {config.server}")
    print(f"  Timezone: {config.timezone}")
    print(f"  Tournament Duration: {config.minutes} minutes ({config.minutes / 60:g} hours)")
    print(f"  Clock: {config.clock_time}+{config.clock_increment}")
    print(f"  Rated: {str(config.rated).lower()}")

    print("\nTeams:")
    for team in config.teams:
        print(f"  - {team}")

    print("\nCurrent State:")
    print(f"  Last Tournament Day: {last_day_num}")
    print(f"  Next Tournament Day: {last_day_num + 1}")

    has_token = bool(os.environ.get("OAUTH_TOKEN"))
    print(f"\nOAuth Token: {'Set' if has_token else 'Missing'}")
    if not has_token:
        print("\nWARNING: Set OAUTH_TOKEN environment variable before running!")
        print('  export OAUTH_TOKEN="your_lichess_token"')

    today = datetime.now(timezone.utc).date()
    print("\nNext 4 Tournaments Will Be:")
    for t in generate_schedule(today, last_day_num + 1, config.name_templates):
        print(f"  {t.name}  ({t.start_date})")

    print("\nSAFETY CHECK PASSED - Configuration looks good!")
    print("\nTo test safely, run:")
    print("  python create_tournaments.py --dry-run")
    print("\nTo create real tournaments, run:")
    print("  python create_tournaments.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
