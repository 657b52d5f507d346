"""Configuration loading from the JSON files under config/ and the environment."""

from __future__ import annotations

import json
import os

from teamfight import DEFAULT_NAME_TEMPLATE, TournamentConfig

CONFIG_PATH = "config/teamfight.config.json"
TEAMS_PATH = "config/teamfight.teams.json"

# Strings that show up when someone copies the README example verbatim.
TOKEN_PLACEHOLDERS = ("***", "YOUR_TOKEN")


def load_teams(path: str = TEAMS_PATH) -> list[str]:
    """Load the participating team ids from JSON file."""
    with open(path) as f:
        data = json.load(f)
    return [str(t) for t in data["teams"]]


def load_config(
    path: str = CONFIG_PATH,
    teams_path: str = TEAMS_PATH,
    dry_run: bool = False,
) -> TournamentConfig:
    """Load tournament settings and team list into a TournamentConfig.

    Keys missing from the config file keep the dataclass defaults.
    """
    with open(path) as f:
        data = json.load(f)

    defaults = TournamentConfig()
    templates = data.get("nameTemplates") or {}

    return TournamentConfig(
        server=str(data.get("server", defaults.server)).rstrip("/"),
        host_team_id=data.get("hostTeamId", defaults.host_team_id),
        timezone=data.get("timezone", defaults.timezone),
        minutes=int(data.get("minutes", defaults.minutes)),
        clock_time=int(data.get("clockTime", defaults.clock_time)),
        clock_increment=int(data.get("clockIncrement", defaults.clock_increment)),
        rated=bool(data.get("rated", defaults.rated)),
        variant=data.get("variant", defaults.variant),
        teams=tuple(load_teams(teams_path)),
        day_name_template=templates.get("day", DEFAULT_NAME_TEMPLATE),
        night_name_template=templates.get("night", DEFAULT_NAME_TEMPLATE),
        dry_run=dry_run,
    )


def read_token(environ: dict | None = None) -> str | None:
    """Return OAUTH_TOKEN, or None when unset or empty."""
    env = os.environ if environ is None else environ
    return env.get("OAUTH_TOKEN") or None


def dry_run_requested(argv: list[str], environ: dict | None = None) -> bool:
    env = os.environ if environ is None else environ
    return "--dry-run" in argv or env.get("DRY_RUN", "") in ("1", "true")


def is_valid_token(token: str | None) -> bool:
    """Reject empty tokens and obvious placeholders."""
    if not token or not token.strip():
        return False
    return not any(marker in token for marker in TOKEN_PLACEHOLDERS)
