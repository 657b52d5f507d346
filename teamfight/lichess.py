"""Lichess team battle creation."""

from __future__ import annotations

import sys

import requests

from teamfight import Created, Failed, SubmitResult, Tournament, TournamentConfig
from teamfight.config import is_valid_token

USER_AGENT = "LmaoTeamfightBot/1.0 (scheduled team battle creator)"
REQUEST_TIMEOUT = 30


def build_payload(tournament: Tournament, config: TournamentConfig) -> list[tuple[str, str]]:
    """Form fields for POST /api/team/{id}/arena. ``teams[]`` repeats per invited team."""
    payload = [
        ("name", tournament.name),
        ("description", tournament.description),
        ("clockTime", str(config.clock_time)),
        ("clockIncrement", str(config.clock_increment)),
        ("minutes", str(config.minutes)),
        ("rated", "true" if config.rated else "false"),
        ("variant", config.variant),
        ("startDate", tournament.start_date),
        ("hostTeamId", config.host_team_id),
    ]
    payload.extend(("teams[]", team) for team in config.invited_teams)
    return payload


def create_team_battle(tournament: Tournament, config: TournamentConfig, token: str) -> SubmitResult:
    """Create one team battle. Makes a single attempt and never raises for API errors."""
    if not is_valid_token(token):
        return Failed(
            "Invalid or missing OAuth token. Please set a valid OAUTH_TOKEN environment variable."
        )

    if config.dry_run:
        print(f"  [DRY RUN] Would create: {tournament.name}")
        print(f"  [DRY RUN] Start: {tournament.start_date}")
        print(f"  [DRY RUN] Teams: {', '.join(config.invited_teams)}")
        return Created(f"{config.server}/team/{config.host_team_id}/arena/pending")

    headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }

    try:
        response = requests.post(
            config.arena_endpoint,
            data=build_payload(tournament, config),
            headers=headers,
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        print(f"  ERROR: Network error: {e}", file=sys.stderr)
        return Failed(str(e))

    if not 200 <= response.status_code < 300:
        print(f"  ERROR: Tournament creation failed: {response.status_code} {response.text}", file=sys.stderr)
        return Failed(f"{response.status_code}: {response.text}", status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        print(f"  ERROR: Unreadable response body: {e}", file=sys.stderr)
        return Failed(f"Invalid JSON in response: {e}", status_code=response.status_code)

    tournament_id = data.get("id") if isinstance(data, dict) else None
    if tournament_id:
        url = f"{config.server}/tournament/{tournament_id}"
    else:
        url = response.headers.get("Location") or "unknown"

    print(f"  Created tournament: {url}")
    return Created(url)
