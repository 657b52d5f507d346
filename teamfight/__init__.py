"""LMAO Teamfights — shared data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

DEFAULT_NAME_TEMPLATE = "LMAO {DAY_OR_NIGHT} '{DAY_NUM}' Team Battle"

Slot = Literal["Day", "Night"]


@dataclass(frozen=True)
class TournamentConfig:
    """Static settings for the team battles we create."""

    server: str = "https://lichess.org"
    host_team_id: str = "lmao-teamfights"
    timezone: str = "UTC"
    minutes: int = 720
    clock_time: int = 3
    clock_increment: int = 0
    rated: bool = True
    variant: str = "standard"
    teams: tuple[str, ...] = ()
    day_name_template: str = DEFAULT_NAME_TEMPLATE
    night_name_template: str = DEFAULT_NAME_TEMPLATE
    dry_run: bool = False

    @property
    def arena_endpoint(self) -> str:
        return f"{self.server}/api/team/{self.host_team_id}/arena"

    @property
    def invited_teams(self) -> list[str]:
        """Configured teams minus the host, in configured order."""
        return [t for t in self.teams if t and t != self.host_team_id]

    @property
    def name_templates(self) -> dict[str, str]:
        return {"day": self.day_name_template, "night": self.night_name_template}


@dataclass
class TournamentState:
    """Persisted sequence counter."""

    last_tournament_day_num: int = 24

    @property
    def next_day_num(self) -> int:
        return self.last_tournament_day_num + 1


@dataclass(frozen=True)
class Tournament:
    """A single team battle to be created."""

    day_num: int
    slot: Slot
    name: str
    description: str
    start_date: str


@dataclass(frozen=True)
class Created:
    """The platform accepted the tournament."""

    url: str
    ok: bool = True


@dataclass(frozen=True)
class Failed:
    """The tournament was not created."""

    error: str
    status_code: int | None = None
    ok: bool = False


SubmitResult = Union[Created, Failed]
