"""Persisted sequence counter for tournament numbering."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path

from teamfight import TournamentState

STATE_PATH = "config/auto-teamfight.state.json"
NEW_FILE_MODE = 0o644
DEFAULT_DAY_NUM = 24


def load_state(path: str | Path = STATE_PATH) -> TournamentState:
    """Load state from disk. Falls back to the default counter if unreadable."""
    state_file = Path(path)
    try:
        data = json.loads(state_file.read_text(encoding="utf-8"))
        day_num = data["lastTournamentDayNum"]
        if isinstance(day_num, bool) or not isinstance(day_num, int):
            raise ValueError(f"lastTournamentDayNum is not an integer: {day_num!r}")
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"Warning: could not read {state_file} ({e}), starting from Day {DEFAULT_DAY_NUM}")
        return TournamentState(last_tournament_day_num=DEFAULT_DAY_NUM)
    return TournamentState(last_tournament_day_num=day_num)


def _file_mode(path: Path) -> int:
    """Permission bits to give the rewritten file; mkstemp defaults to 0600."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return NEW_FILE_MODE


def save_state(state: TournamentState, path: str | Path = STATE_PATH) -> None:
    """Write state atomically. Errors propagate to the caller."""
    state_file = Path(path)
    state_file.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps({"lastTournamentDayNum": state.last_tournament_day_num}, indent=2)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{state_file.name}.", dir=state_file.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        os.chmod(tmp_name, _file_mode(state_file))
        os.replace(tmp_name, state_file)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
