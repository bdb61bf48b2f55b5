"""app_state
Per-user preferences (theme mode, weighting profile).

One `AppState` is loaded when the front end starts, handed to whatever
needs it, and saved once on the way out. Nothing here is global.
"""

from __future__ import annotations
import json
from dataclasses import dataclass, asdict
from pathlib import Path

from cineScore import settings
from cineScore.settings import THEME_MODES
from cineScore.utils import log_debug


def load_json_dict(path: Path) -> dict:
    """Load a JSON file to a dict, return {} if missing or unreadable."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as exc:
        log_debug(f"State file {path} unreadable: {exc}")
        return {}
    return data if isinstance(data, dict) else {}


@dataclass(slots=True)
class AppState:
    theme_mode: str = "light"
    audience_focused: bool = False

    def __post_init__(self) -> None:
        if self.theme_mode not in THEME_MODES:
            raise ValueError(f"theme_mode must be one of {THEME_MODES}")

    # ───────────────────────────── persistence ──────────────────────
    @classmethod
    def load(cls, path: Path | None = None) -> "AppState":
        """Read saved preferences; anything invalid falls back to defaults."""
        data = load_json_dict(path or settings.STATE_PATH)
        mode = data.get("theme_mode")
        if mode not in THEME_MODES:
            mode = "light"
        return cls(theme_mode=mode,
                   audience_focused=data.get("audience_focused") is True)

    def save(self, path: Path | None = None) -> Path:
        path = path or settings.STATE_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(self), indent=2) + "\n", encoding="utf-8")
        return path

    # ───────────────────────────── mutators ─────────────────────────
    def toggle_theme(self) -> str:
        self.theme_mode = "dark" if self.theme_mode == "light" else "light"
        return self.theme_mode

    def toggle_audience_focus(self) -> bool:
        self.audience_focused = not self.audience_focused
        return self.audience_focused
