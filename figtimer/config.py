import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_BLINK_RATE_MS = 500
DEFAULT_FONT = "big"

BASIC_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


@dataclass(frozen=True)
class Style:
    color: Optional[str] = None
    rgb: Optional[Tuple[int, int, int]] = None
    bold: bool = False


@dataclass(frozen=True)
class TimerConfig:
    initial_seconds: int = 0
    allow_negative: bool = False
    caption: str = ""
    show_leading_zero_groups: bool = False
    blink_rate_ms: int = DEFAULT_BLINK_RATE_MS
    use_font_for_caption: bool = False
    style: Style = Style()
    font: str = DEFAULT_FONT

    @property
    def blink_rate(self) -> float:
        return self.blink_rate_ms / 1000.0


def parse_color(text: str) -> Style:
    value = text.strip().lower()
    if value in BASIC_COLORS:
        return Style(color=value)
    if value.startswith("#") and len(value) == 7:
        try:
            rgb = tuple(int(value[i:i + 2], 16) for i in (1, 3, 5))
        except ValueError:
            raise ValueError(f"invalid hex color: {text!r}") from None
        return Style(rgb=rgb)
    raise ValueError(f"unknown color: {text!r}")


def debug_enabled() -> bool:
    return os.environ.get("FIGTIMER_DEBUG") == "1"


def get_log_path() -> Path:
    system = platform.system().lower()
    if system == "darwin":
        base = Path.home() / "Library" / "Application Support"
    elif system == "windows":
        appdata = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if appdata:
            base = Path(appdata)
        else:
            base = Path.home() / "AppData" / "Local"
    else:
        base = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    return base / "figtimer" / "figtimer.log"
