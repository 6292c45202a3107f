from dataclasses import dataclass
from enum import Enum

from .config import TimerConfig
from .timecalc import format_countdown


class Phase(Enum):
    COUNTING = "counting"
    BLINKING = "blinking"


@dataclass
class TimerState:
    remaining_seconds: int
    is_blink_phase_on: bool = True
    last_blink_toggle: float = 0.0


class Countdown:
    def __init__(self, config: TimerConfig, now: float = 0.0) -> None:
        self.config = config
        remaining = config.initial_seconds
        if not config.allow_negative:
            remaining = max(0, remaining)
        self.state = TimerState(remaining_seconds=remaining, last_blink_toggle=now)

    @property
    def remaining_seconds(self) -> int:
        return self.state.remaining_seconds

    @property
    def phase(self) -> Phase:
        if self.state.remaining_seconds == 0 and not self.config.allow_negative:
            return Phase.BLINKING
        return Phase.COUNTING

    @property
    def is_visible(self) -> bool:
        return self.phase is Phase.COUNTING or self.state.is_blink_phase_on

    def tick(self) -> bool:
        state = self.state
        if state.remaining_seconds > 0 or self.config.allow_negative:
            state.remaining_seconds -= 1
            return True
        return False

    def update_blink(self, now: float) -> bool:
        state = self.state
        if self.phase is Phase.COUNTING:
            state.is_blink_phase_on = True
            state.last_blink_toggle = now
            return False
        if now - state.last_blink_toggle >= self.config.blink_rate:
            state.is_blink_phase_on = not state.is_blink_phase_on
            state.last_blink_toggle = now
            return True
        return False

    def display_text(self) -> str:
        return format_countdown(self.state.remaining_seconds, self.config.show_leading_zero_groups)
