from figtimer.config import TimerConfig
from figtimer.countdown import Countdown, Phase


def _countdown(seconds: int, allow_negative: bool = False, **kwargs) -> Countdown:
    config = TimerConfig(initial_seconds=seconds, allow_negative=allow_negative, **kwargs)
    return Countdown(config, now=0.0)


class TestTicks:
    def test_counts_down_to_zero_and_stays(self) -> None:
        countdown = _countdown(5)
        for _ in range(5):
            assert countdown.tick()
        assert countdown.remaining_seconds == 0
        for _ in range(3):
            assert not countdown.tick()
        assert countdown.remaining_seconds == 0

    def test_negative_allowed(self) -> None:
        countdown = _countdown(0, allow_negative=True, show_leading_zero_groups=True)
        for _ in range(3):
            countdown.tick()
        assert countdown.remaining_seconds == -3
        assert countdown.display_text() == "-00:00:03"

    def test_negative_compact_display(self) -> None:
        countdown = _countdown(0, allow_negative=True)
        for _ in range(3):
            countdown.tick()
        assert countdown.display_text() == "-03"

    def test_negative_initial_clamped_without_keep_going(self) -> None:
        countdown = _countdown(-10)
        assert countdown.remaining_seconds == 0
        assert countdown.phase is Phase.BLINKING

    def test_config_is_not_mutated(self) -> None:
        countdown = _countdown(3)
        countdown.tick()
        assert countdown.config.initial_seconds == 3


class TestPhase:
    def test_counting_while_positive(self) -> None:
        assert _countdown(1).phase is Phase.COUNTING

    def test_blinking_at_zero(self) -> None:
        countdown = _countdown(1)
        countdown.tick()
        assert countdown.phase is Phase.BLINKING

    def test_never_blinks_when_negative_allowed(self) -> None:
        countdown = _countdown(0, allow_negative=True)
        assert countdown.phase is Phase.COUNTING
        countdown.tick()
        assert countdown.phase is Phase.COUNTING
        assert countdown.is_visible


class TestBlink:
    def test_toggles_once_after_rate(self) -> None:
        countdown = _countdown(0, blink_rate_ms=500)
        assert countdown.state.is_blink_phase_on
        assert not countdown.update_blink(0.3)
        assert countdown.update_blink(0.5)
        assert not countdown.state.is_blink_phase_on
        assert not countdown.is_visible
        assert not countdown.update_blink(0.9)
        assert not countdown.state.is_blink_phase_on

    def test_alternates(self) -> None:
        countdown = _countdown(0, blink_rate_ms=250)
        seen = []
        for step in range(1, 11):
            countdown.update_blink(step * 0.125)
            seen.append(countdown.is_visible)
        assert seen == [True, False, False, True, True, False, False, True, True, False]

    def test_counting_keeps_digits_visible(self) -> None:
        countdown = _countdown(10, blink_rate_ms=100)
        for step in range(20):
            assert not countdown.update_blink(step * 1.0)
            assert countdown.is_visible

    def test_blink_clock_starts_when_zero_is_reached(self) -> None:
        countdown = _countdown(1, blink_rate_ms=500)
        countdown.update_blink(10.0)
        countdown.tick()
        assert not countdown.update_blink(10.4)
        assert countdown.update_blink(10.5)
