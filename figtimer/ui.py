import logging
import time
from typing import Callable, List, Optional

from .config import TimerConfig
from .countdown import Countdown
from .events import Event, EventChannel, InputListener, TickGenerator
from .font import FontRenderer, RenderError
from .painter import DiffPainter, compact
from .terminal import CursesTerminal

log = logging.getLogger(__name__)

POLL_INTERVAL = 0.1


class CountdownApp:
    def __init__(
        self,
        config: TimerConfig,
        terminal,
        renderer,
        channel: EventChannel,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.terminal = terminal
        self.renderer = renderer
        self.channel = channel
        self._clock = clock
        self._sleep = sleep
        self.countdown = Countdown(config, now=clock())
        self.caption = DiffPainter(terminal, origin_row=0, style=config.style)
        self.numerals = DiffPainter(terminal, origin_row=1, style=config.style)
        self.running = True
        self._last_render_error = ""

    def _caption_lines(self) -> List[str]:
        caption = self.config.caption
        if not caption:
            return []
        if self.config.use_font_for_caption:
            try:
                return self.renderer.render_frame(caption)
            except RenderError as exc:
                log.warning("caption font rendering failed, using plain text: %s", exc)
        return [caption]

    def paint_caption(self) -> int:
        lines = self._caption_lines()
        self.caption.paint(lines)
        self.numerals.origin_row = max(1, len(compact(lines)))
        return self.numerals.origin_row

    def _numeral_frame(self) -> Optional[List[str]]:
        if not self.countdown.is_visible:
            return []
        text = self.countdown.display_text()
        try:
            frame = self.renderer.render_frame(text)
        except RenderError as exc:
            message = str(exc)
            if message != self._last_render_error:
                log.warning("skipping paint: %s", message)
                self._last_render_error = message
            return None
        self._last_render_error = ""
        return frame

    def handle(self, event: Event) -> None:
        if event is Event.QUIT:
            log.info("quit requested at %s", self.countdown.display_text())
            self.running = False
        elif event is Event.TICK:
            self.countdown.tick()

    def step(self, now: float) -> bool:
        self.countdown.update_blink(now)
        frame = self._numeral_frame()
        if frame is not None:
            self.numerals.paint(frame)

        for event in self.channel.drain():
            self.handle(event)
            if not self.running:
                break
        return self.running

    def run(self) -> None:
        self.paint_caption()
        while self.step(self._clock()):
            self._sleep(POLL_INTERVAL)


def run(config: TimerConfig, renderer: FontRenderer, terminal: Optional[CursesTerminal] = None) -> None:
    terminal = terminal or CursesTerminal()
    channel = EventChannel()
    try:
        terminal.init()
        InputListener(channel).start()
        TickGenerator(channel).start()
        CountdownApp(config, terminal, renderer, channel).run()
    finally:
        channel.close()
        terminal.cleanup()
