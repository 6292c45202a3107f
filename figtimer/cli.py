import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import DEFAULT_BLINK_RATE_MS, DEFAULT_FONT, TimerConfig, debug_enabled, get_log_path, parse_color
from .font import FontLoadError, FontRenderer
from .terminal import TerminalError
from . import timecalc

log = logging.getLogger(__name__)


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def _positive(text: str) -> int:
    value = _non_negative(text)
    if value == 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return value


def _color(text: str):
    try:
        return parse_color(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    epilog = "Controls: Esc or Ctrl+C quits. Colors: a basic color name or #RRGGBB."
    parser = argparse.ArgumentParser(
        prog="figtimer",
        description="Full-screen terminal countdown with big ASCII-art digits",
        epilog=epilog,
    )
    parser.add_argument("caption", nargs="?", default="", help="text shown above the timer")
    parser.add_argument("-H", "--hours", type=_non_negative, default=0)
    parser.add_argument("-m", "--minutes", type=_non_negative, default=0)
    parser.add_argument("-s", "--seconds", type=_non_negative, default=0)
    parser.add_argument("-k", "--keep-going", action="store_true", help="keep counting below zero")
    parser.add_argument("-z", "--leading-zeros", action="store_true", help="always show hours and minutes")
    parser.add_argument(
        "-b", "--blink-rate", type=_positive, default=DEFAULT_BLINK_RATE_MS, metavar="MS",
        help="blink interval once the countdown reaches zero",
    )
    parser.add_argument("-f", "--caption-font", action="store_true", help="draw the caption with the big font")
    parser.add_argument("-c", "--color", type=_color, default=None)
    parser.add_argument("--font", default=DEFAULT_FONT, help="figlet font name")
    parser.add_argument("--log-file", type=Path, default=None, help="write debug logging to this file")
    parser.add_argument("--version", action="version", version=f"figtimer {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> TimerConfig:
    kwargs = {}
    if args.color is not None:
        kwargs["style"] = args.color
    return TimerConfig(
        initial_seconds=timecalc.total_seconds(args.hours, args.minutes, args.seconds),
        allow_negative=args.keep_going,
        caption=args.caption,
        show_leading_zero_groups=args.leading_zeros,
        blink_rate_ms=args.blink_rate,
        use_font_for_caption=args.caption_font,
        font=args.font,
        **kwargs,
    )


def setup_logging(log_file: Optional[Path]) -> None:
    if log_file is None:
        if not debug_enabled():
            return
        log_file = get_log_path()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        print(f"figtimer: cannot open log file {log_file}: {exc}", file=sys.stderr)
        return
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("figtimer")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def main(argv=None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)
    setup_logging(args.log_file)

    config = config_from_args(args)
    log.debug("starting with %s", config)
    try:
        renderer = FontRenderer(config.font)
    except FontLoadError as exc:
        print(f"figtimer: {exc}", file=sys.stderr)
        return 1

    try:
        from .ui import run

        run(config, renderer)
    except TerminalError as exc:
        log.error("terminal failure: %s", exc)
        print(f"figtimer: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
