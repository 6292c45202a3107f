import unicodedata
from typing import List, Optional, Sequence, Tuple

from .config import Style


def char_width(ch: str) -> int:
    if unicodedata.combining(ch) or unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def clip_cells(text: str, cells: int) -> Tuple[str, int]:
    width = 0
    for index, ch in enumerate(text):
        w = char_width(ch)
        if width + w > cells:
            return text[:index], width
        width += w
    return text, width


def is_blank(line: str) -> bool:
    return not line.strip()


def compact(lines: Sequence[str]) -> List[str]:
    return [line for line in lines if not is_blank(line)]


class DiffPainter:
    def __init__(self, terminal, origin_row: int = 0, style: Optional[Style] = None) -> None:
        self.terminal = terminal
        self.origin_row = origin_row
        self.style = style
        self.previous: List[str] = []

    @property
    def height(self) -> int:
        return len(self.previous)

    def paint(self, lines: Sequence[str]) -> bool:
        if compact(lines) == self.previous:
            return False

        terminal = self.terminal
        for i, line in enumerate(self.previous):
            terminal.move_cursor(0, self.origin_row + i)
            terminal.write_styled(" " * display_width(line))

        painted = []
        skipped = 0
        for i, line in enumerate(lines):
            if is_blank(line):
                skipped += 1
                continue
            terminal.move_cursor(0, self.origin_row + i - skipped)
            terminal.write_styled(line, self.style)
            painted.append(line)

        self.previous = painted
        terminal.flush()
        return True
