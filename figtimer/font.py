from typing import List, Union

import pyfiglet

from .config import DEFAULT_FONT

RENDER_WIDTH = 1000


class FontLoadError(Exception):
    pass


class RenderError(Exception):
    pass


def to_frame(output: Union[str, bytes]) -> List[str]:
    if isinstance(output, bytes):
        try:
            output = output.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RenderError(f"renderer produced invalid UTF-8: {exc}") from exc
    return output.splitlines()


class FontRenderer:
    def __init__(self, font: str = DEFAULT_FONT, width: int = RENDER_WIDTH) -> None:
        self.font = font
        try:
            self._figlet = pyfiglet.Figlet(font=font, width=width)
        except pyfiglet.FigletError as exc:
            raise FontLoadError(f"cannot load font {font!r}: {exc}") from exc

    def render(self, text: str) -> str:
        try:
            return str(self._figlet.renderText(text))
        except pyfiglet.FigletError as exc:
            raise RenderError(f"cannot render {text!r}: {exc}") from exc

    def render_frame(self, text: str) -> List[str]:
        return to_frame(self.render(text))
