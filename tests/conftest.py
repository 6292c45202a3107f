from typing import List, Optional

import pytest

from figtimer.font import RenderError


class FakeTerminal:
    def __init__(self) -> None:
        self.ops: List[tuple] = []
        self.cursor = (0, 0)
        self.cleanups = 0

    def init(self) -> "FakeTerminal":
        self.ops.append(("init",))
        return self

    def cleanup(self) -> None:
        self.cleanups += 1

    def move_cursor(self, col: int, row: int) -> None:
        self.cursor = (col, row)
        self.ops.append(("move", col, row))

    def write_styled(self, text: str, style=None) -> None:
        self.ops.append(("write", text))

    def flush(self) -> None:
        self.ops.append(("flush",))

    def writes(self) -> List[tuple]:
        result = []
        row = None
        for op in self.ops:
            if op[0] == "move":
                row = op[2]
            elif op[0] == "write":
                result.append((row, op[1]))
        return result

    def reset(self) -> None:
        self.ops.clear()


class FakeRenderer:
    def __init__(self, fail_on: Optional[str] = None) -> None:
        self.fail_on = fail_on
        self.calls: List[str] = []

    def render_frame(self, text: str) -> List[str]:
        self.calls.append(text)
        if self.fail_on is not None and self.fail_on in text:
            raise RenderError(f"cannot render {text!r}")
        return ["[" + text + "]", ""]


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()
