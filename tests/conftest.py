"""Shared fixtures: an in-memory frame that records every drawn cell."""

from __future__ import annotations

from typing import Callable

import pytest

from blockdash.colors import Style
from blockdash.layout import Rect


class RecordingFrame:
    def __init__(self, width: int, height: int) -> None:
        self.area = Rect(0, 0, width, height)
        self.cells: dict[tuple[int, int], tuple[str, Style]] = {}

    def fill(self, rect: Rect, style: Style, char: str = " ") -> None:
        for y in range(max(rect.top, 0), min(rect.bottom, self.area.bottom)):
            for x in range(max(rect.left, 0), min(rect.right, self.area.right)):
                self.cells[(x, y)] = (char, style)

    def put(self, x: int, y: int, text: str, style: Style) -> None:
        for i, ch in enumerate(text):
            if 0 <= x + i < self.area.right and 0 <= y < self.area.bottom:
                self.cells[(x + i, y)] = (ch, style)

    def char(self, x: int, y: int) -> str:
        return self.cells.get((x, y), (" ", None))[0]

    def style(self, x: int, y: int) -> Style | None:
        cell = self.cells.get((x, y))
        return cell[1] if cell else None

    def row_text(self, y: int) -> str:
        return "".join(self.char(x, y) for x in range(self.area.width))


@pytest.fixture
def make_frame() -> Callable[[int, int], RecordingFrame]:
    return RecordingFrame
