"""Braille bar graph and random sample series for the graph panels."""

from __future__ import annotations

import random
from typing import Sequence

from blockdash.colors import RGB, Gradient, Style
from blockdash.layout import Rect
from blockdash.terminal import Frame

BRAILLE_BASE = 0x2800
DOTS_PER_CELL = 4
SAMPLES_PER_CELL = 2

# Braille dot bits, listed bottom to top
_LEFT_DOTS = (0x40, 0x04, 0x02, 0x01)
_RIGHT_DOTS = (0x80, 0x20, 0x10, 0x08)


def sample_series(rng: random.Random, width: int) -> list[float]:
    """Two uniform samples in [0, 1) per terminal column."""
    return [rng.random() for _ in range(max(0, width) * SAMPLES_PER_CELL)]


def _dots(value: float, height: int) -> int:
    return round(min(max(value, 0.0), 1.0) * height * DOTS_PER_CELL)


def braille_cell(left: int, right: int) -> str:
    """Braille glyph with ``left``/``right`` dots (0-4) lit from the bottom."""
    bits = 0
    for i in range(min(max(left, 0), DOTS_PER_CELL)):
        bits |= _LEFT_DOTS[i]
    for i in range(min(max(right, 0), DOTS_PER_CELL)):
        bits |= _RIGHT_DOTS[i]
    return chr(BRAILLE_BASE + bits)


def render_bar_graph(
    frame: Frame,
    area: Rect,
    data: Sequence[float],
    gradient: Gradient,
    background: RGB,
) -> None:
    """Draw ``data`` as vertical bars, left to right, two bars per column."""
    if area.is_empty():
        return

    for col in range(area.width):
        i = col * SAMPLES_PER_CELL
        if i >= len(data):
            break
        left = data[i]
        right = data[i + 1] if i + 1 < len(data) else 0.0
        left_dots = _dots(left, area.height)
        right_dots = _dots(right, area.height)
        style = Style(gradient.at(max(left, right)), background)

        for row in range(area.height):
            floor = (area.height - 1 - row) * DOTS_PER_CELL
            cell_left = left_dots - floor
            cell_right = right_dots - floor
            if cell_left <= 0 and cell_right <= 0:
                continue
            frame.put(
                area.x + col, area.y + row, braille_cell(cell_left, cell_right), style
            )
