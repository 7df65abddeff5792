"""Colour palette, terminal colour quantisation and gradient presets."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import matplotlib

RGB = tuple[int, int, int]

# ── Tailwind slate palette ─────────────────────────────────────────────────

SLATE_100: RGB = (0xF1, 0xF5, 0xF9)
SLATE_300: RGB = (0xCB, 0xD5, 0xE1)
SLATE_800: RGB = (0x1E, 0x29, 0x3B)
SLATE_900: RGB = (0x0F, 0x17, 0x2A)


@dataclass(frozen=True)
class Style:
    fg: RGB
    bg: RGB


# ── Quantisation ───────────────────────────────────────────────────────────

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

# Order matches curses.COLOR_BLACK .. curses.COLOR_WHITE
_BASIC: tuple[RGB, ...] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
)


def _dist2(a: RGB, b: RGB) -> int:
    return sum((x - y) ** 2 for x, y in zip(a, b))


def _cube_index(v: int) -> int:
    return min(range(6), key=lambda i: abs(_CUBE_LEVELS[i] - v))


@lru_cache(maxsize=1024)
def rgb_to_ansi256(rgb: RGB) -> int:
    """Nearest xterm-256 colour: either the 6x6x6 cube or the grayscale ramp."""
    r, g, b = rgb
    ri, gi, bi = _cube_index(r), _cube_index(g), _cube_index(b)
    cube_rgb = (_CUBE_LEVELS[ri], _CUBE_LEVELS[gi], _CUBE_LEVELS[bi])
    cube = 16 + 36 * ri + 6 * gi + bi

    avg = (r + g + b) // 3
    gray_i = min(23, max(0, (avg - 8 + 5) // 10))
    gray_v = 8 + 10 * gray_i
    gray = 232 + gray_i

    if _dist2(rgb, (gray_v, gray_v, gray_v)) < _dist2(rgb, cube_rgb):
        return gray
    return cube


@lru_cache(maxsize=1024)
def rgb_to_basic(rgb: RGB) -> int:
    """Nearest of the eight basic curses colours."""
    return min(range(len(_BASIC)), key=lambda i: _dist2(rgb, _BASIC[i]))


# ── Gradients ──────────────────────────────────────────────────────────────

# Preset names accepted in config → matplotlib colormap names
PRESETS: dict[str, str] = {
    "plasma": "plasma",
    "blues": "Blues",
    "viridis": "viridis",
    "inferno": "inferno",
    "magma": "magma",
    "greens": "Greens",
    "reds": "Reds",
}


class Gradient:
    """Continuous colour mapping over [0, 1] backed by a matplotlib colormap."""

    def __init__(self, name: str, steps: int = 64) -> None:
        cmap_name = PRESETS.get(name.lower(), name)
        try:
            cmap = matplotlib.colormaps[cmap_name]
        except KeyError as e:
            raise ValueError(f"unknown gradient preset: {name!r}") from e
        self.name = name
        # Sampled once; terminals can't show more distinct shades per panel anyway
        self._table: list[RGB] = [
            _to_rgb(cmap(i / (steps - 1))) for i in range(steps)
        ]

    def at(self, value: float) -> RGB:
        v = min(max(value, 0.0), 1.0)
        return self._table[round(v * (len(self._table) - 1))]

    def __repr__(self) -> str:
        return f"Gradient({self.name!r})"


def _to_rgb(rgba: tuple[float, float, float, float]) -> RGB:
    return (
        round(rgba[0] * 255),
        round(rgba[1] * 255),
        round(rgba[2] * 255),
    )


@lru_cache(maxsize=None)
def gradient(name: str) -> Gradient:
    """Return the (cached) gradient for a preset or matplotlib colormap name."""
    return Gradient(name)
