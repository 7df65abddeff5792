"""Terminal dashboard demo: CPU/GPU/Disk/Memory panels with random bar graphs.

The layout is solved from scratch every frame, so resizing the terminal just
changes the next frame. Press Esc, q or Ctrl+C to quit.

Usage:
    blockdash
    blockdash --seed 42 --config path/to/config.toml
"""

from __future__ import annotations

import argparse
import copy
import curses
import locale
import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from blockdash.bargraph import render_bar_graph, sample_series
from blockdash.colors import (
    SLATE_100,
    SLATE_300,
    SLATE_800,
    SLATE_900,
    Gradient,
    Style,
    gradient,
)
from blockdash.config import DEFAULT_CONFIG, dump_default_config, load_config
from blockdash.events import ESC, Event, KeyEvent, KeyEventKind, Modifiers
from blockdash.layout import Fill, Layout, Length, Rect
from blockdash.log import init_logging
from blockdash.terminal import Frame, Terminal

log = logging.getLogger(__name__)

# ── Styles ─────────────────────────────────────────────────────────────────

FULL_BLOCK = "█"

BACKGROUND = Style(SLATE_300, SLATE_800)
HEADER = Style(SLATE_900, SLATE_100)
PANEL_TITLE = Style(SLATE_900, SLATE_300)
PANEL_BORDER = Style(SLATE_300, SLATE_900)
PANEL_BODY = Style(SLATE_300, SLATE_900)

GRAPH_PANELS = ("cpu", "gpu", "memory")


# ── Layout ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DashboardLayout:
    """Regions for one frame. ``bottom`` is solved but left empty."""

    header: Rect
    cpu: Rect
    gpu: Rect
    disk: Rect
    memory: Rect
    bottom: Rect

    def panels(self) -> dict[str, Rect]:
        return {
            "CPU": self.cpu,
            "GPU": self.gpu,
            "Disk": self.disk,
            "Memory": self.memory,
        }


def compute_layout(
    area: Rect, margin: int = 4, spacing: int = 1, panel_spacing: int = 2
) -> DashboardLayout:
    header, top, mid, bottom = Layout.vertical(
        [Length(1), Fill(1), Fill(2), Fill(1)], margin=margin, spacing=spacing
    ).split(area)
    cpu, gpu = Layout.horizontal([Fill(1), Fill(1)], spacing=panel_spacing).split(top)
    disk, memory = Layout.horizontal(
        [Fill(1), Fill(2)], spacing=panel_spacing
    ).split(mid)
    return DashboardLayout(header, cpu, gpu, disk, memory, bottom)


def panel_inner(area: Rect) -> Rect:
    """Area strictly below a panel's top border."""
    if area.height == 0:
        return area
    return Rect(area.x, area.y + 1, area.width, area.height - 1)


# ── Panel renderers ────────────────────────────────────────────────────────


def draw_header(frame: Frame, area: Rect, text: str) -> None:
    if area.is_empty():
        return
    frame.fill(area, HEADER)
    frame.put(area.x, area.y, text[: area.width], HEADER)


def draw_panel(frame: Frame, area: Rect, name: str) -> Rect:
    """Draw a top-bordered, centre-titled panel and return its interior."""
    if area.is_empty():
        return panel_inner(area)
    frame.fill(area, PANEL_BODY)
    frame.fill(Rect(area.x, area.y, area.width, 1), PANEL_BORDER, FULL_BLOCK)
    title = name[: area.width]
    frame.put(area.x + (area.width - len(title)) // 2, area.y, title, PANEL_TITLE)
    return panel_inner(area)


def draw_graph_panel(
    frame: Frame, area: Rect, name: str, grad: Gradient, rng: random.Random
) -> list[float]:
    """Draw a panel filled with a fresh random bar graph; returns the samples."""
    inner = draw_panel(frame, area, name)
    data = sample_series(rng, inner.width)
    render_bar_graph(frame, inner, data, grad, SLATE_900)
    return data


def render(
    frame: Frame,
    config: dict[str, Any],
    rng: random.Random,
    gradients: dict[str, Gradient],
) -> DashboardLayout:
    frame.fill(frame.area, BACKGROUND)
    layout = compute_layout(
        frame.area,
        margin=config["margin"],
        spacing=config["spacing"],
        panel_spacing=config["panel_spacing"],
    )
    draw_header(frame, layout.header, config["title"])
    draw_graph_panel(frame, layout.cpu, "CPU", gradients["cpu"], rng)
    draw_graph_panel(frame, layout.gpu, "GPU", gradients["gpu"], rng)
    draw_panel(frame, layout.disk, "Disk")
    draw_graph_panel(frame, layout.memory, "Memory", gradients["memory"], rng)
    return layout


# ── Application ────────────────────────────────────────────────────────────


class App:
    """Owns the ``running`` flag and alternates between drawing and reading input."""

    def __init__(
        self, config: dict[str, Any] | None = None, rng: random.Random | None = None
    ) -> None:
        self.config = config if config is not None else copy.deepcopy(DEFAULT_CONFIG)
        self.running = True
        self.rng = rng if rng is not None else random.Random(self.config.get("seed"))
        names: dict[str, str] = self.config["gradients"]
        self.gradients = {panel: gradient(names[panel]) for panel in GRAPH_PANELS}

    def run(self, terminal: Terminal) -> None:
        log.info("dashboard started")
        while self.running:
            terminal.draw(self.render)
            self.handle_event(terminal.read_event())
        log.info("dashboard stopped")

    def render(self, frame: Frame) -> None:
        render(frame, self.config, self.rng, self.gradients)

    def handle_event(self, event: Event) -> None:
        # Only presses count; some terminals also report releases
        if isinstance(event, KeyEvent) and event.kind is KeyEventKind.PRESS:
            self.on_key_event(event)

    def on_key_event(self, key: KeyEvent) -> None:
        if key.code == ESC:
            self.quit()
        elif key.code in ("q", "Q") and not key.modifiers & (
            Modifiers.CONTROL | Modifiers.ALT
        ):
            self.quit()
        elif key.code in ("c", "C") and Modifiers.CONTROL in key.modifiers:
            self.quit()

    def quit(self) -> None:
        if self.running:
            log.info("quit requested")
        self.running = False


def _run(stdscr: curses.window, app: App) -> None:
    terminal = Terminal(stdscr, mouse_capture=bool(app.config["mouse_capture"]))
    app.run(terminal)


# ── CLI entry point ────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Terminal dashboard demo with random bar graphs.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help="Path to TOML config file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random graph data (default: unseeded)",
    )
    parser.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the default configuration as TOML and exit",
    )
    args = parser.parse_args(argv)

    if args.dump_config:
        print(dump_default_config(), end="")
        return

    config = load_config(args.config)
    if args.seed is not None:
        config["seed"] = args.seed
    try:
        init_logging(config)
    except OSError as e:
        print(f"blockdash: cannot open log file: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    try:
        app = App(config)
    except ValueError as e:
        print(f"blockdash: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    # ncurses needs the locale set to draw block and braille glyphs
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        log.warning("could not set locale from environment: %s", e)

    try:
        curses.wrapper(_run, app)
    except curses.error as e:
        log.exception("terminal failure")
        print(f"blockdash: terminal error: {e}", file=sys.stderr)
        raise SystemExit(1) from e
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
