"""Rectangle partitioning for the dashboard.

A ``Layout`` splits one ``Rect`` into consecutive sub-rectangles along a single
axis. Sizes come from a list of constraints: ``Length`` reserves a fixed number
of cells, ``Fill`` shares whatever is left in proportion to its weight. Every
step saturates at zero, so a canvas that is too small yields empty regions
rather than negative sizes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Rect:
    """Axis-aligned cell rectangle. ``right``/``bottom`` are exclusive."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, margin: int) -> Rect:
        """Shrink by ``margin`` on every side.

        Each axis saturates on its own: an axis narrower than ``2 * margin``
        collapses to zero size at its midpoint, so the result stays inside.
        """
        dx = min(margin, self.width // 2)
        dy = min(margin, self.height // 2)
        return Rect(
            self.x + dx,
            self.y + dy,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def contains(self, other: Rect) -> bool:
        return (
            other.left >= self.left
            and other.top >= self.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rect) -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


@dataclass(frozen=True)
class Length:
    """Fixed size in cells."""

    cells: int


@dataclass(frozen=True)
class Fill:
    """Proportional share of the space left after fixed constraints."""

    weight: int = 1


Constraint = Length | Fill


class Direction(enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def _distribute(total: int, weights: Sequence[int]) -> list[int]:
    """Split ``total`` cells by weight using the largest-remainder method.

    Leftover cells go to the largest fractional remainders; ties favour the
    larger weight, then the later slot.
    """
    weight_sum = sum(weights)
    if total <= 0 or weight_sum <= 0:
        return [0] * len(weights)

    sizes = [total * w // weight_sum for w in weights]
    remainders = [total * w % weight_sum for w in weights]
    leftover = total - sum(sizes)
    order = sorted(
        range(len(weights)),
        key=lambda i: (remainders[i], weights[i], i),
        reverse=True,
    )
    for i in order[:leftover]:
        sizes[i] += 1
    return sizes


@dataclass(frozen=True)
class Layout:
    direction: Direction
    constraints: tuple[Constraint, ...]
    margin: int = 0
    spacing: int = 0

    @classmethod
    def vertical(
        cls, constraints: Sequence[Constraint], *, margin: int = 0, spacing: int = 0
    ) -> Layout:
        return cls(Direction.VERTICAL, tuple(constraints), margin, spacing)

    @classmethod
    def horizontal(
        cls, constraints: Sequence[Constraint], *, margin: int = 0, spacing: int = 0
    ) -> Layout:
        return cls(Direction.HORIZONTAL, tuple(constraints), margin, spacing)

    def sizes(self, available: int) -> list[int]:
        """Solve the constraint list against ``available`` cells on the split axis."""
        count = len(self.constraints)
        if count == 0:
            return []

        remaining = max(0, available)
        remaining -= min(remaining, self.spacing * (count - 1))

        sizes = [0] * count
        fill_slots: list[int] = []
        for i, constraint in enumerate(self.constraints):
            if isinstance(constraint, Length):
                size = min(max(0, constraint.cells), remaining)
                sizes[i] = size
                remaining -= size
            else:
                fill_slots.append(i)

        shares = _distribute(
            remaining, [max(0, self.constraints[i].weight) for i in fill_slots]
        )
        for i, share in zip(fill_slots, shares):
            sizes[i] = share
        return sizes

    def split(self, area: Rect) -> list[Rect]:
        """Partition ``area`` into one region per constraint, in order."""
        inner = area.inner(self.margin)
        vertical = self.direction is Direction.VERTICAL
        available = inner.height if vertical else inner.width
        sizes = self.sizes(available)

        # Gaps shrink with the available space so regions never spill out.
        gap = self.spacing if len(sizes) < 2 else min(
            self.spacing, max(0, available) // (len(sizes) - 1)
        )

        regions: list[Rect] = []
        offset = inner.y if vertical else inner.x
        for i, size in enumerate(sizes):
            if vertical:
                regions.append(Rect(inner.x, offset, inner.width, size))
            else:
                regions.append(Rect(offset, inner.y, size, inner.height))
            offset += size
            if i < len(sizes) - 1:
                offset += gap
        return regions
