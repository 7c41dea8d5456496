"""Axis-parallel label geometry: conflicts, extendibility, range queries and grid helpers."""

from __future__ import annotations

import math
from bisect import bisect_left
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Sequence


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane, ordered lexicographically by x then y."""

    x: float
    y: float


@dataclass(frozen=True, order=True)
class Interval:
    """A horizontal interval [first, second) at a given height."""

    first: float
    second: float
    height: float


@dataclass(frozen=True)
class LabelPoint:
    """A label anchored at its lower-left corner with its own width."""

    x: float
    y: float
    width_single: float


@dataclass(frozen=True)
class LabelSize:
    """Width and height of a uniform label."""

    width: float
    height: float

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @property
    def half_height(self) -> float:
        return self.height / 2.0


def boxes_conflict(
    px: float, py: float, qx: float, qy: float, width: float, height: float
) -> bool:
    """Whether two boxes of the given size centred at p and q overlap."""
    hw = width / 2
    hh = height / 2
    if px + hw <= qx - hw or qx + hw <= px - hw:
        return False
    if py + hh <= qy - hh or qy + hh <= py - hh:
        return False
    return True


def points_conflict(p: Point, q: Point, size: LabelSize) -> bool:
    """Whether the labels of two points overlap."""
    if p.x + size.width <= q.x or q.x + size.width <= p.x:
        return False
    if p.y + size.height <= q.y or q.y + size.height <= p.y:
        return False
    return True


def intervals_conflict(p: Interval, q: Interval, size: LabelSize) -> bool:
    """Whether two interval labels overlap."""
    if p.second <= q.first or q.second <= p.first:
        return False
    if p.height + size.height <= q.height or q.height + size.height <= p.height:
        return False
    return True


def label_points_conflict(p: LabelPoint, q: LabelPoint, size: LabelSize) -> bool:
    """Whether two variable-width labels overlap."""
    if p.x + p.width_single <= q.x or q.x + q.width_single <= p.x:
        return False
    if p.y + size.height <= q.y or q.y + size.height <= p.y:
        return False
    return True


def conflicting_point(
    solution: Iterable[Point], q: Point, size: LabelSize
) -> Point | None:
    """Return the first point of the solution (other than q) in conflict with q."""
    for p in solution:
        if p == q:
            continue
        if points_conflict(p, q, size):
            return p
    return None


def extendible(
    solution: Iterable[Point], q: Point, width: float, height: float
) -> bool:
    """Whether q can be added to the solution without a conflict or duplicate."""
    for p in solution:
        if p == q:
            return False
        if boxes_conflict(p.x, p.y, q.x, q.y, width, height):
            return False
    return True


def extendible_ordered_points(
    solution: Sequence[Point], q: Point, size: LabelSize
) -> bool:
    """Check q against its ordered neighbours in a sorted solution of one line."""
    pos = bisect_left(solution, q)
    if pos < len(solution) and points_conflict(q, solution[pos], size):
        return False
    return not any(
        points_conflict(q, solution[i], size) for i in range(max(pos - 2, 0), pos)
    )


def extendible_ordered_intervals(
    solution: Sequence[Interval], q: Interval, size: LabelSize
) -> bool:
    """Check q against the intervals it may overlap in a sorted solution."""
    pos = bisect_left(solution, q)
    for other in solution[pos:]:
        if other.first >= q.second:
            break
        if intervals_conflict(q, other, size):
            return False
    if pos > 0 and intervals_conflict(q, solution[pos - 1], size):
        return False
    return True


def independent_points(solution: Iterable[Point], size: LabelSize) -> bool:
    """Whether no two distinct points of the solution conflict."""
    return not any(
        p != q and points_conflict(p, q, size)
        for p, q in combinations(list(solution), 2)
    )


def independent_intervals(solution: Iterable[Interval], size: LabelSize) -> bool:
    """Whether no two intervals of the solution conflict."""
    return not any(
        intervals_conflict(p, q, size) for p, q in combinations(list(solution), 2)
    )


def _in_box(
    points: Iterable[Point], left: float, bottom: float, right: float, top: float
) -> list[Point]:
    return [p for p in points if left <= p.x <= right and bottom <= p.y <= top]


def range_search(points: Iterable[Point], center: Point, ratio: float) -> list[Point]:
    """Points in the closed square of half side ``ratio`` around center."""
    return _in_box(
        points, center.x - ratio, center.y - ratio, center.x + ratio, center.y + ratio
    )


def range_search_neighbor(
    points: Iterable[Point], center: Point, size: LabelSize, epsilon: float
) -> list[Point]:
    """Points whose labels may conflict with the label of center."""
    reach = size.height - epsilon
    return _in_box(
        points, center.x - reach, center.y - reach, center.x + reach, center.y + reach
    )


def range_search_label(
    points: Iterable[Point], label: LabelPoint, size: LabelSize, epsilon: float
) -> list[Point]:
    """Points strictly inside the area covered by a variable-width label."""
    return _in_box(
        points,
        label.x + epsilon,
        label.y + epsilon,
        label.x + label.width_single - epsilon,
        label.y + size.height - epsilon,
    )


def points_in_box(points: Iterable[Point], width: float, height: float) -> list[Point]:
    """Points in the box [-width, width] x [-height, height]."""
    return _in_box(points, -width, -height, width, height)


def get_index(k: int, upper: int, below: int) -> int:
    """Encode a pair of values in [0, k] as one index."""
    return upper * (k + 1) + below


def get_kmal(k: int, value: int) -> tuple[int, int]:
    """Decode an index made by get_index back into its pair."""
    return divmod(value, k + 1)


def get_grid(p: Point, width: int, height: int) -> tuple[int, int]:
    """Grid cell of a point for integer cell sizes."""
    x = math.ceil((p.x - int(width / 2)) / width)
    y = math.ceil((p.y - int(height / 2)) / height)
    return x, y


def grid_cell(p: Point, size: LabelSize) -> tuple[int, int]:
    """Grid cell (column, row) of a point for the label size."""
    x = math.ceil((p.x - size.half_width) / size.width)
    y = math.ceil((p.y - size.half_height) / size.height)
    return x, y


def fractional_less(a: float, b: float, label_height: float) -> bool:
    """Order values by their fractional position within label rows, with tolerance."""
    frac_a, _ = math.modf(a / label_height)
    frac_b, _ = math.modf(b / label_height)
    return (frac_a - frac_b) < -0.00003


def get_file_name(path: str) -> str:
    """The part of a path after the last slash or backslash."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def comp_len_less(a: LabelPoint, b: LabelPoint) -> bool:
    """Whether label a is narrower than label b."""
    return a.width_single < b.width_single