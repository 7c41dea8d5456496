"""Base of the grid-based solvers: points bucketed into label-sized cells."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from dynamis.geometry import LabelSize, Point, grid_cell


class GridSolver(ABC):
    """Keeps points in a grid of cells and per-row solution counters."""

    def __init__(self, size: LabelSize, width: float, height: float, param_k: int) -> None:
        self.size = size
        self.width = width
        self.height = height
        self.param_k = param_k
        self.points: list[Point] = []
        self.grid: list[list[list[Point]]] = []
        self.number_v = 0
        self.number_h = 0
        self.counter: list[list[int]] = []
        self.mark: list[int] = []
        self.sum_e = 0
        self.sum_o = 0
        self.mark_e = False

    def _fresh_counters(self) -> None:
        self.counter = [[0] * (self.param_k + 1) for _ in range(self.number_h)]
        self.mark = [-1] * self.number_h

    def set(self, points: Iterable[Point]) -> None:
        """Load the problem's points and build the grid."""
        self.points = list(points)
        self.number_v = math.ceil(self.width / self.size.width) + 1
        self.number_h = math.ceil(self.height / self.size.height) + 1
        self.grid = [[[] for _ in range(self.number_v)] for _ in range(self.number_h)]
        self._fresh_counters()
        for p in self.points:
            self._cell(p).insert(0, p)

    def cell_of(self, p: Point) -> tuple[int, int]:
        """Column and row of the cell holding p."""
        x, y = grid_cell(p, self.size)
        if not (0 <= x < self.number_v and 0 <= y < self.number_h):
            raise ValueError(f"point {p} lies outside the grid")
        return x, y

    def _cell(self, p: Point) -> list[Point]:
        x, y = self.cell_of(p)
        return self.grid[y][x]

    def add_point(self, p: Point) -> bool:
        """Add a point to the problem and its cell."""
        cell = self._cell(p)
        self.points.append(p)
        cell.insert(0, p)
        return True

    def delete_point(self, index: int) -> bool:
        """Remove the point at index from the problem and its cell."""
        p = self.points[index]
        cell = self._cell(p)
        cell[:] = [q for q in cell if q != p]
        del self.points[index]
        return True

    def init(self) -> None:
        """Choose the best counter of each row and compare even and odd rows."""
        for i, row in enumerate(self.counter):
            best = max(row, default=-1)
            if best > -1:
                index = row.index(best)
            else:
                index, best = -1, -1
            self.mark[i] = index
            if i % 2 == 0:
                self.sum_e += best
            else:
                self.sum_o += best
        self.mark_e = self.sum_e > self.sum_o

    def recompute(self) -> None:
        """Reset counters, marks and sums."""
        self._fresh_counters()
        self.sum_e = 0
        self.sum_o = 0

    def check(self) -> None:
        """Verify the grid and the row choices; raise AssertionError if broken."""
        seen = 0
        for row in self.grid:
            for cell in row:
                for p in cell:
                    if p not in self.points:
                        raise AssertionError(f"grid holds unknown point {p}")
                    seen += 1
        if seen != len(self.points):
            raise AssertionError("grid and point list differ in size")

        s_e = s_o = 0
        for i, row in enumerate(self.counter):
            if not 0 <= self.mark[i] < len(row):
                raise AssertionError(f"row {i} has no valid mark")
            chosen = row[self.mark[i]]
            if any(m > chosen for m in row):
                raise AssertionError(f"mark of row {i} is not a maximum")
            if i % 2 == 0:
                s_e += chosen
            else:
                s_o += chosen
        if s_e != self.sum_e:
            raise AssertionError("even sum is out of date")
        if s_o != self.sum_o:
            raise AssertionError("odd sum is out of date")
        if self.mark_e and self.sum_e < self.sum_o:
            raise AssertionError("even rows chosen although odd rows are better")
        if not self.mark_e and self.sum_e > self.sum_o:
            raise AssertionError("odd rows chosen although even rows are better")

    @abstractmethod
    def set_solution(self) -> None:
        """Build the solution from the chosen rows."""