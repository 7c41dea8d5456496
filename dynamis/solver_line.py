"""Base of the stabbing-line solvers: one maximum independent set per row."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Iterable

from dynamis.geometry import LabelSize


class LineSolver(ABC):
    """Keeps the items of each horizontal line and a solution per line."""

    def __init__(self, size: LabelSize, width: float, height: float) -> None:
        self.size = size
        self.width = width
        self.height = height
        self.items: list[Any] = []
        self.lines: list[Any] = []
        self.solution: list[Any] = []
        self.number_h = 0
        self.sum_e = 0
        self.sum_o = 0
        self.mark_e = False

    def set(self, items: Iterable[Any]) -> None:
        """Load the problem's items and size the per-line containers."""
        self.items = list(items)
        self.number_h = math.ceil(self.height / self.size.height) + 1
        self.lines = [[] for _ in range(self.number_h)]
        self.solution = [set() for _ in range(self.number_h)]

    def _parity_sums(self) -> tuple[int, int]:
        even = sum(len(s) for s in self.solution[0:self.number_h:2])
        odd = sum(len(s) for s in self.solution[1:self.number_h:2])
        return even, odd

    def init(self) -> None:
        """Add up solution sizes of even and odd lines and pick the larger."""
        even, odd = self._parity_sums()
        self.sum_e += even
        self.sum_o += odd
        self.mark_e = self.sum_e > self.sum_o

    def check(self) -> None:
        """Verify the line sums and choice; raise AssertionError if broken."""
        self.set_solution()
        even, odd = self._parity_sums()
        if even != self.sum_e:
            raise AssertionError("even sum is out of date")
        if odd != self.sum_o:
            raise AssertionError("odd sum is out of date")
        if self.sum_e > self.sum_o:
            if not self.mark_e:
                raise AssertionError("odd lines chosen although even lines are better")
        elif self.sum_e < self.sum_o and self.mark_e:
            raise AssertionError("even lines chosen although odd lines are better")

    @abstractmethod
    def get_mis_line(self, grid_y: int) -> None:
        """Compute the independent set of one line from scratch."""

    @abstractmethod
    def continue_mis_line(self, item: Any, grid_y: int) -> None:
        """Extend the independent set of one line with an item."""

    @abstractmethod
    def set_solution(self) -> None:
        """Build the solution from the chosen lines."""