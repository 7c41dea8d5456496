import pytest

from dynamis.geometry import LabelSize, Point, grid_cell, independent_points, points_conflict
from dynamis.solver_line import LineSolver

SIZE = LabelSize(2.0, 2.0)


class _Line(LineSolver):
    def set(self, items):
        super().set(items)
        for p in self.items:
            self.lines[grid_cell(p, self.size)[1]].append(p)
        for row in range(self.number_h):
            self.get_mis_line(row)

    def get_mis_line(self, grid_y):
        self.solution[grid_y] = set()
        for p in sorted(self.lines[grid_y]):
            self.continue_mis_line(p, grid_y)

    def continue_mis_line(self, item, grid_y):
        if not any(points_conflict(item, q, self.size) for q in self.solution[grid_y]):
            self.solution[grid_y].add(item)

    def set_solution(self):
        self.chosen = sorted(
            p
            for i, s in enumerate(self.solution)
            if (i % 2 == 0) == self.mark_e
            for p in s
        )


POINTS = [Point(0.0, 0.0), Point(1.0, 0.0), Point(5.0, 0.5), Point(3.0, 2.0), Point(6.0, 4.0)]


def _solver(points=POINTS):
    solver = _Line(SIZE, 10.0, 10.0)
    solver.set(points)
    return solver


def test_abstract_base_cannot_be_built():
    with pytest.raises(TypeError):
        LineSolver(SIZE, 10.0, 10.0)


def test_containers_sized_per_line():
    solver = _solver()
    assert solver.number_h == 6
    assert len(solver.lines) == solver.number_h
    assert len(solver.solution) == solver.number_h


def test_init_sums_and_mark():
    solver = _solver()
    solver.init()
    total = sum(len(s) for s in solver.solution)
    assert solver.sum_e + solver.sum_o == total
    assert solver.mark_e == (solver.sum_e > solver.sum_o)
    solver.check()


def test_check_builds_independent_solution():
    solver = _solver()
    solver.init()
    solver.check()
    assert independent_points(solver.chosen, SIZE)
    assert set(solver.chosen) <= set(POINTS)


def test_single_row_prefers_even():
    solver = _solver([Point(0.0, 0.0), Point(5.0, 0.0)])
    solver.init()
    assert solver.sum_e == 2
    assert solver.sum_o == 0
    assert solver.mark_e is True


def test_check_detects_wrong_mark():
    solver = _solver([Point(0.0, 0.0), Point(5.0, 0.0)])
    solver.init()
    assert solver.mark_e is True
    assert solver.sum_e == 2
    solver.mark_e = False
    with pytest.raises(AssertionError):
        solver.check()
    assert solver.sum_e > solver.sum_o


def test_check_detects_stale_odd_sum():
    solver = _solver()
    solver.init()
    before = solver.sum_o
    assert solver.sum_e + before == sum(len(s) for s in solver.solution)
    solver.sum_o += 1
    with pytest.raises(AssertionError):
        solver.check()
    assert solver.sum_o == before + 1


def test_equal_sums_accept_either_mark():
    solver = _solver([])
    solver.init()
    solver.mark_e = True
    solver.check()
    assert solver.sum_e == solver.sum_o == 0
    assert solver.chosen == []