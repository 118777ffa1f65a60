import pytest

from halfblock.grid import Array2D, Vec2i


def test_size_reports_dimensions():
    grid = Array2D(3, 2)
    assert grid.size() == Vec2i(3, 2)


def test_empty_grid_has_zero_size():
    assert Array2D().size() == Vec2i(0, 0)


def test_cells_start_with_fill():
    grid = Array2D(2, 2, fill="x")
    assert all(grid.at(x, y) == "x" for x in range(2) for y in range(2))


def test_set_then_at_round_trip():
    grid = Array2D(4, 3)
    grid.set(3, 2, "corner")
    assert grid.at(3, 2) == "corner"
    assert grid.at(2, 3 - 1) is None


@pytest.mark.parametrize("x,y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_at_out_of_region_raises(x, y):
    grid = Array2D(3, 2)
    with pytest.raises(IndexError, match="Out of region exception"):
        grid.at(x, y)


def test_set_out_of_region_raises():
    grid = Array2D(1, 1)
    with pytest.raises(IndexError, match="Out of region exception"):
        grid.set(1, 0, "v")


def test_resize_keeps_overlap_and_fills_new_cells():
    grid = Array2D(2, 2, fill=".")
    grid.set(0, 0, "a")
    grid.set(1, 1, "b")
    grid.resize(3, 1)
    assert grid.size() == Vec2i(3, 1)
    assert [grid.at(x, 0) for x in range(3)] == ["a", ".", "."]
    with pytest.raises(IndexError):
        grid.at(1, 1)


def test_resize_from_empty():
    grid = Array2D(fill=".")
    grid.resize(2, 2)
    assert grid.at(1, 1) == "."


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Array2D(-1, 2)