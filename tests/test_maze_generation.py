import itertools
import random

import pytest

from audio_maze.exceptions import InvalidConfiguration
from audio_maze.maze import Grid, MazeGenerator, Point, Terrain, generate_maze
from audio_maze.rng import shuffled


def assert_perfect_maze(grid):
    cells = set(grid.path_cells())
    # Each 4-adjacent pair of PATH cells is one edge of the induced graph
    edges = sum(1 for p in cells for n in (p.offset(1, 0), p.offset(0, 1)) if n in cells)
    reachable = grid.distances_from(grid.start)

    # Connected, and |E| == |V| - 1, so the graph is a tree
    assert len(reachable) == len(cells)
    assert edges == len(cells) - 1


@pytest.mark.parametrize("size", [5, 7, 9, 13, 21])
@pytest.mark.parametrize("seed", range(10))
def test_generated_mazes_are_perfect(size, seed):
    grid = MazeGenerator().generate(size, random.Random(seed))
    assert_perfect_maze(grid)


@pytest.mark.parametrize("seed", range(20))
def test_goal_reachable_and_landmarks_open(seed):
    grid = generate_maze(13, random.Random(seed))

    assert grid.get(grid.start) is Terrain.PATH
    assert grid.get(grid.goal) is Terrain.PATH
    assert grid.goal == Point(11, 11)
    route = grid.shortest_path(grid.start, grid.goal)
    assert route is not None
    assert route[0] == grid.start and route[-1] == grid.goal


def test_borders_are_walls_and_every_room_is_carved():
    grid = generate_maze(11, random.Random(3))
    for i in range(grid.size):
        for p in (Point(i, 0), Point(i, grid.size - 1), Point(0, i), Point(grid.size - 1, i)):
            assert grid.get(p) is Terrain.WALL

    for x, y in itertools.product(range(1, grid.size, 2), repeat=2):
        assert grid.is_path(Point(x, y)), f"room ({x},{y}) not carved"
    # Cells with both coordinates even are lattice posts and never carved
    for x, y in itertools.product(range(0, grid.size, 2), repeat=2):
        assert not grid.is_path(Point(x, y))


def test_smallest_maze_shape():
    grid = generate_maze(5, random.Random(0))
    # Four rooms joined by exactly three corridor cells
    assert len(grid.path_cells()) == 7
    assert_perfect_maze(grid)


def test_same_seed_same_maze():
    a = generate_maze(21, random.Random(1234))
    b = generate_maze(21, random.Random(1234))
    assert a.snapshot() == b.snapshot()
    assert a.to_str_lines() == b.to_str_lines()


def test_different_seeds_change_layout():
    layouts = {generate_maze(21, random.Random(seed)).snapshot() for seed in range(5)}
    assert len(layouts) > 1


def test_large_maze_does_not_hit_recursion_limit():
    # 100x100 rooms: far deeper than Python's default recursion limit
    grid = generate_maze(201, random.Random(9))
    assert grid.is_reachable(grid.start, grid.goal)
    assert len(grid.path_cells()) == 2 * 100 * 100 - 1


def test_default_rng_is_used_when_none_given():
    grid = MazeGenerator().generate(9)
    assert_perfect_maze(grid)


@pytest.mark.parametrize("size", [4, 12, 3, 1, 0, -5])
def test_invalid_sizes_rejected(size):
    with pytest.raises(InvalidConfiguration):
        generate_maze(size, random.Random(0))


@pytest.mark.parametrize("size", ["7", 7.0, True, None])
def test_non_integer_sizes_rejected(size):
    with pytest.raises(InvalidConfiguration):
        generate_maze(size)


def test_shuffle_is_a_uniform_permutation():
    rng = random.Random(2024)
    counts = {}
    for _ in range(2400):
        perm = tuple(shuffled([0, 1, 2, 3], rng))
        counts[perm] = counts.get(perm, 0) + 1

    assert set(counts) == set(itertools.permutations(range(4)))
    # Expected 100 each; a comparator-sort shuffle is visibly lopsided
    assert min(counts.values()) > 50
    assert max(counts.values()) < 150


def test_shuffle_leaves_input_untouched():
    items = [1, 2, 3]
    out = shuffled(items, random.Random(5))
    assert items == [1, 2, 3]
    assert sorted(out) == items


class TestGrid:
    LINES = [
        "#####",
        "#...#",
        "###.#",
        "###.#",
        "#####",
    ]

    def test_from_lines_round_trip(self):
        grid = Grid.from_lines(self.LINES)
        assert grid.size == 5
        assert grid.to_str_lines() == self.LINES
        assert str(grid) == "\n".join(self.LINES)

    def test_overlay_in_dump(self):
        grid = Grid.from_lines(self.LINES)
        lines = grid.to_str_lines({Point(1, 1): "@"})
        assert lines[1] == "#@..#"

    def test_bounds_are_safe_for_queries(self):
        grid = Grid.from_lines(self.LINES)
        assert grid.is_path(Point(-1, 1)) is False
        assert grid.is_path(Point(5, 1)) is False
        with pytest.raises(IndexError):
            grid.get(Point(0, 5))
        with pytest.raises(IndexError):
            grid.set(Point(7, 0), Terrain.PATH)

    def test_neighbors_edge_safety(self):
        grid = Grid.from_lines(self.LINES)
        assert set(grid.neighbors_4(Point(0, 0))) == {Point(1, 0), Point(0, 1)}

    def test_shortest_path_follows_corridor(self):
        grid = Grid.from_lines(self.LINES)
        route = grid.shortest_path(grid.start, grid.goal)
        assert route == [Point(1, 1), Point(2, 1), Point(3, 1), Point(3, 2), Point(3, 3)]
        assert grid.shortest_path(grid.start, Point(0, 0)) is None

    def test_rejects_bad_input(self):
        with pytest.raises(ValueError):
            Grid.from_lines(["###", "#.#"])
        with pytest.raises(ValueError):
            Grid.from_lines(["###", "#x#", "###"])
        with pytest.raises(ValueError):
            Grid(2)
