from estudos.maze import Point, solve_maze

MAZE = [
    "XXXXXXXX X",
    "X      X X",
    "X      X X",
    "X XXXXXX X",
    "X        X",
    "X XXXXXXXX",
]


def test_solve_maze():
    start = Point(8, 0)
    end = Point(1, 5)
    solution = [
        start,
        Point(8, 1),
        Point(8, 2),
        Point(8, 3),
        Point(8, 4),
        Point(7, 4),
        Point(6, 4),
        Point(5, 4),
        Point(4, 4),
        Point(3, 4),
        Point(2, 4),
        Point(1, 4),
        end,
    ]
    assert solve_maze(MAZE, "X", start, end) == solution


def test_unreachable_end():
    maze = ["X X", "XXX", "X X"]
    assert solve_maze(maze, "X", Point(1, 0), Point(1, 2)) == []


def test_start_on_wall():
    assert solve_maze(MAZE, "X", Point(0, 0), Point(1, 5)) == []


def test_start_equals_end():
    assert solve_maze(MAZE, "X", Point(8, 0), Point(8, 0)) == [Point(8, 0)]