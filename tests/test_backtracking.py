import pytest

from algoshelf.backtracking import (
    format_board,
    format_sudoku,
    graph_colorings,
    is_possible,
    knight_tour,
    minimax,
    n_queens,
    solve_rat_maze,
    solve_sudoku,
)

GRAPH = [
    [0, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 1, 0],
]

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

MAZE = [
    [1, 0, 1, 0],
    [1, 0, 1, 1],
    [1, 0, 0, 1],
    [1, 1, 1, 1],
]


def _is_proper(coloring, graph):
    return all(
        not graph[u][v] or coloring[u] != coloring[v]
        for u in range(len(graph))
        for v in range(len(graph))
    )


def test_colorings_are_proper_sorted_and_distinct():
    colorings = list(graph_colorings(GRAPH, 3))
    assert colorings
    assert all(_is_proper(c, GRAPH) for c in colorings)
    assert colorings == sorted(set(colorings))
    assert all(set(c) <= {1, 2, 3} for c in colorings)


def test_triangle_cannot_be_two_colored():
    assert list(graph_colorings(GRAPH, 2)) == []


def test_colorings_reject_non_square():
    with pytest.raises(ValueError):
        list(graph_colorings([[0, 1], [1]], 3))


def test_knight_tour_five_by_five_is_valid():
    board = knight_tour(5)
    assert board[0][0] == 0
    where = {value: (r, c) for r, row in enumerate(board) for c, value in enumerate(row)}
    assert sorted(where) == list(range(25))
    for move in range(1, 25):
        (r1, c1), (r2, c2) = where[move - 1], where[move]
        assert sorted((abs(r1 - r2), abs(c1 - c2))) == [1, 2]


@pytest.mark.parametrize("size", [2, 3, 4])
def test_knight_tour_impossible_boards(size):
    assert knight_tour(size) is None


def test_knight_tour_single_square():
    assert knight_tour(1) == [[0]]


def test_knight_tour_rejects_bad_size():
    with pytest.raises(ValueError):
        knight_tour(0)


def test_minimax_source_example():
    assert minimax([90, 23, 6, 33, 21, 65, 123, 34423], True) == 65


def test_minimax_two_leaves():
    assert minimax([3, 7], True) == 7
    assert minimax([3, 7], False) == 3


def test_minimax_single_leaf_and_empty():
    assert minimax([42]) == 42
    with pytest.raises(ValueError):
        minimax([])


def test_n_queens_four_has_two_solutions():
    assert len(list(n_queens(4))) == 2


@pytest.mark.parametrize("n", [4, 5, 6])
def test_n_queens_boards_are_non_attacking(n):
    for board in n_queens(n):
        queens = [(r, c) for r in range(n) for c in range(n) if board[r][c]]
        assert len(queens) == n
        assert len({r for r, _ in queens}) == n
        assert len({c for _, c in queens}) == n
        assert len({r - c for r, c in queens}) == n
        assert len({r + c for r, c in queens}) == n


def test_n_queens_small_impossible():
    assert list(n_queens(3)) == []


def test_format_board():
    assert format_board([[0, 1], [1, 0]]) == "0 1\n1 0"


def test_rat_maze_source_example():
    assert solve_rat_maze(MAZE) == [
        [1, 0, 0, 0],
        [1, 0, 0, 0],
        [1, 0, 0, 0],
        [1, 1, 1, 1],
    ]


def test_rat_maze_path_uses_open_cells():
    maze = [
        [1, 1, 1],
        [0, 0, 1],
        [0, 0, 1],
    ]
    path = solve_rat_maze(maze)
    cells = [(r, c) for r in range(3) for c in range(3) if path[r][c]]
    assert all(maze[r][c] == 1 for r, c in cells)
    assert path[0][0] == 1 and path[2][2] == 1
    assert len(cells) == 5


def test_rat_maze_blocked():
    assert solve_rat_maze([[1, 0], [0, 1]]) is None


def test_rat_maze_rejects_empty():
    with pytest.raises(ValueError):
        solve_rat_maze([])


def test_is_possible():
    assert is_possible(PUZZLE, 0, 2, 5) is False
    assert is_possible(PUZZLE, 0, 2, 8) is False
    assert is_possible(PUZZLE, 0, 2, 1) is True


def test_solve_sudoku_gives_valid_grid_keeping_givens():
    solved = solve_sudoku(PUZZLE)
    digits = set(range(1, 10))
    assert all(set(row) == digits for row in solved)
    assert all({row[c] for row in solved} == digits for c in range(9))
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solved[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)}
            assert box == digits
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c]:
                assert solved[r][c] == PUZZLE[r][c]
    assert PUZZLE[0][2] == 0


def test_solve_sudoku_unsolvable():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    assert solve_sudoku(grid) is None


def test_solve_sudoku_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9] * 8)


def test_format_sudoku_layout():
    text = format_sudoku(PUZZLE)
    lines = text.split("\n")
    assert lines[0] == "5 3 0 \t0 7 0 \t0 0 0 \t"
    assert lines[3] == ""
    assert lines[4] == "8 0 0 \t0 6 0 \t0 0 3 \t"
    assert text.endswith("\n\n")