"""Backtracking searches: graph colouring, knight's tour, minimax, N-queens,
rat in a maze and sudoku."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Grid = list[list[int]]

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def _require_square(matrix: Sequence[Sequence[int]], name: str) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError(f"{name} must be a square matrix")
    return size


def graph_colorings(
    adjacency: Sequence[Sequence[int]], colors: int
) -> Iterator[tuple[int, ...]]:
    """Yield every assignment of colours 1..colors where adjacent vertices differ.

    Assignments come in lexicographic order, vertex 0 varying slowest.
    """
    vertex_count = _require_square(adjacency, "adjacency")
    assignment = [0] * vertex_count

    def is_safe(vertex: int, color: int) -> bool:
        return not any(
            edge and color == assigned
            for edge, assigned in zip(adjacency[vertex], assignment)
        )

    def place(vertex: int) -> Iterator[tuple[int, ...]]:
        if vertex == vertex_count:
            yield tuple(assignment)
            return
        for color in range(1, colors + 1):
            if is_safe(vertex, color):
                assignment[vertex] = color
                yield from place(vertex + 1)
                assignment[vertex] = 0

    yield from place(0)


def knight_tour(size: int = 8) -> Grid | None:
    """Find a knight's tour starting in the top-left corner.

    Returns a board holding the move number of each square, or None when the
    search finds no tour.
    """
    if size < 1:
        raise ValueError("board size must be positive")
    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    last_move = size * size

    def extend(x: int, y: int, move: int) -> bool:
        if move == last_move:
            return True
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[nx][ny] == -1:
                board[nx][ny] = move
                if extend(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if extend(0, 0, 1) else None


def minimax(scores: Sequence[int], maximizing: bool = True) -> int:
    """Return the optimal value of a complete binary game tree whose leaves are scores."""
    leaves = list(scores)
    if not leaves:
        raise ValueError("scores must not be empty")
    height = len(leaves).bit_length() - 1

    def value(depth: int, index: int, is_max: bool) -> int:
        if depth == height:
            return leaves[index]
        left = value(depth + 1, index * 2, not is_max)
        right = value(depth + 1, index * 2 + 1, not is_max)
        return max(left, right) if is_max else min(left, right)

    return value(0, 0, maximizing)


def n_queens(n: int) -> Iterator[Grid]:
    """Yield every placement of n non-attacking queens as a 0/1 board.

    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_falling: set[int] = set()
    used_rising: set[int] = set()

    def place(col: int) -> Iterator[Grid]:
        if col >= n:
            yield [row[:] for row in board]
            return
        for row in range(n):
            if row in used_rows or row - col in used_falling or row + col in used_rising:
                continue
            board[row][col] = 1
            used_rows.add(row)
            used_falling.add(row - col)
            used_rising.add(row + col)
            yield from place(col + 1)
            board[row][col] = 0
            used_rows.discard(row)
            used_falling.discard(row - col)
            used_rising.discard(row + col)

    yield from place(0)


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as rows of space-separated cells."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in board)


def solve_rat_maze(maze: Sequence[Sequence[int]]) -> Grid | None:
    """Find a path of open cells from the top-left to the bottom-right corner.

    The rat moves only right or down, trying right first. Returns a 0/1 grid
    marking the path, or None when there is none.
    """
    size = _require_square(maze, "maze")
    if size == 0:
        raise ValueError("maze must not be empty")
    path = [[0] * size for _ in range(size)]
    last = size - 1

    def walk(row: int, col: int) -> bool:
        path[row][col] = 1
        if row == last and col == last:
            return True
        if col < last and maze[row][col + 1] == 1 and walk(row, col + 1):
            return True
        if row < last and maze[row + 1][col] == 1 and walk(row + 1, col):
            return True
        path[row][col] = 0
        return False

    return path if walk(0, 0) else None


def is_possible(grid: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    """Tell whether value may go at (row, col) without repeating in row, column or box."""
    if value in grid[row] or any(line[col] == value for line in grid):
        return False
    box_row, box_col = row // 3 * 3, col // 3 * 3
    return all(
        grid[r][c] != value
        for r in range(box_row, box_row + 3)
        for c in range(box_col, box_col + 3)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid | None:
    """Solve a 9x9 sudoku where 0 marks an empty cell.

    Returns a solved copy of the grid, or None when no solution exists.
    """
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    board = [list(row) for row in grid]
    if any(not 0 <= cell <= 9 for row in board for cell in row):
        raise ValueError("sudoku cells must hold 0 to 9")
    empty = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == 0]

    def fill(k: int) -> bool:
        if k == len(empty):
            return True
        row, col = empty[k]
        for value in range(1, 10):
            if is_possible(board, row, col, value):
                board[row][col] = value
                if fill(k + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render a sudoku grid with a tab after each box and a blank line between bands."""
    parts = []
    for index, row in enumerate(grid, start=1):
        cells = []
        for position, value in enumerate(row, start=1):
            cells.append(f"{value} ")
            if position % 3 == 0:
                cells.append("\t")
        parts.append("".join(cells))
        if index % 3 == 0:
            parts.append("\n")
        parts.append("\n")
    return "".join(parts)