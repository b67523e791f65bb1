from typing import List

Board = List[int]
Matrix = List[List[int]]


def to_matrix(board: Board, n: int) -> Matrix:
    """把长度为 n*n 的一维棋盘按行切成 n 行。"""
    if len(board) != n * n:
        raise ValueError(f"board must have {n * n} cells, got {len(board)}")
    return [list(board[r * n:(r + 1) * n]) for r in range(n)]


def flatten(matrix: Matrix) -> Board:
    """按行拼接回一维棋盘。"""
    return [value for row in matrix for value in row]


def copy_matrix(matrix: Matrix) -> Matrix:
    """深拷贝二维网格。"""
    return [row[:] for row in matrix]


def rotate_right(matrix: Matrix) -> Matrix:
    """顺时针旋转 90 度，返回新矩阵。"""
    return [list(row) for row in zip(*matrix[::-1])]


def rotate_left(matrix: Matrix) -> Matrix:
    """逆时针旋转 90 度，返回新矩阵。"""
    return [list(row) for row in zip(*matrix)][::-1]


def rotate(matrix: Matrix, turns: int) -> Matrix:
    """
    旋转 turns 个四分之一圈：正数顺时针，负数逆时针。
    turns 为 0 时也返回一份拷贝。
    """
    result = copy_matrix(matrix)
    step = rotate_right if turns >= 0 else rotate_left
    for _ in range(abs(turns) % 4):
        result = step(result)
    return result
