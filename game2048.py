import random
from typing import List, Tuple

from matrix import Board, Matrix, flatten, rotate, to_matrix

SIZE = 4  # 棋盘大小：4x4
WIN_TILE = 2048  # 出现该数字即获胜
SPAWN_FOUR_CHANCE = 0.5  # 新生成数字为 4 的概率

# 把各方向转成“向右”需要顺时针旋转的次数
ROTATIONS = {
    "right": 0,
    "up": 1,
    "left": 2,
    "down": 3,
}
DIRECTIONS = tuple(ROTATIONS)

Row = List[int]


def new_board() -> Board:
    """创建一个空棋盘。"""
    return [0] * (SIZE * SIZE)


def spawn(board: Board, count: int = 1, rng=random) -> Board:
    """
    在空格随机生成 count 个 2 或 4，返回新棋盘。
    空格不够时能放几个放几个，不算错误。
    """
    result = list(board)
    for _ in range(count):
        empty_cells = [i for i, value in enumerate(result) if value == 0]
        if not empty_cells:
            break
        idx = rng.choice(empty_cells)
        result[idx] = 4 if rng.random() < SPAWN_FOUR_CHANCE else 2
    return result


def initial_board(rng=random) -> Board:
    """新游戏初始棋盘：随机出现两个数字。"""
    return spawn(new_board(), 2, rng)


def shift_row_right(row: Row) -> Tuple[Row, int]:
    """
    向右合并并挤压一行，同时返回本行增加的分数。

    先从倒数第二格往左扫描，每个数字向右越过空格找第一个数字，
    相等则合并到右边那格；每行每次移动只允许合并一次。
    然后再从右往左把所有数字尽量推到右边。
    例如: [2, 2, 0, 0] -> [0, 0, 0, 4], score_gain = 4
          [2, 2, 2, 2] -> [0, 2, 2, 4], score_gain = 4
    """
    cells = list(row)
    n = len(cells)
    score_gain = 0
    can_merge = True

    for j in range(n - 2, -1, -1):
        value = cells[j]
        if value == 0:
            continue
        k = j + 1
        while k < n:
            if can_merge and cells[k] == value:
                cells[j] = 0
                cells[k] = value * 2
                score_gain += value * 2
                can_merge = False
                break
            if cells[k] > 0:
                break
            k += 1

    for j in range(n - 2, -1, -1):
        value = cells[j]
        if value == 0:
            continue
        target = j
        while target + 1 < n and cells[target + 1] == 0:
            target += 1
        cells[j] = 0
        cells[target] = value

    return cells, score_gain


def shift_right(matrix: Matrix) -> Tuple[Matrix, int]:
    """整盘向右移动。各行互不影响。"""
    shifted: Matrix = []
    total_gain = 0
    for row in matrix:
        new_row, gain = shift_row_right(row)
        shifted.append(new_row)
        total_gain += gain
    return shifted, total_gain


def move(board: Board, direction: str) -> Tuple[Board, int]:
    """
    按方向移动整盘，返回 (新棋盘, 得分)。
    先旋转成“向右”，移动后再转回来；不会修改传入的棋盘。
    """
    if direction not in ROTATIONS:
        raise ValueError(f"unknown direction: {direction!r}")
    turns = ROTATIONS[direction]
    view = rotate(to_matrix(board, SIZE), turns)
    shifted, gain = shift_right(view)
    return flatten(rotate(shifted, -turns)), gain


def can_move(board: Board) -> bool:
    """判断是否还能继续游戏。"""
    if 0 in board:
        return True

    grid = to_matrix(board, SIZE)
    for r in range(SIZE):
        for c in range(SIZE - 1):
            if grid[r][c] == grid[r][c + 1]:
                return True

    for c in range(SIZE):
        for r in range(SIZE - 1):
            if grid[r][c] == grid[r + 1][c]:
                return True

    return False


def is_stuck(board: Board) -> bool:
    return not can_move(board)


def has_won(board: Board) -> bool:
    return any(value >= WIN_TILE for value in board)


def get_max_tile(board: Board) -> int:
    """取得当前最大的数字。"""
    return max(board)
