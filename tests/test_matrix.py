import pytest

from matrix import copy_matrix, flatten, rotate, rotate_left, rotate_right, to_matrix

SQUARE = [
    [1, 2, 3],
    [4, 5, 6],
    [7, 8, 9],
]


def test_to_matrix_is_row_major():
    assert to_matrix(list(range(4)), 2) == [[0, 1], [2, 3]]


def test_to_matrix_rejects_wrong_length():
    with pytest.raises(ValueError):
        to_matrix([0] * 15, 4)


def test_flatten_inverts_to_matrix():
    board = list(range(16))
    assert flatten(to_matrix(board, 4)) == board


def test_to_matrix_does_not_alias_board():
    board = [0] * 4
    matrix = to_matrix(board, 2)
    matrix[0][0] = 8
    assert board == [0, 0, 0, 0]


def test_copy_matrix_is_independent():
    copied = copy_matrix(SQUARE)
    copied[1][1] = 0
    assert SQUARE[1][1] == 5
    assert copied[0] is not SQUARE[0]


def test_rotate_right_is_clockwise():
    assert rotate_right(SQUARE) == [
        [7, 4, 1],
        [8, 5, 2],
        [9, 6, 3],
    ]


def test_rotate_left_is_counter_clockwise():
    assert rotate_left(SQUARE) == [
        [3, 6, 9],
        [2, 5, 8],
        [1, 4, 7],
    ]


def test_rotations_round_trip():
    m = to_matrix(list(range(16)), 4)
    assert rotate_left(rotate_right(m)) == m
    assert rotate_right(rotate_right(rotate_right(rotate_right(m)))) == m


def test_rotation_does_not_mutate_input():
    m = copy_matrix(SQUARE)
    rotate_right(m)
    rotate_left(m)
    assert m == SQUARE


def test_rotate_by_turns():
    assert rotate(SQUARE, 1) == rotate_right(SQUARE)
    assert rotate(SQUARE, -1) == rotate_left(SQUARE)
    assert rotate(SQUARE, 3) == rotate_left(SQUARE)
    assert rotate(SQUARE, 0) == SQUARE
    assert rotate(SQUARE, 0) is not SQUARE
