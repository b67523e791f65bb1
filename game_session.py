import logging
import random
from typing import Any, Dict, Optional

from game2048 import (
    DIRECTIONS,
    SIZE,
    get_max_tile,
    has_won,
    initial_board,
    is_stuck,
    move,
    spawn,
)
from matrix import Board
from storage import StorageError, read_int

HIGHSCORE_KEY = "highscore"

GameState = Dict[str, Any]

logger = logging.getLogger(__name__)


class GameSession:
    """
    一局游戏的全部状态：棋盘、分数、最高分、是否获胜。

    只能通过 apply_move() 和 reset() 修改。最高分在创建时从 storage 读取，
    刷新时写回；写失败不影响内存里的最高分。
    """

    def __init__(
        self,
        storage,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        self._storage = storage
        self._rng = rng if rng is not None else random.Random()
        self._board: Board = list(board) if board is not None else initial_board(self._rng)
        self._score = 0
        self._won = False
        self._high_score = read_int(storage, HIGHSCORE_KEY)

    @classmethod
    def restore(cls, state: GameState, storage, rng: Optional[random.Random] = None) -> "GameSession":
        """从 snapshot() 的结果恢复一局游戏。"""
        board = [int(value) for value in state["board"]]
        if len(board) != SIZE * SIZE or any(value < 0 for value in board):
            raise ValueError(f"malformed board in saved state: {state['board']!r}")
        game = cls(storage, rng, board)
        game._score = max(0, int(state.get("score", 0)))
        game._won = bool(state.get("won", False)) or has_won(board)
        game._high_score = max(game._high_score, int(state.get("high_score", 0)), game._score)
        return game

    @property
    def board(self) -> Board:
        return list(self._board)

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def won(self) -> bool:
        return self._won

    @property
    def stuck(self) -> bool:
        return is_stuck(self._board)

    @property
    def max_tile(self) -> int:
        return get_max_tile(self._board)

    def apply_move(self, direction: str) -> bool:
        """
        处理一次移动，棋盘有变化时返回 True。
        已获胜或移动后棋盘不变时什么都不做。
        """
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction: {direction!r}")
        if self._won:
            return False

        new_board, gain = move(self._board, direction)
        if new_board == self._board:
            logger.debug("Move %s changed nothing", direction)
            return False

        self._board = spawn(new_board, 1, self._rng)
        self._add_score(gain)
        if has_won(self._board):
            logger.info("Reached %d, game won with score %d", self.max_tile, self._score)
            self._won = True
        return True

    def _add_score(self, points: int) -> None:
        self._score += points
        if self._score <= self._high_score:
            return
        self._high_score = self._score
        try:
            self._storage.set(HIGHSCORE_KEY, str(self._high_score))
        except StorageError as exc:
            logger.warning("Could not save high score %d: %s", self._high_score, exc)

    def reset(self) -> None:
        """重新开始一局（保留最高分）。"""
        self._board = initial_board(self._rng)
        self._score = 0
        self._won = False
        logger.info("Game reset, high score %d", self._high_score)

    def snapshot(self) -> GameState:
        return {
            "board": self.board,
            "score": self._score,
            "high_score": self._high_score,
            "won": self._won,
        }
