from flask import Flask, abort, jsonify, redirect, render_template, request, session, url_for
from typing import Optional

from controls import direction_from_key, swipe_direction
from game2048 import DIRECTIONS, SIZE
from game_session import GameSession, GameState
from storage import FileStore, FlaskSessionStore

app = Flask(__name__)
app.config["SECRET_KEY"] = "change_this_to_a_random_secret_key"
app.config["HIGHSCORE_FILE"] = None  # 设置后最高分存到文件，否则存在 session 里
# 环境变量 GAME2048_SECRET_KEY / GAME2048_HIGHSCORE_FILE 等可以覆盖上面的配置
app.config.from_prefixed_env("GAME2048")

GAME_SESSION_KEY = "game"


def get_storage():
    """按配置选择最高分的存储位置。"""
    path = app.config.get("HIGHSCORE_FILE")
    if path:
        return FileStore(path)
    return FlaskSessionStore()


def load_game() -> GameSession:
    """从 session 取出当前游戏，没有或已损坏就开新局。"""
    storage = get_storage()
    state: Optional[GameState] = session.get(GAME_SESSION_KEY)
    if state is None:
        return GameSession(storage)
    try:
        return GameSession.restore(state, storage)
    except (KeyError, TypeError, ValueError) as exc:
        app.logger.warning("Discarding corrupt game state: %s", exc)
        return GameSession(storage)


def save_game(game: GameSession) -> None:
    """保存游戏状态到 session。"""
    session[GAME_SESSION_KEY] = game.snapshot()


def game_payload(game: GameSession) -> dict:
    payload = game.snapshot()
    payload["stuck"] = game.stuck
    return payload


def parse_swipe(form) -> Optional[str]:
    """表单里带了滑动坐标 x0,y0,x1,y1 时换算成方向。"""
    try:
        start = (float(form["x0"]), float(form["y0"]))
        end = (float(form["x1"]), float(form["y1"]))
    except (KeyError, ValueError):
        return None
    return swipe_direction(start, end)


def direction_from_form(form) -> Optional[str]:
    direction = form.get("direction")
    if direction in DIRECTIONS:
        return direction
    key = form.get("key")
    if key:
        return direction_from_key(key)
    return parse_swipe(form)


def tile_class(value: int) -> str:
    """每个数字对应的 CSS 类，超过 2048 的共用最后一种颜色。"""
    if value == 0:
        return "tile-empty"
    return f"tile-{min(value, 2048)}"


@app.route("/")
def index():
    """游戏主页面。"""
    game = load_game()
    save_game(game)
    board = game.board
    rows = [board[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]
    return render_template(
        "index.html",
        rows=rows,
        score=game.score,
        high_score=game.high_score,
        won=game.won,
        stuck=game.stuck,
        tile_class=tile_class,
    )


@app.route("/move", methods=["POST"])
def move():
    """处理移动操作。"""
    direction = direction_from_form(request.form)
    if direction is None:
        return redirect(url_for("index"))

    game = load_game()
    if game.apply_move(direction):
        app.logger.debug("Moved %s, score %d", direction, game.score)
    save_game(game)
    return redirect(url_for("index"))


@app.route("/reset", methods=["POST"])
def reset():
    """重新开始一局游戏（保留最高分）。"""
    game = load_game()
    game.reset()
    save_game(game)
    return redirect(url_for("index"))


@app.route("/api/state")
def api_state():
    game = load_game()
    save_game(game)
    return jsonify(game_payload(game))


@app.route("/api/move", methods=["POST"])
def api_move():
    data = request.get_json(silent=True)
    direction = data.get("direction") if isinstance(data, dict) else None
    if direction not in DIRECTIONS:
        abort(400, description=f"direction must be one of {', '.join(DIRECTIONS)}")

    game = load_game()
    moved = game.apply_move(direction)
    save_game(game)
    payload = game_payload(game)
    payload["moved"] = moved
    return jsonify(payload)


if __name__ == "__main__":
    app.run(debug=True)
