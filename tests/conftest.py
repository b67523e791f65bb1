import pytest

from app import app as flask_app


class ScriptedRandom:
    """按给定顺序返回结果的随机源，用完后 choice 取第一个、random 返回 0.9（生成 2）。"""

    def __init__(self, picks=None, randoms=None):
        self.picks = list(picks or [])
        self.randoms = list(randoms or [])

    def choice(self, seq):
        idx = self.picks.pop(0) if self.picks else 0
        return seq[idx]

    def random(self):
        return self.randoms.pop(0) if self.randoms else 0.9


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setitem(flask_app.config, "TESTING", True)
    monkeypatch.setitem(flask_app.config, "HIGHSCORE_FILE", None)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
