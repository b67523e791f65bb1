"""
最高分的存取。

存储只需要 get / set 两个操作，值一律是字符串形式的整数。
具体放在哪里（内存、文件、Flask session）由下面的适配器决定。
"""
import json
import logging
import os
from typing import Dict, Optional

from flask import session

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """存储读写失败。"""


class MemoryStore:
    """放在内存里的存储，进程结束就没了。"""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileStore:
    """存成一个 JSON 文件，键和值都是字符串。"""

    def __init__(self, path: str) -> None:
        self.path = path

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(f"cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except StorageError:
            # 文件坏了就整个覆盖
            data = {}
        data[key] = value
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StorageError(f"cannot write {self.path}: {exc}") from exc


class FlaskSessionStore:
    """存到当前请求的 Flask session（cookie）里，只能在请求上下文中使用。"""

    def get(self, key: str) -> Optional[str]:
        value = session.get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        session[key] = value


def read_int(storage, key: str, default: int = 0) -> int:
    """
    读取一个非负整数。
    不存在、解析失败、负数或读取出错都当作 default。
    """
    try:
        raw = storage.get(key)
    except StorageError as exc:
        logger.warning("Could not read %r from storage: %s", key, exc)
        return default
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning("Ignoring unparseable %r value in storage: %r", key, raw)
        return default
    if value < 0:
        logger.warning("Ignoring negative %r value in storage: %r", key, raw)
        return default
    return value
