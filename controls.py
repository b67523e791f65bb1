from typing import Optional, Tuple

Point = Tuple[float, float]

# 方向键映射
KEY_DIRECTIONS = {
    "ArrowUp": "up",
    "ArrowDown": "down",
    "ArrowLeft": "left",
    "ArrowRight": "right",
}


def direction_from_key(key: str) -> Optional[str]:
    """方向键转成方向，其他按键返回 None。"""
    return KEY_DIRECTIONS.get(key)


def swipe_direction(start: Point, end: Point) -> Optional[str]:
    """
    根据滑动的起点和终点判断方向（屏幕坐标，y 轴向下）。
    水平位移和垂直位移谁大按谁算，相等时按垂直处理；没有位移返回 None。
    """
    x_diff = start[0] - end[0]
    y_diff = start[1] - end[1]
    if x_diff == 0 and y_diff == 0:
        return None

    if abs(x_diff) > abs(y_diff):
        return "left" if x_diff > 0 else "right"
    return "up" if y_diff > 0 else "down"
